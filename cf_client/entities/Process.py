"""
Process domain entity.
"""

from dataclasses import dataclass
from typing import Any, Optional

WEB_PROCESS_TYPE = "web"


@dataclass(frozen=True)
class Process:
    """
    A process of an application (e.g. its web tier) with a desired instance count.
    """

    type: str = WEB_PROCESS_TYPE
    instances: int = 0
    guid: Optional[str] = None
    memory_in_mb: Optional[int] = None
    disk_in_mb: Optional[int] = None

    @classmethod
    def from_resource(cls, resource: dict[str, Any]) -> "Process":
        """
        Build a Process from a CAPI v3 process resource.

        Args:
            resource: Decoded JSON body of a process resource

        Returns:
            The Process entity
        """
        return cls(
            type=resource.get("type", WEB_PROCESS_TYPE),
            instances=int(resource.get("instances", 0)),
            guid=resource.get("guid"),
            memory_in_mb=resource.get("memory_in_mb"),
            disk_in_mb=resource.get("disk_in_mb"),
        )
