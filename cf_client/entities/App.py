"""
App domain entity.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class App:
    """An application known to the platform, identified by its guid."""

    guid: str
    name: str = ""

    @classmethod
    def from_resource(cls, resource: dict[str, Any]) -> "App":
        return cls(guid=resource["guid"], name=resource.get("name", ""))
