"""
Task domain entities.
"""

from collections.abc import Callable, MutableMapping
from dataclasses import dataclass
from typing import Any, Optional

# Receives the outgoing request headers and may modify them in place.
HeaderOption = Callable[[MutableMapping[str, str]], None]


@dataclass(frozen=True)
class TaskConfig:
    """
    Settings for a task to be created.

    Zero values mean "let the platform decide".
    """

    name: str = ""
    memory_in_mb: int = 0
    disk_in_mb: int = 0
    droplet_guid: Optional[str] = None

    def to_request_body(self, command: str) -> dict[str, Any]:
        """
        Build the JSON body of a CAPI v3 create-task request.

        Args:
            command: Command the task runs

        Returns:
            Dictionary ready to be sent as JSON
        """
        body: dict[str, Any] = {"command": command}
        if self.name:
            body["name"] = self.name
        if self.memory_in_mb:
            body["memory_in_mb"] = self.memory_in_mb
        if self.disk_in_mb:
            body["disk_in_mb"] = self.disk_in_mb
        if self.droplet_guid:
            body["droplet_guid"] = self.droplet_guid
        return body


@dataclass(frozen=True)
class Task:
    """A one-off command execution scoped to an application."""

    guid: str
    name: str = ""
    command: str = ""
    state: str = ""
    memory_in_mb: Optional[int] = None
    disk_in_mb: Optional[int] = None
    droplet_guid: Optional[str] = None

    @classmethod
    def from_resource(cls, resource: dict[str, Any]) -> "Task":
        return cls(
            guid=resource["guid"],
            name=resource.get("name", ""),
            command=resource.get("command", ""),
            state=resource.get("state", ""),
            memory_in_mb=resource.get("memory_in_mb"),
            disk_in_mb=resource.get("disk_in_mb"),
            droplet_guid=resource.get("droplet_guid"),
        )
