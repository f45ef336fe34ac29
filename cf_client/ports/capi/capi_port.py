"""
CAPI port interface defining the contract for platform API operations.
"""

from abc import ABC, abstractmethod

from cf_client.entities.App import App
from cf_client.entities.Process import Process
from cf_client.entities.Task import HeaderOption, Task, TaskConfig


class CapiPort(ABC):
    """Port interface for Cloud Foundry platform API operations."""

    @abstractmethod
    def apps(self, query: dict[str, str]) -> list[App]:
        """
        List applications matching a query.

        Args:
            query: Filter parameters (e.g. {"names": "my-app"})

        Returns:
            List of App entities, possibly empty

        Raises:
            CapiError: If the request fails
        """
        pass

    @abstractmethod
    def process(self, app_guid: str, process_type: str) -> Process:
        """
        Fetch a process of an application.

        Args:
            app_guid: Guid of the application
            process_type: Type of the process (e.g. "web")

        Returns:
            The Process entity

        Raises:
            CapiError: If the request fails
        """
        pass

    @abstractmethod
    def scale(self, app_guid: str, process_type: str, instance_count: int) -> None:
        """
        Scale a process of an application to the given number of instances.

        Raises:
            CapiError: If the request fails
        """
        pass

    @abstractmethod
    def create_task(
        self,
        app_guid: str,
        command: str,
        config: TaskConfig,
        *header_options: HeaderOption,
    ) -> Task:
        """
        Create a one-off task for an application.

        Args:
            app_guid: Guid of the application
            command: Command the task runs
            config: Task settings
            *header_options: Callables applied to the outgoing request headers

        Returns:
            The created Task entity

        Raises:
            CapiError: If the request fails
        """
        pass

    @abstractmethod
    def stop(self, app_guid: str) -> None:
        """
        Stop an application.

        Raises:
            CapiError: If the request fails
        """
        pass
