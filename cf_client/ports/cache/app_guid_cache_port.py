"""
App guid cache port interface.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TypeVar

T = TypeVar("T")


class AppGuidCachePort(ABC):
    """Port interface for resolving application names to guids."""

    @abstractmethod
    def try_with_refresh(self, app_name: str, action: Callable[[str], T]) -> T:
        """
        Run an action with the guid of the named application.

        If the action fails, the guid is looked up again and the action is
        retried exactly once with the refreshed guid.

        Args:
            app_name: Human-readable application name
            action: Callable receiving the resolved guid

        Returns:
            Whatever the last invocation of the action returned

        Raises:
            AppNotFoundError: If no application matches the name
            CfClientError: If the retried action fails again
        """
        pass
