"""
In-memory app guid cache backed by the platform API.
"""

import logging
from collections.abc import Callable
from typing import TypeVar

from typing_extensions import override

from cf_client.exceptions import AppNotFoundError, CfClientError
from cf_client.ports.cache.app_guid_cache_port import AppGuidCachePort
from cf_client.ports.capi.capi_port import CapiPort

T = TypeVar("T")


class AppGuidCache(AppGuidCachePort):
    """Caches app name to guid lookups and refreshes a stale guid once on failure."""

    def __init__(self, capi: CapiPort, logger: logging.Logger | None = None):
        """
        Initialize the cache.

        Args:
            capi: Platform API used to look up applications by name
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._capi = capi
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._guids: dict[str, str] = {}

    def _lookup(self, app_name: str) -> str:
        # The names filter splits on commas, so results may include other apps.
        apps = [app for app in self._capi.apps({"names": app_name}) if app.name == app_name]
        if not apps:
            raise AppNotFoundError(app_name)
        # Names are not unique across spaces; the first match wins.
        guid = apps[0].guid
        self._guids[app_name] = guid
        self._logger.debug(f"Resolved app {app_name} to guid {guid}")
        return guid

    def get(self, app_name: str) -> str:
        """
        Return the cached guid for an application, looking it up if missing.

        Raises:
            AppNotFoundError: If no application matches the name
        """
        guid = self._guids.get(app_name)
        if guid is not None:
            self._logger.debug(f"Cache hit for app {app_name}: {guid}")
            return guid
        return self._lookup(app_name)

    def refresh(self, app_name: str) -> str:
        """Look up the guid again, replacing any cached value."""
        self._guids.pop(app_name, None)
        return self._lookup(app_name)

    def invalidate(self, app_name: str) -> None:
        self._guids.pop(app_name, None)

    def clear(self) -> None:
        self._guids.clear()

    @override
    def try_with_refresh(self, app_name: str, action: Callable[[str], T]) -> T:
        guid = self.get(app_name)
        try:
            return action(guid)
        except CfClientError as e:
            self._logger.warning(
                f"Action failed for app {app_name} (guid {guid}), refreshing guid: {e}"
            )

        return action(self.refresh(app_name))
