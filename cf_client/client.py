"""
Client facade addressing applications by name.
"""

import logging
from dataclasses import replace
from typing import Optional

from cf_client.entities.Process import WEB_PROCESS_TYPE, Process
from cf_client.entities.Task import HeaderOption, Task, TaskConfig
from cf_client.ports.cache.app_guid_cache_port import AppGuidCachePort
from cf_client.ports.capi.capi_port import CapiPort


class Client:
    """
    Scales, inspects, runs tasks on and stops applications by name.

    Every operation resolves the name through the app guid cache, so a stale
    guid is refreshed and the platform call retried once.
    """

    def __init__(
        self,
        capi: CapiPort,
        app_guid_cache: AppGuidCachePort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the client.

        Args:
            capi: Platform API adapter (carries its own token provider)
            app_guid_cache: Resolves application names to guids
            logger: Logger instance to use for logging
        """
        self._capi = capi
        self._app_guid_cache = app_guid_cache
        self._logger = logger or logging.getLogger(__name__)

    def scale(self, app_name: str, instance_count: int) -> None:
        """
        Scale the web process of an application.

        Raises:
            ValueError: If instance_count is negative
            CfClientError: If resolution or the platform call fails
        """
        if instance_count < 0:
            raise ValueError(f"Instance count must be non-negative, got {instance_count}")

        self._logger.info(f"Scaling {app_name} to {instance_count} instances")
        self._app_guid_cache.try_with_refresh(
            app_name,
            lambda app_guid: self._capi.scale(app_guid, WEB_PROCESS_TYPE, instance_count),
        )

    def process(self, app_name: str, process_type: str) -> Process:
        self._logger.info(f"Fetching {process_type} process of {app_name}")
        return self._app_guid_cache.try_with_refresh(
            app_name,
            lambda app_guid: self._capi.process(app_guid, process_type),
        )

    def create_task(
        self,
        app_name: str,
        command: str,
        config: TaskConfig = TaskConfig(),
        *header_options: HeaderOption,
    ) -> Task:
        """
        Create a one-off task for an application.

        Args:
            app_name: Name of the application
            command: Command the task runs
            config: Task settings; an empty name defaults to the command
            *header_options: Forwarded to the platform client, which applies
                them to the outgoing request headers

        Returns:
            The created Task

        Raises:
            CfClientError: If resolution or the platform call fails
        """
        if not config.name:
            config = replace(config, name=command)

        self._logger.info(f"Creating task {config.name!r} for {app_name}")
        return self._app_guid_cache.try_with_refresh(
            app_name,
            lambda app_guid: self._capi.create_task(
                app_guid, command, config, *header_options
            ),
        )

    def stop(self, app_name: str) -> None:
        self._logger.info(f"Stopping {app_name}")
        self._app_guid_cache.try_with_refresh(
            app_name,
            lambda app_guid: self._capi.stop(app_guid),
        )
