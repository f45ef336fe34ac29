"""
Dependency injection container for managing client dependencies.
"""

import logging

from cf_client.adapters.cache.app_guid_cache import AppGuidCache
from cf_client.adapters.capi.http_capi_adapter import HttpCapiAdapter
from cf_client.adapters.oauth.uaa_token_provider import UaaTokenProvider
from cf_client.client import Client
from cf_client.config.settings import Settings
from cf_client.ports.cache.app_guid_cache_port import AppGuidCachePort
from cf_client.ports.capi.capi_port import CapiPort
from cf_client.ports.oauth.token_provider_port import TokenProviderPort


class DependencyContainer:
    """
    Container for managing client dependencies using dependency injection.
    """

    def __init__(self):
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_settings(self) -> Settings:
        """
        Get settings loaded from the environment.

        Returns:
            Settings instance

        Raises:
            ConfigurationError: If a required variable is missing
        """
        if "settings" not in self._instances:
            self._instances["settings"] = Settings()
        return self._instances["settings"]

    def get_token_provider(self) -> TokenProviderPort:
        """
        Get token provider instance.

        Returns:
            TokenProviderPort implementation
        """
        if "token_provider" not in self._instances:
            settings = self.get_settings()
            self._instances["token_provider"] = UaaTokenProvider(
                settings.uaa_url,
                settings.client_id,
                settings.client_secret,
                timeout=settings.http_timeout,
                verify=not settings.skip_ssl_validation,
                logger=self._logger,
            )
        return self._instances["token_provider"]

    def get_capi(self) -> CapiPort:
        """
        Get CAPI adapter instance.

        Returns:
            CapiPort implementation
        """
        if "capi" not in self._instances:
            settings = self.get_settings()
            self._instances["capi"] = HttpCapiAdapter(
                settings.capi_url,
                self.get_token_provider(),
                timeout=settings.http_timeout,
                verify=not settings.skip_ssl_validation,
                logger=self._logger,
            )
        return self._instances["capi"]

    def get_app_guid_cache(self) -> AppGuidCachePort:
        if "app_guid_cache" not in self._instances:
            self._instances["app_guid_cache"] = AppGuidCache(
                self.get_capi(), self._logger
            )
        return self._instances["app_guid_cache"]

    def get_client(self) -> Client:
        """
        Get client facade with injected dependencies.

        Returns:
            Configured Client
        """
        if "client" not in self._instances:
            self._instances["client"] = Client(
                self.get_capi(), self.get_app_guid_cache(), self._logger
            )
        return self._instances["client"]

    def close(self) -> None:
        """Close HTTP clients held by the adapters and forget every instance built on them."""
        for key in ("capi", "token_provider"):
            instance = self._instances.get(key)
            if instance is not None and hasattr(instance, "close"):
                instance.close()
        self._instances.clear()

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
