"""
Configuration settings for the client.
"""

import os

from dotenv import load_dotenv

from cf_client.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

_TRUE_VALUES = {"1", "true", "yes", "on"}


class Settings:
    """Client settings loaded from environment variables."""

    def __init__(self):
        self.capi_url: str = self._get_required_env("CF_CAPI_URL").rstrip("/")
        self.uaa_url: str = self._get_required_env("CF_UAA_URL").rstrip("/")
        self.client_id: str = self._get_required_env("CF_CLIENT_ID")
        self.client_secret: str = self._get_env("CF_CLIENT_SECRET", "")
        self.http_timeout: float = self._get_float_env("CF_HTTP_TIMEOUT", 30.0)
        self.skip_ssl_validation: bool = (
            self._get_env("CF_SKIP_SSL_VALIDATION", "false").strip().lower()
            in _TRUE_VALUES
        )

    def _get_required_env(self, key: str) -> str:
        """Get a required environment variable, raise error if missing."""
        value = os.getenv(key)
        if not value:
            raise ConfigurationError(f"Required environment variable {key} is not set")
        return value

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_float_env(self, key: str, default: float) -> float:
        raw = os.getenv(key)
        if not raw:
            return default
        try:
            return float(raw)
        except ValueError:
            raise ConfigurationError(f"Environment variable {key} must be a number, got {raw!r}")
