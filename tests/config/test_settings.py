"""
Tests for the Settings.
"""

import pytest

from cf_client.config.settings import Settings
from cf_client.exceptions import ConfigurationError


class TestSettings:
    """Test cases for the Settings."""

    def test_loads_from_environment(self, cf_env):
        settings = Settings()

        assert settings.capi_url == "https://api.example.com"
        assert settings.uaa_url == "https://uaa.example.com"
        assert settings.client_id == "automator"
        assert settings.client_secret == "secret"
        assert settings.http_timeout == 30.0
        assert settings.skip_ssl_validation is False

    def test_strips_trailing_slash(self, cf_env, monkeypatch):
        monkeypatch.setenv("CF_CAPI_URL", "https://api.example.com/")

        assert Settings().capi_url == "https://api.example.com"

    def test_optional_values(self, cf_env, monkeypatch):
        monkeypatch.setenv("CF_HTTP_TIMEOUT", "5.5")
        monkeypatch.setenv("CF_SKIP_SSL_VALIDATION", "True")

        settings = Settings()

        assert settings.http_timeout == 5.5
        assert settings.skip_ssl_validation is True

    @pytest.mark.parametrize("key", ["CF_CAPI_URL", "CF_UAA_URL", "CF_CLIENT_ID"])
    def test_missing_required_variable(self, cf_env, monkeypatch, key):
        monkeypatch.delenv(key)

        with pytest.raises(ConfigurationError, match=key):
            Settings()

    def test_invalid_timeout(self, cf_env, monkeypatch):
        monkeypatch.setenv("CF_HTTP_TIMEOUT", "soon")

        with pytest.raises(ConfigurationError, match="CF_HTTP_TIMEOUT"):
            Settings()
