"""
Custom exceptions for the client.
"""

from typing import Optional


class CfClientError(Exception):
    """Base exception class for client errors."""

    pass


class AppNotFoundError(CfClientError):
    """Exception raised when no application matches a name."""

    def __init__(self, app_name: str):
        super().__init__(f"No application found with name: {app_name}")
        self.app_name = app_name


class TokenError(CfClientError):
    """Exception raised when a bearer token cannot be obtained."""

    pass


class CapiError(CfClientError):
    """Exception raised for platform API errors."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ConfigurationError(CfClientError):
    """Exception raised for configuration errors."""

    pass
