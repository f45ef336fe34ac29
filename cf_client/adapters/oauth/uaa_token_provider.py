"""
UAA token provider using the OAuth2 client credentials grant.
"""

import logging
import time
from collections.abc import Callable
from typing import Any, Optional

import httpx
from typing_extensions import override

from cf_client.exceptions import TokenError
from cf_client.ports.oauth.token_provider_port import TokenProviderPort

# Tokens are renewed this many seconds before the server says they expire.
EXPIRY_MARGIN_SECONDS = 30.0


class UaaTokenProvider(TokenProviderPort):
    """Fetches bearer tokens from a UAA server and reuses them until they expire."""

    def __init__(
        self,
        uaa_url: str,
        client_id: str,
        client_secret: str = "",
        http_client: Optional[httpx.Client] = None,
        timeout: float = 30.0,
        verify: bool = True,
        clock: Callable[[], float] = time.monotonic,
        logger: logging.Logger | None = None,
    ):
        """
        Initialize the token provider.

        Args:
            uaa_url: Base URL of the UAA server
            client_id: OAuth client id
            client_secret: OAuth client secret
            http_client: Preconfigured httpx client (a new one is created if None)
            timeout: Request timeout in seconds, used only when creating the client
            verify: Whether to verify TLS certificates, used only when creating the client
            clock: Monotonic time source in seconds
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self.uaa_url = uaa_url.rstrip("/")
        self.client_id = client_id
        self._client_secret = client_secret
        self._client: httpx.Client = http_client or httpx.Client(
            timeout=httpx.Timeout(timeout), verify=verify
        )
        self._clock = clock
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

        self._token: Optional[str] = None
        self._expires_at: float = 0.0

    def _request_token(self) -> dict[str, Any]:
        try:
            response = self._client.post(
                f"{self.uaa_url}/oauth/token",
                data={"grant_type": "client_credentials"},
                auth=(self.client_id, self._client_secret),
                headers={"Accept": "application/json"},
            )
        except httpx.HTTPError as e:
            self._logger.error(f"Error requesting token from {self.uaa_url}: {e}")
            raise TokenError(f"Failed to request token: {str(e)}")

        if response.status_code != 200:
            raise TokenError(
                f"Token request failed with status {response.status_code}: {response.text[:200]}"
            )
        try:
            payload = response.json()
        except ValueError:
            raise TokenError("Token response is not valid JSON")
        if not isinstance(payload, dict) or not payload.get("access_token"):
            raise TokenError("Malformed token response: missing access_token")
        return payload

    @override
    def token(self) -> str:
        now = self._clock()
        if self._token is not None and now < self._expires_at:
            return self._token

        payload = self._request_token()
        token_type = payload.get("token_type") or "bearer"
        self._token = f"{token_type} {payload['access_token']}"

        try:
            expires_in = float(payload.get("expires_in", 0))
        except (TypeError, ValueError):
            expires_in = 0.0
        self._expires_at = now + max(expires_in - EXPIRY_MARGIN_SECONDS, 0.0)
        self._logger.debug(f"Obtained token for client {self.client_id}")
        return self._token

    def close(self) -> None:
        self._client.close()
