"""
HTTP adapter implementation of the CAPI port (Cloud Foundry API v3).
"""

import logging
from typing import Any, Optional

import httpx
from typing_extensions import override

from cf_client.entities.App import App
from cf_client.entities.Process import Process
from cf_client.entities.Task import HeaderOption, Task, TaskConfig
from cf_client.exceptions import CapiError, CfClientError
from cf_client.ports.capi.capi_port import CapiPort
from cf_client.ports.oauth.token_provider_port import TokenProviderPort


class HttpCapiAdapter(CapiPort):
    """httpx implementation of the CAPI port."""

    def __init__(
        self,
        capi_url: str,
        token_provider: TokenProviderPort,
        http_client: Optional[httpx.Client] = None,
        timeout: float = 30.0,
        verify: bool = True,
        logger: logging.Logger | None = None,
    ):
        """
        Initialize the CAPI adapter.

        Args:
            capi_url: Base URL of the Cloud Controller (e.g. https://api.example.com)
            token_provider: Source of the Authorization header value
            http_client: Preconfigured httpx client (a new one is created if None)
            timeout: Request timeout in seconds, used only when creating the client
            verify: Whether to verify TLS certificates, used only when creating the client
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self.capi_url = capi_url.rstrip("/")
        self._token_provider = token_provider
        self._client: httpx.Client = http_client or httpx.Client(
            timeout=httpx.Timeout(timeout), verify=verify
        )
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _headers(self, header_options: tuple[HeaderOption, ...] = ()) -> httpx.Headers:
        headers = httpx.Headers(
            {
                "Authorization": self._token_provider.token(),
                "Accept": "application/json",
            }
        )
        for option in header_options:
            option(headers)
        return headers

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, str]] = None,
        json: Optional[dict[str, Any]] = None,
        header_options: tuple[HeaderOption, ...] = (),
    ) -> Any:
        """
        Send a request to the Cloud Controller and decode the JSON response.

        Args:
            method: HTTP method
            path: Path relative to the API root, starting with "/v3"
            params: Query string parameters
            json: JSON body
            header_options: Callables applied to the outgoing headers

        Returns:
            Decoded JSON body, or None for empty responses

        Raises:
            CapiError: If the request fails or returns a non-2xx status
            TokenError: If no token could be obtained
        """
        url = f"{self.capi_url}{path}"
        try:
            response = self._client.request(
                method,
                url,
                params=params,
                json=json,
                headers=self._headers(header_options),
            )
        except CfClientError:
            raise
        except httpx.HTTPError as e:
            self._logger.error(f"Error calling {method} {path}: {e}")
            raise CapiError(f"Request {method} {path} failed: {str(e)}")

        if not response.is_success:
            raise CapiError(
                f"Request {method} {path} failed with status {response.status_code}: {response.text[:200]}",
                status_code=response.status_code,
            )
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            raise CapiError(
                f"Invalid JSON in response to {method} {path}",
                status_code=response.status_code,
            )

    @override
    def apps(self, query: dict[str, str]) -> list[App]:
        payload = self._request("GET", "/v3/apps", params=query)
        if not isinstance(payload, dict):
            raise CapiError("Malformed apps response")
        try:
            return [App.from_resource(r) for r in payload.get("resources", [])]
        except (AttributeError, KeyError, TypeError) as e:
            raise CapiError(f"Malformed apps response: {str(e)}")

    @override
    def process(self, app_guid: str, process_type: str) -> Process:
        payload = self._request("GET", f"/v3/apps/{app_guid}/processes/{process_type}")
        if not isinstance(payload, dict):
            raise CapiError("Malformed process response")
        try:
            return Process.from_resource(payload)
        except (KeyError, TypeError, ValueError) as e:
            raise CapiError(f"Malformed process response: {str(e)}")

    @override
    def scale(self, app_guid: str, process_type: str, instance_count: int) -> None:
        self._logger.debug(f"Scaling {app_guid}/{process_type} to {instance_count}")
        self._request(
            "POST",
            f"/v3/apps/{app_guid}/processes/{process_type}/actions/scale",
            json={"instances": instance_count},
        )

    @override
    def create_task(
        self,
        app_guid: str,
        command: str,
        config: TaskConfig,
        *header_options: HeaderOption,
    ) -> Task:
        payload = self._request(
            "POST",
            f"/v3/apps/{app_guid}/tasks",
            json=config.to_request_body(command),
            header_options=header_options,
        )
        try:
            return Task.from_resource(payload)
        except (KeyError, TypeError) as e:
            raise CapiError(f"Malformed task response: {str(e)}")

    @override
    def stop(self, app_guid: str) -> None:
        self._request("POST", f"/v3/apps/{app_guid}/actions/stop")

    def close(self) -> None:
        self._client.close()
