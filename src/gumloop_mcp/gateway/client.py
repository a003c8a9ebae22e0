"""Async HTTP gateway performing exactly one Gumloop API request per tool call."""

from types import TracebackType
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional, Type

import httpx

from ..config import GumloopConfig
from ..exceptions import RemoteError
from ..logger import get_logger
from .models import HttpMethod, RemoteResponse

if TYPE_CHECKING:
    from ..tools.models import ToolDefinition

logger = get_logger(__name__)

__all__ = ["GumloopClient"]


class GumloopClient:
    """Thin client for the Gumloop REST API.

    The bearer credential comes from the injected configuration and is never
    mutated after construction. Use as an async context manager so the
    underlying connection pool is closed on exit.
    """

    def __init__(self, config: GumloopConfig, http_client: Optional[httpx.AsyncClient] = None):
        """Initializes the client.

        Args:
            config: Immutable process configuration holding the API key and base URL.
            http_client: Optional pre-built httpx client. The caller keeps ownership of it.
        """
        self._config = config
        self._http = http_client
        self._owns_http = http_client is None

    async def __aenter__(self) -> "GumloopClient":
        if self._http is None:
            self._http = httpx.AsyncClient(timeout=self._config.timeout, follow_redirects=True)
            logger.debug("Opened HTTP client for %s", self._config.base_url)
        return self

    async def __aexit__(
        self, exc_type: Optional[Type[BaseException]], exc_val: Optional[BaseException], exc_tb: Optional[TracebackType]
    ) -> None:
        if self._owns_http and self._http is not None:
            await self._http.aclose()
            self._http = None
            logger.debug("Closed HTTP client.")

    async def call(self, tool: "ToolDefinition", arguments: Mapping[str, Any]) -> RemoteResponse:
        """Forward validated arguments to the endpoint bound to ``tool``."""
        return await self.request(tool.method, tool.path, arguments)

    async def request(self, method: HttpMethod, path: str, arguments: Mapping[str, Any]) -> RemoteResponse:
        """Perform one request and normalize the response.

        GET requests carry the arguments as query parameters, skipping absent
        values. POST requests carry them as a JSON body.

        Args:
            method: "GET" or "POST".
            path: Endpoint path relative to the configured base URL, e.g. "/get_pl_run".
            arguments: Validated tool arguments.

        Returns:
            The decoded JSON document or raw bytes, tagged by content type.

        Raises:
            RemoteError: If the API answers with a non-success status.
            RuntimeError: If the client is not open.
            httpx.HTTPError: On transport failures.
        """
        if self._http is None:
            raise RuntimeError("Gumloop client is not open. Use 'async with'.")

        url = self._config.base_url + path
        logger.info("Gumloop API %s %s", method, path)
        logger.debug("Argument keys: %s", sorted(arguments))

        if method == "GET":
            response = await self._http.get(
                url, params=self._to_query_params(arguments), headers=self._headers(json_body=False)
            )
        elif method == "POST":
            response = await self._http.post(url, json=dict(arguments), headers=self._headers(json_body=True))
        else:
            raise ValueError(f"Unsupported HTTP method: {method}")

        if not response.is_success:
            logger.warning("Gumloop API %s %s failed: %d %s", method, path, response.status_code, response.reason_phrase)
            raise RemoteError(response.status_code, response.reason_phrase)

        content_type = response.headers.get("content-type", "")
        if "application/json" in content_type:
            return RemoteResponse(kind="json", content_type=content_type, body=response.json())

        logger.debug("Received %d bytes of '%s' from %s", len(response.content), content_type, path)
        return RemoteResponse(kind="binary", content_type=content_type, body=response.content)

    def _headers(self, json_body: bool) -> Dict[str, str]:
        headers = {"Authorization": f"Bearer {self._config.api_key}"}
        if json_body:
            headers["Content-Type"] = "application/json"
        return headers

    @staticmethod
    def _to_query_params(arguments: Mapping[str, Any]) -> Dict[str, str]:
        params: Dict[str, str] = {}
        for key, value in arguments.items():
            if value is None:
                continue
            if isinstance(value, (list, dict)):
                raise TypeError(f"Field '{key}' cannot be sent as a query parameter.")
            if isinstance(value, bool):
                params[key] = "true" if value else "false"
            else:
                params[key] = str(value)
        return params
