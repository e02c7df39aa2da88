"""
Async HTTP client for the Baseline REST API.
Each call sends exactly one request; there are no retries.
"""

import json
import logging
from typing import Any, Dict, Optional

import httpx

from baseline_mcp.config import BaselineConfig
from baseline_mcp.errors import ParseError, UpstreamError

logger = logging.getLogger(__name__)


class BaselineClient:
    """Authenticated client for the Baseline API.

    The config is read on every request, so credential or URL changes made
    through its setters take effect immediately.

    Attributes:
        config: Upstream connection settings
    """

    def __init__(self, config: BaselineConfig, http_client: Optional[httpx.AsyncClient] = None):
        """Initialize the client.

        Args:
            config: Upstream connection settings
            http_client: Optional pre-built httpx client (used by tests)
        """
        self.config = config
        self._http = http_client or httpx.AsyncClient()

    async def __aenter__(self) -> "BaselineClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Token {self.config.token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    async def request(
        self,
        method: str,
        path: str,
        body: Optional[Any] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Send one request to the Baseline API.

        Args:
            method: HTTP verb
            path: Path relative to the configured base URL (e.g. /loan/123)
            body: JSON-serializable payload, omitted when None
            params: Query parameters

        Returns:
            {"data": parsed JSON body}; an empty body parses to {}

        Raises:
            ConfigurationError: no credential is configured
            UpstreamError: non-2xx status or no response at all
            ParseError: the body is not valid JSON
        """
        headers = self._headers()
        url = f"{self.config.api_url}{path}"
        content = json.dumps(body) if body is not None else None

        logger.debug("%s %s params=%s", method, url, params)
        try:
            response = await self._http.request(method, url, headers=headers, content=content, params=params)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise UpstreamError.unreachable(str(exc) or exc.__class__.__name__) from exc

        if not response.is_success:
            logger.warning("%s %s returned %s", method, url, response.status_code)
            raise UpstreamError(response.status_code, response.reason_phrase, response.text)

        text = response.text
        if not text:
            return {"data": {}}
        try:
            return {"data": json.loads(text)}
        except ValueError as exc:
            raise ParseError(f"Invalid JSON in response from {path}: {exc}") from exc

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, body: Any) -> Dict[str, Any]:
        return await self.request("POST", path, body)

    async def patch(self, path: str, body: Any) -> Dict[str, Any]:
        return await self.request("PATCH", path, body)

    async def put(self, path: str, body: Any) -> Dict[str, Any]:
        return await self.request("PUT", path, body)

    async def delete(self, path: str) -> Dict[str, Any]:
        return await self.request("DELETE", path)
