"""
Default fetch-style transport based on httpx.
"""
import json
import logging
from typing import Any, Dict, Optional, Union

import httpx

from .config import RestConfig, TimeoutConfig, normalize_timeout
from .types import RequestOptions

logger = logging.getLogger(__name__)

# Constants
LOG_PREFIX = "[HttpxTransport]"
HANDLED_OPTIONS = frozenset({"method", "headers", "body", "timeout"})


def _format_body(body: Any) -> str:
    """
    Format body for logging safeguards against binary data.
    """
    if body is None:
        return "<empty>"
    if isinstance(body, (bytes, bytearray)):
        return f"<binary data: {len(body)} bytes>"
    if isinstance(body, str):
        try:
            # Try to pretty print if it looks like JSON
            if body.strip().startswith(("{", "[")):
                return json.dumps(json.loads(body), indent=2)
        except json.JSONDecodeError:
            pass
        # Truncate long strings
        if len(body) > 5000:
            return body[:5000] + "... (truncated)"
        return body
    return str(body)


class HttpxTransport:
    """
    Transport wrapping httpx.AsyncClient.

    Called as transport(url, options) and resolves to the httpx.Response,
    which exposes both json() and text. Errors are logged and re-raised
    unchanged.
    """

    def __init__(
        self,
        origin: Optional[str] = None,
        timeout: Optional[Union[float, TimeoutConfig]] = None,
        headers: Optional[Dict[str, str]] = None,
        raise_for_status: bool = True,
        httpx_client: Optional[httpx.AsyncClient] = None,
    ):
        self._origin = origin.rstrip("/") if origin else None
        self._timeout = normalize_timeout(timeout)
        self._headers = dict(headers or {})
        self._raise_for_status = raise_for_status
        self._client: Optional[httpx.AsyncClient] = httpx_client

        # Flag to track if we own the client (created it)
        self._own_client = self._client is None

    @classmethod
    def from_config(cls, config: RestConfig) -> "HttpxTransport":
        return cls(
            origin=config.origin,
            timeout=config.timeout,
            headers=config.headers,
            raise_for_status=config.raise_for_status,
        )

    async def connect(self) -> None:
        """Initialize the client if needed."""
        if self._client:
            return

        timeout = httpx.Timeout(
            connect=self._timeout.connect,
            read=self._timeout.read,
            write=self._timeout.write,
            pool=self._timeout.pool
        )

        kwargs: Dict[str, Any] = {
            "timeout": timeout,
            "headers": self._headers,
            "follow_redirects": True,
        }
        if self._origin:
            kwargs["base_url"] = self._origin
        self._client = httpx.AsyncClient(**kwargs)

    async def close(self) -> None:
        """Close the client if we own it."""
        if self._own_client and self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "HttpxTransport":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def __call__(self, url: str, options: RequestOptions) -> httpx.Response:
        """Execute a single request."""
        if not self._client:
            await self.connect()

        assert self._client is not None

        method = options.get("method", "get").upper()
        headers = dict(options.get("headers", {}))
        body = options.get("body")

        ignored = sorted(set(options) - HANDLED_OPTIONS)
        if ignored:
            logger.debug(f"{LOG_PREFIX} Ignoring options not supported by httpx: {ignored}")

        extra: Dict[str, Any] = {}
        if "timeout" in options:
            extra["timeout"] = options["timeout"]

        logger.debug(f"{LOG_PREFIX} Request: {method} {url}")
        if body is not None:
            logger.debug(f"{LOG_PREFIX} Body: {_format_body(body)}")

        try:
            response = await self._client.request(
                method=method,
                url=url,
                headers=headers,
                content=body,
                **extra,
            )
            logger.debug(f"{LOG_PREFIX} Response: {response.status_code} {method} {url}")
            if self._raise_for_status:
                response.raise_for_status()
            return response

        except httpx.HTTPStatusError as e:
            logger.error(f"{LOG_PREFIX} Request returned error status: {e}")
            raise
        except httpx.RequestError as e:
            logger.error(f"{LOG_PREFIX} Request failed: {e}")
            raise
