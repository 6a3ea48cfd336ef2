"""
High-level REST helper over a fetch-style transport.
"""
import logging
from typing import Any, Optional

from .config import RestConfig
from .core.request import RequestBuilder
from .core.response import JsonSerializer, decode_json
from .core.url import build_url
from .transport import HttpxTransport
from .types import OptionsMutator, PathSpecifier, QueryParams, RequestOptions, Serializer, Transport

logger = logging.getLogger(__name__)

# Constants
LOG_PREFIX = "[Rest]"


def _noop_mutator(options: RequestOptions) -> None:
    return None


class Rest:
    """
    Small JSON REST client.

    Builds URLs from path segments under base_url, sends JSON with the
    matching Accept/Content-Type headers and lets options_mutator adjust the
    options of every request (credentials, CSRF or auth headers) before it is
    dispatched. Each call issues exactly one transport request; transport and
    decode errors propagate unchanged.

    Example:
        async with Rest("/api", credentials_mutator(), transport=HttpxTransport(origin="https://example.com")) as api:
            me = await api.get(["users", "me"])
    """

    def __init__(
        self,
        base_url: str = "",
        options_mutator: Optional[OptionsMutator] = None,
        use_trailing_slashes: bool = False,
        transport: Optional[Transport] = None,
        serializer: Optional[Serializer] = None,
    ):
        self._base_url = base_url
        self._options_mutator = options_mutator or _noop_mutator
        self._use_trailing_slashes = use_trailing_slashes
        self._serializer = serializer or JsonSerializer()

        # Flag to track if we own the transport (created it)
        self._own_transport = transport is None
        self._transport: Transport = transport if transport is not None else HttpxTransport()

    @classmethod
    def from_config(
        cls,
        config: RestConfig,
        options_mutator: Optional[OptionsMutator] = None,
        transport: Optional[Transport] = None,
        serializer: Optional[Serializer] = None,
    ) -> "Rest":
        """Factory method; builds an HttpxTransport from config unless one is given."""
        rest = cls(
            base_url=config.base_url,
            options_mutator=options_mutator,
            use_trailing_slashes=config.use_trailing_slashes,
            transport=transport if transport is not None else HttpxTransport.from_config(config),
            serializer=serializer,
        )
        rest._own_transport = transport is None
        return rest

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def use_trailing_slashes(self) -> bool:
        return self._use_trailing_slashes

    @property
    def transport(self) -> Transport:
        return self._transport

    async def close(self) -> None:
        """Close the transport if we own it."""
        close = getattr(self._transport, "close", None)
        if self._own_transport and close is not None:
            await close()

    async def __aenter__(self) -> "Rest":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def build_url(self, path: PathSpecifier, query: QueryParams = None) -> str:
        """Full URL for path under base_url, with optional query parameters."""
        return build_url(self._base_url, path, query, self._use_trailing_slashes)

    async def _dispatch(self, builder: RequestBuilder, path: PathSpecifier, query: QueryParams = None) -> Any:
        options = builder.build()
        self._options_mutator(options)
        url = self.build_url(path, query)
        logger.debug(f"{LOG_PREFIX} {options.get('method', 'get').upper()} {url}")
        return await self._transport(url, options)

    async def raw_get(self, path: PathSpecifier, query: QueryParams = None) -> Any:
        """GET without JSON headers; returns the transport response unmodified."""
        return await self._dispatch(RequestBuilder("get"), path, query)

    async def get(self, path: PathSpecifier, query: QueryParams = None) -> Any:
        """GET and decode the JSON response."""
        response = await self._dispatch(RequestBuilder("get").accept_json(), path, query)
        return await decode_json(response, self._serializer)

    async def post(self, path: PathSpecifier, data: Any = None) -> Any:
        """POST data as JSON (body omitted when data is None) and decode the response."""
        return await self._send("post", path, data)

    async def delete(self, path: PathSpecifier, data: Any = None) -> Any:
        """DELETE with an optional JSON body and decode the response."""
        return await self._send("delete", path, data)

    async def _send(self, method: str, path: PathSpecifier, data: Any) -> Any:
        builder = RequestBuilder(method).accept_json().json_body(data, self._serializer)
        response = await self._dispatch(builder, path)
        return await decode_json(response, self._serializer)
