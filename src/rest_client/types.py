"""
Core type definitions for rest-client.
"""
from typing import Any, Awaitable, Callable, Dict, Literal, Mapping, Optional, Protocol, Sequence, TypedDict, Union, runtime_checkable

# Methods issued by Rest (lower-case, as handed to the options mutator)
HttpMethod = Literal["get", "post", "delete"]

PathSegment = Union[str, int]
PathSpecifier = Union[PathSegment, Sequence[PathSegment]]

# A string is an already-serialized opaque token; a mapping expands to key=value pairs
QueryParams = Union[str, Mapping[str, Any], None]


class RequestOptions(TypedDict, total=False):
    """Options handed to the transport. Mutators may add arbitrary keys."""
    method: str
    headers: Dict[str, str]
    body: str
    credentials: str
    timeout: Optional[float]


OptionsMutator = Callable[[RequestOptions], None]


@runtime_checkable
class JsonResponse(Protocol):
    """Response exposing a structured JSON accessor (sync or async)."""
    def json(self) -> Any: ...


@runtime_checkable
class TextResponse(Protocol):
    """Response exposing its body as text (attribute, or sync/async method)."""
    text: Any


@runtime_checkable
class Transport(Protocol):
    """Fetch-style transport: one call, one response."""
    def __call__(self, url: str, options: RequestOptions) -> Awaitable[Any]: ...


@runtime_checkable
class Serializer(Protocol):
    """Protocol for serialization."""
    def serialize(self, data: Any) -> str: ...
    def deserialize(self, data: str) -> Any: ...
