"""
Rest Client - JSON REST helper over a fetch-style transport

Rest is the main entry point. RequestBuilder is public as well, for callers
that assemble RequestOptions by hand (extra headers or transport options via
headers() and option()) and pass them to a Transport directly.
"""

__version__ = "0.1.0"

from .config import RestConfig, TimeoutConfig
from .exceptions import RestConfigError
from .types import OptionsMutator, PathSpecifier, QueryParams, RequestOptions, Transport
from .client import Rest
from .core.request import RequestBuilder
from .core.url import build_url, serialize_json_query
from .transport import HttpxTransport
from .auth import (
    bearer_auth_mutator,
    chain_mutators,
    credentials_mutator,
    csrf_header_mutator,
    header_mutator,
)

__all__ = [
    "RestConfig", "TimeoutConfig", "RestConfigError",
    "OptionsMutator", "PathSpecifier", "QueryParams", "RequestOptions", "Transport",
    "Rest",
    "RequestBuilder",
    "build_url", "serialize_json_query",
    "HttpxTransport",
    "bearer_auth_mutator", "chain_mutators", "credentials_mutator",
    "csrf_header_mutator", "header_mutator",
]
