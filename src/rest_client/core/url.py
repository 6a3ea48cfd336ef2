"""
URL construction: path-segment joining and query-string expansion.
"""
import json
from typing import Any, List, Mapping, Tuple
from urllib.parse import quote, unquote

from ..types import PathSpecifier, QueryParams

# RFC 3986 pchar minus percent: unreserved, sub-delims, ":" and "@"
PATH_SAFE = "!$&'()*+,;=:@-._~"


def split_base_url(base_url: str) -> Tuple[str, str]:
    """Split a base URL into its path portion and its (possibly empty) query."""
    path, _, query = base_url.partition("?")
    return path, query


def normalize_path(path: PathSpecifier) -> List[str]:
    """Turn a one-or-many path specifier into a flat list of segment strings."""
    if path is None:
        return []
    if isinstance(path, (str, int)):
        segments = [path]
    else:
        segments = list(path)

    pieces: List[str] = []
    for segment in segments:
        for piece in str(segment).split("/"):
            if piece:
                pieces.append(quote(unquote(piece), safe=PATH_SAFE))
    return pieces


def join_path(base_path: str, segments: List[str], use_trailing_slashes: bool = False) -> str:
    joined = "/".join([base_path.rstrip("/")] + segments)
    if not joined:
        joined = "/"
    if use_trailing_slashes and not joined.endswith("/"):
        joined += "/"
    return joined


def _encode_component(value: Any) -> str:
    return quote(str(value), safe="")


def _format_value(value: Any) -> str:
    # Non-string scalars and nested mappings follow their JSON text form
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (bool, int, float, Mapping, list, tuple)):
        return serialize_json_query(value)
    return str(value)


def encode_query(query: QueryParams) -> str:
    """
    Encode query parameters.

    A string is treated as an opaque, already-serialized token and encoded as
    a whole. A mapping expands to key=value pairs joined by "&"; list values
    repeat the key, None values emit the bare key and nested mappings are
    sent as compact JSON.
    """
    if query is None:
        return ""
    if isinstance(query, str):
        return _encode_component(query)
    if not isinstance(query, Mapping):
        raise TypeError(f"query must be a str or a mapping, got {type(query).__name__}")

    pairs: List[str] = []
    for key, value in query.items():
        name = _encode_component(key)
        values = value if isinstance(value, (list, tuple)) else [value]
        for item in values:
            if item is None:
                pairs.append(name)
            else:
                pairs.append(f"{name}={_encode_component(_format_value(item))}")
    return "&".join(pairs)


def serialize_json_query(data: Any) -> str:
    """Compact JSON text suitable for passing as an opaque query token."""
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def build_url(
    base_url: str,
    path: PathSpecifier,
    query: QueryParams = None,
    use_trailing_slashes: bool = False,
) -> str:
    """
    Join base_url with path segments and append query parameters.

    Any query string carried by base_url is kept verbatim and always precedes
    the supplied parameters.
    """
    base_path, base_query = split_base_url(base_url)
    url = join_path(base_path, normalize_path(path), use_trailing_slashes)

    queries = [q for q in (base_query, encode_query(query)) if q]
    if queries:
        url = f"{url}?{'&'.join(queries)}"
    return url
