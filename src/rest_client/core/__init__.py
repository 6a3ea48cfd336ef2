from .request import RequestBuilder
from .response import JsonSerializer, decode_json
from .url import build_url, encode_query, serialize_json_query

__all__ = [
    "RequestBuilder",
    "JsonSerializer", "decode_json",
    "build_url", "encode_query", "serialize_json_query",
]
