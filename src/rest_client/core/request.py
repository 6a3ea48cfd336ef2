"""
Request options builder helper.
"""
from typing import Any, Dict

from ..config import JSON_CONTENT_TYPE
from ..types import HttpMethod, RequestOptions, Serializer


class RequestBuilder:
    """Fluent builder for RequestOptions. Each instance yields a fresh dict."""

    def __init__(self, method: HttpMethod = "get"):
        self._options: RequestOptions = {
            "method": method,
            "headers": {},
        }

    def header(self, key: str, value: str) -> "RequestBuilder":
        self._options["headers"][key] = value
        return self

    def headers(self, headers: Dict[str, str]) -> "RequestBuilder":
        self._options["headers"].update(headers)
        return self

    def accept_json(self) -> "RequestBuilder":
        return self.header("Accept", JSON_CONTENT_TYPE)

    def json_body(self, data: Any, serializer: Serializer) -> "RequestBuilder":
        """Serialize data as the body. None leaves body and Content-Type unset."""
        if data is None:
            return self
        self._options["body"] = serializer.serialize(data)
        return self.header("Content-Type", JSON_CONTENT_TYPE)

    def option(self, key: str, value: Any) -> "RequestBuilder":
        self._options[key] = value  # type: ignore[literal-required]
        return self

    def build(self) -> RequestOptions:
        """Get the constructed options."""
        return self._options
