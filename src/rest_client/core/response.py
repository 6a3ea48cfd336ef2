"""
Response decoding for JSON endpoints.
"""
import inspect
import json
from typing import Any

from ..types import JsonResponse, Serializer, TextResponse


class JsonSerializer:
    """Compact JSON serializer; output matches JSON.stringify for plain data."""

    def serialize(self, data: Any) -> str:
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    def deserialize(self, data: str) -> Any:
        return json.loads(data)


async def _resolve(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


async def read_text(response: Any) -> str:
    """Read the body of a text-capable response ("text" attribute or method)."""
    text = response.text
    if callable(text):
        text = text()
    text = await _resolve(text)
    if isinstance(text, (bytes, bytearray)):
        text = text.decode("utf-8")
    return text


async def decode_json(response: Any, serializer: Serializer) -> Any:
    """
    Decode a transport response as JSON.

    Prefers the response's own JSON accessor, falling back to reading text
    and deserializing it. Parse errors propagate unchanged.
    """
    if isinstance(response, JsonResponse):
        return await _resolve(response.json())
    if isinstance(response, TextResponse):
        return serializer.deserialize(await read_text(response))
    raise TypeError(
        f"Cannot decode response of type {type(response).__name__}: "
        "it exposes neither json() nor text"
    )
