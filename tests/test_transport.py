"""
Tests for HttpxTransport and Rest over httpx.
"""
import json

import httpx
import pytest
import respx

from rest_client import HttpxTransport, Rest, RestConfig, chain_mutators, credentials_mutator, csrf_header_mutator
from rest_client.core.request import RequestBuilder
from rest_client.core.response import JsonSerializer
from rest_client.transport import _format_body


@pytest.mark.asyncio
async def test_transport_lifecycle():
    async with HttpxTransport(origin="https://example.com") as transport:
        assert transport._client is not None
        assert not transport._client.is_closed

    assert transport._client is None


@pytest.mark.asyncio
async def test_transport_keeps_injected_client():
    client = httpx.AsyncClient(base_url="https://example.com")
    async with HttpxTransport(httpx_client=client):
        pass
    assert not client.is_closed
    await client.aclose()


@pytest.mark.asyncio
async def test_transport_request():
    async with HttpxTransport(origin="https://example.com") as transport:
        with respx.mock(base_url="https://example.com") as mock:
            route = mock.post("/items").respond(201, json={"id": 123})

            response = await transport(
                "/items",
                {
                    "method": "post",
                    "headers": {"Content-Type": "application/json"},
                    "body": '{"name":"item1"}',
                    "credentials": "same-origin",
                },
            )

            assert response.status_code == 201
            assert response.json() == {"id": 123}
            request = route.calls.last.request
            assert request.method == "POST"
            assert request.headers["content-type"] == "application/json"
            assert json.loads(request.read()) == {"name": "item1"}


@pytest.mark.asyncio
async def test_transport_raises_for_status():
    async with HttpxTransport(origin="https://example.com") as transport:
        with respx.mock(base_url="https://example.com") as mock:
            mock.get("/missing").respond(404, json={"detail": "nope"})

            with pytest.raises(httpx.HTTPStatusError):
                await transport("/missing", {"method": "get", "headers": {}})


@pytest.mark.asyncio
async def test_transport_status_passthrough_when_disabled():
    async with HttpxTransport(origin="https://example.com", raise_for_status=False) as transport:
        with respx.mock(base_url="https://example.com") as mock:
            mock.get("/missing").respond(404, json={"detail": "nope"})

            response = await transport("/missing", {"method": "get", "headers": {}})
            assert response.status_code == 404


@pytest.mark.asyncio
async def test_transport_network_error():
    async with HttpxTransport(origin="https://example.com") as transport:
        with respx.mock(base_url="https://example.com") as mock:
            mock.get("/down").mock(side_effect=httpx.ConnectError("refused"))

            with pytest.raises(httpx.ConnectError):
                await transport("/down", {"method": "get", "headers": {}})


@pytest.mark.asyncio
async def test_rest_over_httpx():
    config = RestConfig(
        base_url="/api?authentication=foobar",
        origin="https://example.com",
        use_trailing_slashes=True,
    )
    mutator = chain_mutators(credentials_mutator(), csrf_header_mutator("AUTHTOKENX"))

    async with Rest.from_config(config, options_mutator=mutator) as api:
        with respx.mock(base_url="https://example.com") as mock:
            get_route = mock.get(path="/api/users/me/").respond(200, json={"name": "me"})
            post_route = mock.post("/api/logout/").respond(200, text='{"ok": true}')

            assert await api.get(["users", "me"], {"foo": "bar"}) == {"name": "me"}
            assert await api.post("logout", {"foo": "bar"}) == {"ok": True}

            get_request = get_route.calls.last.request
            assert get_request.url.query == b"authentication=foobar&foo=bar"
            assert get_request.headers["accept"] == "application/json"
            assert "x-csrftoken" not in get_request.headers

            post_request = post_route.calls.last.request
            assert post_request.headers["x-csrftoken"] == "AUTHTOKENX"
            assert post_request.read() == b'{"foo":"bar"}'


@pytest.mark.asyncio
async def test_rest_raw_get_over_httpx():
    async with Rest("/api", transport=HttpxTransport(origin="https://example.com")) as api:
        with respx.mock(base_url="https://example.com") as mock:
            mock.get("/api/me").respond(200, text='{"foo":"bar"}')

            response = await api.raw_get("me")
            assert isinstance(response, httpx.Response)
            assert response.text == '{"foo":"bar"}'
        await api.transport.close()


def test_format_body_safety():
    assert _format_body(None) == "<empty>"
    assert _format_body("hello") == "hello"
    assert _format_body('{"a": 1}') == '{\n  "a": 1\n}'
    assert _format_body(b"1234") == "<binary data: 4 bytes>"

    long_str = "a" * 6000
    formatted = _format_body(long_str)
    assert len(formatted) < 6000
    assert "... (truncated)" in formatted


@pytest.mark.asyncio
async def test_transport_accepts_builder_options():
    options = (
        RequestBuilder("post")
        .accept_json()
        .json_body({"foo": "bar"}, JsonSerializer())
        .headers({"X-Requested-With": "XMLHttpRequest"})
        .option("timeout", 5.0)
        .build()
    )
    async with HttpxTransport(origin="https://example.com") as transport:
        with respx.mock(base_url="https://example.com") as mock:
            route = mock.post("/items").respond(200, json={"ok": True})

            response = await transport("/items", options)

            assert response.json() == {"ok": True}
            request = route.calls.last.request
            assert request.headers["x-requested-with"] == "XMLHttpRequest"
            assert request.headers["content-type"] == "application/json"
            assert request.read() == b'{"foo":"bar"}'
