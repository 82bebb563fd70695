"""Unit tests for the httpx-backed transport engine."""

import json

import httpx
import pytest

from fdy_fetch_client.transport.httpx_engine import HttpxEngine
from tests.helpers.engine_mocks import create_mock_transport

pytestmark = pytest.mark.unit


class TestSplitOptions:
    """Test routing of options to client vs request."""

    def test_basic_split(self):
        engine = HttpxEngine()
        client_kwargs, request_kwargs = engine.split_options({
            "url": "https://x",
            "method": "POST",
            "headers": {"A": "1"},
            "body": "payload",
            "proxy_url": "http://127.0.0.1:8080",
            "verify": False,
            "timeout": 5,
        })

        assert client_kwargs == {"proxy": "http://127.0.0.1:8080", "verify": False}
        assert request_kwargs == {
            "url": "https://x",
            "method": "POST",
            "headers": {"A": "1"},
            "content": "payload",
            "timeout": 5,
        }

    def test_no_proxy_and_no_body(self):
        client_kwargs, request_kwargs = HttpxEngine().split_options({
            "url": "https://x", "method": "GET", "body": None, "proxy_url": None,
        })
        assert "proxy" not in client_kwargs
        assert "content" not in request_kwargs
        assert "body" not in request_kwargs

    def test_explicit_proxy_option_wins(self):
        client_kwargs, _ = HttpxEngine().split_options({
            "url": "https://x", "method": "GET",
            "proxy_url": "http://a:1", "proxy": "http://b:2",
        })
        assert client_kwargs["proxy"] == "http://b:2"

    def test_explicit_content_wins_over_body(self):
        _, request_kwargs = HttpxEngine().split_options({
            "url": "https://x", "method": "POST", "body": "ignored", "content": b"raw",
        })
        assert request_kwargs["content"] == b"raw"

    def test_engine_defaults(self):
        engine = HttpxEngine(timeout=10, verify=False)
        client_kwargs, _ = engine.split_options({"url": "https://x", "method": "GET"})
        assert client_kwargs == {"timeout": 10, "verify": False}


class TestSend:
    """Test a full exchange against a mock transport."""

    @pytest.mark.asyncio
    async def test_success_read_as_text(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["url"] = str(request.url)
            seen["headers"] = dict(request.headers)
            seen["body"] = request.content
            return httpx.Response(201, json={"created": True}, headers={"X-Id": "9"})

        engine = HttpxEngine(transport=create_mock_transport(handler))
        response = await engine.send(
            url="https://api.example.com/items",
            method="POST",
            headers={"X-Client": "fdy"},
            body='{"name": "x"}',
            proxy_url=None,
        )

        assert response.ok is True
        assert response.status_code == 201
        assert json.loads(response.body) == {"created": True}
        assert response.headers["x-id"] == "9"
        assert isinstance(response.request, httpx.Request)
        assert seen["method"] == "POST"
        assert seen["url"] == "https://api.example.com/items"
        assert seen["headers"]["x-client"] == "fdy"
        assert seen["body"] == b'{"name": "x"}'

    @pytest.mark.asyncio
    async def test_error_status_is_not_raised(self):
        engine = HttpxEngine(transport=create_mock_transport(
            lambda request: httpx.Response(404, text="not here")
        ))
        response = await engine.send(url="https://x/y", method="GET", headers={}, body=None, proxy_url=None)

        assert response.ok is False
        assert response.status_code == 404
        assert response.body == "not here"

    @pytest.mark.asyncio
    async def test_transport_fault_raised(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        engine = HttpxEngine(transport=create_mock_transport(handler))
        with pytest.raises(httpx.ConnectError):
            await engine.send(url="https://x", method="GET", headers={}, body=None, proxy_url=None)

    @pytest.mark.asyncio
    async def test_request_options_forwarded(self):
        def handler(request):
            return httpx.Response(200, text=request.url.params.get("q", ""))

        engine = HttpxEngine(transport=create_mock_transport(handler))
        response = await engine.send(
            url="https://x/search", method="GET", headers={}, body=None, proxy_url=None,
            params={"q": "fdy"},
        )
        assert response.body == "fdy"
