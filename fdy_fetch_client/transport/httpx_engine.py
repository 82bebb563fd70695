"""Default transport engine backed by ``httpx.AsyncClient``."""

from typing import Any, Dict, Optional, Tuple

import httpx

from .base import EngineResponse, TransportEngine

# Options that httpx only accepts when the client is constructed
CLIENT_OPTIONS = frozenset({
    "proxy",
    "verify",
    "cert",
    "trust_env",
    "http1",
    "http2",
    "limits",
    "transport",
    "mounts",
    "max_redirects",
    "default_encoding",
})


class HttpxEngine(TransportEngine):
    """
    Engine that performs each call on a short-lived ``httpx.AsyncClient``.

    Proxies are a client-level setting in httpx, so a client is opened per
    call with the resolved proxy and closed once the body has been read as
    text. ``client_options`` are defaults applied to every such client and
    can be overridden per call.
    """

    def __init__(self, timeout: Optional[float] = None, **client_options: Any):
        self._client_options: Dict[str, Any] = dict(client_options)
        if timeout is not None:
            self._client_options["timeout"] = timeout

    def split_options(self, options: Dict[str, Any]) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        """Separate client-construction options from per-request options."""
        options = dict(options)
        proxy_url = options.pop("proxy_url", None)

        client_kwargs = dict(self._client_options)
        request_kwargs: Dict[str, Any] = {}
        for key, value in options.items():
            if key in CLIENT_OPTIONS:
                client_kwargs[key] = value
            else:
                request_kwargs[key] = value

        if proxy_url and "proxy" not in options:
            client_kwargs["proxy"] = proxy_url

        if "body" in request_kwargs:
            body = request_kwargs.pop("body")
            if body is not None and "content" not in request_kwargs:
                request_kwargs["content"] = body

        return client_kwargs, request_kwargs

    async def send(self, **options: Any) -> EngineResponse:
        client_kwargs, request_kwargs = self.split_options(options)
        method = request_kwargs.pop("method")
        url = request_kwargs.pop("url")

        async with httpx.AsyncClient(**client_kwargs) as client:
            response = await client.request(method, url, **request_kwargs)

        return EngineResponse(
            ok=response.is_success,
            status_code=response.status_code,
            body=response.text,
            headers=dict(response.headers),
            request=response.request,
        )
