"""Main client interface for the fetch client."""

from typing import Any, Dict, Mapping, Optional, Union

from pydantic import ValidationError

from ..core.normalization import (
    build_engine_options,
    merge_headers,
    normalize_response,
    resolve_url,
)
from ..errors import ConfigurationError
from ..models.config import ClientConfig
from ..models.request import RequestDescriptor
from ..models.response import NormalizedResponse
from ..observability.logging import ClientLogger
from ..transport.base import TransportEngine

logger = ClientLogger("client")

ConfigLike = Union[ClientConfig, Mapping[str, Any], None]


def coerce_config(config: ConfigLike) -> ClientConfig:
    """Accept a ``ClientConfig``, a plain mapping of options or None."""
    if config is None:
        return ClientConfig()
    if isinstance(config, ClientConfig):
        return config
    try:
        return ClientConfig.model_validate(dict(config))
    except ValidationError as e:
        raise ConfigurationError(f"Invalid client configuration: {e}") from e


class FetchClient:
    """
    High-level HTTP client.

    Merges client defaults (base URL, headers, proxy) into every call,
    delegates the exchange to a transport engine and returns either a
    ``NormalizedResponse`` or raises ``FetchClientError``.

    The debug flag is instance-wide. Passing ``enable_debug`` to one of the
    verb helpers changes it for every later call on this client; each call
    uses the value in effect when it started.
    """

    def __init__(
        self,
        config: ConfigLike = None,
        debug: bool = False,
        engine: Optional[TransportEngine] = None
    ):
        """
        Initialize the client.

        Args:
            config: ClientConfig or a mapping with ``headers``, ``proxy``, ``baseUrl``
            debug: Enable debug reporting of failed calls
            engine: Transport engine; an ``HttpxEngine`` is created on first use if omitted
        """
        self.config = coerce_config(config)
        self._debug = bool(debug or self.config.debug)
        self._engine = engine
        self._owns_engine = engine is None

    @property
    def engine(self) -> TransportEngine:
        """Lazy initialization of the transport engine."""
        if self._engine is None:
            from ..transport.httpx_engine import HttpxEngine
            self._engine = HttpxEngine()
        return self._engine

    @property
    def debug(self) -> bool:
        return self._debug

    @debug.setter
    def debug(self, value: bool) -> None:
        self._debug = bool(value)

    @property
    def default_headers(self) -> Dict[str, str]:
        return dict(self.config.default_headers)

    @property
    def base_url(self) -> Optional[str]:
        return self.config.base_url

    def create(self, config: ConfigLike = None, debug: bool = False) -> "FetchClient":
        """Create a new, independent client."""
        return FetchClient(config, debug)

    async def execute(self, descriptor: RequestDescriptor) -> NormalizedResponse:
        """
        Run one request through the normalization pipeline.

        Raises:
            FetchClientError: if the engine reports an unsuccessful status
            ConfigurationError: if the proxy settings cannot be turned into a URL
        """
        debug = self._debug
        url = resolve_url(descriptor.url, self.config.base_url)
        # Echoed headers are the merged ones even if engine options replaced them
        headers = merge_headers(self.config.default_headers, descriptor.headers)

        with logger.track_request(descriptor.method, url, debug=debug) as info:
            options = build_engine_options(descriptor, self.config)
            response = await self.engine.send(**options)
            info['status_code'] = response.status_code
            return normalize_response(response, descriptor.method, descriptor.url, headers)

    async def request(
        self,
        url: str,
        method: str,
        body: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        options: Optional[Dict[str, Any]] = None
    ) -> NormalizedResponse:
        """
        Make a generic HTTP request.

        Args:
            url: Path (joined to the base URL) or absolute URL
            method: HTTP method
            body: Optional request body
            headers: Per-call headers; they override client defaults
            options: Engine options, applied after everything else
        """
        descriptor = RequestDescriptor(
            url=url,
            method=method,
            body=body,
            headers=headers,
            engine_options=options,
        )
        return await self.execute(descriptor)

    def _apply_debug(self, enable_debug: Optional[bool]) -> None:
        if enable_debug is not None:
            self._debug = bool(enable_debug)

    async def get(
        self,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        options: Optional[Dict[str, Any]] = None,
        enable_debug: Optional[bool] = None
    ) -> NormalizedResponse:
        """Make a GET request."""
        self._apply_debug(enable_debug)
        return await self.request(url, "GET", None, headers, options)

    async def post(
        self,
        url: str,
        body: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        options: Optional[Dict[str, Any]] = None,
        enable_debug: Optional[bool] = None
    ) -> NormalizedResponse:
        """Make a POST request."""
        self._apply_debug(enable_debug)
        return await self.request(url, "POST", body, headers, options)

    async def put(
        self,
        url: str,
        body: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        options: Optional[Dict[str, Any]] = None,
        enable_debug: Optional[bool] = None
    ) -> NormalizedResponse:
        """Make a PUT request."""
        self._apply_debug(enable_debug)
        return await self.request(url, "PUT", body, headers, options)

    async def delete(
        self,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        options: Optional[Dict[str, Any]] = None,
        enable_debug: Optional[bool] = None
    ) -> NormalizedResponse:
        """Make a DELETE request."""
        self._apply_debug(enable_debug)
        return await self.request(url, "DELETE", None, headers, options)

    async def aclose(self) -> None:
        """Close the engine if this client created it."""
        if self._owns_engine and self._engine is not None:
            await self._engine.aclose()

    async def __aenter__(self) -> "FetchClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()


def create_client(
    config: ConfigLike = None,
    debug: bool = False,
    engine: Optional[TransportEngine] = None
) -> FetchClient:
    """Factory for ``FetchClient``; call it once at the application entry point."""
    return FetchClient(config, debug, engine)
