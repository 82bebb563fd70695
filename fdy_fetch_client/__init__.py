"""
fdy-fetch-client - async HTTP convenience layer over httpx.

Features:
- Base URL prefixing and default header merging
- Proxy URL construction from structured settings
- JSON bodies parsed automatically, raw text kept otherwise
- Structured FetchClientError for unsuccessful responses
- Optional debug reporting of failed calls through logging
"""

__version__ = "1.0.0"

from .api.client import FetchClient, create_client
from .config import load_config
from .errors import ConfigurationError, ErrorCategory, FetchClientError
from .models import (
    ClientConfig,
    NormalizedResponse,
    ProxyScheme,
    ProxySpec,
    RequestDescriptor,
    RequestEcho,
)
from .transport import EngineResponse, HttpxEngine, TransportEngine

__all__ = [
    # Client
    "FetchClient",
    "create_client",
    "load_config",

    # Errors
    "FetchClientError",
    "ConfigurationError",
    "ErrorCategory",

    # Models
    "ClientConfig",
    "ProxySpec",
    "ProxyScheme",
    "RequestDescriptor",
    "NormalizedResponse",
    "RequestEcho",

    # Transport
    "TransportEngine",
    "EngineResponse",
    "HttpxEngine",
]
