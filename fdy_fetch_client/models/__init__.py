"""Data models for requests, responses and client configuration."""

from .config import ClientConfig, ProxySpec, ProxyScheme
from .request import RequestDescriptor
from .response import NormalizedResponse, RequestEcho

__all__ = [
    "ClientConfig",
    "ProxySpec",
    "ProxyScheme",
    "RequestDescriptor",
    "NormalizedResponse",
    "RequestEcho",
]
