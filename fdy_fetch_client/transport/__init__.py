"""Transport engines the client delegates network I/O to."""

from .base import EngineResponse, TransportEngine
from .httpx_engine import HttpxEngine

__all__ = ["EngineResponse", "TransportEngine", "HttpxEngine"]
