"""Public client API."""

from .client import FetchClient, create_client

__all__ = ["FetchClient", "create_client"]
