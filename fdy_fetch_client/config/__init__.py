"""Configuration loading for the fetch client."""

from .env import ENV_PREFIX, load_config

__all__ = ["ENV_PREFIX", "load_config"]
