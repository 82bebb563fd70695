"""
Environment-driven client configuration.

Recognised variables (a ``.env`` file in the working directory is honoured):

    FDY_BASE_URL            prefix for every request URL
    FDY_DEBUG               1/true/yes/on enables debug reporting
    FDY_DEFAULT_HEADERS     JSON object of default headers
    FDY_PROXY_HOST          proxy host
    FDY_PROXY_PORT          proxy port
    FDY_PROXY_SCHEME        http or https
    FDY_PROXY_USERNAME      proxy user (requires FDY_PROXY_PASSWORD)
    FDY_PROXY_PASSWORD      proxy password (requires FDY_PROXY_USERNAME)
"""

import json
import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from ..errors import ConfigurationError
from ..models.config import ClientConfig

ENV_PREFIX = "FDY_"

TRUTHY = {"1", "true", "yes", "on"}


def _env(name: str) -> Optional[str]:
    value = os.getenv(f"{ENV_PREFIX}{name}")
    if value is None or value.strip() == "":
        return None
    return value.strip()


def _headers_from_env() -> Dict[str, str]:
    raw = _env("DEFAULT_HEADERS")
    if raw is None:
        return {}
    try:
        headers = json.loads(raw)
    except ValueError as e:
        raise ConfigurationError(f"{ENV_PREFIX}DEFAULT_HEADERS is not valid JSON: {e}") from e
    if not isinstance(headers, dict):
        raise ConfigurationError(f"{ENV_PREFIX}DEFAULT_HEADERS must be a JSON object")
    return {str(k): str(v) for k, v in headers.items()}


def _proxy_from_env() -> Optional[Dict[str, Any]]:
    proxy = {
        "host": _env("PROXY_HOST"),
        "port": _env("PROXY_PORT"),
        "scheme": _env("PROXY_SCHEME"),
        "username": _env("PROXY_USERNAME"),
        "password": _env("PROXY_PASSWORD"),
    }
    if not any(proxy.values()):
        return None
    return proxy


def load_config(dotenv: bool = True, **overrides: Any) -> ClientConfig:
    """
    Build a ``ClientConfig`` from the environment.

    Args:
        dotenv: Load a ``.env`` file first (existing variables win)
        **overrides: Explicit values; they take precedence over the environment

    Raises:
        ConfigurationError: if the resulting configuration is invalid
    """
    if dotenv:
        load_dotenv()

    values: Dict[str, Any] = {
        "default_headers": _headers_from_env(),
        "proxy": _proxy_from_env(),
        "base_url": _env("BASE_URL"),
        "debug": (_env("DEBUG") or "").lower() in TRUTHY,
    }
    values.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return ClientConfig.model_validate(values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid client configuration: {e}") from e
