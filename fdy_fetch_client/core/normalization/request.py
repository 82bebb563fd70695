"""
Request-side normalization.

Turns a ``RequestDescriptor`` plus ``ClientConfig`` into the keyword options
handed to the transport engine.
"""

from typing import Any, Dict, Optional

from ...errors import ConfigurationError
from ...models.config import ClientConfig, ProxySpec
from ...models.request import RequestDescriptor


def resolve_url(url: str, base_url: Optional[str] = None) -> str:
    """
    Resolve the final request URL.

    The base URL is prepended by plain concatenation. No separator is added
    or removed, so callers must be consistent about leading slashes.
    """
    if base_url:
        return base_url + url
    return url


def merge_headers(
    default_headers: Optional[Dict[str, str]],
    headers: Optional[Dict[str, str]] = None
) -> Dict[str, str]:
    """Shallow merge; per-call headers win on key collision."""
    return {**(default_headers or {}), **(headers or {})}


def build_proxy_url(proxy: Optional[ProxySpec]) -> Optional[str]:
    """
    Build the proxy connection string.

    Returns None unless host, port and scheme are all set.

    Raises:
        ConfigurationError: if only one of username/password is set
    """
    if proxy is None or not proxy.is_complete:
        return None

    if not proxy.username and not proxy.password:
        return f"{proxy.scheme}://{proxy.host}:{proxy.port}"

    if not proxy.has_credentials:
        raise ConfigurationError("proxy username and password must be given together")

    return f"{proxy.scheme}://{proxy.username}:{proxy.password}@{proxy.host}:{proxy.port}"


def build_engine_options(
    descriptor: RequestDescriptor,
    config: ClientConfig
) -> Dict[str, Any]:
    """
    Assemble the options for a single engine call.

    Engine options are spread last and may override any constructed field.
    """
    return {
        "url": resolve_url(descriptor.url, config.base_url),
        "body": descriptor.body,
        "headers": merge_headers(config.default_headers, descriptor.headers),
        "proxy_url": build_proxy_url(config.proxy),
        "method": descriptor.method,
        **(descriptor.engine_options or {}),
    }
