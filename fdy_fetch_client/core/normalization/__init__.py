"""Normalization layer between callers and the transport engine.

This layer handles:
- URL resolution against the configured base URL
- Default/per-call header merging
- Proxy URL construction
- Response body resolution (JSON or raw text) and error shaping
"""

from .request import build_engine_options, build_proxy_url, merge_headers, resolve_url
from .response import build_request_error, normalize_response, parse_body

__all__ = [
    "build_engine_options",
    "build_proxy_url",
    "merge_headers",
    "resolve_url",
    "build_request_error",
    "normalize_response",
    "parse_body",
]
