"""
Response-side normalization.

Every engine result ends up either as a ``NormalizedResponse`` or as a
``FetchClientError``. Bodies are resolved the same way on both paths: parsed
JSON when the text parses, the raw text otherwise.
"""

import json
from typing import Any, Dict, Optional, Tuple

from ...errors import FetchClientError
from ...models.response import NormalizedResponse, RequestEcho
from ...transport.base import EngineResponse


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant: {name}")


def parse_body(body: Optional[str]) -> Tuple[Any, bool]:
    """
    Resolve a response body.

    Returns:
        Tuple of (data, parsed) where ``parsed`` tells whether ``data`` came
        from the JSON parser. Empty or non-JSON text is returned untouched, as are
        NaN/Infinity literals and documents nested too deeply to decode.
    """
    if body is None:
        return None, False
    try:
        return json.loads(body, parse_constant=_reject_constant), True
    except (TypeError, ValueError, RecursionError):
        return body, False


def build_request_error(
    response: EngineResponse,
    method: str,
    url: str,
    headers: Dict[str, str]
) -> FetchClientError:
    """Shape an unsuccessful engine result into a ``FetchClientError``."""
    data, _ = parse_body(response.body)
    return FetchClientError(
        f"Request failed with status code: {response.status_code}",
        {
            "data": data,
            "status": response.status_code,
            "headers": response.headers,
            "config": {"method": method, "url": url},
        },
        {
            "headers": headers,
            "config": {"method": method, "url": url},
        },
        response_text=response.body,
    )


def normalize_response(
    response: EngineResponse,
    method: str,
    url: str,
    headers: Dict[str, str]
) -> NormalizedResponse:
    """
    Classify an engine result.

    Raises:
        FetchClientError: if the engine reports the response as unsuccessful
    """
    if not response.ok:
        raise build_request_error(response, method, url, headers)

    data, _ = parse_body(response.body)
    return NormalizedResponse(
        data=data,
        status_code=response.status_code,
        headers=response.headers,
        ok=response.ok,
        request=RequestEcho(config=response.request, headers=headers),
    )
