from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class RequestEcho(BaseModel):
    """What was actually sent: the engine's request object and merged headers."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: Any = None
    headers: Dict[str, str] = Field(default_factory=dict)


class NormalizedResponse(BaseModel):
    """
    Uniform response shape returned for every successful call.

    ``data`` holds the parsed JSON document when the body is valid JSON and
    the raw text otherwise.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    data: Any = None
    status_code: int
    headers: Dict[str, str] = Field(default_factory=dict)
    ok: bool
    request: RequestEcho = Field(default_factory=RequestEcho)

    @property
    def status(self) -> int:
        return self.status_code
