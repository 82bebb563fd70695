from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class RequestDescriptor(BaseModel):
    """Logical description of a single HTTP call."""
    url: str = Field(..., description="Path (joined to base_url) or absolute URL")
    method: str = Field(..., min_length=1, description="HTTP method")
    body: Optional[str] = Field(None, description="Request body")
    headers: Optional[Dict[str, str]] = Field(None, description="Per-call headers")
    engine_options: Optional[Dict[str, Any]] = Field(
        None,
        description="Options handed to the transport engine verbatim",
    )
