from enum import Enum
from typing import Dict, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator


class ProxyScheme(str, Enum):
    """Schemes accepted for the upstream proxy."""
    HTTP = "http"
    HTTPS = "https"


class ProxySpec(BaseModel):
    """
    Upstream proxy settings.

    A proxy URL is only built when host, port and scheme are all set.
    Credentials are all-or-nothing: either both username and password are
    given, or neither is.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, use_enum_values=True)

    host: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("host", "ip"),
        description="Proxy host name or address",
    )
    port: Optional[int] = Field(None, gt=0, le=65535, description="Proxy port")
    scheme: Optional[ProxyScheme] = Field(
        None,
        validation_alias=AliasChoices("scheme", "protocol"),
        description="Scheme used to talk to the proxy",
    )
    username: Optional[str] = Field(None, description="Proxy user")
    password: Optional[str] = Field(None, description="Proxy password")

    @model_validator(mode="after")
    def check_credentials(self) -> "ProxySpec":
        if bool(self.username) != bool(self.password):
            raise ValueError("proxy username and password must be given together")
        return self

    @property
    def has_credentials(self) -> bool:
        return bool(self.username and self.password)

    @property
    def is_complete(self) -> bool:
        return bool(self.host and self.port and self.scheme)


class ClientConfig(BaseModel):
    """Client-level defaults applied to every request."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    default_headers: Dict[str, str] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("default_headers", "headers"),
        description="Headers merged into every request",
    )
    proxy: Optional[ProxySpec] = Field(None, description="Upstream proxy")
    base_url: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("base_url", "baseUrl"),
        description="Prefix concatenated to every request URL",
    )
    debug: bool = Field(False, description="Initial debug reporting state")
