"""Data models for work crossing the bridge.

These define the only shapes allowed across the process boundary:
a request descriptor going out and a relay result coming back.
"""

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class HttpMethod(str, Enum):
    """HTTP methods the relay is asked to perform."""

    GET = "GET"
    POST = "POST"


class RequestDescriptor(BaseModel):
    """A structured request handed to the relay."""

    model_config = ConfigDict(frozen=True)

    endpoint: str = Field(description="Fully-qualified target URL")
    method: HttpMethod = Field(description="HTTP method")
    body: dict[str, Any] | None = Field(
        default=None,
        description="JSON-serializable payload (absent for GET)"
    )

    @model_validator(mode="after")
    def _get_has_no_body(self) -> "RequestDescriptor":
        if self.method == HttpMethod.GET and self.body is not None:
            raise ValueError("GET requests cannot carry a body")
        return self


class RelayResult(BaseModel):
    """Normalized relay response, tagged by kind."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["json"] = Field(default="json", description="Payload kind tag")
    data: Any = Field(default=None, description="Decoded response body")
