"""Gateway request model."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, field_validator


class GatewayRequest(BaseModel):
    """Framework-neutral view of an inbound request.

    Headers are kept as ordered name/value pairs so repeated headers
    survive relaying.
    """

    method: str = Field(default="GET", description="HTTP method")
    path: str = Field(..., description="Request path, percent-encoded as received")
    query_string: str = Field(default="", description="Raw query string without '?'")
    headers: list[tuple[str, str]] = Field(
        default_factory=list, description="Inbound header pairs"
    )
    body: bytes = Field(default=b"", description="Raw request body")

    @field_validator("headers", mode="before")
    @classmethod
    def _header_pairs(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return list(value.items())
        return value

    def header(self, name: str) -> str | None:
        """Case-insensitive lookup of the first value of a header."""
        wanted = name.lower()
        for key, value in self.headers:
            if key.lower() == wanted:
                return value
        return None
