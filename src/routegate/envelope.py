"""Uniform response envelopes."""

import json
from typing import Any

from pydantic import BaseModel, Field

from routegate.exceptions import GatewayError

JSON_MEDIA_TYPE = "application/json"


class GatewayResponse(BaseModel):
    """Framework-neutral gateway response."""

    status_code: int = Field(default=200, description="HTTP status code")
    body: bytes = Field(default=b"", description="Response body")
    media_type: str = Field(default=JSON_MEDIA_TYPE, description="Response content type")

    def payload(self) -> Any:
        """Decode the body as JSON."""
        return json.loads(self.body)


def success(data: Any = None, status_code: int = 200) -> GatewayResponse:
    """Wrap downstream data as ``{"success": true, ...data}``.

    Data that is not a JSON object is nested under ``data``.
    """
    if data is None:
        content = {"success": True}
    elif isinstance(data, dict):
        content = {"success": True, **data}
    else:
        content = {"success": True, "data": data}

    return GatewayResponse(status_code=status_code, body=json.dumps(content).encode())


def error(message: str, status_code: int = 400) -> GatewayResponse:
    """Build ``{"success": false, "error": message}``."""
    content = {"success": False, "error": message}
    return GatewayResponse(status_code=status_code, body=json.dumps(content).encode())


def from_exception(exc: GatewayError) -> GatewayResponse:
    """Render a gateway error with its own status."""
    return error(exc.message, exc.status_code)


def passthrough(body: bytes, status_code: int, media_type: str | None = None) -> GatewayResponse:
    """Relay a non-JSON downstream body unchanged."""
    return GatewayResponse(
        status_code=status_code,
        body=body,
        media_type=media_type or "text/plain",
    )
