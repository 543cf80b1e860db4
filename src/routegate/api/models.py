"""Pydantic models for API responses."""

from datetime import datetime

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="Application version")
    timestamp: datetime = Field(..., description="Current timestamp")
    components: dict[str, str] = Field(..., description="Component health status")

    model_config = {
        "json_schema_extra": {
            "example": {
                "status": "healthy",
                "version": "0.1.0",
                "timestamp": "2026-02-07T10:30:00Z",
                "components": {"gateway": "healthy", "route_store": "disabled"},
            }
        }
    }
