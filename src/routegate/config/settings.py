"""Application settings and configuration."""

from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseSettings):
    """HTTP server configuration."""

    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, description="Server port", ge=0, le=65535)
    workers: int = Field(default=4, description="Number of Uvicorn workers")
    reload: bool = Field(default=False, description="Enable auto-reload")


class GatewaySettings(BaseSettings):
    """Gateway dispatch configuration."""

    master_token_name: str = Field(
        default="DAGATEWAYTOKEN", description="Secret name holding the master bearer token"
    )
    bus_publish_base_url: str = Field(
        default="https://rest.ably.io/channels", description="Event bus channel publish base URL"
    )
    downstream_timeout_seconds: float = Field(
        default=30.0, gt=0, description="Total timeout for a single downstream call"
    )
    strip_headers: list[str] = Field(
        default_factory=lambda: ["Host", "Connection", "Content-Length", "Transfer-Encoding"],
        description="Inbound headers not copied to REST downstream requests",
    )


class RoutingSettings(BaseSettings):
    """Static route table configuration."""

    config_path: str | None = Field(
        default=None, description="Path to static route table file (YAML/JSON)"
    )
    config_dict: dict[str, Any] | None = Field(
        default=None, description="Inline static route table"
    )


class RouteStoreSettings(BaseSettings):
    """External route store configuration."""

    type: Literal["none", "redis", "memory"] = Field(
        default="none", description="Route store backend type"
    )
    redis_url: str = Field(default="redis://localhost:6379", description="Redis connection URL")
    table_name: str = Field(default="darouter", description="Hash holding serialized routes")
    timeout_seconds: float = Field(default=5.0, gt=0, description="Route lookup timeout")
    max_connections: int = Field(default=10, description="Maximum connection pool size")
    routes: dict[str, str] = Field(
        default_factory=dict, description="Serialized routes for the memory store"
    )


class MonitoringSettings(BaseSettings):
    """Monitoring and observability configuration."""

    metrics_enabled: bool = Field(default=True, description="Enable Prometheus metrics")
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: Literal["json", "text"] = Field(default="json", description="Log format")


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="ROUTEGATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    server: ServerSettings = Field(default_factory=ServerSettings)
    gateway: GatewaySettings = Field(default_factory=GatewaySettings)
    routing: RoutingSettings = Field(default_factory=RoutingSettings)
    route_store: RouteStoreSettings = Field(default_factory=RouteStoreSettings)
    monitoring: MonitoringSettings = Field(default_factory=MonitoringSettings)


# Global settings instance
settings = Settings()
