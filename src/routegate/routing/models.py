"""Data models for routing configuration."""

import json
from collections.abc import Iterator, Mapping
from enum import StrEnum
from pathlib import Path
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from routegate.exceptions import ConfigurationError, InvalidPathError

# Legacy type names still found in stored routes
SERVICE_TYPE_ALIASES = {"ABLY": "EVENT_BUS"}


class ServiceType(StrEnum):
    """Downstream integration style."""

    REST = "REST"
    EVENT_BUS = "EVENT_BUS"


class RouteConfig(BaseModel):
    """Resolved destination for a route key.

    Field names follow the serialized form used by the route store, so
    ``targetUrl`` and friends are accepted as well as snake_case names.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    type: str = Field(..., description="Service type (REST, EVENT_BUS)")
    target_url: str | None = Field(
        default=None, alias="targetUrl", description="Downstream base URL for REST routes"
    )
    channel_name: str | None = Field(
        default=None, alias="channelName", description="Bus channel for EVENT_BUS routes"
    )
    auth_key_env_name: str | None = Field(
        default=None, alias="authKeyEnvName", description="Name of the downstream secret"
    )
    table_name: str | None = Field(
        default=None, description="Value injected as table_name into JSON bodies"
    )

    @field_validator("type", mode="before")
    @classmethod
    def _normalize_type(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip().upper()
            return SERVICE_TYPE_ALIASES.get(value, value)
        return value

    @property
    def service_type(self) -> ServiceType | None:
        """Known service type, or None for types no adapter implements."""
        try:
            return ServiceType(self.type)
        except ValueError:
            return None

    @classmethod
    def from_json(cls, text: str) -> "RouteConfig":
        """Parse a serialized route configuration."""
        return cls.model_validate_json(text)


class RouteTarget(BaseModel):
    """Route key and downstream path derived from a request path."""

    model_config = ConfigDict(frozen=True)

    route_key: str
    internal_path: str

    @classmethod
    def from_path(cls, path: str) -> "RouteTarget":
        """
        Derive the route key from the first two path segments.

        ``/v1/orders/created`` yields key ``v1/orders`` and internal path
        ``/orders/created``.

        Raises:
            InvalidPathError: If the path has fewer than two segments
        """
        segments = [segment for segment in path.split("/") if segment]
        if len(segments) < 2:
            raise InvalidPathError(
                "Invalid API Path Format. Expected /{version}/{module}/..."
            )

        return cls(
            route_key=f"{segments[0]}/{segments[1]}",
            internal_path="/" + "/".join(segments[1:]),
        )


class StaticRouteTable(Mapping[str, RouteConfig]):
    """Read-only mapping of route keys to route configurations."""

    def __init__(self, routes: Mapping[str, RouteConfig] | None = None):
        self._routes = MappingProxyType(dict(routes or {}))

    def __getitem__(self, key: str) -> RouteConfig:
        return self._routes[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "StaticRouteTable":
        """
        Create a route table from a dictionary.

        Accepts either ``{"routes": {key: config}}`` or a bare ``{key: config}``.

        Args:
            config_dict: Configuration dictionary

        Returns:
            StaticRouteTable instance
        """
        raw_routes = config_dict.get("routes", config_dict)
        if not isinstance(raw_routes, Mapping):
            raise ConfigurationError("Route table must map route keys to route configs")

        routes = {}
        for key, raw in raw_routes.items():
            try:
                routes[key] = RouteConfig.model_validate(raw)
            except ValueError as e:
                raise ConfigurationError(f"Invalid route config for '{key}': {e}") from e
        return cls(routes)

    @classmethod
    def from_file(cls, file_path: str) -> "StaticRouteTable":
        """
        Load a route table from a YAML or JSON file.

        Args:
            file_path: Path to configuration file

        Returns:
            StaticRouteTable instance
        """
        import yaml

        path = Path(file_path)
        if not path.exists():
            raise ConfigurationError(f"Route table file not found: {file_path}")

        content = path.read_text()

        if path.suffix in [".yaml", ".yml"]:
            config_dict = yaml.safe_load(content) or {}
        elif path.suffix == ".json":
            config_dict = json.loads(content)
        else:
            raise ConfigurationError(f"Unsupported route table format: {path.suffix}")

        return cls.from_dict(config_dict)
