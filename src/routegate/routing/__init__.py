"""Route resolution and route data models."""

from routegate.routing.models import RouteConfig, RouteTarget, ServiceType, StaticRouteTable
from routegate.routing.resolver import ConfigResolver

__all__ = ["ConfigResolver", "RouteConfig", "RouteTarget", "ServiceType", "StaticRouteTable"]
