"""External route store abstraction layer."""

from routegate.store.factory import create_route_store
from routegate.store.interface import RouteStoreInterface

__all__ = ["RouteStoreInterface", "create_route_store"]
