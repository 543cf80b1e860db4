"""In-memory route store implementation."""

from collections.abc import Mapping

from routegate.store.interface import RouteStoreInterface


class MemoryRouteStore(RouteStoreInterface):
    """Route store backed by a dictionary of serialized routes."""

    def __init__(self, routes: Mapping[str, str] | None = None):
        self._routes = dict(routes or {})

    async def get(self, key: str) -> str | None:
        return self._routes.get(key)

    def put(self, key: str, value: str) -> None:
        """Store a serialized route configuration."""
        self._routes[key] = value

    async def close(self) -> None:
        pass
