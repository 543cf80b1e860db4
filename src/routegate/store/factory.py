"""Factory for creating route store instances."""

from routegate.config import settings
from routegate.store.interface import RouteStoreInterface
from routegate.store.memory_store import MemoryRouteStore
from routegate.store.redis_store import RedisRouteStore


async def create_route_store() -> RouteStoreInterface | None:
    """
    Create route store instance based on configuration.

    Returns:
        Route store instance, or None when no external store is configured
    """
    store_type = settings.route_store.type.lower()

    if store_type == "none":
        return None
    elif store_type == "memory":
        return MemoryRouteStore(settings.route_store.routes)
    elif store_type == "redis":
        store = RedisRouteStore(
            url=settings.route_store.redis_url,
            table_name=settings.route_store.table_name,
            timeout=settings.route_store.timeout_seconds,
            max_connections=settings.route_store.max_connections,
        )
        await store.connect()
        return store
    else:
        raise ValueError(f"Unsupported route store type: {store_type}")
