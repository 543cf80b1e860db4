"""Dependency injection for FastAPI."""

import structlog

from routegate.adapters import create_adapters
from routegate.config import settings
from routegate.dispatcher import Dispatcher
from routegate.exceptions import ConfigurationError
from routegate.routing.models import StaticRouteTable
from routegate.routing.resolver import ConfigResolver
from routegate.secrets import EnvironmentSecretResolver
from routegate.store.factory import create_route_store

logger = structlog.get_logger(__name__)

# Global instance
_dispatcher_instance: Dispatcher | None = None


def load_static_routes() -> StaticRouteTable:
    """Load the static route table from configuration."""
    try:
        if settings.routing.config_path:
            table = StaticRouteTable.from_file(settings.routing.config_path)
            logger.info(
                "Static routes loaded from file",
                path=settings.routing.config_path,
                route_count=len(table),
            )
            return table
        if settings.routing.config_dict:
            table = StaticRouteTable.from_dict(settings.routing.config_dict)
            logger.info("Static routes loaded from inline config", route_count=len(table))
            return table
    except ConfigurationError:
        raise
    except Exception as e:
        logger.error("Failed to load static routes", error=str(e))
        raise ConfigurationError(f"Static route loading failed: {e}") from e

    logger.warning("No static routes configured")
    return StaticRouteTable()


async def create_dispatcher() -> Dispatcher:
    """
    Build a dispatcher from settings.

    Returns:
        Dispatcher wired to the static table, route store and adapters
    """
    store = await create_route_store()
    resolver = ConfigResolver(load_static_routes(), store)
    adapters = create_adapters(
        bus_publish_base_url=settings.gateway.bus_publish_base_url,
        timeout=settings.gateway.downstream_timeout_seconds,
        strip_headers=settings.gateway.strip_headers,
    )
    return Dispatcher(
        resolver=resolver,
        adapters=adapters,
        secrets=EnvironmentSecretResolver(),
        master_token_name=settings.gateway.master_token_name,
    )


async def get_dispatcher() -> Dispatcher:
    """
    Get dispatcher instance.

    Returns:
        Dispatcher instance
    """
    global _dispatcher_instance
    if _dispatcher_instance is None:
        _dispatcher_instance = await create_dispatcher()
    return _dispatcher_instance


async def cleanup_resources():
    """Clean up global resources on shutdown."""
    global _dispatcher_instance

    if _dispatcher_instance:
        await _dispatcher_instance.close()
        _dispatcher_instance = None
