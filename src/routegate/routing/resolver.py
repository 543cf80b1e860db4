"""Route key resolution across the static table and the external store."""

from collections.abc import Mapping

import structlog
from pydantic import ValidationError

from routegate.exceptions import RouteStoreError
from routegate.routing.models import RouteConfig
from routegate.store.interface import RouteStoreInterface
from routegate.utils.metrics import metrics

logger = structlog.get_logger(__name__)


class ConfigResolver:
    """Resolve route keys to route configurations.

    The static table is authoritative: a key found there is never looked up
    in the store, so store rows cannot shadow static entries.
    """

    def __init__(
        self,
        static_routes: Mapping[str, RouteConfig],
        store: RouteStoreInterface | None = None,
    ):
        """Initialize the resolver.

        Args:
            static_routes: Read-only route table checked first
            store: Optional external route store queried on static misses
        """
        self._static_routes = static_routes
        self._store = store

    @property
    def store(self) -> RouteStoreInterface | None:
        return self._store

    async def resolve(self, key: str) -> RouteConfig | None:
        """
        Resolve a route key.

        Store failures and unparseable rows degrade to "no route".

        Args:
            key: Route key

        Returns:
            Route configuration, or None if the key is unknown
        """
        config = self._static_routes.get(key)
        if config is not None:
            metrics.route_lookups_total.labels(source="static", result="hit").inc()
            return config

        if self._store is None:
            metrics.route_lookups_total.labels(source="static", result="miss").inc()
            return None

        try:
            raw = await self._store.get(key)
        except RouteStoreError as e:
            logger.error("Route store lookup failed", route_key=key, error=str(e))
            metrics.route_lookups_total.labels(source="store", result="error").inc()
            return None
        except Exception:
            logger.exception("Unexpected route store error", route_key=key)
            metrics.route_lookups_total.labels(source="store", result="error").inc()
            return None

        if not raw:
            metrics.route_lookups_total.labels(source="store", result="miss").inc()
            return None

        try:
            config = RouteConfig.from_json(raw)
        except ValidationError as e:
            logger.error("Invalid route config in store", route_key=key, error=str(e))
            metrics.route_lookups_total.labels(source="store", result="invalid").inc()
            return None

        metrics.route_lookups_total.labels(source="store", result="hit").inc()
        return config
