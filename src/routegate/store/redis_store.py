"""Redis route store implementation."""

import asyncio

import redis.asyncio as aioredis
import structlog
from redis.exceptions import RedisError

from routegate.exceptions import RouteStoreError
from routegate.store.interface import RouteStoreInterface

logger = structlog.get_logger(__name__)


class RedisRouteStore(RouteStoreInterface):
    """Route store reading serialized routes from a Redis hash.

    Each route key is a field of the hash named ``table_name``; the field
    value is the JSON-serialized route configuration.
    """

    def __init__(
        self,
        url: str,
        table_name: str = "darouter",
        timeout: float = 5.0,
        max_connections: int = 10,
    ):
        """
        Initialize Redis route store.

        Args:
            url: Redis connection URL
            table_name: Hash holding serialized routes
            timeout: Lookup timeout in seconds
            max_connections: Maximum connection pool size
        """
        self.url = url
        self.table_name = table_name
        self.timeout = timeout
        self.max_connections = max_connections
        self.redis: aioredis.Redis | None = None

    async def connect(self) -> None:
        """Connect to Redis."""
        self.redis = aioredis.from_url(
            self.url,
            max_connections=self.max_connections,
            socket_timeout=self.timeout,
            decode_responses=True,
        )
        logger.info("Connected to Redis route store", url=self.url, table=self.table_name)

    async def get(self, key: str) -> str | None:
        """
        Get a serialized route from the hash.

        Args:
            key: Route key

        Returns:
            Serialized route or None
        """
        if not self.redis:
            await self.connect()

        try:
            value = await asyncio.wait_for(
                self.redis.hget(self.table_name, key), timeout=self.timeout
            )
        except (RedisError, TimeoutError, OSError) as e:
            raise RouteStoreError(f"Route lookup failed for '{key}': {e}") from e

        return value or None

    async def ping(self) -> bool:
        """Check Redis connectivity."""
        if not self.redis:
            await self.connect()

        try:
            return bool(await asyncio.wait_for(self.redis.ping(), timeout=self.timeout))
        except (RedisError, TimeoutError, OSError) as e:
            logger.warning("Route store ping failed", error=str(e))
            return False

    async def close(self) -> None:
        """Close Redis connection."""
        if self.redis:
            await self.redis.aclose()
            self.redis = None
            logger.info("Closed Redis route store connection")
