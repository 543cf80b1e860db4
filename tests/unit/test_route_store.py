"""Unit tests for route store implementations."""

from unittest.mock import AsyncMock, patch

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from routegate.config import settings
from routegate.exceptions import RouteStoreError
from routegate.store.factory import create_route_store
from routegate.store.memory_store import MemoryRouteStore
from routegate.store.redis_store import RedisRouteStore


@pytest.mark.asyncio
async def test_memory_store_get():
    """Test memory store lookups."""
    store = MemoryRouteStore({"v1/a": '{"type": "REST"}'})
    store.put("v1/b", '{"type": "EVENT_BUS"}')

    assert await store.get("v1/a") == '{"type": "REST"}'
    assert await store.get("v1/b") == '{"type": "EVENT_BUS"}'
    assert await store.get("v1/c") is None
    assert await store.ping() is True

    await store.close()


@pytest.fixture
def mock_redis():
    redis = AsyncMock()
    redis.hget = AsyncMock(return_value='{"type": "REST"}')
    redis.ping = AsyncMock(return_value=True)
    redis.aclose = AsyncMock()
    return redis


@pytest.mark.asyncio
async def test_redis_store_reads_hash_field(mock_redis):
    """Test lookups read the route key field of the routes hash."""
    store = RedisRouteStore(url="redis://localhost:6379", table_name="darouter")

    with patch("routegate.store.redis_store.aioredis.from_url", return_value=mock_redis):
        value = await store.get("v1/orders")

    assert value == '{"type": "REST"}'
    mock_redis.hget.assert_awaited_once_with("darouter", "v1/orders")


@pytest.mark.asyncio
async def test_redis_store_missing_field(mock_redis):
    mock_redis.hget.return_value = None
    store = RedisRouteStore(url="redis://localhost:6379")
    store.redis = mock_redis

    assert await store.get("v1/unknown") is None


@pytest.mark.asyncio
async def test_redis_store_error_raises_store_error(mock_redis):
    """Test connection failures surface as route store errors."""
    mock_redis.hget.side_effect = RedisConnectionError("refused")
    store = RedisRouteStore(url="redis://localhost:6379")
    store.redis = mock_redis

    with pytest.raises(RouteStoreError, match="v1/orders"):
        await store.get("v1/orders")


@pytest.mark.asyncio
async def test_redis_store_timeout_raises_store_error(mock_redis):
    mock_redis.hget.side_effect = TimeoutError()
    store = RedisRouteStore(url="redis://localhost:6379")
    store.redis = mock_redis

    with pytest.raises(RouteStoreError):
        await store.get("v1/orders")


@pytest.mark.asyncio
async def test_redis_store_ping_failure(mock_redis):
    mock_redis.ping.side_effect = RedisConnectionError("refused")
    store = RedisRouteStore(url="redis://localhost:6379")
    store.redis = mock_redis

    assert await store.ping() is False


@pytest.mark.asyncio
async def test_redis_store_close(mock_redis):
    store = RedisRouteStore(url="redis://localhost:6379")
    store.redis = mock_redis

    await store.close()

    mock_redis.aclose.assert_awaited_once()
    assert store.redis is None


@pytest.mark.asyncio
async def test_factory_none():
    """Test no store is created by default."""
    with patch.object(settings.route_store, "type", "none"):
        assert await create_route_store() is None


@pytest.mark.asyncio
async def test_factory_memory():
    with patch.object(settings.route_store, "type", "memory"), patch.object(
        settings.route_store, "routes", {"v1/a": '{"type": "REST"}'}
    ):
        store = await create_route_store()

    assert isinstance(store, MemoryRouteStore)
    assert await store.get("v1/a") == '{"type": "REST"}'


@pytest.mark.asyncio
async def test_factory_redis(mock_redis):
    with patch.object(settings.route_store, "type", "redis"), patch(
        "routegate.store.redis_store.aioredis.from_url", return_value=mock_redis
    ):
        store = await create_route_store()

    assert isinstance(store, RedisRouteStore)
    assert store.table_name == "darouter"
