"""Test configuration and fixtures."""

from unittest.mock import AsyncMock, Mock

import pytest

from routegate.adapters import AdapterRegistry, EventBusAdapter, RestAdapter
from routegate.dispatcher import Dispatcher
from routegate.routing.models import RouteConfig, StaticRouteTable
from routegate.routing.resolver import ConfigResolver
from routegate.secrets import StaticSecretResolver

MASTER_TOKEN = "master-token"


def make_session(status=200, body=b"", content_type="application/json", text=""):
    """Create a mock aiohttp session whose request() yields one response."""
    mock_response = AsyncMock()
    mock_response.status = status
    mock_response.ok = 200 <= status < 300
    mock_response.headers = {"Content-Type": content_type} if content_type else {}
    mock_response.read = AsyncMock(return_value=body)
    mock_response.text = AsyncMock(return_value=text or body.decode(errors="replace"))

    mock_context = AsyncMock()
    mock_context.__aenter__ = AsyncMock(return_value=mock_response)
    mock_context.__aexit__ = AsyncMock(return_value=None)

    mock_session = AsyncMock()
    # session.request returns the context manager directly, not a coroutine
    mock_session.request = Mock(return_value=mock_context)
    return mock_session


@pytest.fixture
def rest_config():
    return RouteConfig(
        type="REST",
        targetUrl="https://orders.example.com/",
        authKeyEnvName="ORDERS_TOKEN",
    )


@pytest.fixture
def bus_config():
    return RouteConfig(
        type="EVENT_BUS",
        channelName="gateway-events",
        authKeyEnvName="BUS_KEY",
    )


@pytest.fixture
def static_routes(rest_config, bus_config):
    return StaticRouteTable(
        {
            "v1/orders": rest_config,
            "v1/events": bus_config,
            "v1/inventory": RouteConfig(
                type="REST",
                targetUrl="https://inventory.example.com",
                authKeyEnvName="INVENTORY_TOKEN",
                table_name="inventory",
            ),
        }
    )


@pytest.fixture
def secrets():
    return StaticSecretResolver(
        {
            "DAGATEWAYTOKEN": MASTER_TOKEN,
            "ORDERS_TOKEN": "orders-secret",
            "INVENTORY_TOKEN": "inventory-secret",
            "BUS_KEY": "bus-key",
        }
    )


@pytest.fixture
def rest_adapter():
    return RestAdapter(strip_headers=["Host", "Connection", "Content-Length"])


@pytest.fixture
def bus_adapter():
    return EventBusAdapter(publish_base_url="https://bus.example.com/channels")


@pytest.fixture
def dispatcher(static_routes, secrets, rest_adapter, bus_adapter):
    return Dispatcher(
        resolver=ConfigResolver(static_routes),
        adapters=AdapterRegistry([rest_adapter, bus_adapter]),
        secrets=secrets,
        master_token_name="DAGATEWAYTOKEN",
    )


@pytest.fixture
def session_factory():
    """Factory for mock aiohttp sessions."""
    return make_session
