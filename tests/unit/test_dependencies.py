"""Unit tests for dispatcher construction from settings."""

from unittest.mock import patch

import pytest

from routegate.api import dependencies
from routegate.config import settings
from routegate.exceptions import ConfigurationError


def test_load_static_routes_inline():
    """Test inline route tables are loaded."""
    config = {"routes": {"v1/a": {"type": "REST", "targetUrl": "https://a.example.com"}}}

    with patch.object(settings.routing, "config_dict", config):
        table = dependencies.load_static_routes()

    assert table["v1/a"].target_url == "https://a.example.com"


def test_load_static_routes_file(tmp_path):
    path = tmp_path / "routes.yaml"
    path.write_text("routes:\n  v1/b:\n    type: EVENT_BUS\n    channelName: events\n")

    with patch.object(settings.routing, "config_path", str(path)):
        table = dependencies.load_static_routes()

    assert table["v1/b"].channel_name == "events"


def test_load_static_routes_empty():
    with patch.object(settings.routing, "config_path", None), patch.object(
        settings.routing, "config_dict", None
    ):
        assert len(dependencies.load_static_routes()) == 0


def test_load_static_routes_bad_yaml(tmp_path):
    path = tmp_path / "routes.yaml"
    path.write_text("routes: [unterminated")

    with patch.object(settings.routing, "config_path", str(path)):
        with pytest.raises(ConfigurationError):
            dependencies.load_static_routes()


@pytest.mark.asyncio
async def test_get_dispatcher_is_cached():
    """Test the dispatcher is built once and released on cleanup."""
    with patch.object(settings.route_store, "type", "none"):
        first = await dependencies.get_dispatcher()
        second = await dependencies.get_dispatcher()

    assert first is second
    assert first.master_token_name == settings.gateway.master_token_name
    assert first.resolver.store is None

    await dependencies.cleanup_resources()
    assert dependencies._dispatcher_instance is None
