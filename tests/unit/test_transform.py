"""Unit tests for outbound body transformation."""

import json

from structlog.testing import capture_logs

from routegate.routing.models import RouteConfig
from routegate.transform import transform_body

WITH_TABLE = RouteConfig(type="REST", targetUrl="https://a.example.com", table_name="orders")
WITHOUT_TABLE = RouteConfig(type="REST", targetUrl="https://a.example.com")


def test_injects_table_name():
    """Test route table_name is added to JSON objects."""
    body = transform_body(b'{"id": 1}', WITH_TABLE)

    assert json.loads(body) == {"id": 1, "table_name": "orders"}


def test_overwrites_client_table_name():
    """Test client-supplied table_name is replaced by the route value."""
    body = transform_body(b'{"id": 1, "table_name": "users"}', WITH_TABLE)

    assert json.loads(body)["table_name"] == "orders"


def test_strips_client_table_name():
    """Test table_name is removed when the route declares none."""
    body = transform_body(b'{"id": 1, "table_name": "users"}', WITHOUT_TABLE)

    assert json.loads(body) == {"id": 1}


def test_json_without_table_name_unchanged():
    """Test objects without table_name keep their fields."""
    body = transform_body(b'{"id": 1, "nested": {"a": [1, 2]}}', WITHOUT_TABLE)

    assert json.loads(body) == {"id": 1, "nested": {"a": [1, 2]}}


def test_empty_body_passthrough():
    """Test empty and whitespace bodies are returned unchanged."""
    assert transform_body(b"", WITH_TABLE) == b""
    assert transform_body(b"  \n\t", WITH_TABLE) == b"  \n\t"


def test_unparseable_body_passthrough_with_warning():
    """Test non-JSON bodies are forwarded unmodified and a warning logged."""
    raw = b"name=alice&table_name=users"

    with capture_logs() as logs:
        body = transform_body(raw, WITH_TABLE)

    assert body is raw
    assert any(entry["log_level"] == "warning" for entry in logs)


def test_non_object_json_left_alone():
    """Test JSON arrays are re-serialized without field changes."""
    body = transform_body(b'[{"table_name": "users"}]', WITH_TABLE)

    assert json.loads(body) == [{"table_name": "users"}]


def test_original_body_not_mutated():
    """Test the inbound bytes are left intact."""
    raw = b'{"id": 1, "table_name": "users"}'

    transform_body(raw, WITH_TABLE)

    assert raw == b'{"id": 1, "table_name": "users"}'
