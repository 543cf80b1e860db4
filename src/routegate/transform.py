"""Outbound body transformation for REST routes."""

import json

import structlog

from routegate.routing.models import RouteConfig

logger = structlog.get_logger(__name__)

TABLE_NAME_FIELD = "table_name"


def transform_body(raw: bytes, config: RouteConfig) -> bytes:
    """
    Produce the outbound body for a REST route.

    A JSON object body gets ``table_name`` set to the route's value, or
    removed when the route declares none. Empty and non-JSON bodies pass
    through untouched.

    Args:
        raw: Inbound request body
        config: Resolved route configuration

    Returns:
        Outbound request body
    """
    if not raw or not raw.strip():
        return raw

    try:
        data = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError):
        logger.warning("Unparseable request body, forwarding unmodified", body_size=len(raw))
        return raw

    if isinstance(data, dict):
        if config.table_name:
            data[TABLE_NAME_FIELD] = config.table_name
        else:
            data.pop(TABLE_NAME_FIELD, None)

    return json.dumps(data).encode()
