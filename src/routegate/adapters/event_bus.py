"""Event bus publish adapter."""

import base64
import json
from typing import Any

import aiohttp
import structlog

from routegate import envelope
from routegate.adapters.base import ProtocolAdapter
from routegate.envelope import GatewayResponse
from routegate.exceptions import ForwardError, InvalidBodyError
from routegate.models import GatewayRequest
from routegate.routing.models import RouteConfig, ServiceType
from routegate.utils.metrics import metrics

logger = structlog.get_logger(__name__)


def event_name(internal_path: str) -> str:
    """Turn ``/orders/created`` into ``orders.created``."""
    return internal_path.lstrip("/").replace("/", ".")


def build_message(internal_path: str, payload: Any) -> list[dict[str, Any]]:
    """Build the bus publish body for one event."""
    return [{"name": event_name(internal_path), "data": payload}]


class EventBusAdapter(ProtocolAdapter):
    """Publish request bodies as events on a bus channel."""

    service_type = ServiceType.EVENT_BUS

    def __init__(self, publish_base_url: str, timeout: float = 30.0):
        """Initialize the adapter.

        Args:
            publish_base_url: Channel publish base URL, without trailing slash
            timeout: Total timeout in seconds for one publish call
        """
        super().__init__(timeout=timeout)
        self.publish_base_url = publish_base_url.rstrip("/")

    def publish_url(self, channel: str) -> str:
        return f"{self.publish_base_url}/{channel}/messages"

    @staticmethod
    def basic_auth(secret: str) -> str:
        """Basic credentials for an API key used as the username."""
        return "Basic " + base64.b64encode(f"{secret}:".encode()).decode()

    async def publish(
        self,
        request: GatewayRequest,
        config: RouteConfig,
        internal_path: str,
        secret: str | None,
    ) -> GatewayResponse:
        """
        Publish the request body to the route's channel.

        Raises:
            InvalidBodyError: If the body is not valid JSON
            ForwardError: If the bus rejects the event or is unreachable
        """
        try:
            payload = json.loads(request.body)
        except (UnicodeDecodeError, json.JSONDecodeError):
            raise InvalidBodyError(
                f"Event body must be valid JSON for path: {internal_path}"
            ) from None

        channel = config.channel_name
        url = self.publish_url(channel)
        headers = {
            "Authorization": self.basic_auth(secret or ""),
            "Content-Type": "application/json",
        }
        message = build_message(internal_path, payload)

        log = logger.bind(channel=channel, event=message[0]["name"])
        session = await self._get_session()

        try:
            async with session.request(
                method="POST",
                url=url,
                data=json.dumps(message),
                headers=headers,
            ) as response:
                ok = response.ok
                status = response.status
                text = "" if ok else await response.text()
        except aiohttp.ClientError as e:
            log.error("Event publish failed", error=str(e))
            metrics.downstream_requests_total.labels(adapter="event_bus", outcome="error").inc()
            raise ForwardError(f"Failed to publish event: {e}") from e
        except TimeoutError:
            log.error("Event publish timeout", timeout=self.timeout)
            metrics.downstream_requests_total.labels(adapter="event_bus", outcome="timeout").inc()
            raise ForwardError("Failed to publish event: timeout") from None

        metrics.downstream_requests_total.labels(adapter="event_bus", outcome=str(status)).inc()

        if not ok:
            log.warning("Event bus rejected publish", status=status)
            raise ForwardError(f"Failed to publish event: {text}")

        log.info("Event published")
        return envelope.success(
            {
                "status": "Accepted",
                "message": f"Event published successfully to channel: {channel}",
            }
        )

    async def handle(
        self,
        request: GatewayRequest,
        config: RouteConfig,
        internal_path: str,
        secret: str | None,
    ) -> GatewayResponse:
        return await self.publish(request, config, internal_path, secret)
