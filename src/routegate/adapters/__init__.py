"""Protocol adapters keyed by service type."""

from collections.abc import Iterable

from routegate.adapters.base import ProtocolAdapter
from routegate.adapters.event_bus import EventBusAdapter
from routegate.adapters.rest import RestAdapter
from routegate.routing.models import ServiceType


class AdapterRegistry:
    """Lookup of protocol adapters by service type."""

    def __init__(self, adapters: Iterable[ProtocolAdapter] = ()):
        self._adapters: dict[ServiceType, ProtocolAdapter] = {}
        for adapter in adapters:
            self.register(adapter)

    def register(self, adapter: ProtocolAdapter) -> None:
        self._adapters[adapter.service_type] = adapter

    def get(self, service_type: ServiceType | None) -> ProtocolAdapter | None:
        if service_type is None:
            return None
        return self._adapters.get(service_type)

    async def close(self) -> None:
        """Close every adapter's HTTP session."""
        for adapter in self._adapters.values():
            await adapter.close()


def create_adapters(
    bus_publish_base_url: str,
    timeout: float,
    strip_headers: list[str] | None = None,
) -> AdapterRegistry:
    """Build the registry with one adapter per supported service type."""
    return AdapterRegistry(
        [
            RestAdapter(timeout=timeout, strip_headers=strip_headers),
            EventBusAdapter(publish_base_url=bus_publish_base_url, timeout=timeout),
        ]
    )


__all__ = [
    "AdapterRegistry",
    "EventBusAdapter",
    "ProtocolAdapter",
    "RestAdapter",
    "create_adapters",
]
