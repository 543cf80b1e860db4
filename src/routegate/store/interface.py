"""Route store interface definition."""

from abc import ABC, abstractmethod


class RouteStoreInterface(ABC):
    """Abstract interface for external route stores.

    A route store maps route keys to JSON-serialized route configurations.
    It is read-only from the gateway's point of view.
    """

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """
        Look up a serialized route configuration.

        Args:
            key: Route key (``version/module``)

        Returns:
            JSON text of the route configuration, or None if no row exists

        Raises:
            RouteStoreError: If the store cannot be queried
        """
        pass

    async def ping(self) -> bool:
        """Check that the store is reachable."""
        return True

    @abstractmethod
    async def close(self) -> None:
        """Close store connection."""
        pass
