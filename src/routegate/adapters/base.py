"""Protocol adapter interface."""

from abc import ABC, abstractmethod

import aiohttp

from routegate.envelope import GatewayResponse
from routegate.models import GatewayRequest
from routegate.routing.models import RouteConfig, ServiceType


class ProtocolAdapter(ABC):
    """Relay a request to one downstream integration style.

    Adapters share a lazily created HTTP session whose total timeout bounds
    every downstream call.
    """

    service_type: ServiceType

    def __init__(self, timeout: float = 30.0):
        """Initialize the adapter.

        Args:
            timeout: Total timeout in seconds for one downstream call
        """
        self.timeout = timeout
        self._session: aiohttp.ClientSession | None = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create HTTP session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout)
            )
        return self._session

    async def close(self) -> None:
        """Close HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()

    @abstractmethod
    async def handle(
        self,
        request: GatewayRequest,
        config: RouteConfig,
        internal_path: str,
        secret: str | None,
    ) -> GatewayResponse:
        """
        Relay the request downstream.

        Args:
            request: Inbound request
            config: Resolved route configuration
            internal_path: Path below the version segment
            secret: Downstream credential named by the route

        Returns:
            Gateway response

        Raises:
            GatewayError: For caller-visible failures
        """
        pass
