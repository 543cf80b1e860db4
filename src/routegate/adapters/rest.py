"""REST relay adapter."""

import json

import aiohttp
import structlog
from multidict import CIMultiDict

from routegate import envelope
from routegate.adapters.base import ProtocolAdapter
from routegate.envelope import GatewayResponse
from routegate.exceptions import ForwardError
from routegate.models import GatewayRequest
from routegate.routing.models import RouteConfig, ServiceType
from routegate.transform import transform_body
from routegate.utils.metrics import metrics

logger = structlog.get_logger(__name__)


class RestAdapter(ProtocolAdapter):
    """Forward requests to a downstream REST service."""

    service_type = ServiceType.REST

    def __init__(self, timeout: float = 30.0, strip_headers: list[str] | None = None):
        """Initialize the adapter.

        Args:
            timeout: Total timeout in seconds for one downstream call
            strip_headers: Inbound headers never copied downstream
        """
        super().__init__(timeout=timeout)
        self.strip_headers = {h.lower() for h in (strip_headers or [])}

    def build_url(self, config: RouteConfig, internal_path: str, query_string: str = "") -> str:
        """Join the target base URL, internal path and query string."""
        base = config.target_url or ""
        if base.endswith("/"):
            base = base[:-1]

        url = base + internal_path
        if query_string:
            url = f"{url}?{query_string}"
        return url

    def build_headers(self, request: GatewayRequest, secret: str | None) -> CIMultiDict[str]:
        """Copy inbound headers, repeats included, and replace the caller's credential."""
        headers = CIMultiDict(
            (key, value)
            for key, value in request.headers
            if key.lower() not in self.strip_headers and key.lower() != "authorization"
        )

        if secret:
            headers["Authorization"] = f"Bearer {secret}"

        return headers

    async def forward(
        self,
        request: GatewayRequest,
        config: RouteConfig,
        internal_path: str,
        secret: str | None,
    ) -> GatewayResponse:
        """
        Forward a request and relay the downstream response.

        JSON responses are wrapped in the success envelope with the
        downstream status; anything else is relayed as-is.

        Raises:
            ForwardError: If the downstream service is unreachable or times out
        """
        url = self.build_url(config, internal_path, request.query_string)
        headers = self.build_headers(request, secret)
        body = transform_body(request.body, config)

        log = logger.bind(url=url, method=request.method)
        session = await self._get_session()

        try:
            async with session.request(
                method=request.method,
                url=url,
                data=body or None,
                headers=headers,
            ) as response:
                status = response.status
                content_type = response.headers.get("Content-Type")
                raw = await response.read()
        except aiohttp.ClientError as e:
            log.error("Downstream request failed", error=str(e))
            metrics.downstream_requests_total.labels(adapter="rest", outcome="error").inc()
            raise ForwardError(f"Failed to forward request: {e}") from e
        except TimeoutError:
            log.error("Downstream request timeout", timeout=self.timeout)
            metrics.downstream_requests_total.labels(adapter="rest", outcome="timeout").inc()
            raise ForwardError("Downstream request timeout") from None

        metrics.downstream_requests_total.labels(adapter="rest", outcome=str(status)).inc()
        log.info("Request forwarded", status=status, response_size=len(raw))

        try:
            data = json.loads(raw)
        except (UnicodeDecodeError, json.JSONDecodeError):
            return envelope.passthrough(raw, status, content_type)

        return envelope.success(data, status_code=status)

    async def handle(
        self,
        request: GatewayRequest,
        config: RouteConfig,
        internal_path: str,
        secret: str | None,
    ) -> GatewayResponse:
        return await self.forward(request, config, internal_path, secret)
