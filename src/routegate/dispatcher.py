"""Gateway request dispatch."""

import time

import structlog

from routegate import envelope
from routegate.adapters import AdapterRegistry
from routegate.auth import authenticate
from routegate.envelope import GatewayResponse
from routegate.exceptions import (
    GatewayConfigurationError,
    GatewayError,
    RouteNotFoundError,
    UnauthorizedError,
    UnsupportedServiceTypeError,
)
from routegate.models import GatewayRequest
from routegate.routing.models import RouteConfig, RouteTarget, ServiceType
from routegate.routing.resolver import ConfigResolver
from routegate.secrets import SecretResolver
from routegate.utils.metrics import metrics

logger = structlog.get_logger(__name__)


class Dispatcher:
    """Authenticate, resolve and relay one gateway request.

    Every check that can reject a request runs before an adapter is
    invoked, so a rejected request never reaches a downstream system.
    """

    def __init__(
        self,
        resolver: ConfigResolver,
        adapters: AdapterRegistry,
        secrets: SecretResolver,
        master_token_name: str,
    ):
        """Initialize the dispatcher.

        Args:
            resolver: Route key resolver
            adapters: Protocol adapters by service type
            secrets: Resolver for the master token and downstream secrets
            master_token_name: Secret name holding the master bearer token
        """
        self.resolver = resolver
        self.adapters = adapters
        self.secrets = secrets
        self.master_token_name = master_token_name

    def _check_auth(self, request: GatewayRequest) -> None:
        expected = self.secrets.resolve(self.master_token_name)
        if not authenticate(request.header("Authorization"), expected):
            raise UnauthorizedError("Unauthorized")

    def _resolve_secret(self, route_key: str, config: RouteConfig) -> str | None:
        if not config.auth_key_env_name:
            return None

        secret = self.secrets.resolve(config.auth_key_env_name)
        if secret is None:
            logger.error(
                "Missing downstream secret",
                route_key=route_key,
                secret_name=config.auth_key_env_name,
            )
            raise GatewayConfigurationError(
                "Gateway configuration error: Missing Secret Key for Downstream Service"
            )
        return secret

    def _validate_config(self, route_key: str, config: RouteConfig) -> None:
        """Check the fields the route's adapter needs."""
        missing = None
        if config.service_type is ServiceType.REST and not config.target_url:
            missing = "targetUrl"
        elif config.service_type is ServiceType.EVENT_BUS:
            if not config.channel_name:
                missing = "channelName"
            elif not config.auth_key_env_name:
                missing = "authKeyEnvName"

        if missing:
            logger.error("Incomplete route config", route_key=route_key, missing=missing)
            raise GatewayConfigurationError(
                f"Gateway configuration error: Route is missing {missing}"
            )

    async def dispatch(self, request: GatewayRequest) -> GatewayResponse:
        """
        Handle one inbound request.

        Args:
            request: Inbound request

        Returns:
            Response envelope; never raises
        """
        start = time.perf_counter()
        route_label = "unresolved"
        log = logger.bind(method=request.method, path=request.path)

        try:
            self._check_auth(request)

            target = RouteTarget.from_path(request.path)
            log = log.bind(route_key=target.route_key)

            config = await self.resolver.resolve(target.route_key)
            if config is None:
                raise RouteNotFoundError("Endpoint Not Found or Unsupported Version")
            route_label = target.route_key

            secret = self._resolve_secret(target.route_key, config)

            adapter = self.adapters.get(config.service_type)
            if adapter is None:
                raise UnsupportedServiceTypeError(f"Unsupported service type: {config.type}")

            self._validate_config(target.route_key, config)

            log.info("Dispatching request", service_type=config.type)
            response = await adapter.handle(request, config, target.internal_path, secret)
        except GatewayError as e:
            log.info("Request rejected", status=e.status_code, error=e.message)
            response = envelope.from_exception(e)
        except Exception:
            log.exception("Gateway processing failed")
            response = envelope.error("Gateway processing failed", 500)

        metrics.dispatch_total.labels(
            route_key=route_label, status=str(response.status_code)
        ).inc()
        metrics.dispatch_duration_seconds.labels(route_key=route_label).observe(
            time.perf_counter() - start
        )
        return response

    async def close(self) -> None:
        """Release adapter sessions and the route store connection."""
        await self.adapters.close()
        if self.resolver.store is not None:
            await self.resolver.store.close()
