"""FastAPI application factory."""

from contextlib import asynccontextmanager
from datetime import UTC, datetime

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import Response

from routegate import __version__
from routegate.api.dependencies import cleanup_resources, get_dispatcher
from routegate.api.models import HealthResponse
from routegate.api.routes import router
from routegate.config import settings
from routegate.utils.logging import setup_logging
from routegate.utils.metrics import metrics

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    setup_logging()
    logger.info("Starting RouteGate", version=__version__)

    try:
        await get_dispatcher()
        logger.info("Dispatcher initialized successfully")
    except Exception as e:
        logger.error("Failed to initialize dispatcher", error=str(e))
        raise

    yield

    # Shutdown
    logger.info("Shutting down RouteGate")
    await cleanup_resources()
    logger.info("Shutdown complete")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="RouteGate - API Gateway",
        description="Authenticating gateway relaying requests to REST services and an event bus",
        version=__version__,
        lifespan=lifespan,
    )

    # Health check endpoint
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health_check() -> HealthResponse:
        """
        Health check endpoint.

        Returns:
            Health status of the gateway and its route store
        """
        components = {"gateway": "healthy"}

        try:
            dispatcher = await get_dispatcher()
            store = dispatcher.resolver.store
            if store is None:
                components["route_store"] = "disabled"
            else:
                components["route_store"] = "healthy" if await store.ping() else "unhealthy"
        except Exception:
            components["gateway"] = "unhealthy"

        overall_status = (
            "healthy"
            if all(v in ("healthy", "disabled") for v in components.values())
            else "degraded"
        )

        return HealthResponse(
            status=overall_status,
            version=__version__,
            timestamp=datetime.now(UTC),
            components=components,
        )

    # Metrics endpoint
    if settings.monitoring.metrics_enabled:

        @app.get("/metrics", tags=["monitoring"])
        async def metrics_endpoint() -> Response:
            """
            Prometheus metrics endpoint.

            Returns:
                Prometheus metrics in text format
            """
            return Response(
                content=generate_latest(metrics.registry),
                media_type=CONTENT_TYPE_LATEST,
            )

    # Gateway catch-all must come after the fixed endpoints
    app.include_router(router)

    # Request logging middleware
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all HTTP requests."""
        log = logger.bind(
            method=request.method,
            path=request.url.path,
            client=request.client.host if request.client else None,
        )

        log.info("Request received")

        if settings.monitoring.metrics_enabled:
            metrics.api_requests_in_flight.inc()

        try:
            response = await call_next(request)

            log.info("Request completed", status_code=response.status_code)

            if settings.monitoring.metrics_enabled:
                metrics.api_requests_total.labels(
                    method=request.method,
                    status=response.status_code,
                ).inc()

            return response
        finally:
            if settings.monitoring.metrics_enabled:
                metrics.api_requests_in_flight.dec()

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle uncaught exceptions."""
        logger.exception("Unhandled exception occurred", path=request.url.path)
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": "Gateway processing failed"},
        )

    return app
