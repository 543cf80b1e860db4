"""HTTP gateway listener entrypoint."""

import structlog
import uvicorn

from routegate.api.app import create_app
from routegate.config import settings
from routegate.utils.logging import setup_logging

logger = structlog.get_logger(__name__)


def main():
    """Run the gateway HTTP listener."""
    setup_logging()
    logger.info(
        "Starting HTTP listener",
        host=settings.server.host,
        port=settings.server.port,
    )

    # uvicorn needs an import string to spawn workers or reload
    if settings.server.workers > 1 or settings.server.reload:
        uvicorn.run(
            "routegate.api.app:create_app",
            factory=True,
            host=settings.server.host,
            port=settings.server.port,
            workers=settings.server.workers,
            reload=settings.server.reload,
            log_config=None,
        )
    else:
        app = create_app()
        uvicorn.run(
            app,
            host=settings.server.host,
            port=settings.server.port,
            log_config=None,
        )


if __name__ == "__main__":
    main()
