"""
Main module entry point.

This allows running the API as: python -m healthz.main
"""

import uvicorn

from healthz.main.config import get_settings
from healthz.shared import get_logger

logger = get_logger(__name__)


def main() -> None:
    """Serve the FastAPI application with uvicorn."""
    settings = get_settings()
    logger.info(
        "Starting health report API",
        host=settings.app.host,
        port=settings.app.port,
        path=settings.health.path,
    )
    uvicorn.run(
        "healthz.main.app:app",
        host=settings.app.host,
        port=settings.app.port,
        reload=settings.app.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
