#!/usr/bin/env python3
"""Start the registration API, tracking startup errors in Logfire."""

import sys

import logfire
import uvicorn

from exchange.config import Settings
from exchange.util.logging import setup_logging
from exchange.util.observability import configure_logfire


def main() -> int:
    """Configure logging and serve the app with uvicorn."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info(
            "Starting exchange API",
            environment=settings.environment,
            git_sha=settings.git_sha,
            event_id=settings.registration.event_id,
            enforce_deadline=settings.registration.enforce_deadline,
        )

        uvicorn.run(
            "exchange.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
