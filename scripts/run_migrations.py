#!/usr/bin/env python3
"""Apply database migrations, then check the configured event is present."""

import asyncio
import sys

import logfire
from alembic import command
from alembic.config import Config

from exchange.config import Settings
from exchange.domain.value import EventId
from exchange.persistence.database import create_engine, create_session_factory
from exchange.persistence.repository import PostgresEventRepository
from exchange.util.observability import configure_logfire


async def check_event(settings: Settings) -> bool:
    """Report whether the configured event exists and accepts registrations."""
    engine = create_engine(settings)
    try:
        async with create_session_factory(engine)() as session:
            event = await PostgresEventRepository(session).find_by_id(
                EventId(settings.registration.event_id)
            )
    finally:
        await engine.dispose()

    if event is None:
        logfire.warn(
            "Configured event not found; registration will be closed",
            event_id=settings.registration.event_id,
        )
        return False

    logfire.info(
        "Configured event found",
        event_id=event.id,
        status=event.status.value,
        registration_deadline=event.registration_deadline,
    )
    return event.is_registration_open


def main() -> int:
    """Run migrations and log any errors to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    try:
        logfire.info("Starting database migrations")
        command.upgrade(Config("alembic.ini"), "head")
        logfire.info("Database migrations completed successfully")
    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Fail the deploy rather than start on a broken schema
        raise

    asyncio.run(check_event(settings))
    return 0


if __name__ == "__main__":
    sys.exit(main())
