"""Application lifespan: startup and shutdown.

Only infrastructure wiring lives here: logging, the credential store
reachability check, and DB engine dispose.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from guardian_gate.core.config import get_settings
from guardian_gate.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    With the postgres backend an unreachable database at boot is fatal:
    the error is logged and re-raised so the server does not start.
    """
    settings = get_settings()
    setup_logging()

    # ---- Startup ----
    if settings.database_backend == "postgres":
        from guardian_gate.infrastructure.persistence.database import check_connection

        if not await check_connection():
            logger.critical("Credential store unreachable at startup; refusing to start")
            raise RuntimeError("Database connection failed at startup")
        logger.info("Database connected")
    logger.info(
        "%s %s started (environment=%s, store=%s, email=%s)",
        settings.app_name,
        settings.app_version,
        settings.environment,
        settings.database_backend,
        settings.email_backend,
    )

    yield

    # ---- Shutdown ----
    if settings.database_backend == "postgres":
        from guardian_gate.infrastructure.persistence.database import dispose_engine

        await dispose_engine()
