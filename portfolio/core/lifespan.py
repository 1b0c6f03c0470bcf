"""Application lifespan management."""

import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from portfolio import __version__
from portfolio.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log startup and shutdown around the serving period.

    Site state is built in create_app, before the server binds, so there is
    nothing to initialize here. Exceptions after yield are re-raised.
    """
    app.state.startup_time = time.time()
    site = app.state.site

    log_with_context(
        logger,
        "info",
        "Starting portfolio site",
        version=__version__,
        templates=getattr(site.renderer, "names", None),
        projects=len(site.page.projects),
        event_type="app_startup",
    )

    try:
        yield
    except Exception as e:
        log_with_context(
            logger,
            "error",
            "Application error during lifespan",
            error=str(e),
            error_type=type(e).__name__,
            event_type="app_error",
        )
        raise
    finally:
        log_with_context(
            logger,
            "info",
            "Portfolio site stopped",
            uptime_seconds=int(time.time() - app.state.startup_time),
            event_type="app_shutdown",
        )
