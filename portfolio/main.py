"""Entry point: configure logging, build the app and serve it with uvicorn."""

from pathlib import Path

from dotenv import load_dotenv

from portfolio.config import get_settings
from portfolio.core.app_factory import create_app
from portfolio.core.server import create_server
from portfolio.exceptions import StartupException
from portfolio.logging_config import get_logger, log_with_context, setup_logging

logger = get_logger(__name__)


def run() -> None:
    """Start the portfolio site.

    Exits with status 1 if templates, fixtures or static files fail to load.
    """
    load_dotenv(Path(__file__).parent.parent / ".env")

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)

    try:
        app = create_app(settings)
    except StartupException as e:
        log_with_context(
            logger,
            "critical",
            f"failed to initialize application: {e.message}",
            error_code=e.code.value,
            details=e.details,
            event_type="startup_failed",
        )
        raise SystemExit(1) from e

    log_with_context(
        logger,
        "info",
        f"starting server on {settings.host}:{settings.port}",
        host=settings.host,
        port=settings.port,
        event_type="server_starting",
    )
    create_server(app, settings).run()


if __name__ == "__main__":
    run()
