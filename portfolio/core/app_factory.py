"""Application factory for creating and configuring the FastAPI app."""

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from portfolio import __version__
from portfolio.config import Settings, get_settings
from portfolio.core.lifespan import lifespan
from portfolio.core.middleware import setup_middleware
from portfolio.exceptions import StaticFilesException
from portfolio.middleware.error_handlers import register_error_handlers
from portfolio.routers import contact_router, health_router, view_router
from portfolio.site import build_site


def mount_static(app: FastAPI, settings: Settings) -> None:
    """Serve the static directory under /static.

    Raises:
        StaticFilesException: If the directory does not exist
    """
    try:
        static_files = StaticFiles(directory=settings.static_dir)
    except RuntimeError as e:
        raise StaticFilesException(
            f"static files: {e}",
            details={"directory": str(settings.static_dir)},
        ) from e
    app.mount("/static", static_files, name="static")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Templates and fixtures are loaded here, so any startup error is raised
    before the server starts accepting connections.

    Args:
        settings: Settings to use, defaults to get_settings()

    Returns:
        Configured FastAPI application instance

    Raises:
        StartupException: If templates, fixtures or static files cannot be loaded
    """
    settings = settings or get_settings()
    site = build_site(settings)

    app = FastAPI(
        title="Portfolio",
        description="Personal portfolio site rendered server-side with HTMX partials.",
        version=__version__,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.site = site

    setup_middleware(app)
    register_error_handlers(app)
    mount_static(app, settings)

    app.include_router(contact_router.router, tags=["contact"])
    app.include_router(health_router.router, tags=["health"])

    # Full page and HTMX fragments; last, since it ends with the catch-all page route
    app.include_router(view_router.router, tags=["views"])

    return app
