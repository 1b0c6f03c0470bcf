"""FastAPI dependencies for dependency injection."""

from fastapi import Request

from portfolio.config import Settings
from portfolio.site import Site


async def get_site(request: Request) -> Site:
    """
    Get the shared site state from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        The Site built at startup.

    Raises:
        RuntimeError: If the site was not attached to the application.
    """
    site: Site | None = getattr(request.app.state, "site", None)

    if site is None:
        raise RuntimeError("Site not initialized. This should never happen.")

    return site


async def get_app_settings(request: Request) -> Settings:
    """
    Get the settings the application was created with.

    Args:
        request: The FastAPI request object.

    Returns:
        The Settings instance passed to create_app.

    Raises:
        RuntimeError: If settings were not attached to the application.
    """
    settings: Settings | None = getattr(request.app.state, "settings", None)

    if settings is None:
        raise RuntimeError("Settings not attached to application state.")

    return settings
