"""Page/view routes for the full page and its HTMX partials."""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from portfolio.dependencies import get_site
from portfolio.site import Site

router = APIRouter()


def render_view(site: Site, name: str) -> HTMLResponse:
    """Render a named template with the full page data."""
    return HTMLResponse(site.renderer.render(name, site.page))


@router.api_route("/", methods=["GET", "HEAD"], response_class=HTMLResponse)
async def index(site: Site = Depends(get_site)):
    """Render the full single-page application."""
    return render_view(site, "base")


@router.api_route("/partials/about", methods=["GET", "HEAD"], response_class=HTMLResponse)
async def about_partial(site: Site = Depends(get_site)):
    """Render the about section fragment."""
    return render_view(site, "about")


@router.api_route("/partials/projects", methods=["GET", "HEAD"], response_class=HTMLResponse)
async def projects_partial(site: Site = Depends(get_site)):
    """Render the projects grid fragment."""
    return render_view(site, "projects")


@router.api_route("/partials/interests", methods=["GET", "HEAD"], response_class=HTMLResponse)
async def interests_partial(site: Site = Depends(get_site)):
    """Render the interests grid fragment."""
    return render_view(site, "interests")


# Matches any GET path no other route claims, so this router is included last
@router.api_route("/{path:path}", methods=["GET", "HEAD"], response_class=HTMLResponse)
async def page_fallback(path: str, site: Site = Depends(get_site)):
    """Render the full page for client-side deep links."""
    return render_view(site, "base")
