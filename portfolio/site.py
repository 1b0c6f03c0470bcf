"""Process-wide, read-only site state."""

from dataclasses import dataclass

from portfolio.config import Settings
from portfolio.models import PageData
from portfolio.protocols import RendererProtocol
from portfolio.services.data_loader import load_page_data
from portfolio.views.template_renderer import TemplateRenderer


@dataclass(frozen=True)
class Site:
    """Parsed templates and loaded page data, shared by every request."""

    renderer: RendererProtocol
    page: PageData


def build_site(settings: Settings) -> Site:
    """Parse templates and load fixtures.

    Raises:
        TemplateLoadException: If a template fails to parse
        DataLoadException: If a fixture fails to load
    """
    renderer = TemplateRenderer.from_directory(settings.templates_dir, settings.template_pattern)
    page = load_page_data(settings.data_dir)
    return Site(renderer=renderer, page=page)
