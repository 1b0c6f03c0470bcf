"""Template rendering for HTML views."""

from collections.abc import Mapping
from fnmatch import fnmatch
from pathlib import Path, PurePosixPath
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateSyntaxError, select_autoescape
from pydantic import BaseModel

from portfolio.exceptions import TemplateLoadException, TemplateRenderException
from portfolio.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


class TemplateRenderer:
    """Named registry of parsed Jinja2 templates.

    Every template is compiled up front, so syntax errors surface at startup
    instead of on the first request. Names are file stems (`about.html` is
    registered as `about`); templates include one another by file name.
    """

    def __init__(self, registry: Mapping[str, Template]):
        self._registry = dict(registry)

    @classmethod
    def from_directory(cls, directory: Path, pattern: str = "*.html") -> "TemplateRenderer":
        """Parse every template under directory matching pattern.

        Args:
            directory: Template root directory
            pattern: Glob matched against each template's path relative to directory

        Returns:
            Renderer holding the parsed templates

        Raises:
            TemplateLoadException: If the directory is missing, nothing matches, or a template fails to parse
        """
        if not directory.is_dir():
            raise TemplateLoadException(
                f"parse templates: directory {directory} does not exist",
                details={"directory": str(directory), "pattern": pattern},
            )

        env = Environment(
            loader=FileSystemLoader(directory),
            autoescape=select_autoescape(["html"]),
            undefined=StrictUndefined,
        )

        registry: dict[str, Template] = {}
        for filename in env.list_templates(filter_func=lambda n: fnmatch(n, pattern)):
            try:
                template = env.get_template(filename)
            except TemplateSyntaxError as e:
                raise TemplateLoadException(
                    f"parse templates: {filename}:{e.lineno}: {e.message}",
                    details={"file": str(directory / filename), "line": e.lineno},
                ) from e
            registry[PurePosixPath(filename).stem] = template

        if not registry:
            raise TemplateLoadException(
                f"parse templates: pattern {pattern!r} matches no files in {directory}",
                details={"directory": str(directory), "pattern": pattern},
            )

        log_with_context(
            logger,
            "info",
            "Templates parsed",
            directory=str(directory),
            templates=sorted(registry),
            event_type="templates_parsed",
        )
        return cls(registry)

    @property
    def names(self) -> list[str]:
        """Sorted names of all registered templates."""
        return sorted(self._registry)

    def render(self, name: str, data: Any) -> str:
        """Render a named template.

        Args:
            name: Registered template name
            data: Pydantic model or mapping whose top-level fields become template variables

        Returns:
            Rendered HTML

        Raises:
            TemplateRenderException: If the name is unknown or rendering fails
        """
        template = self._registry.get(name)
        if template is None:
            raise TemplateRenderException(
                f"template {name!r} is not defined",
                details={"template": name},
            )

        context = dict(data) if isinstance(data, (BaseModel, Mapping)) else {"data": data}
        try:
            return template.render(context)
        except Exception as e:
            raise TemplateRenderException(
                f"template {name!r} error: {e}",
                details={"template": name, "error_type": type(e).__name__},
            ) from e
