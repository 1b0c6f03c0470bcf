"""Protocol definitions for dependency injection."""

from typing import Any, Protocol


class RendererProtocol(Protocol):
    """Protocol for named-template renderers.

    Routes depend only on this interface, so the template technology can be
    replaced without touching them.
    """

    def render(self, name: str, data: Any) -> str:
        """Render the template registered under name with data.

        Args:
            name: Registered template name
            data: Pydantic model or mapping whose top-level fields become template variables

        Returns:
            Rendered HTML
        """
        ...
