"""
Application ports - abstract interfaces for the slide's rendering collaborators.

Slide depends only on these contracts, so any markdown engine or template
engine honouring them can be substituted.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping


class MarkdownRendererPort(ABC):
    """Abstract interface for markdown to HTML conversion."""

    @abstractmethod
    def render(self, text: str) -> str:
        """Convert markdown text to an HTML fragment."""
        pass


class TemplateRendererPort(ABC):
    """Abstract interface for template rendering."""

    @abstractmethod
    def render(self, template_name: str, context: Mapping[str, Any]) -> str:
        """Render the named template with the given context."""
        pass
