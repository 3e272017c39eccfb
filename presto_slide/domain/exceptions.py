"""
Domain exceptions.

Each failure source gets its own kind so callers can tell a bad directive
from a bad template resource from an unknown construction field.
"""

from typing import Iterable


class SlideError(Exception):
    pass


class MetadataParseError(SlideError):
    def __init__(self, directive: str, token: str, reason: str) -> None:
        super().__init__(f"Invalid slide directive {directive!r}: {reason} ({token!r})")
        self.directive = directive
        self.token = token
        self.reason = reason


class UnknownSlideFieldError(SlideError):
    def __init__(self, fields: Iterable[str]) -> None:
        self.fields = sorted(fields)
        super().__init__(f"Unknown slide fields: {', '.join(self.fields)}")


class TemplateNotFoundError(SlideError):
    def __init__(self, template_name: str, search_path: str) -> None:
        super().__init__(f"Template {template_name} not found in {search_path}")
        self.template_name = template_name
        self.search_path = search_path


class TemplateRenderError(SlideError):
    def __init__(self, template_name: str, reason: str) -> None:
        super().__init__(f"Failed to render template {template_name}: {reason}")
        self.template_name = template_name
        self.reason = reason


class MarkdownRenderError(SlideError):
    def __init__(self, reason: str) -> None:
        super().__init__(f"Markdown error: {reason}")
        self.reason = reason


class InvalidSlideFieldError(SlideError):
    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"Invalid value for slide field {field}: {reason}")
        self.field = field
        self.reason = reason


class RendererNotConfiguredError(SlideError):
    def __init__(self, renderer: str) -> None:
        super().__init__(f"Slide has no {renderer} renderer configured")
        self.renderer = renderer
