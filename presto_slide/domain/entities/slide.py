"""
Slide domain entity.

A slide aggregates raw markdown content, display metadata and its position
in a section, and renders all of it to HTML through a markdown renderer and
a slide template.
"""

from typing import Any, Dict, Mapping, Optional, Union

import structlog
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from presto_slide.application.ports import MarkdownRendererPort, TemplateRendererPort
from presto_slide.domain.exceptions import (
    InvalidSlideFieldError,
    RendererNotConfiguredError,
    UnknownSlideFieldError,
)
from presto_slide.domain.services.section_registry import SectionRegistry
from presto_slide.domain.value_objects.metadata import Metadata
from presto_slide.domain.value_objects.section import Section

DEFAULT_TEMPLATE = "slide.html"

logger = structlog.get_logger("domain.slide")


def _line(value: Optional[str]) -> str:
    return f"{'' if value is None else value}\n"


class SlideParams(BaseModel):
    """Fields a slide can be built from."""

    model_config = ConfigDict(extra="forbid")

    content: Optional[str] = None
    metadata: Optional[Union[Metadata, str]] = None
    sequence: Optional[int] = None
    section: Optional[str] = None

    @field_validator("content", "section", mode="before")
    @classmethod
    def stringify(cls, value: Any) -> Optional[str]:
        return value if value is None else str(value)


class Slide:
    """
    A single slide of a presentation.

    Content is newline terminated after every write. Metadata is optional;
    reading it always yields a value. The section is held as a key into a
    SectionRegistry owned by the presentation.
    """

    def __init__(
        self,
        content: Optional[str] = None,
        metadata: Optional[Union[Metadata, str]] = None,
        sequence: Optional[int] = None,
        section: Optional[str] = None,
        *,
        sections: Optional[SectionRegistry] = None,
        markdown_renderer: Optional[MarkdownRendererPort] = None,
        template_renderer: Optional[TemplateRendererPort] = None,
        template_name: Optional[str] = None,
    ):
        self._content = ""
        self._metadata: Optional[Metadata] = None
        self.sequence = sequence
        self.section_key = section
        self.sections = sections
        self.markdown_renderer = markdown_renderer
        self.template_renderer = template_renderer
        self.template_name = template_name or DEFAULT_TEMPLATE

        if content is not None:
            self.content = content
        if metadata is not None:
            self.metadata = metadata

    @classmethod
    def from_params(
        cls,
        params: Mapping[str, Any],
        strict: bool = False,
        **collaborators: Any,
    ) -> "Slide":
        """
        Build a slide from a field mapping.

        Args:
            params: Values for content, metadata, sequence and section
            strict: Reject unknown fields instead of dropping them
            **collaborators: Keyword-only Slide arguments (sections, renderers)

        Returns:
            Slide: The new slide

        Raises:
            UnknownSlideFieldError: If strict and params has unknown fields
            InvalidSlideFieldError: If a known field has an unusable value
        """
        unknown = set(params) - set(SlideParams.model_fields)
        if unknown:
            if strict:
                raise UnknownSlideFieldError(unknown)
            logger.warning("slide.unknown_fields", fields=sorted(unknown))

        try:
            known = SlideParams(**{k: v for k, v in params.items() if k not in unknown})
        except ValidationError as e:
            error = e.errors()[0]
            raise InvalidSlideFieldError(str(error["loc"][0]), error["msg"]) from e
        return cls(**dict(known), **collaborators)

    # Content

    @property
    def content(self) -> str:
        """The raw, unformatted slide content."""
        return self._content

    @content.setter
    def content(self, value: Optional[str]) -> None:
        self._content = _line(value)

    def append(self, value: Optional[str]) -> "Slide":
        """Add raw content after what the slide already holds."""
        self._content += _line(value)
        return self

    def __lshift__(self, value: Optional[str]) -> "Slide":
        return self.append(value)

    @property
    def is_empty(self) -> bool:
        return self._content.strip() == ""

    # Metadata

    @property
    def metadata(self) -> Metadata:
        return self._metadata if self._metadata is not None else Metadata.empty()

    @metadata.setter
    def metadata(self, value: Optional[Union[Metadata, str]]) -> None:
        if value is None or isinstance(value, Metadata):
            self._metadata = value
        else:
            self._metadata = Metadata.parse(value)

    @property
    def classes(self) -> str:
        return " ".join(self.metadata.classes)

    @property
    def transition(self) -> str:
        return self.metadata.transition or "none"

    @property
    def id(self) -> str:
        slide_id = self.metadata.id
        return "" if slide_id is None else str(slide_id)

    # Position

    @property
    def section(self) -> Optional[Section]:
        """The section this slide belongs to, looked up by key."""
        if self.sections is None:
            return None
        return self.sections.get(self.section_key)

    @section.setter
    def section(self, key: Optional[str]) -> None:
        self.section_key = key

    @property
    def reference(self) -> str:
        section = self.section
        title = section.title if section is not None and section.title else "slide"
        sequence = "" if self.sequence is None else self.sequence
        return f"{title}/{sequence}"

    # Rendering

    def content_as_html(self) -> str:
        """HTML rendering of the slide's raw content."""
        if self.markdown_renderer is None:
            raise RendererNotConfiguredError("markdown")
        return self.markdown_renderer.render(self._content)

    def render_context(self) -> Dict[str, Any]:
        """Values exposed to the slide template."""
        return {
            "content_as_html": self.content_as_html(),
            "classes": self.classes,
            "transition": self.transition,
            "id": self.id,
            "reference": self.reference,
            "sequence": self.sequence,
            "section": self.section,
            "metadata": self.metadata,
            "content": self.content,
            "slide": self,
        }

    def to_html(self) -> str:
        """The HTML representation of the slide."""
        if self.template_renderer is None:
            raise RendererNotConfiguredError("template")
        logger.debug("slide.render", reference=self.reference, template=self.template_name)
        return self.template_renderer.render(self.template_name, self.render_context())

    def __repr__(self) -> str:
        return (
            f"Slide(reference={self.reference!r}, "
            f"content_length={len(self._content)}, metadata={str(self.metadata)!r})"
        )
