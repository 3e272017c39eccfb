"""
Slide metadata value object.

A slide directive is a single line such as::

    !SLIDE transition=fade one two #intro three

Tokens starting with ``#`` name the slide id, ``key=value`` tokens are named
attributes (``transition`` is promoted to its own field) and every other
token is a CSS class.
"""

from typing import Dict, List, Optional, Tuple

import structlog
from pydantic import BaseModel, ConfigDict, Field

from presto_slide.domain.exceptions import MetadataParseError

SLIDE_MARKER = "!SLIDE"

logger = structlog.get_logger("domain.metadata")


class Metadata(BaseModel):
    """Display attributes of a single slide."""

    model_config = ConfigDict(frozen=True)

    classes: Tuple[str, ...] = ()
    transition: Optional[str] = None
    id: Optional[str] = None
    attributes: Dict[str, str] = Field(default_factory=dict)

    @classmethod
    def empty(cls) -> "Metadata":
        """Metadata of a slide without a directive."""
        return cls()

    @classmethod
    def parse(cls, directive: Optional[str]) -> "Metadata":
        """Parse a directive, falling back to ``Metadata.empty()`` when it is malformed."""
        try:
            return cls.parse_strict(directive)
        except MetadataParseError as e:
            logger.warning(
                "metadata.parse_failed",
                directive=e.directive,
                token=e.token,
                reason=e.reason,
            )
            return cls.empty()

    @classmethod
    def parse_strict(cls, directive: Optional[str]) -> "Metadata":
        """
        Parse a directive line.

        Args:
            directive: Raw directive text, with or without the leading marker

        Returns:
            Metadata: Parsed metadata; empty for blank input

        Raises:
            MetadataParseError: If a token is malformed
        """
        if directive is None or not directive.strip():
            return cls.empty()

        tokens = directive.split()
        if tokens[0].upper() == SLIDE_MARKER:
            tokens = tokens[1:]

        classes: List[str] = []
        transition: Optional[str] = None
        slide_id: Optional[str] = None
        attributes: Dict[str, str] = {}

        for token in tokens:
            if token.startswith("#"):
                if len(token) == 1:
                    raise MetadataParseError(directive, token, "missing id after '#'")
                slide_id = token[1:]
            elif "=" in token:
                key, _, value = token.partition("=")
                if not key:
                    raise MetadataParseError(directive, token, "missing attribute name")
                if not value:
                    raise MetadataParseError(
                        directive, token, f"missing value for attribute {key!r}"
                    )
                if key == "transition":
                    transition = value
                else:
                    attributes[key] = value
            elif token not in classes:
                classes.append(token)

        return cls(
            classes=tuple(classes),
            transition=transition,
            id=slide_id,
            attributes=attributes,
        )

    @property
    def is_empty(self) -> bool:
        return self == Metadata.empty()

    @property
    def has_transition(self) -> bool:
        return self.transition is not None

    def __str__(self) -> str:
        tokens = []
        if self.transition is not None:
            tokens.append(f"transition={self.transition}")
        tokens.extend(f"{key}={value}" for key, value in self.attributes.items())
        tokens.extend(self.classes)
        if self.id is not None:
            tokens.append(f"#{self.id}")
        return " ".join(tokens)
