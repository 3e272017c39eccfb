"""Section value object."""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class Section(BaseModel):
    """A titled group of slides. Slides refer to sections by key only."""

    model_config = ConfigDict(frozen=True)

    title: Optional[str] = None

    def __str__(self) -> str:
        return self.title or ""
