"""
presto-slide: the slide abstraction of a markdown presentation tool.
"""

from presto_slide.domain.entities.slide import Slide, SlideParams
from presto_slide.domain.services.section_registry import SectionRegistry
from presto_slide.domain.value_objects.metadata import Metadata
from presto_slide.domain.value_objects.section import Section
from presto_slide.infra.config.dependencies import build_slide, build_slide_from_params

__all__ = [
    "Slide",
    "SlideParams",
    "Metadata",
    "Section",
    "SectionRegistry",
    "build_slide",
    "build_slide_from_params",
]
