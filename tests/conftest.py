"""Global test configuration and fixtures."""

import pytest
import structlog

from presto_slide.domain.services.section_registry import SectionRegistry
from presto_slide.domain.value_objects.section import Section
from presto_slide.infra.config import dependencies
from presto_slide.infra.config.settings import reset_settings

SETTINGS_ENV_VARS = (
    "PRESTO_SLIDE_LOG_LEVEL",
    "PRESTO_SLIDE_LOG_FORMAT",
    "PRESTO_SLIDE_VIEWS_PATH",
    "PRESTO_SLIDE_TEMPLATE",
    "PRESTO_SLIDE_STRICT_PARAMS",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Start every test from default settings and fresh renderers."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    dependencies._template_renderers.clear()
    yield
    reset_settings()
    dependencies._template_renderers.clear()
    structlog.reset_defaults()


@pytest.fixture
def sections():
    """Registry holding an 'intro' section titled Intro."""
    registry = SectionRegistry()
    registry.register("intro", Section(title="Intro"))
    return registry


@pytest.fixture
def views_dir(tmp_path):
    """Views directory with a compact slide template."""
    (tmp_path / "slide.html").write_text(
        "{{ reference }}|{{ classes }}|{{ transition }}|{{ id }}|{{ content_as_html|safe }}",
        encoding="utf-8",
    )
    return tmp_path
