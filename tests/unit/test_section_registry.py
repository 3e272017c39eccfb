"""
Unit tests for sections and the section registry.
"""

import pytest
from pydantic import ValidationError

from presto_slide.domain.services.section_registry import SectionRegistry
from presto_slide.domain.value_objects.section import Section


class TestSectionRegistry:
    def test_register_and_get(self):
        """Test sections are looked up by key."""
        registry = SectionRegistry()
        section = registry.register("intro", Section(title="Intro"))

        assert registry.get("intro") is section
        assert "intro" in registry
        assert len(registry) == 1
        assert list(registry) == ["intro"]

    def test_get_unknown_or_none_key(self):
        """Test unknown and missing keys resolve to None."""
        registry = SectionRegistry()

        assert registry.get("nope") is None
        assert registry.get(None) is None

    def test_register_replaces(self):
        """Test registering under an existing key replaces the section."""
        registry = SectionRegistry()
        registry.register("intro", Section(title="Intro"))
        registry.register("intro", Section(title="Overview"))

        assert registry.get("intro").title == "Overview"
        assert len(registry) == 1

    def test_remove(self):
        """Test removing reports whether a section was present."""
        registry = SectionRegistry()
        registry.register("intro", Section(title="Intro"))

        assert registry.remove("intro") is True
        assert registry.remove("intro") is False
        assert "intro" not in registry


class TestSection:
    def test_section_is_immutable(self):
        """Test slides cannot change a section through a shared reference."""
        section = Section(title="Intro")

        with pytest.raises(ValidationError):
            section.title = "Other"

    def test_str(self):
        """Test str() gives the title or an empty string."""
        assert str(Section(title="Intro")) == "Intro"
        assert str(Section()) == ""
