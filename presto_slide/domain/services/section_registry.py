"""
Section registry owned by the surrounding presentation.

Slides hold a section key and resolve it here on every read, so sections
can be rebuilt or renamed without touching the slides that point at them.
"""

from typing import Dict, Iterator, Optional

from presto_slide.domain.value_objects.section import Section


class SectionRegistry:
    def __init__(self) -> None:
        self._sections: Dict[str, Section] = {}

    def register(self, key: str, section: Section) -> Section:
        """Add or replace the section stored under ``key``."""
        self._sections[key] = section
        return section

    def get(self, key: Optional[str]) -> Optional[Section]:
        if key is None:
            return None
        return self._sections.get(key)

    def remove(self, key: str) -> bool:
        return self._sections.pop(key, None) is not None

    def __contains__(self, key: object) -> bool:
        return key in self._sections

    def __len__(self) -> int:
        return len(self._sections)

    def __iter__(self) -> Iterator[str]:
        return iter(self._sections)
