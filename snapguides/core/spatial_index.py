# snapguides/core/spatial_index.py
"""
Candidate set for alignment matching. A thin eligibility filter rebuilt per frame
(or per drag start); at tens of elements no bucketing is needed.
"""

from __future__ import annotations

from collections.abc import Iterable

from snapguides.core.types import ElementData


def is_eligible(el: ElementData) -> bool:
    """Visible, not a guide, not a page break, positive width and height."""
    return not el.hidden and not el.is_guide and not el.is_page_break and el.w > 0 and el.h > 0


class SpatialIndex:
    """Holds the current frame's eligible elements in input order."""

    def __init__(self) -> None:
        self._elements: tuple[ElementData, ...] = ()

    def build(self, elements: Iterable[ElementData]) -> None:
        """Replace contents with the eligible subset of elements."""
        self._elements = tuple(el for el in elements if is_eligible(el))

    def get_all(self) -> tuple[ElementData, ...]:
        return self._elements

    def __len__(self) -> int:
        return len(self._elements)
