# tests/test_geometry.py
"""
Deterministic tests for geometry helpers and the candidate index.
"""

from __future__ import annotations

import pytest

from snapguides.core.geometry import (
    anchors_x,
    anchors_y,
    element_box,
    grid_snap,
    horizontal_span,
    scene_bounds,
    vertical_span,
)
from snapguides.core.spatial_index import SpatialIndex, is_eligible
from snapguides.core.types import ElementData


def test_anchors() -> None:
    assert anchors_x(10, 40) == (("left", 10), ("center", 30), ("right", 50))
    assert anchors_y(0, 11) == (("top", 0), ("center", 5.5), ("bottom", 11))


def test_spans_cover_both_boxes() -> None:
    a = ElementData(id="a", x=100, y=50, w=40, h=10)
    b = ElementData(id="b", x=120, y=0, w=60, h=10)
    assert vertical_span(a, b) == (0, 60)
    assert horizontal_span(a, b) == (100, 180)


@pytest.mark.parametrize(
    "value, grid, expected",
    [(13, 5, 15), (12, 5, 10), (12.5, 5, 15), (-12.5, 5, -10), (-13, 5, -15), (7, 0, 7), (7, -5, 7)],
)
def test_grid_snap(value: float, grid: float, expected: float) -> None:
    assert grid_snap(value, grid) == pytest.approx(expected)


def test_element_box_and_scene_bounds() -> None:
    el = ElementData(id="a", x=10, y=20, w=30, h=40)
    assert element_box(el).bounds == (10, 20, 40, 60)
    below = ElementData(id="b", x=-5, y=900, w=10, h=10)
    assert scene_bounds([el, below], 595, 842) == (-5, 0, 595, 910)


def test_eligibility() -> None:
    assert is_eligible(ElementData(id="a", x=0, y=0, w=1, h=1))
    assert not is_eligible(ElementData(id="a", x=0, y=0, w=1, h=1, hidden=True))
    assert not is_eligible(ElementData(id="a", x=0, y=0, w=1, h=1, is_guide=True))
    assert not is_eligible(ElementData(id="a", x=0, y=0, w=1, h=1, is_page_break=True))
    assert not is_eligible(ElementData(id="a", x=0, y=0, w=0, h=1))
    assert not is_eligible(ElementData(id="a", x=0, y=0, w=1, h=-1))


def test_index_rebuild_replaces_contents_in_order() -> None:
    idx = SpatialIndex()
    assert idx.get_all() == ()
    a = ElementData(id="a", x=0, y=0, w=1, h=1)
    hidden = ElementData(id="h", x=0, y=0, w=1, h=1, hidden=True)
    b = ElementData(id="b", x=5, y=5, w=1, h=1)
    idx.build([a, hidden, b])
    assert [el.id for el in idx.get_all()] == ["a", "b"]
    assert len(idx) == 2
    idx.build([b])
    assert [el.id for el in idx.get_all()] == ["b"]
