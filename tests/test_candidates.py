# tests/test_candidates.py
"""
Candidate enumeration per axis: page anchors, sibling anchors, spans, threshold filter.
"""

from __future__ import annotations

import pytest

from snapguides.core.candidates import find_alignments_x, find_alignments_y, page_anchors_x, page_anchors_y
from snapguides.core.types import PAGE_TARGET_ID, ElementData


def test_page_anchors() -> None:
    assert page_anchors_x(600) == (("page-left", 0.0), ("page-center", 300.0), ("page-right", 600.0))
    # the canvas grows downward: top only
    assert page_anchors_y(842) == (("page-top", 0.0),)


def test_x_candidates_include_all_anchor_pairs_within_threshold() -> None:
    active = ElementData(id="a", x=0, y=100, w=20, h=10)
    sibling = ElementData(id="b", x=50, y=0, w=20, h=10)
    # active at 52: anchors 52, 62, 72; sibling anchors 50, 60, 70
    matches = find_alignments_x(active, 52, [sibling], 595, 8)
    keys = {m.key for m in matches}
    assert keys == {
        "left->b:left",
        "left->b:center",
        "center->b:center",
        "center->b:right",
        "right->b:right",
    }
    ll = next(m for m in matches if m.key == "left->b:left")
    assert ll.delta == pytest.approx(-2)
    assert ll.pos == 50
    assert (ll.span_min, ll.span_max) == (0, 110)


def test_x_page_candidates_come_first_with_page_span() -> None:
    active = ElementData(id="a", x=0, y=100, w=20, h=10)
    sibling = ElementData(id="b", x=3, y=0, w=20, h=10)
    matches = find_alignments_x(active, 2, [sibling], 595, 8)
    assert matches[0].target_id == PAGE_TARGET_ID
    assert matches[0].key == "left->page:page-left"
    assert (matches[0].span_min, matches[0].span_max) == (0, 110)
    assert any(m.target_id == "b" for m in matches)


def test_active_element_is_skipped() -> None:
    active = ElementData(id="a", x=100, y=100, w=20, h=10)
    assert find_alignments_x(active, 100, [active], 595, 8) == []


def test_threshold_filter() -> None:
    active = ElementData(id="a", x=0, y=100, w=20, h=10)
    sibling = ElementData(id="b", x=300, y=0, w=20, h=10)
    assert find_alignments_x(active, 150, [sibling], 595, 8) == []


def test_y_candidates_use_horizontal_span() -> None:
    active = ElementData(id="a", x=10, y=0, w=20, h=10)
    sibling = ElementData(id="b", x=200, y=100, w=50, h=10)
    matches = find_alignments_y(active, 98, [sibling], 842, 3)
    tt = next(m for m in matches if m.key == "top->b:top")
    assert tt.pos == 100
    assert tt.delta == pytest.approx(2)
    assert (tt.span_min, tt.span_max) == (10, 250)


def test_y_page_top_span_reaches_active_right() -> None:
    active = ElementData(id="a", x=40, y=0, w=20, h=10)
    matches = find_alignments_y(active, 4, [], 842, 8)
    assert [m.key for m in matches] == ["top->page:page-top"]
    assert (matches[0].span_min, matches[0].span_max) == (0, 60)


def test_target_text_flag_is_carried() -> None:
    active = ElementData(id="a", x=0, y=100, w=20, h=10)
    sibling = ElementData(id="t", x=100, y=0, w=20, h=10, is_text=True)
    matches = find_alignments_x(active, 100, [sibling], 595, 1)
    assert matches and all(m.target_is_text for m in matches)
