# tests/test_scoring.py
"""
Heuristic scoring weights and per-axis selection with hysteresis.
"""

from __future__ import annotations

import pytest

from snapguides.core.scoring import find_locked, score_match, score_matches, select_best_match
from snapguides.core.types import AlignMatch, LastSnap


def _m(active_anchor: str, target_anchor: str, target_id: str = "b", delta: float = 0.0, text: bool = False) -> AlignMatch:
    return AlignMatch(
        pos=100.0,
        delta=delta,
        active_anchor=active_anchor,
        target_anchor=target_anchor,
        target_id=target_id,
        span_min=0.0,
        span_max=10.0,
        target_is_text=text,
    )


def test_page_center_score() -> None:
    assert score_match(_m("center", "page-center", "page")) == pytest.approx(120)
    assert score_match(_m("left", "page-left", "page")) == pytest.approx(115)
    assert score_match(_m("right", "page-right", "page")) == pytest.approx(100)
    assert score_match(_m("top", "page-top", "page")) == pytest.approx(100)


def test_same_anchor_scores() -> None:
    assert score_match(_m("left", "left")) == pytest.approx(110)
    assert score_match(_m("top", "top")) == pytest.approx(105)
    assert score_match(_m("center", "center")) == pytest.approx(90)
    assert score_match(_m("right", "right")) == pytest.approx(80)
    assert score_match(_m("bottom", "bottom")) == pytest.approx(80)


def test_text_bonuses() -> None:
    # left-left between two text runs: 80 + 30 + 20, plus 10 for a text target
    assert score_match(_m("left", "left", text=True), active_is_text=True) == pytest.approx(140)
    assert score_match(_m("top", "top", text=True), active_is_text=True) == pytest.approx(130)
    # active not text: only the text-target bonus applies
    assert score_match(_m("left", "left", text=True), active_is_text=False) == pytest.approx(120)


def test_edge_to_edge_scores() -> None:
    assert score_match(_m("right", "left")) == pytest.approx(60)
    assert score_match(_m("left", "right")) == pytest.approx(60)
    assert score_match(_m("bottom", "top")) == pytest.approx(60)
    assert score_match(_m("top", "bottom")) == pytest.approx(70)


def test_delta_penalty() -> None:
    assert score_match(_m("left", "left", delta=-3.0)) == pytest.approx(104)
    assert score_match(_m("center", "left", delta=2.0)) == pytest.approx(-4)


def test_text_left_alignment_beats_page_center() -> None:
    page_center = _m("center", "page-center", "page")
    text_left = _m("left", "left", "t", text=True)
    ranked = score_matches([page_center, text_left], active_is_text=True)
    assert ranked[0].match is text_left


def test_page_center_beats_plain_left_alignment() -> None:
    page_center = _m("center", "page-center", "page")
    plain_left = _m("left", "left")
    assert select_best_match([plain_left, page_center], None, 8.0, 5.0) is page_center


def test_ties_keep_enumeration_order() -> None:
    first = _m("left", "left", "b")
    second = _m("left", "left", "c")
    assert select_best_match([first, second], None, 8.0, 5.0) is first


def test_non_positive_score_is_rejected() -> None:
    assert select_best_match([_m("center", "left")], None, 8.0, 5.0) is None
    assert select_best_match([], None, 8.0, 5.0) is None


def test_unlocked_candidates_limited_to_threshold() -> None:
    far = _m("left", "left", delta=10.0)
    assert select_best_match([far], None, 8.0, 5.0) is None


def test_lock_wins_within_hysteresis_band() -> None:
    locked = _m("right", "left", "b", delta=10.0)
    better = _m("left", "left", "c", delta=0.0)
    last = LastSnap(key=locked.key, pos=100.0)
    assert find_locked([better, locked], last, 8.0, 5.0) is locked
    assert select_best_match([better, locked], last, 8.0, 5.0) is locked


def test_lock_expires_beyond_band() -> None:
    locked = _m("right", "left", "b", delta=13.5)
    better = _m("left", "left", "c", delta=0.0)
    last = LastSnap(key=locked.key, pos=100.0)
    assert find_locked([better, locked], last, 8.0, 5.0) is None
    assert select_best_match([better, locked], last, 8.0, 5.0) is better


def test_stale_lock_key_is_ignored() -> None:
    m = _m("left", "left")
    last = LastSnap(key="left->gone:left", pos=0.0)
    assert select_best_match([m], last, 8.0, 5.0) is m


def test_match_key_format() -> None:
    assert _m("left", "right", "el-3").key == "left->el-3:right"
    assert _m("center", "page-center", "page").is_page
