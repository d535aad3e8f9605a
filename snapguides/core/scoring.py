# snapguides/core/scoring.py
"""
Heuristic match scoring and per-axis selection with hysteresis.

Priority encoded by the weights: page alignment and same-anchor alignment
(left edges and top edges above all, more so between two text runs) beat
edge-to-edge stacking, which beats weak matches with no structural relation.
Closer matches win within a category. Weights from config.
"""

from __future__ import annotations

from collections.abc import Sequence

from snapguides.core.config import (
    SCORE_CENTER_CENTER,
    SCORE_DELTA_PENALTY,
    SCORE_EDGE_TO_EDGE,
    SCORE_LEFT_LEFT,
    SCORE_LEFT_LEFT_TEXT,
    SCORE_PAGE,
    SCORE_PAGE_CENTER,
    SCORE_PAGE_LEFT,
    SCORE_SAME_ANCHOR,
    SCORE_TEXT_TARGET,
    SCORE_TOP_TO_BOTTOM,
    SCORE_TOP_TOP,
    SCORE_TOP_TOP_TEXT,
)
from snapguides.core.types import AlignMatch, LastSnap, ScoredMatch

EDGE_TO_EDGE_PAIRS: frozenset[tuple[str, str]] = frozenset({
    ("left", "right"),
    ("right", "left"),
    ("top", "bottom"),
    ("bottom", "top"),
})


def score_match(m: AlignMatch, active_is_text: bool = False) -> float:
    """Heuristic usefulness of one candidate. Higher is better; <= 0 is never selected."""
    score = 0.0

    if m.is_page:
        score += SCORE_PAGE
        if "center" in m.target_anchor:
            score += SCORE_PAGE_CENTER
        if "left" in m.target_anchor:
            score += SCORE_PAGE_LEFT

    if m.active_anchor == m.target_anchor:
        score += SCORE_SAME_ANCHOR
        both_text = active_is_text and m.target_is_text
        if m.active_anchor == "left":
            score += SCORE_LEFT_LEFT
            if both_text:
                score += SCORE_LEFT_LEFT_TEXT
        elif m.active_anchor == "top":
            score += SCORE_TOP_TOP
            if both_text:
                score += SCORE_TOP_TOP_TEXT
        elif m.active_anchor == "center":
            score += SCORE_CENTER_CENTER

    if (m.active_anchor, m.target_anchor) in EDGE_TO_EDGE_PAIRS:
        score += SCORE_EDGE_TO_EDGE
        if m.active_anchor == "top" and m.target_anchor == "bottom":
            score += SCORE_TOP_TO_BOTTOM

    if m.target_is_text and not m.is_page:
        score += SCORE_TEXT_TARGET

    score -= abs(m.delta) * SCORE_DELTA_PENALTY
    return score


def score_matches(matches: Sequence[AlignMatch], active_is_text: bool = False) -> list[ScoredMatch]:
    """All candidates with scores, best first. Ties keep enumeration order."""
    scored = [ScoredMatch(match=m, score=score_match(m, active_is_text)) for m in matches]
    return sorted(scored, key=lambda s: s.score, reverse=True)


def find_locked(
    matches: Sequence[AlignMatch],
    last_snap: LastSnap | None,
    threshold: float,
    hysteresis: float,
) -> AlignMatch | None:
    """Last frame's match if it is still a candidate and within threshold + hysteresis."""
    if last_snap is None:
        return None
    for m in matches:
        if m.key == last_snap.key:
            return m if abs(m.delta) <= threshold + hysteresis else None
    return None


def select_best_match(
    matches: Sequence[AlignMatch],
    last_snap: LastSnap | None,
    threshold: float,
    hysteresis: float,
    active_is_text: bool = False,
) -> AlignMatch | None:
    """
    Best match for one axis, or None. A still-valid lock from last frame wins outright;
    otherwise the highest positive score among candidates within threshold.

    matches may have been gathered with the wider threshold + hysteresis radius;
    only the locked key may use that extra band.
    """
    if not matches:
        return None

    locked = find_locked(matches, last_snap, threshold, hysteresis)
    if locked is not None:
        return locked

    in_range = [m for m in matches if abs(m.delta) <= threshold]
    if not in_range:
        return None
    best = score_matches(in_range, active_is_text)[0]
    if best.score > 0:
        return best.match
    return None
