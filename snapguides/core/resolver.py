# snapguides/core/resolver.py
"""
Per-frame resolution: alignment match per axis, positional correction, grid fallback,
guide lines and snap keys for the next frame's hysteresis check.
Stateless; the caller threads last_snap_x / last_snap_y between frames.
"""

from __future__ import annotations

import logging

from snapguides.core.candidates import find_alignments_x, find_alignments_y
from snapguides.core.config import GUIDES_DEBUG
from snapguides.core.geometry import grid_snap
from snapguides.core.scoring import select_best_match
from snapguides.core.spatial_index import SpatialIndex
from snapguides.core.types import (
    DEFAULT_GUIDES_CONFIG,
    AlignMatch,
    Axis,
    ElementData,
    FrameResult,
    Guide,
    GuidesConfig,
    LastSnap,
)
from snapguides.core.zoom import world_thresholds

logger = logging.getLogger(__name__)


def match_to_guide(axis: Axis, m: AlignMatch) -> Guide:
    return Guide(
        axis=axis,
        pos=m.pos,
        span1=m.span_min,
        span2=m.span_max,
        from_anchor=m.active_anchor,
        to_anchor=m.target_anchor,
    )


def _correct(raw: float, best: AlignMatch | None, cfg: GuidesConfig) -> float:
    if best is not None:
        return raw + best.delta
    if cfg.grid_enabled:
        return grid_snap(raw, cfg.grid_size)
    return raw


def compute_guides_and_snaps(
    active: ElementData,
    raw_x: float,
    raw_y: float,
    zoom: float,
    index: SpatialIndex,
    cfg: GuidesConfig = DEFAULT_GUIDES_CONFIG,
    last_snap_x: LastSnap | None = None,
    last_snap_y: LastSnap | None = None,
) -> FrameResult:
    """
    Resolve one drag frame for active proposed at (raw_x, raw_y).

    Candidates are gathered within threshold, widened by the hysteresis band on an axis
    that has a lock, so a locked match survives small pointer jitter past the threshold.
    Y is matched with active moved to raw_x so horizontal guide spans use the new extent.
    """
    threshold, hysteresis = world_thresholds(cfg.snap_threshold_px, cfg.hysteresis_px, zoom)
    elements = index.get_all()

    radius_x = threshold + hysteresis if last_snap_x is not None else threshold
    radius_y = threshold + hysteresis if last_snap_y is not None else threshold

    active_with_x = active.with_x(raw_x)
    matches_x = find_alignments_x(active, raw_x, elements, cfg.page_width, radius_x)
    matches_y = find_alignments_y(active_with_x, raw_y, elements, cfg.page_height, radius_y)

    best_x = select_best_match(matches_x, last_snap_x, threshold, hysteresis, active.is_text)
    best_y = select_best_match(matches_y, last_snap_y, threshold, hysteresis, active.is_text)

    corrected_x = _correct(raw_x, best_x, cfg)
    corrected_y = _correct(raw_y, best_y, cfg)

    guides: list[Guide] = []
    if best_x is not None:
        guides.append(match_to_guide("x", best_x))
    if best_y is not None:
        guides.append(match_to_guide("y", best_y))

    result = FrameResult(
        corrected_x=corrected_x,
        corrected_y=corrected_y,
        guides=tuple(guides),
        snap_key_x=best_x.key if best_x is not None else None,
        snap_key_y=best_y.key if best_y is not None else None,
    )
    if GUIDES_DEBUG:
        logger.debug(
            "frame %s raw=(%.2f, %.2f) corrected=(%.2f, %.2f) keys=(%s, %s) candidates=(%d, %d)",
            active.id, raw_x, raw_y, corrected_x, corrected_y,
            result.snap_key_x, result.snap_key_y, len(matches_x), len(matches_y),
        )
    return result
