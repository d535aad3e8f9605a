# snapguides/core/config.py
"""
Central configuration for alignment guides and snapping.
All tunable values live here; no magic numbers in other modules.
Screen-pixel values are converted to world units by dividing by zoom.
"""

from __future__ import annotations
import os

# ----- Paths (repo-relative) -----
REPORTS_DIR: str = "reports"

# ----- Page (A4 in points, world units) -----
PAGE_WIDTH: float = 595.0
PAGE_HEIGHT: float = 842.0

# ----- Snapping -----
SNAP_THRESHOLD_PX: float = 8.0
"""Distance (screen px) within which an anchor pair becomes a candidate match."""

HYSTERESIS_PX: float = 5.0
"""Extra tolerance (screen px) that keeps last frame's match locked."""

GRID_ENABLED: bool = True
GRID_SIZE: float = 5.0
"""Grid step (world units) used when no alignment match exists."""

# ----- Scoring. Empirically tuned; tests pin these exact values -----
SCORE_PAGE: float = 100.0
SCORE_PAGE_CENTER: float = 20.0
SCORE_PAGE_LEFT: float = 15.0

SCORE_SAME_ANCHOR: float = 80.0
SCORE_LEFT_LEFT: float = 30.0
SCORE_LEFT_LEFT_TEXT: float = 20.0
"""Both elements are text: paragraph starts line up."""
SCORE_TOP_TOP: float = 25.0
SCORE_TOP_TOP_TEXT: float = 15.0
SCORE_CENTER_CENTER: float = 10.0

SCORE_EDGE_TO_EDGE: float = 60.0
SCORE_TOP_TO_BOTTOM: float = 10.0
"""Active top on target bottom: vertical stacking."""

SCORE_TEXT_TARGET: float = 10.0
SCORE_DELTA_PENALTY: float = 2.0
"""Score -= SCORE_DELTA_PENALTY * |delta|."""

# ----- Host boundary (canvas object normalisation) -----
MIN_ELEMENT_SIZE: float = 5.0
"""Canvas objects smaller than this (world units) in either dimension are ignored."""

BACKGROUND_PAGE_FRACTION: float = 0.9
"""Rects covering more than this fraction of the page in both dimensions are backgrounds."""

TEXT_OBJECT_TYPES: tuple[str, ...] = ("textbox", "i-text", "text")
SHAPE_OBJECT_TYPES: tuple[str, ...] = ("rect", "circle", "ellipse", "polygon", "image")

PAGE_BREAK_GUIDE_DISTANCE: float = 50.0
"""Show a page-break guide when the dragged bottom edge is this close to a page boundary."""

# ----- Rendering -----
GUIDE_COLOR: str = "#ff2d55"
GUIDE_LINE_WIDTH: float = 1.0
GUIDE_DASH_PATTERN: tuple[float, ...] = (4.0, 4.0)

RENDER_WIDTH_PX: int = 800
RENDER_HEIGHT_PX: int = 1100

# ----- Zoom -----
ZOOM_LEVELS_DEFAULT: tuple[float, ...] = (0.5, 1.0, 2.0)
"""Default zoom levels for evaluation and the playground."""

# ----- Evaluation -----
SEED: int | None = 42
"""Random seed for synthetic documents and jitter traces; None for non-deterministic."""

EVAL_TRACE_STEPS: int = 60
EVAL_JITTER_PX: float = 3.0
"""Pointer jitter amplitude (screen px) in synthetic drag traces."""

# ----- Debug flags -----
GUIDES_DEBUG: bool = os.environ.get("GUIDES_DEBUG", "").lower() in ("1", "true", "yes")
"""Log every resolved frame. Set env GUIDES_DEBUG=1 to enable."""
