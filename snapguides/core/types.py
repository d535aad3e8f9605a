# snapguides/core/types.py
"""
Dataclasses for element snapshots, alignment matches, guides and frame results.
Everything handed out by the engine is frozen; the engine keeps no state between frames.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Literal

from snapguides.core.config import (
    GRID_ENABLED,
    GRID_SIZE,
    GUIDE_COLOR,
    GUIDE_DASH_PATTERN,
    GUIDE_LINE_WIDTH,
    HYSTERESIS_PX,
    PAGE_HEIGHT,
    PAGE_WIDTH,
    SNAP_THRESHOLD_PX,
)


Axis = Literal["x", "y"]
GuideKind = Literal["align", "page_break"]

PAGE_TARGET_ID = "page"


@dataclass(frozen=True)
class ElementData:
    """Alignment-relevant geometry of one element for the current frame (world units)."""
    id: str
    x: float
    y: float
    w: float
    h: float
    hidden: bool = False
    is_guide: bool = False
    is_page_break: bool = False
    is_text: bool = False

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def with_x(self, x: float) -> ElementData:
        return replace(self, x=x)

    def with_position(self, x: float, y: float) -> ElementData:
        return replace(self, x=x, y=y)


@dataclass(frozen=True)
class AlignMatch:
    """One candidate alignment on one axis between the active element and a target."""
    pos: float
    delta: float
    active_anchor: str
    target_anchor: str
    target_id: str
    span_min: float
    span_max: float
    target_is_text: bool = False

    @property
    def key(self) -> str:
        """Composite identity used for hysteresis: 'left->el-3:right'."""
        return f"{self.active_anchor}->{self.target_id}:{self.target_anchor}"

    @property
    def is_page(self) -> bool:
        return self.target_id == PAGE_TARGET_ID


@dataclass(frozen=True)
class ScoredMatch:
    match: AlignMatch
    score: float


@dataclass(frozen=True)
class Guide:
    """A renderable alignment line. axis 'x' is a vertical line, 'y' horizontal."""
    axis: Axis
    pos: float
    span1: float
    span2: float
    from_anchor: str | None = None
    to_anchor: str | None = None
    kind: GuideKind = "align"


@dataclass(frozen=True)
class LastSnap:
    """Per-axis memory of last frame's match. Owned and threaded by the caller."""
    key: str
    pos: float


@dataclass(frozen=True)
class FrameResult:
    corrected_x: float
    corrected_y: float
    guides: tuple[Guide, ...] = ()
    snap_key_x: str | None = None
    snap_key_y: str | None = None


@dataclass(frozen=True)
class GuidesConfig:
    """Per-session snapping configuration. Thresholds in screen px, grid and page in world units."""
    snap_threshold_px: float = SNAP_THRESHOLD_PX
    hysteresis_px: float = HYSTERESIS_PX
    grid_enabled: bool = GRID_ENABLED
    grid_size: float = GRID_SIZE
    page_width: float = PAGE_WIDTH
    page_height: float = PAGE_HEIGHT


@dataclass(frozen=True)
class RendererConfig:
    color: str = GUIDE_COLOR
    line_width: float = GUIDE_LINE_WIDTH
    dash_pattern: tuple[float, ...] = GUIDE_DASH_PATTERN


DEFAULT_GUIDES_CONFIG = GuidesConfig()
DEFAULT_RENDERER_CONFIG = RendererConfig()


@dataclass(frozen=True)
class TracePoint:
    """One pointer-move sample of a drag gesture: proposed top-left and zoom."""
    x: float
    y: float
    zoom: float = 1.0


@dataclass
class Document:
    """Host document snapshot: page size plus normalised elements."""
    elements: list[ElementData]
    page_width: float = PAGE_WIDTH
    page_height: float = PAGE_HEIGHT
    source: str = ""
    skipped: list[str] = field(default_factory=list)

    def get(self, element_id: str) -> ElementData | None:
        for el in self.elements:
            if el.id == element_id:
                return el
        return None
