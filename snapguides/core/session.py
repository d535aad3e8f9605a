# snapguides/core/session.py
"""
Host-side drag gesture loop around the stateless resolver.
Owns what the editor owns between pointer-move events: the candidate index built at
drag start and last frame's snaps per axis. Also applies the editor's page
constraints and the page-break hint line.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass

from snapguides.core.config import PAGE_BREAK_GUIDE_DISTANCE
from snapguides.core.resolver import compute_guides_and_snaps
from snapguides.core.spatial_index import SpatialIndex
from snapguides.core.types import (
    DEFAULT_GUIDES_CONFIG,
    ElementData,
    FrameResult,
    Guide,
    GuidesConfig,
    LastSnap,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionFrame:
    """Position applied to the dragged element and guides to draw for one move event."""
    x: float
    y: float
    frame: FrameResult
    guides: tuple[Guide, ...]


def last_snap_from(key: str | None, guides: Iterable[Guide], axis: str) -> LastSnap | None:
    """LastSnap for the next frame: the key plus the matching guide's position."""
    if key is None:
        return None
    pos = next((g.pos for g in guides if g.axis == axis and g.kind == "align"), 0.0)
    return LastSnap(key=key, pos=pos)


def clamp_to_page(x: float, y: float, w: float, page_width: float) -> tuple[float, float]:
    """Keep the element inside the page horizontally and below the page top."""
    if x < 0:
        x = 0.0
    if x + w > page_width:
        x = page_width - w
    if y < 0:
        y = 0.0
    return x, y


def page_break_guide(
    bottom: float,
    page_width: float,
    page_height: float,
    distance: float = PAGE_BREAK_GUIDE_DISTANCE,
) -> Guide | None:
    """Horizontal hint at the nearest page boundary when the bottom edge nears it past page one."""
    page_number = math.floor(bottom / page_height)
    if page_number <= 0:
        return None
    boundary = page_number * page_height
    if abs(bottom - boundary) >= distance:
        return None
    return Guide(axis="y", pos=boundary, span1=0.0, span2=page_width, kind="page_break")


class DragSession:
    """
    One drag gesture at a time: start() at pointer down, move() per pointer move,
    end() at pointer up. Snaps reset at both ends of the gesture.
    """

    def __init__(self, config: GuidesConfig = DEFAULT_GUIDES_CONFIG) -> None:
        self.config = config
        self.index = SpatialIndex()
        self.active_id: str | None = None
        self.last_snap_x: LastSnap | None = None
        self.last_snap_y: LastSnap | None = None

    @property
    def is_active(self) -> bool:
        return self.active_id is not None

    def start(self, active_id: str, elements: Iterable[ElementData]) -> None:
        """Build the candidate index without the dragged element and clear snaps."""
        self.active_id = active_id
        self.index.build(el for el in elements if el.id != active_id)
        self.last_snap_x = None
        self.last_snap_y = None
        logger.debug("drag start %s with %d candidates", active_id, len(self.index))

    def move(self, active: ElementData, raw_x: float, raw_y: float, zoom: float = 1.0) -> SessionFrame:
        """Resolve one pointer move and remember this frame's snaps."""
        if self.active_id is None:
            raise RuntimeError("move() called outside a drag; call start() first")
        cfg = self.config
        frame = compute_guides_and_snaps(
            active.with_position(raw_x, raw_y),
            raw_x,
            raw_y,
            zoom,
            self.index,
            cfg,
            self.last_snap_x,
            self.last_snap_y,
        )
        x, y = clamp_to_page(frame.corrected_x, frame.corrected_y, active.w, cfg.page_width)

        self.last_snap_x = last_snap_from(frame.snap_key_x, frame.guides, "x")
        self.last_snap_y = last_snap_from(frame.snap_key_y, frame.guides, "y")

        guides = frame.guides
        pb = page_break_guide(y + active.h, cfg.page_width, cfg.page_height)
        if pb is not None:
            guides = guides + (pb,)
        return SessionFrame(x=x, y=y, frame=frame, guides=guides)

    def end(self) -> None:
        """Drop the gesture state; the host clears the overlay."""
        logger.debug("drag end %s", self.active_id)
        self.active_id = None
        self.last_snap_x = None
        self.last_snap_y = None
