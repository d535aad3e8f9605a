# snapguides/core/replay.py
"""
Replay a recorded drag trace through a DragSession, the way the editor would call it
on each pointer move. Counts snapped frames and snap-key switches (guide flicker).
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from snapguides.core.session import DragSession, SessionFrame
from snapguides.core.types import (
    DEFAULT_GUIDES_CONFIG,
    Document,
    ElementData,
    GuidesConfig,
    TracePoint,
)


@dataclass
class ReplaySummary:
    """Summary of one replayed drag gesture."""
    active_id: str
    n_frames: int
    snapped_x: int
    snapped_y: int
    key_switches_x: int
    key_switches_y: int
    frames: list[SessionFrame] = field(default_factory=list)

    @property
    def flicker_rate(self) -> float:
        """Snap-key changes per frame transition, both axes."""
        transitions = max(1, self.n_frames - 1)
        return (self.key_switches_x + self.key_switches_y) / transitions

    def as_dict(self) -> dict:
        return {
            "active_id": self.active_id,
            "n_frames": self.n_frames,
            "snapped_x": self.snapped_x,
            "snapped_y": self.snapped_y,
            "key_switches_x": self.key_switches_x,
            "key_switches_y": self.key_switches_y,
            "flicker_rate": self.flicker_rate,
        }


def _switches(keys: list[str | None]) -> int:
    return sum(1 for a, b in zip(keys, keys[1:]) if a != b)


def replay_trace(
    elements: Sequence[ElementData],
    active: ElementData,
    trace: Sequence[TracePoint],
    config: GuidesConfig = DEFAULT_GUIDES_CONFIG,
) -> ReplaySummary:
    """Run start/move.../end for active over trace. An empty trace yields an empty summary."""
    session = DragSession(config)
    session.start(active.id, elements)
    frames: list[SessionFrame] = []
    try:
        for p in trace:
            frames.append(session.move(active, p.x, p.y, p.zoom))
    finally:
        session.end()

    keys_x = [f.frame.snap_key_x for f in frames]
    keys_y = [f.frame.snap_key_y for f in frames]
    return ReplaySummary(
        active_id=active.id,
        n_frames=len(frames),
        snapped_x=sum(1 for k in keys_x if k is not None),
        snapped_y=sum(1 for k in keys_y if k is not None),
        key_switches_x=_switches(keys_x),
        key_switches_y=_switches(keys_y),
        frames=frames,
    )


def replay_document(
    document: Document,
    active_id: str,
    trace: Sequence[TracePoint],
    config: GuidesConfig | None = None,
) -> ReplaySummary:
    """Replay with the document's page size. Raises ValueError if active_id is not in the document."""
    active = document.get(active_id)
    if active is None:
        raise ValueError(f"Active element not found in document: {active_id!r}")
    cfg = config or GuidesConfig(page_width=document.page_width, page_height=document.page_height)
    return replay_trace(document.elements, active, trace, cfg)
