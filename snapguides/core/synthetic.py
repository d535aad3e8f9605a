# snapguides/core/synthetic.py
"""
Seeded synthetic resume-like pages and jittered drag traces for evaluation,
tests and the playground. Deterministic for a given seed.
"""

from __future__ import annotations

import numpy as np

from snapguides.core.config import EVAL_JITTER_PX, EVAL_TRACE_STEPS, PAGE_HEIGHT, PAGE_WIDTH
from snapguides.core.types import Document, ElementData, TracePoint

MARGIN = 40.0
ACTIVE_ID = "active"


def synthetic_document(
    seed: int | None,
    n_blocks: int = 8,
    page_width: float = PAGE_WIDTH,
    page_height: float = PAGE_HEIGHT,
) -> Document:
    """
    A column of text blocks on the left margin, a sidebar of shapes, and one dragged
    text block ('active'). Block heights and gaps vary with the seed.
    """
    rng = np.random.default_rng(seed)
    elements: list[ElementData] = []
    y = MARGIN
    column_w = page_width * 0.6
    for i in range(n_blocks):
        h = float(rng.uniform(12.0, 60.0))
        w = float(rng.uniform(column_w * 0.5, column_w))
        elements.append(ElementData(id=f"text-{i}", x=MARGIN, y=round(y, 2), w=round(w, 2), h=round(h, 2), is_text=True))
        y += h + float(rng.uniform(8.0, 24.0))
        if y > page_height - MARGIN:
            break

    side_x = MARGIN + column_w + 20.0
    side_w = page_width - side_x - MARGIN
    for i in range(3):
        sy = MARGIN + i * float(rng.uniform(80.0, 140.0))
        elements.append(ElementData(id=f"shape-{i}", x=round(side_x, 2), y=round(sy, 2), w=round(side_w, 2), h=30.0))

    elements.append(ElementData(id=ACTIVE_ID, x=MARGIN + 60.0, y=page_height * 0.7, w=160.0, h=24.0, is_text=True))
    return Document(elements=elements, page_width=page_width, page_height=page_height, source=f"synthetic_{seed}")


def jitter_trace(
    start: tuple[float, float],
    end: tuple[float, float],
    seed: int | None,
    steps: int = EVAL_TRACE_STEPS,
    jitter_px: float = EVAL_JITTER_PX,
    zoom: float = 1.0,
) -> list[TracePoint]:
    """Straight drag from start to end with uniform pointer jitter (screen px, converted by zoom)."""
    rng = np.random.default_rng(seed)
    t = np.linspace(0.0, 1.0, max(2, steps))
    xs = start[0] + (end[0] - start[0]) * t
    ys = start[1] + (end[1] - start[1]) * t
    amp = jitter_px / zoom
    xs = xs + rng.uniform(-amp, amp, size=xs.shape)
    ys = ys + rng.uniform(-amp, amp, size=ys.shape)
    return [TracePoint(x=float(x), y=float(y), zoom=zoom) for x, y in zip(xs, ys)]


def hover_trace(
    target: tuple[float, float],
    seed: int | None,
    steps: int = EVAL_TRACE_STEPS,
    jitter_px: float = EVAL_JITTER_PX,
    zoom: float = 1.0,
) -> list[TracePoint]:
    """Pointer held near one spot: the case where snap flicker is most visible."""
    return jitter_trace(target, target, seed, steps=steps, jitter_px=jitter_px, zoom=zoom)
