# snapguides/core/candidates.py
"""
Alignment candidates per axis: every page anchor and sibling anchor within threshold
of one of the active element's anchors at its proposed position.

X compares left/center/right against page-left/center/right and sibling anchors.
Y compares top/center/bottom against page-top only: the canvas grows downward,
so there is no fixed page center or bottom to align to.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from snapguides.core.geometry import anchors_x, anchors_y, horizontal_span, vertical_span
from snapguides.core.types import PAGE_TARGET_ID, AlignMatch, ElementData


def page_anchors_x(page_width: float) -> tuple[tuple[str, float], ...]:
    return (("page-left", 0.0), ("page-center", page_width / 2), ("page-right", page_width))


def page_anchors_y(page_height: float) -> tuple[tuple[str, float], ...]:
    # page_height is accepted for symmetry with X; only the top is an anchor.
    return (("page-top", 0.0),)


def _collect(
    active_anchors: tuple[tuple[str, float], ...],
    page_anchors: tuple[tuple[str, float], ...],
    page_span: tuple[float, float],
    active: ElementData,
    elements: Sequence[ElementData],
    threshold: float,
    target_anchors: Callable[[ElementData], tuple[tuple[str, float], ...]],
    span_fn: Callable[[ElementData, ElementData], tuple[float, float]],
) -> list[AlignMatch]:
    matches: list[AlignMatch] = []

    for page_name, page_pos in page_anchors:
        for active_name, active_pos in active_anchors:
            delta = page_pos - active_pos
            if abs(delta) <= threshold:
                matches.append(AlignMatch(
                    pos=page_pos,
                    delta=delta,
                    active_anchor=active_name,
                    target_anchor=page_name,
                    target_id=PAGE_TARGET_ID,
                    span_min=page_span[0],
                    span_max=page_span[1],
                ))

    for el in elements:
        if el.id == active.id:
            continue
        span_min, span_max = span_fn(active, el)
        el_anchors = target_anchors(el)
        for active_name, active_pos in active_anchors:
            for target_name, target_pos in el_anchors:
                delta = target_pos - active_pos
                if abs(delta) <= threshold:
                    matches.append(AlignMatch(
                        pos=target_pos,
                        delta=delta,
                        active_anchor=active_name,
                        target_anchor=target_name,
                        target_id=el.id,
                        span_min=span_min,
                        span_max=span_max,
                        target_is_text=el.is_text,
                    ))
    return matches


def find_alignments_x(
    active: ElementData,
    raw_x: float,
    elements: Sequence[ElementData],
    page_width: float,
    threshold: float,
) -> list[AlignMatch]:
    """
    Vertical-line candidates for the active element placed at raw_x.
    Page guides span from the page top to the active bottom; element guides span both boxes.
    """
    return _collect(
        anchors_x(raw_x, active.w),
        page_anchors_x(page_width),
        (0.0, active.bottom),
        active,
        elements,
        threshold,
        lambda el: anchors_x(el.x, el.w),
        vertical_span,
    )


def find_alignments_y(
    active: ElementData,
    raw_y: float,
    elements: Sequence[ElementData],
    page_height: float,
    threshold: float,
) -> list[AlignMatch]:
    """
    Horizontal-line candidates for the active element placed at raw_y.
    active.x must already be the proposed x so spans cover the would-be horizontal extent.
    """
    return _collect(
        anchors_y(raw_y, active.h),
        page_anchors_y(page_height),
        (0.0, active.right),
        active,
        elements,
        threshold,
        lambda el: anchors_y(el.y, el.h),
        horizontal_span,
    )
