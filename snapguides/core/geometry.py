# snapguides/core/geometry.py
"""
Geometry helpers: per-axis anchors, perpendicular guide spans, grid snapping,
and shapely boxes for rendering and scene bounds.
"""

from __future__ import annotations

import math

from shapely.geometry import Polygon, box
from shapely.ops import unary_union

from snapguides.core.types import ElementData


def anchors_x(left: float, width: float) -> tuple[tuple[str, float], ...]:
    """(name, pos) for left, center, right."""
    return (("left", left), ("center", left + width / 2), ("right", left + width))


def anchors_y(top: float, height: float) -> tuple[tuple[str, float], ...]:
    """(name, pos) for top, center, bottom."""
    return (("top", top), ("center", top + height / 2), ("bottom", top + height))


def vertical_span(a: ElementData, b: ElementData) -> tuple[float, float]:
    """Vertical extent covering both boxes; used for X-axis (vertical) guide lines."""
    return min(a.y, b.y), max(a.bottom, b.bottom)


def horizontal_span(a: ElementData, b: ElementData) -> tuple[float, float]:
    """Horizontal extent covering both boxes; used for Y-axis (horizontal) guide lines."""
    return min(a.x, b.x), max(a.right, b.right)


def grid_snap(value: float, grid_size: float) -> float:
    """Nearest multiple of grid_size; halves round up. Non-positive grid leaves value unchanged."""
    if grid_size <= 0:
        return value
    return math.floor(value / grid_size + 0.5) * grid_size


def element_box(el: ElementData) -> Polygon:
    """Axis-aligned box for an element (world units)."""
    return box(el.x, el.y, el.right, el.bottom)


def scene_bounds(
    elements: list[ElementData],
    page_width: float,
    page_height: float,
) -> tuple[float, float, float, float]:
    """
    (minx, miny, maxx, maxy) covering the first page and every element.
    The canvas grows downward, so elements past the page bottom extend the bounds.
    """
    geoms = [box(0.0, 0.0, page_width, page_height)]
    geoms.extend(element_box(el) for el in elements if el.w > 0 and el.h > 0)
    b = unary_union(geoms).bounds
    return (b[0], b[1], b[2], b[3])
