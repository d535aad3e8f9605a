# snapguides/core/zoom.py
"""
Zoom handling: screen px <-> world units. Thresholds are specified in screen pixels
and divided by zoom so the perceived snap distance is the same at every zoom level.
"""

from __future__ import annotations

from snapguides.core.config import ZOOM_LEVELS_DEFAULT


def px_to_world(value_px: float, zoom: float) -> float:
    """Screen pixels to world units."""
    return value_px / zoom


def world_to_px(value: float, zoom: float) -> float:
    """World units to screen pixels."""
    return value * zoom


def world_thresholds(snap_threshold_px: float, hysteresis_px: float, zoom: float) -> tuple[float, float]:
    """Return (threshold, hysteresis) in world units for the given zoom."""
    return px_to_world(snap_threshold_px, zoom), px_to_world(hysteresis_px, zoom)


def parse_zoom_levels(s: str) -> list[float]:
    """Parse comma-separated zoom levels, e.g. '0.5,1,2'. Non-positive or bad parts are skipped."""
    if not (s or "").strip():
        return list(ZOOM_LEVELS_DEFAULT)
    out: list[float] = []
    for part in s.strip().split(","):
        part = part.strip()
        if part:
            try:
                z = float(part)
            except ValueError:
                continue
            if z > 0:
                out.append(z)
    return out if out else list(ZOOM_LEVELS_DEFAULT)
