# tests/test_zoom_scaling.py
"""
Zoom scaling: screen-pixel thresholds convert to world units, zoom level parsing.
"""

from __future__ import annotations

import pytest

from snapguides.core.config import ZOOM_LEVELS_DEFAULT
from snapguides.core.zoom import parse_zoom_levels, px_to_world, world_thresholds, world_to_px


def test_parse_zoom_levels_empty_default() -> None:
    assert parse_zoom_levels("") == list(ZOOM_LEVELS_DEFAULT)
    assert parse_zoom_levels("   ") == list(ZOOM_LEVELS_DEFAULT)


def test_parse_zoom_levels_custom() -> None:
    assert parse_zoom_levels("0.5,1,2") == [0.5, 1.0, 2.0]
    # bad and non-positive parts are skipped
    assert parse_zoom_levels("1, x, -2, 0, 3") == [1.0, 3.0]
    assert parse_zoom_levels("0,-1") == list(ZOOM_LEVELS_DEFAULT)


def test_world_thresholds_divide_by_zoom() -> None:
    assert world_thresholds(8, 5, 1.0) == (8, 5)
    t, h = world_thresholds(8, 5, 2.0)
    assert t == pytest.approx(4)
    assert h == pytest.approx(2.5)
    t, h = world_thresholds(8, 5, 0.5)
    assert t == pytest.approx(16)
    assert h == pytest.approx(10)


def test_px_world_inverse() -> None:
    for zoom in (0.25, 1.0, 3.0):
        assert world_to_px(px_to_world(12.0, zoom), zoom) == pytest.approx(12.0)
