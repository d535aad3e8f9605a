# snapguides/core/render.py
"""
Guide rendering. render_guides draws onto a Pillow overlay surface (screen pixels),
the per-frame projection of Guide records; render_frame_debug writes a matplotlib PNG
of one resolved frame for reports and the playground.
"""

from __future__ import annotations

import warnings
from collections.abc import Sequence
from pathlib import Path
from typing import IO

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
from PIL import Image, ImageColor, ImageDraw

from snapguides.core.config import RENDER_HEIGHT_PX, RENDER_WIDTH_PX
from snapguides.core.geometry import element_box, scene_bounds
from snapguides.core.types import (
    DEFAULT_RENDERER_CONFIG,
    ElementData,
    FrameResult,
    Guide,
    RendererConfig,
)
from snapguides.core.zoom import world_to_px

TRANSPARENT = (0, 0, 0, 0)


def new_overlay(width: int, height: int) -> Image.Image:
    """Transparent RGBA surface the size of the visible canvas."""
    return Image.new("RGBA", (max(1, int(width)), max(1, int(height))), TRANSPARENT)


def dash_segments(start: float, end: float, pattern: Sequence[float]) -> list[tuple[float, float]]:
    """
    Split [start, end] into drawn (a, b) intervals following an on/off dash pattern.
    An odd-length pattern repeats once to make it even; an empty or zero pattern is solid.
    """
    lo, hi = (start, end) if start <= end else (end, start)
    steps = [float(p) for p in pattern if p > 0]
    if not steps or hi <= lo:
        return [(lo, hi)] if hi > lo else []
    if len(steps) % 2:
        steps = steps * 2
    out: list[tuple[float, float]] = []
    pos = lo
    i = 0
    while pos < hi:
        step = steps[i % len(steps)]
        if i % 2 == 0:
            out.append((pos, min(pos + step, hi)))
        pos += step
        i += 1
    return out


def render_guides(
    surface: Image.Image,
    guides: Sequence[Guide],
    zoom: float,
    canvas_width: int,
    canvas_height: int,
    config: RendererConfig = DEFAULT_RENDERER_CONFIG,
) -> Image.Image:
    """
    Clear canvas_width x canvas_height of surface, then draw each guide as a dashed line
    in screen pixels: vertical at pos*zoom for axis x, horizontal for axis y.
    Zero guides leave the surface cleared. Returns surface.
    """
    clear_w = min(int(canvas_width), surface.width)
    clear_h = min(int(canvas_height), surface.height)
    if clear_w > 0 and clear_h > 0:
        surface.paste(TRANSPARENT, (0, 0, clear_w, clear_h))
    if not guides:
        return surface

    draw = ImageDraw.Draw(surface)
    fill = ImageColor.getrgb(config.color)
    if len(fill) == 3:
        fill = (*fill, 255)
    width = max(1, int(round(config.line_width)))

    for guide in guides:
        pos = world_to_px(guide.pos, zoom)
        a = world_to_px(guide.span1, zoom)
        b = world_to_px(guide.span2, zoom)
        for s0, s1 in dash_segments(a, b, config.dash_pattern):
            if guide.axis == "x":
                draw.line([(pos, s0), (pos, s1)], fill=fill, width=width)
            else:
                draw.line([(s0, pos), (s1, pos)], fill=fill, width=width)
    return surface


def _draw_box(ax: plt.Axes, el: ElementData, **kwargs) -> None:
    xy = np.array(element_box(el).exterior.coords)
    ax.fill(xy[:, 0], xy[:, 1], **kwargs)


def render_frame_debug(
    elements: Sequence[ElementData],
    active: ElementData,
    raw_xy: tuple[float, float],
    frame: FrameResult,
    output_path: str | Path | IO[bytes],
    page_width: float,
    page_height: float,
    guides: Sequence[Guide] | None = None,
    config: RendererConfig = DEFAULT_RENDERER_CONFIG,
    width_px: int = RENDER_WIDTH_PX,
    height_px: int = RENDER_HEIGHT_PX,
) -> None:
    """
    Debug PNG of one frame in world units: page outline, sibling boxes (text in blue),
    dragged element at the raw position (dashed) and corrected position, and guides.
    """
    raw_el = active.with_position(*raw_xy)
    corrected = active.with_position(frame.corrected_x, frame.corrected_y)
    minx, miny, maxx, maxy = scene_bounds(list(elements) + [raw_el, corrected], page_width, page_height)

    fig = plt.figure(figsize=(width_px / 100.0, height_px / 100.0), dpi=100, constrained_layout=False)
    ax = fig.add_axes([0.05, 0.08, 0.9, 0.88])
    ax.axis("off")

    page = np.array([(0, 0), (page_width, 0), (page_width, page_height), (0, page_height), (0, 0)])
    ax.plot(page[:, 0], page[:, 1], color="gray", linewidth=1, label="page")

    for el in elements:
        color = "lightsteelblue" if el.is_text else "lightgray"
        _draw_box(ax, el, facecolor=color, edgecolor="dimgray", linewidth=0.8)

    _draw_box(ax, raw_el, facecolor="none", edgecolor="orange", linestyle="--", linewidth=1, label="raw")
    _draw_box(ax, corrected, facecolor="gold", edgecolor="darkorange", alpha=0.7, linewidth=1, label="corrected")

    dashes = tuple(config.dash_pattern) if config.dash_pattern else None
    for g in (frame.guides if guides is None else guides):
        style = {"color": config.color, "linewidth": config.line_width}
        if dashes:
            style["linestyle"] = (0, dashes)
        if g.axis == "x":
            ax.plot([g.pos, g.pos], [g.span1, g.span2], **style)
        else:
            ax.plot([g.span1, g.span2], [g.pos, g.pos], **style)

    pad = 0.03 * max(maxx - minx, maxy - miny, 1.0)
    ax.set_xlim(minx - pad, maxx + pad)
    ax.set_ylim(maxy + pad, miny - pad)  # screen coordinates: y grows downward
    ax.set_aspect("equal", adjustable="box")
    leg = ax.legend(loc="upper center", bbox_to_anchor=(0.5, -0.02), ncol=3, fontsize=8)
    with warnings.catch_warnings():
        warnings.filterwarnings("ignore", message=".*constrained_layout.*", category=UserWarning)
        fig.savefig(output_path, dpi=100, facecolor="white", bbox_inches="tight", bbox_extra_artists=[leg])
    plt.close(fig)
