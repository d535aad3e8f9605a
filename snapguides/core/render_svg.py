# snapguides/core/render_svg.py
"""
Export guides as a self-contained SVG overlay in screen pixels: one dashed <line> per guide.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Sequence
from pathlib import Path

from snapguides.core.types import DEFAULT_RENDERER_CONFIG, Guide, RendererConfig
from snapguides.core.zoom import world_to_px

SVG_NS = "http://www.w3.org/2000/svg"


def _fmt(v: float) -> str:
    return f"{v:.4f}".rstrip("0").rstrip(".")


def guide_line_coords(guide: Guide, zoom: float) -> tuple[float, float, float, float]:
    """(x1, y1, x2, y2) in screen pixels."""
    pos = world_to_px(guide.pos, zoom)
    a = world_to_px(guide.span1, zoom)
    b = world_to_px(guide.span2, zoom)
    if guide.axis == "x":
        return (pos, a, pos, b)
    return (a, pos, b, pos)


def guides_to_svg(
    guides: Sequence[Guide],
    zoom: float,
    canvas_width: int,
    canvas_height: int,
    config: RendererConfig = DEFAULT_RENDERER_CONFIG,
) -> str:
    ET.register_namespace("", SVG_NS)
    root = ET.Element(
        f"{{{SVG_NS}}}svg",
        {
            "width": str(int(canvas_width)),
            "height": str(int(canvas_height)),
            "viewBox": f"0 0 {int(canvas_width)} {int(canvas_height)}",
        },
    )
    group = ET.SubElement(
        root,
        f"{{{SVG_NS}}}g",
        {
            "fill": "none",
            "stroke": config.color,
            "stroke-width": _fmt(config.line_width),
        },
    )
    if config.dash_pattern:
        group.set("stroke-dasharray", " ".join(_fmt(p) for p in config.dash_pattern))
    for guide in guides:
        x1, y1, x2, y2 = guide_line_coords(guide, zoom)
        line = ET.SubElement(
            group,
            f"{{{SVG_NS}}}line",
            {"x1": _fmt(x1), "y1": _fmt(y1), "x2": _fmt(x2), "y2": _fmt(y2)},
        )
        line.set("data-axis", guide.axis)
        line.set("data-kind", guide.kind)
        if guide.from_anchor and guide.to_anchor:
            line.set("data-anchors", f"{guide.from_anchor}->{guide.to_anchor}")
    return ET.tostring(root, encoding="unicode")


def export_guides_svg(
    guides: Sequence[Guide],
    zoom: float,
    canvas_width: int,
    canvas_height: int,
    out_path: str | Path,
    config: RendererConfig = DEFAULT_RENDERER_CONFIG,
) -> Path:
    """Write the overlay SVG and return its path."""
    path = Path(out_path)
    path.write_text(guides_to_svg(guides, zoom, canvas_width, canvas_height, config), encoding="utf-8")
    return path
