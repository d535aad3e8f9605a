# snapguides/core/runner.py
"""
CLI entrypoint: load a canvas document and a drag trace, replay the drag through the
snapping engine, write frames.json / frames.csv / run_metadata.json and optional renders.
Without --document a seeded synthetic page is used; without --trace the pointer hovers
jittering around the active element's position.
"""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

from snapguides.core.config import (
    GRID_SIZE,
    HYSTERESIS_PX,
    SEED,
    SNAP_THRESHOLD_PX,
)
from snapguides.core.io import load_document, load_trace
from snapguides.core.render import new_overlay, render_frame_debug, render_guides
from snapguides.core.render_svg import export_guides_svg
from snapguides.core.replay import replay_document
from snapguides.core.reporting import (
    ensure_report_dir,
    session_frame_to_dict,
    write_frames_csv,
    write_frames_json,
    write_run_metadata_json,
)
from snapguides.core.synthetic import ACTIVE_ID, hover_trace, synthetic_document
from snapguides.core.types import GuidesConfig
from snapguides.core.zoom import world_to_px


def _parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Replay a drag gesture through the alignment guides engine.")
    p.add_argument("--document", type=str, default=None, help="Canvas document JSON (repo-relative)")
    p.add_argument("--active", type=str, default=ACTIVE_ID, help="Id of the dragged element")
    p.add_argument("--trace", type=str, default=None, help="Drag trace CSV/JSON (repo-relative)")
    p.add_argument("--zoom", type=float, default=1.0, help="Zoom for trace points without a zoom column")
    p.add_argument("--threshold-px", type=float, default=SNAP_THRESHOLD_PX, dest="threshold_px", help="Snap threshold (screen px)")
    p.add_argument("--hysteresis-px", type=float, default=HYSTERESIS_PX, dest="hysteresis_px", help="Hysteresis margin (screen px)")
    p.add_argument("--grid-size", type=float, default=GRID_SIZE, dest="grid_size", help="Grid step (world units)")
    p.add_argument("--no-grid", action="store_true", dest="no_grid", help="Disable grid fallback")
    p.add_argument("--seed", type=int, default=SEED, help="Seed for synthetic document/trace")
    p.add_argument("--run-name", type=str, default="run", dest="run_name", help="Reports subdir name")
    p.add_argument("--output-dir", type=str, default="reports", dest="output_dir", help="Output directory (repo-relative)")
    p.add_argument("--repo-root", type=str, default=None, dest="repo_root", help="Repo root (default: cwd)")
    p.add_argument("--render", action="store_true", help="Write debug.png, overlay.png and overlay.svg of the last snapped frame")
    return p.parse_args()


def main() -> None:
    logging.basicConfig(level=getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO))
    args = _parse_args()
    repo_root = Path(args.repo_root).resolve() if args.repo_root else Path.cwd().resolve()

    if args.document:
        document = load_document(args.document, repo_root=repo_root)
    else:
        document = synthetic_document(args.seed)

    active = document.get(args.active)
    if active is None:
        raise ValueError(f"Active element not found in document: {args.active!r}")

    if args.trace:
        trace = load_trace(args.trace, repo_root=repo_root, default_zoom=args.zoom)
    else:
        trace = hover_trace((active.x, active.y), seed=args.seed, zoom=args.zoom)

    cfg = GuidesConfig(
        snap_threshold_px=args.threshold_px,
        hysteresis_px=args.hysteresis_px,
        grid_enabled=not args.no_grid,
        grid_size=args.grid_size,
        page_width=document.page_width,
        page_height=document.page_height,
    )
    summary = replay_document(document, args.active, trace, cfg)

    report_dir = ensure_report_dir(repo_root, args.run_name, output_dir=args.output_dir)
    frames = [session_frame_to_dict(i, p, f) for i, (p, f) in enumerate(zip(trace, summary.frames))]
    written = [
        write_frames_json(report_dir, frames, summary.as_dict()),
        write_frames_csv(report_dir, frames),
        write_run_metadata_json(
            report_dir, args.run_name, args.document or document.source, args.active, args.trace or "hover", cfg,
        ),
    ]

    if args.render and summary.frames:
        idx = max((i for i, f in enumerate(summary.frames) if f.guides), default=len(summary.frames) - 1)
        sf, point = summary.frames[idx], trace[idx]
        others = [el for el in document.elements if el.id != active.id]
        debug_path = report_dir / "debug.png"
        render_frame_debug(
            others, active, (point.x, point.y), sf.frame, debug_path,
            document.page_width, document.page_height, guides=sf.guides,
        )
        width = int(world_to_px(document.page_width, point.zoom))
        height = int(world_to_px(document.page_height, point.zoom))
        overlay_path = report_dir / "overlay.png"
        render_guides(new_overlay(width, height), sf.guides, point.zoom, width, height).save(overlay_path)
        svg_path = export_guides_svg(sf.guides, point.zoom, width, height, report_dir / "overlay.svg")
        written.extend([debug_path, overlay_path, svg_path])

    for p in written:
        print(p)
    print(
        f"Frames: {summary.n_frames}  snapped x/y: {summary.snapped_x}/{summary.snapped_y}  "
        f"flicker rate: {summary.flicker_rate:.3f}"
    )


if __name__ == "__main__":
    main()
