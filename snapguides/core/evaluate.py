# snapguides/core/evaluate.py
"""
Evaluation runner: guide flicker and snap rate with and without hysteresis on seeded
synthetic pages and jittered drag traces, across zoom levels.
Saves evaluation_results.csv, evaluation_summary.json and leaderboard.json under reports/<run_name>/.
"""

from __future__ import annotations

import argparse
import csv
import json
import logging
from collections.abc import Sequence
from datetime import datetime, timezone
from pathlib import Path

from snapguides.core.config import SEED, SNAP_THRESHOLD_PX
from snapguides.core.replay import ReplaySummary, replay_trace
from snapguides.core.reporting import ensure_report_dir
from snapguides.core.resolver import compute_guides_and_snaps
from snapguides.core.spatial_index import SpatialIndex
from snapguides.core.synthetic import ACTIVE_ID, MARGIN, hover_trace, jitter_trace, synthetic_document
from snapguides.core.types import ElementData, GuidesConfig, TracePoint
from snapguides.core.zoom import parse_zoom_levels

logger = logging.getLogger(__name__)

METHODS = ("stateless", "no_hysteresis", "hysteresis")
EVAL_FAMILIES = ("hover_edge", "drag_across")


def _run_stateless(
    elements: Sequence[ElementData],
    active: ElementData,
    trace: Sequence[TracePoint],
    cfg: GuidesConfig,
) -> ReplaySummary:
    """Baseline: never thread last snaps, so every frame re-scores from scratch."""
    index = SpatialIndex()
    index.build(el for el in elements if el.id != active.id)
    keys_x: list[str | None] = []
    keys_y: list[str | None] = []
    for p in trace:
        frame = compute_guides_and_snaps(active.with_position(p.x, p.y), p.x, p.y, p.zoom, index, cfg)
        keys_x.append(frame.snap_key_x)
        keys_y.append(frame.snap_key_y)
    return ReplaySummary(
        active_id=active.id,
        n_frames=len(trace),
        snapped_x=sum(1 for k in keys_x if k is not None),
        snapped_y=sum(1 for k in keys_y if k is not None),
        key_switches_x=sum(1 for a, b in zip(keys_x, keys_x[1:]) if a != b),
        key_switches_y=sum(1 for a, b in zip(keys_y, keys_y[1:]) if a != b),
    )


def _run_method(
    method: str,
    elements: Sequence[ElementData],
    active: ElementData,
    trace: Sequence[TracePoint],
    base_cfg: GuidesConfig,
) -> ReplaySummary:
    if method == "stateless":
        return _run_stateless(elements, active, trace, base_cfg)
    if method == "no_hysteresis":
        cfg = GuidesConfig(
            snap_threshold_px=base_cfg.snap_threshold_px,
            hysteresis_px=0.0,
            grid_enabled=base_cfg.grid_enabled,
            grid_size=base_cfg.grid_size,
            page_width=base_cfg.page_width,
            page_height=base_cfg.page_height,
        )
        return replay_trace(elements, active, trace, cfg)
    return replay_trace(elements, active, trace, base_cfg)


def _cases(seed: int | None, n_synthetic: int, zooms: list[float]):
    """Yield (source, family, zoom, document, active, trace)."""
    for i in range(n_synthetic):
        case_seed = seed + i if seed is not None else None
        doc = synthetic_document(case_seed)
        active = doc.get(ACTIVE_ID)
        if active is None:
            continue
        for zoom in zooms:
            # Hover just inside the snap threshold of the left margin column.
            target = (MARGIN + (SNAP_THRESHOLD_PX - 1.0) / zoom, active.y)
            yield (doc.source, "hover_edge", zoom, doc, active, hover_trace(target, case_seed, zoom=zoom))
            end = (doc.page_width / 2 - active.w / 2, MARGIN)
            yield (doc.source, "drag_across", zoom, doc, active, jitter_trace((active.x, active.y), end, case_seed, zoom=zoom))


def run_evaluation(
    run_name: str = "eval_01",
    n_synthetic: int = 10,
    seed: int | None = SEED,
    zoom_levels: str = "",
    repo_root: Path | None = None,
) -> Path:
    """
    Run every method on every case. Writes evaluation_results.csv, evaluation_summary.json,
    leaderboard.json (by method and by family) and plots to reports/<run_name>/. Returns report_dir.
    """
    root = repo_root or Path.cwd().resolve()
    report_dir = ensure_report_dir(root, run_name)
    zooms = parse_zoom_levels(zoom_levels)

    rows: list[dict] = []
    n_cases = 0
    for source, family, zoom, doc, active, trace in _cases(seed, n_synthetic, zooms):
        n_cases += 1
        base_cfg = GuidesConfig(page_width=doc.page_width, page_height=doc.page_height)
        for method in METHODS:
            s = _run_method(method, doc.elements, active, trace, base_cfg)
            rows.append({
                "source": source,
                "family": family,
                "zoom": zoom,
                "method": method,
                "n_frames": s.n_frames,
                "snap_rate": (s.snapped_x + s.snapped_y) / (2 * s.n_frames) if s.n_frames else 0.0,
                "key_switches": s.key_switches_x + s.key_switches_y,
                "flicker_rate": s.flicker_rate,
            })
    logger.info("evaluated %d cases x %d methods", n_cases, len(METHODS))

    by_method: dict[str, list[dict]] = {}
    for r in rows:
        by_method.setdefault(r["method"], []).append(r)

    summary = {
        "run_name": run_name,
        "timestamp_utc": datetime.now(timezone.utc).isoformat(),
        "n_cases": n_cases,
        "zoom_levels": zooms,
        "mean_flicker_rate": {},
        "mean_snap_rate": {},
    }
    for method, list_r in by_method.items():
        n = len(list_r)
        summary["mean_flicker_rate"][method] = sum(r["flicker_rate"] for r in list_r) / n if n else 0.0
        summary["mean_snap_rate"][method] = sum(r["snap_rate"] for r in list_r) / n if n else 0.0
    (report_dir / "evaluation_summary.json").write_text(json.dumps(summary, indent=2), encoding="utf-8")

    if rows:
        keys = ["source", "family", "zoom", "method", "n_frames", "snap_rate", "key_switches", "flicker_rate"]
        with open(report_dir / "evaluation_results.csv", "w", newline="", encoding="utf-8") as f:
            w = csv.DictWriter(f, fieldnames=keys, extrasaction="ignore")
            w.writeheader()
            w.writerows(rows)

    leaderboard: dict = {"by_method": {}, "by_family": {}}
    for method, list_r in by_method.items():
        n = len(list_r)
        leaderboard["by_method"][method] = {
            "flicker_rate": summary["mean_flicker_rate"][method],
            "snap_rate": summary["mean_snap_rate"][method],
            "total_key_switches": sum(r["key_switches"] for r in list_r),
            "n": n,
        }
    for r in rows:
        fam = leaderboard["by_family"].setdefault(r["family"], {})
        entry = fam.setdefault(r["method"], {"flicker_sum": 0.0, "n": 0})
        entry["flicker_sum"] += r["flicker_rate"]
        entry["n"] += 1
    for fam in leaderboard["by_family"].values():
        for entry in fam.values():
            entry["flicker_rate"] = entry.pop("flicker_sum") / entry["n"] if entry["n"] else 0.0
    (report_dir / "leaderboard.json").write_text(json.dumps(leaderboard, indent=2), encoding="utf-8")

    from snapguides.core.plots import generate_all_plots
    generate_all_plots(report_dir)

    return report_dir


def main() -> None:
    p = argparse.ArgumentParser(description="Evaluate guide flicker with and without hysteresis.")
    p.add_argument("--run-name", default="eval_01", dest="run_name", help="Reports subdir name")
    p.add_argument("--n-synthetic", type=int, default=10, dest="n_synthetic", help="Number of synthetic pages")
    p.add_argument("--seed", type=int, default=SEED)
    p.add_argument("--zoom-levels", default="", dest="zoom_levels", help="Zoom levels e.g. '0.5,1,2'")
    p.add_argument("--repo-root", default=None, dest="repo_root")
    args = p.parse_args()
    root = Path(args.repo_root).resolve() if args.repo_root else Path.cwd().resolve()
    report_dir = run_evaluation(
        run_name=args.run_name,
        n_synthetic=args.n_synthetic,
        seed=args.seed,
        zoom_levels=args.zoom_levels,
        repo_root=root,
    )
    print(report_dir)


if __name__ == "__main__":
    main()
