# snapguides/core/reporting.py
"""
Create reports/<run_name>/ and write frames.json, frames.csv, run_metadata.json.
"""

from __future__ import annotations

import csv
import json
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path

from snapguides.core.config import (
    GUIDES_DEBUG,
    REPORTS_DIR,
    SCORE_CENTER_CENTER,
    SCORE_DELTA_PENALTY,
    SCORE_EDGE_TO_EDGE,
    SCORE_LEFT_LEFT,
    SCORE_LEFT_LEFT_TEXT,
    SCORE_PAGE,
    SCORE_PAGE_CENTER,
    SCORE_PAGE_LEFT,
    SCORE_SAME_ANCHOR,
    SCORE_TEXT_TARGET,
    SCORE_TOP_TO_BOTTOM,
    SCORE_TOP_TOP,
    SCORE_TOP_TOP_TEXT,
)
from snapguides.core.session import SessionFrame
from snapguides.core.types import FrameResult, Guide, GuidesConfig, TracePoint

FRAME_CSV_FIELDS = [
    "step", "raw_x", "raw_y", "zoom", "x", "y",
    "corrected_x", "corrected_y", "snap_key_x", "snap_key_y", "n_guides",
]


def guide_to_dict(g: Guide) -> dict:
    return {
        "kind": g.kind,
        "axis": g.axis,
        "pos": g.pos,
        "span1": g.span1,
        "span2": g.span2,
        "from_anchor": g.from_anchor,
        "to_anchor": g.to_anchor,
    }


def frame_result_to_dict(frame: FrameResult) -> dict:
    """Resolver output contract as plain JSON data."""
    return {
        "corrected_x": frame.corrected_x,
        "corrected_y": frame.corrected_y,
        "guides": [guide_to_dict(g) for g in frame.guides],
        "snap_key_x": frame.snap_key_x,
        "snap_key_y": frame.snap_key_y,
    }


def session_frame_to_dict(step: int, point: TracePoint, sf: SessionFrame) -> dict:
    return {
        "step": step,
        "raw": {"x": point.x, "y": point.y, "zoom": point.zoom},
        "applied": {"x": sf.x, "y": sf.y},
        "result": frame_result_to_dict(sf.frame),
        "guides": [guide_to_dict(g) for g in sf.guides],
    }


def ensure_report_dir(
    repo_root: Path,
    run_name: str,
    output_dir: str | None = None,
) -> Path:
    """Create output_dir/<run_name>/ under repo_root; return path. Default output_dir from config."""
    base = output_dir if output_dir is not None else REPORTS_DIR
    out = (repo_root / base).resolve() / run_name
    out.mkdir(parents=True, exist_ok=True)
    return out


def write_frames_json(report_dir: Path, frames: list[dict], summary: dict) -> Path:
    """Write frames.json: per-step frames plus the replay summary."""
    path = report_dir / "frames.json"
    path.write_text(json.dumps({"summary": summary, "frames": frames}, indent=2), encoding="utf-8")
    return path


def write_frames_csv(report_dir: Path, frames: list[dict]) -> Path:
    """Flat per-step table of frames.json."""
    path = report_dir / "frames.csv"
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FRAME_CSV_FIELDS)
        w.writeheader()
        for fr in frames:
            w.writerow({
                "step": fr["step"],
                "raw_x": fr["raw"]["x"],
                "raw_y": fr["raw"]["y"],
                "zoom": fr["raw"]["zoom"],
                "x": fr["applied"]["x"],
                "y": fr["applied"]["y"],
                "corrected_x": fr["result"]["corrected_x"],
                "corrected_y": fr["result"]["corrected_y"],
                "snap_key_x": fr["result"]["snap_key_x"] or "",
                "snap_key_y": fr["result"]["snap_key_y"] or "",
                "n_guides": len(fr["guides"]),
            })
    return path


def run_metadata_dict(
    run_name: str,
    document_path: str,
    active_id: str,
    trace_path: str,
    config: GuidesConfig,
) -> dict:
    """Timestamp and config snapshot for run_metadata.json."""
    return {
        "run_name": run_name,
        "timestamp_utc": datetime.now(timezone.utc).isoformat(),
        "document_path": document_path,
        "active_id": active_id,
        "trace_path": trace_path,
        "guides_config": asdict(config),
        "config": {
            "SCORE_PAGE": SCORE_PAGE,
            "SCORE_PAGE_CENTER": SCORE_PAGE_CENTER,
            "SCORE_PAGE_LEFT": SCORE_PAGE_LEFT,
            "SCORE_SAME_ANCHOR": SCORE_SAME_ANCHOR,
            "SCORE_LEFT_LEFT": SCORE_LEFT_LEFT,
            "SCORE_LEFT_LEFT_TEXT": SCORE_LEFT_LEFT_TEXT,
            "SCORE_TOP_TOP": SCORE_TOP_TOP,
            "SCORE_TOP_TOP_TEXT": SCORE_TOP_TOP_TEXT,
            "SCORE_CENTER_CENTER": SCORE_CENTER_CENTER,
            "SCORE_EDGE_TO_EDGE": SCORE_EDGE_TO_EDGE,
            "SCORE_TOP_TO_BOTTOM": SCORE_TOP_TO_BOTTOM,
            "SCORE_TEXT_TARGET": SCORE_TEXT_TARGET,
            "SCORE_DELTA_PENALTY": SCORE_DELTA_PENALTY,
            "GUIDES_DEBUG": GUIDES_DEBUG,
        },
    }


def write_run_metadata_json(
    report_dir: Path,
    run_name: str,
    document_path: str,
    active_id: str,
    trace_path: str,
    config: GuidesConfig,
) -> Path:
    """Write run_metadata.json to report_dir."""
    path = report_dir / "run_metadata.json"
    data = run_metadata_dict(run_name, document_path, active_id, trace_path, config)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path
