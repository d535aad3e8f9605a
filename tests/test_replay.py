# tests/test_replay.py
"""
Trace replay: hysteresis suppresses guide flicker on a jittering pointer;
frame serialization keeps the resolver output contract.
"""

from __future__ import annotations

import pytest

from snapguides.core.replay import replay_document, replay_trace
from snapguides.core.reporting import FRAME_CSV_FIELDS, frame_result_to_dict, session_frame_to_dict, write_frames_csv
from snapguides.core.synthetic import ACTIVE_ID, hover_trace, synthetic_document
from snapguides.core.types import Document, ElementData, GuidesConfig, TracePoint

TARGET = ElementData(id="b", x=100, y=0, w=40, h=10)
ACTIVE = ElementData(id="a", x=300, y=300, w=40, h=10)
# Alternates 6 and 10 units from the target's left edge.
OSCILLATING = [TracePoint(x=x, y=300) for x in (106, 110, 106, 110, 106)]


def test_hysteresis_holds_lock_through_jitter() -> None:
    summary = replay_trace([TARGET, ACTIVE], ACTIVE, OSCILLATING, GuidesConfig(grid_enabled=False))
    assert summary.n_frames == 5
    assert summary.snapped_x == 5
    assert summary.key_switches_x == 0
    assert all(f.x == 100 for f in summary.frames)


def test_without_hysteresis_guides_flicker() -> None:
    cfg = GuidesConfig(hysteresis_px=0.0, grid_enabled=False)
    summary = replay_trace([TARGET, ACTIVE], ACTIVE, OSCILLATING, cfg)
    assert summary.snapped_x == 3
    assert summary.key_switches_x == 4
    assert summary.flicker_rate == pytest.approx(1.0)


def test_empty_trace() -> None:
    summary = replay_trace([TARGET], ACTIVE, [])
    assert summary.n_frames == 0
    assert summary.flicker_rate == 0.0
    assert summary.as_dict()["active_id"] == "a"


def test_replay_document_missing_active() -> None:
    doc = Document(elements=[TARGET])
    with pytest.raises(ValueError):
        replay_document(doc, "nope", OSCILLATING)


def test_replay_synthetic_document_is_deterministic() -> None:
    doc = synthetic_document(seed=3)
    active = doc.get(ACTIVE_ID)
    trace = hover_trace((active.x, active.y), seed=3)
    a = replay_document(doc, ACTIVE_ID, trace)
    b = replay_document(doc, ACTIVE_ID, trace)
    assert a.as_dict() == b.as_dict()
    assert a.n_frames == len(trace)


def test_frame_serialization(tmp_path) -> None:
    summary = replay_trace([TARGET, ACTIVE], ACTIVE, OSCILLATING[:2], GuidesConfig(grid_enabled=False))
    data = frame_result_to_dict(summary.frames[0].frame)
    assert set(data) == {"corrected_x", "corrected_y", "guides", "snap_key_x", "snap_key_y"}
    assert data["snap_key_x"] == "left->b:left"
    assert data["guides"][0]["axis"] == "x"

    frames = [session_frame_to_dict(i, p, f) for i, (p, f) in enumerate(zip(OSCILLATING, summary.frames))]
    assert frames[1]["raw"] == {"x": 110, "y": 300, "zoom": 1.0}
    assert frames[1]["applied"]["x"] == 100
    path = write_frames_csv(tmp_path, frames)
    lines = path.read_text(encoding="utf-8").strip().splitlines()
    assert lines[0].split(",") == FRAME_CSV_FIELDS
    assert len(lines) == 3
