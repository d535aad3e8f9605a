#!/usr/bin/env python3
"""
Generate canvas documents and drag traces for manual testing of the guides engine.

Documents (JSON, canvas-object shape as the editor stores it):
  page_XX.json    seeded synthetic resume pages (text column, shape sidebar, 'active' block)
  edge_cases.json hidden, tiny, background and page-break objects that must be filtered
Traces (CSV x,y,zoom):
  hover_XX.csv    pointer held near the left margin with jitter
  drag_XX.csv     drag from the active block towards the page top center
"""

from __future__ import annotations

import csv
import json
import sys
from pathlib import Path

_repo_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_repo_root))

from snapguides.core.synthetic import ACTIVE_ID, MARGIN, hover_trace, jitter_trace, synthetic_document
from snapguides.core.types import Document, TracePoint

OUTPUT_DIR = _repo_root / "docs" / "assets" / "test_documents"
N_PAGES = 10


def document_to_json(doc: Document) -> dict:
    """ElementData back to the editor's canvas-object shape."""
    objects = []
    for el in doc.elements:
        objects.append({
            "id": el.id,
            "type": "textbox" if el.is_text else "rect",
            "left": el.x,
            "top": el.y,
            "width": el.w,
            "height": el.h,
            "scaleX": 1,
            "scaleY": 1,
            "visible": not el.hidden,
        })
    return {"page": {"width": doc.page_width, "height": doc.page_height}, "objects": objects}


def edge_case_document() -> dict:
    return {
        "page": {"width": 595, "height": 842},
        "objects": [
            {"id": "background", "type": "rect", "left": 0, "top": 0, "width": 595, "height": 842},
            {"id": "title", "type": "textbox", "left": 40, "top": 40, "width": 300, "height": 32},
            {"id": "hidden", "type": "rect", "left": 40, "top": 100, "width": 80, "height": 20, "visible": False},
            {"id": "tiny", "type": "rect", "left": 40, "top": 140, "width": 3, "height": 3},
            {"id": "scaled", "type": "image", "left": 400, "top": 40, "width": 50, "height": 50, "scaleX": 2, "scaleY": 2},
            {"id": "break-1", "type": "line", "left": 0, "top": 842, "width": 595, "height": 1, "_isPageBreak": True},
            {"id": "guide", "type": "line", "left": 100, "top": 0, "width": 1, "height": 842, "_isGuide": True},
            {"id": "group-1", "type": "group", "boundingRect": {"left": 40, "top": 200, "width": 200, "height": 60}},
            {"id": ACTIVE_ID, "type": "textbox", "left": 120, "top": 400, "width": 160, "height": 24},
        ],
    }


def save_trace(path: Path, trace: list[TracePoint]) -> None:
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(["x", "y", "zoom"])
        for p in trace:
            w.writerow([round(p.x, 3), round(p.y, 3), p.zoom])
    print(f"Created: {path.name}")


def main() -> None:
    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    for i in range(N_PAGES):
        doc = synthetic_document(seed=i)
        path = OUTPUT_DIR / f"page_{i:02d}.json"
        path.write_text(json.dumps(document_to_json(doc), indent=2), encoding="utf-8")
        print(f"Created: {path.name}")

        active = doc.get(ACTIVE_ID)
        zoom = (0.5, 1.0, 2.0)[i % 3]
        save_trace(OUTPUT_DIR / f"hover_{i:02d}.csv", hover_trace((MARGIN + 5.0, active.y), seed=i, zoom=zoom))
        end = (doc.page_width / 2 - active.w / 2, MARGIN)
        save_trace(OUTPUT_DIR / f"drag_{i:02d}.csv", jitter_trace((active.x, active.y), end, seed=i, zoom=zoom))

    path = OUTPUT_DIR / "edge_cases.json"
    path.write_text(json.dumps(edge_case_document(), indent=2), encoding="utf-8")
    print(f"Created: {path.name}")


if __name__ == "__main__":
    main()
