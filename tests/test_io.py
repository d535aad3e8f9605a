# tests/test_io.py
"""
Document and trace loading: canvas-object normalisation, filtering of system objects,
background and tiny objects, trace CSV/JSON parsing and error paths.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from snapguides.core.io import (
    canvas_object_to_element,
    load_document,
    load_trace,
    parse_document,
    parse_trace_rows,
    trace_rows_from_json,
)


def _edge_case_document() -> dict:
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
        ],
    }


def test_parse_document_filters_and_normalises() -> None:
    doc = parse_document(_edge_case_document(), source="edge")
    assert [el.id for el in doc.elements] == ["title", "hidden", "scaled", "group-1"]
    assert set(doc.skipped) == {"background", "tiny", "break-1", "guide"}
    assert doc.page_width == 595 and doc.page_height == 842

    title = doc.get("title")
    assert title is not None and title.is_text
    assert doc.get("hidden").hidden
    scaled = doc.get("scaled")
    assert (scaled.w, scaled.h) == (100, 100)
    group = doc.get("group-1")
    assert (group.x, group.y, group.w, group.h) == (40, 200, 200, 60)


def test_zero_scale_means_unscaled() -> None:
    el = canvas_object_to_element({"id": "a", "type": "rect", "left": 0, "top": 0, "width": 20, "height": 10, "scaleX": 0})
    assert el is not None and el.w == 20


def test_objects_without_id_are_skipped() -> None:
    assert canvas_object_to_element({"type": "rect", "width": 20, "height": 20}) is None
    assert canvas_object_to_element({"id": "n", "type": "rect", "width": 20, "height": 20, "selectable": False}) is None


def test_unknown_types_warn() -> None:
    data = {"objects": [{"id": "t", "type": "triangle", "left": 0, "top": 0, "width": 20, "height": 20}]}
    with pytest.warns(UserWarning, match="triangle"):
        doc = parse_document(data)
    assert doc.elements == []
    assert doc.skipped == ["t"]


def test_bare_list_document_uses_default_page() -> None:
    doc = parse_document([{"id": "a", "type": "circle", "left": 1, "top": 2, "width": 10, "height": 10}])
    assert doc.page_width == 595 and doc.page_height == 842
    assert doc.get("a") is not None


@pytest.mark.parametrize(
    "data",
    [{"page": {}}, {"objects": {}}, "nope", {"page": {"width": 0, "height": 842}, "objects": []}],
)
def test_invalid_documents_raise(data) -> None:
    with pytest.raises(ValueError):
        parse_document(data)


def test_load_document_errors(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_document(tmp_path / "missing.json")
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        load_document(bad)


def test_load_document_relative_to_repo_root(tmp_path: Path) -> None:
    (tmp_path / "doc.json").write_text(json.dumps(_edge_case_document()), encoding="utf-8")
    doc = load_document("doc.json", repo_root=tmp_path)
    assert doc.source == "doc.json"
    assert len(doc.elements) == 4


def test_load_trace_csv_with_default_zoom(tmp_path: Path) -> None:
    path = tmp_path / "trace.csv"
    path.write_text("x,y,zoom\n10,20,2\n11.5,21,\n", encoding="utf-8")
    trace = load_trace(path, default_zoom=0.5)
    assert [(p.x, p.y, p.zoom) for p in trace] == [(10, 20, 2), (11.5, 21, 0.5)]


def test_load_trace_json(tmp_path: Path) -> None:
    path = tmp_path / "trace.json"
    path.write_text(json.dumps([{"x": 1, "y": 2}, [3, 4]]), encoding="utf-8")
    trace = load_trace(path)
    assert [(p.x, p.y, p.zoom) for p in trace] == [(1, 2, 1), (3, 4, 1)]


def test_load_trace_errors(tmp_path: Path) -> None:
    empty = tmp_path / "empty.csv"
    empty.write_text("x,y\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_trace(empty)
    with pytest.raises(FileNotFoundError):
        load_trace(tmp_path / "missing.csv")
    with pytest.raises(ValueError):
        parse_trace_rows([{"x": "a", "y": 1}])
    with pytest.raises(ValueError):
        parse_trace_rows([{"x": 1, "y": 1, "zoom": 0}])
    with pytest.raises(ValueError):
        parse_trace_rows([{"y": 1}])


@pytest.mark.parametrize("page", [[1], "a4", 595])
def test_non_object_page_raises_value_error(page) -> None:
    with pytest.raises(ValueError):
        parse_document({"page": page, "objects": []})


@pytest.mark.parametrize("points", [[1, 2], [[1]], [None], {"x": 1, "y": 2}])
def test_malformed_json_trace_raises_value_error(tmp_path: Path, points) -> None:
    path = tmp_path / "trace.json"
    path.write_text(json.dumps(points), encoding="utf-8")
    with pytest.raises(ValueError):
        load_trace(path)


def test_trace_rows_from_json_accepts_pairs_and_objects() -> None:
    rows = trace_rows_from_json([[1, 2], {"x": 3, "y": 4, "zoom": 2}])
    assert rows == [{"x": 1, "y": 2}, {"x": 3, "y": 4, "zoom": 2}]
