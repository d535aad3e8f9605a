# snapguides/core/io.py
"""
Host document boundary: load canvas documents and drag traces, and normalise
duck-typed canvas objects into ElementData before they reach the engine.
Supports JSON documents ({"page": {...}, "objects": [...]} or a bare object list)
and traces as CSV (x,y[,zoom]) or JSON.
"""

from __future__ import annotations

import csv
import json
import warnings
from pathlib import Path
from typing import Any

from snapguides.core.config import (
    BACKGROUND_PAGE_FRACTION,
    MIN_ELEMENT_SIZE,
    PAGE_HEIGHT,
    PAGE_WIDTH,
    SHAPE_OBJECT_TYPES,
    TEXT_OBJECT_TYPES,
)
from snapguides.core.types import Document, ElementData, TracePoint


def _resolve_path(path: str | Path, repo_root: Path | None) -> Path:
    """Resolve path; if relative, against repo_root (or cwd if repo_root is None)."""
    p = Path(path)
    if not p.is_absolute() and repo_root is not None:
        p = repo_root / p
    return p.resolve()


def _num(obj: dict[str, Any], key: str, default: float = 0.0) -> float:
    v = obj.get(key)
    if v is None:
        return default
    try:
        return float(v)
    except (TypeError, ValueError):
        return default


def _scale(obj: dict[str, Any], key: str) -> float:
    # 0 and missing both mean "unscaled", as canvas libraries treat them.
    return _num(obj, key, 1.0) or 1.0


KNOWN_OBJECT_TYPES = TEXT_OBJECT_TYPES + SHAPE_OBJECT_TYPES + ("group",)


def _is_system_object(obj: dict[str, Any]) -> bool:
    """Editor-internal objects: guides, page breaks, highlights, non-selectable chrome."""
    return (
        obj.get("selectable") is False
        or bool(obj.get("_isGuide"))
        or bool(obj.get("_isPageBreak"))
        or bool(obj.get("_isHighlight"))
    )


def canvas_object_to_element(
    obj: dict[str, Any],
    page_width: float = PAGE_WIDTH,
    page_height: float = PAGE_HEIGHT,
) -> ElementData | None:
    """
    Visible bounds of one canvas object as ElementData, or None if it never
    participates in alignment (system objects, backgrounds, unknown or tiny objects).
    """
    if not obj or _is_system_object(obj):
        return None

    obj_id = obj.get("id")
    if not obj_id:
        return None

    obj_type = str(obj.get("type") or "").lower()
    is_text = obj_type in TEXT_OBJECT_TYPES

    if is_text or obj_type in SHAPE_OBJECT_TYPES:
        x = _num(obj, "left")
        y = _num(obj, "top")
        w = _num(obj, "width") * _scale(obj, "scaleX")
        h = _num(obj, "height") * _scale(obj, "scaleY")
        if obj_type == "rect" and w > page_width * BACKGROUND_PAGE_FRACTION and h > page_height * BACKGROUND_PAGE_FRACTION:
            return None
    elif obj_type == "group":
        rect = obj.get("boundingRect")
        if isinstance(rect, dict):
            x, y = _num(rect, "left"), _num(rect, "top")
            w, h = _num(rect, "width"), _num(rect, "height")
        else:
            x, y = _num(obj, "left"), _num(obj, "top")
            w, h = _num(obj, "width"), _num(obj, "height")
    else:
        return None

    if w < MIN_ELEMENT_SIZE or h < MIN_ELEMENT_SIZE:
        return None

    return ElementData(
        id=str(obj_id),
        x=x,
        y=y,
        w=w,
        h=h,
        hidden=obj.get("visible") is False,
        is_text=is_text,
    )


def parse_document(data: Any, source: str = "") -> Document:
    """
    Build a Document from parsed JSON. Objects that do not normalise are listed in
    Document.skipped; unknown object types also emit a warning.
    """
    if isinstance(data, list):
        page: dict[str, Any] = {}
        objects = data
    elif isinstance(data, dict):
        page = data.get("page") or {}
        if not isinstance(page, dict):
            raise ValueError("Document 'page' must be an object")
        objects = data.get("objects")
        if objects is None:
            raise ValueError("Document has no 'objects' list")
    else:
        raise ValueError("Document must be a JSON object or list")
    if not isinstance(objects, list):
        raise ValueError("Document 'objects' must be a list")

    page_width = _num(page, "width", PAGE_WIDTH)
    page_height = _num(page, "height", PAGE_HEIGHT)
    if page_width <= 0 or page_height <= 0:
        raise ValueError(f"Invalid page size: {page_width} x {page_height}")

    elements: list[ElementData] = []
    skipped: list[str] = []
    unknown_types: set[str] = set()
    for i, obj in enumerate(objects):
        if not isinstance(obj, dict):
            skipped.append(f"#{i}")
            continue
        el = canvas_object_to_element(obj, page_width, page_height)
        if el is None:
            skipped.append(str(obj.get("id") or f"#{i}"))
            obj_type = str(obj.get("type") or "").lower()
            if obj_type and obj_type not in KNOWN_OBJECT_TYPES and not _is_system_object(obj):
                unknown_types.add(obj_type)
            continue
        elements.append(el)
    if unknown_types:
        warnings.warn(f"Skipped unknown object types: {sorted(unknown_types)}", UserWarning)

    return Document(
        elements=elements,
        page_width=page_width,
        page_height=page_height,
        source=source,
        skipped=skipped,
    )


def load_document(path: str | Path, repo_root: Path | None = None) -> Document:
    """
    Load a canvas document from JSON.
    Raises FileNotFoundError if path is missing, ValueError if the content is invalid.
    """
    resolved = _resolve_path(path, repo_root)
    if not resolved.exists():
        raise FileNotFoundError(f"Document file not found: {resolved}")
    try:
        data = json.loads(resolved.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Document is not valid JSON: {e}") from e
    return parse_document(data, source=str(path))


def _trace_point(row: dict[str, Any], default_zoom: float) -> TracePoint:
    x = float(row["x"])
    y = float(row["y"])
    zoom_raw = row.get("zoom")
    zoom = float(zoom_raw) if zoom_raw not in (None, "") else default_zoom
    if zoom <= 0:
        raise ValueError(f"Zoom must be positive, got {zoom}")
    return TracePoint(x=x, y=y, zoom=zoom)


def trace_rows_from_json(data: Any) -> list[dict[str, Any]]:
    """Rows from a JSON trace: a list of {x, y[, zoom]} objects or [x, y] pairs."""
    if not isinstance(data, list):
        raise ValueError("Trace JSON must be a list of points")
    rows: list[dict[str, Any]] = []
    for i, p in enumerate(data):
        if isinstance(p, dict):
            rows.append(p)
            continue
        try:
            rows.append({"x": p[0], "y": p[1]})
        except (TypeError, IndexError, KeyError) as e:
            raise ValueError(f"Invalid trace point {i}: {p!r}") from e
    return rows


def parse_trace_rows(rows: list[dict[str, Any]], default_zoom: float = 1.0) -> list[TracePoint]:
    """Rows with x, y and optional zoom. Raises ValueError on missing or non-numeric values."""
    out: list[TracePoint] = []
    for i, row in enumerate(rows):
        try:
            out.append(_trace_point(row, default_zoom))
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid trace row {i}: {e}") from e
    return out


def load_trace(path: str | Path, repo_root: Path | None = None, default_zoom: float = 1.0) -> list[TracePoint]:
    """
    Load a drag trace: CSV with header x,y[,zoom] or JSON list of {x, y[, zoom]}.
    Raises FileNotFoundError if missing, ValueError if empty or malformed.
    """
    resolved = _resolve_path(path, repo_root)
    if not resolved.exists():
        raise FileNotFoundError(f"Trace file not found: {resolved}")
    if resolved.suffix.lower() == ".json":
        rows = trace_rows_from_json(json.loads(resolved.read_text(encoding="utf-8")))
    else:
        with open(resolved, newline="", encoding="utf-8") as f:
            rows = list(csv.DictReader(f))
    points = parse_trace_rows(rows, default_zoom=default_zoom)
    if not points:
        raise ValueError("Trace is empty")
    return points
