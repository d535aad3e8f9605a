# snapguides/ui/app.py
"""
Streamlit playground: pick a document and a dragged element, move it with sliders,
and see the snapped position, guides, candidate scores and the overlay. Tabs: Frame / Replay / Evaluate.
Run with: streamlit run snapguides/ui/app.py
"""

from __future__ import annotations

import csv
import io
import json
import logging
import os
import sys
from pathlib import Path

# Configure logging from env (e.g. LOG_LEVEL=DEBUG for development)
_log_level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(level=getattr(logging, _log_level_name, logging.INFO))

# Ensure repo root is on path when Streamlit loads this file
_repo_root = Path(__file__).resolve().parent.parent.parent
if str(_repo_root) not in sys.path:
    sys.path.insert(0, str(_repo_root))

import streamlit as st

from snapguides.core.candidates import find_alignments_x, find_alignments_y
from snapguides.core.config import (
    GRID_ENABLED,
    GRID_SIZE,
    HYSTERESIS_PX,
    SEED,
    SNAP_THRESHOLD_PX,
)
from snapguides.core.error_codes import ACTIVE_NOT_FOUND, INVALID_DOCUMENT, INVALID_TRACE, RUN_FAILED, user_message
from snapguides.core.evaluate import run_evaluation
from snapguides.core.io import parse_document, parse_trace_rows, trace_rows_from_json
from snapguides.core.render import new_overlay, render_frame_debug, render_guides
from snapguides.core.render_svg import guides_to_svg
from snapguides.core.replay import replay_trace
from snapguides.core.scoring import score_matches
from snapguides.core.session import DragSession
from snapguides.core.synthetic import ACTIVE_ID, hover_trace, synthetic_document
from snapguides.core.types import Document, GuidesConfig, TracePoint
from snapguides.core.zoom import world_thresholds, world_to_px
from snapguides.ui.help_text import (
    EVAL_SHORT,
    GLOSSARY_MD,
    QUICK_TROUBLESHOOT_MD,
    TOOLTIP_DOCUMENT,
    TOOLTIP_GRID,
    TOOLTIP_HYSTERESIS,
    TOOLTIP_THRESHOLD,
    TOOLTIP_TRACE,
    TOOLTIP_ZOOM,
)

logger = logging.getLogger(__name__)


def _load_uploaded(uploaded) -> tuple[Document | None, str | None]:
    try:
        data = json.loads(uploaded.getvalue().decode("utf-8"))
        return parse_document(data, source=uploaded.name), None
    except (ValueError, UnicodeDecodeError) as e:
        logger.warning("document upload failed: %s", e)
        return None, INVALID_DOCUMENT


def _load_uploaded_trace(uploaded, default_zoom: float) -> tuple[list[TracePoint] | None, str | None]:
    try:
        text = uploaded.getvalue().decode("utf-8")
        if uploaded.name.lower().endswith(".json"):
            rows = trace_rows_from_json(json.loads(text))
        else:
            rows = list(csv.DictReader(io.StringIO(text)))
        trace = parse_trace_rows(rows, default_zoom=default_zoom)
        if not trace:
            return None, INVALID_TRACE
        return trace, None
    except (ValueError, UnicodeDecodeError) as e:
        logger.warning("trace upload failed: %s", e)
        return None, INVALID_TRACE


st.set_page_config(page_title="Snap Guides", layout="wide")
st.title("Alignment guides playground")

with st.sidebar:
    st.header("Document")
    source = st.radio("Source", ["Synthetic page", "Upload JSON"], horizontal=True)
    document: Document | None = None
    doc_error: str | None = None
    if source == "Synthetic page":
        seed = st.number_input("Seed", min_value=0, value=int(SEED or 0), step=1)
        document = synthetic_document(int(seed))
    else:
        uploaded = st.file_uploader("Canvas document", type=["json"], help=TOOLTIP_DOCUMENT)
        if uploaded is not None:
            document, doc_error = _load_uploaded(uploaded)
    if doc_error:
        st.error(user_message(doc_error))

    st.header("Snapping")
    threshold_px = st.slider("Snap threshold (px)", 1.0, 30.0, float(SNAP_THRESHOLD_PX), 0.5, help=TOOLTIP_THRESHOLD)
    hysteresis_px = st.slider("Hysteresis (px)", 0.0, 20.0, float(HYSTERESIS_PX), 0.5, help=TOOLTIP_HYSTERESIS)
    grid_enabled = st.checkbox("Grid fallback", value=GRID_ENABLED, help=TOOLTIP_GRID)
    grid_size = st.number_input("Grid size", min_value=1.0, value=float(GRID_SIZE), step=1.0, disabled=not grid_enabled)
    zoom = st.select_slider("Zoom", options=[0.25, 0.5, 0.75, 1.0, 1.5, 2.0, 3.0], value=1.0, help=TOOLTIP_ZOOM)

    with st.expander("Help & glossary"):
        st.markdown(GLOSSARY_MD)
        st.markdown(QUICK_TROUBLESHOOT_MD)

if document is None:
    st.info("Load a document to start.")
    st.stop()

ids = [el.id for el in document.elements]
default_idx = ids.index(ACTIVE_ID) if ACTIVE_ID in ids else 0
active_id = st.selectbox("Dragged element", ids, index=default_idx) if ids else None
active = document.get(active_id) if active_id else None
if active is None:
    st.error(user_message(ACTIVE_NOT_FOUND))
    st.stop()

cfg = GuidesConfig(
    snap_threshold_px=threshold_px,
    hysteresis_px=hysteresis_px,
    grid_enabled=grid_enabled,
    grid_size=grid_size,
    page_width=document.page_width,
    page_height=document.page_height,
)
others = [el for el in document.elements if el.id != active.id]

tab_frame, tab_replay, tab_eval = st.tabs(["Frame", "Replay", "Evaluate"])

with tab_frame:
    c1, c2 = st.columns(2)
    raw_x = c1.slider("Proposed x", -50.0, float(document.page_width), float(active.x), 0.5)
    raw_y = c2.slider("Proposed y", -50.0, float(document.page_height) * 1.5, float(active.y), 0.5)

    session = DragSession(cfg)
    session.start(active.id, document.elements)
    sf = session.move(active, raw_x, raw_y, zoom)
    session.end()

    m1, m2, m3 = st.columns(3)
    m1.metric("Applied x", f"{sf.x:.2f}", f"{sf.x - raw_x:+.2f}")
    m2.metric("Applied y", f"{sf.y:.2f}", f"{sf.y - raw_y:+.2f}")
    m3.metric("Guides", len(sf.guides))
    st.caption(f"snap keys: x = {sf.frame.snap_key_x}  |  y = {sf.frame.snap_key_y}")

    buf = io.BytesIO()
    render_frame_debug(others, active, (raw_x, raw_y), sf.frame, buf, document.page_width, document.page_height, guides=sf.guides)
    st.image(buf.getvalue(), caption="World view: raw (dashed), corrected (filled), guides", use_container_width=True)

    with st.expander("Candidates and scores"):
        threshold, _ = world_thresholds(cfg.snap_threshold_px, cfg.hysteresis_px, zoom)
        moved = active.with_position(raw_x, raw_y)
        for axis, matches in (
            ("x", find_alignments_x(moved, raw_x, others, cfg.page_width, threshold)),
            ("y", find_alignments_y(moved, raw_y, others, cfg.page_height, threshold)),
        ):
            rows = [
                {"key": s.match.key, "pos": s.match.pos, "delta": round(s.match.delta, 3), "score": round(s.score, 2)}
                for s in score_matches(matches, active.is_text)
            ]
            st.markdown(f"**{axis.upper()} axis** ({len(rows)} candidates)")
            if rows:
                st.dataframe(rows, use_container_width=True)

    with st.expander("Screen overlay"):
        width = int(world_to_px(document.page_width, zoom))
        height = int(world_to_px(document.page_height, zoom))
        overlay = render_guides(new_overlay(width, height), sf.guides, zoom, width, height)
        st.image(overlay, caption=f"Overlay {width}x{height}px")
        st.download_button("Download overlay.svg", guides_to_svg(sf.guides, zoom, width, height), file_name="overlay.svg")

with tab_replay:
    st.caption(TOOLTIP_TRACE)
    trace_file = st.file_uploader("Drag trace (optional)", type=["csv", "json"], help=TOOLTIP_TRACE)
    steps = st.number_input("Frames", min_value=5, max_value=500, value=60, step=5)
    jitter = st.slider("Jitter (px)", 0.0, 15.0, 3.0, 0.5)
    if st.button("Replay", type="primary"):
        if trace_file is not None:
            trace, trace_error = _load_uploaded_trace(trace_file, zoom)
        else:
            trace = hover_trace((active.x, active.y), seed=SEED, steps=int(steps), jitter_px=jitter, zoom=zoom)
            trace_error = None
        if trace_error:
            st.error(user_message(trace_error))
            st.stop()
        summary = replay_trace(document.elements, active, trace, cfg)
        st.json(summary.as_dict())
        st.line_chart({
            "raw x": [p.x for p in trace],
            "applied x": [f.x for f in summary.frames],
        })

with tab_eval:
    st.caption(EVAL_SHORT)
    n_synth = st.number_input("Synthetic pages", min_value=1, max_value=50, value=5, step=1)
    if st.button("Run evaluation"):
        try:
            with st.spinner("Evaluating..."):
                report_dir = run_evaluation(run_name="eval_ui", n_synthetic=int(n_synth), seed=SEED, repo_root=Path.cwd().resolve())
        except (OSError, ValueError) as e:
            logger.exception("evaluation failed")
            st.error(f"{user_message(RUN_FAILED)} ({e})")
            st.stop()
        st.success(f"Wrote {report_dir}")
        lb_path = report_dir / "leaderboard.json"
        if lb_path.exists():
            st.json(json.loads(lb_path.read_text(encoding="utf-8")))
        plot = report_dir / "plots" / "flicker_rate.png"
        if plot.exists():
            st.image(str(plot))
