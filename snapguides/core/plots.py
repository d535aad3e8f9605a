# snapguides/core/plots.py
"""
Evaluation plots: flicker rate by method, flicker rate by family and method.
Saves under reports/<run_name>/plots/.
"""

from __future__ import annotations

import json
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np


def _load_leaderboard(report_dir: Path) -> dict:
    path = report_dir / "leaderboard.json"
    if not path.exists():
        return {}
    return json.loads(path.read_text(encoding="utf-8"))


def plot_flicker_rate(report_dir: Path) -> Path:
    """
    Bar chart of mean flicker rate by method. Saves to report_dir/plots/flicker_rate.png.
    Returns path to saved figure.
    """
    plots_dir = report_dir / "plots"
    plots_dir.mkdir(parents=True, exist_ok=True)
    out = plots_dir / "flicker_rate.png"
    by_method = _load_leaderboard(report_dir).get("by_method", {})

    fig, ax = plt.subplots(figsize=(6, 4))
    if by_method:
        methods = list(by_method.keys())
        rates = [by_method[m].get("flicker_rate", 0.0) for m in methods]
        ax.bar(methods, rates, color=["#e74c3c", "#f39c12", "#2ecc71"][: len(methods)])
        ax.set_title("Guide flicker by method")
    else:
        ax.set_title("Guide flicker by method (no data)")
    ax.set_ylabel("Snap-key changes per frame")
    ax.set_xlabel("Method")
    plt.tight_layout()
    fig.savefig(out, dpi=120)
    plt.close(fig)
    return out


def plot_flicker_by_family(report_dir: Path) -> Path:
    """Grouped bars: flicker rate per family, one bar per method."""
    plots_dir = report_dir / "plots"
    plots_dir.mkdir(parents=True, exist_ok=True)
    out = plots_dir / "flicker_by_family.png"
    by_family = _load_leaderboard(report_dir).get("by_family", {})
    families = list(by_family.keys())
    methods = sorted({m for fam in by_family.values() for m in fam})

    fig, ax = plt.subplots(figsize=(7, 4))
    if families and methods:
        x = np.arange(len(families))
        width = 0.8 / len(methods)
        for i, m in enumerate(methods):
            vals = [by_family[f].get(m, {}).get("flicker_rate", 0.0) for f in families]
            ax.bar(x + i * width, vals, width=width, label=m)
        ax.set_xticks(x + width * (len(methods) - 1) / 2)
        ax.set_xticklabels(families)
        ax.legend(fontsize=8)
    ax.set_ylabel("Snap-key changes per frame")
    ax.set_title("Guide flicker by family")
    plt.tight_layout()
    fig.savefig(out, dpi=120)
    plt.close(fig)
    return out


def generate_all_plots(report_dir: Path) -> list[Path]:
    """Generate all evaluation plots."""
    return [plot_flicker_rate(report_dir), plot_flicker_by_family(report_dir)]
