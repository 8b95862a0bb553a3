"""
Benchmark result plotting for PyFastResize.

Reads CSV files produced by the benchmark sink and renders mean time
(with a +/- stddev band) against output size for each backend, and computes
per-size speedups of the row-parallel backend over the sequential one.

Dependencies:
- matplotlib: Figure rendering on an Agg canvas (no display required)

Author: B.G.
"""

from pathlib import Path

import numpy as np
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from ..bench.records import read_csv_rows


def _size_key(row):
    return int(row["out_w"]), int(row["out_h"])


def group_by_backend(rows):
    """Split sink rows into {backend: rows sorted by output pixel count}."""
    groups = {}
    for row in rows:
        groups.setdefault(row["backend"], []).append(row)
    for backend in groups:
        groups[backend].sort(key=lambda r: int(r["out_w"]) * int(r["out_h"]))
    return groups


def speedup_table(seq_rows, par_rows):
    """
    Per-size speedup of the parallel rows over the sequential rows.

    Args:
        seq_rows: Sink rows (dicts) measured with the sequential backend
        par_rows: Sink rows measured with the row-parallel backend

    Returns:
        list[dict]: One entry per size present in both inputs, sorted by
        output pixel count, with keys out_w, out_h, seq_ms, par_ms, speedup.
    """
    seq = {_size_key(r): float(r["mean_ms"]) for r in seq_rows}
    par = {_size_key(r): float(r["mean_ms"]) for r in par_rows}
    table = []
    for key in sorted(set(seq) & set(par), key=lambda k: k[0] * k[1]):
        s, p = seq[key], par[key]
        table.append(
            {
                "out_w": key[0],
                "out_h": key[1],
                "seq_ms": s,
                "par_ms": p,
                "speedup": s / p if p > 0 else float("inf"),
            }
        )
    return table


def plot_bench_csv(csv_paths, output_path, title="Resize benchmark"):
    """
    Plot mean time vs. output megapixels for every backend found in the CSVs.

    Args:
        csv_paths: One path or a list of sink CSV paths
        output_path: Image file to write (format from the suffix)
        title: Figure title

    Returns:
        Path: The written figure

    Raises:
        ValueError: If the files contain no rows
    """
    if isinstance(csv_paths, (str, Path)):
        csv_paths = [csv_paths]

    rows = []
    for p in csv_paths:
        rows.extend(read_csv_rows(p))
    if not rows:
        raise ValueError("plot_bench_csv: no benchmark rows found")

    # Agg canvas: no pyplot state, no display needed
    fig = Figure(figsize=(7, 4.5))
    FigureCanvasAgg(fig)
    ax = fig.add_subplot(1, 1, 1)
    for backend, brows in sorted(group_by_backend(rows).items()):
        mp = np.array([int(r["out_w"]) * int(r["out_h"]) / 1e6 for r in brows])
        mean = np.array([float(r["mean_ms"]) for r in brows])
        std = np.array([float(r["stddev_ms"]) for r in brows])
        ax.plot(mp, mean, marker="o", label=backend)
        ax.fill_between(mp, mean - std, mean + std, alpha=0.2)

    ax.set_xlabel("Output size (megapixels)")
    ax.set_ylabel("Mean time (ms)")
    ax.set_title(title)
    ax.grid(True, alpha=0.3)
    ax.legend()
    fig.tight_layout()

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=120)
    return output_path
