"""
Size-scaling benchmark sweep and the automatic experiment protocol.

The sweep benchmarks one (method, backend) configuration over a geometric
series of output sizes. The experiment first checks that both backends
agree pixel for pixel at a fixed size, then sweeps both backends and
appends one CSV row per (backend, size) to separate files.

Author: B.G.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Callable, Optional

from .. import constants as cte
from ..errors import InvalidParameters
from ..rastermanip.resizing import Backend, resize, resolve_backend
from ..validate import DiffStats, compare_images
from .harness import benchmark_resize
from .records import append_bench_result

logger = logging.getLogger(__name__)


def _round_half_up(v: float) -> int:
    # sizes are positive, so this is round-half-away-from-zero
    return int(math.floor(v + 0.5))


def sweep_sizes(base_w: int, base_h: int, steps: int, scale: float):
    """
    Geometric series of output sizes.

    Args:
        base_w, base_h: First size (> 0)
        steps: Number of sizes (> 0)
        scale: Growth factor between consecutive sizes (> 1.0)

    Returns:
        list[tuple[int, int]]: ``steps`` (width, height) pairs starting at the
        base, each obtained from the previous one by multiplying with
        ``scale`` and rounding half away from zero.
    """
    if base_w <= 0 or base_h <= 0:
        raise InvalidParameters(f"sweep: base size must be > 0, got ({base_w}, {base_h})")
    if steps <= 0:
        raise InvalidParameters(f"sweep: steps must be > 0, got {steps}")
    if not scale > 1.0:
        raise InvalidParameters(f"sweep: scale must be > 1.0 (e.g. 1.25, 1.5, 2.0), got {scale}")

    sizes = []
    w, h = int(base_w), int(base_h)
    for _ in range(steps):
        sizes.append((w, h))
        w = _round_half_up(w * scale)
        h = _round_half_up(h * scale)
    return sizes


def benchmark_sweep(
    img,
    base_w: int,
    base_h: int,
    steps: int,
    scale: float,
    method="bilinear",
    backend="seq",
    threads: int = cte.DEFAULT_THREADS,
    warmup: int = cte.DEFAULT_WARMUP_RUNS,
    runs: int = cte.DEFAULT_MEASURED_RUNS,
    inner_reps: int = cte.DEFAULT_INNER_REPS,
    csv_path=None,
    on_step: Optional[Callable] = None,
):
    """
    Run ``benchmark_resize`` for every size of ``sweep_sizes``.

    Args:
        img: Source PixelBuffer
        base_w, base_h, steps, scale: See ``sweep_sizes``
        method, backend, threads, warmup, runs, inner_reps: See ``benchmark_resize``
        csv_path: If given, one row per size is appended to this file
        on_step: Optional callback ``on_step(index, out_w, out_h, result)``

    Returns:
        list[tuple[int, int, BenchResult]]
    """
    sizes = sweep_sizes(base_w, base_h, steps, scale)
    records = []
    for i, (w, h) in enumerate(sizes):
        logger.info("sweep step %d/%d: %dx%d", i + 1, len(sizes), w, h)
        r = benchmark_resize(img, w, h, method, backend, threads, warmup, runs, inner_reps)
        if csv_path is not None:
            append_bench_result(csv_path, r.backend, w, h, img.channels, inner_reps, r)
        if on_step is not None:
            on_step(i, w, h, r)
        records.append((w, h, r))
    return records


@dataclass
class ExperimentReport:
    validation: DiffStats
    validation_size: tuple
    seq_records: list = field(default_factory=list)
    par_records: list = field(default_factory=list)
    csv_paths: tuple = ()

    @property
    def validation_passed(self) -> bool:
        return self.validation.different_values == 0


def run_experiment(
    img,
    method=cte.EXPERIMENT_METHOD,
    threads: int = cte.EXPERIMENT_THREADS,
    inner_reps: int = cte.EXPERIMENT_INNER_REPS,
    validation_size=cte.EXPERIMENT_VALIDATION_SIZE,
    base_size=cte.EXPERIMENT_BASE_SIZE,
    steps: int = cte.EXPERIMENT_STEPS,
    scale: float = cte.EXPERIMENT_SCALE,
    warmup: int = cte.EXPERIMENT_WARMUP,
    runs: int = cte.EXPERIMENT_RUNS,
    seq_csv=cte.EXPERIMENT_SEQ_CSV,
    par_csv=cte.EXPERIMENT_PAR_CSV,
    on_validation: Optional[Callable] = None,
    on_step: Optional[Callable] = None,
) -> ExperimentReport:
    """
    Reproducible two-phase experiment.

    1. Validation: resize to ``validation_size`` with both backends and
       compare. If any channel value differs, the report is returned
       immediately with empty sweep records.
    2. Sweep: for each size of the series, benchmark the sequential then the
       row-parallel backend, appending to ``seq_csv`` and ``par_csv``.

    ``on_validation(diff_stats)`` is called once the comparison is done and
    ``on_step(index, backend, out_w, out_h, result)`` is called after each
    measurement if given.

    Raises:
        BackendUnavailable: The row-parallel backend cannot run, so there is
                            nothing to validate against

    Example:
        img = pfr.io.load_image('test_1.png')
        report = pfr.bench.run_experiment(img)
        if not report.validation_passed:
            ...
    """
    vw, vh = validation_size
    par_backend = resolve_backend(Backend.ROW_PARALLEL, on_unavailable="raise")

    out_seq = resize(img, vw, vh, method, Backend.SEQUENTIAL, 0)
    out_par = resize(img, vw, vh, method, par_backend, threads)
    diff = compare_images(out_seq, out_par)
    report = ExperimentReport(validation=diff, validation_size=(vw, vh))
    logger.info(
        "validation %dx%d: different_values=%d max_abs_diff=%d",
        vw, vh, diff.different_values, diff.max_abs_diff,
    )
    if on_validation is not None:
        on_validation(diff)
    if not report.validation_passed:
        logger.error("validation failed, skipping benchmark sweep")
        return report

    base_w, base_h = base_size
    for i, (w, h) in enumerate(sweep_sizes(base_w, base_h, steps, scale)):
        for backend, n_threads, csv_path, records in (
            (Backend.SEQUENTIAL, 0, seq_csv, report.seq_records),
            (par_backend, threads, par_csv, report.par_records),
        ):
            r = benchmark_resize(img, w, h, method, backend, n_threads, warmup, runs, inner_reps)
            append_bench_result(csv_path, r.backend, w, h, img.channels, inner_reps, r)
            records.append((w, h, r))
            if on_step is not None:
                on_step(i, r.backend, w, h, r)

    report.csv_paths = (str(seq_csv), str(par_csv))
    return report


__all__ = [
    "sweep_sizes",
    "benchmark_sweep",
    "ExperimentReport",
    "run_experiment",
]
