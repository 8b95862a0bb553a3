"""
Benchmark harness for image resizing.

Runs a resize invocation a number of untimed warmup times, then a number of
timed runs measured with ``time.perf_counter`` (monotonic), and reduces the
samples to mean, sample standard deviation, min and max in milliseconds.

Two sampling modes exist:

- ``independent`` (inner_reps == 1): each sample is one invocation.
- ``batch_mean`` (inner_reps > 1): each sample is the elapsed time of
  ``inner_reps`` consecutive invocations divided by ``inner_reps``. Such a
  sample is a mean over a batch, so its spread understates the per-call
  variance; ``BenchResult.sample_mode`` records which mode produced a result.

Author: B.G.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable

import numpy as np

from .. import constants as cte
from ..errors import InvalidParameters
from ..rastermanip import resize
from ..rastermanip.resizing import check_resize_args, parse_method, resolve_backend, resolve_threads

logger = logging.getLogger(__name__)

SAMPLE_INDEPENDENT = "independent"
SAMPLE_BATCH_MEAN = "batch_mean"


@dataclass(frozen=True)
class BenchResult:
    """Reduced timing statistics (milliseconds)."""

    runs: int = 0
    mean_ms: float = 0.0
    stddev_ms: float = 0.0
    min_ms: float = 0.0
    max_ms: float = 0.0
    inner_reps: int = 1
    sample_mode: str = SAMPLE_INDEPENDENT
    backend: str = ""
    samples: tuple = field(default=(), repr=False)
    output_shape: tuple = ()


def summarize(samples, inner_reps: int = 1, backend: str = "", output_shape=()) -> BenchResult:
    """
    Reduce timing samples to a BenchResult.

    Args:
        samples: Sequence of elapsed times in milliseconds (at least one)
        inner_reps: Invocations averaged into each sample
        backend: Label of the backend that produced the samples
        output_shape: Shape of the last retained output

    Returns:
        BenchResult: runs, mean, sample stddev (n-1, 0 for a single sample),
                     min and max
    """
    values = np.asarray(samples, dtype=np.float64)
    if values.size == 0:
        raise InvalidParameters("summarize: no samples to reduce")

    lo = float(values.min())
    hi = float(values.max())
    # Rounding in the sum may push the mean a ulp past the extremes
    mean = min(max(float(values.mean()), lo), hi)
    stddev = float(values.std(ddof=1)) if values.size >= 2 else 0.0

    return BenchResult(
        runs=int(values.size),
        mean_ms=mean,
        stddev_ms=stddev,
        min_ms=lo,
        max_ms=hi,
        inner_reps=int(inner_reps),
        sample_mode=SAMPLE_INDEPENDENT if inner_reps == 1 else SAMPLE_BATCH_MEAN,
        backend=backend,
        samples=tuple(float(v) for v in values),
        output_shape=tuple(output_shape),
    )


def time_invocations(
    fn: Callable,
    warmup: int = cte.DEFAULT_WARMUP_RUNS,
    runs: int = cte.DEFAULT_MEASURED_RUNS,
    inner_reps: int = cte.DEFAULT_INNER_REPS,
):
    """
    Time repeated calls of a zero-argument callable.

    Args:
        fn: Invocation to measure
        warmup: Untimed calls executed first (>= 0)
        runs: Timed samples (>= 1)
        inner_reps: Calls per timed sample (>= 1); the sample is the batch
                    elapsed time divided by ``inner_reps``

    Returns:
        tuple: (samples_ms, last_result). The last result is retained so the
               measured work is observable by the caller.
    """
    if warmup < 0:
        raise InvalidParameters(f"warmup must be >= 0, got {warmup}")
    if runs <= 0:
        raise InvalidParameters(f"runs must be > 0, got {runs}")
    if inner_reps <= 0:
        raise InvalidParameters(f"inner_reps must be > 0, got {inner_reps}")

    last = None
    for _ in range(warmup):
        for _ in range(inner_reps):
            last = fn()

    samples = []
    for _ in range(runs):
        t0 = time.perf_counter()
        for _ in range(inner_reps):
            last = fn()
        t1 = time.perf_counter()
        samples.append((t1 - t0) * 1000.0 / inner_reps)

    return samples, last


def benchmark_resize(
    img,
    out_w: int,
    out_h: int,
    method="nearest",
    backend="seq",
    threads: int = cte.DEFAULT_THREADS,
    warmup: int = cte.DEFAULT_WARMUP_RUNS,
    runs: int = cte.DEFAULT_MEASURED_RUNS,
    inner_reps: int = cte.DEFAULT_INNER_REPS,
) -> BenchResult:
    """
    Benchmark ``resize`` for one configuration.

    All arguments are validated before anything runs. Invocations are issued
    one after another from the calling thread; only the inside of each
    invocation is parallel when backend='par'.

    Args:
        img: Source PixelBuffer
        out_w, out_h: Target size (> 0)
        method: 'nearest' or 'bilinear'
        backend: 'seq' or 'par'
        threads: Worker threads for 'par' (0 => runtime default)
        warmup: Untimed warmup runs (>= 0)
        runs: Measured runs (>= 1)
        inner_reps: Invocations per measured sample (>= 1, batch-mean mode if > 1)

    Returns:
        BenchResult

    Example:
        r = benchmark_resize(img, 3840, 2160, 'bilinear', 'par', threads=12,
                             warmup=2, runs=10)
        print(f"{r.mean_ms:.2f} +/- {r.stddev_ms:.2f} ms")
    """
    if warmup < 0 or runs <= 0 or inner_reps <= 0:
        raise InvalidParameters(
            f"benchmark_resize: need warmup >= 0, runs > 0, inner_reps > 0; "
            f"got warmup={warmup}, runs={runs}, inner_reps={inner_reps}"
        )
    try:
        check_resize_args(img, out_w, out_h, op="benchmark_resize")
    except ValueError as e:
        raise InvalidParameters(str(e)) from e

    method = parse_method(method)
    resolve_threads(threads)
    effective = resolve_backend(backend)

    def invoke():
        return resize(img, out_w, out_h, method, effective, threads)

    samples, last = time_invocations(invoke, warmup, runs, inner_reps)
    result = summarize(samples, inner_reps, effective.value, last.shape)
    logger.debug(
        "benchmark %dx%d %s/%s: mean=%.3f ms stddev=%.3f ms (%s)",
        out_w, out_h, method.value, effective.value, result.mean_ms, result.stddev_ms,
        result.sample_mode,
    )
    return result


__all__ = [
    "BenchResult",
    "SAMPLE_INDEPENDENT",
    "SAMPLE_BATCH_MEAN",
    "summarize",
    "time_invocations",
    "benchmark_resize",
]
