"""
Benchmark module for PyFastResize.

Wall-clock measurement of resize invocations and their tabular record:

- harness: warmup + timed runs reduced to mean/stddev/min/max (BenchResult)
- records: CSV sink with header-once semantics
- sweep: geometric size sweeps and the automatic two-phase experiment

Usage:
    import pyfastresize as pfr

    r = pfr.bench.benchmark_resize(img, 1920, 1080, "bilinear", "par",
                                   threads=8, warmup=2, runs=10)
    print(r.mean_ms, r.stddev_ms)

    pfr.bench.benchmark_sweep(img, 512, 512, 6, 1.5, csv_path="bench.csv")

Author: B.G.
"""

from .harness import (
    SAMPLE_BATCH_MEAN,
    SAMPLE_INDEPENDENT,
    BenchResult,
    benchmark_resize,
    summarize,
    time_invocations,
)
from .records import (
    append_bench_result,
    append_csv_row,
    attack_row,
    bench_row,
    read_csv_rows,
)
from .sweep import ExperimentReport, benchmark_sweep, run_experiment, sweep_sizes

__all__ = [
    "BenchResult",
    "SAMPLE_INDEPENDENT",
    "SAMPLE_BATCH_MEAN",
    "summarize",
    "time_invocations",
    "benchmark_resize",
    "append_csv_row",
    "read_csv_rows",
    "bench_row",
    "attack_row",
    "append_bench_result",
    "sweep_sizes",
    "benchmark_sweep",
    "ExperimentReport",
    "run_experiment",
]
