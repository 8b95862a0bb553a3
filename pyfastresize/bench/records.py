"""
Tabular measurement sink.

Appends benchmark and distortion records to CSV files, writing the header
only when the file does not exist yet or is empty.

Author: B.G.
"""

import csv
from pathlib import Path

from .. import constants as cte


def append_csv_row(csv_path, header, row) -> None:
    """
    Append one row to a CSV file, writing ``header`` first if the file is new.

    Args:
        csv_path: Destination file (parent directories are created)
        header: Column names (sequence or comma-separated string); may be empty
        row: Values (sequence or already formatted comma-separated string)

    Raises:
        OSError: If the file cannot be opened for appending
    """
    path = Path(csv_path)
    write_header = not path.exists() or path.stat().st_size == 0
    if path.parent and not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)

    if isinstance(header, str):
        header = header.split(",") if header else []
    if isinstance(row, str):
        row = row.split(",")

    try:
        with path.open("a", newline="", encoding="utf-8") as fh:
            writer = csv.writer(fh)
            if write_header and header:
                writer.writerow(header)
            writer.writerow(row)
    except OSError as e:
        raise OSError(f"append_csv_row: cannot open file '{path}': {e}") from e


def read_csv_rows(csv_path):
    """Read a sink CSV back as a list of dicts keyed by the header."""
    with Path(csv_path).open("r", newline="", encoding="utf-8") as fh:
        return list(csv.DictReader(fh))


def bench_row(backend, out_w, out_h, channels, inner_reps, result):
    """Format a BenchResult as a row matching ``BENCH_CSV_HEADER``."""
    return [
        backend,
        int(out_w),
        int(out_h),
        int(channels),
        int(inner_reps),
        f"{result.mean_ms:.6f}",
        f"{result.stddev_ms:.6f}",
        f"{result.min_ms:.6f}",
        f"{result.max_ms:.6f}",
    ]


def attack_row(backend, src, down_w, down_h, down_method, up_method, metrics):
    """Format AttackMetrics as a row matching ``ATTACK_CSV_HEADER``."""
    return [
        backend,
        src.width,
        src.height,
        int(down_w),
        int(down_h),
        str(getattr(down_method, "value", down_method)),
        str(getattr(up_method, "value", up_method)),
        f"{metrics.mae:.6f}",
        f"{metrics.rmse:.6f}",
        "inf" if metrics.psnr == float("inf") else f"{metrics.psnr:.6f}",
        metrics.max_abs,
    ]


def append_bench_result(csv_path, backend, out_w, out_h, channels, inner_reps, result):
    append_csv_row(
        csv_path,
        cte.BENCH_CSV_HEADER,
        bench_row(backend, out_w, out_h, channels, inner_reps, result),
    )


__all__ = [
    "append_csv_row",
    "read_csv_rows",
    "bench_row",
    "attack_row",
    "append_bench_result",
]
