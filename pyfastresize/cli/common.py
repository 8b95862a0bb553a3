"""Options and helpers shared by the PyFastResize CLI commands."""

import logging

import click

from .. import constants as cte

method_option = click.option(
    "--method",
    "-m",
    type=click.Choice(["nearest", "bilinear"]),
    default="nearest",
    show_default=True,
    help="Interpolation method",
)

backend_option = click.option(
    "--backend",
    "-b",
    type=click.Choice(["seq", "par"]),
    default="seq",
    show_default=True,
    help="Execution backend (sequential or row-parallel)",
)

threads_option = click.option(
    "--threads",
    "-t",
    type=click.IntRange(min=0),
    default=cte.DEFAULT_THREADS,
    show_default=True,
    help="Worker threads for the 'par' backend (0 = all cores)",
)

warmup_option = click.option(
    "--warmup",
    type=click.IntRange(min=0),
    default=cte.DEFAULT_WARMUP_RUNS,
    show_default=True,
    help="Untimed warmup runs",
)

runs_option = click.option(
    "--runs",
    type=click.IntRange(min=1),
    default=cte.DEFAULT_MEASURED_RUNS,
    show_default=True,
    help="Measured runs",
)

inner_reps_option = click.option(
    "--inner-reps",
    type=click.IntRange(min=1),
    default=cte.DEFAULT_INNER_REPS,
    show_default=True,
    help="Resizes per measured run (sample = batch time / inner reps)",
)

csv_option = click.option(
    "--csv",
    "csv_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Append results to this CSV file",
)

verbose_option = click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")


def setup_logging(verbose):
    """Route library log records to stderr (DEBUG with --verbose)."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def format_bench(result):
    return (
        f"mean={result.mean_ms:.3f} ms  stddev={result.stddev_ms:.3f} ms  "
        f"min={result.min_ms:.3f} ms  max={result.max_ms:.3f} ms  "
        f"(runs={result.runs}, inner_reps={result.inner_reps}, {result.sample_mode})"
    )
