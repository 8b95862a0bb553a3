"""
Benchmark CLI commands for PyFastResize.

Author: B.G.
"""

import os
import sys

import click

import pyfastresize as pfr
import pyfastresize.constants as cte

from .common import (
    backend_option,
    csv_option,
    format_bench,
    inner_reps_option,
    method_option,
    runs_option,
    setup_logging,
    threads_option,
    verbose_option,
    warmup_option,
)
from .resize_commands import EXIT_VALIDATION_FAILED


@click.command()
@click.argument("input_image", type=click.Path(exists=True, dir_okay=False))
@click.argument("out_w", type=int)
@click.argument("out_h", type=int)
@method_option
@backend_option
@threads_option
@warmup_option
@runs_option
@inner_reps_option
@csv_option
@verbose_option
def bench(input_image, out_w, out_h, method, backend, threads, warmup, runs, inner_reps, csv_path, verbose):
    """
    Benchmark resizing INPUT_IMAGE to OUT_W x OUT_H.

    Examples:

        pfr-bench photo.png 1920 1080 -m bilinear -b par -t 8 --runs 20

        # Batch-mean samples, appended to a CSV
        pfr-bench photo.png 1920 1080 --inner-reps 10 --csv bench.csv
    """
    setup_logging(verbose)
    try:
        img = pfr.io.load_image(input_image)
        r = pfr.bench.benchmark_resize(
            img, out_w, out_h, method, backend, threads, warmup, runs, inner_reps
        )
        click.echo(f"[{r.backend}] {out_w}x{out_h}: {format_bench(r)}")
        if csv_path:
            pfr.bench.append_bench_result(
                csv_path, r.backend, out_w, out_h, img.channels, inner_reps, r
            )
            if verbose:
                click.echo(f"Appended results to '{csv_path}'")
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.command()
@click.argument("input_image", type=click.Path(exists=True, dir_okay=False))
@click.argument("base_w", type=int)
@click.argument("base_h", type=int)
@click.argument("steps", type=int)
@click.argument("scale", type=float)
@method_option
@backend_option
@threads_option
@warmup_option
@runs_option
@inner_reps_option
@csv_option
@verbose_option
def benchset(
    input_image, base_w, base_h, steps, scale, method, backend, threads,
    warmup, runs, inner_reps, csv_path, verbose,
):
    """
    Benchmark a geometric sweep of output sizes.

    Starts at BASE_W x BASE_H and multiplies both sides by SCALE (> 1.0)
    between each of the STEPS measurements.
    """
    setup_logging(verbose)

    def report(i, w, h, r):
        click.echo(f"[STEP {i + 1}/{steps}] {w}x{h} [{r.backend}]: {format_bench(r)}")

    try:
        img = pfr.io.load_image(input_image)
        pfr.bench.benchmark_sweep(
            img, base_w, base_h, steps, scale, method, backend, threads,
            warmup, runs, inner_reps, csv_path=csv_path, on_step=report,
        )
        if csv_path:
            click.echo(f"Results appended to '{csv_path}'")
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.command()
@click.argument(
    "input_image",
    type=click.Path(exists=True, dir_okay=False),
    default=cte.EXPERIMENT_INPUT,
    required=False,
)
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False),
    default=".",
    show_default=True,
    help="Directory receiving the sequential and parallel CSV files",
)
@verbose_option
def experiment(input_image, output_dir, verbose):
    """
    Run the reproducible experiment on INPUT_IMAGE (default: test_1.png).

    1. Validation: bilinear resize to 896x896 with both backends; exits with
       status 3 if the outputs differ.
    2. Sweep: 6 sizes from 512x512 growing by 1.5, both backends (12 threads,
       10 resizes per run, 2 warmup + 20 measured runs), appended to
       bench_seq.csv and bench_par.csv.
    """
    setup_logging(verbose)
    seq_csv = os.path.join(output_dir, cte.EXPERIMENT_SEQ_CSV)
    par_csv = os.path.join(output_dir, cte.EXPERIMENT_PAR_CSV)

    def on_validation(d):
        click.echo(f"different_values = {d.different_values}")
        click.echo(f"max_abs_diff     = {d.max_abs_diff}")
        if d.different_values == 0:
            click.echo("VALIDATION PASSED")
            click.echo("\n=== BENCHMARK SWEEP ===")

    def report(i, backend, w, h, r):
        if backend == "seq":
            click.echo(f"\n[STEP {i + 1}/{cte.EXPERIMENT_STEPS}] size = {w}x{h}")
        click.echo(f"  {backend:<4}: mean = {r.mean_ms:.3f} ms")

    try:
        img = pfr.io.load_image(input_image)
        click.echo("=== VALIDATION TEST ===")
        rep = pfr.bench.run_experiment(
            img, seq_csv=seq_csv, par_csv=par_csv,
            on_validation=on_validation, on_step=report,
        )
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if not rep.validation_passed:
        click.echo("VALIDATION FAILED", err=True)
        sys.exit(EXIT_VALIDATION_FAILED)

    click.echo("\nEXPERIMENT COMPLETED")
    click.echo(f"CSV files generated: {seq_csv}, {par_csv}")


@click.command()
@click.argument("csv_files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default="bench.png",
    show_default=True,
    help="Output figure",
)
@verbose_option
def plot_bench(csv_files, output, verbose):
    """
    Plot mean resize time against output size from benchmark CSV files.

    When the files hold both 'seq' and 'par' rows, the per-size speedup is
    printed as well.
    """
    setup_logging(verbose)
    try:
        path = pfr.misc.plot_bench_csv(list(csv_files), output)
        click.echo(f"Saved figure '{path}'")

        rows = []
        for f in csv_files:
            rows.extend(pfr.bench.read_csv_rows(f))
        groups = pfr.misc.group_by_backend(rows)
        table = pfr.misc.speedup_table(groups.get("seq", []), groups.get("par", []))
        for entry in table:
            click.echo(
                f"{entry['out_w']}x{entry['out_h']}: seq={entry['seq_ms']:.3f} ms "
                f"par={entry['par_ms']:.3f} ms speedup={entry['speedup']:.2f}x"
            )
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


__all__ = ["bench", "benchset", "experiment", "plot_bench"]
