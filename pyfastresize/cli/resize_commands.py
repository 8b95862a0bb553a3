"""
Resize, validation and scaling-attack CLI commands for PyFastResize.

Author: B.G.
"""

import sys

import click

import pyfastresize as pfr

from .common import (
    backend_option,
    csv_option,
    method_option,
    setup_logging,
    threads_option,
    verbose_option,
)

EXIT_VALIDATION_FAILED = 3


@click.command()
@click.argument("input_image", type=click.Path(exists=True, dir_okay=False))
@click.argument("output_image", type=click.Path(dir_okay=False))
@click.argument("out_w", type=int)
@click.argument("out_h", type=int)
@method_option
@backend_option
@threads_option
@verbose_option
def run(input_image, output_image, out_w, out_h, method, backend, threads, verbose):
    """
    Resize INPUT_IMAGE to OUT_W x OUT_H and save it to OUTPUT_IMAGE.

    Examples:

        # Nearest-neighbor, sequential
        pfr-run photo.png small.png 320 240

        # Bilinear, row-parallel with 8 threads
        pfr-run photo.png big.jpg 3840 2160 -m bilinear -b par -t 8
    """
    setup_logging(verbose)
    try:
        img = pfr.io.load_image(input_image)
        if verbose:
            click.echo(f"Loaded '{input_image}' ({img.width}x{img.height}x{img.channels})")
        out = pfr.rastermanip.resize(img, out_w, out_h, method, backend, threads)
        pfr.io.save_image(out, output_image)
        click.echo(f"Saved '{output_image}' ({out.width}x{out.height}x{out.channels})")
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.command()
@click.argument("input_image", type=click.Path(exists=True, dir_okay=False))
@click.argument("out_w", type=int)
@click.argument("out_h", type=int)
@method_option
@threads_option
@verbose_option
def validate(input_image, out_w, out_h, method, threads, verbose):
    """
    Check that the sequential and row-parallel backends agree.

    Resizes INPUT_IMAGE to OUT_W x OUT_H with both backends and compares the
    outputs value by value. Exits with status 3 if any value differs.
    """
    setup_logging(verbose)
    try:
        img = pfr.io.load_image(input_image)
        out_seq = pfr.rastermanip.resize(img, out_w, out_h, method, "seq")
        out_par = pfr.rastermanip.resize(
            img, out_w, out_h, method, "par", threads, on_unavailable="raise"
        )
        d = pfr.validate.compare_images(out_seq, out_par)
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"different_values = {d.different_values}")
    click.echo(f"max_abs_diff     = {d.max_abs_diff}")
    if d.different_values != 0:
        click.echo("VALIDATION FAILED", err=True)
        sys.exit(EXIT_VALIDATION_FAILED)
    click.echo("VALIDATION PASSED")


@click.command()
@click.argument("input_image", type=click.Path(exists=True, dir_okay=False))
@click.argument("down_w", type=int)
@click.argument("down_h", type=int)
@click.option(
    "--down-method",
    type=click.Choice(["nearest", "bilinear"]),
    default="nearest",
    show_default=True,
    help="Method used to downscale",
)
@click.option(
    "--up-method",
    type=click.Choice(["nearest", "bilinear"]),
    default="bilinear",
    show_default=True,
    help="Method used to upscale back to the original size",
)
@backend_option
@threads_option
@csv_option
@verbose_option
def attack(input_image, down_w, down_h, down_method, up_method, backend, threads, csv_path, verbose):
    """
    Measure the distortion of a downscale -> upscale round trip.

    INPUT_IMAGE is downscaled to DOWN_W x DOWN_H, upscaled back to its
    original size and compared with the original (MAE, RMSE, PSNR, max).
    """
    setup_logging(verbose)
    try:
        img = pfr.io.load_image(input_image)
        m = pfr.validate.down_up_metrics(
            img, down_w, down_h, down_method, up_method, backend, threads
        )
        psnr = "inf" if m.psnr == float("inf") else f"{m.psnr:.4f} dB"
        click.echo(f"mae     = {m.mae:.6f}")
        click.echo(f"rmse    = {m.rmse:.6f}")
        click.echo(f"psnr    = {psnr}")
        click.echo(f"max_abs = {m.max_abs}")
        if csv_path:
            effective = pfr.rastermanip.resolve_backend(backend).value
            pfr.bench.append_csv_row(
                csv_path,
                pfr.constants.ATTACK_CSV_HEADER,
                pfr.bench.attack_row(effective, img, down_w, down_h, down_method, up_method, m),
            )
            if verbose:
                click.echo(f"Appended results to '{csv_path}'")
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


__all__ = ["run", "validate", "attack"]
