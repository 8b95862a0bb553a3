"""
Scaling-attack distortion metrics.

Runs a downscale -> upscale round trip through the resize facade and measures
how far the reconstruction drifts from the original: mean absolute error,
root mean squared error, PSNR and the largest absolute difference. Useful to
compare how much information each (down, up) method pair destroys.

Author: B.G.
"""

import math
from dataclasses import dataclass

import numpy as np

from .. import constants as cte
from ..errors import InvalidInput
from ..image import PixelBuffer
from ..rastermanip import resize
from .compare import check_same_shape


@dataclass(frozen=True)
class AttackMetrics:
    mae: float = 0.0  # mean absolute error over all channel values
    rmse: float = 0.0  # root mean squared error
    psnr: float = 0.0  # dB; +inf when both images are identical
    max_abs: int = 0  # max absolute difference (0..255)


def psnr_from_mse(mse: float, peak: float = cte.PIXEL_MAX) -> float:
    """PSNR in dB: 20*log10(peak) - 10*log10(mse), +inf for mse == 0."""
    if mse == 0.0:
        return math.inf
    return 20.0 * math.log10(peak) - 10.0 * math.log10(mse)


def diff_metrics(a: PixelBuffer, b: PixelBuffer) -> AttackMetrics:
    """
    Distortion metrics of ``b`` against reference ``a``.

    Raises:
        ShapeMismatch: If the geometries differ
        InvalidInput: If the images hold no values
    """
    check_same_shape(a, b, "diff_metrics")
    n = a.size_bytes
    if n == 0:
        raise InvalidInput("diff_metrics: empty images")

    d = a.data.astype(np.int64) - b.data.astype(np.int64)
    ad = np.abs(d)
    # Integer sums are exact; divide once at the end
    sum_abs = float(ad.sum())
    sum_sq = float((d * d).sum())

    mse = sum_sq / n
    return AttackMetrics(
        mae=sum_abs / n,
        rmse=math.sqrt(mse),
        psnr=psnr_from_mse(mse),
        max_abs=int(ad.max()),
    )


def down_up_metrics(
    src: PixelBuffer,
    down_w: int,
    down_h: int,
    down_method="bilinear",
    up_method="bilinear",
    backend="seq",
    threads: int = cte.DEFAULT_THREADS,
) -> AttackMetrics:
    """
    Downscale ``src`` to (down_w, down_h), upscale back, and measure the damage.

    Args:
        src: Original image
        down_w, down_h: Intermediate size (> 0)
        down_method: Method used for the first resize
        up_method: Method used to go back to the original size
        backend: 'seq' or 'par'
        threads: Worker threads for 'par'

    Returns:
        AttackMetrics

    Raises:
        InvalidInput: Empty source or non-positive intermediate size

    Example:
        m = down_up_metrics(img, img.width // 4, img.height // 4,
                            down_method='nearest', up_method='bilinear')
        print(m.psnr)
    """
    if not isinstance(src, PixelBuffer):
        raise TypeError(f"down_up_metrics: src must be a PixelBuffer, got {type(src).__name__}")
    if src.empty or not src.is_valid():
        raise InvalidInput("down_up_metrics: empty source image")
    if (
        not isinstance(down_w, (int, np.integer))
        or not isinstance(down_h, (int, np.integer))
        or down_w <= 0
        or down_h <= 0
    ):
        raise InvalidInput(f"down_up_metrics: invalid downscale size ({down_w}, {down_h})")

    down = resize(src, down_w, down_h, down_method, backend, threads)
    up = resize(down, src.width, src.height, up_method, backend, threads)
    return diff_metrics(src, up)


__all__ = ["AttackMetrics", "psnr_from_mse", "diff_metrics", "down_up_metrics"]
