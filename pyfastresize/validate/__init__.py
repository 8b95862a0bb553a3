"""
Validation module for PyFastResize.

Correctness and fidelity measurements built on the resize facade:

- compare: pixel-wise diff (DiffStats) used to prove backend equivalence
- attacks: downscale -> upscale round trip distortion (AttackMetrics)

Usage:
    import pyfastresize as pfr

    seq = pfr.rastermanip.resize(img, 896, 896, "bilinear", "seq")
    par = pfr.rastermanip.resize(img, 896, 896, "bilinear", "par", threads=12)
    assert pfr.validate.compare_images(seq, par).different_values == 0

    m = pfr.validate.down_up_metrics(img, 128, 128, "nearest", "bilinear")

Author: B.G.
"""

from .compare import DiffStats, compare_images, diff_mask
from .attacks import AttackMetrics, diff_metrics, down_up_metrics, psnr_from_mse

__all__ = [
    "DiffStats",
    "compare_images",
    "diff_mask",
    "AttackMetrics",
    "diff_metrics",
    "down_up_metrics",
    "psnr_from_mse",
]
