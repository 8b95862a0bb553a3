"""
Pixel-wise comparison of two images.

Used to show that the sequential and row-parallel backends agree: for
correct implementations ``compare_images(seq, par).different_values == 0``.

Author: B.G.
"""

from dataclasses import dataclass

import numpy as np

from ..errors import ShapeMismatch
from ..image import PixelBuffer


@dataclass(frozen=True)
class DiffStats:
    different_values: int = 0  # channel values that differ
    max_abs_diff: int = 0  # max |a - b| over all channel values (0..255)

    @property
    def identical(self) -> bool:
        return self.different_values == 0


def check_same_shape(a, b, op: str) -> None:
    for name, buf in (("a", a), ("b", b)):
        if not isinstance(buf, PixelBuffer):
            raise TypeError(f"{op}: {name} must be a PixelBuffer, got {type(buf).__name__}")
    if a.shape != b.shape:
        raise ShapeMismatch(
            f"{op}: size/channels mismatch "
            f"({a.width}x{a.height}x{a.channels} vs {b.width}x{b.height}x{b.channels})"
        )
    if a.size_bytes != b.size_bytes:
        raise ShapeMismatch(f"{op}: buffer size mismatch ({a.size_bytes} vs {b.size_bytes})")


def abs_diff(a: PixelBuffer, b: PixelBuffer) -> np.ndarray:
    """Flat int16 array of |a - b| over every channel value."""
    return np.abs(a.data.astype(np.int16) - b.data.astype(np.int16))


def compare_images(a: PixelBuffer, b: PixelBuffer) -> DiffStats:
    """
    Count differing channel values and the largest absolute difference.

    Args:
        a: First image
        b: Second image, same width, height and channels as ``a``

    Returns:
        DiffStats

    Raises:
        ShapeMismatch: If the geometries differ
    """
    check_same_shape(a, b, "compare_images")
    d = abs_diff(a, b)
    return DiffStats(
        different_values=int(np.count_nonzero(d)),
        max_abs_diff=int(d.max()) if d.size else 0,
    )


def diff_mask(a: PixelBuffer, b: PixelBuffer) -> np.ndarray:
    """Boolean (height, width) map of pixels where any channel differs."""
    check_same_shape(a, b, "diff_mask")
    return abs_diff(a, b).reshape(a.shape).any(axis=2)


__all__ = ["DiffStats", "check_same_shape", "abs_diff", "compare_images", "diff_mask"]
