"""
Sequential reference resampling kernels.

Single-threaded NumPy implementations of nearest-neighbor and bilinear
resampling. They walk the output image row by row (columns and channels of
one row are evaluated together) and serve both as the performance baseline
and as the correctness reference for the row-parallel kernels.

Author: B.G.
"""

import numpy as np

from .. import constants as cte
from .coords import bilinear_taps, map_coord, nearest_indices, round_half_away


def resize_nearest_seq(src: np.ndarray, out_w: int, out_h: int) -> np.ndarray:
    """
    Nearest-neighbor resampling of a (height, width, channels) uint8 array.

    Args:
        src: Source image, shape (in_h, in_w, channels), dtype uint8
        out_w: Target width (> 0)
        out_h: Target height (> 0)

    Returns:
        numpy.ndarray: New (out_h, out_w, channels) uint8 array
    """
    in_h, in_w, channels = src.shape
    out = np.empty((out_h, out_w, channels), dtype=np.uint8)

    ix = nearest_indices(in_w, out_w)
    iy = nearest_indices(in_h, out_h)

    for y in range(out_h):
        # Whole pixels are copied verbatim
        out[y] = src[iy[y], ix]

    return out


def resize_bilinear_seq(src: np.ndarray, out_w: int, out_h: int) -> np.ndarray:
    """
    Bilinear resampling of a (height, width, channels) uint8 array.

    Each channel blends the four neighbors as
    lerp(lerp(p00, p10, wx), lerp(p01, p11, wx), wy), with
    lerp(a, b, t) = a + t * (b - a), then rounds half away from zero and
    clamps to [0, 255].

    Args:
        src: Source image, shape (in_h, in_w, channels), dtype uint8
        out_w: Target width (> 0)
        out_h: Target height (> 0)

    Returns:
        numpy.ndarray: New (out_h, out_w, channels) uint8 array
    """
    in_h, in_w, channels = src.shape
    out = np.empty((out_h, out_w, channels), dtype=np.uint8)

    x0, x1, wx = bilinear_taps(in_w, out_w)
    wx = wx[:, np.newaxis]

    for y in range(out_h):
        sy = map_coord(y, in_h, out_h)
        y0 = min(max(int(np.floor(sy)), 0), in_h - 1)
        y1 = min(max(y0 + 1, 0), in_h - 1)
        wy = sy - y0

        row0 = src[y0].astype(np.float64)
        row1 = src[y1].astype(np.float64)
        p00 = row0[x0]
        p10 = row0[x1]
        p01 = row1[x0]
        p11 = row1[x1]

        v0 = p00 + wx * (p10 - p00)
        v1 = p01 + wx * (p11 - p01)
        v = v0 + wy * (v1 - v0)

        out[y] = np.clip(round_half_away(v), 0, cte.PIXEL_MAX).astype(np.uint8)

    return out


__all__ = ["resize_nearest_seq", "resize_bilinear_seq"]
