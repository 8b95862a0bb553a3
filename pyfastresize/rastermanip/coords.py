"""
Coordinate mapping shared by every resampling kernel and backend.

Output pixel centers are aligned with input pixel centers:

    src = (out + 0.5) * (in_size / out_size) - 0.5

The NumPy helpers below are used by the sequential reference backend; the
``ti.func`` twins are used inside the row-parallel Taichi kernels. Both
evaluate the same float64 operations in the same order, which is what makes
the two backends bit-identical.

Author: B.G.
"""

import numpy as np
import taichi as ti

from .. import constants as cte


def map_coord(out_coord, in_size, out_size):
    """
    Map an output pixel index to a fractional source coordinate.

    Args:
        out_coord: Output index (int, float or NumPy array)
        in_size: Source extent along this axis (> 0)
        out_size: Target extent along this axis (> 0)

    Returns:
        float or numpy.ndarray: Source coordinate of the output pixel center
    """
    return (out_coord + 0.5) * (in_size / out_size) - 0.5


def axis_coords(in_size: int, out_size: int) -> np.ndarray:
    """Source coordinates of every output index along one axis (float64)."""
    return map_coord(np.arange(out_size, dtype=np.float64), in_size, out_size)


def round_half_away(v):
    """Round to nearest integer, ties away from zero (C ``lround`` semantics)."""
    v = np.asarray(v, dtype=np.float64)
    return np.where(v >= 0.0, np.floor(v + 0.5), np.ceil(v - 0.5))


def clamp_index(i, n: int):
    """Clamp integer indices into [0, n - 1]."""
    return np.clip(i, 0, n - 1)


def nearest_indices(in_size: int, out_size: int) -> np.ndarray:
    """Source index picked by nearest-neighbor for every output index."""
    coords = axis_coords(in_size, out_size)
    return clamp_index(round_half_away(coords).astype(np.int64), in_size)


def bilinear_taps(in_size: int, out_size: int):
    """
    Neighbor indices and weights for bilinear blending along one axis.

    Returns:
        tuple: (i0, i1, w) where i0 = clamp(floor(src)), i1 = clamp(i0 + 1)
               and w = src - i0 (float64)
    """
    coords = axis_coords(in_size, out_size)
    i0 = clamp_index(np.floor(coords).astype(np.int64), in_size)
    i1 = clamp_index(i0 + 1, in_size)
    w = coords - i0
    return i0, i1, w


@ti.func
def map_coord_ti(out_coord: ti.i32, scale: cte.FLOAT_TYPE_TI) -> cte.FLOAT_TYPE_TI:
    return (ti.cast(out_coord, cte.FLOAT_TYPE_TI) + 0.5) * scale - 0.5


@ti.func
def round_half_away_ti(v: cte.FLOAT_TYPE_TI) -> cte.FLOAT_TYPE_TI:
    res = ti.floor(v + 0.5)
    if v < 0.0:
        res = ti.ceil(v - 0.5)
    return res


@ti.func
def clamp_index_ti(i: ti.i32, n: ti.i32) -> ti.i32:
    return ti.min(ti.max(i, 0), n - 1)


__all__ = [
    "map_coord",
    "axis_coords",
    "round_half_away",
    "clamp_index",
    "nearest_indices",
    "bilinear_taps",
    "map_coord_ti",
    "round_half_away_ti",
    "clamp_index_ti",
]
