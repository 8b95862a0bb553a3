"""
Row-parallel resampling kernels.

Taichi CPU kernels that split the output rows into ``workers`` contiguous,
statically assigned blocks, one per worker. Each worker reads the shared
source array and writes only its own rows, so no synchronisation is needed
beyond the implicit join at the end of the kernel launch.

The worker count is a compile-time template argument used with
``ti.loop_config(parallelize=...)``: every call chooses its own thread count
and nothing is stored in process-wide state. Per-pixel math mirrors
``sequential.py`` operation for operation in float64 (the runtime is started
with ``fast_math=False``), so both backends produce identical bytes.

Author: B.G.
"""

import logging

import numpy as np
import taichi as ti

from .. import constants as cte
from .coords import clamp_index_ti, map_coord_ti, round_half_away_ti

logger = logging.getLogger(__name__)

_runtime_ready = False


def init_taichi():
    """
    Start the Taichi CPU runtime used by the row-parallel backend (idempotent).

    The runtime is configured with double precision defaults and fast-math
    disabled; both are required for bit-identical results with the NumPy
    reference kernels.

    Raises:
        Exception: Whatever ``ti.init`` raises when no CPU backend is usable
    """
    global _runtime_ready
    if _runtime_ready:
        return
    ti.init(arch=ti.cpu, default_fp=cte.FLOAT_TYPE_TI, fast_math=False)
    _runtime_ready = True
    logger.debug("Taichi CPU runtime initialised for row-parallel resampling")


def runtime_ready() -> bool:
    return _runtime_ready


@ti.kernel
def resize_nearest_kernel(
    src: ti.types.ndarray(dtype=cte.PIXEL_TYPE_TI, ndim=3),
    dst: ti.types.ndarray(dtype=cte.PIXEL_TYPE_TI, ndim=3),
    scale_x: cte.FLOAT_TYPE_TI,
    scale_y: cte.FLOAT_TYPE_TI,
    workers: ti.template(),
):
    """
    Nearest-neighbor resampling, rows partitioned across ``workers`` threads.

    Args:
        src: Source image (in_h, in_w, channels), uint8
        dst: Output image (out_h, out_w, channels), uint8, written in place
        scale_x: in_w / out_w
        scale_y: in_h / out_h
        workers: Number of row blocks / CPU threads (compile-time constant)
    """
    in_h = src.shape[0]
    in_w = src.shape[1]
    channels = src.shape[2]
    out_h = dst.shape[0]
    out_w = dst.shape[1]

    ti.loop_config(parallelize=workers, block_dim=1)
    for worker in range(workers):
        # Contiguous block of output rows owned by this worker
        begin = (worker * out_h) // workers
        end = ((worker + 1) * out_h) // workers
        for y in range(begin, end):
            sy = map_coord_ti(y, scale_y)
            iy = clamp_index_ti(ti.cast(round_half_away_ti(sy), ti.i32), in_h)
            for x in range(out_w):
                sx = map_coord_ti(x, scale_x)
                ix = clamp_index_ti(ti.cast(round_half_away_ti(sx), ti.i32), in_w)
                for c in range(channels):
                    dst[y, x, c] = src[iy, ix, c]


@ti.kernel
def resize_bilinear_kernel(
    src: ti.types.ndarray(dtype=cte.PIXEL_TYPE_TI, ndim=3),
    dst: ti.types.ndarray(dtype=cte.PIXEL_TYPE_TI, ndim=3),
    scale_x: cte.FLOAT_TYPE_TI,
    scale_y: cte.FLOAT_TYPE_TI,
    workers: ti.template(),
):
    """
    Bilinear resampling, rows partitioned across ``workers`` threads.

    Args:
        src: Source image (in_h, in_w, channels), uint8
        dst: Output image (out_h, out_w, channels), uint8, written in place
        scale_x: in_w / out_w
        scale_y: in_h / out_h
        workers: Number of row blocks / CPU threads (compile-time constant)
    """
    in_h = src.shape[0]
    in_w = src.shape[1]
    channels = src.shape[2]
    out_h = dst.shape[0]
    out_w = dst.shape[1]

    ti.loop_config(parallelize=workers, block_dim=1)
    for worker in range(workers):
        # Contiguous block of output rows owned by this worker
        begin = (worker * out_h) // workers
        end = ((worker + 1) * out_h) // workers
        for y in range(begin, end):
            sy = map_coord_ti(y, scale_y)
            y0 = clamp_index_ti(ti.floor(sy, dtype=ti.i32), in_h)
            y1 = clamp_index_ti(y0 + 1, in_h)
            wy = sy - ti.cast(y0, cte.FLOAT_TYPE_TI)

            for x in range(out_w):
                sx = map_coord_ti(x, scale_x)
                x0 = clamp_index_ti(ti.floor(sx, dtype=ti.i32), in_w)
                x1 = clamp_index_ti(x0 + 1, in_w)
                wx = sx - ti.cast(x0, cte.FLOAT_TYPE_TI)

                for c in range(channels):
                    v00 = ti.cast(src[y0, x0, c], cte.FLOAT_TYPE_TI)
                    v10 = ti.cast(src[y0, x1, c], cte.FLOAT_TYPE_TI)
                    v01 = ti.cast(src[y1, x0, c], cte.FLOAT_TYPE_TI)
                    v11 = ti.cast(src[y1, x1, c], cte.FLOAT_TYPE_TI)

                    v0 = v00 + wx * (v10 - v00)
                    v1 = v01 + wx * (v11 - v01)
                    v = v0 + wy * (v1 - v0)

                    r = ti.min(ti.max(round_half_away_ti(v), 0.0), 255.0)
                    dst[y, x, c] = ti.cast(r, cte.PIXEL_TYPE_TI)


def _launch(kernel, src: np.ndarray, out_w: int, out_h: int, workers: int) -> np.ndarray:
    init_taichi()
    in_h, in_w, channels = src.shape
    # Idle workers would only add kernel instantiations
    workers = max(1, min(int(workers), out_h))
    dst = np.empty((out_h, out_w, channels), dtype=np.uint8)
    kernel(
        np.ascontiguousarray(src),
        dst,
        in_w / out_w,
        in_h / out_h,
        workers,
    )
    return dst


def resize_nearest_par(src: np.ndarray, out_w: int, out_h: int, workers: int) -> np.ndarray:
    """Row-parallel nearest-neighbor resampling of a (h, w, c) uint8 array."""
    return _launch(resize_nearest_kernel, src, out_w, out_h, workers)


def resize_bilinear_par(src: np.ndarray, out_w: int, out_h: int, workers: int) -> np.ndarray:
    """Row-parallel bilinear resampling of a (h, w, c) uint8 array."""
    return _launch(resize_bilinear_kernel, src, out_w, out_h, workers)


__all__ = [
    "init_taichi",
    "runtime_ready",
    "resize_nearest_kernel",
    "resize_bilinear_kernel",
    "resize_nearest_par",
    "resize_bilinear_par",
]
