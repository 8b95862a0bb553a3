"""Raster manipulation module for PyFastResize.

Provides nearest-neighbor and bilinear image resampling with pixel-center
coordinate mapping and clamped borders, executed either by a sequential
NumPy reference backend or by a row-parallel Taichi CPU backend. Both
backends produce byte-identical output for identical inputs.

Usage:
    import pyfastresize as pfr

    out = pfr.rastermanip.resize(img, 640, 480, method="bilinear")
    out_par = pfr.rastermanip.resize(img, 640, 480, method="bilinear",
                                     backend="par", threads=8)

Author: B.G.
"""

from .coords import map_coord, round_half_away
from .sequential import resize_bilinear_seq, resize_nearest_seq
from .parallel import (
    init_taichi,
    resize_bilinear_kernel,
    resize_bilinear_par,
    resize_nearest_kernel,
    resize_nearest_par,
)
from .resizing import (
    Backend,
    BackendAvailability,
    ResizeMethod,
    backend_availability,
    parse_backend,
    parse_method,
    resize,
    resolve_backend,
    resolve_threads,
    select_strategy,
)

__all__ = [
    "map_coord",
    "round_half_away",
    "resize_nearest_seq",
    "resize_bilinear_seq",
    "init_taichi",
    "resize_nearest_kernel",
    "resize_bilinear_kernel",
    "resize_nearest_par",
    "resize_bilinear_par",
    "Backend",
    "BackendAvailability",
    "ResizeMethod",
    "backend_availability",
    "parse_backend",
    "parse_method",
    "resize",
    "resolve_backend",
    "resolve_threads",
    "select_strategy",
]
