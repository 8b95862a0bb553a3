"""General image resizing facade for PyFastResize.

Selects one of the {nearest, bilinear} x {sequential, row-parallel}
strategies, validates every precondition before any work (or thread) is
started, and returns a fresh PixelBuffer. The row-parallel backend depends on
the Taichi CPU runtime; its availability is probed explicitly and a
substitution by the sequential backend is always logged and reported.

Author: B.G.
"""

import enum
import logging
import os
from typing import NamedTuple

import numpy as np

from .. import constants as cte
from ..errors import (
    BackendUnavailable,
    InvalidDimensions,
    InvalidInput,
    InvalidParameters,
    InvalidShape,
)
from ..image import PixelBuffer
from . import parallel, sequential

logger = logging.getLogger(__name__)


class ResizeMethod(str, enum.Enum):
    NEAREST = "nearest"
    BILINEAR = "bilinear"


class Backend(str, enum.Enum):
    SEQUENTIAL = "seq"
    ROW_PARALLEL = "par"


class BackendAvailability(NamedTuple):
    """Outcome of the runtime capability probe."""

    sequential: bool
    row_parallel: bool
    reason: str = ""


_availability = None


def parse_method(method) -> ResizeMethod:
    """Normalise a method tag ('nearest', 'bilinear' or ResizeMethod)."""
    if isinstance(method, ResizeMethod):
        return method
    try:
        return ResizeMethod(str(method).lower())
    except ValueError:
        valid = [m.value for m in ResizeMethod]
        raise InvalidParameters(f"Method must be one of {valid}, got '{method}'") from None


def parse_backend(backend) -> Backend:
    """Normalise a backend tag ('seq', 'par' or Backend)."""
    if isinstance(backend, Backend):
        return backend
    aliases = {"sequential": "seq", "parallel": "par", "row_parallel": "par", "omp": "par"}
    key = str(backend).lower()
    try:
        return Backend(aliases.get(key, key))
    except ValueError:
        valid = [b.value for b in Backend]
        raise InvalidParameters(f"Backend must be one of {valid}, got '{backend}'") from None


def resolve_threads(threads: int) -> int:
    """Map a requested thread count to the worker count actually used (0 => CPU count)."""
    if threads is None:
        threads = cte.DEFAULT_THREADS
    threads = int(threads)
    if threads < 0:
        raise InvalidParameters(f"threads must be >= 0, got {threads}")
    if threads == 0:
        return os.cpu_count() or 1
    return threads


def backend_availability(refresh: bool = False) -> BackendAvailability:
    """
    Probe which execution backends can run in this process.

    The row-parallel backend needs a working Taichi CPU runtime. The probe
    runs once and is cached; pass ``refresh=True`` to probe again.

    Returns:
        BackendAvailability: (sequential, row_parallel, reason)
    """
    global _availability
    if _availability is not None and not refresh:
        return _availability

    try:
        parallel.init_taichi()
    except Exception as e:
        logger.warning("Row-parallel backend unavailable: %s", e)
        _availability = BackendAvailability(True, False, f"taichi runtime failed to start: {e}")
    else:
        _availability = BackendAvailability(True, True, "")
    return _availability


def resolve_backend(backend, on_unavailable: str = "fallback") -> Backend:
    """
    Return the backend that will actually execute a request.

    Args:
        backend: Requested backend tag
        on_unavailable: 'fallback' substitutes the sequential backend (with a
                        warning) when row-parallel cannot run; 'raise' raises
                        BackendUnavailable instead.

    Returns:
        Backend: Effective backend
    """
    backend = parse_backend(backend)
    if on_unavailable not in ("fallback", "raise"):
        raise InvalidParameters(
            f"on_unavailable must be 'fallback' or 'raise', got '{on_unavailable}'"
        )
    if backend is Backend.SEQUENTIAL:
        return backend

    status = backend_availability()
    if status.row_parallel:
        return backend
    if on_unavailable == "raise":
        raise BackendUnavailable(f"row-parallel backend unavailable: {status.reason}")
    logger.warning("Substituting sequential backend for row-parallel (%s)", status.reason)
    return Backend.SEQUENTIAL


def select_strategy(method, backend):
    """
    Map a (method, backend) pair to the function computing it.

    Sequential strategies take (src, out_w, out_h); row-parallel strategies
    take (src, out_w, out_h, workers).
    """
    table = {
        (ResizeMethod.NEAREST, Backend.SEQUENTIAL): sequential.resize_nearest_seq,
        (ResizeMethod.BILINEAR, Backend.SEQUENTIAL): sequential.resize_bilinear_seq,
        (ResizeMethod.NEAREST, Backend.ROW_PARALLEL): parallel.resize_nearest_par,
        (ResizeMethod.BILINEAR, Backend.ROW_PARALLEL): parallel.resize_bilinear_par,
    }
    return table[(parse_method(method), parse_backend(backend))]


def check_resize_args(img, out_w, out_h, op: str = "resize"):
    """Validate a resize request; raises before any computation starts."""
    if not isinstance(img, PixelBuffer):
        raise TypeError(f"{op}: img must be a PixelBuffer, got {type(img).__name__}")
    if img.empty or not img.is_valid():
        raise InvalidInput(f"{op}: input image is empty or malformed")
    if img.channels not in cte.VALID_CHANNELS:
        raise InvalidShape(f"{op}: supported channels are 1, 3, 4, got {img.channels}")
    if not isinstance(out_w, (int, np.integer)) or not isinstance(out_h, (int, np.integer)):
        raise InvalidDimensions(f"{op}: output size must be integers, got ({out_w!r}, {out_h!r})")
    if out_w <= 0 or out_h <= 0:
        raise InvalidDimensions(f"{op}: output size must be > 0, got ({out_w}, {out_h})")


def resize(
    img: PixelBuffer,
    out_w: int,
    out_h: int,
    method="nearest",
    backend="seq",
    threads: int = cte.DEFAULT_THREADS,
    on_unavailable: str = "fallback",
) -> PixelBuffer:
    """
    Resize an image to (out_w, out_h).

    Args:
        img: Source PixelBuffer (1, 3 or 4 channels)
        out_w: Target width (> 0)
        out_h: Target height (> 0)
        method: 'nearest' or 'bilinear' (default: 'nearest')
        backend: 'seq' or 'par' (default: 'seq')
        threads: Worker threads for the row-parallel backend; 0 lets the
                 runtime pick. Ignored by the sequential backend.
        on_unavailable: Policy when 'par' cannot run ('fallback' or 'raise')

    Returns:
        PixelBuffer: New buffer with the same channel count as ``img``

    Raises:
        InvalidInput: Empty or malformed source
        InvalidDimensions: Non-positive output size
        InvalidShape: Unsupported channel count
        InvalidParameters: Unknown method/backend or negative thread count
        BackendUnavailable: 'par' requested with on_unavailable='raise'

    Example:
        out = resize(img, 1920, 1080, method='bilinear', backend='par', threads=8)
    """
    check_resize_args(img, out_w, out_h)
    method = parse_method(method)
    requested = parse_backend(backend)
    workers = resolve_threads(threads)
    effective = resolve_backend(requested, on_unavailable)
    out_w = int(out_w)
    out_h = int(out_h)

    # Kernels read the internal array directly; it is never written
    src = img._data.reshape(img.height, img.width, img.channels)
    strategy = select_strategy(method, effective)
    if effective is Backend.ROW_PARALLEL:
        out = strategy(src, out_w, out_h, workers)
    else:
        out = strategy(src, out_w, out_h)

    logger.debug(
        "resize %dx%dx%d -> %dx%d method=%s backend=%s threads=%d",
        img.width, img.height, img.channels, out_w, out_h,
        method.value, effective.value, workers,
    )
    return PixelBuffer._adopt(out)


__all__ = [
    "ResizeMethod",
    "Backend",
    "BackendAvailability",
    "parse_method",
    "parse_backend",
    "resolve_threads",
    "backend_availability",
    "resolve_backend",
    "select_strategy",
    "check_resize_args",
    "resize",
]
