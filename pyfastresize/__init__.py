"""
PyFastResize: sequential and row-parallel image resampling.

Nearest-neighbor and bilinear resizing of 8-bit gray, RGB and RGBA images
with pixel-center coordinate mapping and clamped borders. The sequential
NumPy backend is the reference; the row-parallel backend runs Taichi CPU
kernels over contiguous blocks of output rows and produces byte-identical
results.

Submodules:
- image: PixelBuffer container
- rastermanip: coordinate mapping, kernels, backends and the resize facade
- bench: timing harness, CSV sink, size sweeps and the experiment protocol
- validate: backend equivalence and scaling-attack distortion metrics
- io: image file loading and saving (Pillow)
- misc: benchmark plotting and speedup tables
- cli: pfr-* command line tools

Usage:
    import pyfastresize as pfr

    img = pfr.io.load_image("photo.png")
    out = pfr.rastermanip.resize(img, 1920, 1080, method="bilinear",
                                 backend="par", threads=8)
    pfr.io.save_image(out, "photo_1080p.png")

    r = pfr.bench.benchmark_resize(img, 1920, 1080, "bilinear", "par")
    print(f"{r.mean_ms:.2f} ms")

Author: B.G.
"""

__version__ = "0.0.1"

from . import constants
from . import errors
from . import image
from . import rastermanip
from . import validate
from . import bench
from . import io
from . import misc
from . import cli

from .errors import (
    BackendUnavailable,
    InvalidDimensions,
    InvalidInput,
    InvalidParameters,
    InvalidShape,
    ResizeError,
    ShapeMismatch,
)
from .image import PixelBuffer
from .rastermanip import Backend, ResizeMethod, resize

__all__ = [
    "__version__",
    "constants",
    "errors",
    "image",
    "rastermanip",
    "validate",
    "bench",
    "io",
    "misc",
    "cli",
    "PixelBuffer",
    "Backend",
    "ResizeMethod",
    "resize",
    "ResizeError",
    "InvalidShape",
    "InvalidDimensions",
    "InvalidInput",
    "ShapeMismatch",
    "InvalidParameters",
    "BackendUnavailable",
]
