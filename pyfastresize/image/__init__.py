"""
Image container module for PyFastResize.

Provides the PixelBuffer value type: a contiguous row-major uint8 buffer of
width x height pixels with 1 (gray), 3 (RGB) or 4 (RGBA) interleaved
channels, with bounds-checked element and row access.

Usage:
    import pyfastresize as pfr

    buf = pfr.image.PixelBuffer(4, 4, 3)
    arr = buf.as_array()          # (4, 4, 3) read-only view
    buf2 = pfr.image.PixelBuffer.from_array(arr)

Author: B.G.
"""

from .pixel_buffer import PixelBuffer

__all__ = ["PixelBuffer"]
