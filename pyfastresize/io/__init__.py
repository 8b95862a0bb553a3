"""
Input/Output module for PyFastResize.

Reads image files into PixelBuffers and writes them back using Pillow.

Usage:
    import pyfastresize as pfr

    img = pfr.io.load_image("input.png")
    out = pfr.rastermanip.resize(img, 640, 480, "bilinear")
    pfr.io.save_image(out, "output.jpg", jpg_quality=90)

Author: B.G.
"""

from .image_io import buffer_to_image, image_to_buffer, load_image, save_image

__all__ = ["load_image", "save_image", "image_to_buffer", "buffer_to_image"]
