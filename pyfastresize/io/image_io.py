"""
Image file I/O for PyFastResize.

Loads common raster formats (PNG, JPEG, BMP, TGA, ...) into PixelBuffers
and writes PixelBuffers back to PNG or JPEG, using Pillow.

Author: B.G.
"""

from pathlib import Path

import numpy as np
from PIL import Image

from .. import constants as cte
from ..errors import InvalidShape
from ..image import PixelBuffer

# Pillow mode to requested channel count
_MODE_FOR_CHANNELS = {1: "L", 3: "RGB", 4: "RGBA"}
_JPEG_SUFFIXES = (".jpg", ".jpeg")


def _native_channels(img) -> int:
    """Channel count kept when loading with channels=0."""
    mode = img.mode
    if mode == "L":
        return 1
    if mode in ("I", "I;16", "I;16B", "I;16L", "F"):
        return 1
    if mode == "RGBA" or mode == "LA" or mode == "PA":
        return 4
    if mode == "P" and "transparency" in img.info:
        return 4
    return 3


def _to_uint8_gray(img) -> np.ndarray:
    # 16-bit and float gray are rescaled by their own range into 0..255
    arr = np.asarray(img, dtype=np.float64)
    if img.mode == "F":
        lo, hi = float(arr.min()), float(arr.max())
        if hi > lo:
            arr = (arr - lo) / (hi - lo) * cte.PIXEL_MAX
        else:
            arr = np.zeros_like(arr)
    else:
        arr = arr / 257.0
    return np.clip(np.floor(arr + 0.5), 0, cte.PIXEL_MAX).astype(np.uint8)


def image_to_buffer(img, channels: int = 0) -> PixelBuffer:
    """
    Convert a PIL image to a PixelBuffer.

    Args:
        img: PIL.Image.Image
        channels: 0 keeps the image's own layout (mapped to 1, 3 or 4),
                  otherwise 1 (gray), 3 (RGB) or 4 (RGBA)

    Returns:
        PixelBuffer
    """
    if channels not in (0,) + cte.VALID_CHANNELS:
        raise InvalidShape(f"load_image: channels must be 0, 1, 3 or 4, got {channels}")

    target = channels or _native_channels(img)
    if target == 1 and img.mode in ("I", "I;16", "I;16B", "I;16L", "F"):
        arr = _to_uint8_gray(img)
    else:
        arr = np.asarray(img.convert(_MODE_FOR_CHANNELS[target]), dtype=np.uint8)
    return PixelBuffer.from_array(arr)


def buffer_to_image(buffer: PixelBuffer):
    """Convert a PixelBuffer to a PIL image (L, RGB or RGBA)."""
    arr = buffer.to_numpy()
    if buffer.channels == 1:
        arr = arr[:, :, 0]
    # uint8 (h, w), (h, w, 3) and (h, w, 4) arrays map to L, RGB and RGBA
    return Image.fromarray(np.ascontiguousarray(arr))


def load_image(path, channels: int = 0) -> PixelBuffer:
    """
    Load an image file into a PixelBuffer.

    Args:
        path: Image file (any format Pillow decodes)
        channels: 0 keeps the file's layout, or force 1, 3 or 4

    Returns:
        PixelBuffer

    Raises:
        FileNotFoundError: If ``path`` does not exist
        InvalidShape: If ``channels`` is not 0, 1, 3 or 4
        OSError: If the file cannot be decoded

    Example:
        img = pfr.io.load_image('photo.png')          # keep layout
        gray = pfr.io.load_image('photo.png', 1)      # force gray
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"load_image: file not found '{path}'")
    if channels not in (0,) + cte.VALID_CHANNELS:
        raise InvalidShape(f"load_image: channels must be 0, 1, 3 or 4, got {channels}")

    try:
        with Image.open(path) as img:
            img.load()
            return image_to_buffer(img, channels)
    except (OSError, SyntaxError) as e:
        raise OSError(f"load_image: cannot decode '{path}': {e}") from e


def save_image(
    buffer: PixelBuffer,
    path,
    png_compression: int = cte.DEFAULT_PNG_COMPRESSION,
    jpg_quality: int = cte.DEFAULT_JPG_QUALITY,
) -> Path:
    """
    Write a PixelBuffer to disk.

    ``.jpg``/``.jpeg`` paths are written as JPEG (alpha dropped, quality
    ``jpg_quality``); any other suffix is written as PNG with zlib level
    ``png_compression``. Parent directories are created.

    Returns:
        Path: The written file
    """
    if not isinstance(buffer, PixelBuffer):
        raise TypeError(f"save_image: expected a PixelBuffer, got {type(buffer).__name__}")
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    img = buffer_to_image(buffer)
    if path.suffix.lower() in _JPEG_SUFFIXES:
        if img.mode == "RGBA":
            img = img.convert("RGB")
        img.save(path, format="JPEG", quality=max(1, min(100, int(jpg_quality))))
    else:
        img.save(path, format="PNG", compress_level=max(0, min(9, int(png_compression))))
    return path


__all__ = ["load_image", "save_image", "image_to_buffer", "buffer_to_image"]
