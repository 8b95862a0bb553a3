"""
Pixel buffer container for PyFastResize.

A PixelBuffer owns a contiguous, row-major, channel-interleaved uint8 array
holding ``width * height * channels`` values. Element (x, y, c) lives at
offset ``(y * width + x) * channels + c``. Buffers behave as values: the
constructor copies caller data, the public ``data`` view is read-only, and
every resampling call returns a fresh buffer.

Author: B.G.
"""

import numpy as np

from .. import constants as cte
from ..errors import InvalidInput, InvalidShape


def _check_geometry(width, height, channels, op="PixelBuffer"):
    if not isinstance(width, (int, np.integer)) or not isinstance(
        height, (int, np.integer)
    ):
        raise InvalidShape(f"{op}: width/height must be integers, got ({width}, {height})")
    if width <= 0 or height <= 0:
        raise InvalidShape(f"{op}: width/height must be > 0, got ({width}, {height})")
    if channels not in cte.VALID_CHANNELS:
        raise InvalidShape(f"{op}: channels must be 1, 3 or 4, got {channels}")


def _check_values(data, op="PixelBuffer"):
    """Flatten array-like channel values to uint8, rejecting anything that would wrap."""
    arr = np.asarray(data).reshape(-1)
    if arr.size == 0:
        return arr.astype(np.uint8)
    if arr.dtype != np.uint8:
        if not (np.issubdtype(arr.dtype, np.integer) or arr.dtype == np.bool_):
            raise InvalidInput(f"{op}: values must be integers, got dtype {arr.dtype}")
        lo, hi = int(arr.min()), int(arr.max())
        if lo < 0 or hi > cte.PIXEL_MAX:
            raise InvalidInput(
                f"{op}: values must be in [0, {cte.PIXEL_MAX}], got [{lo}, {hi}]"
            )
    return arr.astype(np.uint8)


class PixelBuffer:
    """
    Row-major 8-bit image with 1 (gray), 3 (RGB) or 4 (RGBA) channels.

    Args:
        width: Number of columns (> 0)
        height: Number of rows (> 0)
        channels: 1, 3 or 4
        data: Optional initial values (bytes, bytearray or array-like) with
              exactly width*height*channels elements. Zero-filled if None.

    Raises:
        InvalidShape: Non-positive size or unsupported channel count
        InvalidInput: ``data`` has the wrong number of elements, is not
                      integer-typed, or holds values outside [0, 255]

    Example:
        buf = PixelBuffer(2, 2, 1, [0, 255, 0, 255])
        buf.at(1, 0, 0)  # -> 255
    """

    __slots__ = ("_width", "_height", "_channels", "_data")

    def __init__(self, width: int, height: int, channels: int, data=None):
        _check_geometry(width, height, channels)
        size = int(width) * int(height) * int(channels)

        if data is None:
            values = np.zeros(size, dtype=np.uint8)
        else:
            if isinstance(data, (bytes, bytearray, memoryview)):
                values = np.frombuffer(data, dtype=np.uint8).copy()
            else:
                values = _check_values(data)
            if values.size != size:
                raise InvalidInput(
                    f"PixelBuffer: data has {values.size} values, "
                    f"expected {width}*{height}*{channels}={size}"
                )

        self._width = int(width)
        self._height = int(height)
        self._channels = int(channels)
        self._data = np.ascontiguousarray(values)

    @classmethod
    def _adopt(cls, array: np.ndarray) -> "PixelBuffer":
        """Wrap a freshly computed (height, width, channels) uint8 array without copying."""
        height, width, channels = array.shape
        _check_geometry(width, height, channels)
        buf = cls.__new__(cls)
        buf._width = int(width)
        buf._height = int(height)
        buf._channels = int(channels)
        buf._data = np.ascontiguousarray(array, dtype=np.uint8).reshape(-1)
        return buf

    @classmethod
    def from_array(cls, array) -> "PixelBuffer":
        """
        Build a buffer from a NumPy array.

        Args:
            array: (height, width) gray image or (height, width, channels)
                   image with 1, 3 or 4 channels. Integer values in [0, 255].

        Returns:
            PixelBuffer: New buffer owning a copy of the values
        """
        arr = np.asarray(array)
        if arr.ndim == 2:
            arr = arr[:, :, np.newaxis]
        if arr.ndim != 3:
            raise InvalidShape(f"PixelBuffer.from_array: expected 2D or 3D array, got {arr.ndim}D")
        height, width, channels = arr.shape
        _check_values(arr, "PixelBuffer.from_array")
        return cls(width, height, channels, arr)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def channels(self) -> int:
        return self._channels

    @property
    def shape(self):
        """(height, width, channels), NumPy ordering."""
        return (self._height, self._width, self._channels)

    @property
    def data(self) -> np.ndarray:
        """Read-only flat view of the channel values."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    @property
    def size_bytes(self) -> int:
        return int(self._data.size)

    @property
    def empty(self) -> bool:
        return self._data.size == 0

    def is_valid(self) -> bool:
        """True when the stored values match the declared geometry."""
        return (
            self._channels in cte.VALID_CHANNELS
            and self._width > 0
            and self._height > 0
            and self._data.size == self._width * self._height * self._channels
        )

    def offset(self, x: int, y: int, c: int = 0) -> int:
        """Flat index of element (x, y, c), bounds-checked."""
        if not (0 <= x < self._width and 0 <= y < self._height and 0 <= c < self._channels):
            raise IndexError(
                f"PixelBuffer: ({x}, {y}, {c}) outside "
                f"{self._width}x{self._height}x{self._channels}"
            )
        return (y * self._width + x) * self._channels + c

    def at(self, x: int, y: int, c: int = 0) -> int:
        """Value of channel ``c`` of pixel (x, y)."""
        return int(self._data[self.offset(x, y, c)])

    def pixel(self, x: int, y: int) -> tuple:
        """All channel values of pixel (x, y)."""
        start = self.offset(x, y, 0)
        return tuple(int(v) for v in self._data[start : start + self._channels])

    def row(self, y: int) -> np.ndarray:
        """Read-only view of row ``y`` as ``width * channels`` values."""
        if not 0 <= y < self._height:
            raise IndexError(f"PixelBuffer: row {y} outside [0, {self._height})")
        stride = self._width * self._channels
        view = self._data[y * stride : (y + 1) * stride]
        view.flags.writeable = False
        return view

    def as_array(self) -> np.ndarray:
        """Read-only (height, width, channels) view of the values."""
        view = self._data.reshape(self._height, self._width, self._channels)
        view.flags.writeable = False
        return view

    def to_numpy(self) -> np.ndarray:
        """Writable (height, width, channels) copy of the values."""
        return self._data.reshape(self._height, self._width, self._channels).copy()

    def tobytes(self) -> bytes:
        return self._data.tobytes()

    def copy(self) -> "PixelBuffer":
        return PixelBuffer(self._width, self._height, self._channels, self._data)

    def __eq__(self, other):
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self._data, other._data)

    __hash__ = None

    def __repr__(self):
        return f"PixelBuffer(width={self._width}, height={self._height}, channels={self._channels})"


__all__ = ["PixelBuffer"]
