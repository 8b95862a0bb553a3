"""
Error taxonomy for PyFastResize.

Every precondition violation raised by the library derives from
``ResizeError``, itself a ``ValueError``, so callers that already guard
against ``ValueError`` keep working. All of them are detected before any
computation starts and are never retried internally.

Author: B.G.
"""


class ResizeError(ValueError):
    """Base class for invalid arguments passed to PyFastResize."""


class InvalidShape(ResizeError):
    """Unsupported channel count or invalid buffer geometry."""


class InvalidDimensions(ResizeError):
    """Non-positive output width or height."""


class InvalidInput(ResizeError):
    """Empty or malformed pixel buffer."""


class ShapeMismatch(ResizeError):
    """Two buffers that must share geometry do not."""


class InvalidParameters(ResizeError):
    """Bad run counts, thread counts, method or backend tags."""


class BackendUnavailable(RuntimeError):
    """The requested execution backend cannot run in this process."""


__all__ = [
    "ResizeError",
    "InvalidShape",
    "InvalidDimensions",
    "InvalidInput",
    "ShapeMismatch",
    "InvalidParameters",
    "BackendUnavailable",
]
