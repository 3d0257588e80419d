"""Exception hierarchy for canvas construction, access and the bitmap codec.

Every error derives from ``CanvasError`` (a ``ValueError``) so callers can
catch the whole family at one seam.  None of them are transient: they
describe bad input and are never retried.
"""

from __future__ import annotations


class CanvasError(ValueError):
    """Base class for all bmpcanvas errors."""


class UnsupportedFormatError(CanvasError):
    """The byte buffer is not a 24-bit bitmap this codec understands."""


class FileTooLargeError(CanvasError):
    """Encoding would overflow the 32-bit file size field."""

    def __init__(self, size: int) -> None:
        self.size = size
        super().__init__(f"file is too big to save ({size} bytes)")


class InvalidDimensionsError(CanvasError):
    """Width or height is not a positive integer, or buffers do not match."""


class OutOfBoundsError(CanvasError):
    """Pixel coordinates fall outside ``[1, width] x [1, height]``."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(
            f"Pixel ({x}, {y}) out of bounds for {width}x{height} canvas"
        )
