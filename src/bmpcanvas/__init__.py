"""In-memory RGB canvas with an uncompressed 24-bit bitmap codec."""

from bmpcanvas.errors import (
    CanvasError,
    FileTooLargeError,
    InvalidDimensionsError,
    OutOfBoundsError,
    UnsupportedFormatError,
)
from bmpcanvas.models.canvas import Canvas
from bmpcanvas.services.codec import decode, encode, load, save

__all__ = [
    "Canvas",
    "CanvasError",
    "FileTooLargeError",
    "InvalidDimensionsError",
    "OutOfBoundsError",
    "UnsupportedFormatError",
    "decode",
    "encode",
    "load",
    "save",
]
