"""Bitmap codec -- converts a Canvas to and from uncompressed 24-bit BMP bytes.

Layout handled (all integers little-endian)::

    offset  size  field
    0       2     magic "BM"
    2       4     total file size (54 + pixel data)
    6       4     reserved, must be 0
    10      4     pixel data offset, must be 54
    14      4     DIB header size, must be 40
    18      4     width
    22      4     height
    26      2     colour planes (1)
    28      2     bits per pixel (24)
    30      4     compression (0)
    34      4     pixel data size
    38      16    resolution / palette fields, zero
    54      ...   rows of (blue, green, red) triplets, each padded to 4 bytes

Rows are written and read in the same order: the first row after the header
is canvas row 1.  The magic is not checked on decode; a buffer is accepted
when the three fixed fields above match.
"""

from __future__ import annotations

import struct
from pathlib import Path

import structlog

from bmpcanvas.config import settings
from bmpcanvas.errors import FileTooLargeError, UnsupportedFormatError
from bmpcanvas.models.canvas import Canvas
from bmpcanvas.services import file_io

log = structlog.get_logger()

HEADER_SIZE = 54
DIB_HEADER_SIZE = 40
MAX_FILE_SIZE = 2**32 - 1

_HEADER = struct.Struct("<2sIIIIIIHHII16x")
_FIXED_FIELDS = struct.Struct("<III")
_DIMENSIONS = struct.Struct("<II")


def row_padding(width: int) -> int:
    """Zero bytes appended to each row so its length is a multiple of 4."""
    return -3 * width % 4


def pixel_data_size(width: int, height: int) -> int:
    """Total bytes of pixel rows, padding included."""
    return height * (3 * width + row_padding(width))


def sample_table(gamma: bool) -> list[float]:
    if gamma:
        return [(n / 255) ** settings.GAMMA_EXPONENT for n in range(256)]
    return [n / 255 for n in range(256)]


def sample_to_byte(value: float, gamma: bool) -> int:
    """Scale a sample to a byte value, clamped to [0, 255], rounded half-up."""
    if gamma:
        # Negative samples have no real fractional power.
        value = 255 * value ** (1 / settings.GAMMA_EXPONENT) if value > 0 else 0.0
    else:
        value = 255 * value
    if not value >= 0:  # NaN included
        return 0
    if value > 255:
        return 255
    return int(value + 0.5)


# ---------------------------------------------------------------------------
# Decode
# ---------------------------------------------------------------------------

def decode(data: bytes, gamma: bool = False) -> Canvas:
    """Parse a 24-bit bitmap buffer into a new Canvas.

    Raises ``UnsupportedFormatError`` if the fixed header fields do not
    match or the buffer is too short for the declared dimensions.  The
    returned canvas remembers *gamma* as its default for encoding.
    """
    if len(data) < HEADER_SIZE:
        log.warning("decode_rejected", reason="short_header", length=len(data))
        raise UnsupportedFormatError(
            f"file is not supported: {len(data)} bytes is shorter than the header"
        )

    reserved, offset, dib_size = _FIXED_FIELDS.unpack_from(data, 6)
    if reserved != 0 or offset != HEADER_SIZE or dib_size != DIB_HEADER_SIZE:
        log.warning(
            "decode_rejected",
            reason="header_fields",
            reserved=reserved,
            offset=offset,
            dib_size=dib_size,
        )
        raise UnsupportedFormatError(
            "file is not supported: expected reserved=0, offset=54, "
            f"dib_size=40 but got {reserved}, {offset}, {dib_size}"
        )

    width, height = _DIMENSIONS.unpack_from(data, 18)
    if width == 0 or height == 0:
        log.warning("decode_rejected", reason="empty", width=width, height=height)
        raise UnsupportedFormatError(f"file is not supported: {width}x{height} image")

    row_bytes = 3 * width + row_padding(width)
    if HEADER_SIZE + row_bytes * height > len(data):
        log.warning(
            "decode_rejected",
            reason="truncated",
            width=width,
            height=height,
            length=len(data),
        )
        raise UnsupportedFormatError(
            f"file is not supported: pixel data for {width}x{height} "
            f"exceeds {len(data)} bytes"
        )

    table = sample_table(gamma)
    area = width * height
    red = [0.0] * area
    green = [0.0] * area
    blue = [0.0] * area

    p = 0
    for i in range(height):
        m = HEADER_SIZE + i * row_bytes
        for _ in range(width):
            blue[p] = table[data[m]]
            green[p] = table[data[m + 1]]
            red[p] = table[data[m + 2]]
            m += 3
            p += 1

    canvas = Canvas(width, height, red, green, blue, gamma=gamma)
    log.debug("canvas_decoded", width=width, height=height, gamma=gamma)
    return canvas


# ---------------------------------------------------------------------------
# Encode
# ---------------------------------------------------------------------------

def encode(canvas: Canvas, gamma: bool | None = None) -> bytes:
    """Serialise *canvas* to bitmap bytes.

    *gamma* defaults to ``canvas.gamma``.  Samples are clamped to [0, 255]
    after scaling and rounded half-up.  Raises ``FileTooLargeError`` before
    touching any pixel if the file would not fit a 32-bit size field.
    """
    if gamma is None:
        gamma = canvas.gamma
    width = canvas.width
    height = canvas.height

    padding = row_padding(width)
    data_size = pixel_data_size(width, height)
    file_size = HEADER_SIZE + data_size
    if file_size > MAX_FILE_SIZE:
        log.warning("encode_rejected", width=width, height=height, size=file_size)
        raise FileTooLargeError(file_size)

    out = bytearray(
        _HEADER.pack(
            b"BM",
            file_size,
            0,
            HEADER_SIZE,
            DIB_HEADER_SIZE,
            width,
            height,
            1,
            24,
            0,
            data_size,
        )
    )

    red = canvas.red
    green = canvas.green
    blue = canvas.blue
    line_end = bytes(padding)
    p = 0
    for _ in range(height):
        row = bytearray(3 * width)
        k = 0
        for _ in range(width):
            row[k] = sample_to_byte(blue[p], gamma)
            row[k + 1] = sample_to_byte(green[p], gamma)
            row[k + 2] = sample_to_byte(red[p], gamma)
            k += 3
            p += 1
        out += row
        out += line_end

    log.debug(
        "canvas_encoded", width=width, height=height, gamma=gamma, size=file_size
    )
    return bytes(out)


# ---------------------------------------------------------------------------
# Path wrappers
# ---------------------------------------------------------------------------

def load(path: str | Path, gamma: bool = False) -> Canvas:
    """Read *path* and decode it."""
    return decode(file_io.read_bytes(path), gamma=gamma)


def save(
    canvas: Canvas,
    path: str | Path | None = None,
    gamma: bool | None = None,
) -> bytes:
    """Encode *canvas*, write it to *path* when given, and return the bytes."""
    data = encode(canvas, gamma=gamma)
    if path is not None:
        file_io.write_bytes(path, data)
        log.info("canvas_written", path=str(path), size=len(data))
    return data
