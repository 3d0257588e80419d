"""Pillow interop -- convert between Canvas and ``PIL.Image.Image``.

Byte values match what the codec writes, and canvas row 1 (the first row
stored after the header) is placed at the bottom of the PIL image, so
``Image.open(BytesIO(encode(c)))`` and ``to_pil_image(c)`` agree.
"""

from __future__ import annotations

import io

from PIL import Image

from bmpcanvas.models.canvas import Canvas
from bmpcanvas.services.codec import sample_table, sample_to_byte


def to_pil_image(canvas: Canvas, gamma: bool | None = None) -> Image.Image:
    """Render *canvas* as an 8-bit RGB image."""
    if gamma is None:
        gamma = canvas.gamma
    width, height = canvas.size
    buf = bytearray(3 * width * height)
    k = 0
    # PIL rows run top to bottom; canvas row ``height`` is the top one.
    for y in range(height, 0, -1):
        p = (y - 1) * width
        for _ in range(width):
            buf[k] = sample_to_byte(canvas.red[p], gamma)
            buf[k + 1] = sample_to_byte(canvas.green[p], gamma)
            buf[k + 2] = sample_to_byte(canvas.blue[p], gamma)
            k += 3
            p += 1
    return Image.frombytes("RGB", (width, height), bytes(buf))


def from_pil_image(image: Image.Image, gamma: bool = False) -> Canvas:
    """Build a Canvas from any PIL image, converting it to RGB first."""
    rgb = image.convert("RGB")
    width, height = rgb.size
    raw = rgb.tobytes()
    table = sample_table(gamma)

    area = width * height
    red = [0.0] * area
    green = [0.0] * area
    blue = [0.0] * area
    k = 0
    for y in range(height, 0, -1):
        p = (y - 1) * width
        for _ in range(width):
            red[p] = table[raw[k]]
            green[p] = table[raw[k + 1]]
            blue[p] = table[raw[k + 2]]
            k += 3
            p += 1
    return Canvas(width, height, red, green, blue, gamma=gamma)


def to_png_bytes(canvas: Canvas, gamma: bool | None = None) -> bytes:
    """Export *canvas* as PNG bytes."""
    buf = io.BytesIO()
    to_pil_image(canvas, gamma=gamma).save(buf, format="PNG")
    return buf.getvalue()
