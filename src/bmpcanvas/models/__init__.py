"""Data models package -- re-exports the Canvas type."""

from bmpcanvas.models.canvas import Canvas, Color

__all__ = [
    "Canvas",
    "Color",
]
