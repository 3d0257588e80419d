"""Canvas model -- three flat float channel buffers plus dimensions.

Samples are normalised intensities but no range is enforced here; values
outside [0, 1] are kept as-is and only clamped when the canvas is encoded.

Coordinates are 1-based.  Pixel ``(x, y)`` lives at index
``(y - 1) * width + (x - 1)`` in each channel, so walking x in the inner
loop and y in the outer loop touches consecutive entries.
"""

from __future__ import annotations

from collections.abc import Iterator

from bmpcanvas.errors import InvalidDimensionsError, OutOfBoundsError

Color = tuple[float, float, float]


def _check_dimension(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
        raise InvalidDimensionsError(
            f"{name} must be a positive integer, got {value!r}"
        )


class Canvas:
    """In-memory RGB canvas with 1-based, bound-checked pixel access."""

    def __init__(
        self,
        width: int,
        height: int,
        red: list[float],
        green: list[float],
        blue: list[float],
        gamma: bool = False,
    ) -> None:
        _check_dimension("width", width)
        _check_dimension("height", height)
        area = width * height
        for name, channel in (("red", red), ("green", green), ("blue", blue)):
            if len(channel) != area:
                raise InvalidDimensionsError(
                    f"{name} channel has {len(channel)} samples, "
                    f"expected {area} for {width}x{height}"
                )
        self._width = width
        self._height = height
        self.red = red
        self.green = green
        self.blue = blue
        self.gamma = gamma

    @classmethod
    def new(
        cls,
        width: int,
        height: int,
        r: float = 0,
        g: float = 0,
        b: float = 0,
        gamma: bool = False,
    ) -> Canvas:
        """Create a canvas with every pixel set to ``(r, g, b)``."""
        _check_dimension("width", width)
        _check_dimension("height", height)
        area = width * height
        return cls(width, height, [r] * area, [g] * area, [b] * area, gamma=gamma)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> tuple[int, int]:
        return self._width, self._height

    def _index(self, x: int, y: int) -> int:
        if not (
            isinstance(x, int)
            and isinstance(y, int)
            and 1 <= x <= self._width
            and 1 <= y <= self._height
        ):
            raise OutOfBoundsError(x, y, self._width, self._height)
        return (y - 1) * self._width + (x - 1)

    def get_pixel(self, x: int, y: int) -> Color:
        """Return the stored ``(r, g, b)`` samples at ``(x, y)``."""
        p = self._index(x, y)
        return self.red[p], self.green[p], self.blue[p]

    def set_pixel(self, x: int, y: int, r: float, g: float, b: float) -> None:
        """Overwrite the samples at ``(x, y)``.  No clamping happens here."""
        p = self._index(x, y)
        self.red[p] = r
        self.green[p] = g
        self.blue[p] = b

    def fill(self, r: float = 0, g: float = 0, b: float = 0) -> None:
        """Set every pixel to ``(r, g, b)``."""
        area = self._width * self._height
        self.red[:] = [r] * area
        self.green[:] = [g] * area
        self.blue[:] = [b] * area

    def iter_pixels(self) -> Iterator[tuple[int, int, Color]]:
        """Yield ``(x, y, (r, g, b))`` in storage order, x varying fastest."""
        p = 0
        for y in range(1, self._height + 1):
            for x in range(1, self._width + 1):
                yield x, y, (self.red[p], self.green[p], self.blue[p])
                p += 1

    def __repr__(self) -> str:
        return f"Canvas(width={self._width}, height={self._height}, gamma={self.gamma})"
