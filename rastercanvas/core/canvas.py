"""Canvas: RGBA pixel buffer with drawing primitives and effects.

The Canvas owns an exclusive PixelBuffer and every drawing operation
mutates it in place. Coordinates are never validated: writes outside the
bounds are dropped and reads outside return TRANSPARENT, so primitives can
run off the edge freely.

Example:
    >>> canvas = Canvas(256, 256)
    >>> canvas.draw_gradient()
    >>> canvas.draw_circle(Color(r=255), Vector(128, 128), 20)
    >>> canvas.draw_spiral(Color(r=255, g=255, b=255), Vector(128, 128))
    >>> canvas.blur(2, GaussianWeight(sigma=1.0))
    >>> Image.frombuffer("RGBA", (canvas.width, canvas.height), canvas.tobytes())
"""

from __future__ import annotations

import logging
from typing import Union

import numpy as np

from rastercanvas.components.color import TRANSPARENT, Color
from rastercanvas.config import CanvasConfig
from rastercanvas.core.geometry import Rectangle, Vector
from rastercanvas.core.pixels import CHANNELS, PixelBuffer
from rastercanvas.effects.kernels import WeightLike

logger = logging.getLogger(__name__)

ColorLike = Union[Color, tuple[int, ...]]

# Blue channel of every gradient pixel
GRADIENT_BLUE = 155


def _as_color(color: ColorLike) -> Color:
    if isinstance(color, Color):
        return color
    return Color.from_tuple(tuple(color))


class Canvas:
    """Fixed-size RGBA8 drawing surface.

    Attributes:
        width: Width in pixels
        height: Height in pixels
        stride: Bytes per row (width * 4, no padding)
        config: Drawing parameters (spiral constants)

    Example:
        >>> canvas = Canvas(64, 48)
        >>> canvas.set(3, 4, Color(r=10, g=20, b=30))
        >>> canvas.at(3, 4)
        Color(r=10, g=20, b=30, a=255)
        >>> canvas.at(-1, 0)
        Color(r=0, g=0, b=0, a=0)
    """

    def __init__(
        self,
        width: int,
        height: int,
        config: CanvasConfig | None = None,
    ):
        """Create a transparent black canvas.

        Args:
            width: Width in pixels (>= 0)
            height: Height in pixels (>= 0)
            config: Drawing parameters (defaults if None)

        Raises:
            ValueError: If width or height is negative
        """
        self._pixels = PixelBuffer(width, height)
        # Cached zero-copy view; the buffer is never resized
        self._view = self._pixels.view()
        self.config = config if config is not None else CanvasConfig()
        logger.debug("Created canvas %dx%d", width, height)

    @classmethod
    def from_array(
        cls,
        array: np.ndarray,
        config: CanvasConfig | None = None,
    ) -> Canvas:
        """Create a canvas holding a copy of an RGBA image.

        Args:
            array: (H, W, 4) uint8 image

        Raises:
            ValueError: If array shape or dtype is invalid
        """
        if array.ndim != 3 or array.shape[2] != CHANNELS:
            raise ValueError(
                f"Expected image with shape (H, W, {CHANNELS}), got {array.shape}"
            )
        if array.dtype != np.uint8:
            raise ValueError(f"Expected dtype uint8, got {array.dtype}")

        canvas = cls(array.shape[1], array.shape[0], config=config)
        canvas._view[:] = array
        return canvas

    # =========================================================================
    # Buffer access
    # =========================================================================

    @property
    def width(self) -> int:
        return self._pixels.width

    @property
    def height(self) -> int:
        return self._pixels.height

    @property
    def stride(self) -> int:
        return self._pixels.stride

    @property
    def pix(self) -> np.ndarray:
        """Flat row-major RGBA bytes as a writable uint8 view."""
        return self._pixels.flat()

    def view(self) -> np.ndarray:
        """(height, width, 4) uint8 view sharing the canvas memory."""
        return self._view

    def to_array(self) -> np.ndarray:
        """(height, width, 4) uint8 copy of the pixels."""
        return self._view.copy()

    def tobytes(self) -> bytes:
        return self._pixels.tobytes()

    def bounds(self) -> Rectangle:
        return Rectangle(0, 0, self.width, self.height)

    def clone(self) -> Canvas:
        """Deep copy: same size and pixels, no shared storage."""
        clone = type(self).__new__(type(self))
        clone._pixels = self._pixels.copy()
        clone._view = clone._pixels.view()
        clone.config = self.config
        logger.debug("Cloned canvas %dx%d", self.width, self.height)
        return clone

    def set(self, x: int, y: int, color: ColorLike) -> None:
        """Write one pixel; out-of-bounds writes are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self._view[y, x] = _as_color(color).as_tuple()

    def at(self, x: int, y: int) -> Color:
        """Read one pixel; out-of-bounds reads return TRANSPARENT."""
        if 0 <= x < self.width and 0 <= y < self.height:
            r, g, b, a = (int(c) for c in self._view[y, x])
            return Color(r=r, g=g, b=b, a=a)
        return TRANSPARENT

    def _set_many(self, xs: np.ndarray, ys: np.ndarray, color: Color) -> None:
        """Write color at integer coordinate arrays, dropping out-of-bounds points."""
        inside = (xs >= 0) & (xs < self.width) & (ys >= 0) & (ys < self.height)
        self._view[ys[inside], xs[inside]] = color.as_tuple()

    # =========================================================================
    # Drawing primitives
    # =========================================================================

    def draw_gradient(self) -> None:
        """Fill with R = 255*x // width, G = 255*y // height, B = 155, A = 255."""
        width, height = self.width, self.height
        if width == 0 or height == 0:
            return
        self._view[..., 0] = ((255 * np.arange(width)) // width)[np.newaxis, :]
        self._view[..., 1] = ((255 * np.arange(height)) // height)[:, np.newaxis]
        self._view[..., 2] = GRADIENT_BLUE
        self._view[..., 3] = 255

    def draw_line(self, color: ColorLike, start: Vector, end: Vector) -> None:
        """Draw a line sampled once per unit length.

        The number of samples is the length rounded half-up; sample
        coordinates are truncated toward zero, not rounded. The end point
        itself is not sampled. Coincident endpoints draw nothing.
        """
        delta = end.sub(start)
        length = delta.length()
        if length == 0.0:
            return

        x_step, y_step = delta.x / length, delta.y / length
        limit = int(length + 0.5)

        steps = np.arange(limit, dtype=np.float64)
        xs = (start.x + steps * x_step).astype(np.int64)
        ys = (start.y + steps * y_step).astype(np.int64)
        self._set_many(xs, ys, _as_color(color))

    def draw_spiral(self, color: ColorLike, center: Vector) -> None:
        """Draw a decaying spiral polyline starting at center.

        Starting from direction (0, initial_length), each iteration draws
        one segment, then turns the direction by rotation_step radians and
        shrinks it by decay. The iteration count is fixed, independent of
        canvas size.
        """
        spiral = self.config.spiral
        color = _as_color(color)
        direction = Vector(0.0, spiral.initial_length)
        last = center.copy()
        for _ in range(spiral.iterations):
            nxt = last.add(direction)
            self.draw_line(color, last, nxt)
            direction.rotate(spiral.rotation_step)
            direction.scale(spiral.decay)
            last = nxt

    def draw_circle(self, color: ColorLike, center: Vector, radius: int) -> None:
        """Fill the disc dx^2 + dy^2 <= radius^2 around the truncated center.

        Radius 0 sets the center pixel only; a negative radius draws nothing.
        """
        if radius < 0:
            return
        offsets = np.arange(-radius, radius + 1, dtype=np.int64)
        dx, dy = np.meshgrid(offsets, offsets)
        inside = dx * dx + dy * dy <= radius * radius
        cx, cy = int(center.x), int(center.y)
        self._set_many(cx + dx[inside], cy + dy[inside], _as_color(color))

    def draw_rect(self, color: ColorLike, start: Vector, end: Vector) -> None:
        """Fill the inclusive box from start to end (truncated coordinates).

        Corners are not normalized: if start exceeds end on either axis,
        nothing is drawn.
        """
        x0 = max(int(start.x), 0)
        y0 = max(int(start.y), 0)
        x1 = min(int(end.x), self.width - 1)
        y1 = min(int(end.y), self.height - 1)
        if x0 > x1 or y0 > y1:
            return
        self._view[y0:y1 + 1, x0:x1 + 1] = _as_color(color).as_tuple()

    # =========================================================================
    # Effects
    # =========================================================================

    def blur(self, radius: int, weight: WeightLike) -> None:
        """Apply a weighted box blur in place.

        Args:
            radius: Neighbourhood radius, >= 0
            weight: Kernel giving the weight of offset (dx, dy)

        Raises:
            ValueError: If radius is negative or the kernel sums to zero
        """
        from rastercanvas.effects.blur import Blur

        Blur(radius=radius, weight=weight).apply(self)

    def __repr__(self) -> str:
        return f"Canvas(width={self.width}, height={self.height})"
