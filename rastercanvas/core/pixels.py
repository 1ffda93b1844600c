"""PixelBuffer: owned RGBA storage with zero-copy NumPy views.

The buffer is a single bytearray of width * height * 4 bytes laid out
row-major with no padding (stride = width * 4). NumPy views are created
directly on top of the bytearray, so writes through a view mutate the
buffer in place and no pixel data is ever duplicated except by copy().

Example:
    >>> buf = PixelBuffer(4, 3)
    >>> img = buf.view()          # (3, 4, 4) uint8, shares memory
    >>> img[0, 0] = (255, 0, 0, 255)
    >>> buf.flat()[:4].tolist()
    [255, 0, 0, 255]
"""

from __future__ import annotations

import numpy as np

# Bytes per pixel (R, G, B, A)
CHANNELS = 4


class PixelBuffer:
    """Contiguous row-major RGBA8 pixel storage.

    Attributes:
        width: Pixels per row
        height: Number of rows
        stride: Bytes per row
        nbytes: Total buffer size in bytes
    """

    def __init__(self, width: int, height: int):
        """Allocate a zero-filled (transparent black) buffer.

        Args:
            width: Width in pixels (>= 0)
            height: Height in pixels (>= 0)

        Raises:
            ValueError: If either dimension is negative
        """
        if width < 0 or height < 0:
            raise ValueError(
                f"width and height must be non-negative, got {width}x{height}"
            )

        self._width = int(width)
        self._height = int(height)
        self._buffer = bytearray(self._width * self._height * CHANNELS)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def stride(self) -> int:
        """Bytes per image row."""
        return self._width * CHANNELS

    @property
    def nbytes(self) -> int:
        return len(self._buffer)

    def view(self) -> np.ndarray:
        """Get a (height, width, 4) uint8 view backed by the buffer (zero-copy)."""
        return np.ndarray(
            shape=(self._height, self._width, CHANNELS),
            dtype=np.uint8,
            buffer=self._buffer,
            offset=0,
            strides=(self.stride, CHANNELS, 1),
        )

    def flat(self) -> np.ndarray:
        """Get a flat uint8 view of the whole buffer (zero-copy)."""
        return np.frombuffer(self._buffer, dtype=np.uint8)

    def copy(self) -> PixelBuffer:
        """Allocate a new buffer of the same size and copy all bytes."""
        clone = PixelBuffer(self._width, self._height)
        clone._buffer[:] = self._buffer
        return clone

    def tobytes(self) -> bytes:
        return bytes(self._buffer)

    def __repr__(self) -> str:
        return (
            f"PixelBuffer(width={self._width}, height={self._height}, "
            f"nbytes={self.nbytes})"
        )
