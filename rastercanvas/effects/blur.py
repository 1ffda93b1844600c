"""Weighted box blur effect.

Each output pixel is the kernel-weighted average of the square
neighbourhood [x - r, x + r] x [y - r, y + r] (inclusive) around it:

    out_c(x, y) = sum(c(i, j) * w(i - x, j - y)) / sum(w(i - x, j - y))

computed per R, G, B channel in 8-bit space and truncated. Alpha is
always written as 255.

Neighbours outside the canvas read as transparent black. They add nothing
to the channel sums but their weight still counts, so borders darken.
This edge bias is intentional; there is no clamping or mirroring.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from rastercanvas.core.effect import Effect
from rastercanvas.effects.kernels import WeightLike, kernel_matrix

if TYPE_CHECKING:
    from rastercanvas.core.canvas import Canvas

logger = logging.getLogger(__name__)

# Tolerance added before truncating normalized channel sums
TRUNCATE_EPSILON = 1e-9


class Blur(Effect):
    """Weighted box blur with a pluggable kernel.

    Reads from a snapshot (clone) of the canvas and writes the live canvas
    only after the whole pass, so blurred pixels never feed back as inputs.

    Attributes:
        radius: Neighbourhood radius (side length 2 * radius + 1)
        weight: Kernel mapping (dx, dy) offsets to weights
    """

    def __init__(self, radius: int, weight: WeightLike):
        """Initialize blur effect.

        Args:
            radius: Neighbourhood radius, >= 0
            weight: WeightFunction or callable f(dx, dy) -> float

        Raises:
            ValueError: If radius is negative
        """
        if radius < 0:
            raise ValueError(f"radius must be non-negative, got {radius}")
        self.radius = int(radius)
        self.weight = weight

    def apply(self, canvas: Canvas) -> None:
        """Blur canvas in place.

        Raises:
            ValueError: If the kernel weights sum to zero over the neighbourhood
        """
        kernel = kernel_matrix(self.weight, self.radius)

        # Kernels depend on offsets only, so the sum is the same for every pixel
        weight_sum = float(kernel.sum())
        if weight_sum == 0.0:
            raise ValueError(
                f"Kernel weights sum to zero over radius {self.radius}; "
                f"cannot normalize blur"
            )

        height, width = canvas.height, canvas.width
        if width == 0 or height == 0:
            return

        logger.debug(
            "Blurring %dx%d canvas with radius %d, weight sum %.6g",
            width, height, self.radius, weight_sum,
        )

        snapshot = canvas.clone()
        rgb = self._weighted_sum(snapshot.view()[..., :3], kernel) / weight_sum

        out = canvas.view()
        # Truncate, absorbing float error that leaves exact averages a hair low
        rgb = np.floor(rgb + TRUNCATE_EPSILON)
        out[..., :3] = np.clip(rgb, 0.0, 255.0).astype(np.uint8)
        out[..., 3] = 255

    @staticmethod
    def _weighted_sum(src: np.ndarray, kernel: np.ndarray) -> np.ndarray:
        """Accumulate kernel-weighted neighbours for every pixel (vectorized).

        Args:
            src: (H, W, C) uint8 source pixels
            kernel: (2r+1, 2r+1) weights indexed [dy + r, dx + r]

        Returns:
            (H, W, C) float64 weighted sums, zero padding outside src
        """
        h, w = src.shape[:2]
        r = kernel.shape[0] // 2
        padded = np.pad(
            src.astype(np.float64),
            ((r, r), (r, r), (0, 0)),
            mode="constant",
            constant_values=0.0,
        )

        acc = np.zeros(src.shape, dtype=np.float64)
        for j in range(kernel.shape[0]):
            for i in range(kernel.shape[1]):
                k = kernel[j, i]
                if k == 0.0:
                    continue
                acc += k * padded[j:j + h, i:i + w]
        return acc

    def __repr__(self) -> str:
        return f"Blur(radius={self.radius}, weight={self.weight!r})"
