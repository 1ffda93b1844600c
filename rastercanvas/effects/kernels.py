"""Blur weight kernels.

A weight kernel maps an integer offset (dx, dy) from the pixel being
blurred to a non-negative weight. Anything with a weight(dx, dy) method
satisfies WeightFunction; a plain callable f(dx, dy) is accepted too.
Kernels are not validated for non-negativity or normalization.
"""

from __future__ import annotations

import math
from typing import Callable, Protocol, Union, runtime_checkable

import numpy as np
from pydantic import BaseModel, Field


@runtime_checkable
class WeightFunction(Protocol):
    """Capability: weight of the neighbour at offset (dx, dy)."""

    def weight(self, dx: int, dy: int) -> float:
        ...


WeightLike = Union[WeightFunction, Callable[[int, int], float]]


class BoxWeight(BaseModel):
    """Constant weight for every offset.

    Attributes:
        value: Weight returned for all offsets
    """

    model_config = {"frozen": True}

    value: float = Field(default=1.0, ge=0.0)

    def weight(self, dx: int, dy: int) -> float:
        return self.value


class TriangleWeight(BaseModel):
    """Separable tent kernel falling linearly to zero at radius + 1.

    Attributes:
        radius: Offset at which the weight reaches 1 / (radius + 1) per axis
    """

    model_config = {"frozen": True}

    radius: float = Field(gt=0.0)

    def weight(self, dx: int, dy: int) -> float:
        span = self.radius + 1.0
        wx = max(0.0, 1.0 - abs(dx) / span)
        wy = max(0.0, 1.0 - abs(dy) / span)
        return wx * wy


class GaussianWeight(BaseModel):
    """Isotropic Gaussian kernel, unnormalized (weight(0, 0) == 1).

    Attributes:
        sigma: Standard deviation in pixels
    """

    model_config = {"frozen": True}

    sigma: float = Field(gt=0.0)

    def weight(self, dx: int, dy: int) -> float:
        return math.exp(-(dx * dx + dy * dy) / (2.0 * self.sigma * self.sigma))


def resolve_weight(weight: WeightLike) -> Callable[[int, int], float]:
    """Return the callable behind a WeightFunction or plain function.

    Raises:
        TypeError: If weight is neither
    """
    if isinstance(weight, WeightFunction):
        return weight.weight
    if callable(weight):
        return weight
    raise TypeError(
        f"Expected WeightFunction or callable, got {type(weight).__name__}"
    )


def kernel_matrix(weight: WeightLike, radius: int) -> np.ndarray:
    """Sample a kernel over the square neighbourhood of a pixel.

    Args:
        weight: Kernel to sample
        radius: Neighbourhood radius (side length 2 * radius + 1)

    Returns:
        (2r+1, 2r+1) float64 array where entry [dy + r, dx + r] is weight(dx, dy)
    """
    fn = resolve_weight(weight)
    side = 2 * radius + 1
    kernel = np.zeros((side, side), dtype=np.float64)
    for dy in range(-radius, radius + 1):
        for dx in range(-radius, radius + 1):
            kernel[dy + radius, dx + radius] = float(fn(dx, dy))
    return kernel
