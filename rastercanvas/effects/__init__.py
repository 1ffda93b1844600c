from rastercanvas.effects.blur import Blur
from rastercanvas.effects.kernels import (
    BoxWeight,
    GaussianWeight,
    TriangleWeight,
    WeightFunction,
    kernel_matrix,
    resolve_weight,
)

__all__ = [
    "Blur",
    "BoxWeight",
    "GaussianWeight",
    "TriangleWeight",
    "WeightFunction",
    "kernel_matrix",
    "resolve_weight",
]
