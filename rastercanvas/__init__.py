"""Minimal 2D raster drawing toolkit.

This package provides an in-memory RGBA canvas with:
- Pixel access that silently tolerates out-of-bounds coordinates
- Drawing primitives: gradient fill, line, spiral, filled circle and rectangle
- A weighted box blur with pluggable weight kernels
- A flat row-major RGBA buffer ready to hand to any image encoder

Quick Start:
    >>> from rastercanvas import Canvas, Color, Vector
    >>>
    >>> canvas = Canvas(512, 512)
    >>> canvas.draw_gradient()
    >>> canvas.draw_spiral(Color(r=255, g=255, b=255), Vector(256, 256))
    >>> canvas.draw_rect(Color(r=200), Vector(10, 10), Vector(60, 40))

Blur with a Gaussian kernel, then export the bytes:
    >>> from rastercanvas.effects import GaussianWeight
    >>>
    >>> canvas.blur(3, GaussianWeight(sigma=1.5))
    >>> data = canvas.tobytes()  # len == canvas.stride * canvas.height
"""

__version__ = "0.1.0"

from rastercanvas.components.color import TRANSPARENT, Color
from rastercanvas.config import CanvasConfig, SpiralConfig, load_config
from rastercanvas.core.canvas import Canvas
from rastercanvas.core.geometry import Rectangle, Vector

__all__ = [
    "__version__",
    "Canvas",
    "CanvasConfig",
    "Color",
    "Rectangle",
    "SpiralConfig",
    "TRANSPARENT",
    "Vector",
    "load_config",
]
