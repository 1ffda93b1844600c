#!/usr/bin/env python3
"""Draw the reference scene and optionally save it as PNG.

This example demonstrates the whole toolkit:
- Fill the canvas with the reference gradient
- Draw rectangles, circles and lines
- Draw the decaying spiral
- Blur with a Gaussian kernel
- Hand the raw RGBA buffer to an encoder (Pillow, if installed)
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from rastercanvas import Canvas, Color, Vector, load_config
from rastercanvas.effects import BoxWeight, GaussianWeight


def _save_image(path: Path, canvas: Canvas) -> bool:
    try:
        from PIL import Image
    except ImportError:
        return False
    Image.frombuffer(
        "RGBA", (canvas.width, canvas.height), canvas.tobytes(), "raw", "RGBA", canvas.stride, 1
    ).save(path)
    return True


def main() -> None:
    parser = argparse.ArgumentParser(description="Draw the reference scene")
    parser.add_argument("--width", type=int, default=512, help="Canvas width")
    parser.add_argument("--height", type=int, default=512, help="Canvas height")
    parser.add_argument(
        "--blur-radius",
        type=int,
        default=2,
        help="Blur radius (0 disables blur)",
    )
    parser.add_argument(
        "--kernel",
        choices=["gaussian", "box"],
        default="gaussian",
        help="Blur weight kernel",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to rastercanvas.toml (auto-detected if omitted)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("examples/scene.png"),
        help="Output PNG path (requires Pillow)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    canvas = Canvas(args.width, args.height, config=load_config(args.config))
    center = Vector(args.width / 2, args.height / 2)

    canvas.draw_gradient()
    canvas.draw_rect(Color(r=30, g=30, b=60), Vector(20, 20), Vector(120, 80))
    canvas.draw_circle(Color(r=230, g=60, b=40), Vector(args.width - 80, 80), 40)
    canvas.draw_line(Color(r=255, g=255, b=0), Vector(0, args.height - 1), Vector(args.width - 1, 0))
    canvas.draw_spiral(Color(r=255, g=255, b=255), center)

    if args.blur_radius > 0:
        kernel = GaussianWeight(sigma=max(args.blur_radius / 2, 0.5)) if args.kernel == "gaussian" else BoxWeight()
        canvas.blur(args.blur_radius, kernel)

    print(f"Canvas: {canvas.width}x{canvas.height}, stride {canvas.stride}, {len(canvas.tobytes())} bytes")
    if _save_image(args.output, canvas):
        print(f"Saved {args.output}")
    else:
        print("Pillow not installed; skipping PNG output")


if __name__ == "__main__":
    main()
