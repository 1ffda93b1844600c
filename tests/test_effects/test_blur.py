"""Tests for the Blur effect."""

import numpy as np
import pytest

from rastercanvas.components.color import Color
from rastercanvas.core.canvas import Canvas
from rastercanvas.core.effect import Effect
from rastercanvas.core.geometry import Vector
from rastercanvas.effects.blur import Blur
from rastercanvas.effects.kernels import BoxWeight, GaussianWeight

FILL = Color(r=100, g=150, b=200, a=255)


def _uniform(width: int, height: int, color: Color = FILL) -> Canvas:
    canvas = Canvas(width, height)
    canvas.draw_rect(color, Vector(0, 0), Vector(width - 1, height - 1))
    return canvas


class TestBlurSystem:
    """Tests for Blur construction."""

    def test_is_effect(self) -> None:
        """Test Blur is an Effect."""
        assert isinstance(Blur(1, BoxWeight()), Effect)

    def test_negative_radius(self) -> None:
        """Test negative radius raises ValueError."""
        with pytest.raises(ValueError, match="radius must be non-negative"):
            Blur(-1, BoxWeight())

    def test_repr(self) -> None:
        """Test repr shows parameters."""
        assert repr(Blur(2, BoxWeight())).startswith("Blur(radius=2")


class TestBlurApply:
    """Tests for Blur output."""

    @pytest.mark.parametrize("kernel", [
        BoxWeight(),
        BoxWeight(value=0.1),
        BoxWeight(value=3.7),
        GaussianWeight(sigma=0.7),
        GaussianWeight(sigma=1.0),
        GaussianWeight(sigma=1.3),
        GaussianWeight(sigma=2.7),
    ])
    def test_uniform_interior_unchanged(self, kernel: object) -> None:
        """Test any kernel keeps interior pixels of a uniform canvas exactly."""
        r = 2
        canvas = _uniform(12, 9)
        canvas.blur(r, kernel)  # type: ignore[arg-type]
        img = canvas.view()
        interior = img[r:9 - r, r:12 - r]
        assert (interior == FILL.as_tuple()).all()

    def test_uniform_border_darkened(self) -> None:
        """Test out-of-bounds neighbours count as zero with full weight."""
        canvas = _uniform(7, 7)
        canvas.blur(1, BoxWeight())

        # Corner: 4 of 9 neighbours inside
        assert canvas.at(0, 0) == Color(r=400 // 9, g=600 // 9, b=800 // 9, a=255)
        # Edge: 6 of 9 neighbours inside
        assert canvas.at(0, 3) == Color(r=600 // 9, g=900 // 9, b=1200 // 9, a=255)
        assert canvas.at(6, 6) == canvas.at(0, 0)

    def test_alpha_forced_opaque(self) -> None:
        """Test output alpha is 255 regardless of input alpha."""
        canvas = _uniform(5, 5, Color(r=10, g=20, b=30, a=0))
        canvas.blur(1, BoxWeight())
        assert (canvas.view()[..., 3] == 255).all()
        assert canvas.at(2, 2) == Color(r=10, g=20, b=30, a=255)

    def test_reads_from_snapshot(self) -> None:
        """Test blurred pixels are not fed back into the pass."""
        canvas = Canvas(5, 5)
        canvas.set(2, 2, Color(r=255, g=255, b=255, a=255))
        canvas.blur(1, BoxWeight())

        spread = Color(r=28, g=28, b=28, a=255)  # 255 // 9
        for y in range(1, 4):
            for x in range(1, 4):
                assert canvas.at(x, y) == spread
        assert canvas.at(0, 0) == Color(r=0, g=0, b=0, a=255)
        assert canvas.at(4, 2) == Color(r=0, g=0, b=0, a=255)

    def test_weights_use_offsets(self) -> None:
        """Test the kernel sees (i - x, j - y), not absolute coordinates."""
        canvas = Canvas(6, 4)
        red = Color(r=255, g=0, b=0, a=255)
        canvas.set(3, 2, red)

        # Only the right-hand neighbour counts: shifts the image left
        canvas.blur(1, lambda dx, dy: 1.0 if (dx, dy) == (1, 0) else 0.0)
        assert canvas.at(2, 2) == red
        assert canvas.at(3, 2) == Color(r=0, g=0, b=0, a=255)

    def test_radius_zero_identity(self) -> None:
        """Test radius 0 keeps RGB and sets alpha opaque."""
        canvas = Canvas(8, 8)
        canvas.draw_gradient()
        before = canvas.to_array()
        canvas.blur(0, BoxWeight())
        after = canvas.view()
        assert np.array_equal(after[..., :3], before[..., :3])

    def test_weighted_average(self) -> None:
        """Test non-uniform weights."""
        canvas = Canvas(3, 1)
        canvas.set(0, 0, Color(r=90, g=0, b=0))
        canvas.set(1, 0, Color(r=30, g=0, b=0))
        canvas.set(2, 0, Color(r=60, g=0, b=0))

        # Horizontal-only kernel: center 2, sides 1
        def kernel(dx: int, dy: int) -> float:
            if dy != 0:
                return 0.0
            return 2.0 if dx == 0 else 1.0

        canvas.blur(1, kernel)
        # (90 + 2*30 + 60) / 4
        assert canvas.at(1, 0).r == 52
        # (0 + 2*90 + 30) / 4
        assert canvas.at(0, 0).r == 52
        # (30 + 2*60 + 0) / 4
        assert canvas.at(2, 0).r == 37

    @pytest.mark.parametrize("value", [1, 3, 57, 100, 128, 254, 255])
    @pytest.mark.parametrize("kernel", [
        BoxWeight(value=0.1),
        GaussianWeight(sigma=1.0),
        GaussianWeight(sigma=1.3),
        GaussianWeight(sigma=2.7),
    ])
    def test_uniform_grey_center_exact(self, kernel: object, value: int) -> None:
        """Test the center of a uniform grey canvas keeps its exact level."""
        grey = Color(r=value, g=value, b=value, a=255)
        canvas = _uniform(15, 15, grey)
        canvas.blur(3, kernel)  # type: ignore[arg-type]
        assert canvas.at(7, 7) == grey

    def test_zero_weight_sum(self) -> None:
        """Test a kernel summing to zero raises before touching the canvas."""
        canvas = _uniform(4, 4)
        before = canvas.tobytes()
        with pytest.raises(ValueError, match="sum to zero"):
            canvas.blur(1, BoxWeight(value=0.0))
        assert canvas.tobytes() == before

    def test_empty_canvas(self) -> None:
        """Test blurring a zero-sized canvas is a no-op."""
        canvas = Canvas(0, 0)
        canvas.blur(3, BoxWeight())
        assert canvas.tobytes() == b""

    def test_effect_callable(self) -> None:
        """Test Effect instances can be called directly."""
        a = _uniform(6, 6)
        b = _uniform(6, 6)
        Blur(1, BoxWeight())(a)
        b.blur(1, BoxWeight())
        assert a.tobytes() == b.tobytes()
