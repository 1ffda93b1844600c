"""Color component: 8-bit RGBA value type."""

from pydantic import BaseModel, Field


class Color(BaseModel):
    """RGBA color with unsigned 8-bit channels.

    Colors are values: frozen, compared by channel, hashable.

    Attributes:
        r: Red channel (0-255)
        g: Green channel (0-255)
        b: Blue channel (0-255)
        a: Alpha channel (0-255, default opaque)
    """

    model_config = {"frozen": True}

    r: int = Field(default=0, ge=0, le=255)
    g: int = Field(default=0, ge=0, le=255)
    b: int = Field(default=0, ge=0, le=255)
    a: int = Field(default=255, ge=0, le=255)

    @classmethod
    def from_tuple(cls, rgba: tuple[int, ...]) -> "Color":
        """Build a Color from an (r, g, b) or (r, g, b, a) tuple."""
        if len(rgba) == 3:
            r, g, b = rgba
            return cls(r=r, g=g, b=b)
        if len(rgba) == 4:
            r, g, b, a = rgba
            return cls(r=r, g=g, b=b, a=a)
        raise ValueError(f"Expected 3 or 4 channels, got {len(rgba)}")

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)


# Value read back from outside the canvas bounds
TRANSPARENT = Color(r=0, g=0, b=0, a=0)
