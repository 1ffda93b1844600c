"""Effect base class for post-processing passes.

Effects are the "filter" layer on top of the drawing primitives. Unlike
drawing operations, which write pixels one primitive at a time, an effect
reads the whole canvas and rewrites it in a single pass.

Example:
    >>> class Invert(Effect):
    ...     def apply(self, canvas):
    ...         img = canvas.view()
    ...         img[..., :3] = 255 - img[..., :3]
    >>> Invert().apply(canvas)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rastercanvas.core.canvas import Canvas


class Effect(ABC):
    """Base class for all canvas effects.

    Subclasses implement apply(), which mutates the canvas in place.
    Parameters are fixed at construction so one instance can be applied
    to many canvases.
    """

    @abstractmethod
    def apply(self, canvas: Canvas) -> None:
        """Run the effect on a canvas, in place.

        Args:
            canvas: Canvas to rewrite

        Note:
            - Must only write to canvas after all reads are done, or read
              from a snapshot, so results never feed back into the pass
        """
        pass

    def __call__(self, canvas: Canvas) -> None:
        self.apply(canvas)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
