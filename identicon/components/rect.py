"""Pixel rectangle component.

Rectangles are half-open: ``top_left`` is painted, ``bottom_right`` is the
first pixel past the filled area on both axes.
"""

from dataclasses import dataclass
from typing import Tuple

from identicon.config import CANVAS_SIZE
from identicon.errors import PrecondApplicationError

from .point import Point


@dataclass(frozen=True)
class Rect:
    """Axis-aligned pixel rectangle ``[top_left, bottom_right)``.

    Both corners must lie on the canvas and the rectangle must be non-empty:
    ``0 <= top_left < bottom_right <= 250`` on each axis.

    Attributes:
        top_left: Inclusive corner.
        bottom_right: Exclusive corner.
    """

    top_left: Point
    bottom_right: Point

    def __post_init__(self) -> None:
        for start, stop in (
            (self.top_left.x, self.bottom_right.x),
            (self.top_left.y, self.bottom_right.y),
        ):
            if not 0 <= start < stop <= CANVAS_SIZE:
                raise PrecondApplicationError(
                    f"Rectangle off canvas or empty: {self.as_tuple()}"
                )

    @property
    def width(self) -> int:
        return self.bottom_right.x - self.top_left.x

    @property
    def height(self) -> int:
        return self.bottom_right.y - self.top_left.y

    def as_tuple(self) -> Tuple[Tuple[int, int], Tuple[int, int]]:
        return (self.top_left.as_tuple(), self.bottom_right.as_tuple())
