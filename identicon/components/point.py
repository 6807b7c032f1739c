from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Point:
    """Pixel coordinate on the canvas.

    Attributes:
        x: Column in pixels (0 at left).
        y: Row in pixels (0 at top).
    """

    x: int
    y: int

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)
