"""Value components of an identicon.

Small immutable dataclasses carried by :class:`identicon.image.ImageSpec`:
the fill :class:`Color`, the grid :class:`Cell` entries and the pixel
:class:`Rect` (built from two :class:`Point` corners) produced for every
filled cell. Constructors validate their ranges and fail fast with
:class:`identicon.errors.PrecondApplicationError`.
"""

from .cell import Cell
from .color import Color
from .point import Point
from .rect import Rect

__all__ = [
    "Cell",
    "Color",
    "Point",
    "Rect",
]
