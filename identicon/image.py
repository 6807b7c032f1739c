"""Immutable ``ImageSpec`` record threaded through the pipeline.

An :class:`ImageSpec` starts empty and gains one field per stage: the hasher
sets ``digest``, the color picker sets ``color``, the grid builder sets
``grid`` (then the odd filter narrows it) and the pixel map builder sets
``pixel_map``. Every stage is a pure function ``ImageSpec -> ImageSpec`` that
returns a new instance through :func:`dataclasses.replace`; nothing is ever
mutated in place.

Design notes:

* Sequence fields are persistent vectors (``pyrsistent.PVector``) so a record
    can be shared freely without defensive copies.
* ``pixel_map[i]`` always corresponds to ``grid[i]`` once the pixel map is
    built. Rebuilding the grid afterwards would break that pairing, so stages
    must run in order (see :mod:`identicon.pipeline`).
"""

from dataclasses import dataclass
from collections.abc import Sized
from typing import Any, Optional

from pyrsistent import PMap, pmap, pvector
from pyrsistent.typing import PVector

from identicon.components import Cell, Color, Rect


@dataclass(frozen=True)
class ImageSpec:
    """Record accumulating everything needed to draw one identicon.

    Attributes:
        digest (PVector[int]): MD5 digest bytes (16 once hashed).
        color (Color | None): Fill color, ``None`` until picked.
        grid (PVector[Cell]): Mirrored grid cells, 25 before filtering and
            only even-valued cells after.
        pixel_map (PVector[Rect]): One canvas rectangle per cell in ``grid``.
    """

    digest: PVector[int] = pvector()
    color: Optional[Color] = None
    grid: PVector[Cell] = pvector()
    pixel_map: PVector[Rect] = pvector()

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse view of populated fields, handy for logs and debugging.

        Returns:
            PMap[str, Any]: Field name to value for every non-empty field.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if value is None or (isinstance(value, Sized) and len(value) == 0):
                continue
            description = description.set(field, value)
        return description
