"""Grid cell component.

A cell pairs the digest-derived ``value`` with its ``index`` in the flattened
5x5 grid. Filtering keeps indices untouched so a cell always knows where it
is drawn.
"""

from dataclasses import dataclass

from identicon.config import GRID_CELLS, GRID_WIDTH
from identicon.errors import PrecondApplicationError
from identicon.types import Byte, CellIndex


@dataclass(frozen=True)
class Cell:
    """One of the 25 grid positions.

    Attributes:
        value: Digest byte mirrored into this position.
        index: Row-major position in ``[0, 25)``.
    """

    value: Byte
    index: CellIndex

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 255:
            raise PrecondApplicationError(f"Cell value out of byte range: {self.value}")
        if not 0 <= self.index < GRID_CELLS:
            raise PrecondApplicationError(f"Cell index out of grid: {self.index}")

    @property
    def column(self) -> int:
        return self.index % GRID_WIDTH

    @property
    def row(self) -> int:
        return self.index // GRID_WIDTH

    @property
    def is_filled(self) -> bool:
        """Even values are painted, odd values stay background."""
        return self.value % 2 == 0
