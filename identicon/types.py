"""Common type aliases shared by the pipeline stages."""

from typing import Callable, Tuple, TYPE_CHECKING


# Forward declaration to avoid circular imports:
if TYPE_CHECKING:
    from identicon.image import ImageSpec

Byte = int
CellIndex = int
RGB = Tuple[Byte, Byte, Byte]
RGBA = Tuple[Byte, Byte, Byte, Byte]

StageFn = Callable[["ImageSpec"], "ImageSpec"]
