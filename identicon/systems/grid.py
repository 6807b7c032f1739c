"""Grid builder stage.

The digest is consumed three bytes at a time; every chunk ``[a, b, c]`` becomes
the left-right symmetric row ``[a, b, c, b, a]``. Five chunks fill the 5x5
grid, so the sixteenth digest byte is never used. Keep it that way: changing
the chunking changes every identicon ever generated.
"""

from dataclasses import replace
from typing import Sequence, TypeVar

from pyrsistent import pvector
from pyrsistent.typing import PVector

from identicon.components import Cell
from identicon.config import CHUNK_SIZE, DIGEST_SIZE
from identicon.errors import PrecondApplicationError
from identicon.image import ImageSpec
from identicon.utils.sequence import chunk_every, flatten

T = TypeVar("T")


def mirror_row(row: Sequence[T]) -> PVector[T]:
    """Append the first two elements of ``row`` in reverse order.

    ``mirror_row([1, 2, 3])`` is ``[1, 2, 3, 2, 1]``.

    Raises:
        PrecondApplicationError: If ``row`` has fewer than two elements.
    """
    if len(row) < 2:
        raise PrecondApplicationError(f"Row too short to mirror: {list(row)}")
    first, second = row[0], row[1]
    return pvector(row).extend([second, first])


def build_grid(image: ImageSpec) -> ImageSpec:
    """Populate ``grid`` with 25 cells indexed ``0..24`` in row-major order.

    Raises:
        PrecondApplicationError: If the digest is not exactly 16 bytes.
    """
    if len(image.digest) != DIGEST_SIZE:
        raise PrecondApplicationError(
            f"Grid needs a {DIGEST_SIZE} byte digest, got {len(image.digest)}"
        )
    rows = [mirror_row(chunk) for chunk in chunk_every(image.digest, CHUNK_SIZE)]
    grid = pvector(
        Cell(value=value, index=index) for index, value in enumerate(flatten(rows))
    )
    return replace(image, grid=grid)
