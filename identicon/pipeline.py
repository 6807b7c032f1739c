"""Pipeline orchestration.

Wires the stages together in their only valid order and exposes the single
entry point :func:`generate`, which maps an input string to PNG bytes.

Ordering:

1. ``hash_input`` creates the record with its 16 byte digest.
2. ``pick_color`` takes the first three digest bytes as the fill color.
3. ``build_grid`` mirrors five 3 byte chunks into the 25 cell grid.
4. ``filter_odd_squares`` keeps only even-valued (filled) cells.
5. ``build_pixel_map`` converts surviving cells to canvas rectangles.
6. ``draw_image`` rasterizes and encodes the result.

Every stage is pure, so calls are independent and may run in parallel
threads or processes without coordination.
"""

import logging
from typing import Tuple

from identicon.image import ImageSpec
from identicon.renderer import draw_image
from identicon.systems.color import pick_color
from identicon.systems.filter import filter_odd_squares
from identicon.systems.grid import build_grid
from identicon.systems.hash import hash_input
from identicon.systems.pixel_map import build_pixel_map
from identicon.types import StageFn

logger = logging.getLogger(__name__)

STAGES: Tuple[StageFn, ...] = (
    pick_color,
    build_grid,
    filter_odd_squares,
    build_pixel_map,
)


def build_image(text: str) -> ImageSpec:
    """Run every stage up to the pixel map for ``text``.

    Returns:
        ImageSpec: Record with digest, color, filtered grid and pixel map set.

    Raises:
        PrecondApplicationError: If a stage receives a malformed record.
    """
    image = hash_input(text)
    for stage in STAGES:
        image = stage(image)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s: %s", stage.__name__, dict(image.description))
    return image


def generate(text: str) -> bytes:
    """Derive the identicon for ``text`` as PNG bytes.

    The same ``text`` always yields byte-identical output.

    Raises:
        PrecondApplicationError: If a stage receives a malformed record.
        EncodingError: If the canvas cannot be encoded.
    """
    image = build_image(text)
    data = draw_image(image)
    logger.info(
        "Generated identicon for %r: %d filled cells, %d bytes",
        text,
        len(image.grid),
        len(data),
    )
    return data
