"""Pixel map builder stage.

Cell ``index`` maps to column ``index % 5`` and row ``index // 5``; each cell
covers a 50x50 pixel square, so the whole grid spans the 250x250 canvas.
"""

from dataclasses import replace

from pyrsistent import pvector

from identicon.components import Cell, Point, Rect
from identicon.config import CELL_SIZE
from identicon.image import ImageSpec


def cell_rect(cell: Cell) -> Rect:
    """Return the half-open canvas rectangle covered by ``cell``."""
    horizontal = cell.column * CELL_SIZE
    vertical = cell.row * CELL_SIZE
    return Rect(
        top_left=Point(horizontal, vertical),
        bottom_right=Point(horizontal + CELL_SIZE, vertical + CELL_SIZE),
    )


def build_pixel_map(image: ImageSpec) -> ImageSpec:
    """Set ``pixel_map`` to one rectangle per grid cell, in grid order."""
    pixel_map = pvector(cell_rect(cell) for cell in image.grid)
    return replace(image, pixel_map=pixel_map)
