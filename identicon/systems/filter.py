from dataclasses import replace

from pyrsistent import pvector

from identicon.image import ImageSpec


def filter_odd_squares(image: ImageSpec) -> ImageSpec:
    """Drop odd-valued cells, keeping order and original indices.

    An all-odd grid leaves ``grid`` empty; the renderer then paints nothing.
    """
    grid = pvector(cell for cell in image.grid if cell.is_filled)
    return replace(image, grid=grid)
