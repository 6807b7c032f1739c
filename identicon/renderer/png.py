import logging

from PIL import Image

from identicon.config import BACKGROUND, CANVAS_SIZE, IMAGE_FORMAT
from identicon.errors import EncodingError, PrecondApplicationError
from identicon.image import ImageSpec
from identicon.utils.image import (
    canvas_to_image,
    fill_rect,
    image_to_bytes,
    new_canvas,
)

logger = logging.getLogger(__name__)


def render_canvas(image: ImageSpec) -> Image.Image:
    """
    Rasterize ``image.pixel_map`` in ``image.color`` on a transparent canvas.

    An empty pixel map yields a background-only canvas.

    Raises:
        PrecondApplicationError: If no color has been picked yet or the pixel
            map does not match the grid.
    """
    if image.color is None:
        raise PrecondApplicationError("Cannot render an image without a color")
    if len(image.pixel_map) != len(image.grid):
        raise PrecondApplicationError(
            f"Pixel map has {len(image.pixel_map)} rectangles for {len(image.grid)} grid cells"
        )

    color = image.color.as_tuple()
    canvas = new_canvas(CANVAS_SIZE, BACKGROUND)
    for rect in image.pixel_map:
        canvas = fill_rect(canvas, rect, color)

    logger.debug("Rasterized %d rectangles in %s", len(image.pixel_map), color)
    return canvas_to_image(canvas)


def draw_image(image: ImageSpec) -> bytes:
    """
    Render ``image`` and encode it as PNG bytes.

    Raises:
        PrecondApplicationError: If no color has been picked yet or the pixel
            map does not match the grid.
        EncodingError: If Pillow fails to serialize the canvas.
    """
    img = render_canvas(image)
    try:
        return image_to_bytes(img, IMAGE_FORMAT)
    except (OSError, ValueError) as e:
        raise EncodingError(f"Could not encode canvas as {IMAGE_FORMAT}: {e}") from e
