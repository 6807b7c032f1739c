import io

import numpy as np
import numpy.typing as npt
from PIL import Image

from identicon.components import Rect
from identicon.types import RGB, RGBA

# Type aliases for clarity
UInt8Array = npt.NDArray[np.uint8]


def new_canvas(size: int, background: RGBA) -> UInt8Array:
    """
    Allocate a ``size`` x ``size`` RGBA pixel array filled with ``background``.
    """
    canvas: UInt8Array = np.empty((size, size, 4), dtype=np.uint8)
    canvas[...] = background
    return canvas


def fill_rect(canvas: UInt8Array, rect: Rect, color: RGB) -> UInt8Array:
    """
    Paint ``rect`` opaque ``color`` onto a copy of ``canvas``.

    Slicing is half-open, matching ``Rect`` semantics: the bottom-right corner
    is the first pixel left untouched.
    """
    out: UInt8Array = canvas.copy()
    x0, y0 = rect.top_left.as_tuple()
    x1, y1 = rect.bottom_right.as_tuple()
    out[y0:y1, x0:x1] = (*color, 255)
    return out


def canvas_to_image(canvas: UInt8Array) -> Image.Image:
    # (H, W, 4) uint8 arrays are read as RGBA.
    return Image.fromarray(canvas)


def image_to_bytes(img: Image.Image, image_format: str) -> bytes:
    """
    Serialize ``img`` with Pillow into an in-memory byte string.
    """
    buffer = io.BytesIO()
    img.save(buffer, format=image_format)
    return buffer.getvalue()
