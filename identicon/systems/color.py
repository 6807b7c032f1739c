from dataclasses import replace

from identicon.components import Color
from identicon.errors import PrecondApplicationError
from identicon.image import ImageSpec


def pick_color(image: ImageSpec) -> ImageSpec:
    """Set ``color`` from the first three digest bytes.

    Raises:
        PrecondApplicationError: If the digest holds fewer than three bytes.
    """
    if len(image.digest) < 3:
        raise PrecondApplicationError(
            f"Digest too short to pick a color: {len(image.digest)} bytes"
        )
    red, green, blue = image.digest[:3]
    return replace(image, color=Color(red, green, blue))
