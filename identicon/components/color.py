from dataclasses import dataclass

from identicon.errors import PrecondApplicationError
from identicon.types import RGB


@dataclass(frozen=True)
class Color:
    """Opaque RGB fill color taken from the leading digest bytes.

    Attributes:
        red: Red channel in ``[0, 255]``.
        green: Green channel in ``[0, 255]``.
        blue: Blue channel in ``[0, 255]``.
    """

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            if not 0 <= channel <= 255:
                raise PrecondApplicationError(
                    f"Color channel out of byte range: {channel}"
                )

    def as_tuple(self) -> RGB:
        return (self.red, self.green, self.blue)
