"""Fixed identicon layout and command-line configuration.

The image geometry is not configurable: an identicon is always a 5x5 grid of
50x50 pixel cells on a 250x250 canvas, derived from a 16 byte MD5 digest of
which the first 15 bytes are consumed three at a time.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Tuple


DIGEST_SIZE = 16
CHUNK_SIZE = 3
GRID_WIDTH = 5
GRID_CELLS = GRID_WIDTH * GRID_WIDTH
CELL_SIZE = 50
CANVAS_SIZE = GRID_WIDTH * CELL_SIZE

# Fully transparent RGBA; filled cells are always opaque.
BACKGROUND: Tuple[int, int, int, int] = (0, 0, 0, 0)
IMAGE_FORMAT = "PNG"
IMAGE_SUFFIX = ".png"

DEFAULT_LOG_LEVEL = "warning"
DEFAULT_OUTPUT_DIR = Path(".")


@dataclass(frozen=True)
class CliConfig:
    """Options collected from the command line.

    Attributes:
        names: Input strings, one identicon per entry.
        output_dir: Directory receiving ``<name>.png`` files.
        log_level: Name of a :mod:`logging` level (case-insensitive).
    """

    names: Tuple[str, ...] = field(default_factory=tuple)
    output_dir: Path = DEFAULT_OUTPUT_DIR
    log_level: str = DEFAULT_LOG_LEVEL
