"""Persistence of encoded identicons.

Kept apart from the pipeline: generating an identicon never touches storage.
"""

import logging
from pathlib import Path

from identicon.config import DEFAULT_OUTPUT_DIR, IMAGE_SUFFIX

logger = logging.getLogger(__name__)


def image_filename(text: str) -> str:
    """Return the file name an identicon for ``text`` is saved under."""
    return f"{text}{IMAGE_SUFFIX}"


def save_image(data: bytes, text: str, directory: Path = DEFAULT_OUTPUT_DIR) -> Path:
    """Write ``data`` to ``<directory>/<text>.png`` and return the path.

    The directory is created if missing and an existing file is overwritten.
    The write is unbuffered, so the file holds exactly ``data``.

    Raises:
        OSError: If the file cannot be written.
    """
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / image_filename(text)
    with open(path, "wb", buffering=0) as f:
        f.write(data)
    logger.info("Saved %d bytes to %s", len(data), path)
    return path
