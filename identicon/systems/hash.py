"""Hasher stage: input text to a 16 byte MD5 digest.

MD5 is used only as a deterministic pseudo-random source, never for security.
"""

import hashlib

from pyrsistent import pvector

from identicon.image import ImageSpec


def hash_bytes(data: bytes) -> ImageSpec:
    """Return a fresh record whose ``digest`` is the MD5 of ``data``."""
    digest = hashlib.md5(data, usedforsecurity=False).digest()
    return ImageSpec(digest=pvector(digest))


def hash_input(text: str) -> ImageSpec:
    """Hash the UTF-8 encoding of ``text``.

    Example:
        ``hash_input("Joe").digest`` is
        ``[58, 54, 136, 24, 183, 52, 29, 72, 102, 14, 141, 214, 197, 167, 125, 190]``.
    """
    return hash_bytes(text.encode("utf-8"))
