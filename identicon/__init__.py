"""Deterministic identicons.

Derives a symmetric 5x5 colored grid image from an arbitrary string: the same
input always produces the same PNG bytes, so identicons work as visual
fingerprints without storing per-user images.

Modules:
- pipeline: stage ordering and the :func:`generate` entry point
- systems: the pure record-to-record stages (hash, color, grid, filter, pixel map)
- renderer: rasterization and PNG encoding
- storage: writing encoded identicons to disk
- cli: command-line wrapper
"""

from identicon.errors import EncodingError, IdenticonError, PrecondApplicationError
from identicon.pipeline import build_image, generate

__all__ = [
    "EncodingError",
    "IdenticonError",
    "PrecondApplicationError",
    "build_image",
    "generate",
]
