"""Sequence helpers used by the grid builder."""

from typing import List, Sequence, TypeVar
from pyrsistent import pvector
from pyrsistent.typing import PVector

T = TypeVar("T")


def chunk_every(items: Sequence[T], size: int) -> PVector[PVector[T]]:
    """Split ``items`` into consecutive chunks of exactly ``size`` elements.

    A trailing chunk shorter than ``size`` is dropped, so 16 digest bytes
    chunked by 3 yield 5 chunks and the last byte is ignored.

    Raises:
        ValueError: If ``size`` is not positive.
    """
    if size <= 0:
        raise ValueError(f"Chunk size must be positive, got {size}")
    full = len(items) - len(items) % size
    chunks: List[PVector[T]] = [
        pvector(items[start : start + size]) for start in range(0, full, size)
    ]
    return pvector(chunks)


def flatten(rows: Sequence[Sequence[T]]) -> PVector[T]:
    """Concatenate ``rows`` in order into a single vector."""
    return pvector(item for row in rows for item in row)
