"""In-memory pagination over an ordered sequence."""

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def paginate(page: int, limit: int, items: Sequence[T]) -> list[T]:
    """
    Return the 1-based ``page`` of at most ``limit`` items.

    A page past the end yields an empty list. The source sequence is
    neither mutated nor reordered. ``page`` and ``limit`` must be
    positive integers; defaults are the caller's concern.
    """
    start = (page - 1) * limit
    if start >= len(items):
        return []
    return list(items[start : start + limit])
