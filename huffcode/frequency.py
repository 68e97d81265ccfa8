"""Counting how often each byte occurs in a piece of data."""

from __future__ import annotations

from collections import Counter
from os import PathLike
from pathlib import Path


def count_frequencies(data: bytes) -> Counter[int]:
    """Return a mapping from each byte value in ``data`` to its number of occurrences."""
    return Counter(data)


def read_frequencies(path: str | PathLike[str]) -> Counter[int]:
    """Read the file at ``path`` and count its bytes."""
    return count_frequencies(Path(path).read_bytes())