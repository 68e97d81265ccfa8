"""Tree nodes shared by the encoder and the decoder."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Node:
    """A Huffman tree node; internal nodes carry no symbol."""

    symbol: int | None = None
    frequency: int = 0
    left: Node | None = None
    right: Node | None = None

    def is_leaf(self) -> bool:
        """Return True when the node stands for a symbol."""
        return self.symbol is not None