"""Huffman compression of byte strings and files."""

from __future__ import annotations

import heapq
import io
import itertools
from collections.abc import Iterator, Mapping
from os import PathLike
from pathlib import Path

from huffcode.frequency import count_frequencies
from huffcode.header import PSEUDO_EOF, RESERVED_BYTES, read_header, write_header
from huffcode.node import Node


def _assign_codes(node: Node | None, prefix: str) -> Iterator[tuple[int, str]]:
    if node is None:
        return
    if node.is_leaf():
        yield node.symbol, prefix
    yield from _assign_codes(node.left, prefix + "0")
    yield from _assign_codes(node.right, prefix + "1")


def build_code_map(frequencies: Mapping[int, int]) -> dict[int, str]:
    """Build a prefix code for the given byte frequencies plus an end-of-data marker."""
    for symbol in frequencies:
        if not 0 <= symbol <= 0xFF:
            raise ValueError(f"symbol {symbol!r} is not a byte value")
        if symbol in RESERVED_BYTES:
            raise ValueError(f"byte 0x{symbol:02x} is reserved by the format")
    order = itertools.count()
    heap = [
        (freq, next(order), Node(symbol, freq))
        for symbol, freq in sorted(frequencies.items())
    ]
    heap.append((1, next(order), Node(PSEUDO_EOF, 1)))
    heapq.heapify(heap)
    while len(heap) > 1:
        left_freq, _, left = heapq.heappop(heap)
        right_freq, _, right = heapq.heappop(heap)
        total = left_freq + right_freq
        heapq.heappush(heap, (total, next(order), Node(None, total, left, right)))
    return dict(_assign_codes(heap[0][2], ""))


def build_decoding_tree(codes: Mapping[int, str]) -> Node:
    """Rebuild the tree that the given code table describes."""
    root = Node()
    for symbol, code in codes.items():
        if set(code) - {"0", "1"}:
            raise ValueError(f"code {code!r} for symbol {symbol} is not a bit string")
        if not code:
            continue
        node = root
        for bit in code[:-1]:
            side = "left" if bit == "0" else "right"
            child = getattr(node, side)
            if child is None:
                child = Node()
                setattr(node, side, child)
            node = child
        setattr(node, "left" if code[-1] == "0" else "right", Node(symbol))
    return root


def encode_bits(data: bytes, codes: Mapping[int, str]) -> str:
    """Return the bit string for ``data`` followed by the end-of-data code."""
    try:
        return "".join(codes[byte] for byte in data) + codes[PSEUDO_EOF]
    except KeyError as exc:
        raise ValueError(f"no code for symbol {exc.args[0]!r}") from None


def pack_bits(bits: str) -> bytes:
    """Pad a bit string with zeros and pack it into bytes, most significant bit first."""
    padded = bits + "0" * (8 - (len(bits) - 1) % 8)
    return bytes(int(padded[start:start + 8], 2) for start in range(0, len(padded), 8))


def unpack_bits(payload: bytes) -> str:
    """Expand bytes into a string of bits, most significant bit first."""
    return "".join(f"{byte:08b}" for byte in payload)


def decode_bits(bits: str, root: Node) -> bytes:
    """Walk the tree along ``bits`` until the end-of-data symbol is reached."""
    if root.left is None and root.right is None:
        return b""
    out = bytearray()
    node: Node | None = root
    for bit in bits:
        node = node.left if bit == "0" else node.right
        if node is None:
            raise ValueError("bit stream does not match the code table")
        if node.is_leaf():
            if node.symbol == PSEUDO_EOF:
                break
            out.append(node.symbol)
            node = root
    return bytes(out)


def compress(data: bytes) -> bytes:
    """Compress ``data`` into a header followed by the packed code bits."""
    codes = build_code_map(count_frequencies(data))
    buffer = io.BytesIO()
    write_header(buffer, codes)
    buffer.write(pack_bits(encode_bits(data, codes)))
    return buffer.getvalue()


def decompress(blob: bytes) -> bytes:
    """Restore the data that :func:`compress` produced ``blob`` from."""
    stream = io.BytesIO(blob)
    codes = read_header(stream)
    return decode_bits(unpack_bits(stream.read()), build_decoding_tree(codes))


def compress_file(input_path: str | PathLike[str], output_path: str | PathLike[str]) -> None:
    """Compress the file at ``input_path`` into ``output_path``."""
    Path(output_path).write_bytes(compress(Path(input_path).read_bytes()))


def decompress_file(
    compressed_path: str | PathLike[str], output_path: str | PathLike[str]
) -> None:
    """Decompress the file at ``compressed_path`` into ``output_path``."""
    Path(output_path).write_bytes(decompress(Path(compressed_path).read_bytes()))