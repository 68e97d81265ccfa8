"""Reading and writing the code table stored in front of compressed data."""

from __future__ import annotations

from collections.abc import Mapping
from typing import BinaryIO

INTERNAL_NODE = 0x80
PSEUDO_EOF = 0x81
CHARACTER_CODE_SEPARATOR = 0x82
HEADER_ENTRY_SEPARATOR = 0x83
HEADER_TEXT_SEPARATOR = 0x84

RESERVED_BYTES = frozenset(
    {
        INTERNAL_NODE,
        PSEUDO_EOF,
        CHARACTER_CODE_SEPARATOR,
        HEADER_ENTRY_SEPARATOR,
        HEADER_TEXT_SEPARATOR,
    }
)


def write_header(stream: BinaryIO, codes: Mapping[int, str]) -> None:
    """Write ``codes`` as symbol/code entries followed by the end-of-header marker."""
    for symbol, code in codes.items():
        if not 0 <= symbol <= 0xFF:
            raise ValueError(f"symbol {symbol!r} is not a byte value")
        if set(code) - {"0", "1"}:
            raise ValueError(f"code {code!r} for symbol {symbol} is not a bit string")
        stream.write(
            bytes([symbol, CHARACTER_CODE_SEPARATOR])
            + code.encode("ascii")
            + bytes([HEADER_ENTRY_SEPARATOR])
        )
    stream.write(bytes([HEADER_TEXT_SEPARATOR]))


def _next_byte(stream: BinaryIO) -> int:
    chunk = stream.read(1)
    if not chunk:
        raise ValueError("header ends before its terminator")
    return chunk[0]


def read_header(stream: BinaryIO) -> dict[int, str]:
    """Read a code table from ``stream``, leaving it positioned after the header."""
    codes: dict[int, str] = {}
    key: int | None = None
    while (byte := _next_byte(stream)) != HEADER_TEXT_SEPARATOR:
        if byte != CHARACTER_CODE_SEPARATOR:
            key = byte
            continue
        if key is None:
            raise ValueError("header entry has no symbol")
        code = []
        while (byte := _next_byte(stream)) != HEADER_ENTRY_SEPARATOR:
            code.append(chr(byte))
        codes[key] = codes.get(key, "") + "".join(code)
    return codes