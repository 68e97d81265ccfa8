import io

import pytest

from huffcode.header import (
    CHARACTER_CODE_SEPARATOR,
    HEADER_ENTRY_SEPARATOR,
    HEADER_TEXT_SEPARATOR,
    PSEUDO_EOF,
    read_header,
    write_header,
)


def test_write_header_layout():
    buf = io.BytesIO()
    write_header(buf, {ord("A"): "0", PSEUDO_EOF: "1"})
    expected = (
        bytes([ord("A"), CHARACTER_CODE_SEPARATOR]) + b"0" + bytes([HEADER_ENTRY_SEPARATOR])
        + bytes([PSEUDO_EOF, CHARACTER_CODE_SEPARATOR]) + b"1" + bytes([HEADER_ENTRY_SEPARATOR])
        + bytes([HEADER_TEXT_SEPARATOR])
    )
    assert buf.getvalue() == expected


def test_round_trip_leaves_stream_after_header():
    codes = {ord("x"): "00", ord("y"): "01", 10: "10", PSEUDO_EOF: "11"}
    buf = io.BytesIO()
    write_header(buf, codes)
    buf.write(b"payload")
    buf.seek(0)
    assert read_header(buf) == codes
    assert buf.read() == b"payload"


def test_empty_table_is_only_terminator():
    buf = io.BytesIO()
    write_header(buf, {})
    assert buf.getvalue() == bytes([HEADER_TEXT_SEPARATOR])
    buf.seek(0)
    assert read_header(buf) == {}


def test_empty_code_is_kept():
    buf = io.BytesIO()
    write_header(buf, {PSEUDO_EOF: ""})
    buf.seek(0)
    assert read_header(buf) == {PSEUDO_EOF: ""}


def test_truncated_header_raises():
    with pytest.raises(ValueError):
        read_header(io.BytesIO(bytes([ord("A"), CHARACTER_CODE_SEPARATOR]) + b"01"))


def test_missing_terminator_raises():
    with pytest.raises(ValueError):
        read_header(io.BytesIO(b"abc"))


def test_write_rejects_non_bit_code():
    with pytest.raises(ValueError):
        write_header(io.BytesIO(), {ord("A"): "012"})


def test_write_rejects_non_byte_symbol():
    with pytest.raises(ValueError):
        write_header(io.BytesIO(), {300: "0"})