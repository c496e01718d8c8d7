import pytest

from sboxtables.hexfmt import format_bytes, xor_bytes


def test_format_bytes_layout():
    assert format_bytes(b"\x01\xab", "key") == "\nkey\n 1 ab \n"


def test_format_bytes_empty():
    assert format_bytes(b"", "empty") == "\nempty\n\n"


def test_format_bytes_accepts_int_list():
    assert format_bytes([0x10, 0xff], "v") == format_bytes(b"\x10\xff", "v")


def test_xor_roundtrip():
    a = b"\x00\x11\x22\xb3"
    b = b"\x44\x57\x66\xf5"
    assert xor_bytes(xor_bytes(a, b), b) == a


def test_xor_with_self_is_zero():
    data = b"\x57\x49\xd1\xc6"
    assert xor_bytes(data, data) == bytes(len(data))


def test_xor_length_mismatch():
    with pytest.raises(ValueError):
        xor_bytes(b"\x00", b"\x00\x01")