"""Hex dumps of byte strings and byte-wise XOR."""

from __future__ import annotations

from collections.abc import Iterable


def format_bytes(data: Iterable[int], name: str) -> str:
    """Return *name* on its own line followed by each byte as two-wide hex."""
    dump = "".join(f"{byte:2x} " for byte in data)
    return f"\n{name}\n{dump}\n"


def xor_bytes(a: bytes, b: bytes) -> bytes:
    """XOR two equally long byte strings position by position."""
    if len(a) != len(b):
        raise ValueError(f"length mismatch: {len(a)} != {len(b)}")
    return bytes(x ^ y for x, y in zip(a, b))