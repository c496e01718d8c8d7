"""Feistel boomerang difference table of an S-box."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import chain

Table3D = list[list[list[int]]]


def _checked(sbox: Sequence[int], n: int) -> tuple[int, ...]:
    if not 1 <= n <= 8:
        raise ValueError(f"S-box width must be between 1 and 8 bits, got {n}")
    size = 1 << n
    values = tuple(sbox)
    if len(values) != size:
        raise ValueError(f"S-box of {n} bits needs {size} entries, got {len(values)}")
    if any(not 0 <= v < size for v in values):
        raise ValueError(f"S-box entries must lie in range(0, {size})")
    return values


def fbdt(sbox: Sequence[int], n: int) -> Table3D:
    """Count x with S(x)^S(x^a)^S(x^b)^S(x^a^b) == 0 and S(x)^S(x^a) == c, indexed [a][b][c]."""
    s = _checked(sbox, n)
    size = len(s)
    table = [[[0] * size for _ in range(size)] for _ in range(size)]
    for a, plane in enumerate(table):
        for x in range(size):
            diff = s[x] ^ s[x ^ a]
            for b, row in enumerate(plane):
                if s[x ^ b] ^ s[x ^ a ^ b] == diff:
                    row[diff] += 1
    return table


def max_fbdt(table: Sequence[Sequence[Sequence[int]]]) -> int:
    """Largest entry with a non-zero first and last index."""
    return max(
        chain(
            (0,),
            (
                v
                for i, plane in enumerate(table)
                if i
                for row in plane
                for k, v in enumerate(row)
                if k
            ),
        )
    )


def format_table3d(table: Sequence[Sequence[Sequence[int]]]) -> str:
    """Render the table one slice per value of the last index."""
    size = len(table)
    parts = []
    for k in range(size):
        parts.append(f"Con k={k} \n")
        for plane in table:
            parts.append("".join(f"{row[k]} ," for row in plane) + "\n")
    return "".join(parts)