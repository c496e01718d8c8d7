"""Feistel boomerang connectivity table of an S-box."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import chain

Table = list[list[int]]


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


def format_table(table: Sequence[Sequence[int]]) -> str:
    """Render a square table, each cell followed by ' ,', one row per line."""
    return "".join("".join(f"{v} ," for v in row) + "\n" for row in table)


def fbct(sbox: Sequence[int], n: int) -> Table:
    """Count, for each (a, b), the inputs x where S(x)^S(x^a)^S(x^b)^S(x^a^b) is zero."""
    s = _checked(sbox, n)
    size = len(s)
    return [
        [
            sum(1 for x in range(size) if s[x] ^ s[x ^ a] ^ s[x ^ b] ^ s[x ^ a ^ b] == 0)
            for b in range(size)
        ]
        for a in range(size)
    ]


def max_fbct(table: Sequence[Sequence[int]]) -> int:
    """Largest entry off the first row, the first column and the diagonal."""
    return max(
        chain(
            (0,),
            (
                v
                for i, row in enumerate(table)
                for j, v in enumerate(row)
                if i and j and i != j
            ),
        )
    )