"""Difference distribution table of an S-box."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import chain

Table = list[list[int]]

_UNIT_VECTORS = (1, 2, 4, 8)


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


def ddt(sbox: Sequence[int], n: int) -> Table:
    """Count, for each input difference a and output difference b, the x with S(x)^S(x^a) == b."""
    s = _checked(sbox, n)
    size = len(s)
    table = [[0] * size for _ in range(size)]
    for a, row in enumerate(table):
        for x in range(size):
            row[s[x] ^ s[x ^ a]] += 1
    return table


def max_ddt(table: Sequence[Sequence[int]]) -> int:
    """Differential uniformity: the largest entry outside the first row."""
    return max(chain((0,), (v for row in table[1:] for v in row)))


def card1(table: Sequence[Sequence[int]]) -> int:
    """Number of non-zero entries between one-bit input and one-bit output differences of a 4-bit DDT."""
    if len(table) != 16:
        raise ValueError("CarD1 is defined for 4-bit S-boxes only")
    return sum(1 for a in _UNIT_VECTORS for b in _UNIT_VECTORS if table[a][b] != 0)