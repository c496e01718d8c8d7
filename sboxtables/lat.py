"""Linear approximation table of an S-box."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import chain

Table = list[list[int]]

_UNIT_VECTORS = (1, 2, 4, 8)
# Bias is measured against a fixed count of 8, as for 4-bit S-boxes.
_OFFSET = 8


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


def inner_product(a: int, b: int) -> int:
    """Parity of the bits set in both *a* and *b*."""
    return bin(a & b).count("1") & 1


def lat(sbox: Sequence[int], n: int) -> Table:
    """Absolute bias table: |#{x : <b, S(x)> == <a, x>} - 8| for each mask pair (a, b)."""
    s = _checked(sbox, n)
    size = len(s)
    return [
        [
            abs(
                sum(1 for x in range(size) if inner_product(s[x], b) == inner_product(a, x))
                - _OFFSET
            )
            for b in range(size)
        ]
        for a in range(size)
    ]


def max_lat(table: Sequence[Sequence[int]]) -> int:
    """Largest entry outside the first row and the first column."""
    return max(
        chain(
            (0,),
            (v for i, row in enumerate(table) for j, v in enumerate(row) if i and j),
        )
    )


def carl1(table: Sequence[Sequence[int]]) -> int:
    """Number of non-zero entries between one-bit input and one-bit output masks of a 4-bit LAT."""
    if len(table) != 16:
        raise ValueError("CarL1 is defined for 4-bit S-boxes only")
    return sum(1 for a in _UNIT_VECTORS for b in _UNIT_VECTORS if table[a][b] != 0)