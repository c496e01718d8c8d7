# sboxtables

Tools for analysing the substitution boxes (S-boxes) of block ciphers.
An `n`-bit S-box (1 ≤ `n` ≤ 8) is given as a sequence of `2**n` output
values, each in `range(0, 2**n)`. The package builds the usual
cryptanalytic tables and the figures drawn from them:

- **DDT** (`sboxtables.ddt`): `ddt(sbox, n)` gives the difference
  distribution table, `max_ddt(table)` the differential uniformity (the
  largest entry outside the first row), and `card1(table)` the number of
  non-zero entries between single-bit input and output differences
  (4-bit tables only).
- **LAT** (`sboxtables.lat`): `lat(sbox, n)` gives, for every pair of
  masks, `|#{x : <b, S(x)> == <a, x>} - 8|`. The offset is fixed at 8,
  which is the unbiased count for a 4-bit S-box. `max_lat(table)` gives
  the largest entry outside the first row and column, `carl1(table)` the
  single-bit count (4-bit tables only), and `inner_product(a, b)` the
  parity of `a & b`.
- **FBCT** (`sboxtables.fbct`): `fbct(sbox, n)` gives the Feistel
  boomerang connectivity table, `max_fbct(table)` its largest entry off
  the first row, the first column and the diagonal, and
  `format_table(table)` renders any square table as text.
- **FBDT** (`sboxtables.fbdt`): `fbdt(sbox, n)` gives a three-dimensional
  table indexed `[a][b][c]`, `max_fbdt(table)` its largest entry with
  non-zero `a` and `c`, and `format_table3d(table)` renders it one slice
  per value of `c`.

Invalid widths, lengths or values raise `ValueError`; `card1` and `carl1`
raise `ValueError` for tables that are not 16 × 16.

## Installation

```
pip install .
```

Python 3.10 or later is required; there are no third-party dependencies.

## Library use

```python
from sboxtables.ddt import ddt, max_ddt, card1
from sboxtables.lat import lat, max_lat, carl1
from sboxtables.fbct import fbct, max_fbct, format_table
from sboxtables.fbdt import fbdt, max_fbdt
from sboxtables.sboxes import get_sbox, sbox_names

sbox = [0x0C, 0x00, 0x0F, 0x0A, 0x02, 0x0B, 0x09, 0x05,
        0x08, 0x03, 0x0D, 0x07, 0x01, 0x0E, 0x06, 0x04]

table = ddt(sbox, 4)
print("DU =", max_ddt(table))
print("CarD1 =", card1(table))

linear = lat(sbox, 4)
print("max LAT =", max_lat(linear), "CarL1 =", carl1(linear))

boomerang = fbct(sbox, 4)
print(format_table(boomerang))
print("Max FBCT =", max_fbct(boomerang))

print("Max FBDT =", max_fbdt(fbdt(sbox, 4)))
```

### Bundled S-boxes

`sboxtables.sboxes` holds a catalogue of S-boxes from lightweight
ciphers: `sand_s1`, `sand_s2`, `scenery`, `warp`, `lblock_s0` to
`lblock_s7`, `twine`, `clefia_s0` and `clefia_s1`. `sbox_names()` lists
them in order and `get_sbox(name)` looks one up, ignoring case, raising
`KeyError` for an unknown name. Each is an `SBox` dataclass with `name`,
`cipher` and `values`; `SBox.bits()` gives its width. Creating an `SBox`
whose length is not a power of two up to 256, or whose values fall
outside that range, raises `ValueError`.

```python
box = get_sbox("twine")
print(box.cipher, box.bits(), max_ddt(ddt(box.values, box.bits())))
```

### Byte helpers

`sboxtables.hexfmt` has `format_bytes(data, name)`, which renders bytes
as two-wide hexadecimal under a heading line, and `xor_bytes(a, b)`,
which XORs two byte strings of equal length (`ValueError` otherwise).

## Command line

```
sboxtables [--sbox NAME | --values HEX] [--table {fbct,fbdt,lat,ddt}] [--print]
```

- `--sbox NAME` picks a bundled S-box (default `clefia_s1`).
- `--values HEX` gives the S-box instead, as hexadecimal entries separated
  by commas or whitespace, with or without `0x` (parsed by
  `sboxtables.cli.parse_sbox`).
- `--table` chooses the table (default `fbdt`).
- `--print` also prints the full table for `lat`, `ddt` and `fbdt`; the
  `fbct` table is always printed.

What is reported per table:

- `fbct`: the table and `Max FBCT= …`.
- `lat`: `CarL1= …` for 4-bit S-boxes (the maximum is not reported).
- `ddt`: `DU= …`, and `CarD1= …` for 4-bit S-boxes.
- `fbdt`: one `a=…` line per input difference, then `Max FBCT= …`.

The cipher name of the S-box is printed last. For example:

```
sboxtables --sbox warp --table ddt --print
sboxtables --values "c 0 f a 2 b 9 5 8 3 d 7 1 e 6 4" --table lat
```

Table sizes grow quickly: the FBDT of an 8-bit S-box has 2^24 entries
and takes a long time to build in pure Python, and that is the default
command. Choose a 4-bit S-box or another table for quick results.

## Running the tests

```
pip install .[test]
pytest
```