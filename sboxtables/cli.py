"""Command line entry point: build a table for an S-box and report its figures."""

from __future__ import annotations

import argparse
import re
import sys

from sboxtables.ddt import card1, ddt, max_ddt
from sboxtables.fbct import fbct, format_table, max_fbct
from sboxtables.fbdt import fbdt, format_table3d, max_fbdt
from sboxtables.lat import carl1, lat
from sboxtables.sboxes import SBox, get_sbox, sbox_names

_TABLES = ("fbct", "fbdt", "lat", "ddt")


def parse_sbox(text: str) -> tuple[int, ...]:
    """Parse hexadecimal S-box entries separated by commas or whitespace."""
    tokens = [t for t in re.split(r"[,\s]+", text.strip()) if t]
    if not tokens:
        raise ValueError("no S-box entries given")
    values = []
    for token in tokens:
        digits = token[2:] if token.lower().startswith("0x") else token
        try:
            values.append(int(digits, 16))
        except ValueError:
            raise ValueError(f"not a hexadecimal value: {token!r}") from None
    return tuple(values)


def _report(box: SBox, table: str, show: bool) -> str:
    n = box.bits()
    lines: list[str] = []
    if table == "fbct":
        t = fbct(box.values, n)
        lines.append(format_table(t))
        lines.append(f"Max FBCT= {max_fbct(t)}\n")
    elif table == "lat":
        t = lat(box.values, n)
        if show:
            lines.append("LAT\n" + format_table(t))
        if n == 4:
            lines.append(f"CarL1= {carl1(t)}\n")
    elif table == "ddt":
        t = ddt(box.values, n)
        if show:
            lines.append("DDT= \n" + format_table(t))
        lines.append(f"DU= {max_ddt(t)}\n")
        if n == 4:
            lines.append(f"CarD1= {card1(t)}\n")
    else:
        t = fbdt(box.values, n)
        lines.extend(f"a={a:2x}\n" for a in range(len(box.values)))
        if show:
            lines.append(format_table3d(t))
        lines.append(f"Max FBCT= {max_fbdt(t)}\n")
    return "".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Analyse one S-box and print the requested table's figures."""
    parser = argparse.ArgumentParser(
        prog="sboxtables", description="Differential and boomerang tables of S-boxes."
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--sbox", default="clefia_s1", help=f"catalogued S-box: {', '.join(sbox_names())}"
    )
    source.add_argument("--values", help="S-box entries in hexadecimal")
    parser.add_argument("--table", choices=_TABLES, default="fbdt")
    parser.add_argument("--print", dest="show", action="store_true", help="print the full table")
    args = parser.parse_args(argv)

    try:
        if args.values is not None:
            box = SBox("custom", "custom", parse_sbox(args.values))
        else:
            box = get_sbox(args.sbox)
    except (KeyError, ValueError) as exc:
        parser.error(str(exc.args[0]) if exc.args else str(exc))

    sys.stdout.write(_report(box, args.table, args.show))
    print(box.cipher)
    return 0


if __name__ == "__main__":
    sys.exit(main())