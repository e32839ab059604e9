from __future__ import annotations

import argparse
import sys
import textwrap
from functools import partial

from tenji.base import FLAT_DOT, RAISED_DOT
from tenji.converter import cells_to_grid, text_to_cells
from tenji.render import cell_to_unicode


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="tenji",
        description="Convert romanized Japanese mora into six dot braille.",
        usage=textwrap.dedent(
            """
            Convert space separated mora into Japanese braille, drawn as three lines of dots.
            If no text is given, each line read from stdin is converted.

              Examples:

                Convert a word and display it in the terminal:
                $ tenji KO N NI TI HA

                # Use different glyphs for raised and flat dots:
                $ tenji KYA --raised '#' --flat .

                # Write Unicode braille characters instead of dot grids:
                $ echo "SYO -" | tenji -u
            """.strip()
        ),
        add_help=True,
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="The mora to convert, e.g. KYO -",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Output logs verbosely",
    )
    parser.add_argument(
        "-r",
        "--raised",
        type=str,
        default=RAISED_DOT,
        help="Glyph for a raised dot",
    )
    parser.add_argument(
        "-f",
        "--flat",
        type=str,
        default=FLAT_DOT,
        help="Glyph for a flat dot",
    )
    parser.add_argument(
        "-u",
        "--unicode",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Output Unicode braille characters instead of dot grids",
    )

    args = parser.parse_args(argv)
    log = partial(print, file=sys.stderr) if args.verbose else lambda message: None

    if args.text:
        lines = [" ".join(args.text)]
    else:
        lines = [line.rstrip("\r\n") for line in sys.stdin]
        lines = [line for line in lines if line]

    outputs = []
    for line in lines:
        try:
            cells = text_to_cells(line)
            if args.unicode:
                outputs.append("".join(cell_to_unicode(cell) for cell in cells))
            else:
                outputs.append(cells_to_grid(cells, raised=args.raised, flat=args.flat))
        except ValueError as e:
            print(e, file=sys.stderr)
            sys.exit(1)
        log(f"Converted {line.count(' ') + 1} mora into {len(cells)} cells")

    print("\n\n".join(outputs))


if __name__ == "__main__":
    main()
