"""Command line entry point for generating avatar images."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from pixatar.generator import data_url, encode_png
from pixatar.settings import Background, Endian, Opacity, Orientation, Spec

_DEFAULT_TEXT = "pixatar"


def _hue(value: str) -> int:
    try:
        hue = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid hue: {value!r}") from None
    if not 0 <= hue <= 360:
        raise argparse.ArgumentTypeError(f"hue must be between 0 and 360, got {hue}")
    return hue


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the command."""
    defaults = Spec()
    parser = argparse.ArgumentParser(
        prog="pixatar", description="Generate pixel art avatar images."
    )
    parser.add_argument("text", nargs="?", default=_DEFAULT_TEXT, help="username to draw")
    parser.add_argument("--hue", type=_hue, default=defaults.hue, help="colour hue, 0 to 360")
    parser.add_argument(
        "--background",
        choices=[b.value for b in Background],
        default=defaults.bg.value,
    )
    parser.add_argument(
        "--opacity",
        choices=[o.value for o in Opacity],
        default=defaults.opacity.value,
    )
    parser.add_argument(
        "--orientation",
        choices=[o.value for o in Orientation],
        default=defaults.orient.value,
        help="character layout direction",
    )
    parser.add_argument(
        "--bit-order",
        choices=[e.value for e in Endian],
        default=defaults.ordering.value,
        help="most or least significant bit first",
    )
    parser.add_argument(
        "-o", "--output", type=Path, help="write a PNG file instead of printing a data URL"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    spec = Spec(
        hue=args.hue,
        bg=Background(args.background),
        opacity=Opacity(args.opacity),
        orient=Orientation(args.orientation),
        ordering=Endian(args.bit_order),
    )
    if args.output is not None:
        if not args.text:
            parser.error("cannot write an image of empty text")
        args.output.write_bytes(encode_png(args.text, spec))
    else:
        sys.stdout.write(data_url(args.text, spec) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())