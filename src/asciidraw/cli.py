import argparse
import sys
from pathlib import Path

from asciidraw.charsets import RAMPS
from asciidraw.errors import AsciiDrawError
from asciidraw.logging_conf import setup_logging
from asciidraw.service import render_upload
from asciidraw.terminal import terminal_columns


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Render an image as coloured ASCII art")
    parser.add_argument("image", help="Path to input image")
    parser.add_argument(
        "-s", "--size", type=int, default=None, help="Output width in columns (default: terminal width)"
    )
    ramp = parser.add_mutually_exclusive_group()
    ramp.add_argument(
        "-r", "--ramp", default="default", choices=sorted(RAMPS), help="Named glyph ramp (default: default)"
    )
    ramp.add_argument("--chars", default=None, help="Custom glyph ramp, ordered darkest first")
    parser.add_argument(
        "--contrast",
        type=float,
        default=None,
        help="Stretch luminance around the midpoint before picking glyphs (1.0 leaves it unchanged)",
    )
    parser.add_argument(
        "--structured",
        action="store_true",
        default=False,
        help="Print tab-separated [glyph, r, g, b] cells instead of ANSI colour",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity")
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    image_path = Path(args.image)
    if not image_path.exists():
        print(f"File not found: {image_path}", file=sys.stderr)
        return 1

    width = args.size if args.size is not None else terminal_columns()
    chars = args.chars if args.chars is not None else RAMPS[args.ramp]

    try:
        data = image_path.read_bytes()
    except OSError as exc:
        print(f"Cannot read {image_path}: {exc.strerror or exc}", file=sys.stderr)
        return 1

    try:
        output = render_upload(
            data,
            width=width,
            is_terminal=not args.structured,
            chars=chars,
            contrast=args.contrast,
        )
    except (AsciiDrawError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
