"""
Command line interface for fen2png.

Usage:
    fen2png [options] <fen> <output-file>
    fen2png [options] --from-file=<csv>
    fen2png [options] --markdown=<file> [<output-file>]

Examples:
    fen2png --coordinates "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b" start.png
    fen2png --base64 --grayscale "8/8/8/4k3/8/8/8/4K3" -
    fen2png --size=240 --from-file=diagrams.csv
    fen2png --markdown=chapter.md chapter.out.md

<output-file> may be "-" to write to stdout.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from fen2png.config import DEFAULT_BACKGROUND, DEFAULT_FOREGROUND, DEFAULT_SIZE, RenderOptions, parse_color

PROG = "fen2png"


class UsageError(ValueError):
    """Invalid command line."""


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting on bad input."""

    def error(self, message):
        raise UsageError(message)


def setup_logging(verbose: bool = False):
    """Configure logging. Logs go to stderr since stdout may carry the image."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _color(value: str):
    try:
        return parse_color(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid size {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"size must be positive, got {number}")
    return number


def add_render_arguments(parser: argparse.ArgumentParser):
    """Options that shape the diagram itself."""
    parser.add_argument(
        "--size",
        type=_positive_int,
        default=DEFAULT_SIZE,
        help="Diagram size (height and width) in pixels",
    )
    parser.add_argument(
        "--bg",
        type=_color,
        default=parse_color(DEFAULT_BACKGROUND),
        help="Background color as hexadecimal RRGGBB",
    )
    parser.add_argument(
        "--fg",
        type=_color,
        default=parse_color(DEFAULT_FOREGROUND),
        help="Foreground color as hexadecimal RRGGBB",
    )
    parser.add_argument("--grayscale", action="store_true", help="Output grayscale PNG")
    parser.add_argument("--base64", action="store_true", help="Base64 output")
    parser.add_argument(
        "--coordinates",
        action="store_true",
        help="Add letters and numbers to chessboard",
    )
    parser.add_argument("--flip", action="store_true", help="View the board from Black's side")
    parser.add_argument(
        "--auto-flip",
        action="store_true",
        help="Flip the board when it's black's turn (needs the side-to-move field)",
    )
    parser.add_argument(
        "--turn-indicator",
        action="store_true",
        help="Show black dot in top right when it's black's turn",
    )


def build_parser() -> argparse.ArgumentParser:
    """Full command line parser."""
    parser = _ArgumentParser(
        prog=PROG,
        description="Convert a FEN record to a PNG chess diagram",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    add_render_arguments(parser)
    parser.add_argument(
        "--from-file",
        metavar="CSV",
        default=None,
        help="Parse CSV file of <fen>,<output-file> lines",
    )
    parser.add_argument(
        "--markdown",
        metavar="FILE",
        default=None,
        help="Replace ```fen blocks in a Markdown file with embedded diagrams",
    )
    parser.add_argument("--font", default=None, help="Path to the Merida TrueType font")
    parser.add_argument("--no-progress", action="store_true", help="Hide the batch progress bar")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    parser.add_argument("fen", nargs="?", help="FEN record (only the first field is mandatory)")
    parser.add_argument("output", nargs="?", help='Output file name or "-" for the stdout')
    return parser


def options_from_args(args: argparse.Namespace) -> RenderOptions:
    return RenderOptions(
        size=args.size,
        background=args.bg,
        foreground=args.fg,
        grayscale=args.grayscale,
        coordinates=args.coordinates,
        flip=args.flip,
        auto_flip=args.auto_flip,
        turn_indicator=args.turn_indicator,
        base64=args.base64,
    )


def parse_render_options(flags: List[str]) -> RenderOptions:
    """
    Build RenderOptions from a list of render flags such as ["--flip", "--size=200"].

    Raises:
        UsageError: On an unknown flag or bad value
    """
    parser = _ArgumentParser(prog=PROG, add_help=False)
    add_render_arguments(parser)
    return options_from_args(parser.parse_args(flags))


def run_single(args: argparse.Namespace, options: RenderOptions) -> int:
    from fen2png.pipeline import DiagramRenderer

    if args.fen is None:
        raise UsageError("<fen> is required")
    if args.output is None:
        raise UsageError("<output-file> is required")

    renderer = DiagramRenderer(options, font_path=args.font)
    renderer.render_to(args.fen, args.output)
    return 0


def run_batch(args: argparse.Namespace, options: RenderOptions) -> int:
    from fen2png.data.batch import BatchRenderer, read_batch_file
    from fen2png.pipeline import DiagramRenderer

    records = read_batch_file(Path(args.from_file))
    renderer = DiagramRenderer(options, font_path=args.font)
    report = BatchRenderer(renderer, progress=not args.no_progress).run(records)

    for record, message in report.failed:
        print(f"{PROG}: error: line {record.line}: {message}", file=sys.stderr)
    return 0 if report.ok else 1


def run_markdown(args: argparse.Namespace) -> int:
    from fen2png.data.markdown import MarkdownFilter
    from fen2png.diagram.encoder import write_output

    source = Path(args.markdown)
    if not source.exists():
        raise FileNotFoundError(f"Markdown file not found: {source}")

    # A lone positional is the output file here, not a FEN
    destination = args.output or args.fen or "-"
    text = MarkdownFilter(font_path=args.font).apply(source.read_text(encoding="utf-8"))
    write_output(text.encode("utf-8"), destination)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()

    try:
        args = parser.parse_args(argv)
        setup_logging(args.verbose)
        options = options_from_args(args)

        if args.markdown:
            return run_markdown(args)
        if args.from_file:
            return run_batch(args, options)
        return run_single(args, options)

    except (ValueError, OSError) as e:
        print(f"{PROG}: error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
