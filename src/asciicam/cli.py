import argparse
import logging
import sys
from pathlib import Path

from asciicam.charsets import DEFAULT_PALETTE, PALETTES
from asciicam.export import to_ansi, write_export
from asciicam.frame import FrameBuffer
from asciicam.logging_config import setup_logging
from asciicam.planner import CHAR_ASPECT, DEFAULT_SIZE_CLASS, SIZE_CLASSES
from asciicam.session import LiveSession, SessionConfig

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render camera frames as aspect-correct ASCII art")
    parser.add_argument("images", nargs="+", help="Frame image(s); several are treated as a sequence")
    parser.add_argument(
        "-r",
        "--resolution",
        default=DEFAULT_SIZE_CLASS,
        choices=list(SIZE_CLASSES),
        help=f"Output size class (default: {DEFAULT_SIZE_CLASS})",
    )
    parser.add_argument(
        "-p", "--palette", default=DEFAULT_PALETTE, choices=list(PALETTES), help="Glyph palette (default: detailed)"
    )
    parser.add_argument(
        "-a",
        "--char-aspect",
        type=float,
        default=CHAR_ASPECT,
        help="Glyph cell height:width ratio used by native sizing (default: 2.0)",
    )
    parser.add_argument("-c", "--colour", action="store_true", default=False, help="Enable truecolor ANSI output")
    parser.add_argument("-o", "--output", default=None, help="Export the last frame (.txt, .png or .html)")
    parser.add_argument(
        "-t", "--trailing-newline", action="store_true", default=False, help="Terminate the last printed row with a newline"
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Log progress to stderr (-vv for debug)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging([logging.WARNING, logging.INFO, logging.DEBUG][min(args.verbose, 2)])

    paths = [Path(p) for p in args.images]
    missing = [p for p in paths if not p.exists()]
    if missing:
        print(f"File not found: {missing[0]}", file=sys.stderr)
        sys.exit(1)

    session = LiveSession(
        SessionConfig(
            size_class=args.resolution,
            palette=args.palette,
            char_aspect=args.char_aspect,
            colour=args.colour,
        )
    )
    for path in paths:
        grid = session.submit(FrameBuffer.from_image(path))
        if grid is None or grid.is_empty:
            logger.warning("Skipped frame %s", path)
            continue
        text = to_ansi(grid) if args.colour else grid.to_text(trailing_newline=args.trailing_newline)
        print(text, end="" if args.trailing_newline and not args.colour else "\n")
    logger.info("Rendered %(frames)d frame(s), %(dropped)d dropped", session.stats())

    if args.output:
        capture = session.capture()
        if capture is None:
            print("No frame to export", file=sys.stderr)
            return 1
        write_export(capture.grid, args.output)
    return 0
