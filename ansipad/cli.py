"""Command-line front door for ansipad.

Streams files (or stdin) through a piped padding writer into stdout, with
optional Pygments highlighting so styled output lines up in columns.
"""

from __future__ import annotations

import argparse
import logging
import os
import shutil
import sys
from pathlib import Path
from typing import BinaryIO

from . import config
from .fillers import char_filler
from .highlight import DEFAULT_STYLE, colorize_source, read_text
from .writer import PaddingWriter

CHUNK_SIZE = 64 * 1024
STDIN_PATH = "-"


def _nonnegative_int(value: str) -> int:
    """argparse type for widths (``0`` disables padding)."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def _default_width() -> int:
    """Resolve pad width from config, falling back to the terminal size."""
    configured = config.load_default_width()
    if configured is not None:
        return configured
    term = shutil.get_terminal_size((80, 24))
    return max(1, term.columns)


def pad_stream(source: BinaryIO, writer: PaddingWriter, chunk_size: int = CHUNK_SIZE) -> None:
    """Copy ``source`` into ``writer`` chunk by chunk."""
    while True:
        chunk = source.read(chunk_size)
        if not chunk:
            return
        writer.write(chunk)


def _write_input(name: str, writer: PaddingWriter, highlight: bool, style: str) -> None:
    if name == STDIN_PATH:
        if highlight:
            writer.write(colorize_source(sys.stdin.read(), None, style).encode("utf-8"))
        else:
            pad_stream(sys.stdin.buffer, writer)
        return

    path = Path(name)
    if highlight:
        writer.write(colorize_source(read_text(path), path, style).encode("utf-8"))
        return
    with path.open("rb") as handle:
        pad_stream(handle, writer)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ansipad",
        description="Right-pad every line to a fixed display width, ignoring ANSI styling.",
    )
    parser.add_argument("paths", nargs="*", metavar="PATH", help="Files to pad. Defaults to stdin ('-').")
    parser.add_argument(
        "-w",
        "--width",
        type=_nonnegative_int,
        default=None,
        help="Target column width, 0 disables padding (default: config, else terminal width).",
    )
    parser.add_argument("--fill", default=None, help="Single-column fill character (default: space).")
    parser.add_argument("--highlight", action="store_true", help="Syntax-highlight input with Pygments first.")
    parser.add_argument("--style", default=None, help=f"Pygments style name (default: {DEFAULT_STYLE}).")
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Persist the given --width/--fill/--style as defaults.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and pad the requested inputs to stdout."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
    )

    if args.fill is not None and not config.is_valid_fill_char(args.fill):
        raise SystemExit(f"Invalid fill character: {args.fill!r} (need one single-column character)")

    if args.save_defaults:
        if args.width is not None:
            config.save_default_width(args.width)
        if args.fill is not None:
            config.save_fill_char(args.fill)
        if args.style is not None:
            config.save_style_name(args.style)

    width = args.width if args.width is not None else _default_width()
    fill = args.fill if args.fill is not None else config.load_fill_char()
    style = args.style or config.load_style_name() or DEFAULT_STYLE

    names = args.paths or [STDIN_PATH]
    for name in names:
        if name != STDIN_PATH and not Path(name).is_file():
            raise SystemExit(f"Path not found: {name}")

    filler = char_filler(fill) if fill is not None and fill != " " else None
    out = sys.stdout.buffer
    writer = PaddingWriter.pipe(out, width, filler)
    try:
        for name in names:
            _write_input(name, writer, args.highlight, style)
        writer.close()
        out.flush()
    except BrokenPipeError:
        # Downstream closed early (e.g. ``| head``); silence the interpreter's exit flush.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        raise SystemExit(1) from None


if __name__ == "__main__":
    main()
