"""Filler policies for :class:`~ansipad.writer.PaddingWriter`.

Each factory returns a callable that writes exactly one display column into
the sink it is handed.
"""

from __future__ import annotations

import itertools

from .ansi import RESET_SEQUENCE, char_display_width
from .sink import AnsiWriter
from .writer import FillerPolicy


def _single_column(ch: str) -> str:
    if len(ch) != 1 or char_display_width(ch) != 1:
        raise ValueError(f"filler must be one single-column character, got {ch!r}")
    return ch


def char_filler(ch: str) -> FillerPolicy:
    """Fill with a repeated character, e.g. ``"."`` or ``"─"``."""
    encoded = _single_column(ch).encode("utf-8")

    def fill(sink: AnsiWriter) -> None:
        sink.write(encoded)

    return fill


def pattern_filler(pattern: str) -> FillerPolicy:
    """Cycle through ``pattern`` one character per column.

    The position carries over from line to line.
    """
    if not pattern:
        raise ValueError("filler pattern must not be empty")
    cells = itertools.cycle([_single_column(ch).encode("utf-8") for ch in pattern])

    def fill(sink: AnsiWriter) -> None:
        sink.write(next(cells))

    return fill


def styled_filler(ch: str, style: str) -> FillerPolicy:
    """Fill with ``ch`` wrapped in the SGR ``style`` and a trailing reset."""
    cell = style.encode("utf-8") + _single_column(ch).encode("utf-8") + RESET_SEQUENCE

    def fill(sink: AnsiWriter) -> None:
        sink.write(cell)

    return fill
