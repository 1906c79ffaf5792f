"""Public package surface for ansipad.

Pads each line of a byte stream to a fixed display width while leaving ANSI
escape sequences untouched and uncounted.
"""

from __future__ import annotations

from .ansi import char_display_width, text_display_width
from .fillers import char_filler, pattern_filler, styled_filler
from .pool import WriterPool, pad_bytes, pad_text
from .sink import AnsiWriter
from .writer import FillerPolicy, PaddingWriter


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "AnsiWriter",
    "FillerPolicy",
    "PaddingWriter",
    "WriterPool",
    "char_display_width",
    "char_filler",
    "main",
    "pad_bytes",
    "pad_text",
    "pattern_filler",
    "styled_filler",
    "text_display_width",
]
