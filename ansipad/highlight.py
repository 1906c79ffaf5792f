"""Source loading and Pygments syntax highlighting for the CLI.

Highlighted output is ordinary SGR-styled text, which is exactly what the
padding writer is built to measure around.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pygments import highlight as pygments_highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexer import Lexer
from pygments.lexers import TextLexer, get_lexer_for_filename, guess_lexer
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

logger = logging.getLogger(__name__)

DEFAULT_STYLE = "monokai"

# Keep line structure intact so padding sees the caller's newlines.
_LEXER_OPTIONS = {"stripnl": False, "ensurenl": False}

_FORMATTERS: dict[str, Terminal256Formatter] = {}
_VALID_STYLES: set[str] = set()
_INVALID_STYLES: set[str] = set()


def read_text(path: Path) -> str:
    for encoding in ("utf-8", "utf-8-sig", "latin-1"):
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    return path.read_bytes().decode("utf-8", errors="replace")


def normalize_style(style: str) -> str:
    """Return ``style`` if Pygments knows it, else :data:`DEFAULT_STYLE`."""
    if style in _VALID_STYLES:
        return style
    if style in _INVALID_STYLES:
        return DEFAULT_STYLE

    try:
        get_style_by_name(style)
    except ClassNotFound:
        logger.debug("unknown pygments style %r, using %s", style, DEFAULT_STYLE)
        _INVALID_STYLES.add(style)
        return DEFAULT_STYLE
    _VALID_STYLES.add(style)
    return style


def _formatter_for_style(style: str) -> Terminal256Formatter:
    formatter = _FORMATTERS.get(style)
    if formatter is not None:
        return formatter
    formatter = Terminal256Formatter(style=style)
    _FORMATTERS[style] = formatter
    return formatter


def lexer_for(source: str, path: Path | None) -> Lexer:
    """Pick a lexer by filename, then by content, then plain text."""
    if path is not None:
        try:
            return get_lexer_for_filename(path.name, source, **_LEXER_OPTIONS)
        except ClassNotFound:
            pass
    try:
        return guess_lexer(source, **_LEXER_OPTIONS)
    except ClassNotFound:
        logger.debug("no lexer found for %s, rendering as plain text", path or "<stdin>")
        return TextLexer(**_LEXER_OPTIONS)


def colorize_source(source: str, path: Path | None = None, style: str = DEFAULT_STYLE) -> str:
    formatter = _formatter_for_style(normalize_style(style))
    return pygments_highlight(source, lexer_for(source, path), formatter)
