"""Codepoint measurement and escape-sequence classification.

Escape sequences are recognized only by their boundaries: an ESC introducer
followed by any non-letter bytes and closed by one ASCII letter.
Printable codepoints are measured with East Asian width rules.
"""

from __future__ import annotations

import enum
import re
import unicodedata

ESC = "\x1b"
ESC_BYTE = 0x1B
RESET_SEQUENCE = b"\x1b[0m"

_SGR_RE = re.compile(rb"\x1b\[([0-9;:]*)m\Z")

# Extended-color selectors and the number of arguments after each sub-mode.
_EXTENDED_COLORS = {b"38", b"48", b"58"}
_EXTENDED_ARGS = {b"5": 1, b"2": 3}


class EscapeState(enum.Enum):
    NORMAL = "normal"
    IN_ESCAPE = "in_escape"


def is_sequence_terminator(ch: str) -> bool:
    """Return whether ``ch`` closes an escape sequence (ASCII ``A-Z``/``a-z``)."""
    return ("A" <= ch <= "Z") or ("a" <= ch <= "z")


def is_terminator_byte(byte: int) -> bool:
    """Byte-level twin of :func:`is_sequence_terminator`."""
    return 0x41 <= byte <= 0x5A or 0x61 <= byte <= 0x7A


def is_sgr_reset(sequence: bytes) -> bool:
    """Return whether a complete escape sequence resets all SGR styling.

    True when the last standalone selector is 0 (an empty parameter counts as
    0), so ``ESC[m`` and ``ESC[39;49;00m`` reset while ``ESC[0;31m`` and
    ``ESC[38;5;0m`` do not.
    """
    match = _SGR_RE.match(sequence)
    if match is None:
        return False
    params = match.group(1).split(b";")
    reset = False
    i = 0
    while i < len(params):
        param = params[i]
        if param in _EXTENDED_COLORS and i + 1 < len(params):
            i += 2 + _EXTENDED_ARGS.get(params[i + 1], 0)
            reset = False
            continue
        reset = param == b"" or (param.isdigit() and int(param) == 0)
        i += 1
    return reset


def char_display_width(ch: str) -> int:
    """Return terminal column width (0, 1 or 2) for one codepoint.

    C0/C1 controls, combining marks and invisible format characters consume
    no columns. East Asian wide/fullwidth characters consume two.
    """
    code = ord(ch)
    if code < 0x20 or 0x7F <= code < 0xA0:
        return 0
    if unicodedata.combining(ch):
        return 0
    if unicodedata.category(ch) in {"Mn", "Me", "Cf"}:
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def text_display_width(text: str) -> int:
    """Return the visible width of ``text``, skipping escape sequences.

    Uses the same boundary rules as the padding writer, so an unterminated
    sequence hides everything after it.
    """
    state = EscapeState.NORMAL
    total = 0
    for ch in text:
        if ch == ESC:
            state = EscapeState.IN_ESCAPE
        elif state is EscapeState.IN_ESCAPE:
            if is_sequence_terminator(ch):
                state = EscapeState.NORMAL
        else:
            total += char_display_width(ch)
    return total
