"""Streaming writer that right-pads every line to a fixed display width.

Input bytes are decoded incrementally, classified as escape-sequence or
printable content, and forwarded to an :class:`~ansipad.sink.AnsiWriter`.
Only printable codepoints count toward the running line width; at each line
feed the shortfall is filled before the newline is forwarded.
"""

from __future__ import annotations

import codecs
import io
import logging
from typing import Callable

from .ansi import ESC, EscapeState, char_display_width, is_sequence_terminator
from .sink import AnsiWriter, ByteSink

logger = logging.getLogger(__name__)

FillerPolicy = Callable[[AnsiWriter], None]


def _new_decoder() -> codecs.IncrementalDecoder:
    return codecs.getincrementaldecoder("utf-8")(errors="replace")


def _check_width(width: int) -> int:
    if isinstance(width, bool) or not isinstance(width, int):
        raise TypeError(f"width must be an int, got {type(width).__name__}")
    if width < 0:
        raise ValueError("width must be >= 0")
    return width


class PaddingWriter:
    """Pad each line written through it to ``width`` visible columns.

    ``filler`` is called once per missing column with the sink as its only
    argument and must emit exactly one column of content. When omitted, the
    shortfall is written as plain spaces. Width ``0`` disables padding.

    A writer built with ``forward`` streams straight into that object;
    otherwise output accumulates internally and is available from
    :meth:`getvalue` after :meth:`flush`. Lines longer than ``width`` are
    never truncated.

    Instances are not thread-safe.
    """

    def __init__(
        self,
        width: int,
        filler: FillerPolicy | None = None,
        *,
        forward: ByteSink | None = None,
    ) -> None:
        self.width = _check_width(width)
        self.filler = filler
        self._buffer: io.BytesIO | None = io.BytesIO() if forward is None else None
        self._sink = AnsiWriter(self._buffer if forward is None else forward)
        self._cache = b""
        self._decoder = _new_decoder()
        self._line_width = 0
        self._state = EscapeState.NORMAL

    @classmethod
    def pipe(cls, forward: ByteSink, width: int, filler: FillerPolicy | None = None) -> PaddingWriter:
        """Build a writer that forwards padded output directly to ``forward``."""
        return cls(width, filler, forward=forward)

    @property
    def line_width(self) -> int:
        """Visible width accumulated on the current line."""
        return self._line_width

    @property
    def in_escape(self) -> bool:
        return self._state is EscapeState.IN_ESCAPE

    def write(self, data: bytes) -> int:
        """Accept ``data`` and return the number of bytes consumed.

        Exceptions raised by the downstream sink propagate unchanged; the
        writer should be discarded afterwards.
        """
        raw = bytes(data)
        self._consume(self._decoder.decode(raw))
        return len(raw)

    def _consume(self, text: str) -> None:
        pending: list[str] = []
        for ch in text:
            if ch == ESC:
                self._state = EscapeState.IN_ESCAPE
            elif self._state is EscapeState.IN_ESCAPE:
                if is_sequence_terminator(ch):
                    self._state = EscapeState.NORMAL
            else:
                self._line_width += char_display_width(ch)
                if ch == "\n":
                    self._forward(pending)
                    if self.width:
                        self._pad()
                        self._sink.reset_ansi()
                    self._line_width = 0
            pending.append(ch)
        self._forward(pending)

    def _forward(self, pending: list[str]) -> None:
        if pending:
            self._sink.write("".join(pending).encode("utf-8"))
            pending.clear()

    def _pad(self) -> None:
        if self.width == 0 or self._line_width >= self.width:
            return
        shortfall = self.width - self._line_width
        if self.filler is None:
            self._sink.write(b" " * shortfall)
            return
        for _ in range(shortfall):
            self.filler(self._sink)

    def flush(self) -> None:
        """Finish the padding operation.

        A pending unterminated line is padded without adding a line break.
        Accumulated output moves into the result cache and transient state is
        cleared. Always call this before reading the result.
        """
        self._consume(self._decoder.decode(b"", final=True))
        if self._state is EscapeState.IN_ESCAPE:
            logger.warning(
                "stream ended inside an unterminated escape sequence; "
                "text after the introducer was not counted toward line width"
            )
        self._sink.flush()
        if self._line_width != 0:
            self._pad()

        if self._buffer is not None:
            self._cache = self._buffer.getvalue()
            self._buffer.seek(0)
            self._buffer.truncate()
        self._line_width = 0
        self._state = EscapeState.NORMAL

    def close(self) -> None:
        self.flush()

    def reset(self, width: int, filler: FillerPolicy | None = None) -> None:
        """Clear all output and state and reconfigure for a new stream."""
        self.width = _check_width(width)
        self.filler = filler
        if self._buffer is not None:
            self._buffer.seek(0)
            self._buffer.truncate()
        self._cache = b""
        self._decoder.reset()
        self._sink.reset()
        self._line_width = 0
        self._state = EscapeState.NORMAL

    def getvalue(self) -> bytes:
        """Return the padded result collected by the last :meth:`flush`."""
        return self._cache

    def gettext(self) -> str:
        return self._cache.decode("utf-8", errors="replace")

    def __bytes__(self) -> bytes:
        return self.getvalue()

    def __str__(self) -> str:
        return self.gettext()

    def __enter__(self) -> PaddingWriter:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.close()
