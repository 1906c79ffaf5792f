"""Escape-sequence-aware output sink.

Forwards bytes to any object with ``write(bytes)`` while remembering which
SGR styling is active, so callers can close it before injecting filler.
"""

from __future__ import annotations

from typing import Protocol

from .ansi import ESC_BYTE, RESET_SEQUENCE, is_sgr_reset, is_terminator_byte


class ByteSink(Protocol):
    def write(self, data: bytes, /) -> object: ...


class AnsiWriter:
    """Pass-through writer that tracks escape sequences on their way to ``forward``.

    Plain bytes are forwarded as they arrive. An escape sequence is held until
    its terminating letter shows up and is then forwarded as one unit. SGR
    sequences are accumulated into :attr:`last_sequence` until a full reset
    clears them.
    """

    def __init__(self, forward: ByteSink) -> None:
        self.forward = forward
        self._in_sequence = False
        self._sequence = bytearray()
        self._last_sequence = bytearray()
        self._sequence_changed = False

    @property
    def last_sequence(self) -> bytes:
        return bytes(self._last_sequence)

    @property
    def style_changed(self) -> bool:
        return self._sequence_changed

    def write(self, data: bytes) -> int:
        plain = bytearray()
        for byte in data:
            if byte == ESC_BYTE:
                if plain:
                    self.forward.write(bytes(plain))
                    plain.clear()
                # A new introducer abandons the held sequence; pass it through as-is.
                self.flush()
                self._in_sequence = True
                self._sequence_changed = True
                self._sequence.append(byte)
            elif self._in_sequence:
                self._sequence.append(byte)
                if is_terminator_byte(byte):
                    self._finish_sequence()
            else:
                plain.append(byte)
        if plain:
            self.forward.write(bytes(plain))
        return len(data)

    def _finish_sequence(self) -> None:
        sequence = bytes(self._sequence)
        self._sequence.clear()
        self._in_sequence = False
        if is_sgr_reset(sequence):
            self._last_sequence.clear()
            self._sequence_changed = False
        elif sequence.endswith(b"m"):
            self._last_sequence.extend(sequence)
        self.forward.write(sequence)

    def reset_ansi(self) -> None:
        """Emit a full SGR reset if styling changed since the last one seen."""
        if not self._sequence_changed:
            return
        self.forward.write(RESET_SEQUENCE)

    def restore_ansi(self) -> None:
        """Re-emit the remembered SGR styling."""
        if self._last_sequence:
            self.forward.write(bytes(self._last_sequence))

    def flush(self) -> None:
        """Forward a pending unterminated sequence verbatim and leave escape mode."""
        pending = bytes(self._sequence)
        self._sequence.clear()
        self._in_sequence = False
        if pending:
            self.forward.write(pending)

    def reset(self) -> None:
        self._in_sequence = False
        self._sequence.clear()
        self._last_sequence.clear()
        self._sequence_changed = False
