"""Reusable writer pool and one-shot padding helpers."""

from __future__ import annotations

import contextlib
import threading
from collections.abc import Iterator

from .writer import PaddingWriter

DEFAULT_MAX_IDLE = 16


class WriterPool:
    """Thread-safe freelist of buffer-owning :class:`PaddingWriter` objects.

    Acquired writers are reset and configured with the default space filler.
    Each checked-out writer belongs to one caller until it is released.
    """

    def __init__(self, max_idle: int = DEFAULT_MAX_IDLE) -> None:
        self.max_idle = max(0, max_idle)
        self._idle: list[PaddingWriter] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._idle)

    def acquire(self, width: int) -> PaddingWriter:
        with self._lock:
            writer = self._idle.pop() if self._idle else None
        if writer is None:
            return PaddingWriter(width)
        writer.reset(width)
        return writer

    def release(self, writer: PaddingWriter) -> None:
        with self._lock:
            if len(self._idle) < self.max_idle:
                self._idle.append(writer)

    @contextlib.contextmanager
    def writer(self, width: int) -> Iterator[PaddingWriter]:
        writer = self.acquire(width)
        try:
            yield writer
        finally:
            self.release(writer)


_POOL = WriterPool()


def pad_bytes(data: bytes, width: int) -> bytes:
    """Pad every line of ``data`` to ``width`` columns with spaces."""
    with _POOL.writer(width) as writer:
        writer.write(data)
        writer.flush()
        return writer.getvalue()


def pad_text(text: str, width: int) -> str:
    """String counterpart of :func:`pad_bytes`."""
    return pad_bytes(text.encode("utf-8"), width).decode("utf-8")
