"""Tests for one-shot helpers and the writer reuse pool."""

from __future__ import annotations

import unittest
from concurrent.futures import ThreadPoolExecutor

from ansipad.pool import WriterPool, pad_bytes, pad_text


class OneShotHelperTests(unittest.TestCase):
    def test_pad_bytes_pads_lines_and_trailing_partial_line(self) -> None:
        self.assertEqual(pad_bytes(b"hi\nab", 4), b"hi  \nab  ")

    def test_pad_text_handles_styles_and_wide_characters(self) -> None:
        self.assertEqual(pad_text("\x1b[31mhi\x1b[0m\n", 5), "\x1b[31mhi\x1b[0m   \n")
        self.assertEqual(pad_text("日本", 5), "日本 ")

    def test_zero_width_returns_input(self) -> None:
        self.assertEqual(pad_text("anything\x1b[2m\n", 0), "anything\x1b[2m\n")

    def test_concurrent_callers_get_independent_results(self) -> None:
        inputs = [f"row{i}\n" * 3 for i in range(40)]
        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(lambda text: pad_text(text, 12), inputs))
        for text, result in zip(inputs, results):
            expected = "".join(line.ljust(12) + "\n" for line in text.splitlines())
            self.assertEqual(result, expected)


class WriterPoolTests(unittest.TestCase):
    def test_released_writer_is_reused_with_clean_state(self) -> None:
        pool = WriterPool()
        writer = pool.acquire(5)
        writer.write(b"\x1b[31mleft open")
        pool.release(writer)
        self.assertEqual(len(pool), 1)

        again = pool.acquire(4)
        self.assertIs(again, writer)
        self.assertEqual(again.width, 4)
        again.write(b"ab\n")
        again.flush()
        self.assertEqual(again.getvalue(), b"ab  \n")

    def test_idle_writers_beyond_limit_are_dropped(self) -> None:
        pool = WriterPool(max_idle=1)
        first = pool.acquire(1)
        second = pool.acquire(1)
        pool.release(first)
        pool.release(second)
        self.assertEqual(len(pool), 1)

    def test_context_manager_returns_writer_to_pool(self) -> None:
        pool = WriterPool()
        with pool.writer(3) as writer:
            writer.write(b"a")
            writer.flush()
            self.assertEqual(writer.getvalue(), b"a  ")
        self.assertEqual(len(pool), 1)


if __name__ == "__main__":
    unittest.main()
