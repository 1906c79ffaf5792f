"""Tests for Pygments highlighting used ahead of padding."""

import re
import tempfile
import unittest
from pathlib import Path

from ansipad.highlight import DEFAULT_STYLE, colorize_source, normalize_style, read_text

ANSI_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


class HighlightTests(unittest.TestCase):
    def test_python_source_is_colored_without_changing_visible_text(self) -> None:
        source = "def f():\n    return 1\n"
        rendered = colorize_source(source, Path("example.py"))
        self.assertIn("\x1b[", rendered)
        self.assertEqual(ANSI_RE.sub("", rendered), source)

    def test_missing_trailing_newline_is_not_added(self) -> None:
        rendered = colorize_source("x = 1", Path("example.py"))
        self.assertFalse(ANSI_RE.sub("", rendered).endswith("\n"))

    def test_style_name_changes_rendered_colors(self) -> None:
        source = "def f():\n    return \"s\"\n"
        monokai = colorize_source(source, Path("example.py"), "monokai")
        default = colorize_source(source, Path("example.py"), "default")
        self.assertNotEqual(monokai, default)
        self.assertEqual(ANSI_RE.sub("", monokai), ANSI_RE.sub("", default))

    def test_unknown_style_falls_back_to_default(self) -> None:
        self.assertEqual(normalize_style("definitely-not-a-style"), DEFAULT_STYLE)
        self.assertEqual(normalize_style("monokai"), "monokai")

    def test_read_text_falls_back_to_latin1(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "legacy.txt"
            path.write_bytes(b"caf\xe9\n")
            self.assertEqual(read_text(path), "caf\xe9\n")


if __name__ == "__main__":
    unittest.main()
