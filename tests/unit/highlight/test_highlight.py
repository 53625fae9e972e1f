"""Tests for diff colorizing and control-byte sanitizing."""

from __future__ import annotations

import unittest

from gitoutline.ansi import strip_ansi
from gitoutline.highlight import colorize_diff, sanitize_terminal_text
from gitoutline.text import decode_display

HUNK = '@@ -1 +1 @@\n-print("a")\n+print("b")'


class HighlightTests(unittest.TestCase):
    def test_sanitize_escapes_control_bytes(self) -> None:
        self.assertEqual(sanitize_terminal_text("a\x1b[2Jb\x07"), "a\\x1b[2Jb\\x07")
        self.assertEqual(sanitize_terminal_text("tab\tnew\nline"), "tab\tnew\nline")

    def test_colorized_hunk_keeps_text_and_decodes(self) -> None:
        colored = colorize_diff(HUNK)
        self.assertIn("\x1b[", colored)
        self.assertEqual(strip_ansi(colored), HUNK)
        lines = decode_display(colored)
        self.assertEqual([line.plain() for line in lines], HUNK.split("\n"))

    def test_no_color_only_sanitizes(self) -> None:
        self.assertEqual(colorize_diff("+x\x1b]0;t\x07", no_color=True), "+x\\x1b]0;t\\x07")

    def test_unknown_style_falls_back(self) -> None:
        self.assertEqual(strip_ansi(colorize_diff(HUNK, "no-such-style")), HUNK)


if __name__ == "__main__":
    unittest.main()
