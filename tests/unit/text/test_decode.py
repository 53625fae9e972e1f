"""Tests for decoding item display text into styled lines."""

from __future__ import annotations

import unittest

from gitoutline.errors import DisplayDecodeError
from gitoutline.text import Line, Span, Style, decode_display, style_from_sgr


class DecodeDisplayTests(unittest.TestCase):
    def test_empty_text_is_one_empty_line(self) -> None:
        self.assertEqual(decode_display(""), [Line()])

    def test_trailing_newline_does_not_add_a_line(self) -> None:
        lines = decode_display("one\ntwo\n")
        self.assertEqual([line.plain() for line in lines], ["one", "two"])

    def test_inner_blank_lines_are_kept(self) -> None:
        lines = decode_display("one\n\nthree")
        self.assertEqual([line.plain() for line in lines], ["one", "", "three"])

    def test_carriage_returns_are_dropped(self) -> None:
        self.assertEqual(decode_display("dos\r\nline\r\n")[0].plain(), "dos")

    def test_tabs_expand_to_eight_column_stops(self) -> None:
        line = decode_display("ab\tc")[0]
        self.assertEqual(line.plain(), "ab      c")
        self.assertEqual(line.width(), 9)

    def test_sgr_sequences_become_span_styles(self) -> None:
        line = decode_display("\x1b[1;32mok\x1b[0m rest")[0]
        self.assertEqual(
            line.spans,
            (Span("ok", Style(fg="32", bold=True)), Span(" rest", Style())),
        )

    def test_extended_colors_are_parsed(self) -> None:
        line = decode_display("\x1b[38;5;208;48;2;1;2;3mx")[0]
        self.assertEqual(line.spans[0].style, Style(fg="38;5;208", bg="48;2;1;2;3"))

    def test_patch_sits_beneath_embedded_attributes(self) -> None:
        line = decode_display("plain\x1b[31mred", "\x1b[1;34m")[0]
        self.assertEqual(line.spans[0].style, Style(fg="34", bold=True))
        self.assertEqual(line.spans[1].style, Style(fg="31", bold=True))

    def test_style_state_carries_across_lines(self) -> None:
        lines = decode_display("\x1b[33mfirst\nsecond\x1b[39m")
        self.assertEqual(lines[1].spans[0].style.fg, "33")

    def test_non_sgr_escape_raises(self) -> None:
        with self.assertRaises(DisplayDecodeError):
            decode_display("title \x1b]0;x\x07")
        with self.assertRaises(DisplayDecodeError):
            decode_display("move \x1b[2J")

    def test_malformed_extended_color_raises(self) -> None:
        with self.assertRaises(DisplayDecodeError):
            decode_display("\x1b[38;5mx")
        with self.assertRaises(DisplayDecodeError):
            decode_display("\x1b[48;2;1;2mx")

    def test_decode_error_is_a_value_error(self) -> None:
        with self.assertRaises(ValueError):
            decode_display("\x1bZ")

    def test_wide_characters_count_two_columns(self) -> None:
        self.assertEqual(decode_display("日本")[0].width(), 4)


class StyleTests(unittest.TestCase):
    def test_patch_overrides_only_set_attributes(self) -> None:
        base = Style(fg="31", bold=True)
        self.assertEqual(base.patch(Style(bg="44")), Style(fg="31", bg="44", bold=True))
        self.assertEqual(base.patch(Style(bold=False)), Style(fg="31", bold=False))
        self.assertIs(base.patch(Style()), base)

    def test_style_from_sgr_handles_concatenated_sequences(self) -> None:
        self.assertEqual(style_from_sgr("\x1b[1m\x1b[38;5;81m"), Style(fg="38;5;81", bold=True))
        self.assertEqual(style_from_sgr(""), Style())
        self.assertTrue(style_from_sgr("").is_empty)

    def test_style_from_sgr_rejects_other_text(self) -> None:
        with self.assertRaises(DisplayDecodeError):
            style_from_sgr("red")

    def test_reset_codes_clear_modifiers(self) -> None:
        style = style_from_sgr("\x1b[1;2;3;4;7m\x1b[22;23;24;27m")
        self.assertEqual(style, Style(bold=False, dim=False, italic=False, underline=False, reverse=False))

    def test_to_sgr_starts_with_reset(self) -> None:
        self.assertEqual(Style(fg="31", bg="48;5;238", bold=True).to_sgr(), "\x1b[0;1;31;48;5;238m")
        self.assertEqual(Style().to_sgr(), "\x1b[0m")


if __name__ == "__main__":
    unittest.main()
