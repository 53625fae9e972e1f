"""Tests for cursor movement and scroll fitting on ``Screen``.

Covers selectable-item skipping, saturation at both ends, and fit-start /
fit-end behavior with single- and multi-line items.
"""

from __future__ import annotations

import unittest

from gitoutline.items import Item, blank_line
from gitoutline.screen import Screen


def _item(n: int, depth: int = 0, **kwargs) -> Item:
    return Item(id=n, display=kwargs.pop("display", f"item {n}"), depth=depth, **kwargs)


def _screen(items: list[Item], height: int = 10, width: int = 40) -> Screen:
    return Screen((width, height), lambda: items)


class ScreenCursorTests(unittest.TestCase):
    def test_initial_cursor_skips_leading_unselectable_items(self) -> None:
        screen = _screen([blank_line(), _item(1), _item(2)])
        self.assertEqual(screen.cursor, 1)

    def test_select_next_skips_unselectable_items(self) -> None:
        screen = _screen([_item(0), blank_line(), _item(2)])
        screen.select_next()
        self.assertEqual(screen.cursor, 2)
        self.assertEqual(screen.get_selected_item().id, 2)

    def test_next_then_previous_returns_to_original_index(self) -> None:
        items = [_item(0), _item(1), blank_line(), _item(3), _item(4)]
        screen = _screen(items)
        screen.select_next()
        self.assertEqual(screen.cursor, 1)
        screen.select_next()
        self.assertEqual(screen.cursor, 3)
        screen.select_next()
        screen.select_previous()
        self.assertEqual(screen.cursor, 3)
        screen.select_previous()
        screen.select_next()
        self.assertEqual(screen.cursor, 3)

    def test_select_next_saturates_at_last_selectable_item(self) -> None:
        screen = _screen([_item(0), _item(1), blank_line()])
        for _ in range(5):
            screen.select_next()
        self.assertEqual(screen.cursor, 1)
        screen.select_next()
        self.assertEqual(screen.cursor, 1)

    def test_select_previous_saturates_at_first_selectable_item(self) -> None:
        screen = _screen([blank_line(), _item(1), _item(2)])
        screen.select_previous()
        screen.select_previous()
        self.assertEqual(screen.cursor, 1)

    def test_navigation_on_empty_screen_is_a_no_op(self) -> None:
        screen = _screen([])
        screen.select_next()
        screen.select_previous()
        screen.toggle_section()
        screen.scroll_half_page_down()
        self.assertIsNone(screen.get_selected_item())
        self.assertEqual(screen.scroll, 0)
        self.assertEqual(screen.ui_lines, [])


class ScreenScrollTests(unittest.TestCase):
    def test_moving_to_last_of_ten_items_in_three_rows_scrolls_to_seven(self) -> None:
        screen = _screen([_item(n) for n in range(10)], height=3)
        for _ in range(9):
            screen.select_next()
        self.assertEqual(screen.cursor, 9)
        self.assertEqual(screen.scroll, 7)

    def test_multi_line_item_counts_all_of_its_lines_when_fitting(self) -> None:
        items = [_item(0, display="a1\na2\na3"), _item(1), _item(2)]
        screen = _screen(items, height=3)
        self.assertEqual(len(screen.ui_lines), 5)
        self.assertEqual([line.item_index for line in screen.ui_lines], [0, 0, 0, 1, 2])

        screen.select_next()
        self.assertEqual(screen.cursor, 1)
        self.assertEqual(screen.scroll, 1)

    def test_select_previous_scrolls_up_to_show_cursor(self) -> None:
        screen = _screen([_item(n) for n in range(10)], height=3)
        for _ in range(9):
            screen.select_next()
        for _ in range(8):
            screen.select_previous()
        self.assertEqual(screen.cursor, 1)
        self.assertEqual(screen.scroll, 1)

    def test_fit_start_brings_parent_of_first_child_into_view(self) -> None:
        items = [_item(0), _item(1), _item(2), _item(3, section=True), _item(4, depth=1), _item(5, depth=1)]
        screen = _screen(items, height=2)
        for _ in range(5):
            screen.select_next()
        self.assertEqual(screen.cursor, 5)
        screen.select_previous()
        self.assertEqual(screen.cursor, 4)
        # The section header directly above the first child is scrolled in too.
        self.assertEqual(screen.scroll, 3)

    def test_fit_end_keeps_selected_subtree_visible(self) -> None:
        items = [_item(0), _item(1, section=True), _item(2, depth=1), _item(3, depth=1), _item(4)]
        screen = _screen(items, height=3)
        screen.select_next()
        self.assertEqual(screen.cursor, 1)
        # Item 1 plus its two children end at line 4.
        self.assertEqual(screen.scroll, 1)

    def test_half_page_scrolling_clamps_to_total_lines(self) -> None:
        screen = _screen([_item(n) for n in range(12)], height=10)
        screen.scroll_half_page_down()
        self.assertEqual(screen.scroll, 5)
        screen.scroll_half_page_down()
        screen.scroll_half_page_down()
        self.assertEqual(screen.scroll, 12)
        screen.scroll_half_page_up()
        self.assertEqual(screen.scroll, 7)
        for _ in range(3):
            screen.scroll_half_page_up()
        self.assertEqual(screen.scroll, 0)

    def test_half_page_scrolling_leaves_cursor_alone(self) -> None:
        screen = _screen([_item(n) for n in range(30)], height=10)
        screen.scroll_half_page_down()
        self.assertEqual(screen.cursor, 0)

    def test_set_size_reclamps_scroll(self) -> None:
        screen = _screen([_item(n) for n in range(4)], height=2)
        screen.scroll = 50
        screen.set_size((40, 2))
        self.assertEqual(screen.scroll, 4)


if __name__ == "__main__":
    unittest.main()
