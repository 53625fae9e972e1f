"""Repository text shown by screen providers is escaped before decoding."""

from __future__ import annotations

import unittest
from pathlib import Path
from unittest import mock

from gitoutline.git.diff import FileDiff, Hunk
from gitoutline.git.history import CommitDetails, CommitEntry, StashEntry
from gitoutline.git.refs import HeadState, RefEntry
from gitoutline.git.status import BranchStatus, StatusRecord, WorkingTreeStatus
from gitoutline.screen import Screen
from gitoutline.screens import ScreenStyle, ShowRefsScreenData, ShowScreenData, StatusScreenData
from gitoutline.screens.common import display_field
from gitoutline.ui_theme import PLAIN_THEME

ROOT = Path("/tmp/gitoutline-test-repo")
PLAIN = ScreenStyle(theme=PLAIN_THEME, no_color=True)
TITLE_SEQUENCE = "title \x1b]0;pwned\x07 here"


def _displays(screen: Screen) -> list[str]:
    return [item.display for item in screen.items]


class DisplayFieldTests(unittest.TestCase):
    def test_controls_are_escaped(self) -> None:
        self.assertEqual(display_field(TITLE_SEQUENCE), "title \\x1b]0;pwned\\x07 here")
        self.assertEqual(display_field("red \x1b[31mtext"), "red \\x1b[31mtext")
        self.assertEqual(display_field("two\nlines\r"), "two\\nlines\\r")
        self.assertEqual(display_field("plain name.txt"), "plain name.txt")


class StatusProviderTextTests(unittest.TestCase):
    def _screen(self) -> Screen:
        status = WorkingTreeStatus(
            branch=BranchStatus(head="feat\x1b[2J", upstream="origin/feat\x07"),
            records=[StatusRecord("?", "?", "evil\x1b(Bname")],
        )
        modified = FileDiff(
            old_path="bell\x07.txt",
            new_path="bell\x07.txt",
            hunks=[Hunk("@@ -1 +1 @@", "-a\n+b", 1, 1, 1, 1)],
        )
        with (
            mock.patch("gitoutline.screens.status.read_status", return_value=status),
            mock.patch("gitoutline.screens.status.read_diff", side_effect=[[modified], []]),
            mock.patch(
                "gitoutline.screens.status.read_stashes",
                return_value=[StashEntry(0, "aaa", "On main: \x1b[31mred")],
            ),
            mock.patch(
                "gitoutline.screens.status.read_log",
                return_value=[CommitEntry("abc123", "abc123", "tag: \x1b]8;;x\x07", TITLE_SEQUENCE)],
            ),
        ):
            return Screen((80, 20), StatusScreenData(ROOT, PLAIN))

    def test_escape_bytes_in_repository_text_are_shown_escaped(self) -> None:
        displays = _displays(self._screen())
        self.assertEqual(displays[0], "On branch feat\\x1b[2J")
        self.assertEqual(displays[1], "Your branch is up to date with 'origin/feat\\x07'.")
        self.assertIn("evil\\x1b(Bname", displays)
        self.assertIn("modified   bell\\x07.txt", displays)
        self.assertIn("stash@{0} On main: \\x1b[31mred", displays)
        self.assertIn("abc123 (tag: \\x1b]8;;x\\x07) title \\x1b]0;pwned\\x07 here", displays)
        self.assertFalse(any("\x1b" in display or "\x07" in display for display in displays))

    def test_escaped_text_renders_without_restyling(self) -> None:
        screen = self._screen()
        untracked = next(line for line in screen.ui_lines if "evil" in line.line.plain())
        self.assertEqual(untracked.line.plain(), "evil\\x1b(Bname")


class ShowProviderTextTests(unittest.TestCase):
    def test_commit_message_keeps_lines_but_escapes_controls(self) -> None:
        details = CommitDetails(
            oid="abc123",
            header_lines=["commit abc123", "Author: A <a@example.com>", "", f"    {TITLE_SEQUENCE}", "    body\x0cpage"],
        )
        with mock.patch("gitoutline.screens.show.read_commit", return_value=details):
            screen = Screen((80, 20), ShowScreenData(ROOT, "HEAD", PLAIN))
        self.assertEqual(
            screen.items[0].display,
            "commit abc123\nAuthor: A <a@example.com>\n\n    title \\x1b]0;pwned\\x07 here\n    body\\x0cpage",
        )
        self.assertEqual(len([line for line in screen.ui_lines if line.item_index == 0]), 5)


class RefsProviderTextTests(unittest.TestCase):
    def test_ref_and_remote_names_are_escaped(self) -> None:
        refs = [
            RefEntry("refs/heads/main", "main", "branch", "aaa", is_head=True),
            RefEntry("refs/remotes/or\x07igin/x", "or\x07igin/x", "remote", "bbb", remote="or\x07igin"),
        ]
        with (
            mock.patch("gitoutline.screens.show_refs.read_head_state", return_value=HeadState("aaa", False)),
            mock.patch("gitoutline.screens.show_refs.read_refs", return_value=refs),
        ):
            screen = Screen((80, 20), ShowRefsScreenData(ROOT, PLAIN))
        self.assertEqual(
            _displays(screen),
            ["Branches", "* main", "", "Remote or\\x07igin", "  or\\x07igin/x"],
        )


if __name__ == "__main__":
    unittest.main()
