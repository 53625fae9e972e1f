"""Tests for unified diff parsing into files and hunks."""

from __future__ import annotations

import unittest

from gitoutline.git.commands import output_lines
from gitoutline.git.diff import parse_unified_diff

MODIFIED_AND_NEW = """\
diff --git a/src/app.py b/src/app.py
index 1111111..2222222 100644
--- a/src/app.py
+++ b/src/app.py
@@ -1,3 +1,3 @@
 import os
-print("v1")
+print("v2")
 
@@ -10 +10,2 @@ def main():
-    pass
+    run()
+    return 0
diff --git a/notes.txt b/notes.txt
new file mode 100644
index 0000000..3333333
--- /dev/null
+++ b/notes.txt
@@ -0,0 +1 @@
+hello
"""

RENAME_AND_DELETE = """\
diff --git a/old name.txt b/new name.txt
similarity index 90%
rename from old name.txt
rename to new name.txt
index 4444444..5555555 100644
--- a/old name.txt
+++ b/new name.txt
@@ -1 +1 @@
-a
+b
diff --git a/gone.txt b/gone.txt
deleted file mode 100644
index 6666666..0000000
--- a/gone.txt
+++ /dev/null
@@ -1 +0,0 @@
-bye
diff --git a/logo.png b/logo.png
index 7777777..8888888 100644
Binary files a/logo.png and b/logo.png differ
"""


class ParseUnifiedDiffTests(unittest.TestCase):
    def test_files_and_hunks_are_split(self) -> None:
        files = parse_unified_diff(MODIFIED_AND_NEW)
        self.assertEqual([f.path for f in files], ["src/app.py", "notes.txt"])
        self.assertEqual([f.status for f in files], ["modified", "new file"])

        app = files[0]
        self.assertEqual(len(app.hunks), 2)
        first, second = app.hunks
        self.assertEqual(first.header, "@@ -1,3 +1,3 @@")
        self.assertEqual(first.body, ' import os\n-print("v1")\n+print("v2")\n ')
        self.assertEqual((first.old_start, first.old_count, first.new_start, first.new_count), (1, 3, 1, 3))
        self.assertEqual(second.header, "@@ -10 +10,2 @@ def main():")
        self.assertEqual((second.old_start, second.old_count, second.new_start, second.new_count), (10, 1, 10, 2))
        self.assertTrue(second.text.startswith("@@ -10 +10,2 @@ def main():\n-    pass"))

    def test_file_header_lines_are_kept(self) -> None:
        app = parse_unified_diff(MODIFIED_AND_NEW)[0]
        self.assertEqual(app.header[0], "diff --git a/src/app.py b/src/app.py")
        self.assertIn("+++ b/src/app.py", app.header)

    def test_rename_delete_and_binary_statuses(self) -> None:
        renamed, deleted, binary = parse_unified_diff(RENAME_AND_DELETE)
        self.assertEqual(renamed.status, "renamed")
        self.assertEqual((renamed.old_path, renamed.new_path), ("old name.txt", "new name.txt"))
        self.assertEqual(renamed.label, "old name.txt -> new name.txt")

        self.assertEqual(deleted.status, "deleted")
        self.assertEqual(deleted.path, "gone.txt")
        self.assertEqual(deleted.hunks[0].body, "-bye")

        self.assertEqual(binary.status, "binary")
        self.assertEqual(binary.hunks, [])

    def test_empty_input_has_no_files(self) -> None:
        self.assertEqual(parse_unified_diff(""), [])

    def test_form_feed_inside_changed_line_stays_in_one_line(self) -> None:
        diff = (
            "diff --git a/page.el b/page.el\n"
            "--- a/page.el\n"
            "+++ b/page.el\n"
            "@@ -1,1 +1,1 @@\n"
            "-old\x0cline\n"
            "+new\x1c\u2028@@ -9 +9 @@\n"
        )
        (page,) = parse_unified_diff(diff)
        self.assertEqual(len(page.hunks), 1)
        self.assertEqual(page.hunks[0].body, "-old\x0cline\n+new\x1c\u2028@@ -9 +9 @@")


class OutputLinesTests(unittest.TestCase):
    def test_splits_on_newline_only(self) -> None:
        self.assertEqual(output_lines("a\x0cb\nc\r\n\x85d\n"), ["a\x0cb", "c\r", "\x85d"])
        self.assertEqual(output_lines("no newline"), ["no newline"])
        self.assertEqual(output_lines(""), [])


if __name__ == "__main__":
    unittest.main()
