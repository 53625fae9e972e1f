"""Git backend queries against real temporary repositories."""

from __future__ import annotations

import shutil
import tempfile
import unittest
from pathlib import Path

from repo_helpers import commit_all, git, init_repo, write

from gitoutline.errors import GitCommandError, RepositoryNotFoundError
from gitoutline.git import (
    find_repo_root,
    has_commits,
    is_something_staged,
    is_working_tree_empty,
    read_commit,
    read_diff,
    read_head_state,
    read_log,
    read_refs,
    read_stashes,
    read_status,
    resolve_git_dir,
    run_git,
)


@unittest.skipIf(shutil.which("git") is None, "git is required for backend tests")
class GitBackendTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        init_repo(self.root)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_empty_repository(self) -> None:
        self.assertFalse(has_commits(self.root))
        self.assertEqual(read_log(self.root), [])
        self.assertEqual(read_stashes(self.root), [])
        status = read_status(self.root)
        self.assertEqual(status.branch.head, "main")
        self.assertTrue(is_working_tree_empty(self.root))

    def test_find_repo_root_from_subdirectory(self) -> None:
        write(self.root, "pkg/mod.py", "x = 1\n")
        self.assertEqual(find_repo_root(self.root / "pkg"), self.root)
        self.assertEqual(resolve_git_dir(self.root), (self.root / ".git").resolve())

    def test_find_repo_root_outside_repository(self) -> None:
        with tempfile.TemporaryDirectory() as outside:
            with self.assertRaises(RepositoryNotFoundError):
                find_repo_root(Path(outside))

    def test_run_git_failure_carries_stderr(self) -> None:
        with self.assertRaises(GitCommandError) as ctx:
            run_git(self.root, ["rev-parse", "--verify", "no-such-ref"])
        self.assertEqual(ctx.exception.returncode, 128)
        self.assertEqual(ctx.exception.git_args, ("rev-parse", "--verify", "no-such-ref"))

    def test_status_and_diffs(self) -> None:
        write(self.root, "a.txt", "one\n")
        write(self.root, "b.txt", "two\n")
        commit_all(self.root, "initial")

        write(self.root, "a.txt", "one changed\n")
        write(self.root, "b.txt", "two staged\n")
        git(self.root, "add", "b.txt")
        write(self.root, "new.txt", "fresh\n")

        status = read_status(self.root)
        self.assertEqual(status.untracked, ["new.txt"])
        self.assertFalse(is_working_tree_empty(self.root))
        self.assertTrue(is_something_staged(self.root))

        unstaged = read_diff(self.root, staged=False)
        self.assertEqual([f.path for f in unstaged], ["a.txt"])
        self.assertIn("+one changed", unstaged[0].hunks[0].body)

        staged = read_diff(self.root, staged=True)
        self.assertEqual([f.path for f in staged], ["b.txt"])
        self.assertEqual(staged[0].status, "modified")

    def test_log_commit_and_stash(self) -> None:
        write(self.root, "a.txt", "one\n")
        commit_all(self.root, "first commit")
        write(self.root, "a.txt", "two\n")
        commit_all(self.root, "second commit")

        log = read_log(self.root)
        self.assertEqual([entry.subject for entry in log], ["second commit", "first commit"])
        self.assertIn("HEAD -> main", log[0].refs)
        self.assertEqual(len(read_log(self.root, limit=1)), 1)

        details = read_commit(self.root, "HEAD")
        self.assertEqual(details.oid, log[0].oid)
        self.assertEqual(details.header_lines[0], f"commit {log[0].oid}")
        self.assertIn("    second commit", details.header_lines)
        self.assertEqual([f.path for f in details.files], ["a.txt"])

        write(self.root, "a.txt", "three\n")
        git(self.root, "stash", "push", "-q", "-m", "parked")
        stashes = read_stashes(self.root)
        self.assertEqual(len(stashes), 1)
        self.assertEqual(stashes[0].name, "stash@{0}")
        self.assertIn("parked", stashes[0].message)

    def test_refs_and_detached_head(self) -> None:
        write(self.root, "a.txt", "one\n")
        commit_all(self.root, "first")
        git(self.root, "branch", "topic")
        git(self.root, "tag", "-a", "v1", "-m", "release")
        git(self.root, "update-ref", "refs/remotes/origin/main", "HEAD")
        git(self.root, "remote", "add", "origin", "https://example.invalid/repo.git")

        refs = read_refs(self.root)
        by_name = {ref.shorthand: ref for ref in refs}
        self.assertEqual(by_name["main"].kind, "branch")
        self.assertTrue(by_name["main"].is_head)
        self.assertFalse(by_name["topic"].is_head)
        self.assertEqual(by_name["origin/main"].kind, "remote")
        self.assertEqual(by_name["origin/main"].remote, "origin")
        self.assertEqual(by_name["v1"].kind, "tag")
        self.assertEqual(by_name["v1"].target, by_name["main"].target)
        self.assertFalse(read_head_state(self.root).detached)

        git(self.root, "checkout", "-q", "--detach", "HEAD")
        head = read_head_state(self.root)
        self.assertTrue(head.detached)
        self.assertEqual(head.oid, by_name["main"].target)
        self.assertTrue(read_status(self.root).branch.detached)
        self.assertIsNotNone(read_status(self.root).branch.detached_at)


if __name__ == "__main__":
    unittest.main()
