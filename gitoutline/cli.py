"""Command-line front door for gitoutline.

Parses CLI options, locates the repository, and either prints one rendered
frame or starts the interactive session.
"""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from pathlib import Path

from .app import render_once, run_main_loop
from .config import load_general_config
from .errors import GitOutlineError
from .git.commands import find_repo_root, resolve_git_dir
from .input import parse_keys
from .screens import ScreenStyle
from .state import State
from .terminal import TerminalController
from .ui_theme import available_theme_names, resolve_theme
from .watch import GitWatcher

logger = logging.getLogger(__name__)

LOG_FILENAME = "gitoutline.log"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def configure_logging(enabled: bool, log_path: Path | None = None) -> None:
    """Send package logs to a DEBUG file when enabled; stay silent otherwise."""
    if not enabled:
        return
    package_logger = logging.getLogger("gitoutline")
    handler = logging.FileHandler(log_path or Path(LOG_FILENAME), encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gitoutline",
        description="Browse git status, refs, logs, and commits as a collapsible outline.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Path inside the repository. Defaults to current directory.")
    parser.add_argument("--print", action="store_true", help="Render one frame to stdout and exit.")
    parser.add_argument("--keys", default="", help="Keys to replay before rendering, e.g. 'jj<tab>'.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--log", action="store_true", help=f"Write debug logs to ./{LOG_FILENAME}.")
    parser.add_argument("--max-cols", type=_positive_int, default=None, help="Width for --print output.")
    parser.add_argument("--max-rows", type=_positive_int, default=None, help="Height for --print output.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch gitoutline for the enclosing repository."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log)

    config = load_general_config()
    theme = resolve_theme(args.theme or config.theme, no_color=args.no_color)
    style = ScreenStyle(theme=theme, diff_style=config.diff_style, no_color=args.no_color)
    keys = parse_keys(args.keys)

    try:
        repo_root = find_repo_root(Path(args.path) if args.path else Path.cwd())
        if args.print:
            term = shutil.get_terminal_size((80, 24))
            width = args.max_cols or max(1, term.columns)
            height = args.max_rows or max(1, term.lines)
            state = State(repo_root, (width, height), config=config, screen_style=style)
            for key in keys:
                state.handle_key(key)
                if state.quit:
                    return
            sys.stdout.write(render_once(state, width, height, plain=args.no_color))
            return

        if not (sys.stdin.isatty() and sys.stdout.isatty()):
            raise SystemExit("gitoutline needs an interactive terminal; use --print for plain output.")
        terminal = TerminalController(sys.stdin.fileno(), sys.stdout.fileno())
        state = State(repo_root, terminal.size(), config=config, screen_style=style)
        for key in keys:
            state.handle_key(key)
        watcher = None
        if config.refresh_on_file_change:
            watcher = GitWatcher(repo_root, resolve_git_dir(repo_root))
        logger.info("Starting session in %s", repo_root)
        run_main_loop(state, terminal, sys.stdin.fileno(), sys.stdout.fileno(), watcher)
    except GitOutlineError as exc:
        logger.error("Fatal: %s", exc)
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()
