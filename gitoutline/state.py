"""Application state: the screen stack plus menu, prompt, and command log.

``State`` is the single target of key dispatch. Keys go to the open prompt
first, then the pending menu, then the normal-mode bindings. Recoverable
errors raised by an operation are caught here and shown in the bottom panel.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .config import GeneralConfig
from .errors import DisplayDecodeError, GitCommandError, GitOutlineError, ProviderError
from .git.commands import run_git
from .input import KeyComboBinding, normalize_key
from .menu import Menu
from .ops import build_normal_registry
from .prompt import CANCEL, SUBMIT, Prompt
from .render.panel import bottom_panel_height
from .screen import ItemSource, Screen
from .screens import ScreenStyle, StatusScreenData

logger = logging.getLogger(__name__)

MAX_CMD_LOG_ENTRIES = 16


@dataclass
class CmdLogEntry:
    args: list[str]
    output: str
    returncode: int

    @property
    def command(self) -> str:
        return "git " + " ".join(self.args)


class State:
    def __init__(
        self,
        repo_root: Path,
        size: tuple[int, int],
        *,
        config: GeneralConfig | None = None,
        screen_style: ScreenStyle | None = None,
        root_data: ItemSource | None = None,
    ) -> None:
        self.repo_root = repo_root
        self.config = config or GeneralConfig()
        self.screen_style = screen_style or ScreenStyle()
        self.size = size
        self.pending_menu: Menu | None = None
        self.prompt: Prompt | None = None
        self.show_help = False
        self.cmd_log: list[CmdLogEntry] = []
        self.error: str | None = None
        self.quit = False
        self.dirty = True
        self._registry = build_normal_registry(self)

        if root_data is None:
            root_data = StatusScreenData(
                repo_root,
                self.screen_style,
                recent_commits_limit=self.config.recent_commits_limit,
            )
        self.screens: list[Screen] = [Screen(self.screen_size(), root_data, theme=self.screen_style.theme)]

    # -- screens ------------------------------------------------------------

    def screen(self) -> Screen:
        return self.screens[-1]

    def screen_size(self) -> tuple[int, int]:
        """Area left for the screen once the bottom panel is laid out."""
        width, height = self.size
        return (width, max(0, height - bottom_panel_height(self, width, height)))

    def push_screen(self, data: ItemSource) -> None:
        self.screens.append(Screen(self.screen_size(), data, theme=self.screen_style.theme))

    def close_screen(self) -> None:
        self.screens.pop()
        if not self.screens:
            self.quit = True

    def resize(self, size: tuple[int, int]) -> None:
        self.size = size
        self.sync_screen_size()
        self.dirty = True

    def sync_screen_size(self) -> None:
        size = self.screen_size()
        for screen in self.screens:
            screen.set_size(size)

    def refresh(self) -> None:
        """Re-read every screen's items from the repository.

        Every screen is updated even when an earlier one fails; the failures
        are then raised together as one ``ProviderError``.
        """
        failures: list[str] = []
        for screen in self.screens:
            try:
                screen.update()
            except ProviderError as exc:
                logger.warning("Screen refresh failed: %s", exc)
                failures.append(str(exc))
        self.dirty = True
        if failures:
            raise ProviderError("; ".join(failures))

    # -- menu / prompt ------------------------------------------------------

    def open_menu(self, menu: Menu) -> None:
        self.pending_menu = menu
        self.show_help = False

    def close_menu(self) -> None:
        self.pending_menu = None

    def open_prompt(self, prompt: Prompt) -> None:
        self.prompt = prompt

    def close_prompt(self) -> None:
        self.prompt = None

    # -- commands -----------------------------------------------------------

    def run_cmd(self, args: list[str]) -> str:
        """Run ``git *args``, record it in the command log, then refresh.

        Raises ``GitCommandError`` when git exits non-zero; screens are
        refreshed either way since a failed command may still change the repo.
        """
        logger.info("Running command: git %s", " ".join(args))
        proc = run_git(self.repo_root, args, check=False)
        output = (proc.stdout + proc.stderr).rstrip("\n")
        self.cmd_log.append(CmdLogEntry(list(args), output, proc.returncode))
        del self.cmd_log[:-MAX_CMD_LOG_ENTRIES]
        failed = proc.returncode != 0
        try:
            self.refresh()
        except ProviderError as exc:
            if not failed:
                raise
            # Command failure takes precedence.
            logger.warning("Refresh after failed command also failed: %s", exc)
        if failed:
            raise GitCommandError(args, proc.returncode, proc.stderr)
        return proc.stdout

    # -- keys ---------------------------------------------------------------

    def handle_key(self, key: str) -> bool:
        """Dispatch one key token; returns whether anything handled it."""
        key = normalize_key(key)
        self.error = None
        self.sync_screen_size()
        try:
            handled = self._dispatch(key)
        except DisplayDecodeError:
            raise
        except GitOutlineError as exc:
            logger.warning("Operation failed: %s", exc)
            self.error = str(exc)
            handled = True
        self.sync_screen_size()
        self.dirty = True
        return handled

    def _dispatch(self, key: str) -> bool:
        if self.prompt is not None:
            return self._handle_prompt_key(self.prompt, key)
        if self.pending_menu is not None:
            return self._handle_menu_key(self.pending_menu, key)
        return bool(self._registry.dispatch(key))

    def _handle_prompt_key(self, prompt: Prompt, key: str) -> bool:
        outcome = prompt.handle_key(key)
        if outcome == CANCEL:
            self.close_prompt()
        elif outcome == SUBMIT:
            self.close_prompt()
            prompt.on_submit(self, prompt.value())
        return True

    def _handle_menu_key(self, menu: Menu, key: str) -> bool:
        if key in {"ESC", "q"}:
            self.close_menu()
            return True
        if menu.awaiting_arg:
            menu.awaiting_arg = False
            return menu.toggle_arg(key)
        if key == "-":
            menu.awaiting_arg = True
            return True
        entry = menu.entry_for(key)
        if entry is None:
            return False
        args = menu.enabled_args()
        self.close_menu()
        entry.action(self, args)
        return True

    def bindings(self) -> list[KeyComboBinding]:
        return self._registry.bindings()
