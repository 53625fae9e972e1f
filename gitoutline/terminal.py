"""Raw-mode and alternate-screen lifecycle for the interactive session."""

from __future__ import annotations

import contextlib
import os
import termios
import tty
from collections.abc import Iterator

ENTER_ALT_SCREEN = b"\x1b[?1049h\x1b[?25l"
LEAVE_ALT_SCREEN = b"\x1b[?25h\x1b[?1049l"
FALLBACK_SIZE = (80, 24)


class TerminalController:
    """Owns the tty settings of one stdin/stdout pair."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_tui_mode(self) -> None:
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, ENTER_ALT_SCREEN)

    def disable_tui_mode(self) -> None:
        """Show the cursor again and put the tty back the way it was found."""
        os.write(self.stdout_fd, LEAVE_ALT_SCREEN)
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def size(self) -> tuple[int, int]:
        """Current ``(columns, rows)`` of the output terminal."""
        try:
            columns, rows = os.get_terminal_size(self.stdout_fd)
        except OSError:
            columns, rows = FALLBACK_SIZE
        return (max(1, columns), max(1, rows))

    @contextlib.contextmanager
    def raw_mode(self) -> Iterator[None]:
        self.enable_tui_mode()
        try:
            yield
        finally:
            self.disable_tui_mode()
