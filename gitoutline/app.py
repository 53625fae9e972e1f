"""Main interactive event loop and the one-shot ``--print`` renderer.

Each iteration handles resize bookkeeping, renders when dirty, then waits for
a key. Idle ticks poll the repository watcher.
"""

from __future__ import annotations

import logging

from .errors import ProviderError
from .input import read_key
from .render import compose_frame, write_frame
from .state import State
from .terminal import TerminalController
from .watch import GitWatcher

logger = logging.getLogger(__name__)

KEY_TIMEOUT_MS = 120


def refresh_from_watch(state: State) -> None:
    """Refresh after an external change; failures go to the bottom panel."""
    try:
        state.refresh()
    except ProviderError as exc:
        logger.warning("Refresh after repository change failed: %s", exc)
        state.error = str(exc)
        state.dirty = True


def render_once(state: State, width: int, height: int, *, plain: bool = False) -> str:
    """Render the current state as text lines, as the terminal would show it."""
    buf = compose_frame(state, width, height)
    rows = buf.plain_rows() if plain else buf.to_ansi_rows()
    return "".join(row.rstrip(" ") + "\n" for row in rows)


def run_main_loop(
    state: State,
    terminal: TerminalController,
    stdin_fd: int,
    stdout_fd: int,
    watcher: GitWatcher | None = None,
) -> None:
    """Run the interactive TUI loop until the last screen closes."""
    with terminal.raw_mode():
        while not state.quit:
            size = terminal.size()
            if size != state.size:
                state.resize(size)

            if state.dirty:
                write_frame(compose_frame(state, *size), stdout_fd)
                state.dirty = False

            key = read_key(stdin_fd, timeout_ms=KEY_TIMEOUT_MS)
            if not key:
                if watcher is not None and watcher.pending_updates():
                    refresh_from_watch(state)
                continue
            if key == "CTRL_C":
                break
            logger.debug("Key: %r", key)
            state.handle_key(key)
