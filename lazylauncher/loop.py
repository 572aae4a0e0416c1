"""Interactive redraw loop for the launcher.

Each cycle drains a bounded batch of discovered entries, re-ranks when the
query or the index changed, redraws when dirty, then polls for one key with
a short timeout so discovery progress never waits on input and vice versa.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from queue import Queue

from .fuzzy import rank
from .index import CandidateIndex
from .input import read_key
from .keys import KeyOutcome, apply_key
from .launch import LaunchChannel, commit_selection
from .render import render_screen
from .state import LauncherState
from .terminal import TerminalController
from .ui_theme import UITheme


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    key_poll_ms: int = 50


def refresh_matches(state: LauncherState, index: CandidateIndex, source: Queue) -> None:
    """Ingest ready entries and recompute ``state.matches`` when stale."""
    index.drain(source)
    if index.complete != state.discovery_complete:
        state.discovery_complete = index.complete
        state.dirty = True
    if state.ranked_query == state.query and state.ranked_revision == index.revision:
        return
    state.matches = rank(state.query, index.items())
    state.ranked_query = state.query
    state.ranked_revision = index.revision
    state.dirty = True


def run_launcher_loop(
    state: LauncherState,
    terminal: TerminalController,
    stdin_fd: int,
    index: CandidateIndex,
    source: Queue,
    channel: LaunchChannel,
    theme: UITheme,
    timing: RuntimeLoopTiming = RuntimeLoopTiming(),
) -> None:
    """Run the prompt until the user commits a launchable match or cancels.

    The launch channel is always closed on exit, so a waiting coordinator is
    released whether or not a command was sent.
    """
    try:
        with terminal.raw_mode():
            while True:
                refresh_matches(state, index, source)
                if state.dirty:
                    term = shutil.get_terminal_size((80, 24))
                    terminal.write(
                        render_screen(
                            state.query,
                            state.matches,
                            entry_count=len(index),
                            discovery_complete=state.discovery_complete,
                            width=term.columns,
                            height=term.lines,
                            theme=theme,
                        )
                    )
                    state.dirty = False

                key = read_key(stdin_fd, timeout_ms=timing.key_poll_ms)
                if key == "":
                    continue
                outcome = apply_key(state, key)
                if outcome is KeyOutcome.CANCEL:
                    break
                if outcome is KeyOutcome.COMMIT:
                    refresh_matches(state, index, source)
                    if commit_selection(state.matches, channel):
                        break
    finally:
        channel.close()


__all__ = ["RuntimeLoopTiming", "refresh_matches", "run_launcher_loop"]
