"""Wiring of discovery, presentation and launch into one program run.

Three threads of control cooperate only through queues: the discovery worker
feeds the index queue, the presentation thread sends at most one command on
the launch channel, and the calling thread waits for that command and runs it.
"""

from __future__ import annotations

import logging
import sys
import threading
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from .discovery import DiscoveryWorker, iter_discovered
from .errors import LaunchError
from .fuzzy import RankedMatch, rank
from .index import DEFAULT_BATCH_SIZE, CandidateIndex
from .launch import DEFAULT_EXIT_CODE, LAUNCH_FAILURE_EXIT_CODE, LaunchChannel, spawn
from .loop import run_launcher_loop
from .state import LauncherState
from .terminal import TerminalController
from .ui_theme import UITheme

logger = logging.getLogger(__name__)


def launch_command(command: str | None, stderr: TextIO | None = None) -> int:
    """Run the received command and return the program's exit code.

    ``None`` (channel closed without a command) launches nothing. Launch
    failures are reported on ``stderr`` instead of propagating.
    """
    if command is None:
        return DEFAULT_EXIT_CODE
    try:
        return spawn(command)
    except LaunchError as exc:
        logger.error("%s", exc)
        print(f"lazylauncher: {exc}", file=stderr or sys.stderr)
        return LAUNCH_FAILURE_EXIT_CODE


def list_matches(
    roots: Iterable[Path],
    query: str,
    *,
    key_by_path: bool = False,
) -> list[RankedMatch]:
    """Discover synchronously and rank everything against ``query``."""
    index = CandidateIndex(key_by_path=key_by_path)
    for discovered in iter_discovered(roots):
        index.insert(discovered.key, discovered.entry)
    index.complete = True
    return rank(query, index.items())


def run_launcher(
    roots: Iterable[Path],
    theme: UITheme,
    *,
    batch_size: int = DEFAULT_BATCH_SIZE,
    key_by_path: bool = False,
    stdin_fd: int | None = None,
    stdout_fd: int | None = None,
) -> int:
    """Run the interactive launcher and return the process exit code."""
    stdin_fd = sys.stdin.fileno() if stdin_fd is None else stdin_fd
    stdout_fd = sys.stdout.fileno() if stdout_fd is None else stdout_fd

    channel = LaunchChannel()
    worker = DiscoveryWorker(roots)
    worker.start()
    index = CandidateIndex(batch_size=batch_size, key_by_path=key_by_path)
    terminal = TerminalController(stdin_fd, stdout_fd)
    failures: list[BaseException] = []

    def present() -> None:
        try:
            run_launcher_loop(LauncherState(), terminal, stdin_fd, index, worker.results, channel, theme)
        except BaseException as exc:
            failures.append(exc)
        finally:
            channel.close()

    ui_thread = threading.Thread(target=present, name="lazylauncher-ui")
    ui_thread.start()
    command = channel.receive()
    # The terminal must be restored before a child process takes it over.
    ui_thread.join()
    if failures:
        raise failures[0]
    return launch_command(command)


__all__ = ["launch_command", "list_matches", "run_launcher"]
