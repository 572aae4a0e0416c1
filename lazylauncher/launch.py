"""Hand-off of the selected command and process launching.

The presentation thread sends at most one command on a ``LaunchChannel``; the
coordinator blocks on it, then tokenizes and spawns the command.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
import threading

from .errors import LaunchError
from .fuzzy import RankedMatch, top_match

logger = logging.getLogger(__name__)

DEFAULT_EXIT_CODE = 0
LAUNCH_FAILURE_EXIT_CODE = 1
FIELD_CODES = frozenset({"%f", "%F", "%u", "%U", "%d", "%D", "%n", "%N", "%i", "%c", "%k", "%v", "%m"})


class LaunchChannel:
    """One-shot channel carrying at most one launch command.

    ``receive`` returns the command, or ``None`` once the channel was closed
    without one.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._ready = threading.Event()
        self._command: str | None = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def send(self, command: str) -> bool:
        """Deliver ``command``; returns ``False`` when nothing was sent."""
        if not command:
            return False
        with self._lock:
            if self._closed:
                return False
            self._command = command
            self._closed = True
        self._ready.set()
        return True

    def close(self) -> None:
        with self._lock:
            self._closed = True
        self._ready.set()

    def receive(self, timeout: float | None = None) -> str | None:
        self._ready.wait(timeout)
        with self._lock:
            return self._command


def commit_selection(matches: list[RankedMatch], channel: LaunchChannel) -> bool:
    """Send the top match's command; no-op without a launchable top match."""
    match = top_match(matches)
    if match is None or not match.entry.exec:
        return False
    return channel.send(match.entry.exec)


def command_argv(command: str) -> list[str]:
    """Split a launch command into argv, dropping field-code placeholders."""
    try:
        tokens = shlex.split(command, posix=True)
    except ValueError as exc:
        raise LaunchError("parse", command, exc) from exc
    argv = [token.replace("%%", "%") for token in tokens if token not in FIELD_CODES]
    if not argv:
        raise LaunchError("parse", command)
    return argv


def spawn(command: str) -> int:
    """Run ``command`` to completion and return its exit status.

    A child terminated by a signal reports ``DEFAULT_EXIT_CODE``.
    """
    argv = command_argv(command)
    logger.info("launching %s", argv)
    try:
        process = subprocess.Popen(argv)
    except OSError as exc:
        raise LaunchError("spawn", command, exc) from exc
    returncode = process.wait()
    if returncode < 0:
        logger.info("%s terminated by signal %d", argv[0], -returncode)
        return DEFAULT_EXIT_CODE
    return returncode


__all__ = [
    "DEFAULT_EXIT_CODE",
    "FIELD_CODES",
    "LAUNCH_FAILURE_EXIT_CODE",
    "LaunchChannel",
    "command_argv",
    "commit_selection",
    "spawn",
]
