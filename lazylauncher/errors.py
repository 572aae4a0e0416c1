"""Exception types raised by lazylauncher.

Discovery failures are recovered where they happen and never show up here.
Only the launch step surfaces errors, wrapped in ``LaunchError``.
"""

from __future__ import annotations


class LauncherError(Exception):
    """Base class for errors reported to the user."""


class LaunchError(LauncherError):
    """A selected command could not be turned into a running process.

    ``operation`` names the failing step (``"parse"`` or ``"spawn"``),
    ``command`` is the raw launch string and ``cause`` the underlying exception
    when there is one.
    """

    def __init__(self, operation: str, command: str, cause: BaseException | None = None) -> None:
        self.operation = operation
        self.command = command
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"{operation} failed for {command!r}{detail}")


__all__ = ["LauncherError", "LaunchError"]
