"""Key handling for the launcher prompt."""

from __future__ import annotations

import enum

from .state import LauncherState


class KeyOutcome(enum.Enum):
    CONTINUE = "continue"
    COMMIT = "commit"
    CANCEL = "cancel"


def _delete_word(query: str) -> str:
    trimmed = query.rstrip()
    cut = trimmed.rfind(" ")
    return trimmed[: cut + 1] if cut >= 0 else ""


def apply_key(state: LauncherState, key: str) -> KeyOutcome:
    """Apply one decoded key token to ``state``.

    ``ENTER`` commits and ``ESC``/``CTRL_C`` cancel; editing keys change the
    query and mark the screen dirty. Unrecognized tokens are ignored.
    """
    if key == "ENTER":
        return KeyOutcome.COMMIT
    if key in {"ESC", "CTRL_C"}:
        return KeyOutcome.CANCEL

    previous = state.query
    if key == "BACKSPACE":
        state.query = state.query[:-1]
    elif key == "CTRL_U":
        state.query = ""
    elif key == "CTRL_W":
        state.query = _delete_word(state.query)
    elif len(key) == 1 and key.isprintable():
        state.query += key
    if state.query != previous:
        state.dirty = True
    return KeyOutcome.CONTINUE


__all__ = ["KeyOutcome", "apply_key"]
