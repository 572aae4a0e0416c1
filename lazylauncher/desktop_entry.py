"""Parsing of application descriptor files into launch candidates.

A descriptor is line-oriented ``Key=Value`` text. ``Name``, ``Exec`` and
``Icon`` keep their first value, ``Comment`` keeps its last one, and
``NoDisplay=true`` anywhere hides the whole file.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

SEARCH_KEY_SEPARATOR = "|"
_FIRST_WINS_KEYS = {"Name": "name", "Exec": "exec", "Icon": "icon"}


@dataclass(frozen=True)
class DesktopEntry:
    """One launchable candidate parsed from a descriptor file."""

    name: str | None = None
    exec: str | None = None
    icon: str | None = None
    comment: str | None = None
    path: Path | None = field(default=None, compare=False)

    @property
    def display_name(self) -> str:
        return self.name if self.name is not None else "Missing name"


def search_key(entry: DesktopEntry) -> str:
    """Return the text an entry is indexed and matched by: ``name|comment``."""
    key = entry.name or ""
    if entry.comment is not None:
        if key:
            key += SEARCH_KEY_SEPARATOR
        key += entry.comment
    return key


def parse_desktop_entry(text: str, path: Path | None = None) -> DesktopEntry | None:
    """Parse descriptor ``text`` into an entry, or ``None`` when it yields none.

    Returns ``None`` for hidden entries (``NoDisplay=true``) and for files whose
    four recognized fields are all unset or empty.
    """
    fields: dict[str, str] = {}
    comment: str | None = None
    for line in text.split("\n"):
        if line.endswith("\r"):
            line = line[:-1]
        key, sep, value = line.partition("=")
        if not sep:
            continue
        value = value.strip()
        if key in _FIRST_WINS_KEYS:
            fields.setdefault(_FIRST_WINS_KEYS[key], value)
        elif key == "Comment":
            comment = value
        elif key == "NoDisplay" and value == "true":
            return None

    if not any(fields.values()) and not comment:
        return None
    return DesktopEntry(
        name=fields.get("name"),
        exec=fields.get("exec"),
        icon=fields.get("icon"),
        comment=comment,
        path=path,
    )


def read_desktop_entry(path: Path) -> DesktopEntry | None:
    """Read and parse one descriptor file; unreadable files yield ``None``."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("skipping unreadable descriptor %s: %s", path, exc)
        return None
    return parse_desktop_entry(text, path=path)


__all__ = [
    "DesktopEntry",
    "SEARCH_KEY_SEPARATOR",
    "parse_desktop_entry",
    "read_desktop_entry",
    "search_key",
]
