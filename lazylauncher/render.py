"""Screen rendering for the launcher prompt and ranked list.

Builds one full frame as a string of ANSI escapes: prompt row, one row per
visible match with the best match highlighted, and a discovery status footer.
"""

from __future__ import annotations

import unicodedata

from .fuzzy import RankedMatch
from .ui_theme import UITheme

PROMPT = "> "
PLACEHOLDER = "Search..."
SCORE_WIDTH = 3


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks consume no columns, East Asian wide/fullwidth characters
    consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def clip_text(text: str, max_cols: int) -> str:
    """Trim plain ``text`` to at most ``max_cols`` display columns."""
    if max_cols <= 0:
        return ""
    out: list[str] = []
    col = 0
    for ch in text:
        if not ch.isprintable():
            ch = " "
        width = char_display_width(ch)
        if col + width > max_cols:
            break
        out.append(ch)
        col += width
    return "".join(out)


def format_match_row(match: RankedMatch, width: int, theme: UITheme, *, selected: bool) -> str:
    """Format one result row as ``score: name  comment`` clipped to ``width``."""
    score_text = f"{match.score:>{SCORE_WIDTH}}:"
    name = clip_text(match.entry.display_name, max(0, width - len(score_text) - 1))
    used = len(score_text) + 1 + sum(char_display_width(ch) for ch in name)
    comment = ""
    if match.entry.comment:
        comment = clip_text(f"  {match.entry.comment}", max(0, width - used))
    prefix = theme.selected if selected else ""
    return (
        f"{prefix}{theme.score}{score_text}{theme.reset}{prefix} "
        f"{theme.name_text}{name}{theme.reset}{prefix}"
        f"{theme.comment}{comment}{theme.reset}"
    )


def format_status(entry_count: int, match_count: int, discovery_complete: bool) -> str:
    scanning = "" if discovery_complete else ", scanning..."
    return f"{match_count}/{entry_count} applications{scanning}"


def render_screen(
    query: str,
    matches: list[RankedMatch],
    *,
    entry_count: int,
    discovery_complete: bool,
    width: int,
    height: int,
    theme: UITheme,
) -> str:
    """Return the escape sequence text that redraws the whole screen."""
    width = max(1, width)
    height = max(3, height)
    rows: list[str] = []
    if query:
        rows.append(f"{theme.prompt}{PROMPT}{theme.reset}{theme.query}{clip_text(query, width - len(PROMPT))}{theme.reset}")
    else:
        rows.append(f"{theme.prompt}{PROMPT}{theme.reset}{theme.placeholder}{PLACEHOLDER}{theme.reset}")

    visible = height - 2
    for idx, match in enumerate(matches[:visible]):
        rows.append(format_match_row(match, width, theme, selected=idx == 0))
    while len(rows) < height - 1:
        rows.append("")
    status = clip_text(format_status(entry_count, len(matches), discovery_complete), width)
    rows.append(f"{theme.status}{status}{theme.reset}")

    return "\x1b[H" + "\r\n".join(f"{row}\x1b[K" for row in rows)


__all__ = [
    "PLACEHOLDER",
    "char_display_width",
    "clip_text",
    "format_match_row",
    "format_status",
    "render_screen",
]
