"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the prompt, result rows and status footer.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the renderer."""

    name: str
    reset: str
    prompt: str
    query: str
    placeholder: str
    score: str
    selected: str
    name_text: str
    comment: str
    status: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    prompt="\033[1;38;5;81m",
    query="\033[1;38;5;255m",
    placeholder="\033[2;38;5;250m",
    score="\033[38;5;109m",
    selected="\033[7m",
    name_text="\033[38;5;252m",
    comment="\033[2;38;5;250m",
    status="\033[2m",
)

LATTE_THEME = UITheme(
    name="latte",
    reset="\033[0m",
    prompt="\033[1;38;2;30;102;245m",
    query="\033[38;2;76;79;105m",
    placeholder="\033[38;2;156;160;176m",
    score="\033[38;2;254;100;11m",
    selected="\033[48;2;204;208;218m",
    name_text="\033[38;2;76;79;105m",
    comment="\033[38;2;108;111;133m",
    status="\033[38;2;140;143;161m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    prompt="",
    query="",
    placeholder="",
    score="",
    selected="",
    name_text="",
    comment="",
    status="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    LATTE_THEME.name: LATTE_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "LATTE_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
