"""UI theme definitions and selection helpers.

Themes are ANSI palettes for tree rows and the status bar. Every theme
keeps a visible selection attribute, even the colorless one.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the renderer."""

    name: str
    reset: str
    tree_dir: str
    tree_root: str
    selected: str
    status: str
    status_message: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    tree_dir="\033[34m",
    tree_root="\033[1;34m",
    selected="\033[1;4m",
    status="\033[7m",
    status_message="\033[7;33m",
)

REVERSE_THEME = UITheme(
    name="reverse",
    reset="\033[0m",
    tree_dir="\033[38;5;252m",
    tree_root="\033[1;38;5;81m",
    selected="\033[7m",
    status="\033[7;38;5;81m",
    status_message="\033[7;38;5;214m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="\033[0m",
    tree_dir="",
    tree_root="",
    selected="\033[7m",
    status="\033[7m",
    status_message="\033[7m",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    REVERSE_THEME.name: REVERSE_THEME,
    PLAIN_THEME.name: PLAIN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    return tuple(_THEMES)


def resolve_theme(name: str | None, no_color: bool = False) -> UITheme:
    """Return the named theme, ``plain`` when colors are off, else ``default``."""
    if no_color:
        return PLAIN_THEME
    if name is None:
        return DEFAULT_THEME
    return _THEMES.get(name.strip().lower(), DEFAULT_THEME)
