"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the explorer list, session strip, status line,
and help pane.
"""

from __future__ import annotations

from dataclasses import dataclass

from .fs_model import KIND_DIRECTORY, KIND_FILE, KIND_SYMLINK


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    title: str
    path: str
    entry_dir: str
    entry_file: str
    entry_symlink: str
    entry_unknown: str
    cursor: str
    marker: str
    session_current: str
    session_other: str
    message_info: str
    message_error: str
    help_heading: str
    help_key: str
    help_dim: str
    warning: str

    def entry_color(self, kind: str) -> str:
        if kind == KIND_DIRECTORY:
            return self.entry_dir
        if kind == KIND_FILE:
            return self.entry_file
        if kind == KIND_SYMLINK:
            return self.entry_symlink
        return self.entry_unknown


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    title="\033[1;30;48;5;117m",
    path="\033[34m",
    entry_dir="\033[91m",
    entry_file="\033[97m",
    entry_symlink="\033[35m",
    entry_unknown="\033[37m",
    cursor="\033[1;30;44m",
    marker="\033[30;43m",
    session_current="\033[1;30;44m",
    session_other="\033[4m",
    message_info="\033[94m",
    message_error="\033[91m",
    help_heading="\033[1;38;5;81m",
    help_key="\033[38;5;229m",
    help_dim="\033[2;38;5;250m",
    warning="\033[94m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    title="\033[1;30;48;5;45m",
    path="\033[38;5;45m",
    entry_dir="\033[1;38;5;45m",
    entry_file="\033[38;5;252m",
    entry_symlink="\033[38;5;117m",
    entry_unknown="\033[2;38;5;110m",
    cursor="\033[1;30;48;5;39m",
    marker="\033[30;48;5;215m",
    session_current="\033[1;30;48;5;39m",
    session_other="\033[4;38;5;153m",
    message_info="\033[38;5;153m",
    message_error="\033[38;5;215m",
    help_heading="\033[1;38;5;45m",
    help_key="\033[38;5;153m",
    help_dim="\033[2;38;5;110m",
    warning="\033[38;5;45m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    title="",
    path="",
    entry_dir="",
    entry_file="",
    entry_symlink="",
    entry_unknown="",
    cursor="\033[7m",
    marker="",
    session_current="\033[7m",
    session_other="",
    message_info="",
    message_error="",
    help_heading="",
    help_key="",
    help_dim="",
    warning="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
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
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
