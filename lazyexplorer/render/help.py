"""Help pane content.

Rendering helpers here are presentation-only and side-effect free.
"""

from __future__ import annotations

from ..ui_theme import UITheme

HELP_SECTIONS: tuple[tuple[str, tuple[tuple[str, str], ...]], ...] = (
    (
        "NAVIGATION",
        (
            ("j / Down", "select next entry"),
            ("k / Up", "select previous entry"),
            ("g / Home", "select first entry"),
            ("G / End", "select last entry"),
            ("l / Right", "enter selected directory"),
            ("h / Left", "go to parent directory"),
        ),
    ),
    (
        "SESSIONS",
        (
            ("Tab", "next session (opens a second one if needed)"),
            ("Shift+Tab", "previous session"),
            ("1-4", "jump to session, cloning the current one if empty"),
            ("q / Esc", "clear marks, else close session"),
        ),
    ),
    (
        "MARKS",
        (
            ("Space", "mark/unmark entry and move down"),
            ("p", "copy marked entries into the current directory"),
            ("v", "move marked entries into the current directory"),
        ),
    ),
    (
        "GENERAL",
        (
            ("?", "toggle this help"),
            ("Ctrl+C", "quit immediately"),
        ),
    ),
)


def help_lines(theme: UITheme) -> list[str]:
    key_width = max(len(key) for _, bindings in HELP_SECTIONS for key, _ in bindings)
    lines: list[str] = []
    for heading, bindings in HELP_SECTIONS:
        lines.append(f"{theme.help_heading}{heading}{theme.reset}")
        for key, description in bindings:
            padded = key.ljust(key_width)
            lines.append(f"  {theme.help_key}{padded}{theme.reset}  {theme.help_dim}{description}{theme.reset}")
        lines.append("")
    return lines


__all__ = ["HELP_SECTIONS", "help_lines"]
