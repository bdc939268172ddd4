"""Rendering engine for the explorer, help pane, and status line.

Builds one fully composed ANSI frame from a read-only view of the model.
Nothing here mutates runtime state.
"""

from __future__ import annotations

from ..ansi import clip_ansi_line, display_width
from ..filetypes import file_type_label
from ..fs_model import KIND_FILE
from ..runtime.model import (
    MESSAGE_ERROR,
    MIN_TERMINAL_HEIGHT,
    MIN_TERMINAL_WIDTH,
    PANE_HELP,
    EntryItem,
    Model,
    Session,
)
from ..ui_theme import UITheme
from .help import help_lines

TITLE = " lazyexplorer "
HELP_TITLE = " help "
HEADER_ROWS = 2


def list_viewport_start(selected: int | None, total: int, rows: int) -> int:
    """First visible item index keeping ``selected`` inside ``rows``."""
    if rows <= 0 or selected is None or total <= rows:
        return 0
    start = max(0, selected - rows + 1)
    return min(start, total - rows)


def format_entry_item(item: EntryItem, is_selected: bool, theme: UITheme) -> str:
    name = item.entry.display_name
    style = theme.cursor if is_selected else theme.entry_color(item.entry.kind)
    marker = f"{theme.marker}+{theme.reset}" if item.marked else " "
    if not style:
        return f"{marker}{name}"
    return f"{marker}{style}{name}{theme.reset}"


def session_strip(model: Model, theme: UITheme) -> str:
    parts: list[str] = []
    for index, slot in enumerate(model.sessions):
        label = str(index + 1)
        if index == model.current_index:
            parts.append(f"{theme.session_current}{label}{theme.reset}")
        elif isinstance(slot, Session):
            parts.append(f"{theme.session_other}{label}{theme.reset}")
        else:
            parts.append(label)
    return " ".join(parts) + " "


def status_right_text(model: Model) -> str:
    session = model.current_session
    label = None
    if isinstance(session, Session):
        item = session.selected_item()
        if item is not None and item.entry.kind == KIND_FILE:
            label = file_type_label(item.entry.name)
    right = "│ ? help"
    if label:
        right = f"{label} {right}"
    return right


def debug_text(model: Model) -> str:
    session = model.current_session
    selected = session.selected if isinstance(session, Session) else None
    return (
        f" [session: {model.current_index}]"
        f" [selected: {selected}]"
        f" [render: {model.render_counter}]"
        f" [event: {model.event_counter}]"
        f" [dimensions: {model.dimensions.width}x{model.dimensions.height}]"
    )


def build_status_line(model: Model, theme: UITheme, width: int) -> str:
    """Title, transient message, optional diagnostics, right-aligned hints."""
    left = f"{theme.title}{TITLE}{theme.reset}"
    message = model.user_message
    if message is not None:
        color = theme.message_error if message.kind == MESSAGE_ERROR else theme.message_info
        left += f"{color} {message.text}{theme.reset}"
    if model.debug:
        left += debug_text(model)

    right = status_right_text(model)
    usable = max(1, width - 1)
    right_width = display_width(right)
    if usable <= right_width:
        return clip_ansi_line(left, usable) + theme.reset
    left = clip_ansi_line(left, usable - right_width - 1) + theme.reset
    gap = " " * (usable - display_width(left) - right_width)
    return f"{left}{gap}{right}"


def render_too_small(model: Model, theme: UITheme) -> list[str]:
    width = model.dimensions.width
    message = [
        "Terminal size too small:",
        f"  Width = {model.dimensions.width} Height = {model.dimensions.height}",
        "",
        "Minimum dimensions needed:",
        f"  Width = {MIN_TERMINAL_WIDTH} Height = {MIN_TERMINAL_HEIGHT}",
        "",
        "Press (q/<ctrl+c>/<esc> to exit)",
    ]
    top = max(0, (model.dimensions.height - len(message)) // 2)
    rows = [""] * top
    for line in message:
        pad = max(0, (width - len(line)) // 2)
        rows.append(f"{theme.warning}{clip_ansi_line(' ' * pad + line, width)}{theme.reset}")
    return rows


def render_explorer(model: Model, theme: UITheme) -> list[str]:
    width = model.dimensions.width
    body_rows = max(0, model.dimensions.height - 1)
    header = session_strip(model, theme)
    session = model.current_session
    rows: list[str] = []
    if not isinstance(session, Session):
        rows.append(clip_ansi_line(header, width))
        return rows

    rows.append(clip_ansi_line(f"{header}{theme.path}{session.path}{theme.reset}", width) + theme.reset)
    rows.append("")
    list_rows = max(0, body_rows - HEADER_ROWS)
    start = list_viewport_start(session.selected, len(session.items), list_rows)
    for index in range(start, min(len(session.items), start + list_rows)):
        line = format_entry_item(session.items[index], index == session.selected, theme)
        rows.append(clip_ansi_line(line, width) + theme.reset)
    return rows


def render_help(model: Model, theme: UITheme) -> list[str]:
    width = model.dimensions.width
    rows = [f"{theme.title}{HELP_TITLE}{theme.reset}", ""]
    rows.extend(" " + line for line in help_lines(theme))
    return [clip_ansi_line(row, width) + theme.reset for row in rows]


def render_frame(model: Model, theme: UITheme) -> str:
    """Compose the complete frame for the current model."""
    height = model.dimensions.height
    if model.terminal_too_small:
        rows = render_too_small(model, theme)
        status = None
    else:
        if model.active_pane == PANE_HELP:
            rows = render_help(model, theme)
        else:
            rows = render_explorer(model, theme)
        status = build_status_line(model, theme, model.dimensions.width)

    content_rows = height - 1 if status is not None else height
    rows = rows[: max(0, content_rows)]
    rows.extend("" for _ in range(max(0, content_rows - len(rows))))

    out: list[str] = ["\033[H\033[J"]
    out.append("\r\n".join(rows))
    if status is not None:
        if rows:
            out.append("\r\n")
        out.append(status)
    return "".join(out)


__all__ = [
    "TITLE",
    "list_viewport_start",
    "format_entry_item",
    "session_strip",
    "build_status_line",
    "render_frame",
]
