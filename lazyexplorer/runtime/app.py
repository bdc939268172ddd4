"""Runtime composition layer: builds the model and collaborators, runs the loop."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from ..input import TerminalInput
from ..render import render_frame
from ..terminal import TerminalController
from ..ui_theme import UITheme, resolve_theme
from .loop import EventLoop
from .model import Model, TerminalDimensions

logger = logging.getLogger(__name__)


def build_event_loop(
    root: Path,
    terminal: TerminalController,
    input_source: TerminalInput,
    theme: UITheme,
    debug: bool = False,
) -> EventLoop:
    width, height = input_source.size
    model = Model.create(root, TerminalDimensions(width=width, height=height), debug=debug)

    def draw(current: Model) -> None:
        terminal.write(render_frame(current, theme))

    return EventLoop(model, terminal, input_source, draw)


def run_explorer(
    root: Path,
    theme_name: str | None = None,
    no_color: bool = False,
    debug: bool = False,
) -> None:
    """Open the explorer at ``root`` on the controlling terminal."""
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd, stdout_fd)
    input_source = TerminalInput(stdin_fd)
    theme = resolve_theme(theme_name, no_color=no_color)
    logger.info("starting explorer at %s (theme=%s, debug=%s)", root, theme.name, debug)
    build_event_loop(root, terminal, input_source, theme, debug=debug).run()


__all__ = ["build_event_loop", "run_explorer"]
