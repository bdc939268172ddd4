"""Command-line front door for lazyexplorer.

Parses CLI options, resolves the starting directory, sets up logging,
then dispatches into the interactive runtime.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import load_debug, load_theme_name
from .errors import LazyExplorerError
from .logs import setup_logging
from .runtime import run_explorer
from .ui_theme import available_theme_names

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Browse directories in up to four sessions and copy/move marked entries."
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to open. Defaults to current directory.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--debug", action="store_true", help="Show diagnostics in the status line.")
    parser.add_argument("--log-file", type=Path, default=None, help="Write logs to this file.")
    return parser


def resolve_root(raw_path: str | None, default_path: Path | None = None) -> Path:
    """Canonicalize the starting directory, failing with ``SystemExit``."""
    base = default_path if default_path is not None else Path.cwd()
    path = Path(raw_path) if raw_path else base
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")
    return path.resolve()


def _is_interactive() -> bool:
    return sys.stdin.isatty() and sys.stdout.isatty()


def main(argv: list[str] | None = None, default_path: Path | None = None) -> None:
    """Parse arguments and launch the explorer.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = build_parser().parse_args(argv)
    root = resolve_root(args.path, default_path)

    if not _is_interactive():
        raise SystemExit("lazyexplorer needs an interactive terminal.")

    try:
        setup_logging(args.log_file)
    except OSError as exc:
        raise SystemExit(f"couldn't set up logging: {exc}") from exc

    theme_name = args.theme if args.theme is not None else load_theme_name()
    debug = args.debug or load_debug()
    try:
        run_explorer(root, theme_name=theme_name, no_color=args.no_color, debug=debug)
    except (LazyExplorerError, OSError) as exc:
        logger.exception("explorer stopped with a fatal error")
        raise SystemExit(f"lazyexplorer: {exc}") from exc


if __name__ == "__main__":
    main()
