"""File-type labels for the status line, derived from pygments lexers."""

from __future__ import annotations

from functools import lru_cache

from pygments.lexers import get_lexer_for_filename
from pygments.util import ClassNotFound


@lru_cache(maxsize=512)
def file_type_label(filename: str) -> str | None:
    """Return a language name such as ``"Python"`` for ``filename``.

    Only the name is inspected; file contents are never read.
    """
    try:
        lexer = get_lexer_for_filename(filename)
    except ClassNotFound:
        return None
    return lexer.name


__all__ = ["file_type_label"]
