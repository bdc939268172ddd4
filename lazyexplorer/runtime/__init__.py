"""Public runtime orchestration entry points.

This package groups the explorer bootstrap (`run_explorer`) with the model,
update function, commands, and event loop contracts used by tests.
"""

from __future__ import annotations


def run_explorer(*args, **kwargs):
    """Lazily import the explorer entrypoint to avoid import cycles."""
    from .app import run_explorer as _run_explorer

    return _run_explorer(*args, **kwargs)


__all__ = ["run_explorer"]
