"""Integration tests for ``lazyexplorer.runtime.app`` wiring.

Drives a real event loop over temporary directories with scripted keys and
checks that marks, sessions, and copy/move round-trip through the
filesystem and back into the rendered frames.
"""

from __future__ import annotations

import contextlib
import tempfile
import threading
import time
import unittest
from pathlib import Path

from lazyexplorer.ansi import ANSI_ESCAPE_RE
from lazyexplorer.input.events import KeyEvent
from lazyexplorer.runtime import app as app_runtime
from lazyexplorer.runtime.model import DONE
from lazyexplorer.ui_theme import PLAIN_THEME


class _RecordingTerminal:
    def __init__(self) -> None:
        self.frames: list[str] = []
        self.restored = False

    @contextlib.contextmanager
    def raw_mode(self):
        try:
            yield
        finally:
            self.restored = True

    def write(self, frame: str) -> None:
        self.frames.append(ANSI_ESCAPE_RE.sub("", frame))


class _ScriptedKeys:
    def __init__(self, steps) -> None:
        self.size = (100, 30)
        self.model = None
        self._steps = list(steps)

    def poll(self, timeout: float) -> bool:
        if self._steps and self.model is not None and self._steps[0][0](self.model):
            return True
        time.sleep(timeout)
        return False

    def read(self):
        if not self._steps:
            return None
        return KeyEvent(self._steps.pop(0)[1])


def _run(root: Path, steps) -> tuple[object, _RecordingTerminal]:
    terminal = _RecordingTerminal()
    keys = _ScriptedKeys(steps)
    loop = app_runtime.build_event_loop(root, terminal, keys, PLAIN_THEME)
    keys.model = loop.model
    worker = threading.Thread(target=loop.run, daemon=True)
    worker.start()
    worker.join(timeout=10.0)
    if worker.is_alive():
        raise AssertionError("explorer did not quit")
    return loop.model, terminal


def _items(model) -> list[str]:
    return [item.entry.name for item in model.current_session.items]


class ExplorerAppTests(unittest.TestCase):
    def test_copy_marked_file_into_other_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "dest").mkdir()
            (root / "a.txt").write_text("payload\n", encoding="utf-8")

            steps = [
                (lambda m: _items(m) == ["dest", "a.txt"], "j"),
                (lambda m: m.current_session.selected == 1, " "),
                (lambda m: bool(m.marked), "k"),
                (lambda m: m.current_session.selected == 0, "l"),
                (lambda m: m.current_session.path == root / "dest", "p"),
                (lambda m: not m.marked and _items(m) == ["a.txt"], "CTRL_C"),
            ]
            model, terminal = _run(root, steps)

            self.assertEqual((root / "dest" / "a.txt").read_text(encoding="utf-8"), "payload\n")
            self.assertTrue((root / "a.txt").exists())

        self.assertEqual(model.running_state, DONE)
        self.assertTrue(terminal.restored)
        self.assertTrue(any("+a.txt" in frame for frame in terminal.frames))
        self.assertTrue(any("copied 1 item" in frame for frame in terminal.frames))

    def test_move_between_sessions_refreshes_both(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "dest").mkdir()
            (root / "a.txt").write_text("payload\n", encoding="utf-8")
            (root / "b.txt").write_text("other\n", encoding="utf-8")

            steps = [
                (lambda m: _items(m) == ["dest", "a.txt", "b.txt"], "j"),
                (lambda m: m.current_session.selected == 1, " "),
                (lambda m: bool(m.marked), "TAB"),
                (lambda m: m.current_index == 1, "g"),
                (lambda m: m.current_session.selected == 0, "l"),
                (lambda m: m.current_session.path == root / "dest", "v"),
                (
                    lambda m: not m.marked
                    and _items(m) == ["a.txt"]
                    and [item.entry.name for item in m.sessions[0].items] == ["dest", "b.txt"],
                    "1",
                ),
                (lambda m: m.current_index == 0, "q"),
                (lambda m: m.current_index == 1, "q"),
            ]
            model, _terminal = _run(root, steps)

            self.assertFalse((root / "a.txt").exists())
            self.assertEqual((root / "dest" / "a.txt").read_text(encoding="utf-8"), "payload\n")

        self.assertEqual(model.running_state, DONE)

    def test_missing_start_directory_reports_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp).resolve() / "gone"

            model, terminal = _run(missing, [(lambda m: m.user_message is not None, "CTRL_C")])

        self.assertEqual(model.running_state, DONE)
        self.assertTrue(any("reading directory failed" in frame for frame in terminal.frames))


if __name__ == "__main__":
    unittest.main()
