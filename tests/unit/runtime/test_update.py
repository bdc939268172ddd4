"""Tests for the message -> model/command transition function."""

from __future__ import annotations

import unittest
from pathlib import Path

from lazyexplorer.fs_model import KIND_DIRECTORY, KIND_FILE, CopyOperation, Entry, MoveOperation
from lazyexplorer.runtime import messages as msg
from lazyexplorer.runtime.commands import ReadDir, RunFileOperation
from lazyexplorer.runtime.model import (
    DONE,
    MESSAGE_ERROR,
    MESSAGE_INFO,
    PANE_EXPLORER,
    PANE_HELP,
    RUNNING,
    EntryItem,
    Model,
    Session,
    SessionInfo,
    TerminalDimensions,
    UserMessage,
)
from lazyexplorer.runtime.update import update

ROOT = Path("/work")


def _listing(path: Path, *names: str) -> msg.DirectoryRead:
    entries = []
    for name in names:
        if name.endswith("/"):
            entries.append(Entry(path / name.rstrip("/"), KIND_DIRECTORY))
        else:
            entries.append(Entry(path / name, KIND_FILE))
    return msg.DirectoryRead(session_info=SessionInfo(0, path), entries=tuple(entries), navigated_to=False)


def _model(*names: str) -> Model:
    model = Model.create(ROOT, TerminalDimensions(width=100, height=40))
    update(model, _listing(ROOT, *names))
    return model


class NavigationUpdateTests(unittest.TestCase):
    def test_navigate_into_directory_emits_read(self) -> None:
        model = _model("src/", "a.txt")

        commands = update(model, msg.NavigateIntoDir())

        self.assertEqual(commands, [ReadDir(SessionInfo(0, ROOT / "src"), navigated_to=True)])

    def test_navigate_into_file_does_nothing(self) -> None:
        model = _model("a.txt")
        self.assertEqual(update(model, msg.NavigateIntoDir()), [])

    def test_navigate_out_emits_parent_read(self) -> None:
        model = _model("a.txt")
        commands = update(model, msg.NavigateOutOfDir())
        self.assertEqual(commands, [ReadDir(SessionInfo(0, Path("/")), navigated_to=True)])

    def test_navigate_out_of_root_reports_error(self) -> None:
        model = Model.create(Path("/"), TerminalDimensions(width=100, height=40))

        commands = update(model, msg.NavigateOutOfDir())

        self.assertEqual(commands, [])
        self.assertEqual(model.user_message.kind, MESSAGE_ERROR)
        self.assertEqual(model.user_message.text, "no parent found")

    def test_selection_messages_move_cursor(self) -> None:
        model = _model("a", "b", "c")
        update(model, msg.SelectLast())
        self.assertEqual(model.current_session.selected, 2)
        update(model, msg.SelectPrevious())
        self.assertEqual(model.current_session.selected, 1)
        update(model, msg.SelectFirst())
        self.assertEqual(model.current_session.selected, 0)
        update(model, msg.SelectNext())
        self.assertEqual(model.current_session.selected, 1)


class FileOperationUpdateTests(unittest.TestCase):
    def test_copy_without_marks_does_nothing(self) -> None:
        model = _model("a")
        self.assertEqual(update(model, msg.CopyMarkedItems()), [])
        self.assertIsNone(model.user_message)

    def test_copy_targets_current_session_directory(self) -> None:
        model = _model("b", "a")
        update(model, msg.MarkPath())
        update(model, msg.MarkPath())
        target = Path("/target")
        update(model, msg.GoToNextSession())
        update(
            model,
            msg.DirectoryRead(SessionInfo(1, target), entries=(), navigated_to=True),
        )

        commands = update(model, msg.CopyMarkedItems())

        expected = CopyOperation(
            items=(Entry(ROOT / "a", KIND_FILE), Entry(ROOT / "b", KIND_FILE)),
            destination=target,
        )
        self.assertEqual(commands, [RunFileOperation(operation=expected)])
        self.assertEqual(model.user_message.text, "copying 2 items...")

    def test_move_emits_move_operation(self) -> None:
        model = _model("a")
        update(model, msg.MarkPath())

        commands = update(model, msg.MoveMarkedItems())

        self.assertEqual(len(commands), 1)
        self.assertIsInstance(commands[0].operation, MoveOperation)
        self.assertEqual(model.user_message.text, "moving 1 item...")

    def test_finished_operation_clears_marks_and_refreshes_sessions(self) -> None:
        model = _model("a")
        update(model, msg.MarkPath())
        update(model, msg.GoToSession(2))
        other = Path("/other")
        update(model, msg.DirectoryRead(SessionInfo(2, other), entries=(), navigated_to=True))

        commands = update(model, msg.FileOperationFinished(verb="copy", count=1))

        self.assertEqual(model.marked, set())
        self.assertEqual(model.user_message.kind, MESSAGE_INFO)
        self.assertEqual(model.user_message.text, "copied 1 item")
        self.assertEqual(
            commands,
            [
                ReadDir(SessionInfo(0, ROOT), navigated_to=False),
                ReadDir(SessionInfo(2, other), navigated_to=False),
            ],
        )

    def test_failed_operation_reports_error(self) -> None:
        model = _model("a")
        update(model, msg.MarkPath())

        update(model, msg.FileOperationFinished(verb="move", count=1, error="couldn't move a: denied"))

        self.assertEqual(model.user_message.kind, MESSAGE_ERROR)
        self.assertEqual(model.user_message.text, "couldn't move a: denied")
        self.assertEqual(model.marked, set())


class MiscUpdateTests(unittest.TestCase):
    def test_reading_dir_failed_sets_error(self) -> None:
        model = _model()
        update(model, msg.ReadingDirFailed(error="permission denied"))
        self.assertEqual(model.user_message.text, "reading directory failed: permission denied")

    def test_resize_updates_dimensions(self) -> None:
        model = _model()
        update(model, msg.TerminalResize(width=40, height=10))
        self.assertTrue(model.terminal_too_small)
        self.assertEqual((model.dimensions.width, model.dimensions.height), (40, 10))

    def test_help_and_back(self) -> None:
        model = _model()
        update(model, msg.GoToPane(PANE_HELP))
        self.assertEqual(model.active_pane, PANE_HELP)
        update(model, msg.GoBackOrQuit())
        self.assertEqual(model.active_pane, PANE_EXPLORER)
        self.assertEqual(model.running_state, RUNNING)

    def test_quit_immediately(self) -> None:
        model = _model("a")
        update(model, msg.MarkPath())
        update(model, msg.QuitImmediately())
        self.assertEqual(model.running_state, DONE)

    def test_unknown_message_raises(self) -> None:
        with self.assertRaises(TypeError):
            update(_model(), object())  # type: ignore[arg-type]

    def test_every_update_ages_the_user_message(self) -> None:
        model = _model()
        model.user_message = UserMessage.info("hi")
        for _ in range(4):
            update(model, msg.SelectNext())
        self.assertIsNotNone(model.user_message)
        self.assertEqual(model.user_message.frames_left, 0)
        update(model, msg.SelectNext())
        self.assertIsNone(model.user_message)


class ScenarioTests(unittest.TestCase):
    def test_clamped_cursor_then_enter_subdirectory(self) -> None:
        model = Model.create(ROOT, TerminalDimensions(width=100, height=40))
        subdir = ROOT / "subdir"
        model.sessions[0] = Session(
            path=ROOT,
            items=[EntryItem(Entry(ROOT / "a.txt", KIND_FILE)), EntryItem(Entry(subdir, KIND_DIRECTORY))],
            selected=0,
        )

        update(model, msg.SelectNext())
        update(model, msg.SelectNext())
        self.assertEqual(model.current_session.selected, 1)

        commands = update(model, msg.NavigateIntoDir())
        self.assertEqual(commands, [ReadDir(SessionInfo(0, subdir), navigated_to=True)])

        update(
            model,
            msg.DirectoryRead(
                SessionInfo(0, subdir),
                entries=(Entry(subdir / "z.txt", KIND_FILE), Entry(subdir / "inner", KIND_DIRECTORY)),
                navigated_to=True,
            ),
        )
        self.assertEqual(model.current_session.path, subdir)
        self.assertEqual([item.entry.name for item in model.current_session.items], ["inner", "z.txt"])
        self.assertEqual(model.current_session.selected, 0)
        self.assertEqual(model.last_selections, {ROOT: subdir})

    def test_mark_copy_and_refresh_round(self) -> None:
        model = _model("docs/", "a.txt")
        update(model, msg.SelectNext())
        update(model, msg.MarkPath())
        self.assertEqual(model.marked, {Entry(ROOT / "a.txt", KIND_FILE)})

        commands = update(model, msg.NavigateOutOfDir())
        self.assertEqual(commands, [ReadDir(SessionInfo(0, Path("/")), navigated_to=True)])
        update(
            model,
            msg.DirectoryRead(
                SessionInfo(0, Path("/")),
                entries=(Entry(ROOT, KIND_DIRECTORY),),
                navigated_to=True,
            ),
        )
        self.assertEqual(model.current_session.path, Path("/"))

        commands = update(model, msg.CopyMarkedItems())
        self.assertEqual(
            commands,
            [
                RunFileOperation(
                    CopyOperation(items=(Entry(ROOT / "a.txt", KIND_FILE),), destination=Path("/"))
                )
            ],
        )

        commands = update(model, msg.FileOperationFinished(verb="copy", count=1))
        self.assertEqual(commands, [ReadDir(SessionInfo(0, Path("/")), navigated_to=False)])
        self.assertEqual(model.marked, set())

        commands = update(model, msg.NavigateIntoDir())
        self.assertEqual(commands, [ReadDir(SessionInfo(0, ROOT), navigated_to=True)])
        update(model, _listing_navigated(ROOT, "docs/", "a.txt"))
        self.assertEqual(model.current_session.selected, 1)


def _listing_navigated(path: Path, *names: str) -> msg.DirectoryRead:
    listing = _listing(path, *names)
    return msg.DirectoryRead(listing.session_info, listing.entries, navigated_to=True)


if __name__ == "__main__":
    unittest.main()
