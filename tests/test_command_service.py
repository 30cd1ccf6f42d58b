"""Tests for CommandService."""

from datetime import datetime
from pathlib import Path
from unittest.mock import patch

import pytest

from todoplus.config import init_runtime, is_timer_enabled
from todoplus.config.settings import Settings
from todoplus.host import FileHost
from todoplus.models import Position, Selection, Severity
from todoplus.services import CommandService
from todoplus.services.command_service import APPLY_FAILED_MESSAGE, UNSUPPORTED_MESSAGE

NOW = datetime(2024, 1, 1, 12, 0)


def clock() -> datetime:
    return NOW


def make_service(lines: list[str], selections: list[Selection], path: Path | None = None) -> tuple[CommandService, FileHost]:
    host = FileHost(path=path, lines=lines, selections=selections, write=False)
    return CommandService(host, clock=clock), host


class TestToggleCommands:
    """Tests for the toggle commands."""

    def test_toggle_done_skips_non_todos(self):
        """Projects and comments are reported once and the todo still changes."""
        service, host = make_service(
            ["Project:", "  ☐ Todo", "plain text"], [Selection.lines(0, 2)]
        )

        batch = service.toggle_done()

        assert batch is not None
        assert len(batch.edits) == 1
        assert host.get_lines() == ["Project:", "  ✔ Todo @done(2024-01-01 12:00)", "plain text"]
        assert [n.message for n in host.notifications] == ["Only todos can perform this action"]
        assert host.notifications[0].severity == Severity.ERROR

    def test_multiple_selections(self):
        """Every selected todo is toggled in one batch."""
        service, host = make_service(
            ["☐ A", "☐ B", "☐ C"], [Selection.caret(0), Selection.caret(2)]
        )
        service.toggle_cancelled()
        assert host.get_lines() == [
            "✘ A @cancelled(2024-01-01 12:00)",
            "☐ B",
            "✘ C @cancelled(2024-01-01 12:00)",
        ]
        assert host.notifications == []

    def test_overlapping_selections_toggle_once(self):
        """A line covered twice is only toggled once."""
        service, host = make_service(["☐ A"], [Selection.caret(0), Selection.caret(0, 2)])
        service.toggle_box()
        assert host.get_lines() == ["✔ A @done(2024-01-01 12:00)"]

    def test_caret_moves_before_new_tag(self):
        """The caret at the end of the line lands before the inserted tag."""
        service, host = make_service(["☐ Task"], [Selection.caret(0, 6)])
        service.toggle_done()
        assert host.get_selections() == [Selection.caret(0, 7)]

    def test_nothing_selected_is_todo(self):
        """Only non-todos selected gives one notification and no batch."""
        service, host = make_service(["Project:", "text"], [Selection.lines(0, 1)])
        assert service.toggle_done() is None
        assert len(host.notifications) == 1

    def test_unsupported_document(self, tmp_path: Path):
        """Non-todo files are refused."""
        service, host = make_service(["☐ Task"], [Selection.caret(0)], path=tmp_path / "notes.md")
        assert service.toggle_done() is None
        assert host.notifications[0].message == UNSUPPORTED_MESSAGE
        assert host.get_lines() == ["☐ Task"]

    def test_apply_failure_reported(self):
        """A host refusing the batch leaves a notification."""
        service, host = make_service(["☐ Task"], [Selection.caret(0)])
        with patch.object(host, "apply_edits", return_value=False) as mock_apply:
            assert service.toggle_done() is None
        mock_apply.assert_called_once()
        assert host.notifications[-1].message == APPLY_FAILED_MESSAGE
        assert host.get_selections() == [Selection.caret(0)]


class TestToggleStart:
    """Tests for the start command."""

    def test_start_open_todo(self):
        """An open todo gets a started tag."""
        service, host = make_service(["☐ Task"], [Selection.caret(0)])
        service.toggle_start()
        assert host.get_lines() == ["☐ Task @started(2024-01-01 12:00)"]

    def test_finished_todos_filtered(self):
        """Done todos can't be started and are reported."""
        service, host = make_service(
            ["✔ Done @done(2024-01-01 10:00)", "☐ Open"], [Selection.lines(0, 1)]
        )
        service.toggle_start()
        assert host.get_lines()[0] == "✔ Done @done(2024-01-01 10:00)"
        assert host.get_lines()[1] == "☐ Open @started(2024-01-01 12:00)"
        assert [n.message for n in host.notifications] == ["Only not done/cancelled todos can be started"]

    def test_start_on_comment(self):
        """Starting a comment reports the start-specific message."""
        service, host = make_service(["Project:", "note"], [Selection.caret(1)])
        assert service.toggle_start() is None
        assert [n.message for n in host.notifications] == ["Only todos can be started"]


class TestTimer:
    """Tests for toggle_timer()."""

    def test_toggle_timer(self):
        """The timer flag flips and the user is told."""
        init_runtime(Settings(timer=True))
        service, host = make_service([], [Selection.caret(0)])

        assert service.toggle_timer() is False
        assert not is_timer_enabled()
        assert service.toggle_timer() is True
        assert [n.message for n in host.notifications] == ["Timer disabled", "Timer enabled"]


class TestArchiveCommand:
    """Tests for the archive command."""

    def test_archive(self):
        """Finished todos are moved to the archive project."""
        service, host = make_service(["☐ A", "✔ B @done(2024-01-01 10:00)"], [Selection.caret(0)])
        assert service.archive() is True
        assert host.get_lines() == ["☐ A", "", "Archive:", "  ✔ B @done(2024-01-01 10:00)"]

    def test_nothing_to_archive(self):
        """Nothing finished means nothing changes."""
        service, host = make_service(["☐ A"], [Selection.caret(0)])
        assert service.archive() is False
        assert host.get_lines() == ["☐ A"]


class TestExportCommand:
    """Tests for the export command."""

    def test_export_opens_buffer(self):
        """The HTML is handed to the host as a new buffer."""
        service, host = make_service(["☐ Task"], [Selection.caret(0)])
        content = service.export_html()
        assert host.buffers == [content]
        assert "☐ Task<br>" in content


class TestRevealTodo:
    """Tests for reveal_todo()."""

    def test_reveal_selects_text(self, tmp_path: Path):
        """The todo's text is selected in the opened file."""
        todo_file = tmp_path / "TODO"
        todo_file.write_text("Work:\n  ☐ Call Bob\n", encoding="utf-8")
        service, host = make_service([], [Selection.caret(0)])

        service.reveal_todo(todo_file, 1, "Call Bob")

        location = host.opened[-1]
        assert location.path == todo_file
        assert location.line_number == 1
        assert (location.start_col, location.end_col) == (4, 12)

    def test_reveal_missing_file(self, tmp_path: Path):
        """Unreadable files are reported."""
        service, host = make_service([], [Selection.caret(0)])
        service.reveal_todo(tmp_path / "missing.todo", 0)
        assert host.opened == []
        assert host.notifications[0].severity == Severity.ERROR


def test_position_model_rejects_negative():
    """Positions are zero-based and non-negative."""
    with pytest.raises(ValueError):
        Position(line=-1)
