"""Tests for the session and screen rendering."""

import pytest

from dailyhub.config import Config
from dailyhub.core.notes import Note
from dailyhub.core.router import Tab
from dailyhub.core.screens import (
    CALENDAR_PLACEHOLDER,
    format_tab_bar,
    format_task_row,
    render_calendar,
    render_notes,
    render_screen,
    render_tasks,
)
from dailyhub.core.session import Session
from dailyhub.core.tasks import Task, TaskNotFoundError


@pytest.fixture
def session():
    return Session()


class TestSession:
    def test_starts_empty_on_notes(self, session):
        assert session.current_tab is Tab.NOTES
        assert session.notes.list_notes() == ()
        assert session.tasks.list_tasks() == ()

    def test_switching_tabs_keeps_store_contents(self, session):
        session.notes.add_note("Buy milk")
        session.tasks.add_task("Call mom")
        for tab in [Tab.TASKS, Tab.CALENDAR, Tab.NOTES, Tab.TASKS]:
            session.router.select_tab(tab)
        assert session.notes.list_notes() == (Note(1, "Buy milk"),)
        assert session.tasks.list_tasks() == (Task(1, "Call mom"),)

    def test_sessions_are_independent(self):
        a, b = Session(), Session()
        a.notes.add_note("only in a")
        assert b.notes.list_notes() == ()

    def test_from_config(self):
        config = Config(initial_tab="calendar", fade_duration_ms=0, strict_toggle=True)
        session = Session.from_config(config)
        assert session.current_tab is Tab.CALENDAR
        assert session.router.select_tab(Tab.NOTES).duration_ms == 0
        with pytest.raises(TaskNotFoundError):
            session.tasks.toggle_task(1)


class TestScreens:
    def test_empty_notes(self):
        assert render_notes([]) == "## Notes\n\nNo notes yet."

    def test_notes_cards(self):
        text = render_notes([Note(2, "second"), Note(1, "first")])
        assert "**Note #2**\nsecond" in text
        assert text.index("Note #2") < text.index("Note #1")

    def test_empty_tasks(self):
        assert render_tasks([]) == "## Tasks\n\nNo tasks yet."

    def test_task_row(self):
        assert format_task_row(Task(3, "Pay bills")) == "- [3] Pay bills (Pending) [Check]"
        assert format_task_row(Task(3, "Pay bills", True)) == "- [3] Pay bills (Done) [Uncheck]"

    def test_calendar_placeholder(self):
        assert render_calendar() == f"## Calendar\n\n{CALENDAR_PLACEHOLDER}"

    def test_render_screen_follows_router(self, session):
        session.tasks.add_task("Call mom")
        assert render_screen(session).startswith("## Notes")
        session.router.select_tab(Tab.TASKS)
        assert "Call mom" in render_screen(session)
        session.router.select_tab(Tab.CALENDAR)
        assert CALENDAR_PLACEHOLDER in render_screen(session)

    def test_tab_bar_marks_current(self):
        assert format_tab_bar(Tab.TASKS) == "[Notes]  [• Tasks]  [Calendar]"
