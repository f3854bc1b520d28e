"""Pure screen rendering - turns session state into markdown text."""

from typing import Callable

from .notes import Note
from .router import Tab
from .tasks import Task

CALENDAR_PLACEHOLDER = "Static placeholder (demo)"

Escape = Callable[[str], str]


def _verbatim(text: str) -> str:
    return text


def format_note_card(note: Note, escape: Escape = _verbatim) -> str:
    return f"**Note #{note.id}**\n{escape(note.text)}"


def format_task_row(task: Task, escape: Escape = _verbatim) -> str:
    """
    Format a single task row.

    Pure function - no I/O. Shows the title, its status and the action
    that toggling would perform. `escape` is applied to the user's title
    only, for front ends that interpret markdown.
    """
    return f"- [{task.id}] {escape(task.title)} ({task.status_label}) [{task.action_label}]"


def render_notes(notes: tuple[Note, ...] | list[Note], escape: Escape = _verbatim) -> str:
    body = "\n\n".join(format_note_card(n, escape) for n in notes) or "No notes yet."
    return f"## {Tab.NOTES.title}\n\n{body}"


def render_tasks(tasks: tuple[Task, ...] | list[Task], escape: Escape = _verbatim) -> str:
    body = "\n".join(format_task_row(t, escape) for t in tasks) or "No tasks yet."
    return f"## {Tab.TASKS.title}\n\n{body}"


def render_calendar() -> str:
    return f"## {Tab.CALENDAR.title}\n\n{CALENDAR_PLACEHOLDER}"


def render_screen(session, escape: Escape = _verbatim) -> str:
    """Render whichever screen the session's router is showing."""
    tab = session.current_tab
    if tab is Tab.NOTES:
        return render_notes(session.notes.list_notes(), escape)
    if tab is Tab.TASKS:
        return render_tasks(session.tasks.list_tasks(), escape)
    return render_calendar()


def format_tab_bar(current: Tab) -> str:
    """Bottom navigation bar, with the active tab marked."""
    return "  ".join(f"[• {t.title}]" if t is current else f"[{t.title}]" for t in Tab)
