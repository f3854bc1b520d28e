"""Functional core - in-memory stores and navigation with no I/O."""

from .notes import Note, NoteStore
from .tasks import Task, TaskStore, TaskNotFoundError
from .router import Tab, Transition, Router
from .session import Session
from .screens import render_screen, render_notes, render_tasks, render_calendar, format_tab_bar

__all__ = [
    # Notes
    "Note",
    "NoteStore",
    # Tasks
    "Task",
    "TaskStore",
    "TaskNotFoundError",
    # Navigation
    "Tab",
    "Transition",
    "Router",
    "Session",
    # Screens
    "render_screen",
    "render_notes",
    "render_tasks",
    "render_calendar",
    "format_tab_bar",
]
