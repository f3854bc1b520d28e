"""Task domain logic - in-memory store, no I/O."""

import logging
from dataclasses import dataclass, replace

logger = logging.getLogger(__name__)


class TaskNotFoundError(LookupError):
    """Raised by a strict TaskStore when toggling an unknown task."""


@dataclass(frozen=True)
class Task:
    """A task with a done flag."""

    id: int
    title: str
    done: bool = False

    @property
    def status_label(self) -> str:
        return "Done" if self.done else "Pending"

    @property
    def action_label(self) -> str:
        """Label for the button that toggles this task."""
        return "Uncheck" if self.done else "Check"


class TaskStore:
    """
    Ordered list of tasks, most recently added first.

    By default toggling an unknown id is a silent no-op. With strict=True
    it raises TaskNotFoundError instead.
    """

    def __init__(self, strict: bool = False):
        self.strict = strict
        self.next_id = 1
        self._tasks: list[Task] = []

    def add_task(self, title: str) -> Task | None:
        """Add a pending task. Returns None if the title is blank."""
        if not title.strip():
            logger.debug("Skipping blank task")
            return None
        task = Task(id=self.next_id, title=title)
        self.next_id += 1
        self._tasks.insert(0, task)
        logger.debug(f"Added task #{task.id}")
        return task

    def toggle_task(self, task_id: int) -> Task | None:
        """
        Flip the done flag of a task.

        Returns the updated task, or None if no task has that id (unless
        the store is strict, in which case TaskNotFoundError is raised).
        """
        # Linear scan; lists stay small.
        for idx, task in enumerate(self._tasks):
            if task.id == task_id:
                toggled = replace(task, done=not task.done)
                self._tasks[idx] = toggled
                logger.debug(f"Toggled task #{task_id} -> {toggled.status_label}")
                return toggled

        if self.strict:
            raise TaskNotFoundError(f"No task with id {task_id}")
        logger.debug(f"Ignoring toggle for unknown task #{task_id}")
        return None

    def get_task(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def list_tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def pending_count(self) -> int:
        return sum(1 for t in self._tasks if not t.done)

    def __len__(self) -> int:
        return len(self._tasks)
