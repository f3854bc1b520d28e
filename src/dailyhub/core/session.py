"""Application session - owns the stores and router for its lifetime."""

from .notes import NoteStore
from .router import DEFAULT_FADE_MS, Router, Tab
from .tasks import TaskStore


class Session:
    """
    One running app session.

    Built explicitly when the session starts and handed by reference to
    whatever presents it. Switching tabs never touches the stores.
    """

    def __init__(
        self,
        initial_tab: Tab = Tab.NOTES,
        fade_duration_ms: int = DEFAULT_FADE_MS,
        strict_toggle: bool = False,
    ):
        self.notes = NoteStore()
        self.tasks = TaskStore(strict=strict_toggle)
        self.router = Router(initial_tab, fade_duration_ms)

    @classmethod
    def from_config(cls, config) -> "Session":
        return cls(
            initial_tab=Tab.parse(config.initial_tab),
            fade_duration_ms=config.fade_duration_ms,
            strict_toggle=config.strict_toggle,
        )

    @property
    def current_tab(self) -> Tab:
        return self.router.current_tab()
