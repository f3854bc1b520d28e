"""Tab navigation - which screen is visible and how it fades in."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator

logger = logging.getLogger(__name__)

DEFAULT_FADE_MS = 400


class Tab(Enum):
    """The three top-level screens. Values are the route names."""

    NOTES = "notes"
    TASKS = "tasks"
    CALENDAR = "calendar"

    @property
    def title(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, name: str) -> "Tab":
        """Look up a tab by route or member name, case-insensitively."""
        key = name.strip().lower()
        for tab in cls:
            if tab.value == key:
                return tab
        valid = ", ".join(t.value for t in cls)
        raise ValueError(f"Unknown tab '{name}' (expected one of: {valid})")


@dataclass(frozen=True)
class Transition:
    """
    A fade between two screens.

    The entering screen goes from fully transparent to fully opaque over
    duration_ms; the leaving screen does the reverse. A zero duration is
    an immediate cut.
    """

    from_tab: Tab
    to_tab: Tab
    kind: str = "fade"
    duration_ms: int = DEFAULT_FADE_MS

    def enter_opacity(self, elapsed_ms: float) -> float:
        if self.duration_ms <= 0:
            return 1.0
        progress = elapsed_ms / self.duration_ms
        return min(1.0, max(0.0, progress))

    def exit_opacity(self, elapsed_ms: float) -> float:
        return 1.0 - self.enter_opacity(elapsed_ms)

    def frames(self, steps: int = 4) -> Iterator[float]:
        """Evenly spaced enter opacities, ending fully opaque."""
        if self.duration_ms <= 0 or steps < 1:
            yield 1.0
            return
        for i in range(1, steps + 1):
            yield self.enter_opacity(self.duration_ms * i / steps)


TransitionListener = Callable[[Transition], None]


class Router:
    """
    Holds the current tab, one tab at a time.

    Re-selecting the current tab does nothing. Back from any other tab
    returns to the start tab; back from the start tab is left to the caller.
    """

    def __init__(self, initial_tab: Tab = Tab.NOTES, fade_duration_ms: int = DEFAULT_FADE_MS):
        self.start_tab = initial_tab
        self.fade_duration_ms = fade_duration_ms
        self._current = initial_tab
        self._listeners: list[TransitionListener] = []

    def current_tab(self) -> Tab:
        return self._current

    def add_listener(self, listener: TransitionListener) -> None:
        """Register a callable that plays transitions."""
        self._listeners.append(listener)

    def select_tab(self, tab: Tab) -> Transition | None:
        """Switch to tab. Returns the transition, or None if already there."""
        if tab is self._current:
            return None

        transition = Transition(
            from_tab=self._current,
            to_tab=tab,
            duration_ms=self.fade_duration_ms,
        )
        self._current = tab
        logger.info(f"Tab {transition.from_tab.value} -> {transition.to_tab.value}")

        for listener in self._listeners:
            listener(transition)
        return transition

    def back(self) -> Transition | None:
        """Go back to the start tab. Returns None if already on it."""
        return self.select_tab(self.start_tab)
