"""Note domain logic - in-memory store, no I/O."""

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Note:
    """A note. Never mutated after creation."""

    id: int
    text: str


class NoteStore:
    """
    Ordered list of notes, most recently added first.

    Identifiers start at 1 and are never reused. Blank text is rejected
    without consuming an identifier.
    """

    def __init__(self):
        self.next_id = 1
        self._notes: list[Note] = []

    def add_note(self, text: str) -> Note | None:
        """Add a note. Returns None if the text is blank."""
        if not text.strip():
            logger.debug("Skipping blank note")
            return None
        note = Note(id=self.next_id, text=text)
        self.next_id += 1
        self._notes.insert(0, note)
        logger.debug(f"Added note #{note.id}")
        return note

    def list_notes(self) -> tuple[Note, ...]:
        return tuple(self._notes)

    def __len__(self) -> int:
        return len(self._notes)
