from __future__ import annotations

from datetime import datetime
from typing import Callable, Iterator

from . import notes as _notes
from .notes import ConfirmHook, Note, NoteStatus, NoteVariant, utc_now


class NoteCollection:
    """Ordered, in-memory set of notes plus the id counter that names them.

    Lookups by id that find nothing are not errors: mutators do nothing and
    ``get_note_by_id`` returns ``None``. Only empty titles or contents raise,
    as ``ValidationError``.
    """

    def __init__(
        self,
        clock: Callable[[], datetime] | None = None,
        confirm: ConfirmHook | None = None,
    ) -> None:
        self._notes: list[Note] = []
        self._next_id = 1
        self._clock = clock or utc_now
        self._confirm = confirm

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        return len(self._notes)

    def __iter__(self) -> Iterator[Note]:
        return iter(list(self._notes))

    # ---- mutators ----

    def add_note(self, title: str, content: str, confirmable: bool = False) -> Note:
        variant = NoteVariant.CONFIRMABLE if confirmable else NoteVariant.STANDARD
        # create_note validates, so a rejected note never consumes an id
        note = _notes.create_note(self._next_id, title, content, variant=variant, now=self._clock())
        self._next_id += 1
        self._notes.append(note)
        return note

    def delete_note(self, note_id: int) -> None:
        self._notes = [n for n in self._notes if n.id != note_id]

    def edit_note(self, note_id: int, title: str, content: str) -> None:
        note = self.get_note_by_id(note_id)
        if note is not None:
            _notes.edit_note(note, title, content, confirm=self._confirm, now=self._clock())

    def complete_note(self, note_id: int) -> None:
        note = self.get_note_by_id(note_id)
        if note is not None:
            _notes.complete_note(note)

    # ---- readers ----

    def get_note_by_id(self, note_id: int) -> Note | None:
        for n in self._notes:
            if n.id == note_id:
                return n
        return None

    def get_all_notes(self) -> list[Note]:
        return list(self._notes)

    def get_pending_notes(self) -> list[Note]:
        return [n for n in self._notes if n.status is NoteStatus.PENDING]

    def get_completed_notes(self) -> list[Note]:
        return [n for n in self._notes if n.status is NoteStatus.COMPLETED]

    def get_notes_count(self) -> int:
        return len(self._notes)

    def get_pending_notes_count(self) -> int:
        return len(self.get_pending_notes())

    def get_completed_notes_count(self) -> int:
        return len(self.get_completed_notes())

    def search_notes(self, query: str) -> list[Note]:
        return [n for n in self._notes if query in n.title or query in n.content]

    def sort_notes_by_status(self) -> list[Note]:
        # Alphabetical on the label, so "completed" sorts before "pending".
        return sorted(self._notes, key=lambda n: n.status.value)

    def sort_notes_by_creation_time(self) -> list[Note]:
        return sorted(self._notes, key=lambda n: n.created_at, reverse=True)
