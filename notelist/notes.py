from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Callable

logger = logging.getLogger(__name__)


class ValidationError(ValueError):
    pass


class NoteStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"


class NoteVariant(str, Enum):
    STANDARD = "standard"
    CONFIRMABLE = "confirmable"


@dataclass
class Note:
    id: int
    title: str
    content: str
    created_at: datetime
    updated_at: datetime
    status: NoteStatus = NoteStatus.PENDING
    variant: NoteVariant = NoteVariant.STANDARD

    @property
    def is_pending(self) -> bool:
        return self.status is NoteStatus.PENDING

    @property
    def is_completed(self) -> bool:
        return self.status is NoteStatus.COMPLETED


ConfirmHook = Callable[[Note], None]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _validate(title: str, content: str) -> None:
    if not title or not content:
        raise ValidationError("Title and content cannot be empty.")


def announce_edit(note: Note) -> None:
    logger.info('Confirm changes to note: "%s"? (Y/N)', note.title)


def create_note(
    note_id: int,
    title: str,
    content: str,
    variant: NoteVariant = NoteVariant.STANDARD,
    now: datetime | None = None,
) -> Note:
    _validate(title, content)
    ts = now or utc_now()
    return Note(id=note_id, title=title, content=content, created_at=ts, updated_at=ts, variant=variant)


def edit_note(
    note: Note,
    title: str,
    content: str,
    confirm: ConfirmHook | None = None,
    now: datetime | None = None,
) -> None:
    """Replace title and content, refreshing ``updated_at``.

    Confirmable notes fire the confirmation hook with the note as it stands
    before the edit. The hook only notifies and never gates the edit.
    """
    if note.variant is NoteVariant.CONFIRMABLE:
        (confirm or announce_edit)(note)
    _validate(title, content)
    note.title = title
    note.content = content
    note.updated_at = now or utc_now()


def complete_note(note: Note) -> None:
    note.status = NoteStatus.COMPLETED
