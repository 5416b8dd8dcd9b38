from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from notelist.collection import NoteCollection
from notelist.notes import Note


class TickingClock:
    """Returns a time one second later on every call."""

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        now = self.current
        self.current = now + timedelta(seconds=1)
        return now


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture
def confirmed() -> list[str]:
    return []


@pytest.fixture
def notes(clock: TickingClock, confirmed: list[str]) -> NoteCollection:
    def record(note: Note) -> None:
        confirmed.append(note.title)

    return NoteCollection(clock=clock, confirm=record)
