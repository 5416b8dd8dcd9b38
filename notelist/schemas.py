from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from .notes import NoteStatus, NoteVariant


class NoteOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    content: str
    status: NoteStatus
    variant: NoteVariant
    created_at: datetime
    updated_at: datetime


class NoteCreate(BaseModel):
    title: str
    content: str
    confirmable: bool = False


class NoteEdit(BaseModel):
    title: str
    content: str


class NoteStats(BaseModel):
    total: int
    pending: int
    completed: int
