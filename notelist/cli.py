from __future__ import annotations

import argparse
import logging
from typing import Iterable

import uvicorn

from .collection import NoteCollection
from .config import load_settings
from .notes import Note


def format_note(note: Note) -> str:
    return (
        f"[{note.id}] {note.title} ({note.status.value}, {note.variant.value}) "
        f"created {note.created_at.isoformat(timespec='seconds')}: {note.content}"
    )


def _print_notes(heading: str, notes: Iterable[Note]) -> None:
    print(heading)
    for n in notes:
        print("  " + format_note(n))


def run_demo(notes: NoteCollection | None = None) -> NoteCollection:
    notes = notes if notes is not None else NoteCollection()

    notes.add_note("Buy groceries", "Buy milk, eggs, and bread.")
    notes.add_note("Walk the dog", "Take the dog for a walk in the park.", confirmable=True)
    _print_notes("All notes:", notes.get_all_notes())

    notes.edit_note(1, "Buy groceries", "Buy milk, eggs, bread, and bananas.")
    notes.complete_note(1)

    _print_notes("Sorted by status:", notes.sort_notes_by_status())
    _print_notes("Newest first:", notes.sort_notes_by_creation_time())
    _print_notes('Matching "dog":', notes.search_notes("dog"))
    print(f"Pending: {notes.get_pending_notes_count()}")
    return notes


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="notelist", description="notelist - in-memory note list.")
    sub = parser.add_subparsers(dest="cmd", required=True)

    run = sub.add_parser("run", help="Run the web server")
    run.add_argument("--host", default=None, help="Bind host (override NOTELIST_HOST)")
    run.add_argument("--port", type=int, default=None, help="Bind port (override NOTELIST_PORT)")

    sub.add_parser("demo", help="Walk through adding, editing, completing and searching notes")

    args = parser.parse_args(argv)
    try:
        settings = load_settings()
    except ValueError as e:
        parser.error(str(e))

    logging.basicConfig(level=settings.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    if args.cmd == "demo":
        run_demo()
        return

    host = args.host or settings.host
    port = args.port or settings.port

    uvicorn.run("notelist.web:app", host=host, port=port, reload=False, log_level=settings.log_level)
