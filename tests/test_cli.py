from __future__ import annotations

import pytest

from notelist import cli
from notelist.collection import NoteCollection


def test_run_demo(notes: NoteCollection, capsys: pytest.CaptureFixture[str]):
    cli.run_demo(notes)
    out = capsys.readouterr().out

    assert "All notes:" in out
    assert 'Matching "dog":\n  [2] Walk the dog' in out
    assert out.rstrip().endswith("Pending: 1")
    assert notes.get_note_by_id(1).content == "Buy milk, eggs, bread, and bananas."


def test_demo_command(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]):
    monkeypatch.delenv("NOTELIST_LOG_LEVEL", raising=False)
    cli.main(["demo"])
    assert "Pending: 1" in capsys.readouterr().out


def test_run_command_passes_settings_to_uvicorn(monkeypatch: pytest.MonkeyPatch):
    calls: list[tuple] = []
    monkeypatch.setattr(cli.uvicorn, "run", lambda *a, **kw: calls.append((a, kw)))
    monkeypatch.setenv("NOTELIST_PORT", "9001")
    cli.main(["run", "--host", "0.0.0.0"])
    (args, kwargs), = calls
    assert args == ("notelist.web:app",)
    assert kwargs["host"] == "0.0.0.0"
    assert kwargs["port"] == 9001


def test_bad_config_is_a_usage_error(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("NOTELIST_PORT", "nope")
    with pytest.raises(SystemExit) as exc:
        cli.main(["demo"])
    assert exc.value.code == 2


def test_format_note(notes: NoteCollection):
    note = notes.add_note("A", "body")
    assert cli.format_note(note) == "[1] A (pending, standard) created 2024-01-15T12:00:00+00:00: body"
