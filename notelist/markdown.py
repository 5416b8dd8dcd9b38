from __future__ import annotations

from markdown_it import MarkdownIt
from mdit_py_plugins.footnote import footnote_plugin
from mdit_py_plugins.tasklists import tasklists_plugin

from .notes import Note

EXCERPT_LEN = 160


def excerpt(text: str, limit: int = EXCERPT_LEN) -> str:
    flat = (text or "").strip().replace("\n", " ")
    if len(flat) > limit:
        flat = flat[:limit] + "…"
    return flat


class MarkdownRenderer:
    """Renders note content as HTML. Raw HTML inside a note is escaped."""

    def __init__(self) -> None:
        self._md = (
            MarkdownIt("commonmark", {"html": False, "typographer": True})
            .use(tasklists_plugin, enabled=True)
            .use(footnote_plugin)
        )

    def render(self, text: str) -> str:
        return self._md.render(text or "")

    def render_note(self, note: Note) -> str:
        return self.render(note.content)
