from __future__ import annotations

from notelist.markdown import MarkdownRenderer, excerpt


def test_excerpt_flattens_and_truncates():
    assert excerpt("  one\ntwo  ") == "one two"
    assert excerpt("x" * 200, limit=10) == "x" * 10 + "…"
    assert excerpt("") == ""


def test_render_escapes_raw_html():
    html = MarkdownRenderer().render("- [x] done\n\n<b>bold</b>")
    assert 'type="checkbox"' in html
    assert "&lt;b&gt;" in html
