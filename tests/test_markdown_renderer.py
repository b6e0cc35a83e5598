# tests/test_markdown_renderer.py
from quiz_runner.core.markdown_renderer import MarkdownRenderer, renderer


def test_render_fragment_emphasis():
    html = renderer.render_fragment("Which is **largest**?")
    assert "<strong>largest</strong>" in html
    assert html.startswith("<p>")


def test_render_fragment_empty():
    assert renderer.render_fragment("   ") == "<p><em>No content provided.</em></p>"


def test_raw_html_is_escaped():
    html = renderer.render_fragment("<script>alert(1)</script>")
    assert "<script>" not in html



def test_html_passthrough_when_enabled():
    html = MarkdownRenderer(enable_html=True).render_fragment("<div>kept</div>")
    assert "<div>kept</div>" in html
