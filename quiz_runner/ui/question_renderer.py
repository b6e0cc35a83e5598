"""Question rendering utilities for displaying quiz questions."""

from __future__ import annotations

from quiz_runner.core.markdown_renderer import renderer


def option_letter(index: int) -> str:
    return chr(ord("A") + index)


def render_question_html(question_text: str, font_size: int = 16) -> str:
    """Render question text as rich text for a QLabel.

    Args:
        question_text: The question text (supports Markdown)
        font_size: Font size in points for the question text

    Returns:
        HTML string ready for display in a rich-text label
    """
    fragment = renderer.render_fragment(question_text or "(No question text)")
    return f'<div style="font-size: {font_size}pt; font-weight: 600;">{fragment}</div>'


def render_option_caption(index: int, option_text: str) -> str:
    """Plain-text caption for an option button, e.g. ``"C.  Paris"``."""
    return f"{option_letter(index)}.  {option_text or '(empty)'}"
