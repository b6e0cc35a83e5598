"""Qt UI components for the quiz runner."""

from .question_renderer import render_option_caption, render_question_html
from .quiz_window import QuizWindow

__all__ = [
    "QuizWindow",
    "render_option_caption",
    "render_question_html",
]
