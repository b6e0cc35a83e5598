"""Component for answering the current question."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from quiz_runner.constants.quiz_constants import OPTION_COUNT
from quiz_runner.constants.ui_constants import (
    FINISH_QUIZ_BUTTON,
    NEXT_QUESTION_BUTTON,
    QUESTION_HEADER_TEMPLATE,
    RUNNING_SCORE_TEMPLATE,
    TIME_REMAINING_TEMPLATE,
)
from quiz_runner.core.models import SessionSnapshot
from quiz_runner.styling.color_palette import ColorPalette
from quiz_runner.styling.styles import Styles
from quiz_runner.ui.question_renderer import render_option_caption, render_question_html


class QuestionPanel(QWidget):
    """UI component for the in-progress phase of the quiz.

    Holds no quiz state; every label and button is rewritten from the
    snapshot passed to :meth:`show_snapshot`.
    """

    def __init__(
        self,
        on_select_option: Callable[[int], None],
        on_advance: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_select_option = on_select_option
        self.on_advance = on_advance
        self._build_ui()

    def _build_ui(self) -> None:
        outer = QVBoxLayout()
        self.setLayout(outer)

        card = QFrame(self)
        card.setObjectName("card")
        layout = QVBoxLayout()
        card.setLayout(layout)

        header_row = QHBoxLayout()
        header_text = QVBoxLayout()
        self.header_label = QLabel("", card)
        self.header_label.setStyleSheet("font-size: 14pt; font-weight: bold;")
        header_text.addWidget(self.header_label)
        self.category_label = QLabel("", card)
        self.category_label.setStyleSheet(Styles.get_badge_style())
        header_text.addWidget(self.category_label, alignment=Qt.AlignLeft)
        header_row.addLayout(header_text)
        header_row.addStretch()

        self.timer_label = QLabel("", card)
        self.timer_label.setStyleSheet(Styles.get_timer_style(low_time=False))
        header_row.addWidget(self.timer_label)
        layout.addLayout(header_row)

        self.progress_bar = QProgressBar(card)
        self.progress_bar.setRange(0, 100)
        self.progress_bar.setTextVisible(False)
        layout.addWidget(self.progress_bar)

        self.question_label = QLabel("", card)
        self.question_label.setTextFormat(Qt.RichText)
        self.question_label.setWordWrap(True)
        layout.addWidget(self.question_label)

        self.option_buttons: list[QPushButton] = []
        for idx in range(OPTION_COUNT):
            button = QPushButton("", card)
            button.setCheckable(True)
            button.clicked.connect(lambda _checked=False, i=idx: self.on_select_option(i))
            layout.addWidget(button)
            self.option_buttons.append(button)

        footer_row = QHBoxLayout()
        self.score_label = QLabel("", card)
        self.score_label.setStyleSheet(f"color: {ColorPalette.TEXT_SECONDARY};")
        footer_row.addWidget(self.score_label)
        footer_row.addStretch()

        self.next_button = QPushButton(NEXT_QUESTION_BUTTON, card)
        self.next_button.setObjectName("primary")
        self.next_button.clicked.connect(self.on_advance)
        footer_row.addWidget(self.next_button)
        layout.addLayout(footer_row)

        outer.addWidget(card)
        outer.addStretch()

    def show_snapshot(self, snapshot: SessionSnapshot) -> None:
        question = snapshot.current_question
        if question is None:
            return

        self.header_label.setText(
            QUESTION_HEADER_TEMPLATE.format(
                number=snapshot.current_question_index + 1,
                total=snapshot.total_questions,
            )
        )
        self.category_label.setText(question.category)
        self.question_label.setText(render_question_html(question.text))
        self.progress_bar.setValue(int(snapshot.progress_percent))
        self.update_timer(snapshot)

        for idx, button in enumerate(self.option_buttons):
            button.setText(render_option_caption(idx, question.options[idx]))
            button.setChecked(snapshot.selected_option_index == idx)

        self.score_label.setText(
            RUNNING_SCORE_TEMPLATE.format(
                correct=snapshot.correct_so_far,
                answered=snapshot.current_question_index,
            )
        )
        self.next_button.setText(FINISH_QUIZ_BUTTON if snapshot.is_last_question else NEXT_QUESTION_BUTTON)
        self.next_button.setEnabled(snapshot.can_advance)

    def update_timer(self, snapshot: SessionSnapshot) -> None:
        self.timer_label.setText(TIME_REMAINING_TEMPLATE.format(seconds=snapshot.time_remaining_seconds))
        self.timer_label.setStyleSheet(Styles.get_timer_style(low_time=snapshot.is_low_time))
