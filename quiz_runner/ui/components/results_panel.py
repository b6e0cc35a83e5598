"""Component for the final score and per-question review."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from quiz_runner.constants.ui_constants import (
    RESTART_BUTTON,
    RESULTS_AVERAGE_TIME_CAPTION,
    RESULTS_CORRECT_CAPTION,
    RESULTS_COUNT_TEMPLATE,
    RESULTS_INCORRECT_CAPTION,
    RESULTS_REVIEW_ROW_TEMPLATE,
    RESULTS_REVIEW_TITLE,
    RESULTS_TITLE,
    RESULTS_UNANSWERED_NOTE,
)
from quiz_runner.core.models import QuestionReview, QuizSummary
from quiz_runner.styling.color_palette import ColorPalette
from quiz_runner.styling.styles import Styles


class ResultsPanel(QWidget):
    """Displays a :class:`QuizSummary` and offers to take the quiz again."""

    def __init__(self, on_restart: Callable[[], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_restart = on_restart
        self._build_ui()

    def _build_ui(self) -> None:
        outer = QVBoxLayout()
        self.setLayout(outer)

        card = QFrame(self)
        card.setObjectName("card")
        layout = QVBoxLayout()
        card.setLayout(layout)

        title = QLabel(RESULTS_TITLE, card)
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(Styles.get_title_style())
        layout.addWidget(title)

        self.message_label = QLabel("", card)
        self.message_label.setAlignment(Qt.AlignCenter)
        self.message_label.setStyleSheet(f"color: {ColorPalette.TEXT_SECONDARY}; font-size: 13pt;")
        layout.addWidget(self.message_label)

        self.score_label = QLabel("", card)
        self.score_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.score_label)

        self.count_label = QLabel("", card)
        self.count_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.count_label)

        stats_row = QHBoxLayout()
        self.correct_tile = self._stat_tile(card)
        self.incorrect_tile = self._stat_tile(card)
        self.average_time_tile = self._stat_tile(card)
        self.correct_tile.setStyleSheet(Styles.get_stat_tile_style(ColorPalette.SUCCESS))
        self.incorrect_tile.setStyleSheet(Styles.get_stat_tile_style(ColorPalette.ERROR))
        self.average_time_tile.setStyleSheet(Styles.get_stat_tile_style(ColorPalette.INFO))
        stats_row.addWidget(self.correct_tile)
        stats_row.addWidget(self.incorrect_tile)
        stats_row.addWidget(self.average_time_tile)
        layout.addLayout(stats_row)

        review_title = QLabel(RESULTS_REVIEW_TITLE, card)
        review_title.setStyleSheet("font-size: 13pt; font-weight: bold;")
        layout.addWidget(review_title)

        self.review_list = QListWidget(card)
        layout.addWidget(self.review_list, stretch=1)

        self.restart_button = QPushButton(RESTART_BUTTON, card)
        self.restart_button.setObjectName("primary")
        self.restart_button.clicked.connect(self.on_restart)
        layout.addWidget(self.restart_button)

        outer.addWidget(card)

    @staticmethod
    def _stat_tile(parent: QWidget) -> QLabel:
        tile = QLabel("", parent)
        tile.setAlignment(Qt.AlignCenter)
        return tile

    def show_summary(self, summary: QuizSummary) -> None:
        tone = ColorPalette.for_score_band(summary.band)
        self.message_label.setText(summary.message)
        self.score_label.setText(f"{summary.score_percent}%")
        self.score_label.setStyleSheet(Styles.get_score_style(tone))
        self.count_label.setText(
            RESULTS_COUNT_TEMPLATE.format(correct=summary.correct_count, total=summary.total_questions)
        )
        self.correct_tile.setText(f"{summary.correct_count}\n{RESULTS_CORRECT_CAPTION}")
        self.incorrect_tile.setText(f"{summary.incorrect_count}\n{RESULTS_INCORRECT_CAPTION}")
        self.average_time_tile.setText(f"{summary.average_time_seconds}s\n{RESULTS_AVERAGE_TIME_CAPTION}")

        self.review_list.clear()
        for number, review in enumerate(summary.reviews, start=1):
            self.review_list.addItem(self._review_item(number, review))

    @staticmethod
    def _review_item(number: int, review: QuestionReview) -> QListWidgetItem:
        result = review.result
        if result.is_correct:
            mark, tone = "✓", ColorPalette.SUCCESS
        elif result.was_answered:
            mark, tone = "✗", ColorPalette.ERROR
        else:
            mark, tone = "–", ColorPalette.WARNING
        text = RESULTS_REVIEW_ROW_TEMPLATE.format(
            mark=mark,
            number=number,
            category=review.question.category,
            seconds=result.time_spent_seconds,
        )
        if not result.was_answered:
            text = f"{text}  {RESULTS_UNANSWERED_NOTE}"
        item = QListWidgetItem(text)
        item.setForeground(QColor(tone.text))
        item.setToolTip(review.question.text)
        return item
