"""Component for the quiz welcome screen."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFrame,
    QGridLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from quiz_runner.constants.ui_constants import (
    START_BUTTON,
    START_DESCRIPTION_TEMPLATE,
    START_QUESTIONS_CAPTION,
    START_TIME_CAPTION,
    START_TITLE,
)
from quiz_runner.styling.color_palette import ColorPalette
from quiz_runner.styling.styles import Styles


class StartPanel(QWidget):
    """Shows the quiz size and time limit and starts the session."""

    def __init__(
        self,
        total_questions: int,
        time_per_question: int,
        on_start_quiz: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_start_quiz = on_start_quiz
        self._build_ui(total_questions, time_per_question)

    def _build_ui(self, total_questions: int, time_per_question: int) -> None:
        outer = QVBoxLayout()
        self.setLayout(outer)
        outer.addStretch()

        card = QFrame(self)
        card.setObjectName("card")
        layout = QVBoxLayout()
        card.setLayout(layout)

        title = QLabel(START_TITLE, card)
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(Styles.get_title_style())
        layout.addWidget(title)

        description = QLabel(START_DESCRIPTION_TEMPLATE.format(count=total_questions), card)
        description.setAlignment(Qt.AlignCenter)
        description.setWordWrap(True)
        description.setStyleSheet(f"color: {ColorPalette.TEXT_SECONDARY};")
        layout.addWidget(description)

        facts = QGridLayout()
        facts.addWidget(self._fact_tile(str(total_questions), START_QUESTIONS_CAPTION), 0, 0)
        facts.addWidget(self._fact_tile(f"{time_per_question}s", START_TIME_CAPTION), 0, 1)
        layout.addLayout(facts)

        self.start_button = QPushButton(START_BUTTON, card)
        self.start_button.setObjectName("primary")
        self.start_button.clicked.connect(self.on_start_quiz)
        layout.addWidget(self.start_button)

        outer.addWidget(card)
        outer.addStretch()

    def _fact_tile(self, value: str, caption: str) -> QLabel:
        tile = QLabel(f"<b>{value}</b><br/>{caption}", self)
        tile.setAlignment(Qt.AlignCenter)
        tile.setStyleSheet(
            f"background-color: {ColorPalette.CARD_MUTED}; border-radius: 8px; padding: 10px;"
        )
        return tile
