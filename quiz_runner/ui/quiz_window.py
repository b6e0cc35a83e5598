"""Qt main window hosting the start, question and results screens."""

from __future__ import annotations

from enum import Enum
import logging

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import QMainWindow, QStackedWidget, QVBoxLayout, QWidget

from quiz_runner.constants.quiz_constants import TICK_INTERVAL_MS
from quiz_runner.constants.ui_constants import WINDOW_MIN_HEIGHT, WINDOW_MIN_WIDTH, WINDOW_TITLE
from quiz_runner.core.models import SessionPhase
from quiz_runner.core.services.quiz_session import QuizSession
from quiz_runner.styling.styles import Styles
from quiz_runner.ui.components.question_panel import QuestionPanel
from quiz_runner.ui.components.results_panel import ResultsPanel
from quiz_runner.ui.components.start_panel import StartPanel

logger = logging.getLogger(__name__)


class _Screen(Enum):
    START = 0
    QUESTION = 1
    RESULTS = 2


_SCREEN_FOR_PHASE = {
    SessionPhase.NOT_STARTED: _Screen.START,
    SessionPhase.IN_PROGRESS: _Screen.QUESTION,
    SessionPhase.COMPLETED: _Screen.RESULTS,
}


class QuizWindow(QMainWindow):
    """Main Qt window; a thin view over a :class:`QuizSession`.

    The window owns the one-second countdown timer. It runs only while the
    session is in progress and is restarted whenever a new question appears,
    so every question gets a full interval before its first tick.
    """

    def __init__(self, session: QuizSession) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumSize(WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT)

        self.session = session
        self._timer_question_index: int | None = None

        self._build_ui()
        self._configure_countdown_timer()
        self.setStyleSheet(Styles.get_main_window_style())
        self._refresh()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)
        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self.screen_stack = QStackedWidget(self)
        self.start_panel = StartPanel(
            self.session.total_questions,
            self.session.time_per_question,
            on_start_quiz=self._handle_start,
            parent=self,
        )
        self.question_panel = QuestionPanel(
            on_select_option=self._handle_select_option,
            on_advance=self._handle_advance,
            parent=self,
        )
        self.results_panel = ResultsPanel(on_restart=self._handle_restart, parent=self)

        self.screen_stack.addWidget(self.start_panel)
        self.screen_stack.addWidget(self.question_panel)
        self.screen_stack.addWidget(self.results_panel)
        root_layout.addWidget(self.screen_stack)

    def _configure_countdown_timer(self) -> None:
        self.countdown_timer = QTimer(self)
        self.countdown_timer.setInterval(TICK_INTERVAL_MS)
        self.countdown_timer.timeout.connect(self._handle_tick)

    # --- User and timer events ---

    def _handle_start(self) -> None:
        self.session.start()
        self._refresh()

    def _handle_select_option(self, index: int) -> None:
        self.session.select_option(index)
        self._refresh()

    def _handle_advance(self) -> None:
        self.session.advance()
        self._refresh()

    def _handle_tick(self) -> None:
        self.session.tick()
        self._refresh()

    def _handle_restart(self) -> None:
        self.session.restart()
        self._refresh()

    # --- Rendering ---

    def _refresh(self) -> None:
        snapshot = self.session.snapshot()
        self._sync_countdown_timer(snapshot.phase, snapshot.current_question_index)

        screen = _SCREEN_FOR_PHASE[snapshot.phase]
        if screen is _Screen.QUESTION:
            self.question_panel.show_snapshot(snapshot)
        elif screen is _Screen.RESULTS and self.screen_stack.currentIndex() != screen.value:
            self.results_panel.show_summary(self.session.get_summary())
        self.screen_stack.setCurrentIndex(screen.value)

    def _sync_countdown_timer(self, phase: SessionPhase, question_index: int) -> None:
        if phase is not SessionPhase.IN_PROGRESS:
            if self.countdown_timer.isActive():
                self.countdown_timer.stop()
                logger.debug("Countdown stopped")
            self._timer_question_index = None
            return

        if self._timer_question_index != question_index or not self.countdown_timer.isActive():
            # QTimer.start() on a running timer restarts the interval
            self.countdown_timer.start()
            self._timer_question_index = question_index

    def closeEvent(self, event) -> None:  # noqa: N802 - Qt override
        self.countdown_timer.stop()
        super().closeEvent(event)
