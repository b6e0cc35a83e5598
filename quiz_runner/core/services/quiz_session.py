"""Service that owns the state of a single timed quiz session."""

from __future__ import annotations

from collections.abc import Callable
import logging
import time

from quiz_runner.constants.quiz_constants import (
    LOW_TIME_WARNING_SECONDS,
    TIME_PER_QUESTION,
    UNANSWERED_OPTION_INDEX,
)
from quiz_runner.core.models import (
    AnswerRecord,
    Question,
    QuizSummary,
    SessionPhase,
    SessionSnapshot,
)
from quiz_runner.core.services.question_bank import QuestionBank, default_question_bank
from quiz_runner.core.services.scoring import build_summary, round_half_up

logger = logging.getLogger(__name__)


class SummaryUnavailableError(RuntimeError):
    """Raised when a summary is requested before the quiz is completed."""


class QuizSession:
    """Linear quiz state machine: NOT_STARTED -> IN_PROGRESS -> COMPLETED.

    Every operation runs to completion synchronously. Calls made outside the
    phase they apply to are ignored, so a late timer tick after the quiz has
    ended or been restarted leaves the state untouched.

    Time is taken from ``clock`` (seconds, monotonic by default) only to
    measure how long each question was on screen; the countdown itself is
    driven externally through :meth:`tick`.
    """

    def __init__(
        self,
        questions: QuestionBank | None = None,
        time_per_question: int = TIME_PER_QUESTION,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if time_per_question < 1:
            raise ValueError("Time per question must be at least one second.")
        self._bank = questions if questions is not None else default_question_bank()
        self._time_per_question = time_per_question
        self._clock = clock
        self._reset_state()

    def _reset_state(self) -> None:
        self._phase = SessionPhase.NOT_STARTED
        self._current_index: int = 0
        self._selected_option_index: int | None = None
        self._time_remaining: int = self._time_per_question
        self._results: list[AnswerRecord] = []
        self._question_started_at: float | None = None

    # --- Operations ---

    def start(self) -> None:
        self._reset_state()
        self._phase = SessionPhase.IN_PROGRESS
        self._question_started_at = self._clock()
        logger.info("Quiz started with %d questions", len(self._bank))

    def select_option(self, index: int) -> None:
        if self._phase is not SessionPhase.IN_PROGRESS:
            logger.debug("Ignoring option selection outside an active quiz")
            return
        if not 0 <= index < self._bank.option_count:
            logger.debug("Ignoring out-of-range option index %s", index)
            return
        self._selected_option_index = index

    def advance(self) -> None:
        """Finalize the current question and move on, completing after the last one."""
        if self._phase is not SessionPhase.IN_PROGRESS:
            logger.debug("Ignoring advance in phase %s", self._phase.name)
            return

        question = self._bank.question_at(self._current_index)
        record = self._finalize_answer(question)
        self._results.append(record)
        logger.debug(
            "Question %d answered: option=%d correct=%s time=%ds",
            record.question_id,
            record.selected_option_index,
            record.is_correct,
            record.time_spent_seconds,
        )

        if self._current_index >= len(self._bank) - 1:
            self._phase = SessionPhase.COMPLETED
            correct = sum(1 for r in self._results if r.is_correct)
            logger.info("Quiz completed: %d/%d correct", correct, len(self._bank))
            return

        self._current_index += 1
        self._selected_option_index = None
        self._time_remaining = self._time_per_question
        self._question_started_at = self._clock()

    def tick(self) -> None:
        """Count down one second, submitting the current answer when time runs out."""
        if self._phase is not SessionPhase.IN_PROGRESS:
            return
        if self._time_remaining > 1:
            self._time_remaining -= 1
            return

        logger.info("Time limit reached on question %d", self._current_index + 1)
        self.advance()

    def restart(self) -> None:
        self._reset_state()
        logger.info("Quiz reset")

    def _finalize_answer(self, question: Question) -> AnswerRecord:
        selected = self._selected_option_index
        if selected is None:
            selected = UNANSWERED_OPTION_INDEX
        started_at = self._question_started_at
        elapsed = self._clock() - started_at if started_at is not None else 0.0
        return AnswerRecord(
            question_id=question.id,
            selected_option_index=selected,
            is_correct=selected == question.correct_option_index,
            time_spent_seconds=max(0, round_half_up(elapsed)),
        )

    # --- Projections ---

    @property
    def phase(self) -> SessionPhase:
        return self._phase

    @property
    def total_questions(self) -> int:
        return len(self._bank)

    @property
    def time_per_question(self) -> int:
        return self._time_per_question

    def get_current_question(self) -> Question | None:
        if self._phase is not SessionPhase.IN_PROGRESS:
            return None
        return self._bank.question_at(self._current_index)

    def get_results(self) -> list[AnswerRecord]:
        return list(self._results)

    def snapshot(self) -> SessionSnapshot:
        in_progress = self._phase is SessionPhase.IN_PROGRESS
        total = len(self._bank)
        return SessionSnapshot(
            phase=self._phase,
            current_question_index=self._current_index,
            total_questions=total,
            current_question=self.get_current_question(),
            selected_option_index=self._selected_option_index,
            time_remaining_seconds=self._time_remaining,
            results=tuple(self._results),
            correct_so_far=sum(1 for r in self._results if r.is_correct),
            progress_percent=(self._current_index / total) * 100,
            is_last_question=self._current_index == total - 1,
            is_low_time=in_progress and self._time_remaining <= LOW_TIME_WARNING_SECONDS,
        )

    def get_summary(self) -> QuizSummary:
        if self._phase is not SessionPhase.COMPLETED:
            raise SummaryUnavailableError(
                f"Summary is only available once the quiz is completed (phase: {self._phase.name})."
            )
        return build_summary(self._bank.get_questions(), self._results)
