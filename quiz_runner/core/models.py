"""Domain models for the quiz runner."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class SessionPhase(Enum):
    """Coarse lifecycle stage of a quiz session."""

    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    COMPLETED = auto()


class ScoreBand(Enum):
    """Colour band used when presenting a final score."""

    HIGH = auto()
    MEDIUM = auto()
    LOW = auto()


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice question with exactly four options."""

    id: int
    text: str
    options: tuple[str, ...]
    correct_option_index: int
    category: str


@dataclass(frozen=True, slots=True)
class AnswerRecord:
    """Outcome captured for one question once it is finalized."""

    question_id: int
    selected_option_index: int  # -1 when the question was left unanswered
    is_correct: bool
    time_spent_seconds: int

    @property
    def was_answered(self) -> bool:
        return self.selected_option_index >= 0


@dataclass(frozen=True, slots=True)
class QuestionReview:
    """A finalized answer paired with the question it belongs to."""

    question: Question
    result: AnswerRecord


@dataclass(frozen=True, slots=True)
class QuizSummary:
    """Final score projection of a completed session."""

    correct_count: int
    total_questions: int
    score_percent: int
    average_time_seconds: int
    reviews: tuple[QuestionReview, ...]
    message: str
    band: ScoreBand

    @property
    def incorrect_count(self) -> int:
        return self.total_questions - self.correct_count

    @property
    def results(self) -> tuple[AnswerRecord, ...]:
        return tuple(review.result for review in self.reviews)


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    """Read-only view of the session state for rendering."""

    phase: SessionPhase
    current_question_index: int
    total_questions: int
    current_question: Question | None
    selected_option_index: int | None
    time_remaining_seconds: int
    results: tuple[AnswerRecord, ...]
    correct_so_far: int
    progress_percent: float
    is_last_question: bool
    is_low_time: bool

    @property
    def can_advance(self) -> bool:
        """Whether a manual advance makes sense (an option has been chosen)."""
        return self.phase is SessionPhase.IN_PROGRESS and self.selected_option_index is not None
