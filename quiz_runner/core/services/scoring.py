"""Score calculations for a finished quiz."""

from __future__ import annotations

from collections.abc import Sequence
import math

from quiz_runner.constants.quiz_constants import (
    SCORE_BAND_HIGH_THRESHOLD,
    SCORE_BAND_MEDIUM_THRESHOLD,
    SCORE_EXCELLENT_THRESHOLD,
    SCORE_FAIR_THRESHOLD,
    SCORE_GOOD_THRESHOLD,
    SCORE_GREAT_THRESHOLD,
)
from quiz_runner.core.models import AnswerRecord, Question, QuestionReview, QuizSummary, ScoreBand


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves rounded up (12.5 -> 13)."""
    return math.floor(value + 0.5)


def score_percent(correct_count: int, total_questions: int) -> int:
    if total_questions <= 0:
        return 0
    return round_half_up(100 * correct_count / total_questions)


def score_message(percent: int) -> str:
    if percent >= SCORE_EXCELLENT_THRESHOLD:
        return "Excellent! Outstanding performance!"
    if percent >= SCORE_GREAT_THRESHOLD:
        return "Great job! Well done!"
    if percent >= SCORE_GOOD_THRESHOLD:
        return "Good work! Keep it up!"
    if percent >= SCORE_FAIR_THRESHOLD:
        return "Not bad! Room for improvement."
    return "Keep practicing! You'll do better next time."


def score_band(percent: int) -> ScoreBand:
    if percent >= SCORE_BAND_HIGH_THRESHOLD:
        return ScoreBand.HIGH
    if percent >= SCORE_BAND_MEDIUM_THRESHOLD:
        return ScoreBand.MEDIUM
    return ScoreBand.LOW


def build_summary(questions: Sequence[Question], results: Sequence[AnswerRecord]) -> QuizSummary:
    """Pair each result with its source question and compute the aggregate score.

    Averages are taken over the full question count rather than the number of
    results, so the summary is only meaningful once every question is final.
    """
    if len(results) != len(questions):
        raise ValueError(
            f"Expected {len(questions)} results, got {len(results)}."
        )

    total = len(questions)
    correct_count = sum(1 for result in results if result.is_correct)
    total_time = sum(result.time_spent_seconds for result in results)
    percent = score_percent(correct_count, total)

    return QuizSummary(
        correct_count=correct_count,
        total_questions=total,
        score_percent=percent,
        average_time_seconds=round_half_up(total_time / total) if total else 0,
        reviews=tuple(
            QuestionReview(question=question, result=result)
            for question, result in zip(questions, results)
        ),
        message=score_message(percent),
        band=score_band(percent),
    )
