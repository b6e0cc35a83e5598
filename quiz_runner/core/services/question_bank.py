"""Fixed, read-only collection of quiz questions."""

from __future__ import annotations

from collections.abc import Iterable

from quiz_runner.constants.quiz_constants import OPTION_COUNT
from quiz_runner.core.models import Question


class QuestionBank:
    """Ordered question set validated once and never modified afterwards."""

    def __init__(self, questions: Iterable[Question]) -> None:
        prepared = [self._prepare_question(q) for q in questions]
        if not prepared:
            raise ValueError("Quiz must contain at least one question.")
        ids = [q.id for q in prepared]
        if len(set(ids)) != len(ids):
            raise ValueError("Question ids must be unique.")
        self._questions: tuple[Question, ...] = tuple(prepared)

    def __len__(self) -> int:
        return len(self._questions)

    @property
    def option_count(self) -> int:
        return OPTION_COUNT

    def question_at(self, index: int) -> Question:
        if not 0 <= index < len(self._questions):
            raise IndexError(f"Question index {index} out of range")
        return self._questions[index]

    def get_questions(self) -> tuple[Question, ...]:
        return self._questions

    def _prepare_question(self, question: Question) -> Question:
        """Validate and normalize a question before storage."""
        options = self._validate_options(question.options)
        if not 0 <= question.correct_option_index < OPTION_COUNT:
            raise ValueError(f"Correct option index must be between 0 and {OPTION_COUNT - 1}.")

        cleaned_text = question.text.strip()
        if not cleaned_text:
            raise ValueError("Question text must not be empty.")

        return Question(
            id=question.id,
            text=cleaned_text,
            options=options,
            correct_option_index=question.correct_option_index,
            category=question.category.strip(),
        )

    @staticmethod
    def _validate_options(options: Iterable[str]) -> tuple[str, ...]:
        cleaned = tuple(option.strip() for option in options)
        if len(cleaned) != OPTION_COUNT:
            raise ValueError(f"Each question must have exactly {OPTION_COUNT} options.")
        if any(not option for option in cleaned):
            raise ValueError("Option text cannot be empty.")
        return cleaned


DEFAULT_QUESTIONS: tuple[Question, ...] = (
    Question(
        id=1,
        text="What is the capital of France?",
        options=("London", "Berlin", "Paris", "Madrid"),
        correct_option_index=2,
        category="Geography",
    ),
    Question(
        id=2,
        text="Which planet is known as the Red Planet?",
        options=("Venus", "Mars", "Jupiter", "Saturn"),
        correct_option_index=1,
        category="Science",
    ),
    Question(
        id=3,
        text="What is the largest mammal in the world?",
        options=("African Elephant", "Blue Whale", "Giraffe", "Polar Bear"),
        correct_option_index=1,
        category="Biology",
    ),
    Question(
        id=4,
        text="In which year did World War II end?",
        options=("1944", "1945", "1946", "1947"),
        correct_option_index=1,
        category="History",
    ),
    Question(
        id=5,
        text="What is the chemical symbol for gold?",
        options=("Go", "Gd", "Au", "Ag"),
        correct_option_index=2,
        category="Chemistry",
    ),
    Question(
        id=6,
        text="Which programming language is known for its use in web development?",
        options=("Python", "JavaScript", "C++", "Java"),
        correct_option_index=1,
        category="Technology",
    ),
    Question(
        id=7,
        text="What is the smallest country in the world?",
        options=("Monaco", "Nauru", "Vatican City", "San Marino"),
        correct_option_index=2,
        category="Geography",
    ),
    Question(
        id=8,
        text="Who painted the Mona Lisa?",
        options=("Vincent van Gogh", "Pablo Picasso", "Leonardo da Vinci", "Michelangelo"),
        correct_option_index=2,
        category="Art",
    ),
)


def default_question_bank() -> QuestionBank:
    return QuestionBank(DEFAULT_QUESTIONS)
