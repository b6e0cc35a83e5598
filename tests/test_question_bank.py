# tests/test_question_bank.py
import pytest

from quiz_runner.core.models import Question
from quiz_runner.core.services.question_bank import (
    DEFAULT_QUESTIONS, QuestionBank, default_question_bank,
)


def _question(**overrides):
    fields = dict(
        id=1,
        text="What is 2 + 2?",
        options=("3", "4", "5", "22"),
        correct_option_index=1,
        category="Math",
    )
    fields.update(overrides)
    return Question(**fields)


def test_default_bank_has_eight_questions():
    bank = default_question_bank()
    assert len(bank) == 8
    assert [q.id for q in bank.get_questions()] == list(range(1, 9))


def test_default_bank_questions_have_four_options():
    for question in DEFAULT_QUESTIONS:
        assert len(question.options) == 4
        assert 0 <= question.correct_option_index <= 3


def test_default_bank_first_question():
    bank = default_question_bank()
    first = bank.question_at(0)
    assert first.text == "What is the capital of France?"
    assert first.options[first.correct_option_index] == "Paris"
    assert first.category == "Geography"


def test_question_at_out_of_range():
    bank = default_question_bank()
    with pytest.raises(IndexError):
        bank.question_at(8)
    with pytest.raises(IndexError):
        bank.question_at(-1)


def test_bank_strips_whitespace():
    bank = QuestionBank([_question(text="  Spaced?  ", options=(" a ", "b", "c", "d"))])
    assert bank.question_at(0).text == "Spaced?"
    assert bank.question_at(0).options[0] == "a"


# --- Validation ---


def test_empty_bank_rejected():
    with pytest.raises(ValueError, match="at least one question"):
        QuestionBank([])


def test_wrong_option_count_rejected():
    with pytest.raises(ValueError, match="exactly 4 options"):
        QuestionBank([_question(options=("a", "b", "c"))])


def test_blank_option_rejected():
    with pytest.raises(ValueError, match="Option text"):
        QuestionBank([_question(options=("a", " ", "c", "d"))])


def test_blank_text_rejected():
    with pytest.raises(ValueError, match="Question text"):
        QuestionBank([_question(text="   ")])


@pytest.mark.parametrize("index", [-1, 4])
def test_correct_index_out_of_range_rejected(index):
    with pytest.raises(ValueError, match="Correct option index"):
        QuestionBank([_question(correct_option_index=index)])


def test_duplicate_ids_rejected():
    with pytest.raises(ValueError, match="unique"):
        QuestionBank([_question(id=1), _question(id=1)])
