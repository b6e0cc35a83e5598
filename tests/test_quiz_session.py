# tests/test_quiz_session.py
import pytest

from quiz_runner.core.models import Question, SessionPhase
from quiz_runner.core.services.question_bank import DEFAULT_QUESTIONS, QuestionBank
from quiz_runner.core.services.quiz_session import QuizSession, SummaryUnavailableError


def _answer_all(session, pick):
    """Answer every remaining question with pick(question) and advance."""
    while session.phase is SessionPhase.IN_PROGRESS:
        question = session.get_current_question()
        session.select_option(pick(question))
        session.advance()


def test_new_session_is_not_started(session):
    snap = session.snapshot()
    assert snap.phase is SessionPhase.NOT_STARTED
    assert snap.results == ()
    assert snap.current_question is None
    assert session.total_questions == 8


def test_start(started_session):
    snap = started_session.snapshot()
    assert snap.phase is SessionPhase.IN_PROGRESS
    assert snap.current_question_index == 0
    assert snap.selected_option_index is None
    assert snap.time_remaining_seconds == 30
    assert snap.results == ()
    assert snap.current_question.id == 1


def test_select_option_sets_and_changes_choice(started_session):
    started_session.select_option(0)
    assert started_session.snapshot().selected_option_index == 0
    started_session.select_option(3)
    assert started_session.snapshot().selected_option_index == 3
    assert started_session.get_results() == []


@pytest.mark.parametrize("index", [-1, 4, 99])
def test_select_option_out_of_range_ignored(started_session, index):
    started_session.select_option(1)
    started_session.select_option(index)
    assert started_session.snapshot().selected_option_index == 1


def test_select_option_before_start_ignored(session):
    session.select_option(2)
    assert session.snapshot().selected_option_index is None


def test_advance_records_correct_answer(started_session, clock):
    clock.advance(7)
    started_session.select_option(2)
    started_session.advance()
    (record,) = started_session.get_results()
    assert record.question_id == 1
    assert record.selected_option_index == 2
    assert record.is_correct is True
    assert record.time_spent_seconds == 7


def test_advance_without_selection_is_incorrect(started_session):
    started_session.advance()
    (record,) = started_session.get_results()
    assert record.selected_option_index == -1
    assert record.is_correct is False
    assert record.was_answered is False


def test_advance_resets_question_state(started_session, clock):
    started_session.select_option(1)
    started_session.tick()
    started_session.tick()
    started_session.advance()
    snap = started_session.snapshot()
    assert snap.current_question_index == 1
    assert snap.selected_option_index is None
    assert snap.time_remaining_seconds == 30
    clock.advance(4)
    started_session.advance()
    assert started_session.get_results()[1].time_spent_seconds == 4


def test_time_spent_rounds_to_nearest_second(started_session, clock):
    clock.advance(2.5)
    started_session.advance()
    clock.advance(2.4)
    started_session.advance()
    times = [r.time_spent_seconds for r in started_session.get_results()]
    assert times == [3, 2]


@pytest.mark.parametrize("count", range(0, 9))
def test_results_track_advance_count(started_session, count):
    for _ in range(count):
        started_session.advance()
    snap = started_session.snapshot()
    assert len(snap.results) == count
    assert snap.current_question_index == min(count, 7)
    if count < 8:
        assert snap.phase is SessionPhase.IN_PROGRESS
        assert len(snap.results) == snap.current_question_index
    else:
        assert snap.phase is SessionPhase.COMPLETED


def test_result_ids_follow_bank_order(started_session):
    for _ in range(8):
        started_session.advance()
    assert [r.question_id for r in started_session.get_results()] == [q.id for q in DEFAULT_QUESTIONS]


def test_all_correct_scores_100(started_session):
    assert started_session.get_current_question().correct_option_index == 2
    _answer_all(started_session, lambda q: q.correct_option_index)
    summary = started_session.get_summary()
    assert summary.correct_count == 8
    assert summary.total_questions == 8
    assert summary.score_percent == 100
    assert summary.message == "Excellent! Outstanding performance!"


def test_all_incorrect_scores_0(started_session):
    _answer_all(started_session, lambda q: (q.correct_option_index + 1) % 4)
    summary = started_session.get_summary()
    assert summary.correct_count == 0
    assert summary.score_percent == 0


def test_summary_average_time(started_session, clock):
    for seconds in (10, 20, 0, 0, 0, 0, 0, 0):
        clock.advance(seconds)
        started_session.advance()
    # 30 / 8 = 3.75
    assert started_session.get_summary().average_time_seconds == 4


def test_summary_reviews_pair_questions(started_session):
    _answer_all(started_session, lambda q: q.correct_option_index)
    reviews = started_session.get_summary().reviews
    assert [r.question.id for r in reviews] == [r.result.question_id for r in reviews]


def test_summary_unavailable_before_completion(session):
    with pytest.raises(SummaryUnavailableError):
        session.get_summary()
    session.start()
    session.advance()
    with pytest.raises(SummaryUnavailableError):
        session.get_summary()


def test_advance_after_completion_is_noop(started_session):
    for _ in range(8):
        started_session.advance()
    started_session.advance()
    started_session.advance()
    assert len(started_session.get_results()) == 8
    assert started_session.phase is SessionPhase.COMPLETED


def test_advance_before_start_is_noop(session):
    session.advance()
    assert session.get_results() == []
    assert session.phase is SessionPhase.NOT_STARTED


# --- Countdown ---


def test_tick_counts_down(started_session):
    started_session.tick()
    assert started_session.snapshot().time_remaining_seconds == 29


def test_timeout_auto_submits_unanswered(started_session, clock):
    for _ in range(29):
        clock.advance(1)
        started_session.tick()
    snap = started_session.snapshot()
    assert snap.time_remaining_seconds == 1
    assert snap.results == ()

    clock.advance(1)
    started_session.tick()
    snap = started_session.snapshot()
    (record,) = snap.results
    assert record.question_id == 1
    assert record.selected_option_index == -1
    assert record.is_correct is False
    assert record.time_spent_seconds == 30
    assert snap.current_question_index == 1
    assert snap.time_remaining_seconds == 30


def test_timeout_keeps_current_selection(started_session):
    started_session.select_option(2)
    for _ in range(30):
        started_session.tick()
    (record,) = started_session.get_results()
    assert record.selected_option_index == 2
    assert record.is_correct is True


def test_time_remaining_stays_in_range(started_session):
    for _ in range(30 * 8 - 1):
        started_session.tick()
        snap = started_session.snapshot()
        assert 0 <= snap.time_remaining_seconds <= 30
    assert started_session.phase is SessionPhase.IN_PROGRESS


def test_timeouts_complete_the_quiz(started_session):
    for _ in range(30 * 8):
        started_session.tick()
    assert started_session.phase is SessionPhase.COMPLETED
    assert started_session.get_summary().correct_count == 0


def test_tick_outside_progress_is_noop(session):
    session.tick()
    assert session.snapshot().time_remaining_seconds == 30
    session.start()
    for _ in range(8):
        session.advance()
    session.tick()
    assert len(session.get_results()) == 8
    assert session.phase is SessionPhase.COMPLETED


def test_low_time_flag(started_session):
    for _ in range(19):
        started_session.tick()
    assert started_session.snapshot().time_remaining_seconds == 11
    assert started_session.snapshot().is_low_time is False
    started_session.tick()
    assert started_session.snapshot().is_low_time is True


# --- Restart ---


def test_restart_after_completion(started_session):
    _answer_all(started_session, lambda q: q.correct_option_index)
    started_session.restart()
    snap = started_session.snapshot()
    assert snap.phase is SessionPhase.NOT_STARTED
    assert snap.results == ()
    assert snap.current_question_index == 0


def test_start_after_restart_matches_first_run(started_session, clock):
    first = started_session.snapshot()
    _answer_all(started_session, lambda q: 0)
    started_session.restart()
    started_session.start()
    assert started_session.snapshot() == first


def test_restart_mid_quiz_discards_results(started_session):
    started_session.select_option(1)
    started_session.advance()
    started_session.tick()
    started_session.restart()
    snap = started_session.snapshot()
    assert snap.phase is SessionPhase.NOT_STARTED
    assert snap.results == ()
    assert snap.selected_option_index is None
    assert snap.time_remaining_seconds == 30


def test_start_while_in_progress_begins_again(started_session):
    started_session.advance()
    started_session.advance()
    started_session.start()
    snap = started_session.snapshot()
    assert snap.current_question_index == 0
    assert snap.results == ()


# --- Snapshot projections ---


def test_snapshot_running_score_and_progress(started_session):
    _answer = lambda q: q.correct_option_index  # noqa: E731
    for _ in range(4):
        started_session.select_option(_answer(started_session.get_current_question()))
        started_session.advance()
    snap = started_session.snapshot()
    assert snap.correct_so_far == 4
    assert snap.progress_percent == 50.0
    assert snap.is_last_question is False


def test_snapshot_can_advance_requires_selection(started_session):
    assert started_session.snapshot().can_advance is False
    started_session.select_option(0)
    assert started_session.snapshot().can_advance is True


def test_snapshot_last_question(started_session):
    for _ in range(7):
        started_session.advance()
    assert started_session.snapshot().is_last_question is True


def test_completed_snapshot_has_no_current_question(started_session):
    for _ in range(8):
        started_session.advance()
    snap = started_session.snapshot()
    assert snap.current_question is None
    assert snap.can_advance is False


# --- Custom configuration ---


def test_custom_bank_and_time_limit(clock):
    bank = QuestionBank([
        Question(id=10, text="Pick B", options=("a", "b", "c", "d"), correct_option_index=1, category="Test"),
    ])
    session = QuizSession(questions=bank, time_per_question=3, clock=clock)
    session.start()
    assert session.snapshot().time_remaining_seconds == 3
    session.select_option(1)
    session.tick()
    session.tick()
    session.tick()
    assert session.phase is SessionPhase.COMPLETED
    summary = session.get_summary()
    assert summary.correct_count == 1
    assert summary.score_percent == 100


def test_invalid_time_limit_rejected():
    with pytest.raises(ValueError):
        QuizSession(time_per_question=0)
