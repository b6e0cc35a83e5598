import pytest

from quiz_runner.core.services.quiz_session import QuizSession


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def session(clock):
    """A quiz session over the default question bank driven by a fake clock."""
    return QuizSession(clock=clock)


@pytest.fixture
def started_session(session):
    session.start()
    return session
