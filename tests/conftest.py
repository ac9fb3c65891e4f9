import pytest

from kana_practice.core.models import Question


class FakeClock:
    """Monotonic clock stand-in advanced manually by tests."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def kana_question() -> Question:
    return Question(
        prompt="What is the hiragana for 'a'?",
        options=("あ", "い", "う"),
        correct_index=0,
        explanation="あ (a) is the first hiragana character.",
        character="あ",
    )


@pytest.fixture
def plain_question() -> Question:
    return Question(prompt="Which one reads 'ka'?", options=["か", "が"], correct_index=0)
