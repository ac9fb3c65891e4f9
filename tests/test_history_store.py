import pytest

from kana_practice.core.models import AnswerEvent, CharacterScore
from kana_practice.core.services.history_store import SessionHistory


def test_record_accumulates_counters() -> None:
    history = SessionHistory()

    history.record(AnswerEvent(character="あ", is_correct=True, elapsed_ms=1500))
    history.record(AnswerEvent(character="い", is_correct=False, elapsed_ms=4000))
    history.record(AnswerEvent(character="あ", is_correct=True, elapsed_ms=500))

    snapshot = history.snapshot()
    assert snapshot.num_correct == 2
    assert snapshot.num_wrong == 1
    assert snapshot.total_elapsed_ms == 6000
    assert snapshot.correct_answer_times == (1.5, 0.5)
    assert snapshot.character_history == ("あ", "い", "あ")
    assert dict(snapshot.character_scores) == {
        "あ": CharacterScore(correct=2, wrong=0),
        "い": CharacterScore(correct=0, wrong=1),
    }


def test_snapshot_is_detached_from_later_records() -> None:
    history = SessionHistory()
    history.record(AnswerEvent(character="か", is_correct=True, elapsed_ms=1000))

    snapshot = history.snapshot()
    history.record(AnswerEvent(character="き", is_correct=False, elapsed_ms=1000))

    assert snapshot.num_wrong == 0
    assert snapshot.character_history == ("か",)
    assert "き" not in snapshot.character_scores
    with pytest.raises(TypeError):
        snapshot.character_scores["き"] = CharacterScore()  # type: ignore[index]


def test_clear_resets_everything() -> None:
    history = SessionHistory()
    history.record(AnswerEvent(character="か", is_correct=False, elapsed_ms=800))

    history.clear()

    snapshot = history.snapshot()
    assert snapshot.num_correct == snapshot.num_wrong == 0
    assert snapshot.total_elapsed_ms == 0
    assert snapshot.correct_answer_times == ()
    assert snapshot.character_history == ()
    assert len(snapshot.character_scores) == 0
