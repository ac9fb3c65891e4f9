import math
from types import MappingProxyType

import pytest

from kana_practice.core import stats_aggregator
from kana_practice.core.models import (
    CharacterScore,
    ExtremalCharacters,
    HistorySnapshot,
    Sentinel,
)


@pytest.mark.parametrize(
    ("correct", "wrong", "expected"),
    [(0, 0, 0.0), (3, 1, 75.0), (0, 4, 0.0), (5, 0, 100.0)],
)
def test_accuracy_percent(correct: int, wrong: int, expected: float) -> None:
    result = stats_aggregator.accuracy_percent(correct, wrong)

    assert result == expected
    assert not math.isnan(result)


def test_correct_to_wrong_ratio() -> None:
    assert stats_aggregator.correct_to_wrong_ratio(5, 0) is Sentinel.INFINITE
    assert stats_aggregator.correct_to_wrong_ratio(0, 0) == 0
    assert stats_aggregator.correct_to_wrong_ratio(4, 2) == 2
    assert stats_aggregator.correct_to_wrong_ratio(0, 3) == 0


@pytest.mark.parametrize(
    ("milliseconds", "expected"),
    [
        (0, "0m 0s"),
        (59_400, "0m 59s"),
        (59_500, "0m 60s"),
        (61_000, "1m 1s"),
        (125_500, "2m 6s"),
        (3_600_000, "60m 0s"),
    ],
)
def test_format_time_display(milliseconds: int, expected: str) -> None:
    assert stats_aggregator.format_time_display(milliseconds) == expected


def test_timing_extremes_with_samples() -> None:
    average, fastest, slowest = stats_aggregator.timing_extremes([1.0, 2.5, 0.75])

    assert average == 1.42
    assert fastest == 0.75
    assert slowest == 2.5


def test_timing_extremes_round_halves_up() -> None:
    assert stats_aggregator.timing_extremes([0.125]) == (0.13, 0.13, 0.13)
    assert stats_aggregator.timing_extremes([0.5, 0.505]) == (0.5, 0.5, 0.51)


@pytest.mark.parametrize(
    ("value", "places", "expected"),
    [(6.25, 1, "6.3"), (0.125, 2, "0.13"), (2.5, 0, "3"), (0.0, 2, "0.00"), (1.994, 2, "1.99")],
)
def test_round_half_up(value: float, places: int, expected: str) -> None:
    assert str(stats_aggregator.round_half_up(value, places)) == expected


def test_timing_extremes_without_samples_are_indeterminate() -> None:
    assert stats_aggregator.timing_extremes([]) == (
        Sentinel.INDETERMINATE,
        Sentinel.INDETERMINATE,
        Sentinel.INDETERMINATE,
    )


def test_unique_character_count() -> None:
    assert stats_aggregator.unique_character_count(["あ", "い", "あ"]) == 2
    assert stats_aggregator.unique_character_count([]) == 0


def test_extremal_characters_keep_every_tie() -> None:
    scores = {
        "A": CharacterScore(correct=3),
        "B": CharacterScore(correct=3),
        "C": CharacterScore(correct=1),
    }

    result = stats_aggregator.find_extremal_characters(scores, "correct")

    assert result == ExtremalCharacters(characters=("A", "B"), value=3)


def test_extremal_characters_reset_when_larger_value_appears() -> None:
    scores = {
        "あ": CharacterScore(wrong=1),
        "い": CharacterScore(wrong=1),
        "う": CharacterScore(wrong=4),
        "え": CharacterScore(wrong=4),
        "お": CharacterScore(wrong=2),
    }

    result = stats_aggregator.find_extremal_characters(scores, "wrong")

    assert result.characters == ("う", "え")
    assert result.value == 4


def test_extremal_characters_accept_plain_mappings() -> None:
    scores = {"A": {"correct": 2, "wrong": 0}, "B": {"correct": 2}}

    result = stats_aggregator.find_extremal_characters(scores, "wrong")

    assert result.characters == ("A", "B")
    assert result.value == 0


def test_extremal_characters_empty_mapping() -> None:
    result = stats_aggregator.find_extremal_characters({}, "correct")

    assert result.characters == ()
    assert result.value is Sentinel.INDETERMINATE


def test_extremal_characters_rejects_unknown_metric() -> None:
    with pytest.raises(ValueError):
        stats_aggregator.find_extremal_characters({}, "slowest")  # type: ignore[arg-type]


def test_aggregate_empty_snapshot() -> None:
    stats = stats_aggregator.aggregate_stats(HistorySnapshot())

    assert stats.total_answers == 0
    assert stats.accuracy_percent == 0
    assert stats.correct_to_wrong_ratio == 0
    assert stats.time_display == "0m 0s"
    assert stats.average_time is Sentinel.INDETERMINATE
    assert stats.fastest_time is Sentinel.INDETERMINATE
    assert stats.slowest_time is Sentinel.INDETERMINATE
    assert stats.unique_character_count == 0
    assert stats.easiest_characters == ExtremalCharacters()
    assert stats.hardest_characters == ExtremalCharacters()


def _sample_snapshot() -> HistorySnapshot:
    return HistorySnapshot(
        num_correct=3,
        num_wrong=1,
        total_elapsed_ms=75_000,
        correct_answer_times=(1.5, 2.0, 4.25),
        character_history=("あ", "い", "あ", "う"),
        character_scores=MappingProxyType(
            {
                "あ": CharacterScore(correct=2, wrong=0),
                "い": CharacterScore(correct=0, wrong=1),
                "う": CharacterScore(correct=1, wrong=0),
            }
        ),
    )


def test_aggregate_full_snapshot() -> None:
    stats = stats_aggregator.aggregate_stats(_sample_snapshot())

    assert stats.num_correct == 3
    assert stats.num_wrong == 1
    assert stats.total_answers == 4
    assert stats.accuracy_percent == 75
    assert stats.correct_to_wrong_ratio == 3
    assert stats.time_display == "1m 15s"
    assert stats.average_time == 2.58
    assert stats.fastest_time == 1.5
    assert stats.slowest_time == 4.25
    assert stats.characters_played == 4
    assert stats.unique_character_count == 3
    assert stats.easiest_characters == ExtremalCharacters(characters=("あ",), value=2)
    assert stats.hardest_characters == ExtremalCharacters(characters=("い",), value=1)


def test_aggregate_is_deterministic_and_leaves_snapshot_untouched() -> None:
    snapshot = _sample_snapshot()

    first = stats_aggregator.aggregate_stats(snapshot)
    second = stats_aggregator.aggregate_stats(snapshot)

    assert first == second
    assert snapshot == _sample_snapshot()
