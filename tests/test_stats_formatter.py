from kana_practice.core.models import (
    ExtremalCharacters,
    HistorySnapshot,
    Sentinel,
)
from kana_practice.core.stats_aggregator import aggregate_stats
from kana_practice.core.stats_formatter import build_dashboard, format_extremal, format_value


def _card_values(cards) -> dict[str, str]:
    return {item.label: item.value for card in cards for item in card.stats}


def test_format_value_sentinels() -> None:
    assert format_value(Sentinel.INDETERMINATE, "s") == "~"
    assert format_value(None) == "~"
    assert format_value(Sentinel.INFINITE) == "∞"
    assert format_value(0, "s") == "0s"
    assert format_value("75.0", "%") == "75.0%"


def test_format_extremal() -> None:
    assert format_extremal(ExtremalCharacters()) == "~"
    assert format_extremal(ExtremalCharacters(characters=("あ", "い"), value=3)) == "あ, い (3)"


def test_dashboard_for_empty_history() -> None:
    cards = build_dashboard(aggregate_stats(HistorySnapshot()))

    assert [card.title for card in cards] == ["General", "Answers", "Characters"]
    values = _card_values(cards)
    assert values["Training Time"] == "0m 0s"
    assert values["Accuracy"] == "0.0%"
    assert values["Average Time"] == "~"
    assert values["Fastest Answer"] == "~"
    assert values["Slowest Answer"] == "~"
    assert values["Correct/Incorrect Ratio"] == "0.00"
    assert values["Easiest Characters"] == "~"
    assert values["Hardest Characters"] == "~"


def test_dashboard_for_flawless_session() -> None:
    snapshot = HistorySnapshot(
        num_correct=2,
        total_elapsed_ms=3_000,
        correct_answer_times=(1.0, 2.0),
        character_history=("か", "き"),
        character_scores={"か": {"correct": 1}, "き": {"correct": 1}},
    )

    values = _card_values(build_dashboard(aggregate_stats(snapshot)))

    assert values["Correct Answers"] == "2"
    assert values["Wrong Answers"] == "0"
    assert values["Accuracy"] == "100.0%"
    assert values["Average Time"] == "1.50s"
    assert values["Fastest Answer"] == "1.00s"
    assert values["Slowest Answer"] == "2.00s"
    assert values["Correct/Incorrect Ratio"] == "∞"
    assert values["Characters Played"] == "2"
    assert values["Unique Characters"] == "2"
    assert values["Easiest Characters"] == "か, き (1)"
    assert values["Hardest Characters"] == "か, き (0)"


def test_dashboard_rounds_halves_up() -> None:
    snapshot = HistorySnapshot(
        num_correct=1,
        num_wrong=15,
        correct_answer_times=(0.125,),
        character_history=("さ",) * 16,
        character_scores={"さ": {"correct": 1, "wrong": 15}},
    )

    values = _card_values(build_dashboard(aggregate_stats(snapshot)))

    assert values["Accuracy"] == "6.3%"
    assert values["Average Time"] == "0.13s"
    assert values["Correct/Incorrect Ratio"] == "0.07"
