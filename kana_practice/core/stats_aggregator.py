"""Pure derivation of session statistics from a history snapshot."""

from __future__ import annotations

from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal
import math
from typing import Iterable, Literal

from kana_practice.core.models import (
    CharacterScore,
    ExtremalCharacters,
    HistorySnapshot,
    SessionStats,
    Sentinel,
    StatValue,
)

ScoreMetric = Literal["correct", "wrong"]


def accuracy_percent(num_correct: int, num_wrong: int) -> float:
    total = num_correct + num_wrong
    if total <= 0:
        return 0.0
    return num_correct / total * 100


def correct_to_wrong_ratio(num_correct: int, num_wrong: int) -> StatValue:
    """Correct answers per wrong answer; infinite when nothing was answered wrong."""
    if num_wrong > 0:
        return num_correct / num_wrong
    if num_correct > 0:
        return Sentinel.INFINITE
    return 0.0


def round_half_up(value: float, places: int = 0) -> Decimal:
    """Round to ``places`` decimals with halves going up, like JS ``toFixed``."""
    return Decimal(repr(value)).quantize(Decimal(10) ** -places, rounding=ROUND_HALF_UP)


def format_time_display(total_elapsed_ms: float) -> str:
    """Format elapsed milliseconds as ``"<minutes>m <seconds>s"``."""
    minutes = math.floor(total_elapsed_ms / 60000)
    seconds = int(round_half_up((total_elapsed_ms / 1000) % 60))
    return f"{minutes}m {seconds}s"


def timing_extremes(times: Iterable[float]) -> tuple[StatValue, StatValue, StatValue]:
    """Return (average, fastest, slowest), each rounded to two decimals."""
    samples = list(times)
    if not samples:
        return Sentinel.INDETERMINATE, Sentinel.INDETERMINATE, Sentinel.INDETERMINATE
    average = sum(samples) / len(samples)
    return (
        float(round_half_up(average, 2)),
        float(round_half_up(min(samples), 2)),
        float(round_half_up(max(samples), 2)),
    )


def unique_character_count(character_history: Iterable[str]) -> int:
    return len(set(character_history))


def find_extremal_characters(
    scores: Mapping[str, CharacterScore | Mapping[str, int]],
    metric: ScoreMetric,
) -> ExtremalCharacters:
    """Collect every character tied for the highest ``metric`` value.

    Characters keep the mapping's iteration order. An empty mapping yields no
    characters and an indeterminate value.
    """
    if metric not in ("correct", "wrong"):
        raise ValueError(f"Unknown score metric: {metric!r}")

    best: int | None = None
    leaders: list[str] = []
    for character, score in scores.items():
        if isinstance(score, Mapping):
            value = score.get(metric, 0)
        else:
            value = getattr(score, metric)
        if best is None or value > best:
            best = value
            leaders = [character]
        elif value == best:
            leaders.append(character)

    if best is None:
        return ExtremalCharacters()
    return ExtremalCharacters(characters=tuple(leaders), value=best)


def aggregate_stats(snapshot: HistorySnapshot) -> SessionStats:
    """Build a complete SessionStats record from ``snapshot`` without mutating it."""
    average, fastest, slowest = timing_extremes(snapshot.correct_answer_times)
    return SessionStats(
        num_correct=snapshot.num_correct,
        num_wrong=snapshot.num_wrong,
        total_answers=snapshot.num_correct + snapshot.num_wrong,
        accuracy_percent=accuracy_percent(snapshot.num_correct, snapshot.num_wrong),
        correct_to_wrong_ratio=correct_to_wrong_ratio(snapshot.num_correct, snapshot.num_wrong),
        time_display=format_time_display(snapshot.total_elapsed_ms),
        average_time=average,
        fastest_time=fastest,
        slowest_time=slowest,
        characters_played=len(snapshot.character_history),
        unique_character_count=unique_character_count(snapshot.character_history),
        easiest_characters=find_extremal_characters(snapshot.character_scores, "correct"),
        hardest_characters=find_extremal_characters(snapshot.character_scores, "wrong"),
    )
