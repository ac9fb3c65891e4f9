"""Turn SessionStats into the labelled values shown on the dashboard."""

from __future__ import annotations

from dataclasses import dataclass

from kana_practice.constants.practice_constants import INDETERMINATE_GLYPH, INFINITY_GLYPH
from kana_practice.core.models import ExtremalCharacters, SessionStats, Sentinel
from kana_practice.core.stats_aggregator import round_half_up


@dataclass(frozen=True, slots=True)
class StatItem:
    label: str
    value: str


@dataclass(frozen=True, slots=True)
class StatCard:
    """Titled group of stat rows."""

    title: str
    stats: tuple[StatItem, ...]


def format_value(value: object, suffix: str = "") -> str:
    """Render a stat value, mapping sentinels to their fixed glyphs."""
    if value is None or value is Sentinel.INDETERMINATE:
        return INDETERMINATE_GLYPH
    if value is Sentinel.INFINITE:
        return INFINITY_GLYPH
    return f"{value}{suffix}"


def _format_decimal(value: float | Sentinel, places: int, suffix: str = "") -> str:
    if isinstance(value, Sentinel):
        return format_value(value)
    return format_value(round_half_up(value, places), suffix)


def format_extremal(extremal: ExtremalCharacters) -> str:
    if not extremal.characters:
        return INDETERMINATE_GLYPH
    return f"{', '.join(extremal.characters)} ({format_value(extremal.value)})"


def build_dashboard(stats: SessionStats) -> list[StatCard]:
    general = StatCard(
        title="General",
        stats=(
            StatItem("Training Time", stats.time_display),
            StatItem("Correct Answers", format_value(stats.num_correct)),
            StatItem("Wrong Answers", format_value(stats.num_wrong)),
            StatItem("Accuracy", _format_decimal(stats.accuracy_percent, 1, "%")),
        ),
    )
    answers = StatCard(
        title="Answers",
        stats=(
            StatItem("Average Time", _format_decimal(stats.average_time, 2, "s")),
            StatItem("Fastest Answer", _format_decimal(stats.fastest_time, 2, "s")),
            StatItem("Slowest Answer", _format_decimal(stats.slowest_time, 2, "s")),
            StatItem("Correct/Incorrect Ratio", _format_decimal(stats.correct_to_wrong_ratio, 2)),
        ),
    )
    characters = StatCard(
        title="Characters",
        stats=(
            StatItem("Characters Played", format_value(stats.characters_played)),
            StatItem("Unique Characters", format_value(stats.unique_character_count)),
            StatItem("Easiest Characters", format_extremal(stats.easiest_characters)),
            StatItem("Hardest Characters", format_extremal(stats.hardest_characters)),
        ),
    )
    return [general, answers, characters]
