"""Domain models for the practice application."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType
from typing import Mapping

from kana_practice.constants.practice_constants import MIN_OPTION_COUNT, OPTION_LETTERS


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice question with at least two options and one correct answer."""

    prompt: str
    options: tuple[str, ...]
    correct_index: int
    explanation: str | None = None
    character: str | None = None  # Character/topic id reported with answer events
    id: int = 0

    def __post_init__(self) -> None:
        # Accept any sequence of labels but store an immutable tuple.
        object.__setattr__(self, "options", tuple(self.options))
        if not self.prompt.strip():
            raise ValueError("Question prompt must not be empty.")
        if len(self.options) < MIN_OPTION_COUNT:
            raise ValueError(f"A question needs at least {MIN_OPTION_COUNT} options.")
        if isinstance(self.correct_index, bool) or not isinstance(self.correct_index, int):
            raise ValueError("Correct index must be an integer.")
        if not 0 <= self.correct_index < len(self.options):
            raise ValueError(
                f"Correct index {self.correct_index} is outside the {len(self.options)} options."
            )
        if self.explanation is not None and not self.explanation.strip():
            object.__setattr__(self, "explanation", None)

    @property
    def option_count(self) -> int:
        return len(self.options)

    @property
    def option_labels(self) -> tuple[str, ...]:
        """Letter shown in front of each option: A, B, C, ..."""
        return tuple(
            OPTION_LETTERS[index] if index < len(OPTION_LETTERS) else chr(ord("A") + index)
            for index in range(len(self.options))
        )

    @property
    def topic_id(self) -> str:
        """Identifier reported in answer events."""
        return self.character or self.prompt.strip()


class OptionState(Enum):
    """How a single option should be presented for the current answer state."""

    NEUTRAL = auto()
    CORRECT = auto()
    INCORRECT_SELECTED = auto()
    DIMMED = auto()


@dataclass(frozen=True, slots=True)
class AnswerEvent:
    """Completed answer forwarded to the session history."""

    character: str
    is_correct: bool
    elapsed_ms: float


@dataclass(frozen=True, slots=True)
class CharacterScore:
    correct: int = 0
    wrong: int = 0


@dataclass(frozen=True, slots=True)
class HistorySnapshot:
    """Immutable read of the accumulated session counters."""

    num_correct: int = 0
    num_wrong: int = 0
    total_elapsed_ms: float = 0
    correct_answer_times: tuple[float, ...] = ()
    character_history: tuple[str, ...] = ()
    character_scores: Mapping[str, CharacterScore] = field(
        default_factory=lambda: MappingProxyType({})
    )


class Sentinel(Enum):
    """Non-numeric stat values kept apart from real zeros."""

    INDETERMINATE = auto()
    INFINITE = auto()


StatValue = float | Sentinel


@dataclass(frozen=True, slots=True)
class ExtremalCharacters:
    """Every character sharing the highest value of a score metric."""

    characters: tuple[str, ...] = ()
    value: int | Sentinel = Sentinel.INDETERMINATE


@dataclass(frozen=True, slots=True)
class SessionStats:
    """Derived session metrics ready for display."""

    num_correct: int
    num_wrong: int
    total_answers: int
    accuracy_percent: float
    correct_to_wrong_ratio: StatValue
    time_display: str
    average_time: StatValue
    fastest_time: StatValue
    slowest_time: StatValue
    characters_played: int
    unique_character_count: int
    easiest_characters: ExtremalCharacters
    hardest_characters: ExtremalCharacters
