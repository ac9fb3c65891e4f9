"""Service accumulating answer events for the statistics dashboard."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType

from kana_practice.core.models import AnswerEvent, CharacterScore, HistorySnapshot


@dataclass(slots=True)
class CharacterTally:
    """Mutable per-character counter used internally."""

    correct: int = 0
    wrong: int = 0


@dataclass(slots=True)
class SessionHistory:
    """Tracks raw answer history for one practice session."""

    num_correct: int = 0
    num_wrong: int = 0
    total_elapsed_ms: float = 0.0
    correct_answer_times: list[float] = field(default_factory=list)
    character_history: list[str] = field(default_factory=list)
    character_scores: dict[str, CharacterTally] = field(default_factory=dict)

    def record(self, event: AnswerEvent) -> None:
        """Fold one completed answer into the counters."""
        tally = self.character_scores.get(event.character)
        if tally is None:
            tally = CharacterTally()
            self.character_scores[event.character] = tally

        if event.is_correct:
            self.num_correct += 1
            tally.correct += 1
            self.correct_answer_times.append(event.elapsed_ms / 1000)
        else:
            self.num_wrong += 1
            tally.wrong += 1
        self.total_elapsed_ms += event.elapsed_ms
        self.character_history.append(event.character)

    def snapshot(self) -> HistorySnapshot:
        """Return an immutable copy of the current counters."""
        scores = {
            character: CharacterScore(correct=tally.correct, wrong=tally.wrong)
            for character, tally in self.character_scores.items()
        }
        return HistorySnapshot(
            num_correct=self.num_correct,
            num_wrong=self.num_wrong,
            total_elapsed_ms=self.total_elapsed_ms,
            correct_answer_times=tuple(self.correct_answer_times),
            character_history=tuple(self.character_history),
            character_scores=MappingProxyType(scores),
        )

    def clear(self) -> None:
        """Reset all counters."""
        self.num_correct = 0
        self.num_wrong = 0
        self.total_elapsed_ms = 0.0
        self.correct_answer_times.clear()
        self.character_history.clear()
        self.character_scores.clear()
