"""Single-question answer lifecycle: pick once, lock, evaluate, explain."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import time
from typing import Callable

from kana_practice.constants.practice_constants import (
    FEEDBACK_CORRECT,
    FEEDBACK_INCORRECT,
)
from kana_practice.core.models import AnswerEvent, OptionState, Question

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Unanswered:
    """No option chosen yet; every option is still selectable."""


@dataclass(frozen=True, slots=True)
class Answered:
    """Terminal state holding the locked-in option."""

    index: int


AnswerState = Unanswered | Answered


class AnswerEngine:
    """Owns the answer state of one question.

    The first valid ``select`` call locks the question. Every later call is a
    no-op, so the evaluation always reflects the first choice.
    """

    def __init__(
        self,
        question: Question,
        on_answer: Callable[[AnswerEvent], None] | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._question = question
        self._on_answer = on_answer
        self._clock = clock
        self._started_at = clock()
        self._state: AnswerState = Unanswered()
        self._answer_event: AnswerEvent | None = None

    @property
    def question(self) -> Question:
        return self._question

    @property
    def state(self) -> AnswerState:
        return self._state

    @property
    def is_locked(self) -> bool:
        return isinstance(self._state, Answered)

    @property
    def selected_index(self) -> int | None:
        if isinstance(self._state, Answered):
            return self._state.index
        return None

    @property
    def answer_event(self) -> AnswerEvent | None:
        """Event produced by the locking selection, if any."""
        return self._answer_event

    def select(self, index: int) -> bool:
        """Lock in ``index`` as the answer.

        Returns True when this call locked the question and False when the
        question was already answered. Out-of-range indices raise IndexError
        in both states and never touch the answer state.
        """
        self._check_index(index)
        if isinstance(self._state, Answered):
            logger.debug(
                "Ignoring selection %s, question already locked on %s",
                index,
                self._state.index,
            )
            return False

        self._state = Answered(index)
        elapsed_ms = (self._clock() - self._started_at) * 1000
        self._answer_event = AnswerEvent(
            character=self._question.topic_id,
            is_correct=index == self._question.correct_index,
            elapsed_ms=max(0.0, elapsed_ms),
        )
        if self._on_answer is not None:
            self._on_answer(self._answer_event)
        return True

    def is_correct(self) -> bool:
        if not isinstance(self._state, Answered):
            raise RuntimeError("Question has not been answered yet.")
        return self._state.index == self._question.correct_index

    def option_presentation_state(self, index: int) -> OptionState:
        self._check_index(index)
        if not isinstance(self._state, Answered):
            return OptionState.NEUTRAL
        if index == self._question.correct_index:
            return OptionState.CORRECT
        if index == self._state.index:
            return OptionState.INCORRECT_SELECTED
        return OptionState.DIMMED

    def option_states(self) -> list[OptionState]:
        return [self.option_presentation_state(i) for i in range(self._question.option_count)]

    def correct_flags(self) -> list[bool]:
        return [i == self._question.correct_index for i in range(self._question.option_count)]

    def is_explanation_visible(self) -> bool:
        return self.is_locked and self._question.explanation is not None

    def visible_explanation(self) -> str | None:
        return self._question.explanation if self.is_explanation_visible() else None

    def feedback_text(self) -> str | None:
        if not self.is_locked:
            return None
        return FEEDBACK_CORRECT if self.is_correct() else FEEDBACK_INCORRECT

    def _check_index(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            raise IndexError(f"Option index must be an integer, got {index!r}.")
        if not 0 <= index < self._question.option_count:
            raise IndexError(
                f"Option index {index} out of range for {self._question.option_count} options"
            )
