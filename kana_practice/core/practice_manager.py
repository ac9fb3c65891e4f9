"""Business logic for practice state shared between UI and API."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from threading import Lock

from kana_practice.core.models import OptionState, Question, SessionStats
from kana_practice.core.services.history_store import SessionHistory
from kana_practice.core.services.question_registry import QuestionRegistry
from kana_practice.core.stats_aggregator import aggregate_stats
from kana_practice.core.stats_formatter import StatCard, build_dashboard

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AnswerOutcome:
    """Result of a selection attempt, reflecting the locked answer."""

    question_id: int
    selected_index: int
    is_correct: bool
    accepted: bool
    feedback: str
    explanation: str | None
    option_states: tuple[OptionState, ...]


class PracticeManager:
    """Facade over the question registry and the session history."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._history = SessionHistory()
        self._registry = QuestionRegistry(on_answer=self._history.record)

    # --- Questions ---

    def load_questions(self, questions: list[Question]) -> list[Question]:
        with self._lock:
            loaded = self._registry.load_questions(questions)
        logger.info("Loaded %d practice question(s)", len(loaded))
        return loaded

    def get_questions(self) -> list[Question]:
        with self._lock:
            return self._registry.get_questions()

    def has_questions(self) -> bool:
        with self._lock:
            return self._registry.has_questions()

    def get_question_summaries(self) -> list[tuple[Question, bool]]:
        """Return every question with its answered flag, read under one lock."""
        with self._lock:
            return [
                (question, self._registry.get_engine(question.id).is_locked)
                for question in self._registry.get_questions()
            ]

    def get_question(self, question_id: int) -> Question:
        with self._lock:
            return self._registry.get_question(question_id)

    def get_option_states(self, question_id: int) -> list[OptionState]:
        with self._lock:
            return self._registry.get_engine(question_id).option_states()

    def get_answer_outcome(self, question_id: int) -> AnswerOutcome | None:
        """Return the locked answer of a question, or None while unanswered."""
        with self._lock:
            engine = self._registry.get_engine(question_id)
            if not engine.is_locked:
                return None
            return self._build_outcome(question_id, accepted=False)

    def select_option(self, question_id: int, option_index: int) -> AnswerOutcome:
        with self._lock:
            engine = self._registry.get_engine(question_id)
            accepted = engine.select(option_index)
            outcome = self._build_outcome(question_id, accepted=accepted)
        if accepted:
            logger.info(
                "Question %d answered with option %d (%s)",
                question_id,
                option_index,
                "correct" if outcome.is_correct else "wrong",
            )
        return outcome

    def reset_question(self, question_id: int) -> None:
        with self._lock:
            self._registry.reset_engine(question_id)

    # --- Statistics ---

    def get_session_stats(self) -> SessionStats:
        with self._lock:
            snapshot = self._history.snapshot()
        return aggregate_stats(snapshot)

    def get_dashboard(self) -> list[StatCard]:
        return build_dashboard(self.get_session_stats())

    def reset_history(self) -> None:
        with self._lock:
            self._history.clear()
        logger.info("Session statistics cleared")

    def _build_outcome(self, question_id: int, accepted: bool) -> AnswerOutcome:
        engine = self._registry.get_engine(question_id)
        return AnswerOutcome(
            question_id=question_id,
            selected_index=engine.selected_index,
            is_correct=engine.is_correct(),
            accepted=accepted,
            feedback=engine.feedback_text(),
            explanation=engine.visible_explanation(),
            option_states=tuple(engine.option_states()),
        )
