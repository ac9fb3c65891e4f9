"""Service holding the loaded questions and their answer engines."""

from __future__ import annotations

from dataclasses import replace
from typing import Callable

from kana_practice.core.answer_engine import AnswerEngine
from kana_practice.core.models import AnswerEvent, Question


class QuestionRegistry:
    """Stores questions by id, each paired with its own AnswerEngine."""

    def __init__(self, on_answer: Callable[[AnswerEvent], None] | None = None) -> None:
        self._on_answer = on_answer
        self._questions: dict[int, Question] = {}
        self._engines: dict[int, AnswerEngine] = {}
        self._question_counter: int = 0

    def load_questions(self, questions: list[Question]) -> list[Question]:
        """Replace the current questions; returns them with their assigned ids."""
        if not questions:
            raise ValueError("At least one question is required.")

        self.clear()
        for question in questions:
            self.add_question(question)
        return self.get_questions()

    def add_question(self, question: Question) -> Question:
        stored = replace(question, id=self._next_question_id())
        self._questions[stored.id] = stored
        self._engines[stored.id] = self._new_engine(stored)
        return stored

    def get_questions(self) -> list[Question]:
        return list(self._questions.values())

    def has_questions(self) -> bool:
        return bool(self._questions)

    def get_question_count(self) -> int:
        return len(self._questions)

    def get_question(self, question_id: int) -> Question:
        try:
            return self._questions[question_id]
        except KeyError:
            raise KeyError(f"Unknown question id {question_id}") from None

    def get_engine(self, question_id: int) -> AnswerEngine:
        try:
            return self._engines[question_id]
        except KeyError:
            raise KeyError(f"Unknown question id {question_id}") from None

    def reset_engine(self, question_id: int) -> AnswerEngine:
        """Discard the answer state of a question and start a fresh one."""
        question = self.get_question(question_id)
        engine = self._new_engine(question)
        self._engines[question_id] = engine
        return engine

    def clear(self) -> None:
        self._questions.clear()
        self._engines.clear()

    def _new_engine(self, question: Question) -> AnswerEngine:
        return AnswerEngine(question, on_answer=self._on_answer)

    def _next_question_id(self) -> int:
        self._question_counter += 1
        return self._question_counter
