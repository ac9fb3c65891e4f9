"""Utilities for importing practice questions from a human-friendly text file.

File format (repeat blocks separated by blank lines or '---'):

    Q: Prompt text (supports markdown). Additional lines until the next
       marker are treated as part of the prompt.
    A: First option text
    B: Second option text
    ...                (two to six options, lettered A-F without gaps)
    CORRECT: A-F
    EXPLANATION: Shown once the question is answered (optional, may
                 continue on following lines)
    CHARACTER: Character id used for statistics (optional)

Example:

    Q: What is the hiragana for 'a'?
    A: あ
    B: い
    C: う
    CORRECT: A
    EXPLANATION: あ (a) is the first hiragana character.
    CHARACTER: あ
"""

from __future__ import annotations

import logging
from pathlib import Path

from kana_practice.constants.practice_constants import (
    MAX_OPTION_COUNT,
    MIN_OPTION_COUNT,
    OPTION_LETTERS,
)
from kana_practice.core.models import Question

logger = logging.getLogger(__name__)


class QuizImportError(Exception):
    """Raised when a question file cannot be parsed."""


def load_quiz_from_file(file_path: Path) -> list[Question]:
    text = file_path.read_text(encoding="utf-8")
    questions = parse_quiz_text(text)
    if not questions:
        raise QuizImportError("Question file did not contain any questions.")
    logger.info("Imported %d question(s) from %s", len(questions), file_path)
    return questions


def parse_quiz_text(text: str) -> list[Question]:
    blocks: list[str] = []
    current_block: list[str] = []
    for raw_line in text.splitlines():
        stripped = raw_line.strip()
        if stripped == "---":
            if current_block:
                blocks.append("\n".join(current_block).strip())
                current_block = []
            continue
        if stripped:
            current_block.append(raw_line)
        elif current_block:
            blocks.append("\n".join(current_block).strip())
            current_block = []
    if current_block:
        blocks.append("\n".join(current_block).strip())

    return [_parse_block(block) for block in blocks if block]


def _parse_block(block: str) -> Question:
    prompt_lines: list[str] = []
    explanation_lines: list[str] = []
    options: dict[str, str] = {}
    correct_letter: str | None = None
    character: str | None = None
    current_section: str | None = None

    for raw_line in block.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        upper = line.upper()
        if upper.startswith("Q:"):
            prompt_lines = [line[2:].strip()]
            current_section = "Q"
            continue

        if upper.startswith("CORRECT:"):
            correct_letter = line.split(":", 1)[1].strip().upper()
            current_section = None
            continue

        if upper.startswith("EXPLANATION:"):
            explanation_lines = [line.split(":", 1)[1].strip()]
            current_section = "EXPLANATION"
            continue

        if upper.startswith("CHARACTER:"):
            character = line.split(":", 1)[1].strip() or None
            current_section = None
            continue

        if len(line) > 2 and line[0].upper() in OPTION_LETTERS and line[1] == ":":
            letter = line[0].upper()
            if letter in options:
                raise QuizImportError(f"Option {letter} is defined twice.")
            options[letter] = line[2:].strip()
            current_section = letter
            continue

        if current_section == "Q":
            prompt_lines.append(line)
        elif current_section == "EXPLANATION":
            explanation_lines.append(line)
        elif current_section in OPTION_LETTERS:
            options[current_section] = options[current_section] + f"\n{line}"
        else:
            raise QuizImportError(
                f"Encountered text outside of a known section: '{line}'."
            )

    prompt = "\n".join(prompt_lines).strip()
    if not prompt:
        raise QuizImportError("Question text missing (Q: ...)")

    option_list = _ordered_options(options)
    if correct_letter is None:
        raise QuizImportError("CORRECT is required for every question.")
    expected_letters = OPTION_LETTERS[: len(option_list)]
    if correct_letter not in expected_letters:
        raise QuizImportError(
            f"CORRECT must be one of {', '.join(expected_letters)}."
        )

    explanation = "\n".join(explanation_lines).strip() or None
    return Question(
        prompt=prompt,
        options=tuple(option_list),
        correct_index=expected_letters.index(correct_letter),
        explanation=explanation,
        character=character,
    )


def _ordered_options(options: dict[str, str]) -> list[str]:
    count = len(options)
    if not MIN_OPTION_COUNT <= count <= MAX_OPTION_COUNT:
        raise QuizImportError(
            f"Each question must define between {MIN_OPTION_COUNT} and {MAX_OPTION_COUNT} options."
        )
    expected = OPTION_LETTERS[:count]
    if set(options) != set(expected):
        raise QuizImportError(f"Options must be lettered {'-'.join((expected[0], expected[-1]))} without gaps.")

    option_list = [options[letter].strip() for letter in expected]
    if any(not option for option in option_list):
        raise QuizImportError("Option text cannot be empty.")
    return option_list
