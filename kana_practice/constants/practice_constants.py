"""Practice-related constants shared across UI, API and core layers."""

MIN_OPTION_COUNT: int = 2
MAX_OPTION_COUNT: int = 6
OPTION_LETTERS: tuple[str, ...] = ("A", "B", "C", "D", "E", "F")

INDETERMINATE_GLYPH: str = "~"
INFINITY_GLYPH: str = "∞"

FEEDBACK_CORRECT: str = "✓ Correct!"
FEEDBACK_INCORRECT: str = "✗ Incorrect"

DEFAULT_QUESTION_FILENAME: str = "sample_questions.txt"
