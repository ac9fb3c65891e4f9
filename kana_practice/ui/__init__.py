"""Qt UI components for the practice application."""

from .dialog_helpers import (
    confirm_import_questions,
    confirm_reset_stats,
    show_error,
    show_info,
)
from .practice_main_window import PracticeMainWindow

__all__ = [
    "PracticeMainWindow",
    "confirm_import_questions",
    "confirm_reset_stats",
    "show_error",
    "show_info",
]
