"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "KanaPractice"
STATS_REFRESH_INTERVAL_MS: int = 1000

IMPORT_BUTTON_TEXT: str = "Import Questions"
RESET_QUESTION_BUTTON: str = "Try Again"
RESET_STATS_BUTTON: str = "Reset Statistics"
IMPORT_DIALOG_TITLE: str = "Select question file"
IMPORT_FILE_FILTER: str = "Question files (*.txt);;All files (*.*)"

PRACTICE_TAB_TITLE: str = "Practice"
STATS_TAB_TITLE: str = "Statistics"

NO_QUESTIONS_MESSAGE: str = "Please import a question file first."
SELECT_QUESTION_MESSAGE: str = "Pick a question from the list."
