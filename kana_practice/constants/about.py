"""Static metadata describing KanaPractice."""

APP_NAME = "KanaPractice"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "KanaPractice is a small kana drill companion built with Qt and FastAPI. "
    "Import multiple-choice questions, answer them once each, and follow your session statistics."
)

HELP_TEXT = (
    "Author a .txt file using the import format. Each question needs between two and six options "
    "and a CORRECT letter; EXPLANATION and CHARACTER are optional:\n\n"
    "Q: What is the hiragana for 'a'?\n"
    "A: あ\nB: い\nC: う\nD: え\n"
    "CORRECT: A\n"
    "EXPLANATION: あ (a) is the first hiragana character.\n"
    "CHARACTER: あ"
)
