"""Qt main window hosting the practice and statistics tabs."""

from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QPushButton,
    QTabWidget,
    QVBoxLayout,
    QWidget,
)

from kana_practice.constants.about import APP_ABOUT_TEXT, APP_NAME, APP_VERSION, HELP_TEXT
from kana_practice.constants.practice_constants import DEFAULT_QUESTION_FILENAME
from kana_practice.constants.ui_constants import (
    IMPORT_BUTTON_TEXT,
    IMPORT_DIALOG_TITLE,
    IMPORT_FILE_FILTER,
    NO_QUESTIONS_MESSAGE,
    PRACTICE_TAB_TITLE,
    STATS_REFRESH_INTERVAL_MS,
    STATS_TAB_TITLE,
    WINDOW_TITLE,
)
from kana_practice.core.practice_manager import PracticeManager
from kana_practice.core.quiz_importer import QuizImportError, load_quiz_from_file
from kana_practice.styling.color_palette import Theme
from kana_practice.styling.styles import Styles
from kana_practice.ui.components.question_card import QuestionCard
from kana_practice.ui.components.stats_dashboard import StatsDashboard
from kana_practice.ui.dialog_helpers import confirm_import_questions, show_error, show_info

logger = logging.getLogger(__name__)

_DEFAULT_QUESTION_PATH = Path(__file__).resolve().parent.parent / "data" / DEFAULT_QUESTION_FILENAME


class PracticeMainWindow(QMainWindow):
    """Main Qt window with a question list, the active question and the stats dashboard."""

    def __init__(
        self,
        practice_manager: PracticeManager,
        practice_url: str | None = None,
        theme: Theme = Theme.LIGHT,
    ) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE if practice_url is None else f"{WINDOW_TITLE} - {practice_url}")
        self.practice_manager = practice_manager
        self.theme = theme

        self._build_ui()
        self._configure_refresh_timer()
        self.setStyleSheet(Styles.get_main_window_style(self.theme))
        self._auto_load_default_questions()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)
        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        button_row = QHBoxLayout()
        self.import_button = QPushButton(IMPORT_BUTTON_TEXT, self)
        self.import_button.clicked.connect(self._handle_import)
        button_row.addWidget(self.import_button)
        button_row.addStretch()
        self.help_button = QPushButton("Help", self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)
        self.about_button = QPushButton(f"About {APP_NAME}", self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)
        root_layout.addLayout(button_row)

        self.tabs = QTabWidget(self)
        root_layout.addWidget(self.tabs, stretch=1)

        practice_tab = QWidget(self)
        practice_layout = QHBoxLayout()
        practice_tab.setLayout(practice_layout)
        self.question_list = QListWidget(practice_tab)
        self.question_list.setMaximumWidth(260)
        self.question_list.currentItemChanged.connect(self._handle_question_changed)
        practice_layout.addWidget(self.question_list)
        self.question_card = QuestionCard(
            self.practice_manager,
            on_answered=self._refresh_state,
            theme=self.theme,
            parent=practice_tab,
        )
        practice_layout.addWidget(self.question_card, stretch=1)
        self.tabs.addTab(practice_tab, PRACTICE_TAB_TITLE)

        self.stats_dashboard = StatsDashboard(self.practice_manager, self)
        self.tabs.addTab(self.stats_dashboard, STATS_TAB_TITLE)

    def _configure_refresh_timer(self) -> None:
        # Answers may also arrive through the web page, so poll the manager.
        self.refresh_timer = QTimer(self)
        self.refresh_timer.setInterval(STATS_REFRESH_INTERVAL_MS)
        self.refresh_timer.timeout.connect(self._refresh_state)
        self.refresh_timer.start()

    def _refresh_state(self) -> None:
        self.stats_dashboard.refresh()
        self.question_card.refresh()
        self._refresh_question_list_marks()

    def _populate_question_list(self) -> None:
        self.question_list.clear()
        for position, question in enumerate(self.practice_manager.get_questions(), start=1):
            item = QListWidgetItem(self._list_label(position, question.character), self.question_list)
            item.setData(Qt.UserRole, question.id)
        if self.question_list.count():
            self.question_list.setCurrentRow(0)
        else:
            self.question_card.show_message(NO_QUESTIONS_MESSAGE)

    def _refresh_question_list_marks(self) -> None:
        summaries = {
            question.id: (question, answered)
            for question, answered in self.practice_manager.get_question_summaries()
        }
        for row in range(self.question_list.count()):
            item = self.question_list.item(row)
            summary = summaries.get(item.data(Qt.UserRole))
            if summary is None:
                continue
            question, answered = summary
            label = self._list_label(row + 1, question.character)
            if answered:
                label += "  ✓"
            item.setText(label)

    @staticmethod
    def _list_label(position: int, character: str | None) -> str:
        return f"Question {position}" + (f" ({character})" if character else "")

    def _handle_question_changed(self, current: QListWidgetItem | None, _previous) -> None:
        if current is not None:
            self.question_card.show_question(current.data(Qt.UserRole))

    def _load_questions_from(self, path: Path) -> None:
        questions = load_quiz_from_file(path)
        self.practice_manager.load_questions(questions)
        self._populate_question_list()

    def _auto_load_default_questions(self) -> None:
        if not _DEFAULT_QUESTION_PATH.exists():
            self.question_card.show_message(NO_QUESTIONS_MESSAGE)
            return
        try:
            self._load_questions_from(_DEFAULT_QUESTION_PATH)
        except (OSError, QuizImportError) as exc:
            logger.warning("Could not load default questions: %s", exc)
            self.question_card.show_message(NO_QUESTIONS_MESSAGE)

    def _handle_import(self) -> None:
        if self.practice_manager.has_questions() and not confirm_import_questions(self):
            return
        file_name, _ = QFileDialog.getOpenFileName(self, IMPORT_DIALOG_TITLE, "", IMPORT_FILE_FILTER)
        if not file_name:
            return
        try:
            self._load_questions_from(Path(file_name))
        except (OSError, QuizImportError, ValueError) as exc:
            show_error(self, "Import failed", str(exc))

    def _handle_help(self) -> None:
        show_info(self, "Help", HELP_TEXT)

    def _handle_about(self) -> None:
        show_info(self, f"About {APP_NAME}", f"{APP_NAME} {APP_VERSION}\n\n{APP_ABOUT_TEXT}")
