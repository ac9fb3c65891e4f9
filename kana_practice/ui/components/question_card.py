"""Component rendering one question and its option buttons."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from kana_practice.constants.ui_constants import RESET_QUESTION_BUTTON, SELECT_QUESTION_MESSAGE
from kana_practice.core.markdown_renderer import renderer
from kana_practice.core.practice_manager import PracticeManager
from kana_practice.styling.color_palette import Theme
from kana_practice.styling.styles import Styles


class QuestionCard(QWidget):
    """Shows a question prompt, its options and the feedback once answered."""

    def __init__(
        self,
        practice_manager: PracticeManager,
        on_answered: Callable[[], None] | None = None,
        theme: Theme = Theme.LIGHT,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.practice_manager = practice_manager
        self.on_answered = on_answered
        self.theme = theme
        self._question_id: int | None = None
        self._option_buttons: list[QPushButton] = []
        self._build_ui()

    def _build_ui(self) -> None:
        self._layout = QVBoxLayout()
        self.setLayout(self._layout)

        self.prompt_label = QLabel(SELECT_QUESTION_MESSAGE, self)
        self.prompt_label.setTextFormat(Qt.RichText)
        self.prompt_label.setWordWrap(True)
        self.prompt_label.setStyleSheet(Styles.get_large_label_style())
        self._layout.addWidget(self.prompt_label)

        self.options_layout = QVBoxLayout()
        self._layout.addLayout(self.options_layout)

        self.feedback_label = QLabel("", self)
        self.feedback_label.setVisible(False)
        self._layout.addWidget(self.feedback_label)

        self.explanation_label = QLabel("", self)
        self.explanation_label.setTextFormat(Qt.RichText)
        self.explanation_label.setWordWrap(True)
        self.explanation_label.setVisible(False)
        self._layout.addWidget(self.explanation_label)

        self.reset_button = QPushButton(RESET_QUESTION_BUTTON, self)
        self.reset_button.setVisible(False)
        self.reset_button.clicked.connect(self._handle_reset)
        self._layout.addWidget(self.reset_button)
        self._layout.addStretch()

    def show_message(self, message: str) -> None:
        """Replace the card content with a plain message."""
        self._question_id = None
        self._clear_options()
        self.prompt_label.setText(message)
        self.feedback_label.setVisible(False)
        self.explanation_label.setVisible(False)
        self.reset_button.setVisible(False)

    def show_question(self, question_id: int) -> None:
        self._question_id = question_id
        question = self.practice_manager.get_question(question_id)
        self.prompt_label.setText(renderer.render_fragment(question.prompt))

        self._clear_options()
        for index, (label, text) in enumerate(zip(question.option_labels, question.options)):
            button = QPushButton(f"{label}.  {text}", self)
            button.clicked.connect(lambda _checked=False, i=index: self._handle_option(i))
            self.options_layout.addWidget(button)
            self._option_buttons.append(button)
        self.refresh()

    def refresh(self) -> None:
        if self._question_id is None:
            return
        states = self.practice_manager.get_option_states(self._question_id)
        outcome = self.practice_manager.get_answer_outcome(self._question_id)
        for button, state in zip(self._option_buttons, states):
            button.setStyleSheet(Styles.get_option_button_style(state, self.theme))
            button.setEnabled(outcome is None)

        answered = outcome is not None
        self.feedback_label.setVisible(answered)
        self.reset_button.setVisible(answered)
        self.explanation_label.setVisible(answered and outcome.explanation is not None)
        if answered:
            self.feedback_label.setText(outcome.feedback)
            self.feedback_label.setStyleSheet(Styles.get_feedback_style(outcome.is_correct, self.theme))
            if outcome.explanation is not None:
                self.explanation_label.setText(renderer.render_fragment(outcome.explanation))

    def _clear_options(self) -> None:
        for button in self._option_buttons:
            self.options_layout.removeWidget(button)
            button.deleteLater()
        self._option_buttons = []

    def _handle_option(self, index: int) -> None:
        if self._question_id is None:
            return
        outcome = self.practice_manager.select_option(self._question_id, index)
        self.refresh()
        if outcome.accepted and self.on_answered is not None:
            self.on_answered()

    def _handle_reset(self) -> None:
        if self._question_id is None:
            return
        self.practice_manager.reset_question(self._question_id)
        self.refresh()
