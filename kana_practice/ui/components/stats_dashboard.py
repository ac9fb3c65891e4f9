"""Component showing the session statistics cards."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from kana_practice.constants.ui_constants import RESET_STATS_BUTTON
from kana_practice.core.practice_manager import PracticeManager
from kana_practice.core.stats_formatter import StatCard
from kana_practice.ui.dialog_helpers import confirm_reset_stats


class StatsDashboard(QWidget):
    """Three titled cards (General, Answers, Characters) of session metrics."""

    def __init__(self, practice_manager: PracticeManager, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.practice_manager = practice_manager
        self._value_labels: dict[tuple[str, str], QLabel] = {}
        self._build_ui()
        self.refresh()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.cards_row = QHBoxLayout()
        layout.addLayout(self.cards_row)
        for card in self.practice_manager.get_dashboard():
            self.cards_row.addWidget(self._build_card(card), stretch=1)
        layout.addStretch()

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.reset_button = QPushButton(RESET_STATS_BUTTON, self)
        self.reset_button.clicked.connect(self._handle_reset)
        button_row.addWidget(self.reset_button)
        layout.addLayout(button_row)

    def _build_card(self, card: StatCard) -> QGroupBox:
        group = QGroupBox(card.title, self)
        grid = QGridLayout()
        group.setLayout(grid)
        for row, item in enumerate(card.stats):
            grid.addWidget(QLabel(item.label, group), row, 0)
            value_label = QLabel(item.value, group)
            value_label.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
            value_label.setStyleSheet("font-weight: bold;")
            grid.addWidget(value_label, row, 1)
            self._value_labels[(card.title, item.label)] = value_label
        return group

    def refresh(self) -> None:
        for card in self.practice_manager.get_dashboard():
            for item in card.stats:
                label = self._value_labels.get((card.title, item.label))
                if label is not None:
                    label.setText(item.value)

    def _handle_reset(self) -> None:
        if confirm_reset_stats(self):
            self.practice_manager.reset_history()
            self.refresh()
