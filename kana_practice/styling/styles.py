"""Centralized styles for the application."""

from kana_practice.core.models import OptionState

from .color_palette import ColorPalette, Theme


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow, QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Noto Sans JP', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QListWidget {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
            }}
            QGroupBox {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
                margin-top: 6px;
                padding-top: 10px;
            }}
            QGroupBox::title {{
                subcontrol-origin: margin;
                left: 10px;
                padding: 0 3px 0 3px;
                color: {ColorPalette.ACCENT_PRIMARY.get(theme)};
            }}
        """

    @staticmethod
    def get_option_button_style(state: OptionState, theme: Theme = Theme.LIGHT) -> str:
        """Stylesheet for one answer option in the given presentation state."""
        if state is OptionState.CORRECT:
            return (
                f"color: {ColorPalette.SUCCESS.get(theme)};"
                f" background-color: {ColorPalette.SUCCESS_BG.get(theme)};"
                f" border: 2px solid {ColorPalette.SUCCESS.get(theme)};"
            )
        if state is OptionState.INCORRECT_SELECTED:
            return (
                f"color: {ColorPalette.ERROR.get(theme)};"
                f" background-color: {ColorPalette.ERROR_BG.get(theme)};"
                f" border: 2px solid {ColorPalette.ERROR.get(theme)};"
            )
        if state is OptionState.DIMMED:
            return f"color: {ColorPalette.TEXT_SECONDARY.get(theme)};"
        return ""

    @staticmethod
    def get_feedback_style(is_correct: bool, theme: Theme = Theme.LIGHT) -> str:
        color = ColorPalette.SUCCESS if is_correct else ColorPalette.ERROR
        return f"color: {color.get(theme)}; font-weight: bold;"

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"
