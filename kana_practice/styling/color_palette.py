"""Color palette for KanaPractice supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    TEXT_PRIMARY = ThemeColors(light="#000000", dark="#F5F5F5")
    TEXT_SECONDARY = ThemeColors(light="#666666", dark="#AAAAAA")

    BACKGROUND_PRIMARY = ThemeColors(light="#FFFFFF", dark="#1E1E1E")

    ACCENT_PRIMARY = ThemeColors(light="#0078D4", dark="#4A9EFF")

    # Answer feedback
    SUCCESS = ThemeColors(light="#107C10", dark="#6FCF6F")
    SUCCESS_BG = ThemeColors(light="#E6F4E6", dark="#1F3A1F")
    ERROR = ThemeColors(light="#D13438", dark="#FF6B6B")
    ERROR_BG = ThemeColors(light="#FBE9EA", dark="#3F1F20")

    BORDER_PRIMARY = ThemeColors(light="#D1D1D1", dark="#555555")

    BUTTON_SECONDARY_BG = ThemeColors(light="#F5F5F5", dark="#3A3A3A")
    BUTTON_HOVER_BG = ThemeColors(light="#E8E8E8", dark="#505050")
