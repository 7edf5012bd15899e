"""Centralized styles and font definitions for the application."""

from enum import Enum, auto

from .color_palette import ColorPalette, Theme


class OptionState(Enum):
    """Visual state of an answer button."""
    NEUTRAL = auto()
    CORRECT = auto()
    INCORRECT = auto()


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QProgressBar {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                background-color: {ColorPalette.BACKGROUND_SECONDARY.get(theme)};
            }}
            QProgressBar::chunk {{
                background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
            }}
        """

    @staticmethod
    def get_option_button_style(state: OptionState, font_size: int, theme: Theme = Theme.LIGHT) -> str:
        if state is OptionState.CORRECT:
            background = ColorPalette.SUCCESS.get(theme)
            text = ColorPalette.ANSWER_TEXT.get(theme)
        elif state is OptionState.INCORRECT:
            background = ColorPalette.ERROR.get(theme)
            text = ColorPalette.ANSWER_TEXT.get(theme)
        else:
            background = ColorPalette.BUTTON_PRIMARY_BG.get(theme)
            text = ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)
        return (
            f"QPushButton {{ background-color: {background}; color: {text}; "
            f"font-size: {font_size}pt; padding: 12px; border-radius: 6px; }}"
        )

    @staticmethod
    def get_feedback_style(is_correct: bool, theme: Theme = Theme.LIGHT) -> str:
        color = ColorPalette.SUCCESS.get(theme) if is_correct else ColorPalette.ERROR.get(theme)
        return f"font-size: 14pt; font-weight: bold; color: {color};"

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"
