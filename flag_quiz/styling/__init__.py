"""Styling module for the FlagQuiz window."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
