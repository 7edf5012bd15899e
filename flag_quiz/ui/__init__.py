"""Qt UI components for the FlagQuiz window."""

from .dialog_helpers import confirm_abandon_session, show_error, show_info
from .main_window import MainWindow
from .qt_adapters import QtGeoHighlighter, QtPresenter

__all__ = [
    "MainWindow",
    "QtGeoHighlighter",
    "QtPresenter",
    "confirm_abandon_session",
    "show_error",
    "show_info",
]
