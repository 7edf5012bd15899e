"""Component summarising a finished session."""

from __future__ import annotations

from typing import Callable

from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import QHBoxLayout, QPushButton, QVBoxLayout, QWidget

from flag_quiz.constants.ui_constants import MODE_BUTTON_QUICK_RESTART, MODE_BUTTON_RESTART
from flag_quiz.core.markdown_renderer import renderer, results_markdown
from flag_quiz.core.models import FinalResults


class ResultsPanel(QWidget):
    """Final score table with restart actions."""

    def __init__(
        self,
        on_play_again: Callable[[], None],
        on_back_to_start: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_play_again = on_play_again
        self.on_back_to_start = on_back_to_start
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.results_view = QWebEngineView(self)
        layout.addWidget(self.results_view, stretch=1)

        button_row = QHBoxLayout()
        button_row.addStretch()

        self.play_again_button = QPushButton(MODE_BUTTON_QUICK_RESTART, self)
        self.play_again_button.clicked.connect(self.on_play_again)
        button_row.addWidget(self.play_again_button)

        self.back_button = QPushButton(MODE_BUTTON_RESTART, self)
        self.back_button.clicked.connect(self.on_back_to_start)
        button_row.addWidget(self.back_button)

        layout.addLayout(button_row)

    def show_results(self, results: FinalResults) -> None:
        self.results_view.setHtml(
            renderer.render_full_document(results_markdown(results), title="FlagQuiz results")
        )
