"""Component for choosing a difficulty and starting a session."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from flag_quiz.constants.ui_constants import (
    DIFFICULTY_BUTTON_LABELS,
    PLAYER_URL_TEMPLATE,
    START_DESCRIPTION,
)
from flag_quiz.styling.styles import Styles


class StartPanel(QWidget):
    """Difficulty picker shown before a session starts."""

    def __init__(
        self,
        player_url: str,
        on_start: Callable[[str], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.player_url = player_url
        self.on_start = on_start
        self.difficulty_buttons: dict[str, QPushButton] = {}

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)
        layout.addStretch()

        self.description_label = QLabel(START_DESCRIPTION, self)
        self.description_label.setWordWrap(True)
        self.description_label.setAlignment(Qt.AlignCenter)
        self.description_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.description_label)

        button_row = QHBoxLayout()
        button_row.addStretch()
        for difficulty, label in DIFFICULTY_BUTTON_LABELS.items():
            button = QPushButton(label, self)
            button.setMinimumWidth(160)
            button.clicked.connect(lambda _checked=False, d=difficulty: self.on_start(d))
            self.difficulty_buttons[difficulty] = button
            button_row.addWidget(button)
        button_row.addStretch()
        layout.addLayout(button_row)

        self.network_label = QLabel(PLAYER_URL_TEMPLATE.format(url=self.player_url), self)
        self.network_label.setAlignment(Qt.AlignCenter)
        self.network_label.setTextInteractionFlags(Qt.TextSelectableByMouse)
        layout.addWidget(self.network_label)
        layout.addStretch()

    def apply_font_size(self, size: int) -> None:
        style = f"font-size: {size}pt; padding: 10px;"
        for button in self.difficulty_buttons.values():
            button.setStyleSheet(style)
