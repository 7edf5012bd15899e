"""Settings dialog for configuring FlagQuiz preferences."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
)

from flag_quiz.constants.quiz_constants import DEFAULT_LANGUAGE, FEEDBACK_DELAY_MS, SUPPORTED_LANGUAGES


class SettingsDialog(QDialog):
    """Dialog for configuring application settings."""

    def __init__(
        self,
        parent=None,
        game_font_size: int = 14,
        language: str = DEFAULT_LANGUAGE,
        feedback_delay_ms: int = FEEDBACK_DELAY_MS,
        shuffle_seed: int | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(400)

        self._game_font_size = game_font_size
        self._language = language if language in SUPPORTED_LANGUAGES else DEFAULT_LANGUAGE
        self._feedback_delay_ms = max(0, feedback_delay_ms)
        self._shuffle_seed = shuffle_seed

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        # Game settings group
        game_group = QGroupBox("Game")
        game_layout = QVBoxLayout()
        game_group.setLayout(game_layout)

        language_row = QHBoxLayout()
        language_label = QLabel("Country name language:")
        language_label.setToolTip("Language used for answer options and the country card")
        self.language_combo = QComboBox()
        for language in SUPPORTED_LANGUAGES:
            self.language_combo.addItem(language.capitalize(), language)
        self.language_combo.setCurrentIndex(SUPPORTED_LANGUAGES.index(self._language))
        language_row.addWidget(language_label)
        language_row.addStretch()
        language_row.addWidget(self.language_combo)
        game_layout.addLayout(language_row)

        delay_row = QHBoxLayout()
        delay_label = QLabel("Feedback delay before next flag:")
        delay_label.setToolTip("How long the answer and map stay visible after each answer")
        self.delay_spinbox = QSpinBox()
        self.delay_spinbox.setRange(0, 10000)
        self.delay_spinbox.setSingleStep(250)
        self.delay_spinbox.setValue(self._feedback_delay_ms)
        self.delay_spinbox.setSuffix(" ms")
        delay_row.addWidget(delay_label)
        delay_row.addStretch()
        delay_row.addWidget(self.delay_spinbox)
        game_layout.addLayout(delay_row)

        seed_row = QHBoxLayout()
        self.seed_checkbox = QCheckBox("Use fixed shuffle seed")
        self.seed_checkbox.setToolTip("Replays the same flags and option order on every session")
        self.seed_checkbox.setChecked(self._shuffle_seed is not None)
        self.seed_spinbox = QSpinBox()
        self.seed_spinbox.setRange(0, 999999)
        self.seed_spinbox.setValue(self._shuffle_seed or 0)
        self.seed_spinbox.setEnabled(self._shuffle_seed is not None)
        self.seed_checkbox.toggled.connect(self.seed_spinbox.setEnabled)
        seed_row.addWidget(self.seed_checkbox)
        seed_row.addStretch()
        seed_row.addWidget(self.seed_spinbox)
        game_layout.addLayout(seed_row)

        layout.addWidget(game_group)

        # Display settings group
        display_group = QGroupBox("Display")
        display_layout = QVBoxLayout()
        display_group.setLayout(display_layout)

        font_row = QHBoxLayout()
        font_label = QLabel("Answer button font size:")
        self.game_font_spinbox = QSpinBox()
        self.game_font_spinbox.setRange(10, 32)
        self.game_font_spinbox.setValue(self._game_font_size)
        self.game_font_spinbox.setSuffix(" pt")
        font_row.addWidget(font_label)
        font_row.addStretch()
        font_row.addWidget(self.game_font_spinbox)
        display_layout.addLayout(font_row)

        layout.addWidget(display_group)

        # Buttons
        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    def get_game_font_size(self) -> int:
        """Get the selected answer button font size."""
        return self.game_font_spinbox.value()

    def get_language(self) -> str:
        return self.language_combo.currentData()

    def get_feedback_delay_ms(self) -> int:
        return self.delay_spinbox.value()

    def get_shuffle_seed(self) -> int | None:
        """Get the fixed seed, or None when sessions should be random."""
        if not self.seed_checkbox.isChecked():
            return None
        return self.seed_spinbox.value()
