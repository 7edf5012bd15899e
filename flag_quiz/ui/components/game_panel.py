"""Component showing the current flag, its answer options and the running score."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence

from PySide6.QtCore import Qt, QUrl
from PySide6.QtGui import QPixmap
from PySide6.QtNetwork import QNetworkAccessManager, QNetworkReply, QNetworkRequest
from PySide6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from flag_quiz.constants.quiz_constants import OPTION_COUNT
from flag_quiz.constants.ui_constants import (
    FEEDBACK_CORRECT,
    FEEDBACK_INCORRECT,
    FLAG_LOADING_TEXT,
    FLAG_MAX_HEIGHT,
    FLAG_MAX_WIDTH,
    FLAG_UNAVAILABLE_TEXT,
    GAME_PROMPT,
    QUESTION_COUNTER_TEMPLATE,
    SCORE_TEMPLATE,
)
from flag_quiz.styling.styles import OptionState, Styles


class GamePanel(QWidget):
    """UI component for answering flag questions."""

    def __init__(
        self,
        on_option_selected: Callable[[int], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_option_selected = on_option_selected
        self._game_font_size: int = 14
        self._total_questions: int = 0
        self._option_states: list[OptionState] = [OptionState.NEUTRAL] * OPTION_COUNT
        self._pending_flag_url: QUrl | None = None

        self._network = QNetworkAccessManager(self)
        self._network.finished.connect(self._handle_flag_reply)

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        stats_row = QHBoxLayout()
        self.counter_label = QLabel("", self)
        stats_row.addWidget(self.counter_label)
        stats_row.addStretch()
        self.score_label = QLabel(SCORE_TEMPLATE.format(score=0, answered=0), self)
        stats_row.addWidget(self.score_label)
        layout.addLayout(stats_row)

        self.progress_bar = QProgressBar(self)
        self.progress_bar.setRange(0, 100)
        self.progress_bar.setValue(0)
        self.progress_bar.setTextVisible(False)
        layout.addWidget(self.progress_bar)

        self.prompt_label = QLabel(GAME_PROMPT, self)
        self.prompt_label.setAlignment(Qt.AlignCenter)
        self.prompt_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.prompt_label)

        self.flag_label = QLabel("", self)
        self.flag_label.setAlignment(Qt.AlignCenter)
        self.flag_label.setMinimumHeight(FLAG_MAX_HEIGHT)
        layout.addWidget(self.flag_label)

        options_grid = QGridLayout()
        self.option_buttons: list[QPushButton] = []
        for idx in range(OPTION_COUNT):
            button = QPushButton("", self)
            button.clicked.connect(lambda _checked=False, i=idx: self.on_option_selected(i))
            self.option_buttons.append(button)
            options_grid.addWidget(button, idx // 2, idx % 2)
        layout.addLayout(options_grid)

        self.feedback_label = QLabel("", self)
        self.feedback_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.feedback_label)

        self._refresh_option_styles()

    # --- Engine updates ---

    def reset(self, total_questions: int) -> None:
        self._total_questions = total_questions
        self.set_question_number(0)
        self.set_score(0, 0)
        self.set_progress(0)
        self.feedback_label.setText("")
        self.flag_label.clear()

    def set_question_number(self, number: int) -> None:
        if number <= 0:
            self.counter_label.setText("")
            return
        self.counter_label.setText(QUESTION_COUNTER_TEMPLATE.format(current=number, total=self._total_questions))

    def show_question(self, flag_ref: str, option_names: Sequence[str]) -> None:
        self.feedback_label.setText("")
        self._option_states = [OptionState.NEUTRAL] * OPTION_COUNT
        for button, name in zip(self.option_buttons, option_names):
            button.setText(name)
            button.setEnabled(True)
        self._refresh_option_styles()
        self._load_flag(flag_ref)

    def show_answer(self, correct_index: int, selected_index: int, correct_display_name: str) -> None:
        for button in self.option_buttons:
            button.setEnabled(False)
        self._option_states[correct_index] = OptionState.CORRECT
        is_correct = correct_index == selected_index
        if not is_correct:
            self._option_states[selected_index] = OptionState.INCORRECT
        self._refresh_option_styles()

        template = FEEDBACK_CORRECT if is_correct else FEEDBACK_INCORRECT
        self.feedback_label.setText(template.format(name=correct_display_name))
        self.feedback_label.setStyleSheet(Styles.get_feedback_style(is_correct))

    def set_score(self, score: int, questions_answered: int) -> None:
        self.score_label.setText(SCORE_TEMPLATE.format(score=score, answered=questions_answered))

    def set_progress(self, percent: int) -> None:
        self.progress_bar.setValue(percent)

    def set_game_font_size(self, size: int) -> None:
        self._game_font_size = size
        self._refresh_option_styles()

    # --- Flag image ---

    def _load_flag(self, flag_ref: str) -> None:
        self._pending_flag_url = None
        if not flag_ref:
            self.flag_label.setText(FLAG_UNAVAILABLE_TEXT)
            return

        url = QUrl(flag_ref)
        if url.scheme() in ("http", "https"):
            self.flag_label.setText(FLAG_LOADING_TEXT)
            self._pending_flag_url = url
            self._network.get(QNetworkRequest(url))
            return

        pixmap = QPixmap(str(Path(flag_ref)))
        self._set_flag_pixmap(pixmap)

    def _handle_flag_reply(self, reply: QNetworkReply) -> None:
        try:
            if self._pending_flag_url is None or reply.request().url() != self._pending_flag_url:
                return
            self._pending_flag_url = None
            if reply.error() != QNetworkReply.NetworkError.NoError:
                self.flag_label.setText(FLAG_UNAVAILABLE_TEXT)
                return
            pixmap = QPixmap()
            pixmap.loadFromData(reply.readAll())
            self._set_flag_pixmap(pixmap)
        finally:
            reply.deleteLater()

    def _set_flag_pixmap(self, pixmap: QPixmap) -> None:
        if pixmap.isNull():
            self.flag_label.setText(FLAG_UNAVAILABLE_TEXT)
            return
        self.flag_label.setPixmap(
            pixmap.scaled(FLAG_MAX_WIDTH, FLAG_MAX_HEIGHT, Qt.KeepAspectRatio, Qt.SmoothTransformation)
        )

    def _refresh_option_styles(self) -> None:
        for button, state in zip(self.option_buttons, self._option_states):
            button.setStyleSheet(Styles.get_option_button_style(state, self._game_font_size))
