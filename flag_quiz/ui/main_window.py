"""Qt main window running the flag quiz on the shared quiz manager."""

from __future__ import annotations

from enum import Enum, auto
import logging

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import (
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QSplitter,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from flag_quiz.constants.about import APP_ABOUT_TEXT, APP_LICENSE, APP_NAME, APP_VERSION, HELP_TEXT
from flag_quiz.constants.quiz_constants import FEEDBACK_DELAY_MS
from flag_quiz.constants.ui_constants import (
    MODE_BUTTON_RESTART,
    PLAYER_URL_PLACEHOLDER,
    START_FAILED_TITLE,
    WINDOW_TITLE,
)
from flag_quiz.core.errors import QuizError
from flag_quiz.core.markdown_renderer import country_card_markdown
from flag_quiz.core.models import FinalResults
from flag_quiz.core.quiz_manager import QuizManager
from flag_quiz.styling.styles import Styles
from flag_quiz.ui.components.game_panel import GamePanel
from flag_quiz.ui.components.map_panel import MapPanel
from flag_quiz.ui.components.results_panel import ResultsPanel
from flag_quiz.ui.components.start_panel import StartPanel
from flag_quiz.ui.dialog_helpers import confirm_abandon_session, show_error, show_info
from flag_quiz.ui.qt_adapters import QtGeoHighlighter, QtPresenter
from flag_quiz.ui.settings_dialog import SettingsDialog

logger = logging.getLogger(__name__)


class WindowMode(Enum):
    """Which screen the window is showing."""

    START = auto()
    GAME = auto()
    RESULTS = auto()


class MainWindow(QMainWindow):
    """Main Qt window switching between the start, game and results screens."""

    def __init__(self, quiz_manager: QuizManager, player_url: str | None = None) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(1100, 700)

        self.quiz_manager = quiz_manager
        self.player_url = player_url or PLAYER_URL_PLACEHOLDER

        self._mode = WindowMode.START
        self._question_number: int = 0
        self._game_font_size: int = 14
        self._feedback_delay_ms: int = FEEDBACK_DELAY_MS
        self._shuffle_seed: int | None = None

        self._build_ui()
        self._configure_advance_timer()
        self._connect_engine_signals()
        self._apply_styles()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_mode_buttons(root_layout)

        self.mode_stack = QStackedWidget(self)

        self.start_panel = StartPanel(self.player_url, on_start=self._handle_start, parent=self)

        self.game_panel = GamePanel(on_option_selected=self._handle_option_selected, parent=self)
        self.map_panel = MapPanel(self)
        self.game_splitter = QSplitter(Qt.Horizontal, self)
        self.game_splitter.addWidget(self.game_panel)
        self.game_splitter.addWidget(self.map_panel)
        self.game_splitter.setStretchFactor(0, 3)
        self.game_splitter.setStretchFactor(1, 2)

        self.results_panel = ResultsPanel(
            on_play_again=self._handle_play_again,
            on_back_to_start=self._handle_back_to_start,
            parent=self,
        )

        self.mode_stack.addWidget(self.start_panel)
        self.mode_stack.addWidget(self.game_splitter)
        self.mode_stack.addWidget(self.results_panel)

        root_layout.addWidget(self.mode_stack)

        self._set_mode(WindowMode.START)

    def _build_mode_buttons(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()

        self.restart_button = QPushButton(MODE_BUTTON_RESTART, self)
        self.restart_button.clicked.connect(self._handle_abandon_request)
        button_row.addWidget(self.restart_button)

        button_row.addStretch()

        self.about_button = QPushButton(f"About {APP_NAME}", self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        self.help_button = QPushButton("Help", self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        self.settings_button = QPushButton("Settings", self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)

        layout.addLayout(button_row)

    def _configure_advance_timer(self) -> None:
        self.advance_timer = QTimer(self)
        self.advance_timer.setSingleShot(True)
        self.advance_timer.timeout.connect(self._advance_after_feedback)

    def _connect_engine_signals(self) -> None:
        # The manager notifies while holding its lock; slots call back into it.
        self.presenter = QtPresenter(self)
        self.presenter.session_started.connect(self._on_session_started, Qt.QueuedConnection)
        self.presenter.question_ready.connect(self._on_question_ready, Qt.QueuedConnection)
        self.presenter.answer_result.connect(self._on_answer_result, Qt.QueuedConnection)
        self.presenter.score_changed.connect(self.game_panel.set_score, Qt.QueuedConnection)
        self.presenter.progress_changed.connect(self.game_panel.set_progress, Qt.QueuedConnection)
        self.presenter.session_ended.connect(self._on_session_ended, Qt.QueuedConnection)

        self.geo_highlighter = QtGeoHighlighter(self)
        self.geo_highlighter.highlighted.connect(self._on_highlighted, Qt.QueuedConnection)
        self.geo_highlighter.cleared.connect(self.map_panel.clear, Qt.QueuedConnection)

        self.quiz_manager.add_presenter(self.presenter)
        self.quiz_manager.add_geo_highlighter(self.geo_highlighter)

    def _set_mode(self, mode: WindowMode) -> None:
        self._mode = mode
        self.restart_button.setEnabled(mode == WindowMode.GAME)
        index_map = {
            WindowMode.START: 0,
            WindowMode.GAME: 1,
            WindowMode.RESULTS: 2,
        }
        self.mode_stack.setCurrentIndex(index_map[mode])

    # --- User actions ---

    def _handle_start(self, difficulty: str) -> None:
        try:
            self.quiz_manager.start_session(difficulty)
        except QuizError as exc:
            logger.warning("Could not start %s session: %s", difficulty, exc)
            show_error(self, START_FAILED_TITLE, str(exc))
            return
        self._set_mode(WindowMode.GAME)

    def _handle_option_selected(self, index: int) -> None:
        outcome = self.quiz_manager.submit_answer(index)
        if outcome is None:
            return
        self.advance_timer.start(self._feedback_delay_ms)

    def _advance_after_feedback(self) -> None:
        try:
            self.quiz_manager.advance()
        except QuizError as exc:
            logger.error("Session stopped: %s", exc)
            show_error(self, "Session stopped", str(exc))
            self.quiz_manager.restart_session(same_difficulty=False)
            self._set_mode(WindowMode.START)

    def _handle_play_again(self) -> None:
        self.advance_timer.stop()
        try:
            self.quiz_manager.restart_session(same_difficulty=True)
        except QuizError as exc:
            show_error(self, START_FAILED_TITLE, str(exc))
            self._set_mode(WindowMode.START)
            return
        self._set_mode(WindowMode.GAME if self.quiz_manager.is_active() else WindowMode.START)

    def _handle_back_to_start(self) -> None:
        self.advance_timer.stop()
        self.quiz_manager.restart_session(same_difficulty=False)
        self._set_mode(WindowMode.START)

    def _handle_abandon_request(self) -> None:
        if self._mode != WindowMode.GAME:
            return
        if self.quiz_manager.is_active() and not confirm_abandon_session(self):
            return
        self._handle_back_to_start()

    def keyPressEvent(self, event) -> None:  # noqa: N802
        if event.key() == Qt.Key_Escape and self._mode == WindowMode.GAME:
            self._handle_abandon_request()
            return
        super().keyPressEvent(event)

    # --- Engine notifications ---

    def _on_session_started(self, total_questions: int) -> None:
        self._question_number = 0
        self.game_panel.reset(total_questions)
        self.map_panel.clear()
        self._set_mode(WindowMode.GAME)

    def _on_question_ready(self, flag_ref: str, option_names: list) -> None:
        self._question_number += 1
        self.game_panel.set_question_number(self._question_number)
        self.game_panel.show_question(flag_ref, option_names)

    def _on_answer_result(self, correct_index: int, selected_index: int, correct_display_name: str) -> None:
        self.game_panel.show_answer(correct_index, selected_index, correct_display_name)
        question = self.quiz_manager.get_current_question()
        if question is not None and self.quiz_manager.is_answered():
            self.map_panel.show_card(
                country_card_markdown(question.correct, self.quiz_manager.get_language())
            )

    def _on_highlighted(self, country_id: str, latitude: float, longitude: float) -> None:
        logger.debug("Highlighting %s", country_id)
        self.map_panel.show_location(latitude, longitude)

    def _on_session_ended(self, results: FinalResults) -> None:
        self.advance_timer.stop()
        # Sessions abandoned from this window return to the start screen instead.
        if self._mode != WindowMode.GAME:
            return
        self.results_panel.show_results(results)
        self._set_mode(WindowMode.RESULTS)

    # --- Dialogs ---

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}\n\n"
            f"Browser player: {self.player_url}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(
            self,
            self._game_font_size,
            self.quiz_manager.get_language(),
            self._feedback_delay_ms,
            self._shuffle_seed,
        )
        if dialog.exec():
            self._game_font_size = dialog.get_game_font_size()
            self._feedback_delay_ms = dialog.get_feedback_delay_ms()
            self._shuffle_seed = dialog.get_shuffle_seed()

            self.quiz_manager.set_language(dialog.get_language())
            self.quiz_manager.set_shuffle_seed(self._shuffle_seed)

            self._apply_styles()

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style())
        self.start_panel.apply_font_size(self._game_font_size)
        self.game_panel.set_game_font_size(self._game_font_size)
