"""Qt signal bridges for the session engine's presentation and map interfaces."""

from __future__ import annotations

from typing import Sequence

from PySide6.QtCore import QObject, Signal

from flag_quiz.core.models import Coordinates, FinalResults


class QtPresenter(QObject):
    """Re-emits engine notifications as Qt signals.

    Engine calls arrive while the quiz manager holds its lock and may come
    from the API server thread, so slots must be connected with
    ``Qt.QueuedConnection``.
    """

    session_started = Signal(int)
    question_ready = Signal(str, list)
    answer_result = Signal(int, int, str)
    score_changed = Signal(int, int)
    progress_changed = Signal(int)
    session_ended = Signal(object)

    def on_session_start(self, total_questions: int) -> None:
        self.session_started.emit(total_questions)

    def on_question_ready(self, flag_ref: str, option_names: Sequence[str]) -> None:
        self.question_ready.emit(flag_ref, list(option_names))

    def on_answer_result(
        self, correct_index: int, selected_index: int, correct_display_name: str
    ) -> None:
        self.answer_result.emit(correct_index, selected_index, correct_display_name)

    def on_score_changed(self, score: int, questions_answered: int) -> None:
        self.score_changed.emit(score, questions_answered)

    def on_progress_changed(self, percent: int) -> None:
        self.progress_changed.emit(percent)

    def on_session_end(self, results: FinalResults) -> None:
        self.session_ended.emit(results)


class QtGeoHighlighter(QObject):
    """Re-emits map highlight requests as Qt signals."""

    highlighted = Signal(str, float, float)
    cleared = Signal()

    def highlight(self, country_id: str, coordinates: Coordinates) -> None:
        self.highlighted.emit(country_id, coordinates.latitude, coordinates.longitude)

    def clear_highlight(self) -> None:
        self.cleared.emit()
