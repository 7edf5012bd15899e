"""Collaborator interfaces the session engine reports to.

The engine never inspects its collaborators; it is constructed with one
presentation adapter and one geo adapter. The null implementations are the
defaults, and the composite variants fan a notification out to several
listeners (for example the Qt window and the web API at the same time).
"""

from __future__ import annotations

from typing import Protocol, Sequence

from flag_quiz.core.models import Coordinates, CountryRecord, FinalResults


class PresentationAdapter(Protocol):
    """Receives display updates from the session engine."""

    def on_session_start(self, total_questions: int) -> None: ...

    def on_question_ready(self, flag_ref: str, option_names: Sequence[str]) -> None: ...

    def on_answer_result(
        self, correct_index: int, selected_index: int, correct_display_name: str
    ) -> None: ...

    def on_score_changed(self, score: int, questions_answered: int) -> None: ...

    def on_progress_changed(self, percent: int) -> None: ...

    def on_session_end(self, results: FinalResults) -> None: ...


class GeoHighlightAdapter(Protocol):
    """Shows the answer country on a map."""

    def highlight(self, country_id: str, coordinates: Coordinates) -> None: ...

    def clear_highlight(self) -> None: ...


class CountryProvider(Protocol):
    """Supplies the full country reference set.

    Implementations raise :class:`~flag_quiz.core.errors.DataUnavailableError`
    when no data can be produced.
    """

    def get_country_pool(self) -> Sequence[CountryRecord]: ...


class NullPresenter:
    """Presentation adapter that ignores every notification."""

    def on_session_start(self, total_questions: int) -> None:
        pass

    def on_question_ready(self, flag_ref: str, option_names: Sequence[str]) -> None:
        pass

    def on_answer_result(
        self, correct_index: int, selected_index: int, correct_display_name: str
    ) -> None:
        pass

    def on_score_changed(self, score: int, questions_answered: int) -> None:
        pass

    def on_progress_changed(self, percent: int) -> None:
        pass

    def on_session_end(self, results: FinalResults) -> None:
        pass


class NullGeoHighlighter:
    """Geo adapter for sessions without a map."""

    def highlight(self, country_id: str, coordinates: Coordinates) -> None:
        pass

    def clear_highlight(self) -> None:
        pass


class CompositePresenter:
    """Forwards each notification to every registered presenter in order."""

    def __init__(self, *presenters: PresentationAdapter) -> None:
        self._presenters: list[PresentationAdapter] = list(presenters)

    def add(self, presenter: PresentationAdapter) -> None:
        self._presenters.append(presenter)

    def on_session_start(self, total_questions: int) -> None:
        for presenter in self._presenters:
            presenter.on_session_start(total_questions)

    def on_question_ready(self, flag_ref: str, option_names: Sequence[str]) -> None:
        for presenter in self._presenters:
            presenter.on_question_ready(flag_ref, option_names)

    def on_answer_result(
        self, correct_index: int, selected_index: int, correct_display_name: str
    ) -> None:
        for presenter in self._presenters:
            presenter.on_answer_result(correct_index, selected_index, correct_display_name)

    def on_score_changed(self, score: int, questions_answered: int) -> None:
        for presenter in self._presenters:
            presenter.on_score_changed(score, questions_answered)

    def on_progress_changed(self, percent: int) -> None:
        for presenter in self._presenters:
            presenter.on_progress_changed(percent)

    def on_session_end(self, results: FinalResults) -> None:
        for presenter in self._presenters:
            presenter.on_session_end(results)


class CompositeGeoHighlighter:
    """Forwards highlight requests to every registered geo adapter."""

    def __init__(self, *highlighters: GeoHighlightAdapter) -> None:
        self._highlighters: list[GeoHighlightAdapter] = list(highlighters)

    def add(self, highlighter: GeoHighlightAdapter) -> None:
        self._highlighters.append(highlighter)

    def highlight(self, country_id: str, coordinates: Coordinates) -> None:
        for highlighter in self._highlighters:
            highlighter.highlight(country_id, coordinates)

    def clear_highlight(self) -> None:
        for highlighter in self._highlighters:
            highlighter.clear_highlight()
