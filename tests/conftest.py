from __future__ import annotations

import random

import pytest

from flag_quiz.core.models import Coordinates, CountryRecord
from flag_quiz.core.services.quiz_session import QuizSessionEngine


def make_country(
    country_id: str,
    region: str = "Europe",
    population: int = 1_000_000,
    name: str | None = None,
    coordinates: Coordinates | None = Coordinates(10.0, 20.0),
    japanese: str | None = None,
) -> CountryRecord:
    names = {"english": name or f"Country {country_id}"}
    if japanese:
        names["japanese"] = japanese
    return CountryRecord(
        id=country_id,
        display_names=names,
        region=region,
        subregion="",
        coordinates=coordinates,
        flag_image_ref=f"https://flags.example/{country_id.lower()}.png",
        population=population,
    )


def make_countries(count: int, region: str = "Europe") -> list[CountryRecord]:
    return [
        make_country(f"C{idx:02d}", region=region, population=(count - idx) * 1000)
        for idx in range(count)
    ]


class StaticProvider:
    """Country provider returning a fixed list and counting calls."""

    def __init__(self, countries, error: Exception | None = None) -> None:
        self.countries = list(countries)
        self.error = error
        self.calls = 0

    def get_country_pool(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.countries)


class RecordingPresenter:
    """Records every presentation notification as ``(name, args)``."""

    def __init__(self) -> None:
        self.events: list[tuple] = []

    def names(self) -> list[str]:
        return [event[0] for event in self.events]

    def of(self, name: str) -> list[tuple]:
        return [event[1:] for event in self.events if event[0] == name]

    def on_session_start(self, total_questions):
        self.events.append(("session_start", total_questions))

    def on_question_ready(self, flag_ref, option_names):
        self.events.append(("question_ready", flag_ref, list(option_names)))

    def on_answer_result(self, correct_index, selected_index, correct_display_name):
        self.events.append(("answer_result", correct_index, selected_index, correct_display_name))

    def on_score_changed(self, score, questions_answered):
        self.events.append(("score_changed", score, questions_answered))

    def on_progress_changed(self, percent):
        self.events.append(("progress_changed", percent))

    def on_session_end(self, results):
        self.events.append(("session_end", results))


class RecordingGeo:
    """Geo adapter that logs into the same event list as a presenter."""

    def __init__(self, events: list[tuple]) -> None:
        self.events = events

    def highlight(self, country_id, coordinates):
        self.events.append(("highlight", country_id, coordinates))

    def clear_highlight(self):
        self.events.append(("clear_highlight",))


@pytest.fixture
def presenter() -> RecordingPresenter:
    return RecordingPresenter()


@pytest.fixture
def geo(presenter) -> RecordingGeo:
    return RecordingGeo(presenter.events)


@pytest.fixture
def provider() -> StaticProvider:
    return StaticProvider(make_countries(30))


@pytest.fixture
def engine(provider, presenter, geo) -> QuizSessionEngine:
    return QuizSessionEngine(
        provider=provider,
        presenter=presenter,
        geo_highlighter=geo,
        rng=random.Random(1234),
    )
