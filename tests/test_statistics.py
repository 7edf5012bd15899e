from __future__ import annotations

import pytest

from conftest import make_countries
from flag_quiz.core import statistics
from flag_quiz.core.models import Difficulty, Question, SessionState


def _state(**overrides) -> SessionState:
    values = dict(
        difficulty=Difficulty.BEGINNER,
        pool=tuple(make_countries(6)),
        question_index=0,
        total_questions=10,
        score=0,
        active=True,
    )
    values.update(overrides)
    return SessionState(**values)


@pytest.mark.parametrize(
    "question_index, total, expected",
    [(0, 10, 0), (3, 10, 30), (1, 3, 33), (2, 3, 67), (10, 10, 100), (0, 0, 0)],
)
def test_progress_percent(question_index, total, expected):
    state = _state(question_index=question_index, total_questions=total)
    assert statistics.progress_percent(state) == expected


def test_live_accuracy_counts_current_question():
    state = _state(question_index=3, score=3)
    assert statistics.current_accuracy(state) == 75


def test_final_accuracy_uses_completed_questions():
    state = _state(question_index=3, score=2)
    assert statistics.final_accuracy(state) == 67


def test_accuracy_rounds_half_up():
    assert statistics.final_accuracy(_state(question_index=8, score=1)) == 13
    assert statistics.final_accuracy(_state(question_index=8, score=3)) == 38


def test_final_accuracy_without_completed_questions_is_zero():
    assert statistics.final_accuracy(_state()) == 0


def test_score_statistics():
    stats = statistics.score_statistics(_state(question_index=4, score=3))
    assert stats.correct_answers == 3
    assert stats.incorrect_answers == 1
    assert stats.remaining_questions == 6
    assert stats.accuracy == 75


def test_game_status():
    status = statistics.game_status(_state(question_index=2, score=1))
    assert status.is_active
    assert status.difficulty == "beginner"
    assert status.progress == 20
    assert status.accuracy == 33
    assert status.countries_available == 6


def test_game_status_for_idle_state():
    status = statistics.game_status(SessionState())
    assert not status.is_active
    assert status.difficulty is None
    assert status.progress == 0


def test_is_valid_accepts_fresh_state():
    assert statistics.is_valid(SessionState())


def test_is_valid_rejects_score_above_completed_questions():
    assert not statistics.is_valid(_state(question_index=1, score=2))
    assert statistics.is_valid(_state(question_index=1, score=2, answered=True))


def test_is_valid_rejects_unknown_used_ids():
    assert not statistics.is_valid(_state(used_ids={"XX"}))


def test_is_valid_rejects_mismatched_correct_index():
    pool = make_countries(6)
    question = Question(correct=pool[0], options=pool[:4], correct_option_index=1)
    assert not statistics.is_valid(_state(pool=tuple(pool), current_question=question))


def test_is_valid_rejects_duplicate_options():
    pool = make_countries(6)
    question = Question(correct=pool[0], options=[pool[0], pool[1], pool[1], pool[2]], correct_option_index=0)
    assert not statistics.is_valid(_state(pool=tuple(pool), current_question=question))


def test_is_valid_rejects_question_on_inactive_state():
    pool = make_countries(6)
    question = Question(correct=pool[0], options=pool[:4], correct_option_index=0)
    assert not statistics.is_valid(_state(pool=tuple(pool), current_question=question, active=False))
