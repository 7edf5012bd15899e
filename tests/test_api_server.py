from __future__ import annotations

from fastapi.testclient import TestClient
import pytest

from conftest import StaticProvider, make_countries
from flag_quiz.core.errors import DataUnavailableError
from flag_quiz.core.quiz_manager import QuizManager
from flag_quiz.server.api_server import create_api_app


@pytest.fixture
def manager() -> QuizManager:
    manager = QuizManager(provider=StaticProvider(make_countries(30)))
    manager.set_shuffle_seed(21)
    return manager


@pytest.fixture
def client(manager) -> TestClient:
    return TestClient(create_api_app(manager))


def test_player_page_is_served(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "FlagQuiz" in response.text
    assert "__FEEDBACK_DELAY_MS__" not in response.text


def test_state_before_session(client):
    payload = client.get("/state").json()
    assert payload["status"]["is_active"] is False
    assert payload["display"]["option_names"] == []
    assert payload["card_html"] is None
    assert payload["results_html"] is None
    assert payload["language"] == "english"


def test_start_answer_and_advance(client, manager):
    response = client.post("/session/start", json={"difficulty": "beginner"})
    assert response.status_code == 201
    assert response.json()["total_questions"] == 10

    state = client.get("/state").json()
    assert len(state["display"]["option_names"]) == 4

    correct_index = manager.get_current_question().correct_option_index
    answer = client.post("/answer", json={"selected_option_index": correct_index}).json()
    assert answer["accepted"] is True
    assert answer["is_correct"] is True
    assert answer["correct_option_index"] == correct_index

    state = client.get("/state").json()
    assert state["status"]["is_answered"] is True
    assert "<h3>" in state["card_html"]

    repeat = client.post("/answer", json={"selected_option_index": correct_index}).json()
    assert repeat == {"accepted": False}

    status = client.post("/advance").json()
    assert status["question_index"] == 1
    assert status["is_answered"] is False


def test_invalid_difficulty_returns_422(client):
    response = client.post("/session/start", json={"difficulty": "nonexistent-difficulty"})
    assert response.status_code == 422
    assert "Unknown difficulty" in response.json()["detail"]


def test_small_pool_returns_409():
    manager = QuizManager(provider=StaticProvider(make_countries(3)))
    response = TestClient(create_api_app(manager)).post("/session/start", json={"difficulty": "beginner"})
    assert response.status_code == 409


def test_missing_data_returns_503():
    manager = QuizManager(provider=StaticProvider([], error=DataUnavailableError("offline")))
    response = TestClient(create_api_app(manager)).post("/session/start", json={"difficulty": "beginner"})
    assert response.status_code == 503


def test_out_of_range_answer_returns_422(client):
    client.post("/session/start", json={"difficulty": "beginner"})
    response = client.post("/answer", json={"selected_option_index": 7})
    assert response.status_code == 422


def test_end_session_reports_results(client, manager):
    client.post("/session/start", json={"difficulty": "beginner"})
    client.post("/answer", json={"selected_option_index": manager.get_current_question().correct_option_index})

    payload = client.post("/session/end").json()

    assert payload["results"] == {"score": 1, "total": 10, "accuracy": 100, "questions_answered": 1}
    state = client.get("/state").json()
    assert "<table>" in state["results_html"]
    assert client.post("/session/end").json() == {"results": None}


def test_statistics_endpoint(client):
    client.post("/session/start", json={"difficulty": "beginner"})
    client.post("/answer", json={"selected_option_index": 0})
    client.post("/advance")

    stats = client.get("/statistics").json()
    assert stats["questions_answered"] == 1
    assert stats["remaining_questions"] == 9
    assert stats["correct_answers"] + stats["incorrect_answers"] == 1


def test_restart_endpoint(client):
    client.post("/session/start", json={"difficulty": "intermediate"})

    same = client.post("/session/restart", json={"same_difficulty": True}).json()
    assert same["is_active"] is True
    assert same["difficulty"] == "intermediate"

    idle = client.post("/session/restart", json={}).json()
    assert idle["is_active"] is False
    assert client.get("/state").json()["display"]["results"] is None


def test_state_card_matches_answered_question(client, manager):
    manager.set_language("hiragana")
    client.post("/session/start", json={"difficulty": "beginner"})
    question = manager.get_current_question()
    client.post("/answer", json={"selected_option_index": question.correct_option_index})

    state = client.get("/state").json()

    assert state["language"] == "hiragana"
    assert state["status"]["score"] == state["display"]["score"] == 1
    assert question.correct.display_name("hiragana") in state["card_html"]
