from flag_quiz.core.models import Coordinates, FinalResults
from flag_quiz.core.services.session_snapshot import SessionSnapshot


def test_snapshot_records_question_and_answer():
    snapshot = SessionSnapshot()
    snapshot.on_session_start(10)
    snapshot.on_question_ready("flag.png", ["A", "B", "C", "D"])
    snapshot.on_answer_result(2, 1, "C")

    payload = snapshot.to_dict()

    assert payload["total_questions"] == 10
    assert payload["flag_ref"] == "flag.png"
    assert payload["answer"] == {
        "correct_index": 2,
        "selected_index": 1,
        "correct_display_name": "C",
        "is_correct": False,
    }


def test_new_question_clears_previous_answer():
    snapshot = SessionSnapshot()
    snapshot.on_answer_result(0, 0, "A")
    snapshot.on_question_ready("next.png", ["E", "F", "G", "H"])
    assert snapshot.answer is None


def test_session_end_keeps_results_and_highlight():
    snapshot = SessionSnapshot()
    snapshot.highlight("FR", Coordinates(46.0, 2.0))
    snapshot.on_session_end(FinalResults(score=3, total=10, accuracy=30, questions_answered=10))

    payload = snapshot.to_dict()
    assert payload["results"]["score"] == 3
    assert payload["option_names"] == []
    assert payload["highlighted"] == {"country_id": "FR", "latitude": 46.0, "longitude": 2.0}

    snapshot.reset()
    assert snapshot.results is None
    assert snapshot.highlighted is None
