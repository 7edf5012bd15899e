from __future__ import annotations

import json

from flag_quiz.cli import ConsolePresenter, build_parser, main


def _run(argv, input_func=None):
    lines: list[str] = []
    kwargs = {"write": lines.append}
    if input_func is not None:
        kwargs["input_func"] = input_func
    code = main(argv, **kwargs)
    return code, lines


def test_scripted_beginner_session_runs_to_the_end():
    code, lines = _run(["--difficulty", "beginner", "--seed", "5", "--answers", ",".join(["1"] * 10)])

    assert code == 0
    assert lines[0] == "New session: 10 questions."
    assert sum(1 for line in lines if line.startswith("Q")) == 10
    assert any(line.startswith("Final score: ") and "of 10 answered" in line for line in lines)


def test_same_seed_gives_same_transcript():
    argv = ["--seed", "9", "--answers", "1,2,3,4,1,2,3,4,1,2"]
    assert _run(argv)[1] == _run(argv)[1]


def test_running_out_of_answers_ends_session():
    code, lines = _run(["--seed", "1", "--answers", "2,3"])

    assert code == 0
    assert lines[-1].startswith("Final score: ")
    assert lines[-1].endswith("of 2 answered)")


def test_invalid_answers_are_reprompted():
    code, lines = _run(["--seed", "1", "--answers", "x,9,1"])

    assert code == 0
    assert lines.count("Please enter a number between 1 and 4.") == 2
    assert lines[-1].endswith("of 1 answered)")


def test_interactive_input_until_eof():
    answers = iter(["1", "4"])

    def fake_input(prompt):
        assert prompt == "Your answer (1-4): "
        try:
            return next(answers)
        except StopIteration:
            raise EOFError from None

    code, lines = _run(["--seed", "3"], input_func=fake_input)

    assert code == 0
    assert lines[-1].endswith("of 2 answered)")


def test_unknown_difficulty_exits_with_error():
    code, lines = _run(["--difficulty", "nonexistent-difficulty"])
    assert code == 2
    assert lines[0].startswith("Could not start the quiz: ")


def test_custom_country_file(tmp_path):
    entries = [
        {
            "name": {"common": f"Land {idx}"},
            "cca2": f"L{idx}",
            "region": "Europe",
            "latlng": [float(idx), float(idx)],
            "flags": {"png": f"land{idx}.png"},
            "population": 100 - idx,
        }
        for idx in range(5)
    ]
    path = tmp_path / "countries.json"
    path.write_text(json.dumps(entries), encoding="utf-8")

    code, lines = _run(["--countries", str(path), "--seed", "2", "--answers", "1"])

    assert code == 0
    assert any(line.strip().startswith("1. Land ") for line in lines)
    assert any(line.strip().startswith("Map: L") for line in lines)


def test_missing_country_file_exits_with_error(tmp_path):
    code, lines = _run(["--countries", str(tmp_path / "missing.json")])
    assert code == 2
    assert "Country data unavailable" in lines[0]


def test_console_presenter_reports_wrong_answer():
    lines: list[str] = []
    presenter = ConsolePresenter(lines.append)
    presenter.on_answer_result(2, 0, "France")
    assert lines == ["Incorrect. Answer: 3. France"]


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.difficulty == "beginner"
    assert args.language == "english"
    assert args.seed is None
