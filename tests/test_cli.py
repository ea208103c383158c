import json

import pytest

from edumind_toolkit import __version__
from edumind_toolkit.cli import build_parser, main


@pytest.fixture
def quiz_file(tmp_path, quiz_payload):
    path = tmp_path / "quiz.json"
    path.write_text(json.dumps(quiz_payload), encoding="utf-8")
    return path


def test_main_when_quiz_file_then_exports_and_returns_zero(tmp_path, quiz_file):
    out = tmp_path / "out"

    code = main(["quiz", str(quiz_file), "--out", str(out)])

    assert code == 0
    assert sorted(p.name for p in out.iterdir()) == ["Cell_Biology_AnswerKey.pdf", "Cell_Biology_Questions.pdf"]


def test_main_when_raw_generated_text_then_json_extracted(tmp_path, quiz_payload):
    # Arrange
    raw = tmp_path / "raw.txt"
    raw.write_text(f"Sure! Here is the quiz:\n```json\n{json.dumps(quiz_payload)}\n```", encoding="utf-8")
    out = tmp_path / "out"

    # Act
    code = main(["quiz", str(raw), "--out", str(out), "--no-key"])

    # Assert
    assert code == 0
    assert [p.name for p in out.iterdir()] == ["Cell_Biology_Questions.pdf"]


def test_main_when_test_paper_with_review_then_three_files(tmp_path, paper_payload):
    source = tmp_path / "paper.json"
    source.write_text(json.dumps(paper_payload), encoding="utf-8")
    out = tmp_path / "out"

    code = main(["test", str(source), "--out", str(out), "--review"])

    assert code == 0
    assert len(list(out.iterdir())) == 3


def test_main_when_plan_title_given_then_used_in_filename(tmp_path):
    source = tmp_path / "plan.json"
    source.write_text(json.dumps([{"day": "Monday", "sessions": [
        {"time": "09:00", "activity": "Revise", "subject": "Maths", "topic": "Algebra"},
    ]}]), encoding="utf-8")
    out = tmp_path / "out"

    code = main(["plan", str(source), "--out", str(out), "--title", "Finals Week"])

    assert code == 0
    assert (out / "Finals_Week_StudyPlan.pdf").exists()


def test_main_when_input_missing_then_returns_one(tmp_path):
    assert main(["quiz", str(tmp_path / "missing.json"), "--out", str(tmp_path)]) == 1


def test_main_when_input_not_utf8_then_returns_one(tmp_path, caplog):
    # Arrange
    source = tmp_path / "latin1.json"
    source.write_bytes(b'{"title": "\xff\xfe"}')
    out = tmp_path / "out"

    # Act
    code = main(["quiz", str(source), "--out", str(out)])

    # Assert
    assert code == 1
    assert "Could not read" in caplog.text
    assert not out.exists()


def test_main_when_payload_invalid_then_returns_one_and_writes_nothing(tmp_path):
    source = tmp_path / "bad.json"
    source.write_text('{"questions": "none"}', encoding="utf-8")
    out = tmp_path / "out"

    assert main(["quiz", str(source), "--out", str(out)]) == 1
    assert not out.exists()


def test_main_when_quiz_empty_then_returns_one(tmp_path):
    source = tmp_path / "empty.json"
    source.write_text('{"title": "Empty", "questions": []}', encoding="utf-8")

    assert main(["quiz", str(source), "--out", str(tmp_path / "out")]) == 1


def test_parser_when_bad_date_then_exits(capsys):
    with pytest.raises(SystemExit):
        build_parser().parse_args(["quiz", "q.json", "--date", "07/03/2024"])

    assert "YYYY-MM-DD" in capsys.readouterr().err


def test_parser_when_version_then_prints_version(capsys):
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--version"])

    assert __version__ in capsys.readouterr().out
