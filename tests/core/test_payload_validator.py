"""
Unit tests for generated payload validation.
"""

import pytest

from edumind_toolkit.core.schemas.validator import (
    PayloadValidationError,
    validate_learning_content,
    validate_payload,
    validate_quiz,
    validate_study_plan,
    validate_test_paper,
)


class TestQuizValidation:

    def test_validate_quiz_when_valid_then_passes(self, quiz_payload):
        validate_quiz(quiz_payload)

    def test_validate_quiz_when_no_questions_then_passes(self):
        # Empty quizzes are rejected later, when the Document is built
        validate_quiz({"title": "Empty", "questions": []})

    def test_validate_quiz_when_missing_title_then_raises(self, quiz_payload):
        del quiz_payload["title"]

        with pytest.raises(PayloadValidationError, match="title"):
            validate_quiz(quiz_payload)

    def test_validate_quiz_when_one_option_then_path_points_at_options(self, quiz_payload):
        # Arrange
        quiz_payload["questions"][1]["options"] = ["Only"]

        # Act
        with pytest.raises(PayloadValidationError) as exc_info:
            validate_quiz(quiz_payload)

        # Assert
        assert exc_info.value.path == "questions.1.options"

    def test_validate_quiz_when_many_violations_then_all_listed(self, quiz_payload):
        quiz_payload["title"] = 5
        quiz_payload["questions"][0]["options"] = "A, B"

        with pytest.raises(PayloadValidationError) as exc_info:
            validate_quiz(quiz_payload)

        assert len(exc_info.value.errors) == 2
        assert "(+1 more)" in str(exc_info.value)


class TestTestPaperValidation:

    def test_validate_test_paper_when_valid_then_passes(self, paper_payload):
        validate_test_paper(paper_payload)

    def test_validate_test_paper_when_unknown_type_then_raises(self, paper_payload):
        paper_payload["sections"][1]["questions"][0]["type"] = "Essay"

        with pytest.raises(PayloadValidationError):
            validate_test_paper(paper_payload)

    def test_validate_test_paper_when_mcq_without_options_then_raises(self, paper_payload):
        del paper_payload["sections"][0]["questions"][0]["options"]

        with pytest.raises(PayloadValidationError, match="fewer than 2 options") as exc_info:
            validate_test_paper(paper_payload)

        assert exc_info.value.path == "sections.0.questions.0.options"

    def test_validate_test_paper_when_short_question_has_one_option_then_raises(self, paper_payload):
        # Arrange
        paper_payload["sections"][1]["questions"][0]["options"] = ["only"]

        # Act
        with pytest.raises(PayloadValidationError) as exc_info:
            validate_test_paper(paper_payload)

        # Assert
        assert exc_info.value.path == "sections.1.questions.0.options"

    def test_validate_test_paper_when_short_question_has_empty_options_then_passes(self, paper_payload):
        paper_payload["sections"][1]["questions"][0]["options"] = []

        validate_test_paper(paper_payload)


def test_validate_study_plan_when_object_then_raises():
    with pytest.raises(PayloadValidationError):
        validate_study_plan({"day": "Monday"})


def test_validate_study_plan_when_list_of_days_then_passes():
    validate_study_plan([{"day": "Monday", "sessions": []}])


def test_validate_learning_content_when_steps_missing_then_raises():
    with pytest.raises(PayloadValidationError, match="steps"):
        validate_learning_content({
            "topic": "Osmosis", "explanation": "x", "visualDescription": "y",
            "examples": [], "summary": "z",
        })


def test_validate_payload_when_unknown_schema_then_value_error():
    with pytest.raises(ValueError, match="Unknown schema"):
        validate_payload({}, "nonexistent")
