"""
Unit tests for the content model builder.
"""

from datetime import date

import pytest

from edumind_toolkit.builder.content import (
    BuildMode,
    build_learning_document,
    build_quiz_document,
    build_study_plan_document,
    build_test_document,
    resolve_correct_index,
)
from edumind_toolkit.core.models.content import LearningContent, Quiz, StudyPlan, TestPaper
from edumind_toolkit.core.models.document import (
    AnswerBlock,
    InvalidContentError,
    NumberedItem,
    OptionList,
    SectionHeading,
)


@pytest.fixture
def quiz(quiz_payload):
    return Quiz.from_dict(quiz_payload)


@pytest.fixture
def paper(paper_payload):
    return TestPaper.from_dict(paper_payload)


class TestResolveCorrectIndex:

    @pytest.mark.parametrize("answer, expected", [
        ("Paris", 1),
        ("  paris ", 1),
        ("B", 1),
        ("c)", 2),
        ("(A) Oslo", 0),
        ("Rome", None),
        ("", None),
        ("E", None),
    ])
    def test_resolve_when_answer_then_position(self, answer, expected):
        assert resolve_correct_index(["Oslo", "Paris", "Berlin"], answer) == expected

    def test_resolve_when_option_text_is_a_letter_then_exact_match_wins(self):
        assert resolve_correct_index(["B", "A"], "A") == 1


class TestQuizDocument:

    def test_paper_when_built_then_items_followed_by_options(self, quiz):
        # Act
        doc = build_quiz_document(quiz)

        # Assert
        assert doc.title == "Cell Biology"
        assert doc.subtitle == "EduMind AI Question Paper"
        assert isinstance(doc.blocks[0], NumberedItem)
        assert doc.blocks[0].body_text == "Q1: Question number 1?"
        assert isinstance(doc.blocks[1], OptionList)
        assert doc.blocks[1].correct_index is None
        assert doc.item_count == 3
        assert doc.answer_count == 0

    def test_paper_when_issue_date_then_in_subtitle(self, quiz):
        doc = build_quiz_document(quiz, issued_on=date(2024, 3, 7))

        assert doc.subtitle == "EduMind AI Question Paper - 07/03/2024"

    def test_key_when_built_then_one_answer_per_question(self, quiz):
        doc = build_quiz_document(quiz, BuildMode.KEY)

        assert doc.title == "Cell Biology - Answer Key"
        assert doc.answer_count == quiz.question_count
        assert doc.blocks[0] == AnswerBlock("Q1 Correct Answer:", "Option B1", "Because B is right for 1.")

    def test_review_when_built_then_correct_option_marked(self, quiz):
        doc = build_quiz_document(quiz, BuildMode.REVIEW)

        option_lists = [b for b in doc.blocks if isinstance(b, OptionList)]
        assert doc.title == "Cell Biology - Review"
        assert [o.correct_index for o in option_lists] == [1, 1, 1]

    def test_build_when_called_twice_then_equal_documents(self, quiz):
        assert build_quiz_document(quiz) == build_quiz_document(quiz)

    def test_build_when_no_questions_then_invalid_content(self):
        with pytest.raises(InvalidContentError):
            build_quiz_document(Quiz(title="Empty"))

    def test_build_when_blank_title_then_invalid_content(self, quiz_payload_factory):
        quiz = Quiz.from_dict(quiz_payload_factory(title="  "))

        with pytest.raises(InvalidContentError, match="title"):
            build_quiz_document(quiz)


class TestTestDocument:

    def test_paper_when_built_then_sections_items_marks_and_options(self, paper):
        # Act
        doc = build_test_document(paper)

        # Assert
        assert doc.subtitle == "Duration: 90 mins    Max Marks: 10"
        kinds = [type(b) for b in doc.blocks]
        assert kinds == [
            SectionHeading, NumberedItem, OptionList, NumberedItem, OptionList,
            SectionHeading, NumberedItem, NumberedItem,
        ]
        first = doc.blocks[1]
        assert first.body_text == "1. Unit of force?"
        assert first.side_label == "[1]"
        assert doc.blocks[6].side_label == "[3]"

    def test_key_when_built_then_marking_scheme(self, paper):
        doc = build_test_document(paper, BuildMode.KEY)

        answers = [b for b in doc.blocks if isinstance(b, AnswerBlock)]
        assert doc.title == "Physics Mid-Term - Marking Scheme"
        assert [a.label for a in answers] == ["Q1 Answer:", "Q2 Answer:", "Q3 Answer:", "Q4 Answer:"]
        assert answers[2].explanation_text == "Award 1 mark per term."
        assert doc.item_count == 0

    def test_review_when_letter_answer_then_resolved(self, paper):
        doc = build_test_document(paper, BuildMode.REVIEW)

        option_lists = [b for b in doc.blocks if isinstance(b, OptionList)]
        assert [o.correct_index for o in option_lists] == [1, 2]

    def test_review_when_short_question_has_options_then_none_marked(self, paper_payload):
        # Arrange
        question = paper_payload["sections"][1]["questions"][0]
        question["options"] = ["F = ma", "E = mc^2"]
        question["answer"] = "A"

        # Act
        doc = build_test_document(TestPaper.from_dict(paper_payload), BuildMode.REVIEW)

        # Assert
        option_lists = [b for b in doc.blocks if isinstance(b, OptionList)]
        assert [o.correct_index for o in option_lists] == [1, 2, None]

    def test_build_when_section_empty_then_skipped(self, paper_payload):
        paper_payload["sections"].append({"sectionTitle": "Section C", "questions": []})

        doc = build_test_document(TestPaper.from_dict(paper_payload))

        headings = [b.text for b in doc.blocks if isinstance(b, SectionHeading)]
        assert headings == ["Section A", "Section B"]

    def test_build_when_section_untitled_then_numbered_heading(self, paper_payload):
        paper_payload["sections"][1]["sectionTitle"] = ""

        doc = build_test_document(TestPaper.from_dict(paper_payload))

        assert [b.text for b in doc.blocks if isinstance(b, SectionHeading)] == ["Section A", "Section 2"]

    def test_build_when_no_questions_then_invalid_content(self):
        paper = TestPaper(title="Empty", duration="1h", total_marks=0)

        with pytest.raises(InvalidContentError, match="no questions"):
            build_test_document(paper)


def test_study_plan_when_built_then_heading_per_day_and_time_labels():
    # Arrange
    plan = StudyPlan.from_list("Finals Week", [
        {"day": "Monday", "sessions": [
            {"time": "09:00", "activity": "Revise", "subject": "Maths", "topic": "Algebra"},
            {"time": "11:00", "activity": "Practice", "subject": "Physics", "topic": "Forces"},
        ]},
        {"day": "Tuesday", "sessions": []},
    ])

    # Act
    doc = build_study_plan_document(plan)

    # Assert
    assert doc.subtitle == "2 days, 2 sessions"
    assert doc.blocks[0] == SectionHeading("Monday")
    assert doc.blocks[1] == NumberedItem(1, "Maths: Algebra (Revise)", side_label="09:00")
    assert len(doc.blocks) == 3


def test_study_plan_when_no_sessions_then_invalid_content():
    plan = StudyPlan.from_list("Empty", [{"day": "Monday", "sessions": []}])

    with pytest.raises(InvalidContentError):
        build_study_plan_document(plan)


def test_learning_document_when_built_then_all_parts_present():
    content = LearningContent(
        topic="Osmosis",
        explanation="Water moves across a membrane.",
        visual_description="Two beakers",
        steps=("Set up", "Wait"),
        examples=("Raisins in water",),
        summary="Water follows solute.",
    )

    doc = build_learning_document(content)

    headings = [b.text for b in doc.blocks if isinstance(b, SectionHeading)]
    labels = [b.label for b in doc.blocks if isinstance(b, AnswerBlock)]
    assert doc.title == "Osmosis"
    assert headings == ["Step by Step", "Examples"]
    assert labels == ["Overview", "Visualise It", "Summary"]
    assert doc.item_count == 3
