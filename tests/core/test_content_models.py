from edumind_toolkit.core.models.content import (
    LearningContent,
    QuestionType,
    Quiz,
    StudyPlan,
    TestPaper,
)


def test_quiz_from_dict_when_camel_case_then_fields_mapped(quiz_payload):
    quiz = Quiz.from_dict(quiz_payload)

    assert quiz.title == "Cell Biology"
    assert quiz.question_count == 3
    assert quiz.questions[0].options == ("Option A1", "Option B1", "Option C1", "Option D1")
    assert quiz.questions[0].correct_answer == "Option B1"


def test_test_paper_from_dict_when_sections_then_marks_summed(paper_payload):
    # Act
    paper = TestPaper.from_dict(paper_payload)

    # Assert
    assert paper.total_marks == 10
    assert paper.calculated_marks == 10
    assert paper.question_count == 4
    assert [s.marks for s in paper.sections] == [2, 8]


def test_test_question_when_mcq_with_options_then_multiple_choice(paper_payload):
    paper = TestPaper.from_dict(paper_payload)
    mcq, short = paper.sections[0].questions[0], paper.sections[1].questions[0]

    assert mcq.type is QuestionType.MCQ and mcq.is_multiple_choice
    assert short.type is QuestionType.SHORT and not short.is_multiple_choice
    assert short.explanation == "Award 1 mark per term."
    assert paper.sections[1].questions[1].explanation is None


def test_study_plan_from_list_when_days_then_title_applied():
    days = [{"day": "Monday", "sessions": [
        {"time": "09:00", "activity": "Revise", "subject": "Maths", "topic": "Algebra"},
    ]}]

    plan = StudyPlan.from_list("Finals Week", days)

    assert plan.title == "Finals Week"
    assert plan.days[0].sessions[0].subject == "Maths"


def test_learning_content_from_dict_when_lists_then_tuples():
    content = LearningContent.from_dict({
        "topic": "Osmosis", "explanation": "Water moves.", "visualDescription": "Two beakers",
        "steps": ["One", "Two"], "examples": ["Raisins"], "summary": "Done",
    })

    assert content.steps == ("One", "Two")
    assert content.visual_description == "Two beakers"
