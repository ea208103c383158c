"""
Core Models Package

Immutable, validated data models.

Content shapes mirror the generated payloads; the Document Model is what
the layout engine consumes. Both are frozen dataclasses, so two builds of
the same input compare equal.
"""

from .content import (
    QuestionType,
    QuizQuestion,
    Quiz,
    TestQuestion,
    TestSection,
    TestPaper,
    StudySession,
    DailySchedule,
    StudyPlan,
    LearningContent,
)
from .document import (
    InvalidContentError,
    SectionHeading,
    NumberedItem,
    OptionList,
    AnswerBlock,
    Block,
    Document,
    option_label,
)

__all__ = [
    # Content shapes
    "QuestionType",
    "QuizQuestion",
    "Quiz",
    "TestQuestion",
    "TestSection",
    "TestPaper",
    "StudySession",
    "DailySchedule",
    "StudyPlan",
    "LearningContent",
    # Document model
    "InvalidContentError",
    "SectionHeading",
    "NumberedItem",
    "OptionList",
    "AnswerBlock",
    "Block",
    "Document",
    "option_label",
]
