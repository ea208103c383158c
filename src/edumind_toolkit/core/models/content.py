"""
Module: content

Purpose:
    Domain shapes for generated study content: quizzes, test papers,
    study plans and concept explanations. These mirror the JSON payloads
    returned by the content-generation service (camelCase keys) and are
    the inputs of the Content Model Builder.

Key Classes:
    - Quiz / QuizQuestion: Multiple-choice quiz
    - TestPaper / TestSection / TestQuestion: Sectioned exam paper
    - StudyPlan / DailySchedule / StudySession: Weekly timetable
    - LearningContent: Concept explanation

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - core.utils.serialization: Payload deserialization
    - builder.content.builder: Document Model construction
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class QuestionType(str, Enum):
    """Question format used in test papers."""

    MCQ = "MCQ"
    SHORT = "Short"
    LONG = "Long"


@dataclass(frozen=True)
class QuizQuestion:
    """
    A single multiple-choice quiz question.

    Attributes:
        question: Question body
        options: Answer options in display order
        correct_answer: The correct option text (or its letter)
        explanation: Why the answer is correct
    """

    question: str
    options: tuple[str, ...]
    correct_answer: str
    explanation: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> QuizQuestion:
        return cls(
            question=str(data["question"]),
            options=tuple(str(o) for o in data.get("options", ())),
            correct_answer=str(data.get("correctAnswer", "")),
            explanation=str(data.get("explanation", "")),
        )


@dataclass(frozen=True)
class Quiz:
    """
    Multiple-choice quiz.

    Example:
        >>> quiz = Quiz.from_dict({"title": "Cells", "questions": []})
        >>> quiz.question_count
        0
    """

    title: str
    questions: tuple[QuizQuestion, ...] = ()

    @property
    def question_count(self) -> int:
        return len(self.questions)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Quiz:
        return cls(
            title=str(data.get("title", "")),
            questions=tuple(QuizQuestion.from_dict(q) for q in data.get("questions", ())),
        )


@dataclass(frozen=True)
class TestQuestion:
    """
    A question inside a test paper section.

    Attributes:
        id: Question number as printed on the paper
        text: Question body
        marks: Marks available
        type: MCQ, Short or Long
        options: Options for MCQ questions (empty otherwise)
        answer: Correct answer or marking key
        explanation: Optional marking notes
    """

    __test__ = False  # not a pytest test class

    id: int
    text: str
    marks: int
    type: QuestionType
    options: tuple[str, ...] = ()
    answer: str = ""
    explanation: Optional[str] = None

    @property
    def is_multiple_choice(self) -> bool:
        return self.type is QuestionType.MCQ and len(self.options) > 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TestQuestion:
        explanation = data.get("explanation")
        return cls(
            id=int(data["id"]),
            text=str(data["text"]),
            marks=int(data.get("marks", 0)),
            type=QuestionType(data.get("type", QuestionType.SHORT.value)),
            options=tuple(str(o) for o in (data.get("options") or ())),
            answer=str(data.get("answer", "")),
            explanation=str(explanation) if explanation else None,
        )


@dataclass(frozen=True)
class TestSection:
    """A titled group of test questions (e.g. "Section A")."""

    __test__ = False

    title: str
    questions: tuple[TestQuestion, ...] = ()

    @property
    def marks(self) -> int:
        return sum(q.marks for q in self.questions)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TestSection:
        return cls(
            title=str(data.get("sectionTitle", "")),
            questions=tuple(TestQuestion.from_dict(q) for q in data.get("questions", ())),
        )


@dataclass(frozen=True)
class TestPaper:
    """
    Sectioned exam paper.

    ``total_marks`` is the figure printed on the cover as returned by the
    generator; ``calculated_marks`` sums the individual questions.
    """

    __test__ = False

    title: str
    duration: str
    total_marks: int
    sections: tuple[TestSection, ...] = ()

    @property
    def calculated_marks(self) -> int:
        return sum(s.marks for s in self.sections)

    @property
    def question_count(self) -> int:
        return sum(len(s.questions) for s in self.sections)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TestPaper:
        return cls(
            title=str(data.get("title", "")),
            duration=str(data.get("duration", "")),
            total_marks=int(data.get("totalMarks", 0)),
            sections=tuple(TestSection.from_dict(s) for s in data.get("sections", ())),
        )


@dataclass(frozen=True)
class StudySession:
    """One slot of a study day."""

    time: str
    activity: str
    subject: str
    topic: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StudySession:
        return cls(
            time=str(data.get("time", "")),
            activity=str(data.get("activity", "")),
            subject=str(data.get("subject", "")),
            topic=str(data.get("topic", "")),
        )


@dataclass(frozen=True)
class DailySchedule:
    day: str
    sessions: tuple[StudySession, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DailySchedule:
        return cls(
            day=str(data.get("day", "")),
            sessions=tuple(StudySession.from_dict(s) for s in data.get("sessions", ())),
        )


@dataclass(frozen=True)
class StudyPlan:
    """
    A titled list of daily schedules.

    The generator returns a bare list of days; the title is supplied by
    the caller (for example from the exam or goal the plan targets).
    """

    title: str
    days: tuple[DailySchedule, ...] = field(default_factory=tuple)

    @classmethod
    def from_list(cls, title: str, days: list[dict[str, Any]]) -> StudyPlan:
        return cls(title=title, days=tuple(DailySchedule.from_dict(d) for d in days))


@dataclass(frozen=True)
class LearningContent:
    """Concept explanation produced by the learning helper."""

    topic: str
    explanation: str
    visual_description: str = ""
    steps: tuple[str, ...] = ()
    examples: tuple[str, ...] = ()
    summary: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LearningContent:
        return cls(
            topic=str(data.get("topic", "")),
            explanation=str(data.get("explanation", "")),
            visual_description=str(data.get("visualDescription", "")),
            steps=tuple(str(s) for s in data.get("steps", ())),
            examples=tuple(str(e) for e in data.get("examples", ())),
            summary=str(data.get("summary", "")),
        )
