"""
Module: builder.content.builder

Purpose:
    Build Documents from generated content.
    Each builder is a pure function: the same content and mode always
    give an equal Document, and nothing outside the arguments is read.

Key Functions:
    - build_quiz_document(): Quiz -> question paper, answer key or review copy
    - build_test_document(): TestPaper -> question paper, marking scheme or review copy
    - build_study_plan_document(): StudyPlan -> printable timetable
    - build_learning_document(): LearningContent -> concept notes
    - resolve_correct_index(): Locate the correct option for an answer

Dependencies:
    - core.models.content: Domain shapes
    - core.models.document: Document Model

Used By:
    - builder.controller: Export pipeline
"""

from __future__ import annotations

import logging
import re
from datetime import date
from enum import Enum
from typing import List, Optional, Sequence

from edumind_toolkit.core.models.content import (
    LearningContent,
    Quiz,
    StudyPlan,
    TestPaper,
    TestQuestion,
)
from edumind_toolkit.core.models.document import (
    AnswerBlock,
    Block,
    Document,
    InvalidContentError,
    NumberedItem,
    OptionList,
    SectionHeading,
)

logger = logging.getLogger(__name__)


QUIZ_SUBTITLE = "EduMind AI Question Paper"

_LETTER_ANSWER = re.compile(r"^\(?([A-Za-z])(?:[).:]\s*|\s+|$)")


class BuildMode(str, Enum):
    """
    Which rendering of the content to build.

    PAPER: questions and options, no answers
    KEY: answers and explanations only
    REVIEW: questions and options with the correct option marked
    """

    PAPER = "paper"
    KEY = "key"
    REVIEW = "review"


def resolve_correct_index(options: Sequence[str], answer: str) -> Optional[int]:
    """
    Find which option an answer refers to.

    Tries an exact match, then a case-insensitive match, then a leading
    option letter ("B", "B)", "(b) Paris").

    Args:
        options: Options in display order
        answer: Answer text as generated

    Returns:
        Option position, or None if the answer matches no option

    Example:
        >>> resolve_correct_index(["Oslo", "Paris"], "Paris")
        1
        >>> resolve_correct_index(["Oslo", "Paris"], "A)")
        0
    """
    cleaned = (answer or "").strip()
    if not cleaned:
        return None

    for position, option in enumerate(options):
        if option.strip() == cleaned:
            return position

    folded = cleaned.casefold()
    for position, option in enumerate(options):
        if option.strip().casefold() == folded:
            return position

    match = _LETTER_ANSWER.match(cleaned)
    if match:
        position = ord(match.group(1).upper()) - ord("A")
        if position < len(options):
            return position

    return None


def _require_title(title: str, kind: str) -> str:
    if not title or not title.strip():
        raise InvalidContentError(f"{kind} has no title")
    return title.strip()


# ─────────────────────────────────────────────────────────────────────────────
# Quizzes
# ─────────────────────────────────────────────────────────────────────────────

def build_quiz_document(
    quiz: Quiz,
    mode: BuildMode = BuildMode.PAPER,
    *,
    issued_on: Optional[date] = None,
) -> Document:
    """
    Build a Document for a quiz.

    PAPER produces "Q1: ..." items each followed by an A-D option list.
    KEY produces one answer block per question, labelled with the same
    question number. REVIEW is PAPER with the correct option marked.

    Args:
        quiz: Quiz to render
        mode: Build mode
        issued_on: Date printed in the paper subtitle (omitted if None)

    Returns:
        Document ready for pagination

    Raises:
        InvalidContentError: If the quiz has no title or no questions
    """
    title = _require_title(quiz.title, "Quiz")
    blocks: List[Block] = []

    if mode is BuildMode.KEY:
        for number, question in enumerate(quiz.questions, start=1):
            blocks.append(AnswerBlock(
                label=f"Q{number} Correct Answer:",
                answer_text=question.correct_answer,
                explanation_text=question.explanation or None,
            ))
        return Document(title=f"{title} - Answer Key", subtitle=None, blocks=tuple(blocks))

    for number, question in enumerate(quiz.questions, start=1):
        blocks.append(NumberedItem(index=number, body_text=f"Q{number}: {question.question}"))
        correct_index = None
        if mode is BuildMode.REVIEW:
            correct_index = resolve_correct_index(question.options, question.correct_answer)
            if correct_index is None:
                logger.debug(f"Q{number}: answer {question.correct_answer!r} matches no option")
        blocks.append(OptionList(options=tuple(question.options), correct_index=correct_index))

    subtitle = QUIZ_SUBTITLE
    if issued_on is not None:
        subtitle = f"{QUIZ_SUBTITLE} - {issued_on:%d/%m/%Y}"
    if mode is BuildMode.REVIEW:
        title = f"{title} - Review"

    return Document(title=title, subtitle=subtitle, blocks=tuple(blocks))


# ─────────────────────────────────────────────────────────────────────────────
# Test papers
# ─────────────────────────────────────────────────────────────────────────────

def _test_question_blocks(question: TestQuestion, mode: BuildMode) -> List[Block]:
    blocks: List[Block] = [NumberedItem(
        index=question.id,
        body_text=f"{question.id}. {question.text}",
        side_label=f"[{question.marks}]",
    )]
    if question.options:
        correct_index = None
        if mode is BuildMode.REVIEW and question.is_multiple_choice:
            correct_index = resolve_correct_index(question.options, question.answer)
        blocks.append(OptionList(options=tuple(question.options), correct_index=correct_index))
    return blocks


def build_test_document(paper: TestPaper, mode: BuildMode = BuildMode.PAPER) -> Document:
    """
    Build a Document for a sectioned test paper.

    PAPER: section headings, numbered questions with a "[marks]" side
    label, and options for MCQs. KEY (marking scheme): section headings
    and one answer block per question. REVIEW: PAPER with the correct
    MCQ option marked.

    Raises:
        InvalidContentError: If the paper has no title or no questions
    """
    title = _require_title(paper.title, "Test paper")
    if paper.question_count == 0:
        raise InvalidContentError(f"Test paper {title!r} has no questions")

    blocks: List[Block] = []
    for number, section in enumerate(paper.sections, start=1):
        if not section.questions:
            continue
        blocks.append(SectionHeading(section.title.strip() or f"Section {number}"))
        for question in section.questions:
            if mode is BuildMode.KEY:
                blocks.append(AnswerBlock(
                    label=f"Q{question.id} Answer:",
                    answer_text=question.answer,
                    explanation_text=question.explanation,
                ))
            else:
                blocks.extend(_test_question_blocks(question, mode))

    if mode is BuildMode.KEY:
        return Document(title=f"{title} - Marking Scheme", subtitle=None, blocks=tuple(blocks))

    subtitle = f"Duration: {paper.duration}    Max Marks: {paper.total_marks}"
    if mode is BuildMode.REVIEW:
        title = f"{title} - Review"
    return Document(title=title, subtitle=subtitle, blocks=tuple(blocks))


# ─────────────────────────────────────────────────────────────────────────────
# Study plans and notes
# ─────────────────────────────────────────────────────────────────────────────

def build_study_plan_document(plan: StudyPlan) -> Document:
    """
    Build a timetable Document: one heading per day, one item per session.

    Raises:
        InvalidContentError: If the plan has no title or no sessions
    """
    title = _require_title(plan.title, "Study plan")
    blocks: List[Block] = []
    for day in plan.days:
        if not day.sessions:
            continue
        blocks.append(SectionHeading(day.day or "Day"))
        for number, session in enumerate(day.sessions, start=1):
            blocks.append(NumberedItem(
                index=number,
                body_text=f"{session.subject}: {session.topic} ({session.activity})",
                side_label=session.time or None,
            ))

    session_count = sum(len(d.sessions) for d in plan.days)
    subtitle = f"{len(plan.days)} days, {session_count} sessions"
    return Document(title=title, subtitle=subtitle, blocks=tuple(blocks))


def build_learning_document(content: LearningContent) -> Document:
    """
    Build concept notes: overview, steps, examples, visual aid and summary.

    Raises:
        InvalidContentError: If the content has no topic
    """
    title = _require_title(content.topic, "Learning content")
    blocks: List[Block] = [AnswerBlock(label="Overview", answer_text=content.explanation)]

    if content.steps:
        blocks.append(SectionHeading("Step by Step"))
        for number, step in enumerate(content.steps, start=1):
            blocks.append(NumberedItem(index=number, body_text=f"{number}. {step}"))

    if content.examples:
        blocks.append(SectionHeading("Examples"))
        for number, example in enumerate(content.examples, start=1):
            blocks.append(NumberedItem(index=number, body_text=f"{number}. {example}"))

    if content.visual_description:
        blocks.append(AnswerBlock(label="Visualise It", answer_text=content.visual_description))
    if content.summary:
        blocks.append(AnswerBlock(label="Summary", answer_text=content.summary))

    return Document(title=title, subtitle="Concept Notes", blocks=tuple(blocks))
