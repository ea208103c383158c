"""
Module: builder.controller

Purpose:
    Orchestrate the complete export pipeline.
    Validate → Build → Paginate → Render → Save

Key Functions:
    - export_quiz(): Question paper + answer key for a quiz
    - export_test(): Question paper + marking scheme for a test paper
    - export_study_plan(): Printable study timetable
    - export_learning_content(): Printable concept notes

Key Classes:
    - ExportResult: Files written by one export
    - ExportedFile: One written PDF

Dependencies:
    - core.utils.serialization: Payload validation and parsing
    - builder.content: Document construction
    - builder.layout: Pagination
    - builder.output: PDF rendering

Used By:
    - cli: Command line entry point
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, List, Optional, Tuple, Union

from edumind_toolkit import __version__
from edumind_toolkit.common.path_utils import ExportKind, derive_filename
from edumind_toolkit.core.models.content import LearningContent, Quiz, StudyPlan, TestPaper
from edumind_toolkit.core.models.document import Document
from edumind_toolkit.core.utils.serialization import (
    deserialize_learning_content,
    deserialize_quiz,
    deserialize_study_plan,
    deserialize_test_paper,
)

from .config import ExportConfig
from .content import (
    BuildMode,
    build_learning_document,
    build_quiz_document,
    build_study_plan_document,
    build_test_document,
)
from .layout import LayoutAdapterError, PagePlan, ReportLabTextMeasurer, TextMeasurer, paginate
from .output import PdfRenderer

logger = logging.getLogger(__name__)

DEFAULT_STUDY_PLAN_TITLE = "Study Plan"


@dataclass(frozen=True)
class ExportedFile:
    """
    One PDF written by an export.

    Attributes:
        kind: Export kind (decides the filename suffix)
        path: Where the file was written
        page_count: Number of pages
        warnings: Layout warnings for this document
    """

    kind: ExportKind
    path: Path
    page_count: int
    warnings: tuple[str, ...] = ()


@dataclass(frozen=True)
class ExportResult:
    """
    Complete export result (immutable).

    Example:
        >>> result = export_quiz(payload, ExportConfig(output_dir=Path("out")))
        >>> [f.path.name for f in result.files]
        ['Cells_Questions.pdf', 'Cells_AnswerKey.pdf']
    """

    files: tuple[ExportedFile, ...]
    metadata: dict = field(default_factory=dict)

    @property
    def paths(self) -> tuple[Path, ...]:
        return tuple(f.path for f in self.files)

    @property
    def warnings(self) -> tuple[str, ...]:
        return tuple(w for f in self.files for w in f.warnings)

    def file_for(self, kind: ExportKind) -> Optional[ExportedFile]:
        return next((f for f in self.files if f.kind is kind), None)


def export_quiz(
    quiz: Union[Quiz, dict[str, Any]],
    config: ExportConfig,
    *,
    measurer: Optional[TextMeasurer] = None,
) -> ExportResult:
    """
    Export a quiz as a question paper and (optionally) an answer key.

    Args:
        quiz: Quiz, or a generated payload to validate and parse
        config: Export configuration
        measurer: Text measurer (defaults to ReportLab metrics)

    Returns:
        ExportResult listing the written files

    Raises:
        PayloadValidationError: If a payload does not have the quiz shape
        InvalidContentError: If the quiz has no title or no questions
        LayoutAdapterError: If measurement, rendering or saving fails
    """
    if not isinstance(quiz, Quiz):
        quiz = deserialize_quiz(quiz)

    jobs = [(ExportKind.QUIZ_QUESTIONS,
             build_quiz_document(quiz, BuildMode.PAPER, issued_on=config.issued_on))]
    if config.include_key:
        jobs.append((ExportKind.QUIZ_ANSWER_KEY, build_quiz_document(quiz, BuildMode.KEY)))
    if config.include_review:
        jobs.append((ExportKind.QUIZ_REVIEW,
                     build_quiz_document(quiz, BuildMode.REVIEW, issued_on=config.issued_on)))

    return _export(quiz.title, jobs, config, measurer)


def export_test(
    paper: Union[TestPaper, dict[str, Any]],
    config: ExportConfig,
    *,
    measurer: Optional[TextMeasurer] = None,
) -> ExportResult:
    """
    Export a test paper and (optionally) its marking scheme.

    Raises:
        PayloadValidationError: If a payload does not have the test shape
        InvalidContentError: If the paper has no title or no questions
        LayoutAdapterError: If measurement, rendering or saving fails
    """
    if not isinstance(paper, TestPaper):
        paper = deserialize_test_paper(paper)

    if paper.calculated_marks != paper.total_marks:
        logger.warning(
            f"Question marks add up to {paper.calculated_marks}, "
            f"paper states {paper.total_marks}"
        )

    jobs = [(ExportKind.TEST_QUESTIONS, build_test_document(paper, BuildMode.PAPER))]
    if config.include_key:
        jobs.append((ExportKind.TEST_MARKING_SCHEME, build_test_document(paper, BuildMode.KEY)))
    if config.include_review:
        jobs.append((ExportKind.TEST_REVIEW, build_test_document(paper, BuildMode.REVIEW)))

    return _export(paper.title, jobs, config, measurer)


def export_study_plan(
    plan: Union[StudyPlan, list[dict[str, Any]]],
    config: ExportConfig,
    *,
    title: str = DEFAULT_STUDY_PLAN_TITLE,
    measurer: Optional[TextMeasurer] = None,
) -> ExportResult:
    """
    Export a study timetable.

    Args:
        plan: StudyPlan, or a list-of-days payload
        config: Export configuration
        title: Title used when ``plan`` is a payload

    Raises:
        PayloadValidationError: If a payload does not have the plan shape
        InvalidContentError: If the plan has no sessions
        LayoutAdapterError: If measurement, rendering or saving fails
    """
    if not isinstance(plan, StudyPlan):
        plan = deserialize_study_plan(plan, title)

    jobs = [(ExportKind.STUDY_PLAN, build_study_plan_document(plan))]
    return _export(plan.title, jobs, config, measurer)


def export_learning_content(
    content: Union[LearningContent, dict[str, Any]],
    config: ExportConfig,
    *,
    measurer: Optional[TextMeasurer] = None,
) -> ExportResult:
    """
    Export concept notes.

    Raises:
        PayloadValidationError: If a payload does not have the expected shape
        InvalidContentError: If the content has no topic
        LayoutAdapterError: If measurement, rendering or saving fails
    """
    if not isinstance(content, LearningContent):
        content = deserialize_learning_content(content)

    jobs = [(ExportKind.NOTES, build_learning_document(content))]
    return _export(content.topic, jobs, config, measurer)


def _export(
    source_title: str,
    jobs: List[Tuple[ExportKind, Document]],
    config: ExportConfig,
    measurer: Optional[TextMeasurer],
) -> ExportResult:
    """
    Paginate and render every document, then save them.

    Nothing is written until every document has rendered. If a later
    save fails, files already saved by this export are removed again.
    """
    start_time = time.perf_counter()
    measurer = measurer or ReportLabTextMeasurer.from_config(config.layout)
    renderer = PdfRenderer(config.layout, show_footer=config.show_footer)

    rendered = []
    for kind, document in jobs:
        plan: PagePlan = paginate(document, measurer, config.layout)
        for warning in plan.warnings:
            logger.warning(f"{kind.name}: {warning}")
        handle = renderer.render(plan, title=document.title)
        rendered.append((kind, plan, handle))

    files: List[ExportedFile] = []
    try:
        for kind, plan, handle in rendered:
            path = renderer.save(handle, config.output_dir, derive_filename(source_title, kind))
            files.append(ExportedFile(kind=kind, path=path, page_count=plan.page_count, warnings=plan.warnings))
    except LayoutAdapterError:
        for written in files:
            logger.warning(f"Removing {written.path} after a failed save")
            written.path.unlink(missing_ok=True)
        raise

    duration = time.perf_counter() - start_time
    logger.info(f"Exported {len(files)} documents for {source_title!r} in {duration:.2f}s")

    return ExportResult(
        files=tuple(files),
        metadata={
            "generated_at": datetime.now().isoformat(timespec="seconds"),
            "toolkit_version": __version__,
            "source_title": source_title,
            "documents": {f.kind.name: f.page_count for f in files},
            "duration_seconds": round(duration, 3),
        },
    )
