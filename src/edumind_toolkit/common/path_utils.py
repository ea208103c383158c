"""Path and filename utilities.

Derives the download filename for an exported document from its title.
"""

from __future__ import annotations

import re
import unicodedata
from enum import Enum


MAX_STEM_LENGTH = 100
FALLBACK_STEM = "Untitled"
PDF_EXTENSION = ".pdf"


class ExportKind(str, Enum):
    """Kind of exported document; the value is the filename suffix."""

    QUIZ_QUESTIONS = "_Questions"
    QUIZ_ANSWER_KEY = "_AnswerKey"
    QUIZ_REVIEW = "_Review"
    TEST_QUESTIONS = "_Test_Questions"
    TEST_MARKING_SCHEME = "_MarkingScheme"
    TEST_REVIEW = "_Test_Review"
    STUDY_PLAN = "_StudyPlan"
    NOTES = "_Notes"

    @property
    def suffix(self) -> str:
        return self.value


def sanitize_stem(title: str) -> str:
    """Reduce a title to a filesystem-safe filename stem.

    Whitespace runs become a single underscore. Anything other than
    letters, digits, ``_``, ``-`` and ``.`` is dropped, so path separators,
    quotes and control characters never reach the filesystem.

    Args:
        title: Document title, possibly empty.

    Returns:
        Non-empty stem of at most MAX_STEM_LENGTH characters.

    Examples:
        >>> sanitize_stem("Cell Biology  Quiz")
        'Cell_Biology_Quiz'
        >>> sanitize_stem("../etc/passwd")
        'etcpasswd'
        >>> sanitize_stem("???")
        'Untitled'
    """
    stem = unicodedata.normalize("NFKC", title or "")
    stem = re.sub(r"\s+", "_", stem.strip())
    stem = re.sub(r"[^\w.-]", "", stem)
    stem = re.sub(r"_{2,}", "_", stem)
    stem = re.sub(r"\.{2,}", ".", stem)
    stem = stem.strip("._")
    stem = stem[:MAX_STEM_LENGTH].rstrip("._")
    return stem or FALLBACK_STEM


def derive_filename(title: str, kind: ExportKind) -> str:
    """Build the output filename for an export.

    Examples:
        >>> derive_filename("Photosynthesis Basics", ExportKind.QUIZ_QUESTIONS)
        'Photosynthesis_Basics_Questions.pdf'
        >>> derive_filename("Physics: Mid-Term", ExportKind.TEST_MARKING_SCHEME)
        'Physics_Mid-Term_MarkingScheme.pdf'
    """
    return f"{sanitize_stem(title)}{kind.suffix}{PDF_EXTENSION}"
