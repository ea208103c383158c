"""
Serialization Utilities

Turns generated payloads into domain models.

- ``extract_json()`` pulls the JSON document out of raw generated text
  (the generator sometimes wraps it in prose or Markdown fences)
- ``deserialize_*()`` validate a decoded payload and build the model
"""

from __future__ import annotations

import json
import re
from typing import Any

from ..models.content import LearningContent, Quiz, StudyPlan, TestPaper
from ..schemas.validator import (
    PayloadValidationError,
    validate_learning_content,
    validate_quiz,
    validate_study_plan,
    validate_test_paper,
)


_JSON_BLOCK = re.compile(r"\{.*\}|\[.*\]", re.DOTALL)


def extract_json(text: str) -> Any:
    """
    Decode the first JSON object or array embedded in ``text``.

    Args:
        text: Raw generated text

    Returns:
        Decoded JSON value

    Raises:
        PayloadValidationError: If no JSON document is found or it does not parse

    Example:
        >>> extract_json('Here you go: {"title": "Cells"}')
        {'title': 'Cells'}
    """
    match = _JSON_BLOCK.search(text or "")
    if not match:
        raise PayloadValidationError(
            text.strip() if text and text.strip() else "The generated response contained no JSON"
        )
    try:
        return json.loads(match.group(0).strip())
    except json.JSONDecodeError as e:
        raise PayloadValidationError(
            f"Invalid format received: {e.msg} at position {e.pos}",
            errors=[str(e)],
        ) from e


# ─────────────────────────────────────────────────────────────────────────────
# Deserialization
# ─────────────────────────────────────────────────────────────────────────────

def deserialize_quiz(data: dict[str, Any], *, validate: bool = True) -> Quiz:
    """
    Build a Quiz from a payload.

    Raises:
        PayloadValidationError: If validate=True and data is invalid
    """
    if validate:
        validate_quiz(data)
    return Quiz.from_dict(data)


def deserialize_test_paper(data: dict[str, Any], *, validate: bool = True) -> TestPaper:
    """
    Build a TestPaper from a payload.

    Raises:
        PayloadValidationError: If validate=True and data is invalid
    """
    if validate:
        validate_test_paper(data)
    return TestPaper.from_dict(data)


def deserialize_study_plan(
    data: list[dict[str, Any]],
    title: str,
    *,
    validate: bool = True,
) -> StudyPlan:
    """
    Build a StudyPlan from a list-of-days payload.

    Raises:
        PayloadValidationError: If validate=True and data is invalid
    """
    if validate:
        validate_study_plan(data)
    return StudyPlan.from_list(title, data)


def deserialize_learning_content(data: dict[str, Any], *, validate: bool = True) -> LearningContent:
    """
    Build LearningContent from a payload.

    Raises:
        PayloadValidationError: If validate=True and data is invalid
    """
    if validate:
        validate_learning_content(data)
    return LearningContent.from_dict(data)
