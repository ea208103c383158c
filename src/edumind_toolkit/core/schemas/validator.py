"""
Payload Validation Utilities

Validates generated JSON payloads against the shapes the builder accepts.

Generated content arrives from an external service and may be malformed
(missing keys, wrong types, too many options). It is rejected here, before
any domain object or Document Model is constructed, so the builder and
layout engine never see a half-formed payload.

- JSON Schema definitions live beside this module (``*.schema.json``)
- ``validate_payload()`` checks a payload against one of them
- Fail fast with every violation collected in ``errors``
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


QUIZ_SCHEMA = "quiz"
TEST_PAPER_SCHEMA = "test_paper"
STUDY_PLAN_SCHEMA = "study_plan"
LEARNING_CONTENT_SCHEMA = "learning_content"

SCHEMA_NAMES = (QUIZ_SCHEMA, TEST_PAPER_SCHEMA, STUDY_PLAN_SCHEMA, LEARNING_CONTENT_SCHEMA)


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class PayloadValidationError(Exception):
    """Raised when a generated payload fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_payload(data: Any, schema_name: str) -> None:
    """
    Validate a payload against a named schema.

    Args:
        data: Decoded JSON payload
        schema_name: One of SCHEMA_NAMES

    Raises:
        PayloadValidationError: If the payload does not match. ``path`` points
            at the first violation; ``errors`` lists all of them.
        ValueError: If schema_name is unknown
    """
    if schema_name not in SCHEMA_NAMES:
        raise ValueError(f"Unknown schema: {schema_name!r}")

    schema = _load_schema(schema_name)
    validator = jsonschema.Draft7Validator(schema)
    violations = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path])
    if not violations:
        return

    first = violations[0]
    errors = [_describe(e) for e in violations]
    raise PayloadValidationError(
        f"Invalid {schema_name} payload: {errors[0]}"
        + (f" (+{len(errors) - 1} more)" if len(errors) > 1 else ""),
        path=".".join(str(p) for p in first.absolute_path),
        errors=errors,
    )


def validate_quiz(data: Any) -> None:
    """Validate a quiz payload."""
    validate_payload(data, QUIZ_SCHEMA)


def validate_test_paper(data: Any) -> None:
    """
    Validate a test paper payload.

    Beyond the schema, MCQ questions must carry at least two options.
    """
    validate_payload(data, TEST_PAPER_SCHEMA)

    for s_idx, section in enumerate(data["sections"]):
        for q_idx, question in enumerate(section["questions"]):
            if question["type"] == "MCQ" and len(question.get("options") or []) < 2:
                raise PayloadValidationError(
                    f"MCQ question {question['id']} has fewer than 2 options",
                    path=f"sections.{s_idx}.questions.{q_idx}.options",
                )


def validate_study_plan(data: Any) -> None:
    """Validate a study plan payload (a list of days)."""
    validate_payload(data, STUDY_PLAN_SCHEMA)


def validate_learning_content(data: Any) -> None:
    """Validate a learning helper payload."""
    validate_payload(data, LEARNING_CONTENT_SCHEMA)


def _describe(error: jsonschema.ValidationError) -> str:
    location = ".".join(str(p) for p in error.absolute_path)
    return f"{location}: {error.message}" if location else error.message
