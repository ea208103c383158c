"""Payload schemas and validation."""

from .validator import (
    PayloadValidationError,
    validate_payload,
    validate_quiz,
    validate_test_paper,
    validate_study_plan,
    validate_learning_content,
)

__all__ = [
    "PayloadValidationError",
    "validate_payload",
    "validate_quiz",
    "validate_test_paper",
    "validate_study_plan",
    "validate_learning_content",
]
