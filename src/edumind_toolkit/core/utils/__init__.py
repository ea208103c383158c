"""Core utilities."""

from .serialization import (
    extract_json,
    deserialize_quiz,
    deserialize_test_paper,
    deserialize_study_plan,
    deserialize_learning_content,
)

__all__ = [
    "extract_json",
    "deserialize_quiz",
    "deserialize_test_paper",
    "deserialize_study_plan",
    "deserialize_learning_content",
]
