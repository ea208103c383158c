"""
Module: builder.content

Purpose:
    Content Model Builder. Maps generated content onto the
    render-agnostic Document Model, one Document per build mode.
"""

from .builder import (
    BuildMode,
    build_quiz_document,
    build_test_document,
    build_study_plan_document,
    build_learning_document,
    resolve_correct_index,
)

__all__ = [
    "BuildMode",
    "build_quiz_document",
    "build_test_document",
    "build_study_plan_document",
    "build_learning_document",
    "resolve_correct_index",
]
