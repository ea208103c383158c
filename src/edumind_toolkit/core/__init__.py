"""
EduMind Toolkit Core Package

Shared data models and payload handling used by the builder.

- ``core.models.content``: shapes returned by the content generator
- ``core.models.document``: the render-agnostic Document Model
- ``core.schemas.validator``: boundary validation of generated payloads
- ``core.utils.serialization``: payload -> model conversion
"""

from .models import Document, InvalidContentError, Quiz, TestPaper

__all__ = [
    "Document",
    "InvalidContentError",
    "Quiz",
    "TestPaper",
]
