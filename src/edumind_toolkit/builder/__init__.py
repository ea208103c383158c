"""
Module: builder

Purpose:
    Export pipeline for generated study content.
    Validates generated payloads, builds Documents, lays them out onto
    pages and renders them to PDF.

Key Functions:
    - export_quiz(): Quiz question paper + answer key
    - export_test(): Test paper + marking scheme
    - export_study_plan(): Study timetable
    - export_learning_content(): Concept notes

Key Classes:
    - ExportConfig: Configuration for exporting
    - ExportResult: Files written by an export

Dependencies:
    - reportlab: Text metrics and PDF output
    - jsonschema: Payload validation
    - edumind_toolkit.core.models: Content shapes and Document Model

Used By:
    - edumind_toolkit.cli: Command line entry point
"""

from .config import ExportConfig
from .controller import (
    ExportedFile,
    ExportResult,
    export_learning_content,
    export_quiz,
    export_study_plan,
    export_test,
)

__all__ = [
    # Config
    "ExportConfig",
    # Controller
    "ExportedFile",
    "ExportResult",
    "export_quiz",
    "export_test",
    "export_study_plan",
    "export_learning_content",
]
