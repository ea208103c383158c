"""
Module: builder.layout

Purpose:
    Page layout for exported documents.
    Converts a Document into a PagePlan of positioned text lines.

Key Functions:
    - paginate(): Arrange a Document onto pages

Key Classes:
    - LayoutConfig: Configuration for page layout
    - ReportLabTextMeasurer: Default text wrapping backend
    - PagePlan / Page / PositionedLine: Layout output

Dependencies:
    - reportlab: Font metrics for text wrapping
    - edumind_toolkit.core.models.document: Document Model

Used By:
    - builder.controller: Export pipeline
    - builder.output.renderer: PDF drawing
"""

from .config import LayoutConfig
from .measure import (
    LayoutAdapterError,
    ReportLabTextMeasurer,
    TextMeasurer,
    ensure_drawable,
    resolve_fonts,
)
from .models import LineRole, Page, PagePlan, PositionedLine, TextStyle
from .paginator import paginate

__all__ = [
    # Config
    "LayoutConfig",
    # Measurement
    "LayoutAdapterError",
    "ReportLabTextMeasurer",
    "TextMeasurer",
    "ensure_drawable",
    "resolve_fonts",
    # Models
    "LineRole",
    "Page",
    "PagePlan",
    "PositionedLine",
    "TextStyle",
    # Functions
    "paginate",
]
