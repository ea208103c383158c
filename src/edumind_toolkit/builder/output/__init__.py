"""
Module: builder.output

Purpose:
    PDF rendering for exported documents.
    Converts PagePlans to PDF files using ReportLab.

Key Classes:
    - PdfRenderer: Render and save PagePlans
    - RenderedDocument: In-memory PDF

Dependencies:
    - reportlab: PDF generation
    - builder.layout.models: PagePlan

Used By:
    - builder.controller: Export pipeline
"""

from .renderer import PdfRenderer, RenderedDocument, render_to_pdf

__all__ = [
    "PdfRenderer",
    "RenderedDocument",
    "render_to_pdf",
]
