"""
Module: builder.output.renderer

Purpose:
    Render a PagePlan to PDF using ReportLab.
    Each Page becomes one PDF page with its lines drawn at their
    planned positions. Rendering happens in memory; nothing touches
    the filesystem until save() is called.

Key Classes:
    - PdfRenderer: render() a plan, save() the result
    - RenderedDocument: In-memory PDF produced by render()

Key Functions:
    - render_to_pdf(): Render and save in one call

Dependencies:
    - reportlab: PDF generation
    - builder.layout.models: PagePlan, Page, PositionedLine

Used By:
    - builder.controller: Export pipeline
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from edumind_toolkit.builder.layout.config import LayoutConfig
from edumind_toolkit.builder.layout.measure import LayoutAdapterError, ensure_drawable, resolve_fonts
from edumind_toolkit.builder.layout.models import Page, PagePlan, PositionedLine

logger = logging.getLogger(__name__)

# Footer configuration
FOOTER_FONT_SIZE = 7
FOOTER_BASELINE_FROM_BOTTOM_MM = 8.0


def _get_footer_text(page_number: int, page_count: int) -> str:
    """Footer text with the toolkit version and page position."""
    from edumind_toolkit import __version__

    return f"Generated with EduMind Toolkit v{__version__} | Page {page_number} of {page_count}"


@dataclass(frozen=True)
class RenderedDocument:
    """
    A rendered PDF held in memory.

    Attributes:
        data: PDF bytes
        page_count: Number of pages
        title: Document title (PDF metadata)
    """

    data: bytes
    page_count: int
    title: Optional[str] = None

    @property
    def size(self) -> int:
        return len(self.data)


class PdfRenderer:
    """
    Draw PagePlans into PDF documents.

    Example:
        >>> renderer = PdfRenderer(LayoutConfig())
        >>> handle = renderer.render(plan, title="Cells")
        >>> renderer.save(handle, Path("output"), "Cells_Questions.pdf")
    """

    def __init__(self, config: LayoutConfig, *, show_footer: bool = True):
        self.config = config
        self.show_footer = show_footer
        self.font_name, self.bold_font_name = resolve_fonts(config)

    def render(self, plan: PagePlan, *, title: Optional[str] = None) -> RenderedDocument:
        """
        Render every page of a plan.

        Raises:
            LayoutAdapterError: If ReportLab fails to draw the document, or a
                built-in font cannot encode a line
        """
        page_size = (self.config.page_width * mm, self.config.page_height * mm)
        buf = io.BytesIO()

        try:
            c = canvas.Canvas(buf, pagesize=page_size)
            if title:
                c.setTitle(title)
            c.setCreator("EduMind Toolkit")
            for page in plan.pages:
                self._render_page(c, page, plan.page_count)
                c.showPage()
            c.save()
        except LayoutAdapterError:
            raise
        except Exception as e:
            raise LayoutAdapterError(f"PDF rendering failed: {e}") from e

        logger.debug(f"Rendered {plan.page_count} pages ({buf.tell()} bytes)")
        return RenderedDocument(data=buf.getvalue(), page_count=plan.page_count, title=title)

    def save(self, handle: RenderedDocument, output_dir: Path, filename: str) -> Path:
        """
        Write a rendered document to ``output_dir / filename``.

        Raises:
            LayoutAdapterError: If the file cannot be written
        """
        output_path = Path(output_dir) / filename
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_bytes(handle.data)
        except OSError as e:
            raise LayoutAdapterError(f"Could not write {output_path}: {e}") from e

        logger.info(f"Saved {handle.page_count} pages to {output_path}")
        return output_path

    def _render_page(self, c: canvas.Canvas, page: Page, page_count: int) -> None:
        for line in page.header:
            self._draw_line(c, line)
        for line in page.lines:
            self._draw_line(c, line)
        if self.show_footer:
            self._draw_footer(c, page.index + 1, page_count)

    def _draw_line(self, c: canvas.Canvas, line: PositionedLine) -> None:
        font = self.bold_font_name if line.style.bold else self.font_name
        ensure_drawable(line.text, font)
        c.setFont(font, line.style.size)
        c.drawString(line.x * mm, _transform_y(self.config.page_height, line.y), line.text)

    def _draw_footer(self, c: canvas.Canvas, page_number: int, page_count: int) -> None:
        """
        Draw centered footer in the bottom margin band.

        Uses 7pt regular text in grey.
        """
        footer_text = _get_footer_text(page_number, page_count)

        c.saveState()
        c.setFont(self.font_name, FOOTER_FONT_SIZE)
        c.setFillColorRGB(0.4, 0.4, 0.4)
        text_width = c.stringWidth(footer_text, self.font_name, FOOTER_FONT_SIZE)
        x_pt = (self.config.page_width * mm - text_width) / 2
        c.drawString(x_pt, FOOTER_BASELINE_FROM_BOTTOM_MM * mm, footer_text)
        c.restoreState()


def render_to_pdf(
    plan: PagePlan,
    output_path: Path,
    config: LayoutConfig,
    *,
    title: Optional[str] = None,
    show_footer: bool = True,
) -> Path:
    """
    Render a plan and write it to ``output_path``.

    Raises:
        LayoutAdapterError: If rendering or writing fails
    """
    renderer = PdfRenderer(config, show_footer=show_footer)
    handle = renderer.render(plan, title=title)
    return renderer.save(handle, output_path.parent, output_path.name)


def _transform_y(page_height_mm: float, y_mm_top: float) -> float:
    """
    Convert a top-down baseline in mm to a bottom-up PDF y in points.

    Args:
        page_height_mm: Page height in millimetres
        y_mm_top: Baseline measured from the page top in millimetres

    Returns:
        Baseline measured from the page bottom in points
    """
    return (page_height_mm - y_mm_top) * mm
