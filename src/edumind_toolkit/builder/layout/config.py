"""
Module: builder.layout.config

Purpose:
    Configuration for the page layout engine.
    Defines page geometry, font sizes, line heights and spacing.
    All lengths are in millimetres, measured from the top-left corner.

Key Classes:
    - LayoutConfig: Immutable layout configuration

Dependencies:
    - dataclasses (std)

Used By:
    - builder.layout.paginator: Page arrangement
    - builder.output.renderer: Page size and fonts
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


# A4 portrait in millimetres
A4_WIDTH_MM = 210.0
A4_HEIGHT_MM = 297.0


@dataclass(frozen=True)
class LayoutConfig:
    """
    Configuration for page layout (immutable).

    Line heights are fixed per text role rather than derived from glyph
    metrics; the text measurer only decides where lines wrap.

    Attributes:
        page_width: Page width (mm)
        page_height: Page height (mm)
        margin_top: Top margin; body lines start here (mm)
        margin_bottom: Bottom margin; no body line goes below
            page_height - margin_bottom (mm)
        margin_left: Left margin (mm)
        margin_right: Right margin (mm)
        option_indent: Extra indent for option lines (mm)
        side_label_width: Column reserved on the right for side labels (mm)
        title_y: Baseline of the first title line on page one (mm)
        subtitle_offset: Distance from the last title baseline to the subtitle (mm)
        header_gap: Minimum space between the title header and the body (mm)
        item_gap: Space after a question and its options (mm)
        answer_gap: Space after an answer block (mm)
        section_gap: Space before a section heading that does not open a page (mm)
        font_path: TrueType font used instead of font_name (None: built-in fonts)
        bold_font_path: TrueType font for bold text (defaults to font_path)

    Example:
        >>> config = LayoutConfig()
        >>> config.available_height
        237.0
    """

    # Page dimensions
    page_width: float = A4_WIDTH_MM
    page_height: float = A4_HEIGHT_MM

    # Margins
    margin_top: float = 40.0
    margin_bottom: float = 20.0
    margin_left: float = 10.0
    margin_right: float = 20.0

    # Horizontal offsets
    option_indent: float = 5.0
    side_label_width: float = 15.0

    # Fonts. Built-in Type 1 fonts only cover Western European text; set
    # font_path (and optionally bold_font_path) to a TrueType file for others.
    font_name: str = "Helvetica"
    bold_font_name: str = "Helvetica-Bold"
    font_path: Optional[str] = None
    bold_font_path: Optional[str] = None

    # Title header (page one only)
    title_y: float = 20.0
    title_size: float = 22.0
    title_line_height: float = 9.0
    subtitle_size: float = 10.0
    subtitle_offset: float = 8.0
    subtitle_line_height: float = 6.0
    header_gap: float = 4.0

    # Body text
    heading_size: float = 14.0
    heading_line_height: float = 10.0
    body_size: float = 11.0
    body_line_height: float = 7.0
    option_size: float = 11.0
    option_line_height: float = 6.0
    note_size: float = 10.0
    note_line_height: float = 5.0

    # Spacing
    item_gap: float = 6.0
    answer_gap: float = 8.0
    section_gap: float = 5.0

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.page_width <= 0:
            raise ValueError(f"page_width must be positive: {self.page_width}")
        if self.page_height <= 0:
            raise ValueError(f"page_height must be positive: {self.page_height}")
        if self.available_width <= 0:
            raise ValueError("Margins exceed page width")
        if self.available_height <= 0:
            raise ValueError("Margins exceed page height")
        if self.option_indent < 0 or self.side_label_width < 0:
            raise ValueError("Indents must be non-negative")
        if self.option_indent >= self.available_width or self.side_label_width >= self.available_width:
            raise ValueError("Indents exceed available width")
        if min(self.item_gap, self.answer_gap, self.section_gap, self.header_gap) < 0:
            raise ValueError("Gaps must be non-negative")
        if self.bold_font_path and not self.font_path:
            raise ValueError("bold_font_path requires font_path")

        for name in (
            "title_size", "subtitle_size", "heading_size",
            "body_size", "option_size", "note_size",
        ):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive: {getattr(self, name)}")

        for name in (
            "title_line_height", "subtitle_line_height", "heading_line_height",
            "body_line_height", "option_line_height", "note_line_height",
        ):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be positive: {value}")
            if value > self.available_height:
                raise ValueError(f"{name} ({value}) exceeds available height")

    @property
    def available_width(self) -> float:
        """Width available for content (excluding margins)."""
        return self.page_width - self.margin_left - self.margin_right

    @property
    def available_height(self) -> float:
        """Height available for content (excluding margins)."""
        return self.page_height - self.margin_top - self.margin_bottom

    @property
    def page_bottom(self) -> float:
        """Lowest y a body line may occupy."""
        return self.page_height - self.margin_bottom

    @property
    def option_x(self) -> float:
        return self.margin_left + self.option_indent

    @property
    def option_width(self) -> float:
        return self.available_width - self.option_indent

    @property
    def side_label_x(self) -> float:
        return self.page_width - self.margin_right - self.side_label_width
