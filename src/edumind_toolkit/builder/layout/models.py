"""
Module: builder.layout.models

Purpose:
    Data models for page layout.
    Immutable dataclasses representing positioned lines, pages and the
    complete page plan produced by the layout engine.

Key Classes:
    - TextStyle: Font weight and size
    - LineRole: Which part of a block a line came from
    - PositionedLine: Text at an (x, y) position
    - Page: Single page layout
    - PagePlan: Final layout output

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - builder.layout.paginator: Creates PagePlans
    - builder.output.renderer: Draws PagePlans
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class LineRole(str, Enum):
    """Origin of a positioned line."""

    TITLE = "title"
    SUBTITLE = "subtitle"
    HEADING = "heading"
    ITEM = "item"
    SIDE_LABEL = "side_label"
    OPTION = "option"
    ANSWER_LABEL = "answer_label"
    ANSWER = "answer"
    EXPLANATION = "explanation"


@dataclass(frozen=True)
class TextStyle:
    """Font weight and size (points)."""

    bold: bool
    size: float


@dataclass(frozen=True)
class PositionedLine:
    """
    A single line of text placed on a page.

    ``y`` is the baseline, measured in millimetres from the top of the page.

    Attributes:
        x: Left edge (mm)
        y: Baseline from page top (mm)
        text: Line text
        style: Font style
        role: Which part of a block this line renders
        block_index: Index of the source block in the Document, or -1
            for header lines

    Example:
        >>> line = PositionedLine(10, 40, "Q1: ...", TextStyle(True, 11), LineRole.ITEM, 0)
        >>> line.is_body
        True
    """

    x: float
    y: float
    text: str
    style: TextStyle
    role: LineRole
    block_index: int = -1

    @property
    def is_body(self) -> bool:
        return self.block_index >= 0


@dataclass(frozen=True)
class Page:
    """
    Layout of a single page.

    Attributes:
        index: Page number (0-indexed)
        lines: Body lines, in writing order
        header: Title lines drawn in the top margin band (page one only)
    """

    index: int
    lines: tuple[PositionedLine, ...]
    header: tuple[PositionedLine, ...] = ()

    @property
    def line_count(self) -> int:
        """Number of body lines on this page."""
        return len(self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def block_indices(self) -> tuple[int, ...]:
        """Distinct source block indices on this page, in order."""
        seen: list[int] = []
        for line in self.lines:
            if line.block_index not in seen:
                seen.append(line.block_index)
        return tuple(seen)


@dataclass(frozen=True)
class PagePlan:
    """
    Final layout output with diagnostics.

    Attributes:
        pages: Tuple of Pages
        warnings: Messages about content that had to be continued
            across pages

    Example:
        >>> plan = PagePlan(pages=(page1, page2))
        >>> plan.page_count
        2
    """

    pages: tuple[Page, ...]
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def total_lines(self) -> int:
        """Total number of body lines across all pages."""
        return sum(p.line_count for p in self.pages)

    def lines_with_role(self, role: LineRole) -> list[PositionedLine]:
        """All body lines of a given role, in page order."""
        return [line for page in self.pages for line in page.lines if line.role is role]

    def page_of_block(self, block_index: int) -> list[int]:
        """Indices of the pages a block was written to."""
        return [
            page.index for page in self.pages
            if any(line.block_index == block_index for line in page.lines)
        ]
