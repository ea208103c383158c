"""
Module: builder.layout.paginator

Purpose:
    Lay a Document out onto fixed-size pages.
    Walks the blocks top to bottom with a write cursor, wraps text through
    the measurer and starts a new page whenever the next unit would run
    past the bottom margin.

Key Functions:
    - paginate(): Main pagination function

Algorithm:
    1. Place the title header on page one; the body starts at margin_top.
    2. Group blocks that must stay together: leading section headings,
       a numbered item and the option list that follows it.
    3. If a group does not fit the space left, move it to a new page.
    4. Write each block unit by unit. An option is its own unit, so an
       option list taller than a page breaks between options, never
       inside one option's wrapped lines.
    5. A single unit taller than a page is continued line by line and
       reported in PagePlan.warnings.
    6. Flush the last page.

Dependencies:
    - core.models.document: Document and block types
    - builder.layout.measure: TextMeasurer, LayoutAdapterError
    - builder.layout.config: LayoutConfig

Used By:
    - builder.controller: Export pipeline
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from edumind_toolkit.core.models.document import (
    AnswerBlock,
    Block,
    Document,
    InvalidContentError,
    NumberedItem,
    OptionList,
    SectionHeading,
)

from .config import LayoutConfig
from .measure import LayoutAdapterError, TextMeasurer
from .models import LineRole, Page, PagePlan, PositionedLine, TextStyle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Line:
    """A wrapped line waiting for a y position."""

    x: float
    text: str
    style: TextStyle
    role: LineRole
    height: float


@dataclass(frozen=True)
class _Unit:
    """Lines that must land on the same page, plus an optional side label."""

    lines: tuple[_Line, ...]
    side_label: Optional[_Line] = None

    @property
    def extent(self) -> float:
        return sum(line.height for line in self.lines)


@dataclass
class _Composer:
    """Mutable cursor state for one paginate() call."""

    config: LayoutConfig
    pages: List[Page] = field(default_factory=list)
    lines: List[PositionedLine] = field(default_factory=list)
    header: tuple[PositionedLine, ...] = ()
    cursor: float = 0.0
    warnings: List[str] = field(default_factory=list)

    @property
    def page_index(self) -> int:
        return len(self.pages)

    @property
    def at_page_start(self) -> bool:
        return not self.lines

    @property
    def space_left(self) -> float:
        return self.config.page_bottom - self.cursor

    def fits(self, extent: float) -> bool:
        return self.cursor + extent <= self.config.page_bottom

    def new_page(self) -> None:
        page = Page(index=self.page_index, lines=tuple(self.lines), header=self.header)
        self.pages.append(page)
        logger.debug(f"Closed page {page.index} with {page.line_count} lines from blocks {page.block_indices()}")
        self.lines = []
        self.header = ()
        self.cursor = self.config.margin_top

    def emit(self, line: _Line, block_index: int) -> None:
        self.lines.append(PositionedLine(
            x=line.x,
            y=self.cursor,
            text=line.text,
            style=line.style,
            role=line.role,
            block_index=block_index,
        ))
        self.cursor += line.height

    def emit_side_label(self, label: _Line, y: float, block_index: int) -> None:
        self.lines.append(PositionedLine(
            x=label.x,
            y=y,
            text=label.text,
            style=label.style,
            role=label.role,
            block_index=block_index,
        ))

    def finish(self) -> tuple[Page, ...]:
        self.pages.append(Page(index=self.page_index, lines=tuple(self.lines), header=self.header))
        return tuple(self.pages)


def paginate(
    document: Document,
    measurer: TextMeasurer,
    config: LayoutConfig,
) -> PagePlan:
    """
    Arrange a document onto pages.

    Rules:
    1. A group (headings + item + options, or a single block) is placed
       on the current page if it fits, otherwise on a new page.
    2. Inside a group, each unit (heading, item, single option, answer)
       is checked again, so groups taller than a page still never write
       below the bottom margin.
    3. Every body line satisfies margin_top <= y <= page_height - margin_bottom.

    Args:
        document: Document to lay out (not modified)
        measurer: Text wrapping backend
        config: Layout configuration

    Returns:
        PagePlan with at least one page

    Raises:
        InvalidContentError: If document is not a valid Document
        LayoutAdapterError: If the measurer fails; no partial plan is returned

    Example:
        >>> plan = paginate(doc, ReportLabTextMeasurer(), LayoutConfig())
        >>> plan.page_count
        1
    """
    if not isinstance(document, Document):
        raise InvalidContentError(f"Expected a Document, got {type(document).__name__}")

    composer = _Composer(config=config, cursor=config.margin_top)
    composer.header, header_bottom = _layout_header(document, measurer, config)

    body_start = max(config.margin_top, header_bottom + config.header_gap + config.body_line_height)
    if body_start > config.page_bottom:
        composer.warnings.append("Title header fills page 1; body starts on page 2")
        composer.new_page()
    else:
        composer.cursor = body_start

    blocks = document.blocks
    units = [_measure_block(block, measurer, config) for block in blocks]

    for group in _group_blocks(blocks):
        extent = _group_extent(group, blocks, units, config, at_page_start=composer.at_page_start)
        if not composer.fits(extent) and not composer.at_page_start:
            composer.new_page()
            extent = _group_extent(group, blocks, units, config, at_page_start=True)

        if not composer.fits(extent):
            logger.warning(
                f"Block group {group} overflows page {composer.page_index}: "
                f"{extent:.1f}mm needed, {composer.space_left:.1f}mm available"
            )

        for block_index in group:
            _write_block(composer, block_index, blocks, units[block_index], config)

    pages = composer.finish()
    logger.info(f"Paginated {len(blocks)} blocks onto {len(pages)} pages")

    return PagePlan(pages=pages, warnings=tuple(composer.warnings))


# ─────────────────────────────────────────────────────────────────────────────
# Grouping and spacing
# ─────────────────────────────────────────────────────────────────────────────

def _group_blocks(blocks: Sequence[Block]) -> List[List[int]]:
    """
    Split block indices into groups that should share a page.

    Section headings always grab the next block, and a numbered item
    grabs an option list that directly follows it.
    E.g. [Heading, Item, Options] -> one group.
    """
    groups: List[List[int]] = []
    i = 0
    while i < len(blocks):
        group = [i]
        current = i
        while isinstance(blocks[current], SectionHeading) and current + 1 < len(blocks):
            current += 1
            group.append(current)
        if (
            isinstance(blocks[current], NumberedItem)
            and current + 1 < len(blocks)
            and isinstance(blocks[current + 1], OptionList)
        ):
            current += 1
            group.append(current)
        groups.append(group)
        i = current + 1
    return groups


def _gap_before(block: Block, config: LayoutConfig, at_page_start: bool) -> float:
    if isinstance(block, SectionHeading) and not at_page_start:
        return config.section_gap
    return 0.0


def _gap_after(block_index: int, blocks: Sequence[Block], config: LayoutConfig) -> float:
    block = blocks[block_index]
    if isinstance(block, NumberedItem):
        followed_by_options = (
            block_index + 1 < len(blocks) and isinstance(blocks[block_index + 1], OptionList)
        )
        return 0.0 if followed_by_options else config.item_gap
    if isinstance(block, OptionList):
        return config.item_gap
    if isinstance(block, AnswerBlock):
        return config.answer_gap
    return 0.0


def _group_extent(
    group: List[int],
    blocks: Sequence[Block],
    units: Sequence[List[_Unit]],
    config: LayoutConfig,
    *,
    at_page_start: bool,
) -> float:
    """Vertical space the group needs, excluding its trailing gap."""
    extent = 0.0
    for position, block_index in enumerate(group):
        extent += _gap_before(blocks[block_index], config, at_page_start and position == 0)
        extent += sum(unit.extent for unit in units[block_index])
        if position < len(group) - 1:
            extent += _gap_after(block_index, blocks, config)
    return extent


# ─────────────────────────────────────────────────────────────────────────────
# Writing
# ─────────────────────────────────────────────────────────────────────────────

def _write_block(
    composer: _Composer,
    block_index: int,
    blocks: Sequence[Block],
    units: List[_Unit],
    config: LayoutConfig,
) -> None:
    composer.cursor += _gap_before(blocks[block_index], config, composer.at_page_start)

    for unit in units:
        if not composer.fits(unit.extent) and not composer.at_page_start:
            composer.new_page()

        if composer.fits(unit.extent):
            first_y = composer.cursor
            for line in unit.lines:
                composer.emit(line, block_index)
            if unit.side_label is not None:
                composer.emit_side_label(unit.side_label, first_y, block_index)
        else:
            _write_oversized_unit(composer, unit, block_index)

    composer.cursor += _gap_after(block_index, blocks, config)


def _write_oversized_unit(composer: _Composer, unit: _Unit, block_index: int) -> None:
    """Continue a unit taller than a page across as many pages as it needs."""
    message = (
        f"Block {block_index} ({unit.extent:.1f}mm) is taller than a page "
        f"and continues from page {composer.page_index + 1}"
    )
    logger.warning(message)
    composer.warnings.append(message)

    for position, line in enumerate(unit.lines):
        if not composer.fits(line.height) and not composer.at_page_start:
            composer.new_page()
        y = composer.cursor
        composer.emit(line, block_index)
        if position == 0 and unit.side_label is not None:
            composer.emit_side_label(unit.side_label, y, block_index)


def _layout_header(
    document: Document,
    measurer: TextMeasurer,
    config: LayoutConfig,
) -> tuple[tuple[PositionedLine, ...], float]:
    """Title and subtitle lines for page one, and the last header baseline."""
    header: List[PositionedLine] = []
    y = config.title_y

    title_style = TextStyle(bold=False, size=config.title_size)
    for text in _wrap(measurer, document.title, config.available_width, title_style):
        header.append(PositionedLine(config.margin_left, y, text, title_style, LineRole.TITLE))
        y += config.title_line_height

    if document.subtitle:
        y = header[-1].y + config.subtitle_offset
        subtitle_style = TextStyle(bold=False, size=config.subtitle_size)
        for text in _wrap(measurer, document.subtitle, config.available_width, subtitle_style):
            header.append(PositionedLine(config.margin_left, y, text, subtitle_style, LineRole.SUBTITLE))
            y += config.subtitle_line_height

    return tuple(header), header[-1].y


# ─────────────────────────────────────────────────────────────────────────────
# Measurement
# ─────────────────────────────────────────────────────────────────────────────

def _measure_block(block: Block, measurer: TextMeasurer, config: LayoutConfig) -> List[_Unit]:
    """Wrap a block's text into units of lines."""
    if isinstance(block, SectionHeading):
        style = TextStyle(bold=True, size=config.heading_size)
        return [_unit(measurer, block.text, config.margin_left, config.available_width,
                      style, LineRole.HEADING, config.heading_line_height)]

    if isinstance(block, NumberedItem):
        style = TextStyle(bold=True, size=config.body_size)
        width = config.available_width
        side_label = None
        if block.side_label:
            width -= config.side_label_width
            side_label = _Line(
                x=config.side_label_x,
                text=block.side_label,
                style=TextStyle(bold=False, size=config.body_size),
                role=LineRole.SIDE_LABEL,
                height=0.0,
            )
        unit = _unit(measurer, block.body_text, config.margin_left, width,
                     style, LineRole.ITEM, config.body_line_height)
        return [_Unit(lines=unit.lines, side_label=side_label)]

    if isinstance(block, OptionList):
        units = []
        for position, (label, option) in enumerate(zip(block.labels, block.options)):
            style = TextStyle(bold=position == block.correct_index, size=config.option_size)
            text = f"{label}) {option}"
            units.append(_unit(measurer, text, config.option_x, config.option_width,
                               style, LineRole.OPTION, config.option_line_height))
        return units

    if isinstance(block, AnswerBlock):
        label_style = TextStyle(bold=True, size=config.body_size)
        note_style = TextStyle(bold=False, size=config.note_size)
        lines = list(_unit(measurer, block.label, config.margin_left, config.available_width,
                           label_style, LineRole.ANSWER_LABEL, config.body_line_height).lines)
        if block.answer_text and block.answer_text.strip():
            lines.extend(_unit(measurer, block.answer_text, config.margin_left, config.available_width,
                               note_style, LineRole.ANSWER, config.note_line_height).lines)
        if block.explanation_text and block.explanation_text.strip():
            lines.extend(_unit(measurer, f"Explanation: {block.explanation_text}", config.margin_left,
                               config.available_width, note_style, LineRole.EXPLANATION,
                               config.note_line_height).lines)
        return [_Unit(lines=tuple(lines))]

    raise InvalidContentError(f"Unsupported block type: {type(block).__name__}")


def _unit(
    measurer: TextMeasurer,
    text: str,
    x: float,
    width: float,
    style: TextStyle,
    role: LineRole,
    line_height: float,
) -> _Unit:
    return _Unit(lines=tuple(
        _Line(x=x, text=line, style=style, role=role, height=line_height)
        for line in _wrap(measurer, text, width, style)
    ))


def _wrap(measurer: TextMeasurer, text: str, width: float, style: TextStyle) -> List[str]:
    """
    Call the measurer and check what it returns.

    Blank text is one empty line and never reaches the measurer.

    Raises:
        LayoutAdapterError: If the measurer raises or returns no lines
    """
    if not text or not text.strip():
        return [""]
    try:
        lines = measurer.wrap(text, width, style.size, style.bold)
    except Exception as e:
        raise LayoutAdapterError(f"Text measurement failed for {text[:40]!r}: {e}") from e

    if isinstance(lines, str) or not lines:
        raise LayoutAdapterError(f"Text measurer returned no lines for {text[:40]!r}")
    if not all(isinstance(line, str) for line in lines):
        raise LayoutAdapterError(f"Text measurer returned non-text lines for {text[:40]!r}")
    return list(lines)
