"""
Module: document

Purpose:
    Render-agnostic Document Model consumed by the layout engine.
    A Document is a title, an optional subtitle and an ordered tuple of
    blocks. Every class here is frozen and validated on construction, so
    a Document that exists is a Document the engine can lay out.

Key Classes:
    - Document: Title + blocks
    - SectionHeading, NumberedItem, OptionList, AnswerBlock: Block variants
    - InvalidContentError: Raised for malformed documents

Dependencies:
    - dataclasses (std)

Used By:
    - builder.content.builder: Builds Documents from domain shapes
    - builder.layout.paginator: Lays Documents out onto pages
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Optional, Union


MIN_OPTIONS = 2
MAX_OPTIONS = len(string.ascii_uppercase)


class InvalidContentError(ValueError):
    """Raised when a Document (or one of its blocks) is malformed."""


def option_label(position: int) -> str:
    """
    Letter label for the option at ``position`` (0 -> "A").

    Raises:
        InvalidContentError: If position is outside A-Z
    """
    if not 0 <= position < MAX_OPTIONS:
        raise InvalidContentError(f"Option position out of range: {position}")
    return string.ascii_uppercase[position]


@dataclass(frozen=True)
class SectionHeading:
    """Bold section label, e.g. "Section A"."""

    text: str


@dataclass(frozen=True)
class NumberedItem:
    """
    Question or statement with an optional right-hand tag.

    Attributes:
        index: Number printed before the body
        body_text: Full text, including any "Q1:" style prefix
        side_label: Right-aligned tag such as "[5]"
    """

    index: int
    body_text: str
    side_label: Optional[str] = None


@dataclass(frozen=True)
class OptionList:
    """
    Multiple-choice options, labelled A, B, C... by position.

    ``correct_index`` is only set for answer-revealing renderings.
    """

    options: tuple[str, ...]
    correct_index: Optional[int] = None

    def __post_init__(self) -> None:
        count = len(self.options)
        if not MIN_OPTIONS <= count <= MAX_OPTIONS:
            raise InvalidContentError(
                f"Option list needs {MIN_OPTIONS}-{MAX_OPTIONS} options, got {count}"
            )
        if self.correct_index is not None and not 0 <= self.correct_index < count:
            raise InvalidContentError(
                f"correct_index {self.correct_index} out of range for {count} options"
            )

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(option_label(i) for i in range(len(self.options)))


@dataclass(frozen=True)
class AnswerBlock:
    """Answer-key entry: bold label, answer text, optional explanation."""

    label: str
    answer_text: str
    explanation_text: Optional[str] = None


Block = Union[SectionHeading, NumberedItem, OptionList, AnswerBlock]


@dataclass(frozen=True)
class Document:
    """
    Immutable document ready for layout.

    Invariants:
        - title is non-empty (after stripping whitespace)
        - blocks is non-empty
        - NumberedItem indices never decrease within a section; a
          SectionHeading may restart numbering

    Example:
        >>> doc = Document("Cells", None, (NumberedItem(1, "Q1: What is a cell?"),))
        >>> doc.item_count
        1
    """

    title: str
    subtitle: Optional[str]
    blocks: tuple[Block, ...]

    def __post_init__(self) -> None:
        if not self.title or not self.title.strip():
            raise InvalidContentError("Document has no title")
        if not self.blocks:
            raise InvalidContentError(f"Document {self.title!r} has no blocks")

        last_index: Optional[int] = None
        for block in self.blocks:
            if isinstance(block, SectionHeading):
                last_index = None
            elif isinstance(block, NumberedItem):
                if last_index is not None and block.index < last_index:
                    raise InvalidContentError(
                        f"Item index {block.index} follows {last_index} in the same section"
                    )
                last_index = block.index
            elif not isinstance(block, (OptionList, AnswerBlock)):
                raise InvalidContentError(f"Unsupported block type: {type(block).__name__}")

    @property
    def item_count(self) -> int:
        """Number of NumberedItem blocks."""
        return sum(1 for b in self.blocks if isinstance(b, NumberedItem))

    @property
    def answer_count(self) -> int:
        """Number of AnswerBlock blocks."""
        return sum(1 for b in self.blocks if isinstance(b, AnswerBlock))
