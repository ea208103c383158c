"""
Module: builder.layout.measure

Purpose:
    Text measurement for the layout engine. The engine asks a measurer
    where a string wraps at a given width; glyph metrics live here and
    nowhere else.

Key Classes:
    - TextMeasurer: Protocol implemented by measurers
    - ReportLabTextMeasurer: Measurer backed by ReportLab font metrics
    - LayoutAdapterError: Raised when a measurer or renderer fails

Key Functions:
    - resolve_fonts(): Register configured TrueType fonts, return font names
    - ensure_drawable(): Reject text a built-in font cannot encode

Dependencies:
    - reportlab: Standard font metrics and line splitting

Used By:
    - builder.layout.paginator: Wrapping block text
    - builder.controller: Creates the default measurer
    - builder.output.renderer: Font names and text checks
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, Sequence

from reportlab.lib.units import mm
from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfbase.ttfonts import TTFError, TTFont

from .config import LayoutConfig


# Built-in Type 1 text fonts are drawn with WinAnsiEncoding
STANDARD_FONT_ENCODING = "cp1252"
_SYMBOLIC_FONTS = ("Symbol", "ZapfDingbats")


class LayoutAdapterError(RuntimeError):
    """A text measurement or rendering backend failed."""


class TextMeasurer(Protocol):
    """
    Wraps text into display lines.

    Implementations must be deterministic: the same arguments always
    produce the same lines. Widths are in millimetres, font sizes in
    points.
    """

    def wrap(self, text: str, max_width: float, font_size: float, bold: bool) -> Sequence[str]:
        ...


def _register_ttf(path: str) -> str:
    """Register a TrueType file once and return its font name (the file stem)."""
    name = Path(path).stem
    if name in pdfmetrics.getRegisteredFontNames():
        return name
    try:
        pdfmetrics.registerFont(TTFont(name, path))
    except (OSError, TTFError) as e:
        raise LayoutAdapterError(f"Could not load font {path}: {e}") from e
    return name


def resolve_fonts(config: LayoutConfig) -> tuple[str, str]:
    """
    Font names (regular, bold) for a layout configuration.

    Registers ``font_path``/``bold_font_path`` with ReportLab when set,
    otherwise returns the configured built-in font names.

    Raises:
        LayoutAdapterError: If a TrueType file cannot be loaded
    """
    if not config.font_path:
        return config.font_name, config.bold_font_name
    regular = _register_ttf(config.font_path)
    bold = _register_ttf(config.bold_font_path) if config.bold_font_path else regular
    return regular, bold


def ensure_drawable(text: str, font_name: str) -> None:
    """
    Check that a built-in font can encode every character of ``text``.

    TrueType fonts are not checked.

    Raises:
        LayoutAdapterError: If a built-in font would draw placeholder boxes
    """
    if font_name not in pdfmetrics.standardFonts or font_name in _SYMBOLIC_FONTS:
        return
    try:
        text.encode(STANDARD_FONT_ENCODING)
    except UnicodeEncodeError as e:
        raise LayoutAdapterError(
            f"Built-in font {font_name!r} cannot draw {text[e.start:e.end]!r}; "
            f"set LayoutConfig.font_path to a TrueType font that covers this script"
        ) from e


class ReportLabTextMeasurer:
    """
    Measurer using ReportLab font metrics.

    Uses the same font names the PDF renderer draws with, so wrapped
    lines fit the width they were measured against. With built-in fonts,
    text outside their character set is rejected rather than measured.

    Example:
        >>> measurer = ReportLabTextMeasurer.from_config(LayoutConfig())
        >>> measurer.wrap("Short line", 180, 11, False)
        ['Short line']
    """

    def __init__(self, font_name: str = "Helvetica", bold_font_name: str = "Helvetica-Bold"):
        self.font_name = font_name
        self.bold_font_name = bold_font_name

    @classmethod
    def from_config(cls, config: LayoutConfig) -> ReportLabTextMeasurer:
        return cls(*resolve_fonts(config))

    def wrap(self, text: str, max_width: float, font_size: float, bold: bool) -> list[str]:
        """
        Split ``text`` into lines no wider than ``max_width`` mm.

        Explicit newlines are kept as line breaks. Blank text yields a
        single empty line.

        Raises:
            LayoutAdapterError: If the font cannot draw the text
        """
        font = self.bold_font_name if bold else self.font_name
        ensure_drawable(text, font)
        lines = simpleSplit(text, font, font_size, max_width * mm)
        return lines or [""]

    def width(self, text: str, font_size: float, bold: bool) -> float:
        """Rendered width of ``text`` in millimetres."""
        font = self.bold_font_name if bold else self.font_name
        return stringWidth(text, font, font_size) / mm
