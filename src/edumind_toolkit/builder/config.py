"""
Module: builder.config

Purpose:
    Configuration dataclass for the export pipeline. Immutable
    configuration with validation on construction.

Key Classes:
    - ExportConfig: Main configuration for exporting documents

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - builder.controller: Export pipeline
    - cli: Command line entry point
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Optional

from edumind_toolkit.builder.layout.config import LayoutConfig


@dataclass(frozen=True)
class ExportConfig:
    """
    Configuration for exporting documents (immutable).

    Attributes:
        output_dir: Directory the PDFs are written to
        layout: Page geometry and typography
        show_footer: Draw the version/page footer on each page
        issued_on: Date printed on quiz papers (omitted if None)
        include_key: Also export the answer key / marking scheme
        include_review: Also export a copy with correct options marked

    Example:
        >>> config = ExportConfig(output_dir=Path("exports"))
        >>> config.include_key
        True
    """

    output_dir: Path
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    show_footer: bool = True
    issued_on: Optional[date] = None
    include_key: bool = True
    include_review: bool = False

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not isinstance(self.output_dir, Path):
            object.__setattr__(self, "output_dir", Path(self.output_dir))
        if self.output_dir.exists() and not self.output_dir.is_dir():
            raise ValueError(f"output_dir is not a directory: {self.output_dir}")
