"""
Command line entry point for exporting generated content to PDF.

Usage:
    edumind-export quiz quiz.json --out exports/
    edumind-export test paper.json --out exports/ --review
    edumind-export plan week.json --title "Finals Week"
    edumind-export learn photosynthesis.json

INPUT may be plain JSON or the raw text returned by the generator with
the JSON embedded in it.
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Optional, Sequence

from edumind_toolkit import __version__
from edumind_toolkit.builder import (
    ExportConfig,
    export_learning_content,
    export_quiz,
    export_study_plan,
    export_test,
)
from edumind_toolkit.builder.controller import DEFAULT_STUDY_PLAN_TITLE
from edumind_toolkit.builder.layout import LayoutAdapterError
from edumind_toolkit.core.models.document import InvalidContentError
from edumind_toolkit.core.schemas.validator import PayloadValidationError
from edumind_toolkit.core.utils.serialization import extract_json

logger = logging.getLogger("edumind_toolkit.cli")


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Expected YYYY-MM-DD, got {value!r}") from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="edumind-export",
        description="Export generated quizzes, test papers, study plans and notes to PDF",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="kind", required=True)
    for kind, help_text in (
        ("quiz", "Quiz question paper and answer key"),
        ("test", "Test paper and marking scheme"),
        ("plan", "Study plan timetable"),
        ("learn", "Concept notes"),
    ):
        sub = subparsers.add_parser(kind, help=help_text)
        sub.add_argument("input", type=Path, help="JSON file (or raw generated text)")
        sub.add_argument("--out", type=Path, default=Path("exports"), help="Output directory")
        sub.add_argument("--no-footer", action="store_true", help="Omit the page footer")
        sub.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
        if kind in ("quiz", "test"):
            sub.add_argument("--no-key", action="store_true", help="Skip the answer key")
            sub.add_argument("--review", action="store_true",
                             help="Also export a copy with correct options marked")
        if kind == "quiz":
            sub.add_argument("--date", type=_parse_date, default=None,
                             help="Issue date printed on the paper (YYYY-MM-DD)")
        if kind == "plan":
            sub.add_argument("--title", default=DEFAULT_STUDY_PLAN_TITLE, help="Plan title")

    return parser


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    else:
        logging.basicConfig(level=logging.INFO, format="%(message)s")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    config = ExportConfig(
        output_dir=args.out,
        show_footer=not args.no_footer,
        issued_on=getattr(args, "date", None),
        include_key=not getattr(args, "no_key", False),
        include_review=getattr(args, "review", False),
    )

    try:
        payload = extract_json(args.input.read_text(encoding="utf-8"))
        if args.kind == "quiz":
            result = export_quiz(payload, config)
        elif args.kind == "test":
            result = export_test(payload, config)
        elif args.kind == "plan":
            result = export_study_plan(payload, config, title=args.title)
        else:
            result = export_learning_content(payload, config)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not read {args.input}: {e}")
        return 1
    except PayloadValidationError as e:
        logger.error(f"Invalid {args.kind} content: {e}")
        for detail in e.errors[1:]:
            logger.error(f"  {detail}")
        return 1
    except (InvalidContentError, LayoutAdapterError) as e:
        logger.error(f"Export failed: {e}")
        return 1

    for exported in result.files:
        logger.info(f"{exported.path} ({exported.page_count} pages)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
