import pytest
import sys
import textwrap
from pathlib import Path

# Add src to sys.path so we can import edumind_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from edumind_toolkit.builder.layout import LayoutConfig


class FixedWidthMeasurer:
    """Deterministic measurer: every character is ``char_width`` mm wide."""

    def __init__(self, char_width: float = 2.0):
        self.char_width = char_width
        self.calls = []

    def wrap(self, text, max_width, font_size, bold):
        self.calls.append((text, max_width, font_size, bold))
        chars = max(1, int(max_width // self.char_width))
        return textwrap.wrap(text, chars) or [""]


def _make_quiz_payload(count: int = 3, title: str = "Cell Biology", options: int = 4) -> dict:
    """Quiz payload in the shape the generator returns."""
    return {
        "title": title,
        "questions": [
            {
                "question": f"Question number {i}?",
                "options": [f"Option {chr(65 + o)}{i}" for o in range(options)],
                "correctAnswer": f"Option B{i}",
                "explanation": f"Because B is right for {i}.",
            }
            for i in range(1, count + 1)
        ],
    }


def _make_paper_payload(title: str = "Physics Mid-Term") -> dict:
    """Two-section test paper payload."""
    return {
        "title": title,
        "duration": "90 mins",
        "totalMarks": 10,
        "sections": [
            {
                "sectionTitle": "Section A",
                "questions": [
                    {"id": 1, "text": "Unit of force?", "marks": 1, "type": "MCQ",
                     "options": ["Joule", "Newton", "Watt", "Pascal"], "answer": "Newton"},
                    {"id": 2, "text": "Unit of power?", "marks": 1, "type": "MCQ",
                     "options": ["Joule", "Newton", "Watt", "Pascal"], "answer": "C"},
                ],
            },
            {
                "sectionTitle": "Section B",
                "questions": [
                    {"id": 3, "text": "State Newton's second law.", "marks": 3, "type": "Short",
                     "answer": "F = ma", "explanation": "Award 1 mark per term."},
                    {"id": 4, "text": "Describe an energy transfer.", "marks": 5, "type": "Long",
                     "answer": "Any valid chain of transfers."},
                ],
            },
        ],
    }


@pytest.fixture
def measurer():
    """Fixed-width measurer (2mm per character)."""
    return FixedWidthMeasurer()


@pytest.fixture
def layout_config():
    """Geometry used throughout the layout tests."""
    return LayoutConfig(
        page_height=297,
        margin_top=40,
        margin_bottom=10,
        body_line_height=7,
        option_line_height=7,
    )


@pytest.fixture
def quiz_payload_factory():
    """Factory for quiz payloads: quiz_payload_factory(count, title, options)."""
    return _make_quiz_payload


@pytest.fixture
def quiz_payload():
    return _make_quiz_payload()


@pytest.fixture
def paper_payload():
    return _make_paper_payload()


@pytest.fixture
def measurer_factory():
    """Factory for fixed-width measurers with a chosen character width."""
    return FixedWidthMeasurer
