import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from notes_app.core.validation import (
    TEXT_TOO_LONG,
    TITLE_TOO_LONG,
    TITLE_TOO_SHORT,
    validate_note,
)


def test_valid_note():
    assert validate_note("Groceries", "Milk, eggs") == []


def test_boundaries_are_inclusive():
    assert validate_note("abc", "") == []
    assert validate_note("x" * 50, "y" * 120) == []


def test_title_too_short():
    errors = validate_note("Hi", "")

    assert errors == [TITLE_TOO_SHORT]
    assert "at least 3" in errors[0]


def test_empty_title():
    assert validate_note("", "") == [TITLE_TOO_SHORT]


def test_long_title_and_long_text_reported_together():
    errors = validate_note("x" * 51, "y" * 121)

    assert errors == [TITLE_TOO_LONG, TEXT_TOO_LONG]


def test_short_title_and_long_text():
    assert validate_note("ab", "y" * 121) == [TITLE_TOO_SHORT, TEXT_TOO_LONG]


def test_whitespace_counts():
    # no trimming: three spaces is a three character title
    assert validate_note("   ", "") == []
