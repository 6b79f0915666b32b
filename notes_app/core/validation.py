from __future__ import annotations

TITLE_MIN_LEN = 3
TITLE_MAX_LEN = 50
TEXT_MAX_LEN = 120

TITLE_TOO_SHORT = f"Title must be at least {TITLE_MIN_LEN} characters."
TITLE_TOO_LONG = f"Title must be at most {TITLE_MAX_LEN} characters."
TEXT_TOO_LONG = f"Text must be at most {TEXT_MAX_LEN} characters."


def validate_note(title: str, text: str) -> list[str]:
    """
    Pure helper: every rule the pair (title, text) currently violates,
    in a fixed order. An empty list means the note can be saved.
    Lengths are plain character counts, nothing is stripped.
    """
    errors: list[str] = []
    if len(title) < TITLE_MIN_LEN:
        errors.append(TITLE_TOO_SHORT)
    if len(title) > TITLE_MAX_LEN:
        errors.append(TITLE_TOO_LONG)
    if len(text) > TEXT_MAX_LEN:
        errors.append(TEXT_TOO_LONG)
    return errors
