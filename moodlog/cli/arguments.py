"""
Argument Parsing and Validation.

Process arguments are joined with a space and split again on runs of
half-width whitespace or full-width (U+3000) spaces, so "会議　終了" and
"会議 終了" read the same. The first token is the title; every remaining
token is concatenated, without a separator, into the mood.
"""

import re
from collections.abc import Sequence

from moodlog.core.exceptions import ArgumentValidationError

SEPARATOR_PATTERN = re.compile(r"[ \t\n\r\f\v\u3000]+")

TITLE_AND_MOOD_REQUIRED = "Title and Mood is required"
TITLE_REQUIRED = "Title is required"
MOOD_REQUIRED = "Mood is required"


def split_arguments(text: str) -> list[str]:
    """
    Split text on half-width and full-width whitespace.

    Trailing empty tokens are dropped, so "" and "   " give []. A leading
    separator produces a leading empty token (an empty title).
    """
    tokens = SEPARATOR_PATTERN.split(text)
    while tokens and not tokens[-1]:
        tokens.pop()
    return tokens


def parse_arguments(argv: Sequence[str]) -> list[str]:
    """Join process arguments with a space and split them into tokens."""
    return split_arguments(" ".join(argv))


def validate_arguments(tokens: Sequence[str]) -> tuple[str, str]:
    """
    Validate tokens and return (title, mood).

    Raises:
        ArgumentValidationError: With a fixed message when the title or any
            mood token is missing or empty.
    """
    if not tokens:
        raise ArgumentValidationError(TITLE_AND_MOOD_REQUIRED)

    title, *mood_parts = tokens
    if not title:
        raise ArgumentValidationError(TITLE_REQUIRED, details={"field": "title"})
    if not mood_parts or not all(mood_parts):
        raise ArgumentValidationError(MOOD_REQUIRED, details={"field": "mood"})

    return title, "".join(mood_parts)
