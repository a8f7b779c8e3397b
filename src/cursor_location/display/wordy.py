"""Percent-through-document positions and their fuzzy word bands."""

from __future__ import annotations

import math
from typing import Optional

from cursor_location.buffer import DocumentView
from cursor_location.selections import CursorRecord
from cursor_location.settings import FuzzyAmount

from .constants import (
    BOTTOM_WORD,
    FRONTMATTER_PATTERN,
    HIGH_FUZZY_PERCENT,
    LITTLE_WORDY_BANDS,
    LOW_FUZZY_PERCENT,
    ROUNDING_EPSILON,
    TOP_WORD,
    VERY_WORDY_BANDS,
)


def percent_of_document(
    line: int,
    doc_line_count: int,
    frontmatter_boundary_line: Optional[int] = None,
) -> int:
    """Return how far ``line`` sits through the document, 0-100.

    With a frontmatter boundary ``f`` the line after it counts as the first
    line.  A document (or body) with a single line is always at the top.
    """

    offset = frontmatter_boundary_line or 0
    span = doc_line_count - 1 - offset
    if span <= 0:
        return 0
    ratio = (line - 1 - offset) / span
    percent = math.floor((ratio + ROUNDING_EPSILON) * 100 + 0.5)
    return max(0, min(100, percent))


def closest(value: int, step: int) -> int:
    return (value // step) * step


def word_for(percent: int, mode: FuzzyAmount) -> str:
    mode = FuzzyAmount(mode)
    if mode is FuzzyAmount.VERY_WORDY:
        return VERY_WORDY_BANDS[closest(percent, 20)]
    if mode is FuzzyAmount.LITTLE_WORDY:
        return LITTLE_WORDY_BANDS[closest(percent, 33)]
    if mode is FuzzyAmount.STRICT_PERCENT:
        top, bottom = percent == 0, percent == 100
    elif mode is FuzzyAmount.LOW_FUZZY_PERCENT:
        top = percent <= LOW_FUZZY_PERCENT
        bottom = percent >= 100 - LOW_FUZZY_PERCENT
    elif mode is FuzzyAmount.HIGH_FUZZY_PERCENT:
        top = percent <= HIGH_FUZZY_PERCENT
        bottom = percent >= 100 - HIGH_FUZZY_PERCENT
    else:
        top = bottom = False

    if top:
        return TOP_WORD
    if bottom:
        return BOTTOM_WORD
    return f"{percent}%"


def wordy_position(
    line: int,
    record: CursorRecord,
    mode: FuzzyAmount,
    frontmatter_phrase: str,
) -> str:
    boundary = record.frontmatter_boundary_line
    if boundary is not None and line <= boundary:
        return frontmatter_phrase
    return word_for(percent_of_document(line, record.doc_line_count, boundary), mode)


def detect_frontmatter_boundary(text: str, document: DocumentView) -> Optional[int]:
    """Last line before the closing ``---`` of a leading frontmatter block.

    The closing fence itself is the first line of the body.
    """

    match = FRONTMATTER_PATTERN.match(text)
    if match is None:
        return None
    return document.line_at(match.end()).number - 1


__all__ = [
    "closest",
    "detect_frontmatter_boundary",
    "percent_of_document",
    "word_for",
    "wordy_position",
]
