"""Three-token display patterns: ``ch`` (column), ``ln`` (line), ``ct`` (count).

Token detection is case-insensitive while substitution is literal and only
touches the first occurrence of each token.  The total is resolved first
because eliding it depends on where ``ct`` sits in the untouched template:

* ``ch ct ln`` (middle) keeps the total, removing it would mangle the text
  between the two position tokens;
* ``ct ch:ln`` (begin) drops everything ahead of the position tokens;
* ``ch:ln/ct`` (end) drops everything after the last position token.
"""

from __future__ import annotations

from typing import Literal

from cursor_location.selections import CursorRecord

from .constants import BEGIN_PATTERN, END_PATTERN, MIDDLE_PATTERN, TOTAL_PATTERN

Endpoint = Literal["anchor", "head"]


def is_middle_shape(template: str) -> bool:
    return MIDDLE_PATTERN.search(template) is not None


def is_begin_shape(template: str) -> bool:
    return BEGIN_PATTERN.search(template) is not None


def is_end_shape(template: str) -> bool:
    return END_PATTERN.search(template) is not None


def has_total_token(template: str) -> bool:
    return TOTAL_PATTERN.search(template) is not None


def resolve_total(template: str, line_count: int, *, suppress_total: bool) -> str:
    """Substitute or elide ``ct`` according to the template's shape."""

    if suppress_total and not is_middle_shape(template):
        if is_begin_shape(template):
            return BEGIN_PATTERN.sub(r"\1", template, count=1)
        if is_end_shape(template):
            return END_PATTERN.sub(r"\1", template, count=1)
    return template.replace("ct", str(line_count), 1)


def render_pattern(
    template: str,
    record: CursorRecord,
    endpoint: Endpoint = "head",
    *,
    suppress_total: bool = False,
) -> str:
    line, char = record.endpoint(endpoint)
    value = resolve_total(
        template, record.doc_line_count, suppress_total=suppress_total
    )
    return value.replace("ch", str(char), 1).replace("ln", str(line), 1)


__all__ = [
    "Endpoint",
    "has_total_token",
    "is_begin_shape",
    "is_end_shape",
    "is_middle_shape",
    "render_pattern",
    "resolve_total",
]
