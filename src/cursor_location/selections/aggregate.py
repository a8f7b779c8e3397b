"""Fold selection ranges into an ordered aggregate with running totals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from cursor_location.buffer import DocumentView, SelectionRange

from .cursor import CursorRecord, build_cursor


@dataclass(frozen=True, slots=True)
class SelectionAggregate:
    cursors: tuple[CursorRecord, ...] = ()
    total_highlighted_chars: int = 0
    total_highlighted_lines: int = 0

    def add_cursor(self, cursor: CursorRecord) -> "SelectionAggregate":
        return SelectionAggregate(
            cursors=self.cursors + (cursor,),
            total_highlighted_chars=self.total_highlighted_chars
            + cursor.highlighted_chars,
            total_highlighted_lines=self.total_highlighted_lines
            + cursor.highlighted_lines,
        )

    def __len__(self) -> int:
        return len(self.cursors)


def generate_selections(
    document: DocumentView,
    ranges: Iterable[SelectionRange],
    *,
    frontmatter_boundary_line: Optional[int] = None,
) -> SelectionAggregate:
    """Build one record per range, keeping the order the host supplied."""

    aggregate = SelectionAggregate()
    for selection in ranges:
        aggregate = aggregate.add_cursor(
            build_cursor(selection, document, frontmatter_boundary_line)
        )
    return aggregate
