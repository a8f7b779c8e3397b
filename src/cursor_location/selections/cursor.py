"""Per-selection facts derived from a range and a document."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from cursor_location.buffer import DocumentView, SelectionRange


@dataclass(frozen=True, slots=True)
class CursorRecord:
    """Snapshot of one selection: 1-indexed lines, 0-indexed columns."""

    doc_line_count: int
    doc_char_count: int
    anchor_line: int
    anchor_char: int
    head_line: int
    head_char: int
    highlighted_chars: int
    highlighted_lines: int
    frontmatter_boundary_line: Optional[int] = None

    @property
    def is_cursor(self) -> bool:
        return self.highlighted_chars == 0

    def endpoint(self, endpoint: str) -> tuple[int, int]:
        """Return ``(line, char)`` for ``"anchor"`` or ``"head"``."""

        if endpoint == "anchor":
            return self.anchor_line, self.anchor_char
        if endpoint == "head":
            return self.head_line, self.head_char
        raise ValueError(f"Unknown endpoint '{endpoint}'.")


def build_cursor(
    selection: SelectionRange,
    document: DocumentView,
    frontmatter_boundary_line: Optional[int] = None,
) -> CursorRecord:
    anchor = document.line_at(selection.anchor)
    head = document.line_at(selection.head)
    return CursorRecord(
        doc_line_count=document.line_count,
        doc_char_count=document.length,
        anchor_line=anchor.number,
        anchor_char=selection.anchor - anchor.start,
        head_line=head.number,
        head_char=selection.head - head.start,
        highlighted_chars=selection.end - selection.start,
        highlighted_lines=abs(anchor.number - head.number) + 1,
        frontmatter_boundary_line=frontmatter_boundary_line,
    )
