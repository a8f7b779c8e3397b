"""Validation helpers shared across document views."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .document import TextDocument


class DocumentValidationError(RuntimeError):
    """Raised when hosts provide out-of-bounds offsets or locations."""

    def __init__(self, message: str, *, offset: int | None = None) -> None:
        super().__init__(message)
        self.offset = offset


def ensure_offset(document: "TextDocument", offset: int) -> int:
    if offset < 0 or offset > document.length:
        raise DocumentValidationError("Offset out of range", offset=offset)
    return offset


def ensure_location(document: "TextDocument", row: int, col: int) -> None:
    if row < 0 or row >= document.line_count:
        raise DocumentValidationError(f"Row {row} out of range")
    if col < 0 or col > document.line_length(row):
        raise DocumentValidationError(f"Column {col} out of range")
