"""Document and selection views the status line is computed from."""

from .document import DocumentView, LineInfo, TextDocument
from .state import SelectionRange
from .validation import DocumentValidationError, ensure_location, ensure_offset

__all__ = [
    "DocumentView",
    "LineInfo",
    "TextDocument",
    "SelectionRange",
    "DocumentValidationError",
    "ensure_location",
    "ensure_offset",
]
