"""Pattern rendering, wordy positions, and status-line composition."""

from .padding import padded_width
from .pattern import has_total_token, render_pattern
from .status import cursor_display, render_status, total_display, wordy_cursor_display
from .wordy import (
    detect_frontmatter_boundary,
    percent_of_document,
    word_for,
    wordy_position,
)

__all__ = [
    "cursor_display",
    "detect_frontmatter_boundary",
    "has_total_token",
    "padded_width",
    "percent_of_document",
    "render_pattern",
    "render_status",
    "total_display",
    "word_for",
    "wordy_cursor_display",
    "wordy_position",
]
