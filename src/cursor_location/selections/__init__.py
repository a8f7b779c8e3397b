"""Cursor records and multi-selection aggregation."""

from .aggregate import SelectionAggregate, generate_selections
from .cursor import CursorRecord, build_cursor

__all__ = [
    "CursorRecord",
    "SelectionAggregate",
    "build_cursor",
    "generate_selections",
]
