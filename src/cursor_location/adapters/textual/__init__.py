"""Textual host adapter for the status line."""

from .controller import Location, StatusLineController, StatusLineHooks

__all__ = ["Location", "StatusLineController", "StatusLineHooks"]
