"""Wires host cursor activity into the status-line core and out to UI hooks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence, Tuple

from cursor_location.buffer import SelectionRange, TextDocument
from cursor_location.display import (
    detect_frontmatter_boundary,
    padded_width,
    render_status,
)
from cursor_location.display.padding import Measure
from cursor_location.runtime.telemetry import span
from cursor_location.selections import generate_selections
from cursor_location.settings import SettingsEditor, resolve_settings

Location = Tuple[int, int]  # (row, column)


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class StatusLineHooks:
    """Callbacks the controller uses to update the host's status widget."""

    update_status: Callable[[str], None]
    # Receives the padded width, or ``None`` when padding is off.
    update_width: Callable[[Optional[int]], None] = _noop
    measure: Optional[Measure] = None
    log: Callable[[str], None] = _noop


class StatusLineController:
    """Recomputes the status line on every cursor or document notification.

    Nothing from a notification is kept between calls; each refresh builds a
    fresh document view and selection aggregate.
    """

    def __init__(
        self,
        editor: SettingsEditor,
        hooks: StatusLineHooks,
        *,
        logger_name: str | None = None,
    ) -> None:
        self.editor = editor
        self.hooks = hooks
        self._logger_name = logger_name

    def refresh(self, text: str, ranges: Sequence[SelectionRange]) -> str:
        config = resolve_settings(self.editor.settings)
        document = TextDocument(text)
        with span(
            "status::refresh",
            logger_name=self._logger_name,
            component="status",
            metadata={"cursors": len(ranges)},
        ) as handle:
            boundary = None
            if config.wordy_display and config.frontmatter_excluded_from_percent:
                boundary = detect_frontmatter_boundary(text, document)
                handle.add_metadata("frontmatter_boundary", boundary)
            aggregate = generate_selections(
                document, ranges, frontmatter_boundary_line=boundary
            )
            display = render_status(aggregate, config)

        self.hooks.update_status(display)
        if (
            config.status_bar_padding
            and not config.wordy_display
            and config.padding_step > 0
            and self.hooks.measure is not None
        ):
            self.hooks.update_width(
                padded_width(display, self.hooks.measure, config.padding_step)
            )
        else:
            self.hooks.update_width(None)
        self.hooks.log(f"status <- {display!r} cursors={len(ranges)}")
        return display

    def refresh_locations(
        self, text: str, selections: Iterable[Tuple[Location, Location]]
    ) -> str:
        """Refresh from ``(anchor, head)`` row/column pairs."""

        document = TextDocument(text)
        ranges = [
            SelectionRange(
                anchor=document.offset_at(*anchor), head=document.offset_at(*head)
            )
            for anchor, head in selections
        ]
        return self.refresh(text, ranges)


__all__ = ["Location", "StatusLineController", "StatusLineHooks"]
