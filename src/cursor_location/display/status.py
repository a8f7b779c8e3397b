"""Combine cursor records into the final status-line string."""

from __future__ import annotations

from typing import Callable, List

from cursor_location.selections import CursorRecord, SelectionAggregate
from cursor_location.settings import SelectionMode, StatusConfig

from .constants import (
    MULTI_CURSORS,
    SELECTED_BOTH,
    SELECTED_LINES,
    SELECTED_SINGLE,
    SELECTED_TEXT,
)
from .pattern import has_total_token, render_pattern
from .wordy import wordy_position


def render_status(aggregate: SelectionAggregate, config: StatusConfig) -> str:
    """Render every selection of ``aggregate`` into one status string.

    ``number_cursors`` of 0 disables the display entirely; more selections
    than ``number_cursors`` collapse into ``"N cursors"``.
    """

    if not config.number_cursors or not aggregate.cursors:
        return ""
    if config.wordy_display:
        return _render_wordy(aggregate, config)

    cursors = aggregate.cursors
    if len(cursors) == 1:
        display = cursor_display(cursors[0], config)
    elif len(cursors) <= config.number_cursors:
        display = config.cursor_separator.join(
            cursor_display(cursor, config, display_lines=True, suppress_total=True)
            for cursor in cursors
        )
        if has_total_token(config.display_pattern):
            display += config.cursor_separator + str(cursors[0].doc_line_count)
    else:
        display = MULTI_CURSORS.format(count=len(cursors))

    if aggregate.total_highlighted_chars != 0:
        display += total_display(
            aggregate.total_highlighted_chars,
            aggregate.total_highlighted_lines,
            config,
        )
    return display


def cursor_display(
    record: CursorRecord,
    config: StatusConfig,
    *,
    display_lines: bool = False,
    suppress_total: bool = False,
) -> str:
    pattern = config.display_pattern
    value = _by_selection_mode(
        record,
        config,
        lambda endpoint, suppress: render_pattern(
            pattern, record, endpoint, suppress_total=suppress
        ),
        suppress_total,
    )
    if display_lines and config.display_cursor_lines and record.highlighted_lines > 1:
        annotation = config.cursor_line_pattern.replace(
            "lc", str(record.highlighted_lines), 1
        )
        value += f" {annotation}"
    return value


def wordy_cursor_display(record: CursorRecord, config: StatusConfig) -> str:
    def render(endpoint: str, _suppress: bool) -> str:
        line, _char = record.endpoint(endpoint)
        return wordy_position(
            line, record, config.fuzzy_amount, config.frontmatter_phrase
        )

    return _by_selection_mode(record, config, render, False)


def total_display(text_count: int, line_count: int, config: StatusConfig) -> str:
    text = SELECTED_TEXT.format(count=text_count)
    lines = SELECTED_LINES.format(count=line_count)
    if config.display_char_count and config.display_total_lines:
        return SELECTED_BOTH.format(text=text, lines=lines)
    if config.display_char_count:
        return SELECTED_SINGLE.format(value=text)
    if config.display_total_lines:
        return SELECTED_SINGLE.format(value=lines)
    return ""


def _by_selection_mode(
    record: CursorRecord,
    config: StatusConfig,
    render: Callable[[str, bool], str],
    suppress_total: bool,
) -> str:
    mode = SelectionMode(config.selection_mode)
    if mode is SelectionMode.BEGIN:
        return render("anchor", suppress_total)
    if mode is SelectionMode.END or record.is_cursor:
        return render("head", suppress_total)
    return (
        render("anchor", True)
        + config.range_separator
        + render("head", suppress_total)
    )


def _render_wordy(aggregate: SelectionAggregate, config: StatusConfig) -> str:
    cursors = aggregate.cursors
    if len(cursors) > config.number_cursors:
        return MULTI_CURSORS.format(count=len(cursors))
    parts: List[str] = [wordy_cursor_display(cursor, config) for cursor in cursors]
    return config.cursor_separator.join(parts)


__all__ = [
    "cursor_display",
    "render_status",
    "total_display",
    "wordy_cursor_display",
]
