"""Preset tables and resolution of option/custom pairs into effective values."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, TypeVar

from .models import (
    CursorLinePatternOption,
    CursorLocationSettings,
    CursorSeparatorOption,
    DisplayPatternOption,
    FrontmatterPhraseOption,
    FuzzyAmount,
    PaddingStepOption,
    RangeSeparatorOption,
    SelectionMode,
)

DISPLAY_PATTERNS = MappingProxyType({DisplayPatternOption.PRESET: "ch:ln/ct"})

CURSOR_SEPARATORS = MappingProxyType(
    {
        CursorSeparatorOption.SLASH: " / ",
        CursorSeparatorOption.PIPE: " | ",
        CursorSeparatorOption.TILDE: " ~ ",
        CursorSeparatorOption.AMPERSAND: " & ",
    }
)

RANGE_SEPARATORS = MappingProxyType(
    {
        RangeSeparatorOption.ARROW: "->",
        RangeSeparatorOption.DASH: " - ",
        RangeSeparatorOption.TILDE: "~",
    }
)

CURSOR_LINE_PATTERNS = MappingProxyType(
    {
        CursorLinePatternOption.SQUARE: "[lc]",
        CursorLinePatternOption.CURLY: "{lc}",
        CursorLinePatternOption.PARENS: "(lc)",
        CursorLinePatternOption.POINTY: "<lc>",
    }
)

PADDING_STEPS = MappingProxyType(
    {
        PaddingStepOption.LOW: 5,
        PaddingStepOption.MEDIUM: 9,
        PaddingStepOption.HIGH: 15,
    }
)

FRONTMATTER_PHRASES = MappingProxyType(
    {
        option: option.value
        for option in FrontmatterPhraseOption
        if option is not FrontmatterPhraseOption.CUSTOM
    }
)

_Value = TypeVar("_Value")


@dataclass(frozen=True, slots=True)
class StatusConfig:
    """Effective values the render core reads for one pass."""

    number_cursors: int = 1
    selection_mode: SelectionMode = SelectionMode.FULL
    display_char_count: bool = True
    display_total_lines: bool = True
    display_cursor_lines: bool = False
    display_pattern: str = "ch:ln/ct"
    cursor_separator: str = " / "
    range_separator: str = "->"
    cursor_line_pattern: str = "[lc]"
    status_bar_padding: bool = False
    padding_step: int = 9
    wordy_display: bool = False
    fuzzy_amount: FuzzyAmount = FuzzyAmount.STRICT_PERCENT
    frontmatter_excluded_from_percent: bool = False
    frontmatter_phrase: str = "frontmatter"


def resolve_option(
    option: Enum, presets: Mapping[Enum, _Value], custom: _Value
) -> _Value:
    """Look up a preset, falling back to ``custom`` for the custom option."""

    return presets.get(option, custom)


def resolve_settings(settings: CursorLocationSettings) -> StatusConfig:
    return StatusConfig(
        number_cursors=settings.number_cursors,
        selection_mode=settings.selection_mode,
        display_char_count=settings.display_char_count,
        display_total_lines=settings.display_total_lines,
        display_cursor_lines=settings.display_cursor_lines,
        display_pattern=resolve_option(
            settings.display_pattern_option,
            DISPLAY_PATTERNS,
            settings.display_pattern,
        ),
        cursor_separator=resolve_option(
            settings.cursor_separator_option,
            CURSOR_SEPARATORS,
            settings.cursor_separator,
        ),
        range_separator=resolve_option(
            settings.range_separator_option,
            RANGE_SEPARATORS,
            settings.range_separator,
        ),
        cursor_line_pattern=resolve_option(
            settings.cursor_line_pattern_option,
            CURSOR_LINE_PATTERNS,
            settings.cursor_line_pattern,
        ),
        status_bar_padding=settings.status_bar_padding,
        padding_step=resolve_option(
            settings.padding_step_option, PADDING_STEPS, settings.padding_step
        ),
        wordy_display=settings.wordy_display,
        fuzzy_amount=settings.fuzzy_amount,
        frontmatter_excluded_from_percent=settings.frontmatter_excluded_from_percent,
        frontmatter_phrase=resolve_option(
            settings.frontmatter_string,
            FRONTMATTER_PHRASES,
            settings.frontmatter_string_custom,
        ),
    )


__all__ = [
    "CURSOR_LINE_PATTERNS",
    "CURSOR_SEPARATORS",
    "DISPLAY_PATTERNS",
    "FRONTMATTER_PHRASES",
    "PADDING_STEPS",
    "RANGE_SEPARATORS",
    "StatusConfig",
    "resolve_option",
    "resolve_settings",
]
