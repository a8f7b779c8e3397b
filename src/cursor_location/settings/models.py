"""Typed settings snapshot mirroring the host's stored key/value blob."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Type

from cursor_location.runtime import telemetry


class SelectionMode(str, Enum):
    """Which end(s) of a selection to display."""

    BEGIN = "begin"
    END = "end"
    FULL = "full"


class FuzzyAmount(str, Enum):
    """Percent presentation strategies for the wordy display."""

    VERY_WORDY = "verywordy"
    LITTLE_WORDY = "littewordy"
    STRICT_PERCENT = "strictpercent"
    LOW_FUZZY_PERCENT = "lowfuzzypercent"
    HIGH_FUZZY_PERCENT = "highfuzzypercent"
    ONLY_PERCENT = "onlypercent"


class DisplayPatternOption(str, Enum):
    PRESET = "preset"
    CUSTOM = "custom"


class CursorSeparatorOption(str, Enum):
    SLASH = "slash"
    PIPE = "pipe"
    TILDE = "tilde"
    AMPERSAND = "ampersand"
    CUSTOM = "custom"


class RangeSeparatorOption(str, Enum):
    ARROW = "arrow"
    DASH = "dash"
    TILDE = "tilde"
    CUSTOM = "custom"


class CursorLinePatternOption(str, Enum):
    SQUARE = "square"
    CURLY = "curly"
    PARENS = "parens"
    POINTY = "pointy"
    CUSTOM = "custom"


class PaddingStepOption(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CUSTOM = "custom"


class FrontmatterPhraseOption(str, Enum):
    FRONTMATTER = "frontmatter"
    METADATA = "metadata"
    PREAMBLE = "preamble"
    CUSTOM = "custom"


@dataclass(frozen=True, slots=True)
class CursorLocationSettings:
    """Immutable settings snapshot; ``custom`` strings apply when selected."""

    number_cursors: int = 1
    selection_mode: SelectionMode = SelectionMode.FULL
    display_char_count: bool = True
    display_total_lines: bool = True
    display_cursor_lines: bool = False
    display_pattern_option: DisplayPatternOption = DisplayPatternOption.PRESET
    display_pattern: str = "ch:ln/ct"
    cursor_separator_option: CursorSeparatorOption = CursorSeparatorOption.SLASH
    cursor_separator: str = " / "
    range_separator_option: RangeSeparatorOption = RangeSeparatorOption.ARROW
    range_separator: str = "->"
    cursor_line_pattern_option: CursorLinePatternOption = (
        CursorLinePatternOption.SQUARE
    )
    cursor_line_pattern: str = "[lc]"
    status_bar_padding: bool = False
    padding_step_option: PaddingStepOption = PaddingStepOption.MEDIUM
    padding_step: int = 9
    wordy_display: bool = False
    fuzzy_amount: FuzzyAmount = FuzzyAmount.STRICT_PERCENT
    frontmatter_excluded_from_percent: bool = False
    frontmatter_string: FrontmatterPhraseOption = FrontmatterPhraseOption.FRONTMATTER
    frontmatter_string_custom: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "CursorLocationSettings":
        """Merge a stored blob over the defaults; unknown keys are ignored."""

        values: Dict[str, Any] = {}
        for name, key in SETTING_KEYS.items():
            if data is None or key not in data:
                continue
            values[name] = _coerce(name, data[key])
        return cls(**values)

    def to_mapping(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        for name, key in SETTING_KEYS.items():
            value = getattr(self, name)
            result[key] = value.value if isinstance(value, Enum) else value
        return result


def _to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


SETTING_KEYS: Mapping[str, str] = MappingProxyType(
    {field.name: _to_camel(field.name) for field in fields(CursorLocationSettings)}
)

DEFAULT_SETTINGS: Mapping[str, Any] = MappingProxyType(
    {field.name: field.default for field in fields(CursorLocationSettings)}
)

ENUM_FIELDS: Mapping[str, Type[Enum]] = MappingProxyType(
    {
        name: type(default)
        for name, default in DEFAULT_SETTINGS.items()
        if isinstance(default, Enum)
    }
)


def _coerce(name: str, value: Any) -> Any:
    enum_type = ENUM_FIELDS.get(name)
    if enum_type is None:
        return value
    try:
        return enum_type(value)
    except ValueError:
        telemetry.record_event(
            "settings.invalid_option",
            level="warning",
            data={"setting": name, "value": value},
        )
        return DEFAULT_SETTINGS[name]


__all__ = [
    "CursorLocationSettings",
    "CursorLinePatternOption",
    "CursorSeparatorOption",
    "DEFAULT_SETTINGS",
    "DisplayPatternOption",
    "ENUM_FIELDS",
    "FrontmatterPhraseOption",
    "FuzzyAmount",
    "PaddingStepOption",
    "RangeSeparatorOption",
    "SETTING_KEYS",
    "SelectionMode",
]
