"""Settings schema, preset resolution, and the settings editor."""

from .editor import SettingsEditor
from .models import (
    DEFAULT_SETTINGS,
    SETTING_KEYS,
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
from .resolve import StatusConfig, resolve_option, resolve_settings

__all__ = [
    "CursorLinePatternOption",
    "CursorLocationSettings",
    "CursorSeparatorOption",
    "DEFAULT_SETTINGS",
    "DisplayPatternOption",
    "FrontmatterPhraseOption",
    "FuzzyAmount",
    "PaddingStepOption",
    "RangeSeparatorOption",
    "SETTING_KEYS",
    "SelectionMode",
    "SettingsEditor",
    "StatusConfig",
    "resolve_option",
    "resolve_settings",
]
