from typing import Any, List, Mapping

import pytest

from cursor_location.settings import (
    DEFAULT_SETTINGS,
    CursorLinePatternOption,
    CursorLocationSettings,
    CursorSeparatorOption,
    DisplayPatternOption,
    FrontmatterPhraseOption,
    FuzzyAmount,
    PaddingStepOption,
    RangeSeparatorOption,
    SelectionMode,
    SettingsEditor,
    resolve_settings,
)


def make_editor(saves: List[Mapping[str, Any]] | None = None) -> SettingsEditor:
    sink = saves if saves is not None else []
    return SettingsEditor(on_save=sink.append)


def test_from_mapping_merges_over_defaults() -> None:
    settings = CursorLocationSettings.from_mapping(
        {"numberCursors": 3, "selectionMode": "begin", "somethingElse": True}
    )

    assert settings.number_cursors == 3
    assert settings.selection_mode is SelectionMode.BEGIN
    assert settings.display_pattern == "ch:ln/ct"
    assert CursorLocationSettings.from_mapping(None) == CursorLocationSettings()


def test_from_mapping_falls_back_on_unknown_option() -> None:
    settings = CursorLocationSettings.from_mapping({"fuzzyAmount": "extremelywordy"})

    assert settings.fuzzy_amount is FuzzyAmount.STRICT_PERCENT


def test_mapping_round_trip() -> None:
    settings = CursorLocationSettings(
        number_cursors=5,
        wordy_display=True,
        fuzzy_amount=FuzzyAmount.LITTLE_WORDY,
        frontmatter_excluded_from_percent=True,
    )

    blob = settings.to_mapping()

    assert blob["fuzzyAmount"] == "littewordy"
    assert blob["frontmatterExcludedFromPercent"] is True
    assert "includeFrontmatter" not in blob
    assert CursorLocationSettings.from_mapping(blob) == settings


def test_resolve_uses_presets() -> None:
    config = resolve_settings(
        CursorLocationSettings(
            cursor_separator_option=CursorSeparatorOption.PIPE,
            cursor_separator="ignored",
            range_separator_option=RangeSeparatorOption.TILDE,
            cursor_line_pattern_option=CursorLinePatternOption.POINTY,
            padding_step_option=PaddingStepOption.HIGH,
            frontmatter_string=FrontmatterPhraseOption.PREAMBLE,
        )
    )

    assert config.display_pattern == "ch:ln/ct"
    assert config.cursor_separator == " | "
    assert config.range_separator == "~"
    assert config.cursor_line_pattern == "<lc>"
    assert config.padding_step == 15
    assert config.frontmatter_phrase == "preamble"


def test_resolve_custom_values() -> None:
    config = resolve_settings(
        CursorLocationSettings(
            display_pattern_option=DisplayPatternOption.CUSTOM,
            display_pattern="ln|ch",
            cursor_separator_option=CursorSeparatorOption.CUSTOM,
            cursor_separator=" :: ",
            padding_step_option=PaddingStepOption.CUSTOM,
            padding_step=12,
            frontmatter_string=FrontmatterPhraseOption.CUSTOM,
            frontmatter_string_custom="header",
        )
    )

    assert config.display_pattern == "ln|ch"
    assert config.cursor_separator == " :: "
    assert config.padding_step == 12
    assert config.frontmatter_phrase == "header"


def test_update_number_accepts_integers() -> None:
    saves: List[Mapping[str, Any]] = []
    editor = make_editor(saves)

    assert editor.update_number("number_cursors", " 4 ") is True
    assert editor.settings.number_cursors == 4
    assert editor.warning("number_cursors") == ""
    assert saves[-1]["numberCursors"] == 4


def test_update_number_rejects_text_and_keeps_value() -> None:
    saves: List[Mapping[str, Any]] = []
    editor = make_editor(saves)
    editor.update_number("padding_step", "12")

    assert editor.update_number("padding_step", "twelve") is False
    assert editor.settings.padding_step == 12
    assert editor.warning("padding_step") == '"twelve" is not a full number, unable to save.'
    assert len(saves) == 1

    editor.update_number("padding_step", "3")
    assert editor.warning("padding_step") == ""


@pytest.mark.parametrize("raw", ["0", "-4", " -1 "])
def test_update_number_rejects_non_positive_padding_step(raw: str) -> None:
    saves: List[Mapping[str, Any]] = []
    editor = make_editor(saves)
    editor.update_number("padding_step", "12")

    assert editor.update_number("padding_step", raw) is False
    assert editor.settings.padding_step == 12
    assert editor.warning("padding_step") == f'"{raw}" must be greater than zero, unable to save.'
    assert len(saves) == 1


def test_update_number_allows_zero_cursor_threshold() -> None:
    editor = make_editor()

    assert editor.update_number("number_cursors", "0") is True
    assert editor.settings.number_cursors == 0


def test_update_trims_patterns_but_not_separators() -> None:
    editor = make_editor()

    editor.update("display_pattern", "  ln:ch  ")
    editor.update("cursor_separator", " ; ")

    assert editor.settings.display_pattern == "ln:ch"
    assert editor.settings.cursor_separator == " ; "


def test_update_coerces_options() -> None:
    editor = make_editor()

    editor.update("selection_mode", "end")

    assert editor.settings.selection_mode is SelectionMode.END


def test_update_errors() -> None:
    editor = make_editor()

    with pytest.raises(KeyError):
        editor.update("no_such_setting", 1)
    with pytest.raises(ValueError):
        editor.update("selection_mode", "sideways")
    with pytest.raises(TypeError):
        editor.update("number_cursors", 3)
    with pytest.raises(TypeError):
        editor.update_number("display_pattern", "3")


def test_reset_single_setting() -> None:
    editor = make_editor()
    editor.update("wordy_display", True)
    editor.update_number("number_cursors", "x")

    editor.reset("number_cursors")
    editor.reset("wordy_display")

    assert editor.settings.wordy_display is False
    assert editor.warning("number_cursors") == ""


def test_reset_all_restores_defaults() -> None:
    saves: List[Mapping[str, Any]] = []
    editor = make_editor(saves)
    editor.update("fuzzy_amount", "onlypercent")
    editor.update_number("number_cursors", "7")
    revision = editor.revision()

    editor.reset_all()

    assert editor.settings == CursorLocationSettings(**DEFAULT_SETTINGS)
    assert editor.revision() == revision + 1
    assert saves[-1] == CursorLocationSettings().to_mapping()
