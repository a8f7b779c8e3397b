"""Host-side settings editing: validated updates, trimming, and resets."""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Callable, Dict, Mapping, Optional

from cursor_location.runtime.telemetry import record_event, span

from .models import DEFAULT_SETTINGS, ENUM_FIELDS, CursorLocationSettings

NUMBER_FIELDS = frozenset({"number_cursors", "padding_step"})
TRIMMED_FIELDS = frozenset(
    {"display_pattern", "cursor_line_pattern", "frontmatter_string_custom"}
)
NUMBER_WARNING = '"{value}" is not a full number, unable to save.'
POSITIVE_FIELDS = frozenset({"padding_step"})
POSITIVE_WARNING = '"{value}" must be greater than zero, unable to save.'


def _noop_save(_blob: Mapping[str, Any]) -> None:  # pragma: no cover - default hook
    return None


class SettingsEditor:
    """Owns the current settings snapshot and applies edits from a settings UI.

    Every accepted change swaps in a new immutable snapshot and hands the
    serialized blob to ``on_save``; rejected numeric input keeps the previous
    value and leaves a warning for the UI to show.
    """

    def __init__(
        self,
        settings: Optional[CursorLocationSettings] = None,
        *,
        on_save: Callable[[Mapping[str, Any]], None] = _noop_save,
        logger_name: str | None = None,
    ) -> None:
        self._settings = settings or CursorLocationSettings()
        self._on_save = on_save
        self._logger_name = logger_name
        self._warnings: Dict[str, str] = {}
        self._revision = 0

    @property
    def settings(self) -> CursorLocationSettings:
        return self._settings

    def revision(self) -> int:
        return self._revision

    def warning(self, name: str) -> str:
        return self._warnings.get(name, "")

    def update(self, name: str, value: Any) -> CursorLocationSettings:
        """Apply a toggle, dropdown, or free-text change."""

        _ensure_known(name)
        if name in NUMBER_FIELDS:
            raise TypeError(f"Use update_number() for numeric setting '{name}'")
        enum_type = ENUM_FIELDS.get(name)
        if enum_type is not None:
            value = enum_type(value)
        elif name in TRIMMED_FIELDS and isinstance(value, str):
            value = value.strip()
        return self._commit(name, value)

    def update_number(self, name: str, raw: str) -> bool:
        """Parse ``raw`` as an integer; invalid text is reported, not stored."""

        _ensure_known(name)
        if name not in NUMBER_FIELDS:
            raise TypeError(f"Setting '{name}' is not numeric")
        try:
            parsed = int(str(raw).strip())
        except ValueError:
            return self._reject(name, raw, NUMBER_WARNING)
        if name in POSITIVE_FIELDS and parsed <= 0:
            return self._reject(name, raw, POSITIVE_WARNING)
        self._warnings.pop(name, None)
        self._commit(name, parsed)
        return True

    def _reject(self, name: str, raw: str, template: str) -> bool:
        self._warnings[name] = template.format(value=raw)
        record_event(
            "settings.rejected",
            level="warning",
            data={"setting": name, "value": raw},
            logger_name=self._logger_name,
        )
        return False

    def reset(self, name: str) -> CursorLocationSettings:
        _ensure_known(name)
        self._warnings.pop(name, None)
        record_event(
            "settings.reset",
            data={"setting": name, "value": DEFAULT_SETTINGS[name]},
            logger_name=self._logger_name,
        )
        return self._commit(name, DEFAULT_SETTINGS[name])

    def reset_all(self) -> CursorLocationSettings:
        with span(
            "settings::reset_all",
            logger_name=self._logger_name,
            component="settings",
        ):
            self._warnings.clear()
            self._settings = CursorLocationSettings(**DEFAULT_SETTINGS)
            self._touch()
            return self._settings

    def _commit(self, name: str, value: Any) -> CursorLocationSettings:
        with span(
            "settings::update",
            logger_name=self._logger_name,
            component="settings",
            metadata={"setting": name},
        ) as handle:
            if getattr(self._settings, name) != value:
                handle.add_metadata("value", value)
            self._settings = replace(self._settings, **{name: value})
            self._touch()
            return self._settings

    def _touch(self) -> None:
        self._revision += 1
        self._on_save(self._settings.to_mapping())


def _ensure_known(name: str) -> None:
    if name not in DEFAULT_SETTINGS:
        raise KeyError(f"Unknown setting '{name}'")


__all__ = [
    "NUMBER_FIELDS",
    "NUMBER_WARNING",
    "POSITIVE_FIELDS",
    "POSITIVE_WARNING",
    "SettingsEditor",
    "TRIMMED_FIELDS",
]
