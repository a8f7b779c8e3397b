"""Executable Textual app showing the cursor location status line."""

from __future__ import annotations

import argparse
import json
import os
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from rich.cells import cell_len
    from textual.app import App, ComposeResult
    from textual.widgets import Footer, Static, TextArea
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use cursor_location.adapters.textual.app"
    ) from exc

from cursor_location.runtime import telemetry
from cursor_location.settings import (
    CursorLocationSettings,
    SelectionMode,
    SettingsEditor,
)

from .controller import StatusLineController, StatusLineHooks

_MODE_CYCLE = (SelectionMode.FULL, SelectionMode.BEGIN, SelectionMode.END)


class CursorLocationApp(App[None]):
    """A text area with the rendered cursor location underneath."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#editor {
		height: 1fr;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
        ("ctrl+t", "toggle_wordy", "Wordy"),
        ("ctrl+b", "cycle_selection_mode", "Selection mode"),
    ]

    def __init__(
        self,
        *,
        text: str = "",
        settings_path: Optional[Path] = None,
    ) -> None:
        super().__init__()
        self._text = text
        self._settings_path = settings_path
        self.editor = SettingsEditor(
            _load_settings(settings_path), on_save=self._save_settings
        )
        self.controller: StatusLineController | None = None
        self._text_area: TextArea | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        self._text_area = TextArea(self._text, id="editor")
        self._status_widget = Static("", id="status-line")
        yield self._text_area
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = StatusLineHooks(
            update_status=self._update_status,
            update_width=self._update_width,
            measure=cell_len,
            log=self.log,
        )
        self.controller = StatusLineController(self.editor, hooks)
        self._refresh()

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        del event
        self._refresh()

    def on_text_area_selection_changed(self, event: TextArea.SelectionChanged) -> None:
        del event
        self._refresh()

    def action_toggle_wordy(self) -> None:
        self.editor.update("wordy_display", not self.editor.settings.wordy_display)
        self._refresh()

    def action_cycle_selection_mode(self) -> None:
        current = _MODE_CYCLE.index(self.editor.settings.selection_mode)
        self.editor.update(
            "selection_mode", _MODE_CYCLE[(current + 1) % len(_MODE_CYCLE)]
        )
        self._refresh()

    def _refresh(self) -> None:
        if not self.controller or not self._text_area:
            return
        selection = self._text_area.selection
        self.controller.refresh_locations(
            self._text_area.text, [(selection.start, selection.end)]
        )

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)

    def _update_width(self, width: Optional[int]) -> None:
        if self._status_widget:
            self._status_widget.styles.width = width

    def _save_settings(self, blob: Mapping[str, Any]) -> None:
        if self._settings_path is None:
            return
        self._settings_path.write_text(json.dumps(dict(blob), indent=2))


def _load_settings(path: Optional[Path]) -> CursorLocationSettings:
    if path is None or not path.exists():
        return CursorLocationSettings()
    return CursorLocationSettings.from_mapping(json.loads(path.read_text()))


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run the cursor location Textual demo."
    )
    parser.add_argument("file", nargs="?", help="Text file to open")
    parser.add_argument(
        "--settings",
        default=os.environ.get("CURSOR_LOCATION_SETTINGS"),
        help="JSON file the settings are loaded from and saved to",
    )
    parser.add_argument(
        "--log-preset",
        choices=("development", "production"),
        default=os.environ.get("CURSOR_LOCATION_LOG_PRESET"),
        help="telelog preset to configure before starting",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    text = Path(args.file).read_text() if args.file else ""
    settings_path = Path(args.settings) if args.settings else None
    CursorLocationApp(text=text, settings_path=settings_path).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
