"""Sentence counter TUI — a scratch editor with live text statistics.

Edits are debounced before re-analysis; counts show either in a docked
status line or in a right-hand sidebar, per the persisted display location.
"""
from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

import structlog
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Footer, Header, Static, TextArea

from src.counter.pipeline import EMPTY_RESULT, AnalysisResult, analyze
from src.shared.config import CounterSettings, load_settings, save_settings
from src.shared.debounce import Debouncer
from src.shared.display import format_result, pluralize

log = structlog.get_logger()

THEME = """
Screen {
    background: #1c1c1e;
}

TextArea {
    width: 1fr;
    height: 1fr;
    background: #1c1c1e;
    border: solid #3a3a3c;
}

TextArea:focus { border: solid #0a84ff; }

#sidebar {
    width: 30;
    height: 1fr;
    background: #1c1c1e;
    padding: 1 1;
}

.sidebar-title {
    color: #636366;
    text-style: bold;
    height: 1;
    margin-bottom: 1;
}

MetricCard {
    background: #2c2c2e;
    border: solid #3a3a3c;
    padding: 0 2;
    height: 5;
    margin-bottom: 1;
    content-align: center middle;
}

#status-line {
    background: #2c2c2e;
    color: #8e8e93;
    height: 1;
    padding: 0 2;
    border-top: solid #3a3a3c;
    dock: bottom;
}
"""


class MetricCard(Static):
    """Big-number metric card."""

    def __init__(self, label: str, value: int = 0, **kw):
        super().__init__(**kw)
        self._label = label
        self._value = value

    def render(self) -> str:
        noun = pluralize(self._value, self._label).split(" ", 1)[1]
        return f"[bold #f2f2f7]{self._value}[/bold #f2f2f7]\n[#636366]{noun}[/#636366]"

    def update_metric(self, value: int) -> None:
        self._value = value
        self.refresh()


class CounterApp(App):
    """Live sentence, word and character counts for the text being edited."""

    TITLE = "Sentence Counter"
    CSS = THEME

    BINDINGS = [
        Binding("f2", "open_settings", "Settings"),
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        document: str | Path | None = None,
        settings_file: str | Path | None = None,
        **kw,
    ) -> None:
        super().__init__(**kw)
        self.document = Path(document) if document else None
        self.settings_file = settings_file
        self.settings: CounterSettings = load_settings(settings_file)
        self.result: AnalysisResult = EMPTY_RESULT
        self._debounced_update = Debouncer(
            self.update_counts, wait=self.settings.debounce_ms / 1000
        )

    def compose(self) -> ComposeResult:
        text = ""
        if self.document is not None and self.document.exists():
            text = self.document.read_text(encoding="utf-8", errors="replace")
        yield Header()
        with Horizontal():
            yield TextArea(text, id="editor")
            with Vertical(id="sidebar"):
                yield Static("SENTENCE COUNT", classes="sidebar-title")
                yield MetricCard("Sentence", id="card-sentences")
                yield MetricCard("Word", id="card-words")
                yield MetricCard("Character", id="card-characters")
        yield Static("0 Sentences", id="status-line")
        yield Footer()

    def on_mount(self) -> None:
        structlog.configure(
            wrapper_class=structlog.make_filtering_bound_logger(
                getattr(logging, os.getenv("LOG_LEVEL", "WARNING"))
            )
        )
        self.refresh_display()
        self.update_counts()

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        self._debounced_update()

    def update_counts(self) -> None:
        """Re-analyse the editor contents and push the counts to the display."""
        text = self.query_one("#editor", TextArea).text
        self.result = analyze(text, self.settings.analysis_settings())
        self.display_counts()

    def display_counts(self) -> None:
        show_words = self.settings.show_word_count
        if self.settings.display_location == "statusbar":
            self.query_one("#status-line", Static).update(format_result(self.result, show_words))
        else:
            self.query_one("#card-sentences", MetricCard).update_metric(self.result.sentence_count)
            self.query_one("#card-words", MetricCard).update_metric(self.result.word_count)
            self.query_one("#card-characters", MetricCard).update_metric(self.result.char_count)

    def refresh_display(self) -> None:
        """Show the surface selected by display_location and hide the other."""
        sidebar = self.settings.display_location == "sidebar"
        self.query_one("#sidebar").display = sidebar
        self.query_one("#status-line").display = not sidebar
        self.query_one("#card-words").display = self.settings.show_word_count

    def action_open_settings(self) -> None:
        from src.tui.screens.settings import SettingsScreen

        self.push_screen(SettingsScreen(self.settings), self._apply_settings)

    def _apply_settings(self, settings: CounterSettings | None) -> None:
        if settings is None:
            return
        self.settings = settings
        self._debounced_update.wait = settings.debounce_ms / 1000
        try:
            save_settings(settings, self.settings_file)
        except OSError as exc:
            log.warning("settings_save_failed", error=str(exc))
            self.notify(f"Could not save settings: {exc}", severity="error")
        self.refresh_display()
        self.update_counts()

    def on_unmount(self) -> None:
        self._debounced_update.cancel()


def main() -> None:
    parser = argparse.ArgumentParser(prog="sentence-counter-tui")
    parser.add_argument("document", nargs="?", help="file to open in the editor")
    parser.add_argument("--settings", help="settings file (default: $SENTENCE_COUNTER_SETTINGS)")
    args = parser.parse_args()
    CounterApp(args.document, args.settings).run()


if __name__ == "__main__":
    main()
