"""Settings modal — display location, word count, callouts, markdown stripping."""
from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Select, Static, Switch

from src.shared.config import CounterSettings

_DISPLAY_OPTIONS = [("Status bar", "statusbar"), ("Right sidebar", "sidebar")]


class SettingsScreen(ModalScreen[CounterSettings | None]):
    """Edit settings. Dismisses with the new CounterSettings, or None on cancel."""

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ]

    DEFAULT_CSS = """
    SettingsScreen {
        align: center middle;
    }
    SettingsScreen > #settings-box {
        width: 64;
        height: auto;
        background: #2c2c2e;
        border: round #3a3a3c;
        padding: 1 2;
    }
    .setting-row {
        height: 3;
    }
    .setting-label {
        color: #8e8e93;
        width: 34;
        content-align: left middle;
    }
    #settings-buttons {
        height: 3;
        margin-top: 1;
    }
    """

    def __init__(self, settings: CounterSettings, **kw) -> None:
        super().__init__(**kw)
        self._settings = settings

    def compose(self) -> ComposeResult:
        with Vertical(id="settings-box"):
            yield Static("[bold]SENTENCE COUNTER SETTINGS[/bold]", markup=True)
            with Horizontal(classes="setting-row"):
                yield Static("Display location", classes="setting-label")
                yield Select(_DISPLAY_OPTIONS, value=self._settings.display_location,
                             allow_blank=False, id="display-location")
            with Horizontal(classes="setting-row"):
                yield Static("Show word count", classes="setting-label")
                yield Switch(value=self._settings.show_word_count, id="show-word-count")
            with Horizontal(classes="setting-row"):
                yield Static("Ignore callouts", classes="setting-label")
                yield Switch(value=self._settings.ignore_callouts, id="ignore-callouts")
            with Horizontal(classes="setting-row"):
                yield Static("Strip Markdown for characters", classes="setting-label")
                yield Switch(value=self._settings.strip_markdown_for_char_count,
                             id="strip-markdown")
            with Horizontal(id="settings-buttons"):
                yield Button("Save", id="save-btn", variant="primary")
                yield Button("Cancel  [Esc]", id="cancel-btn", variant="default")

    def collect(self) -> CounterSettings:
        """Build settings from the current widget values."""
        return self._settings.model_copy(update={
            "display_location": self.query_one("#display-location", Select).value,
            "show_word_count": self.query_one("#show-word-count", Switch).value,
            "ignore_callouts": self.query_one("#ignore-callouts", Switch).value,
            "strip_markdown_for_char_count": self.query_one("#strip-markdown", Switch).value,
        })

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "save-btn":
            self.dismiss(self.collect())
        else:
            self.dismiss(None)

    def action_cancel(self) -> None:
        self.dismiss(None)
