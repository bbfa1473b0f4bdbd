"""Settings reader/writer — persisted as JSON next to the user's config.

Host code calls load_settings() to get current values.
Falls back to defaults if the file is missing, unreadable or invalid.
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Literal

import structlog
from pydantic import BaseModel, Field

from src.counter.pipeline import AnalysisSettings

log = structlog.get_logger()

_DEFAULTS: dict[str, Any] = {
    "display_location": "statusbar",
    "show_word_count": True,
    "ignore_callouts": False,
    "strip_markdown_for_char_count": False,
    "debounce_ms": 150,
}


class CounterSettings(BaseModel):
    display_location: Literal["statusbar", "sidebar"] = _DEFAULTS["display_location"]
    show_word_count: bool = _DEFAULTS["show_word_count"]
    ignore_callouts: bool = _DEFAULTS["ignore_callouts"]
    strip_markdown_for_char_count: bool = _DEFAULTS["strip_markdown_for_char_count"]
    debounce_ms: int = Field(_DEFAULTS["debounce_ms"], ge=0)

    def analysis_settings(self) -> AnalysisSettings:
        """Project the flags the counting pipeline cares about."""
        return AnalysisSettings(
            ignore_callouts=self.ignore_callouts,
            strip_markdown_for_char_count=self.strip_markdown_for_char_count,
        )


def settings_path() -> Path:
    env = os.getenv("SENTENCE_COUNTER_SETTINGS")
    if env:
        return Path(env)
    return Path.home() / ".config" / "sentence-counter" / "settings.json"


def load_settings(path: str | Path | None = None) -> CounterSettings:
    """Read settings from *path* (default: settings_path()). Falls back to defaults."""
    target = Path(path) if path is not None else settings_path()
    if not target.exists():
        return CounterSettings(**_DEFAULTS)
    try:
        stored = json.loads(target.read_text(encoding="utf-8"))
        if not isinstance(stored, dict):
            raise ValueError("settings file must contain a JSON object")
        merged = dict(_DEFAULTS)
        merged.update({k: v for k, v in stored.items() if k in _DEFAULTS})
        return CounterSettings(**merged)
    except (OSError, ValueError) as exc:
        log.warning("settings_read_failed", path=str(target), error=str(exc), using="defaults")
        return CounterSettings(**_DEFAULTS)


def save_settings(settings: CounterSettings, path: str | Path | None = None) -> Path:
    """Write *settings* as JSON, creating parent directories. Returns the path."""
    target = Path(path) if path is not None else settings_path()
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(settings.model_dump(), indent=2) + "\n", encoding="utf-8")
    log.info("settings_saved", path=str(target))
    return target
