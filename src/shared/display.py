"""Human-readable count labels shared by the CLI and the TUI."""
from __future__ import annotations

from src.counter.pipeline import AnalysisResult


def pluralize(count: int, noun: str) -> str:
    return f"{count} {noun}{'' if count == 1 else 's'}"


def format_result(result: AnalysisResult, show_word_count: bool = True) -> str:
    """Return e.g. ``"3 Sentences · 12 Words · 60 Characters"``."""
    parts = [pluralize(result.sentence_count, "Sentence")]
    if show_word_count:
        parts.append(pluralize(result.word_count, "Word"))
    parts.append(pluralize(result.char_count, "Character"))
    return " · ".join(parts)
