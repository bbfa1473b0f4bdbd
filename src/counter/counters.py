"""Word and character counters."""
from __future__ import annotations

import re

from src.counter.markdown import strip_markdown

_WHITESPACE_RUN_RE = re.compile(r"\s+")


def count_words(text: str) -> int:
    """Count whitespace-delimited tokens."""
    return len(text.split())


def count_characters(text: str, strip_markdown_syntax: bool = False) -> int:
    """Count characters in *text*.

    Raw mode counts every character, whitespace included. With
    *strip_markdown_syntax* the text is markdown-stripped, whitespace runs are
    collapsed to one space and the ends trimmed before counting.
    """
    if not strip_markdown_syntax:
        return len(text)
    stripped = _WHITESPACE_RUN_RE.sub(" ", strip_markdown(text)).strip()
    return len(stripped)
