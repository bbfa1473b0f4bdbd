"""Block stripper — removes fenced code, inline code and (optionally) callouts.

Code is removed before callouts so that callout-looking lines inside a fenced
block never reach the callout pass.
"""
from __future__ import annotations

import re

_FENCE_RE = re.compile(r"```[\s\S]*?```")
_INLINE_CODE_RE = re.compile(r"(?<!`)`[^`]+`(?!`)")

# Header line "> [!type] title" plus every directly following "> ..." line.
_CALLOUT_RE = re.compile(r"^>[ \t]*\[!\w+\][^\n]*(?:\n>[^\n]*)*\n?", re.MULTILINE)
_BARE_QUOTE_RE = re.compile(r"^>[ \t]*(?:\n|$)", re.MULTILINE)


def strip_code(text: str) -> str:
    """Remove fenced code blocks, then inline code spans."""
    text = _FENCE_RE.sub("", text)
    return _INLINE_CODE_RE.sub("", text)


def strip_callouts(text: str) -> str:
    """Remove callout blocks and any bare ``>`` lines left behind."""
    text = _CALLOUT_RE.sub("", text)
    return _BARE_QUOTE_RE.sub("", text)


def strip_blocks(text: str, ignore_callouts: bool = False) -> str:
    """Apply code removal and, when *ignore_callouts* is set, callout removal."""
    text = strip_code(text)
    if ignore_callouts:
        text = strip_callouts(text)
    return text
