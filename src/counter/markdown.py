"""Markdown stripper — removes markup syntax, keeps the text it decorates.

Only used on the character-count path. The output is not meant to be valid
prose; it just must not count markup punctuation as content.

Rewrites run in order: images and links first, then emphasis, then the
line-anchored structural markers, then inline tags.
"""
from __future__ import annotations

import re

_REWRITES: list[tuple[re.Pattern[str], str]] = [
    # Links and images
    (re.compile(r"!\[[^\]]*\]\([^)]*\)"), ""),                       # images
    (re.compile(r"\[\[[^\]|]*\|([^\]]*)\]\]"), r"\1"),               # [[target|label]]
    (re.compile(r"\[\[([^\]]*)\]\]"), r"\1"),                        # [[target]]
    (re.compile(r"\[([^\]]*)\]\([^)]*\)"), r"\1"),                   # [label](target)
    # Emphasis: delimiters must hug the content
    (re.compile(r"\*\*(?=\S)(.+?)(?<=\S)\*\*"), r"\1"),
    (re.compile(r"(?<!\w)__(?=\S)(.+?)(?<=\S)__(?!\w)"), r"\1"),
    (re.compile(r"\*(?=\S)([^*\n]+?)(?<=\S)\*"), r"\1"),
    (re.compile(r"(?<!\w)_(?=\S)([^_\n]+?)(?<=\S)_(?!\w)"), r"\1"),
    (re.compile(r"~~(.+?)~~"), r"\1"),                               # strikethrough
    (re.compile(r"==(.+?)=="), r"\1"),                               # highlight
    # Line-anchored structure
    (re.compile(r"^[ \t]*#{1,6}[ \t]+", re.MULTILINE), ""),          # headings
    (re.compile(r"^[ \t]*(?:>[ \t]?)+", re.MULTILINE), ""),          # block quotes
    (re.compile(r"^[ \t]*([-*_])(?:[ \t]*\1){2,}[ \t]*$", re.MULTILINE), ""),  # rules
    (re.compile(r"^[ \t]*(?:[-*+]|\d+\.)[ \t]+", re.MULTILINE), ""),  # list markers
    # Inline HTML
    (re.compile(r"<[^>\n]+>"), ""),
]


def strip_markdown(text: str) -> str:
    """Return *text* with Markdown syntax removed."""
    for pattern, replacement in _REWRITES:
        text = pattern.sub(replacement, text)
    return text
