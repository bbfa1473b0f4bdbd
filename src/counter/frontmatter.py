"""Frontmatter stripper — drops a leading YAML block delimited by ``---`` lines."""
from __future__ import annotations

FRONTMATTER_DELIMITER = "---"


def strip_frontmatter(text: str) -> str:
    """Return *text* without its leading frontmatter block.

    Unterminated frontmatter is treated as ordinary text and returned as-is.
    """
    if not text.startswith(FRONTMATTER_DELIMITER):
        return text
    lines = text.split("\n")
    for index in range(1, len(lines)):
        if lines[index].strip() == FRONTMATTER_DELIMITER:
            return "\n".join(lines[index + 1:])
    return text
