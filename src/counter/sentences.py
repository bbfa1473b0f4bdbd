"""Sentence segmenter — counts sentences split on ``.``, ``!`` and ``?`` runs.

This is a heuristic, not grammar-aware boundary detection. Two known false
positives are guarded before splitting:

  1. Abbreviations from a fixed list (``Dr.``, ``e.g.``, ``U.S.``, ``.md`` …):
     their periods are swapped for ``ABBREVIATION_MARK``.
  2. Ellipses (exactly three periods): replaced by ``ELLIPSIS_MARK``.

Both marks are private-use code points, so they never collide with real
terminators and can be mapped back with :func:`restore_periods`.

Decimal numbers and unlisted abbreviations still split a sentence.
"""
from __future__ import annotations

import re

ABBREVIATION_MARK = "\ue000"
ELLIPSIS_MARK = "\ue001"

ABBREVIATIONS: tuple[str, ...] = (
    # titles
    "Mr.", "Mrs.", "Ms.", "Dr.", "Prof.", "Sr.", "Jr.",
    # latin / english
    "vs.", "etc.", "i.e.", "e.g.", "ca.", "cf.",
    # corporate
    "Inc.", "Ltd.", "Corp.", "Co.",
    # addresses
    "Ave.", "St.", "Rd.", "Blvd.",
    # academic / national
    "Ph.D.", "M.D.", "B.A.", "M.A.", "U.S.", "U.K.",
    # time of day
    "a.m.", "p.m.",
    # file extensions
    ".js", ".css", ".md", ".txt",
)


def _abbreviation_pattern(abbreviation: str) -> re.Pattern[str]:
    # \b only makes sense next to a word character.
    prefix = r"\b" if abbreviation[0].isalnum() else r"(?<=\w)"
    suffix = r"\b" if abbreviation[-1].isalnum() else ""
    return re.compile(prefix + re.escape(abbreviation) + suffix, re.IGNORECASE)


_ABBREVIATION_PATTERNS = [_abbreviation_pattern(a) for a in ABBREVIATIONS]
_ELLIPSIS_RE = re.compile(r"(?<!\.)\.{3}(?!\.)")
_TERMINATOR_RUN_RE = re.compile(r"[.!?]+")


def _mark_abbreviation(match: re.Match[str]) -> str:
    return match.group(0).replace(".", ABBREVIATION_MARK)


def protect_periods(text: str) -> str:
    """Replace periods that must not end a sentence with placeholder marks."""
    for pattern in _ABBREVIATION_PATTERNS:
        text = pattern.sub(_mark_abbreviation, text)
    return _ELLIPSIS_RE.sub(ELLIPSIS_MARK, text)


def restore_periods(text: str) -> str:
    """Inverse of :func:`protect_periods`."""
    return text.replace(ELLIPSIS_MARK, "...").replace(ABBREVIATION_MARK, ".")


def split_sentences(text: str) -> list[str]:
    """Return the non-empty sentence segments of *text*, terminators removed."""
    if not text or not text.strip():
        return []
    segments = _TERMINATOR_RUN_RE.split(protect_periods(text))
    return [restore_periods(s.strip()) for s in segments if s.strip()]


def count_sentences(text: str) -> int:
    """Count sentences in already-cleaned text.

    An unterminated final clause still counts as a sentence.
    """
    return len(split_sentences(text))
