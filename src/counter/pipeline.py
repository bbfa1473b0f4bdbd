"""Analysis pipeline — raw text to (sentences, words, characters).

Pipeline:
  1. Frontmatter removal
  2. Code / callout removal (callouts only when ``ignore_callouts``)
  3. Sentence, word and character counts over the cleaned text

Every stage is a pure ``str -> str`` function; nothing here touches files,
settings storage or host state.
"""
from __future__ import annotations

import functools
from collections.abc import Callable
from dataclasses import asdict, dataclass

import structlog

from src.counter.blocks import strip_blocks
from src.counter.counters import count_characters, count_words
from src.counter.frontmatter import strip_frontmatter
from src.counter.sentences import count_sentences

log = structlog.get_logger()

Stage = Callable[[str], str]


@dataclass(frozen=True)
class AnalysisSettings:
    ignore_callouts: bool = False
    strip_markdown_for_char_count: bool = False


@dataclass(frozen=True)
class AnalysisResult:
    sentence_count: int = 0
    word_count: int = 0
    char_count: int = 0

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


EMPTY_RESULT = AnalysisResult()


def cleaning_stages(settings: AnalysisSettings) -> list[Stage]:
    """Return the ordered cleaning stages for *settings*."""
    return [
        strip_frontmatter,
        functools.partial(strip_blocks, ignore_callouts=settings.ignore_callouts),
    ]


def clean_text(raw_text: str, settings: AnalysisSettings | None = None) -> str:
    """Run *raw_text* through every cleaning stage in order."""
    settings = settings or AnalysisSettings()
    cleaned = raw_text
    for stage in cleaning_stages(settings):
        cleaned = stage(cleaned)
    return cleaned


def analyze(raw_text: str, settings: AnalysisSettings | None = None) -> AnalysisResult:
    """Compute sentence, word and character counts for *raw_text*."""
    if not raw_text or not raw_text.strip():
        return EMPTY_RESULT

    settings = settings or AnalysisSettings()
    cleaned = clean_text(raw_text, settings)
    result = AnalysisResult(
        sentence_count=count_sentences(cleaned),
        word_count=count_words(cleaned),
        char_count=count_characters(cleaned, settings.strip_markdown_for_char_count),
    )
    log.debug("text_analyzed",
              raw_chars=len(raw_text), cleaned_chars=len(cleaned), **result.as_dict())
    return result
