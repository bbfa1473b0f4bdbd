"""Text statistics core: cleaning stages and sentence/word/character counters."""
from src.counter.blocks import strip_blocks, strip_callouts, strip_code
from src.counter.counters import count_characters, count_words
from src.counter.frontmatter import strip_frontmatter
from src.counter.markdown import strip_markdown
from src.counter.pipeline import (
    EMPTY_RESULT,
    AnalysisResult,
    AnalysisSettings,
    analyze,
    clean_text,
    cleaning_stages,
)
from src.counter.sentences import count_sentences, split_sentences

__all__ = [
    "EMPTY_RESULT",
    "AnalysisResult",
    "AnalysisSettings",
    "analyze",
    "clean_text",
    "cleaning_stages",
    "count_characters",
    "count_sentences",
    "count_words",
    "split_sentences",
    "strip_blocks",
    "strip_callouts",
    "strip_code",
    "strip_frontmatter",
    "strip_markdown",
]
