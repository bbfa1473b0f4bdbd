"""Tests for the Markdown stripper and the sentence segmenter."""
import pytest

from src.counter.markdown import strip_markdown
from src.counter.sentences import (
    ABBREVIATION_MARK,
    ELLIPSIS_MARK,
    count_sentences,
    protect_periods,
    restore_periods,
    split_sentences,
)


# ── Markdown stripper ──────────────────────────────────────────────────────

@pytest.mark.parametrize("text,expected", [
    ("**bold** text", "bold text"),
    ("__bold__ text", "bold text"),
    ("*em* and _em_", "em and em"),
    ("***both***", "both"),
    ("~~gone~~ ==marked==", "gone marked"),
    ("[label](https://example.com)", "label"),
    ("[[Target Note|shown]]", "shown"),
    ("[[Target Note]]", "Target Note"),
    ("before ![alt text](img.png) after", "before  after"),
    ("# Title", "Title"),
    ("###### Deep", "Deep"),
    ("> quoted", "quoted"),
    ("- item", "item"),
    ("* item", "item"),
    ("+ item", "item"),
    ("12. step", "step"),
    ("a <b>bold</b> tag", "a bold tag"),
])
def test_strip_markdown_rewrites(text, expected):
    assert strip_markdown(text) == expected


def test_strip_markdown_drops_horizontal_rules():
    assert strip_markdown("Above\n---\n***\n_ _ _\nBelow") == "Above\n\n\n\nBelow"


def test_strip_markdown_leaves_snake_case_alone():
    assert strip_markdown("use snake_case_names here") == "use snake_case_names here"


def test_strip_markdown_list_item_with_emphasis():
    assert strip_markdown("* item with *em*") == "item with em"


# ── Sentence segmenter ─────────────────────────────────────────────────────

def test_count_sentences_empty():
    assert count_sentences("") == 0
    assert count_sentences("  \n\t ") == 0


def test_abbreviation_is_not_a_boundary():
    assert count_sentences("Dr. Smith went home.") == 1


def test_ellipsis_is_not_a_boundary():
    assert count_sentences("Wait... what?") == 1


def test_mixed_terminator_run_is_one_boundary():
    assert count_sentences("Really?! Yes. No!!!") == 3


def test_unterminated_final_clause_counts():
    assert count_sentences("First one. Second one") == 2


@pytest.mark.parametrize("text", [
    "We met Mr. and Mrs. Jones.",
    "Compare apples vs. oranges, e.g. fruit.",
    "It was i.e. the plan.",
    "She holds a Ph.D. from MIT.",
    "Born in the U.S. last year.",
    "Open app.js and style.css now.",
    "Edit README.md then notes.txt today.",
    "Meet at 10 a.m. sharp.",
    "ACME Inc. shipped it.",
])
def test_listed_abbreviations_are_guarded(text):
    assert count_sentences(text) == 1


def test_abbreviations_are_case_insensitive():
    assert count_sentences("DR. Who arrived. ETC. followed.") == 2


def test_abbreviation_needs_word_boundary():
    # "st." inside "first." is a real terminator
    assert count_sentences("It came first. Then second.") == 2


def test_decimal_numbers_still_split():
    assert count_sentences("Pi is 3.14 roughly.") == 2


def test_protect_and_restore_round_trip():
    text = "Dr. Who said e.g. this... and left."
    protected = protect_periods(text)
    assert ABBREVIATION_MARK in protected
    assert ELLIPSIS_MARK in protected
    assert "..." not in protected
    assert restore_periods(protected) == text


def test_split_sentences_restores_periods():
    assert split_sentences("Dr. Smith left. He waited... then ran!") == [
        "Dr. Smith left",
        "He waited... then ran",
    ]


def test_four_periods_are_not_an_ellipsis():
    assert ELLIPSIS_MARK not in protect_periods("Hmm.... ok")
