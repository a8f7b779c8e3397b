import pytest

from cursor_location.buffer import TextDocument
from cursor_location.display.wordy import (
    detect_frontmatter_boundary,
    percent_of_document,
    word_for,
    wordy_position,
)
from cursor_location.selections import CursorRecord
from cursor_location.settings import FuzzyAmount

BAND_ORDER = ["top", "near top", "middle", "near bottom", "bottom"]


def make_record(line_count: int, boundary: int | None = None) -> CursorRecord:
    return CursorRecord(
        doc_line_count=line_count,
        doc_char_count=line_count * 10,
        anchor_line=1,
        anchor_char=0,
        head_line=1,
        head_char=0,
        highlighted_chars=0,
        highlighted_lines=1,
        frontmatter_boundary_line=boundary,
    )


@pytest.mark.parametrize("line_count", [2, 3, 10, 100, 101, 7919])
def test_percent_boundaries(line_count: int) -> None:
    assert percent_of_document(1, line_count) == 0
    assert percent_of_document(line_count, line_count) == 100


def test_single_line_document_is_top() -> None:
    assert percent_of_document(1, 1) == 0


def test_half_values_round_up() -> None:
    assert percent_of_document(2, 201) == 1
    assert percent_of_document(6, 9) == 63
    assert percent_of_document(4, 9) == 38


def test_percent_with_frontmatter_offset() -> None:
    assert percent_of_document(5, 14, 4) == 0
    assert percent_of_document(14, 14, 4) == 100
    assert percent_of_document(9, 14, 4) == 44


def test_single_body_line_after_frontmatter_is_top() -> None:
    assert percent_of_document(10, 10, 9) == 0


@pytest.mark.parametrize(
    ("percent", "word"),
    [
        (0, "top"),
        (19, "top"),
        (20, "near top"),
        (59, "middle"),
        (79, "near bottom"),
        (80, "bottom"),
        (100, "bottom"),
    ],
)
def test_very_wordy_bands(percent: int, word: str) -> None:
    assert word_for(percent, FuzzyAmount.VERY_WORDY) == word


def test_very_wordy_bands_are_exhaustive_and_monotonic() -> None:
    indices = [
        BAND_ORDER.index(word_for(percent, FuzzyAmount.VERY_WORDY))
        for percent in range(101)
    ]

    assert indices == sorted(indices)
    assert set(indices) == set(range(len(BAND_ORDER)))


@pytest.mark.parametrize(
    ("percent", "word"),
    [
        (0, "top"),
        (32, "top"),
        (33, "middle"),
        (65, "middle"),
        (66, "bottom"),
        (98, "bottom"),
        (99, "bottom"),
        (100, "bottom"),
    ],
)
def test_little_wordy_bands(percent: int, word: str) -> None:
    assert word_for(percent, FuzzyAmount.LITTLE_WORDY) == word


@pytest.mark.parametrize(
    ("mode", "percent", "word"),
    [
        (FuzzyAmount.STRICT_PERCENT, 0, "top"),
        (FuzzyAmount.STRICT_PERCENT, 1, "1%"),
        (FuzzyAmount.STRICT_PERCENT, 99, "99%"),
        (FuzzyAmount.STRICT_PERCENT, 100, "bottom"),
        (FuzzyAmount.LOW_FUZZY_PERCENT, 10, "top"),
        (FuzzyAmount.LOW_FUZZY_PERCENT, 11, "11%"),
        (FuzzyAmount.LOW_FUZZY_PERCENT, 89, "89%"),
        (FuzzyAmount.LOW_FUZZY_PERCENT, 90, "bottom"),
        (FuzzyAmount.HIGH_FUZZY_PERCENT, 20, "top"),
        (FuzzyAmount.HIGH_FUZZY_PERCENT, 21, "21%"),
        (FuzzyAmount.HIGH_FUZZY_PERCENT, 79, "79%"),
        (FuzzyAmount.HIGH_FUZZY_PERCENT, 80, "bottom"),
        (FuzzyAmount.ONLY_PERCENT, 0, "0%"),
        (FuzzyAmount.ONLY_PERCENT, 100, "100%"),
    ],
)
def test_percent_modes(mode: FuzzyAmount, percent: int, word: str) -> None:
    assert word_for(percent, mode) == word


def test_word_for_accepts_raw_option_value() -> None:
    assert word_for(50, "onlypercent") == "50%"  # type: ignore[arg-type]


def test_frontmatter_phrase_overrides_every_mode() -> None:
    record = make_record(20, boundary=4)

    for mode in FuzzyAmount:
        assert wordy_position(4, record, mode, "preamble") == "preamble"
    assert wordy_position(5, record, FuzzyAmount.STRICT_PERCENT, "preamble") == "top"
    assert wordy_position(20, record, FuzzyAmount.STRICT_PERCENT, "preamble") == "bottom"


def test_no_boundary_never_uses_phrase() -> None:
    record = make_record(101)

    assert wordy_position(1, record, FuzzyAmount.ONLY_PERCENT, "metadata") == "0%"
    assert wordy_position(51, record, FuzzyAmount.ONLY_PERCENT, "metadata") == "50%"


def test_detect_frontmatter_boundary_before_closing_fence() -> None:
    text = "---\ntitle: x\n---\nbody\nmore"

    assert detect_frontmatter_boundary(text, TextDocument(text)) == 2


def test_detect_frontmatter_allows_leading_blank_lines() -> None:
    text = "\n---\na: 1\n---\n"

    assert detect_frontmatter_boundary(text, TextDocument(text)) == 3


@pytest.mark.parametrize("text", ["# title\nbody", "intro\n---\na\n---\n", ""])
def test_detect_frontmatter_requires_leading_block(text: str) -> None:
    assert detect_frontmatter_boundary(text, TextDocument(text)) is None
