from __future__ import annotations

import pytest

from ueb_transcriber.contractions import (
    LETTER_MATCHER,
    WORD_MATCHER,
    ContractionMatch,
    ContractionMatcher,
    find_letter_contraction,
    find_word_contraction,
    word_boundary,
)


def test_candidates_are_longest_first_and_stable() -> None:
    matcher = ContractionMatcher({"ab": "⠁", "cd": "⠃", "abc": "⠉"})
    assert matcher.candidates == ("abc", "ab", "cd")


def test_longest_candidate_wins() -> None:
    matcher = ContractionMatcher({"a": "⠁", "ab": "⠃"})
    assert matcher.match("abc", 0) == ContractionMatch("⠃", 2)


def test_boundary_predicate_is_injected() -> None:
    table = {"ab": "⠃", "a": "⠁"}
    bounded = ContractionMatcher(table, boundary=word_boundary)
    assert bounded.match("abc", 0) is None
    assert bounded.match("a bc", 0) == ContractionMatch("⠁", 1)
    assert ContractionMatcher(table).match("abc", 0) == ContractionMatch("⠃", 2)


def test_match_past_end_of_text() -> None:
    assert WORD_MATCHER.match("th", 0) is None


def test_tables_are_sorted_once() -> None:
    assert WORD_MATCHER.candidates[0] == "knowledge"
    assert LETTER_MATCHER.candidates[0] == "ing"


@pytest.mark.parametrize(
    ("text", "pos", "expected"),
    (
        pytest.param("the", 0, ContractionMatch("⠮", 3), id="whole-text"),
        pytest.param("THE end", 0, ContractionMatch("⠮", 3), id="case-folded"),
        pytest.param("(the)", 1, ContractionMatch("⠮", 3), id="punctuation-bounds"),
        pytest.param("there", 0, None, id="trailing-letter"),
        pytest.param("bathe", 2, None, id="leading-letter"),
        pytest.param("been", 0, ContractionMatch("⠆", 4), id="longer-than-be"),
        pytest.param("xyz", 0, None, id="no-entry"),
    ),
)
def test_find_word_contraction(text: str, pos: int, expected: ContractionMatch | None) -> None:
    assert find_word_contraction(text, pos) == expected


@pytest.mark.parametrize(
    ("text", "pos", "expected"),
    (
        pytest.param("bathe", 2, ContractionMatch("⠹", 2), id="mid-word"),
        pytest.param("sing", 1, ContractionMatch("⠬", 3), id="three-letters"),
        pytest.param("SHOP", 0, ContractionMatch("⠩", 2), id="case-folded"),
        pytest.param("the", 0, ContractionMatch("⠹", 2), id="ignores-boundaries"),
        pytest.param("cat", 0, None, id="no-entry"),
    ),
)
def test_find_letter_contraction(
    text: str, pos: int, expected: ContractionMatch | None
) -> None:
    assert find_letter_contraction(text, pos) == expected
