from __future__ import annotations

import pytest

from ueb_transcriber.rules import (
    ALPHABET,
    DIGITS,
    INDICATORS,
    LETTER_CONTRACTIONS,
    PUNCTUATION,
    WORD_CONTRACTIONS,
    BrailleGrade,
    cell,
)


@pytest.mark.parametrize(
    "table",
    (ALPHABET, DIGITS, WORD_CONTRACTIONS, LETTER_CONTRACTIONS, PUNCTUATION),
    ids=("alphabet", "digits", "words", "letters", "punctuation"),
)
def test_tables_are_read_only(table) -> None:
    with pytest.raises(TypeError):
        table["zz"] = "⠿"


def test_tables_cover_expected_keys() -> None:
    assert sorted(ALPHABET) == [chr(c) for c in range(ord("a"), ord("z") + 1)]
    assert sorted(DIGITS) == list("0123456789")
    assert all(key == key.lower() for key in WORD_CONTRACTIONS)
    assert not set(WORD_CONTRACTIONS) & set(LETTER_CONTRACTIONS)


def test_digits_share_cells_with_a_to_j() -> None:
    assert [DIGITS[d] for d in "1234567890"] == [ALPHABET[c] for c in "abcdefghij"]


def test_cell_builds_dot_patterns() -> None:
    assert cell() == "\u2800"
    assert cell(1) == ALPHABET["a"]
    assert cell(1, 2) == ALPHABET["b"]
    assert cell(7, 8) == "⣀"


def test_indicators() -> None:
    assert INDICATORS.capital == "⠠"
    assert INDICATORS.number == "⠼"
    assert INDICATORS.italic == "⠨"
    assert INDICATORS.bold == "⠸"
    assert INDICATORS.underline == "⠘"
    assert INDICATORS.emphasis == "⠌"
    assert (INDICATORS.space, INDICATORS.newline) == (" ", "\n")


@pytest.mark.parametrize(
    ("value", "expected"),
    (
        pytest.param("Grade2", BrailleGrade.GRADE2, id="enum-value"),
        pytest.param("grade1", BrailleGrade.GRADE1, id="lowercase"),
        pytest.param(" Grade 1 ", BrailleGrade.GRADE1, id="spaced"),
        pytest.param(1, BrailleGrade.GRADE1, id="int-1"),
        pytest.param("2", BrailleGrade.GRADE2, id="str-2"),
        pytest.param(True, BrailleGrade.GRADE2, id="true"),
        pytest.param(False, BrailleGrade.GRADE1, id="false"),
        pytest.param(BrailleGrade.GRADE1, BrailleGrade.GRADE1, id="enum"),
    ),
)
def test_grade_parse(value: object, expected: BrailleGrade) -> None:
    assert BrailleGrade.parse(value) is expected


def test_grade_parse_rejects_unknown() -> None:
    with pytest.raises(ValueError, match="unknown braille grade"):
        BrailleGrade.parse("grade3")


def test_grade_contracted() -> None:
    assert BrailleGrade.GRADE2.contracted
    assert not BrailleGrade.GRADE1.contracted
