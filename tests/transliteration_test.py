from __future__ import annotations

import pytest

from ueb_transcriber.rules import INDICATORS
from ueb_transcriber.transliteration import transliterate, untranslated_characters


@pytest.mark.parametrize(
    ("text", "expected"),
    (
        pytest.param("the", "⠮", id="word-contraction"),
        pytest.param("there", "⠹⠻⠑", id="prefix-is-not-a-word"),
        pytest.param("mother", "⠍⠕⠹⠻", id="letter-groups-mid-word"),
        pytest.param("singing", "⠎⠬⠬", id="ing-repeats"),
        pytest.param("cannot", "⠉⠁⠝⠝⠕⠞", id="no-word-match-inside-word"),
        pytest.param("it's", "⠭⠄⠎", id="apostrophe-ends-word"),
        pytest.param("don't", "⠙⠕⠝⠄⠞", id="apostrophe-inside-word"),
        pytest.param("knowledge", "⠅", id="long-word"),
        pytest.param("sand", "⠎⠁⠝⠙", id="and-inside-word"),
    ),
)
def test_grade2_contractions(text: str, expected: str) -> None:
    assert transliterate(text) == expected


def test_grade1_spells_every_letter() -> None:
    assert transliterate("the", False) == "⠞⠓⠑"
    assert transliterate("singing", grade2=False) == "⠎⠊⠝⠛⠊⠝⠛"


@pytest.mark.parametrize(
    ("text", "expected"),
    (
        pytest.param("Cat", "⠠⠉⠁⠞", id="single-letters"),
        pytest.param("The", "⠠⠮", id="before-contraction"),
        pytest.param("THE", "⠠⠮", id="interior-capitals-consumed"),
        pytest.param("With", "⠠⠾", id="with"),
    ),
)
def test_capital_indicator_prefixes_letter_or_contraction(text: str, expected: str) -> None:
    assert transliterate(text) == expected


def test_capital_indicator_in_grade1() -> None:
    assert transliterate("Cat", grade2=False) == "⠠⠉⠁⠞"


def test_sentence() -> None:
    assert transliterate("Hello, world!") == "⠠⠓⠑⠇⠇⠕⠂ ⠺⠕⠗⠇⠙⠖"


@pytest.mark.parametrize(
    ("text", "expected"),
    (
        pytest.param("123", "⠼⠁⠃⠉", id="single-indicator"),
        pytest.param("1 2", "⠼⠁ ⠼⠃", id="space-resets"),
        pytest.param("3.5", "⠼⠉⠲⠼⠑", id="punctuation-resets"),
        pytest.param("1a2", "⠼⠁⠁⠼⠃", id="letter-resets"),
        pytest.param("1\n2", "⠼⠁\n⠼⠃", id="newline-resets"),
        pytest.param("0", "⠼⠚", id="zero"),
    ),
)
def test_number_mode(text: str, expected: str) -> None:
    assert transliterate(text) == expected


def test_number_indicator_emitted_once_per_run() -> None:
    out = transliterate("2024 was")
    assert out.count(INDICATORS.number) == 1


@pytest.mark.parametrize(
    ("text", "expected"),
    (
        pytest.param("a\nb", "⠁\n⠃", id="newline-kept"),
        pytest.param("a\tb", "⠁ ⠃", id="tab-becomes-space"),
        pytest.param("(x)", "⠐⠣⠭⠐⠜", id="two-cell-punctuation"),
        pytest.param("a-b", "⠁⠤⠃", id="hyphen"),
    ),
)
def test_whitespace_and_punctuation(text: str, expected: str) -> None:
    assert transliterate(text) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    (
        pytest.param("日本語", "日本語", id="cjk"),
        pytest.param("café", "⠉⠁⠋é", id="accented-letter"),
        pytest.param("٣", "٣", id="non-ascii-digit"),
        pytest.param("⠁", "⠁", id="braille-input"),
    ),
)
def test_unmapped_characters_pass_through(text: str, expected: str) -> None:
    assert transliterate(text) == expected


@pytest.mark.parametrize("value", ("", None, 42, b"the", ["the"]))
def test_empty_or_non_string_input_yields_empty(value: object) -> None:
    assert transliterate(value) == ""


def test_untranslated_characters() -> None:
    assert untranslated_characters("café 日本") == ["é", "日", "本"]
    assert untranslated_characters("The 3 cats!") == []
    assert untranslated_characters(None) == []


@pytest.mark.parametrize(
    ("text", "expected"),
    (
        pytest.param("\ufeffa", " ⠁", id="byte-order-mark-is-space"),
        pytest.param("a\u00a0b", "⠁ ⠃", id="nbsp-is-space"),
        pytest.param("1\u20092", "⠼⠁ ⠼⠃", id="thin-space-resets-number"),
        pytest.param("a\x1cb", "⠁\x1c⠃", id="file-separator-passes-through"),
        pytest.param("a\x85b", "⠁\x85⠃", id="next-line-passes-through"),
    ),
)
def test_whitespace_set(text: str, expected: str) -> None:
    assert transliterate(text) == expected


def test_separator_controls_are_untranslated() -> None:
    assert untranslated_characters("a\x1fb\ufeff") == ["\x1f"]
