from hypothesis import given, settings, strategies as st

from ueb_transcriber.rules import DIGITS, INDICATORS, PUNCTUATION
from ueb_transcriber.transliteration import transliterate
from ueb_transcriber.validation import is_valid_braille

_LETTERS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
mapped = st.text(
    alphabet=st.sampled_from(list(_LETTERS + "".join(DIGITS) + "".join(PUNCTUATION) + " \n\t")),
    min_size=1,
    max_size=200,
)
words = st.text(alphabet=st.sampled_from(list(_LETTERS + " ")), max_size=120)


@given(mapped)
@settings(deadline=None)
def test_mapped_text_transliterates_to_valid_braille(sample: str) -> None:
    assert is_valid_braille(transliterate(sample))


@given(st.text(alphabet=st.sampled_from(list(DIGITS)), min_size=1, max_size=50))
def test_digit_run_has_single_number_indicator(digits: str) -> None:
    assert transliterate(digits) == INDICATORS.number + "".join(DIGITS[d] for d in digits)


@given(words)
def test_case_only_adds_capital_indicators(sample: str) -> None:
    upper = transliterate(sample.upper()).replace(INDICATORS.capital, "")
    assert upper == transliterate(sample.lower())


@given(st.text(alphabet=st.sampled_from(list("abcdefghijklmnopqrstuvwxyz")), max_size=80))
def test_grade1_emits_one_cell_per_letter(sample: str) -> None:
    assert len(transliterate(sample, grade2=False)) == len(sample)


@given(st.text(max_size=100))
@settings(deadline=None)
def test_transliterate_is_deterministic(sample: str) -> None:
    assert transliterate(sample) == transliterate(sample)
