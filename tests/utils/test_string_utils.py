from __future__ import annotations

import pytest

from utils.string_utils import StringUtils


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, ""),
        ("  text  ", "  text  "),
        (12, "12"),
    ],
)
def test_ensure_str(value: object, expected: str) -> None:
    assert StringUtils.ensure_str(value) == expected  # type: ignore[arg-type]


def test_fold_lowers_and_trims() -> None:
    assert StringUtils.fold("  Hello World ") == "hello world"


def test_normalize_text_composes_nfc() -> None:
    decomposed = "e\u0301"
    assert StringUtils.normalize_text(decomposed) == "\u00e9"


def test_split_words_blank_text_is_one_token() -> None:
    assert StringUtils.split_words("   ") == [""]
    assert StringUtils.count_words("") == 1


def test_split_words_on_whitespace_runs() -> None:
    assert StringUtils.split_words(" how  are\tyou ") == ["how", "are", "you"]


def test_strip_non_alphanumeric_drops_punctuation() -> None:
    assert StringUtils.strip_non_alphanumeric("hello!") == "hello"
    assert StringUtils.strip_non_alphanumeric("it's") == "its"


def test_trim_punctuation_keeps_combining_marks() -> None:
    # the vowel sign and virama must survive; only the danda is removed
    assert StringUtils.trim_punctuation("नमस्ते।") == "नमस्ते"
    assert StringUtils.trim_punctuation("(water),") == "water"


def test_trim_punctuation_all_punctuation_yields_empty() -> None:
    assert StringUtils.trim_punctuation("?!.") == ""
