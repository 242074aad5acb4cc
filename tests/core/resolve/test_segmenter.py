from __future__ import annotations

import pytest

from core.resolve.segmenter import Segmenter, SpanKind


@pytest.mark.parametrize(
    ("text", "kind"),
    [
        ("Hello. How are you?", SpanKind.PARAGRAPH),
        ("नमस्ते। धन्यवाद।", SpanKind.PARAGRAPH),
        ("hello.", SpanKind.SENTENCE),
        ("one two three four", SpanKind.SENTENCE),
        ("good morning", SpanKind.PHRASE),
        ("one two three", SpanKind.PHRASE),
        ("hello", SpanKind.WORD),
        ("", SpanKind.WORD),
    ],
)
def test_classify(text: str, kind: SpanKind) -> None:
    assert Segmenter.classify(text) is kind


def test_count_terminators_includes_danda_and_fullwidth_bar() -> None:
    assert Segmenter.count_terminators("a। b॥ c｜ d?") == 4


def test_split_lines_keeps_blank_lines() -> None:
    assert Segmenter.split_lines("one\n\ntwo\r\nthree") == ["one", "", "two", "three"]


def test_split_sentences_drops_blank_pieces() -> None:
    assert Segmenter.split_sentences("Hi!! How are you?") == ["Hi", " How are you"]
    assert Segmenter.split_sentences("...") == []


def test_split_chunks_on_delimiters() -> None:
    assert Segmenter.split_chunks("hello, my friend (again)") == ["hello", "my friend", "again"]


def test_split_chunks_falls_back_to_word_windows() -> None:
    assert Segmenter.split_chunks("one two three four five") == ["one two three", "four five"]


def test_split_windows_custom_size() -> None:
    assert Segmenter.split_windows("a b c d", size=2) == ["a b", "c d"]
