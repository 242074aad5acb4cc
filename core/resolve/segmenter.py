"""Span classification and splitting.

Every function here is pure. Classification is evaluated in the fixed order
paragraph, sentence, phrase, word; the first positive test decides.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Final

from models.re_models import (
    CHUNK_DELIMITER_PATTERN,
    LINE_BREAK_PATTERN,
    SENTENCE_SPLIT_PATTERN,
    TERMINATOR_PATTERN,
)
from utils.string_utils import StringUtils

__all__: list[str] = ["Segmenter", "SpanKind"]

SENTENCE_MIN_WORDS: Final[int] = 4
PHRASE_MIN_WORDS: Final[int] = 2
CHUNK_WINDOW_WORDS: Final[int] = 3


class SpanKind(StrEnum):
    PARAGRAPH = "paragraph"
    SENTENCE = "sentence"
    PHRASE = "phrase"
    WORD = "word"


class Segmenter:
    """Static helpers that classify a text span and split it into smaller spans."""

    @staticmethod
    def count_terminators(text: str) -> int:
        return len(TERMINATOR_PATTERN.findall(text))

    @staticmethod
    def is_paragraph(text: str) -> bool:
        """True when the text holds more than one sentence terminator."""
        return Segmenter.count_terminators(text) > 1

    @staticmethod
    def is_sentence(text: str) -> bool:
        """True when the text holds a terminator or more than three words."""
        return TERMINATOR_PATTERN.search(text) is not None or StringUtils.count_words(text) >= SENTENCE_MIN_WORDS

    @staticmethod
    def is_phrase(text: str) -> bool:
        """True when the text holds more than one word."""
        return StringUtils.count_words(text) >= PHRASE_MIN_WORDS

    @staticmethod
    def is_multiline(text: str) -> bool:
        return LINE_BREAK_PATTERN.search(text) is not None

    @staticmethod
    def classify(text: str) -> SpanKind:
        """Classify a span.

        Args:
            text (str): Span to classify.

        Returns:
            SpanKind: The first matching kind in paragraph, sentence, phrase, word order.
        """
        if Segmenter.is_paragraph(text):
            return SpanKind.PARAGRAPH
        if Segmenter.is_sentence(text):
            return SpanKind.SENTENCE
        if Segmenter.is_phrase(text):
            return SpanKind.PHRASE
        return SpanKind.WORD

    @staticmethod
    def split_lines(text: str) -> list[str]:
        """Split on line breaks, keeping empty lines so the line count is preserved."""
        return LINE_BREAK_PATTERN.split(text)

    @staticmethod
    def split_sentences(line: str) -> list[str]:
        """Split a line on terminator runs, dropping blank pieces.

        Pieces are returned untrimmed; terminators are consumed.
        """
        return [piece for piece in SENTENCE_SPLIT_PATTERN.split(line) if piece.strip()]

    @staticmethod
    def split_windows(text: str, size: int = CHUNK_WINDOW_WORDS) -> list[str]:
        """Group the words of ``text`` into consecutive windows of ``size`` words."""
        words: list[str] = StringUtils.split_words(text)
        return [" ".join(words[i : i + size]) for i in range(0, len(words), size)]

    @staticmethod
    def split_chunks(text: str) -> list[str]:
        """Split a sentence into phrase-sized chunks.

        Clause delimiters are tried first. When they yield at most one chunk the
        sentence is cut into fixed three-word windows instead.

        Args:
            text (str): Sentence to split.

        Returns:
            list[str]: Trimmed, non-empty chunks.
        """
        chunks: list[str] = [chunk.strip() for chunk in CHUNK_DELIMITER_PATTERN.split(text) if chunk.strip()]
        if len(chunks) <= 1:
            return Segmenter.split_windows(text)
        return chunks
