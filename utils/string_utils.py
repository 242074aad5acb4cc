from __future__ import annotations

import unicodedata

from models.re_models import WHITESPACE_PATTERN

__all__: list[str] = ["StringUtils"]


class StringUtils:
    """Small string helpers shared by the lexicon, resolver and pack code."""

    @staticmethod
    def ensure_str(value: str | None) -> str:
        """Return the value as a string, or an empty string for None.

        Whitespace is preserved; callers decide when to trim.

        Args:
            value (str | None): The value to coerce.

        Returns:
            str: The value as a string.
        """
        if not isinstance(value, str):
            value = str(value) if value is not None else ""
        return value

    @staticmethod
    def normalize_text(text: str) -> str:
        """Normalize text using Unicode NFC normalization.

        Args:
            text (str): Text to normalize.

        Returns:
            str: Normalized text.
        """
        return unicodedata.normalize("NFC", text)

    @staticmethod
    def fold(text: str) -> str:
        """Return the trimmed, lower-cased form used for case-insensitive lookups."""
        return StringUtils.ensure_str(text).lower().strip()

    @staticmethod
    def strip_non_alphanumeric(text: str) -> str:
        """Remove every character that is neither a letter nor a digit.

        Combining marks (for example Devanagari vowel signs) are not letters and are removed too.

        Args:
            text (str): Text to clean.

        Returns:
            str: Only the alphanumeric characters of ``text``, in order.
        """
        return "".join(char for char in text if char.isalnum())

    @staticmethod
    def split_words(text: str) -> list[str]:
        """Split trimmed text on whitespace runs.

        Empty or blank text yields ``[""]``, so a blank span still counts as one token.

        Args:
            text (str): Text to split.

        Returns:
            list[str]: Whitespace-delimited tokens.
        """
        return WHITESPACE_PATTERN.split(StringUtils.ensure_str(text).strip())

    @staticmethod
    def count_words(text: str) -> int:
        """Count whitespace-delimited tokens; blank text counts as one."""
        return len(StringUtils.split_words(text))

    @staticmethod
    def trim_punctuation(text: str) -> str:
        """Strip leading and trailing punctuation and symbols, keeping combining marks.

        Args:
            text (str): Token to trim.

        Returns:
            str: ``text`` without surrounding punctuation or symbol characters.
        """
        start: int = 0
        end: int = len(text)
        while start < end and unicodedata.category(text[start])[0] in "PSZ":
            start += 1
        while end > start and unicodedata.category(text[end - 1])[0] in "PSZ":
            end -= 1
        return text[start:end]
