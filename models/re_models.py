"""Regular expressions for text segmentation and template handling.

Sentence terminators cover Latin punctuation, the Devanagari danda and double danda,
and the fullwidth vertical bar.
"""

from __future__ import annotations

import re
from re import Pattern
from typing import Final

__all__: list[str] = [
    "BLANK_LINE_PATTERN",
    "CHUNK_DELIMITER_PATTERN",
    "LANGUAGE_CODE_PATTERN",
    "LINE_BREAK_PATTERN",
    "PAIR_KEY_PATTERN",
    "SENTENCE_BOUNDARY_PATTERN",
    "SENTENCE_SPLIT_PATTERN",
    "SENTENCE_TERMINATORS",
    "TEMPLATE_PLACEHOLDER_PATTERN",
    "TERMINATOR_PATTERN",
    "WHITESPACE_PATTERN",
]

SENTENCE_TERMINATORS: Final[str] = ".!?।॥｜"

# A single terminator character
# Example: "नमस्ते। धन्यवाद।" contains two
TERMINATOR_PATTERN: Final[Pattern[str]] = re.compile(r"[.!?।॥｜]")

# One or more consecutive terminators, used as the sentence separator inside a line
# Example: "Hi!! How are you?" -> ["Hi", " How are you", ""]
SENTENCE_SPLIT_PATTERN: Final[Pattern[str]] = re.compile(r"[.!?।॥｜]+")

# Clause delimiters for breaking a sentence into phrase-sized chunks
# Example: "hello, my friend (again)" -> ["hello", " my friend ", "again", ""]
CHUNK_DELIMITER_PATTERN: Final[Pattern[str]] = re.compile(r"""[,;:()\[\]{}"'`।]""")

# Line break, tolerant of CRLF input
LINE_BREAK_PATTERN: Final[Pattern[str]] = re.compile(r"\r?\n")

# Blank line separating paragraphs
BLANK_LINE_PATTERN: Final[Pattern[str]] = re.compile(r"\r?\n\r?\n")

# Whitespace run following a sentence terminator; splitting on it keeps the terminator
# with the preceding sentence. Fixed-width lookbehind only.
SENTENCE_BOUNDARY_PATTERN: Final[Pattern[str]] = re.compile(r"(?<=[.!?।॥])\s+")

WHITESPACE_PATTERN: Final[Pattern[str]] = re.compile(r"\s+")

# Positional template placeholder
# Example: "मेरो नाम $1 हो"
TEMPLATE_PLACEHOLDER_PATTERN: Final[Pattern[str]] = re.compile(r"\$(\d+)")

# Lowercase language code such as "en" or "ne"
LANGUAGE_CODE_PATTERN: Final[Pattern[str]] = re.compile(r"^[a-z]{2,3}$")

# Language pair key: exactly two lowercase codes joined by a single hyphen
# Example: "en-hi"
PAIR_KEY_PATTERN: Final[Pattern[str]] = re.compile(r"^(?P<source>[a-z]{2,3})-(?P<target>[a-z]{2,3})$")
