"""Sentence templates applied before any dictionary lookup.

Each language pair owns an ordered list of rules. The first rule whose pattern matches
the trimmed sentence renders its template; later rules are not tried.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from models.lexicon_models import PatternRule
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Mapping, Sequence

__all__: list[str] = ["DEFAULT_PATTERN_RULES", "PatternMatcher"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


def _rule(pattern: str, template: str) -> PatternRule:
    return PatternRule(re.compile(pattern, re.IGNORECASE), template)


# "hello, this is X" / "this is X"
_EN_THIS_IS: Final[str] = r"^(?:\s*(?:hello|hi)[,!]?\s+)?this\s+is\s+(.+?)[.!?]?\s*$"
_EN_MY_NAME_IS: Final[str] = r"^\s*my\s+name\s+is\s+(.+?)[.!?]?\s*$"
_EN_I_AM: Final[str] = r"^\s*i\s+am\s+(.+?)[.!?]?\s*$"
_EN_HOW_ARE_YOU: Final[str] = r"^\s*how\s+are\s+you\s*\??\s*$"

DEFAULT_PATTERN_RULES: Final[dict[str, tuple[PatternRule, ...]]] = {
    "en-ne": (
        _rule(_EN_THIS_IS, "यो $1 हो"),
        _rule(_EN_MY_NAME_IS, "मेरो नाम $1 हो"),
        _rule(_EN_I_AM, "म $1 हुँ"),
        _rule(_EN_HOW_ARE_YOU, "तपाईं कस्तो हुनुहुन्छ?"),
    ),
    "en-si": (
        _rule(_EN_THIS_IS, "මේ $1"),
        _rule(_EN_MY_NAME_IS, "මගේ නම $1"),
        _rule(_EN_I_AM, "මම $1"),
        _rule(_EN_HOW_ARE_YOU, "ඔයා කොහොමද?"),
    ),
    "ne-en": (
        _rule(r"^\s*यो\s+(.+?)\s+हो\s*[।]?\s*$", "this is $1"),
        _rule(r"^\s*मेरो\s+नाम\s+(.+?)\s+हो\s*[।]?\s*$", "my name is $1"),
        _rule(r"^\s*म\s+(.+?)\s+हुँ\s*[।]?\s*$", "i am $1"),
    ),
    "si-en": (
        _rule(r"^\s*මෙය\s+(.+?)\s*යි\s*$", "this is $1"),
        _rule(r"^\s*මේ\s+(.+?)\s*$", "this is $1"),
        _rule(r"^\s*මගේ\s+නම\s+(.+?)\s*$", "my name is $1"),
        _rule(r"^\s*මම\s+(.+?)\s*$", "i am $1"),
    ),
}


class PatternMatcher:
    """Applies per-pair sentence templates."""

    def __init__(self, rules: Mapping[str, Sequence[PatternRule]] | None = None) -> None:
        source: Mapping[str, Sequence[PatternRule]] = DEFAULT_PATTERN_RULES if rules is None else rules
        self._rules: dict[str, tuple[PatternRule, ...]] = {key: tuple(value) for key, value in source.items()}

    def rules_for(self, source_lang: str, target_lang: str) -> tuple[PatternRule, ...]:
        return self._rules.get(f"{source_lang}-{target_lang}", ())

    def match(self, text: str, source_lang: str, target_lang: str) -> str | None:
        """Render the first matching template for the pair.

        Args:
            text (str): Sentence to match; trimmed before matching.
            source_lang (str): Source language code.
            target_lang (str): Target language code.

        Returns:
            str | None: The rendered template, or None when no rule matches.
        """
        for rule in self.rules_for(source_lang, target_lang):
            rendered: str | None = rule.apply(text)
            if rendered is not None:
                logger.debug("Pattern rule matched (%s-%s): %s", source_lang, target_lang, rule.pattern.pattern)
                return rendered
        return None
