"""Models for lexicon data: language pair keys, ordered lexicons and pattern rules."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Final, Self

from models.re_models import PAIR_KEY_PATTERN, TEMPLATE_PLACEHOLDER_PATTERN

if TYPE_CHECKING:
    from re import Match, Pattern

__all__: list[str] = ["PIVOT_LANGUAGE", "LanguagePairKey", "Lexicon", "PatternRule"]

PIVOT_LANGUAGE: Final[str] = "en"


@dataclass(frozen=True, slots=True)
class LanguagePairKey:
    """Source and target language codes identifying one translation direction.

    Attributes:
        source (str): Source language code.
        target (str): Target language code.
    """

    source: str
    target: str

    def __str__(self) -> str:
        return f"{self.source}-{self.target}"

    @property
    def key(self) -> str:
        """The ``"{source}-{target}"`` form used to index lexicons."""
        return str(self)

    @classmethod
    def parse(cls, value: str) -> Self:
        """Parse a ``"src-tgt"`` key.

        Args:
            value (str): Key text such as ``"en-hi"``.

        Returns:
            LanguagePairKey: The parsed key.

        Raises:
            ValueError: If the text is not two lowercase codes joined by one hyphen.
        """
        match: Match[str] | None = PAIR_KEY_PATTERN.match(value)
        if match is None:
            msg: str = f"Invalid language pair key: '{value}'"
            raise ValueError(msg)
        return cls(match.group("source"), match.group("target"))


class Lexicon(Mapping[str, str]):
    """Immutable, insertion-ordered word and phrase table for one language pair.

    Iteration follows declaration order, which decides every first-match-wins scan.
    Entries with an empty translation are kept for ordering but never match a lookup.
    """

    __slots__ = ("_entries", "pair")

    def __init__(self, pair: LanguagePairKey, entries: Mapping[str, str] | Iterable[tuple[str, str]]) -> None:
        self.pair: LanguagePairKey = pair
        items: Iterable[tuple[str, str]] = entries.items() if isinstance(entries, Mapping) else entries
        self._entries: Mapping[str, str] = MappingProxyType(dict(items))

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Lexicon(pair={self.pair}, entries={len(self._entries)})"

    def lookup(self, term: str) -> str | None:
        """Return the translation for ``term`` exactly as given, or None.

        Args:
            term (str): Source text to look up. No normalization is applied.

        Returns:
            str | None: The non-empty translation, or None if absent.
        """
        translation: str | None = self._entries.get(term)
        return translation or None

    def merged(self, extra: Mapping[str, str]) -> Lexicon:
        """Return a new lexicon with ``extra`` appended; existing keys take the new values in place."""
        combined: dict[str, str] = dict(self._entries)
        combined.update(extra)
        return Lexicon(self.pair, combined)


@dataclass(frozen=True, slots=True)
class PatternRule:
    """Regular expression with capture groups and an output template using ``$1``, ``$2``, ...

    Attributes:
        pattern (Pattern[str]): Compiled pattern tried against trimmed input.
        template (str): Output text with positional placeholders.
    """

    pattern: Pattern[str]
    template: str

    def apply(self, text: str) -> str | None:
        """Render the template if the pattern matches.

        Placeholders are replaced by the trimmed captured groups. A group that did not take
        part in the match renders as an empty string; a placeholder with no such group is
        left as written.

        Args:
            text (str): Input text; it is trimmed before matching.

        Returns:
            str | None: Rendered template, or None if the pattern does not match.
        """
        match: Match[str] | None = self.pattern.search(text.strip())
        if match is None:
            return None

        groups: tuple[str | None, ...] = match.groups()

        def substitute(placeholder: Match[str]) -> str:
            index: int = int(placeholder.group(1))
            if not 1 <= index <= len(groups):
                return placeholder.group(0)
            return (groups[index - 1] or "").strip()

        return TEMPLATE_PLACEHOLDER_PATTERN.sub(substitute, self.template)
