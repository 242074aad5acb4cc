"""Dictionary resolution engine.

Turns a text span into translated text using the lexicon store and the pattern matcher.
The span is classified and recursively broken down (paragraph, sentence, phrase, word)
until each piece is found in the lexicon or passed through unchanged. Pairs without a
direct lexicon pivot through English.

The engine never raises for translation problems. An unsupported pair yields the input
wrapped in a ``[No dictionary: src-tgt]`` marker instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Final

from core.lexicon.store import LexiconStore
from core.resolve.patterns import PatternMatcher
from core.resolve.segmenter import Segmenter, SpanKind
from models.lexicon_models import PIVOT_LANGUAGE
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging

    from models.lexicon_models import LanguagePairKey, Lexicon

__all__: list[str] = ["NO_DICTIONARY_MARKER", "Resolution", "ResolutionEngine", "ResolutionRoute"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

NO_DICTIONARY_MARKER: Final[str] = "[No dictionary: {pair}]"
LONG_PHRASE_MIN_LENGTH: Final[int] = 11
PARTIAL_PHRASE_MIN_LENGTH: Final[int] = 4


class ResolutionRoute(StrEnum):
    """Which lexicons produced a resolution."""

    DIRECT = "direct"
    TO_PIVOT = "to_pivot"
    PIVOT = "pivot"
    PIVOT_ONLY = "pivot_only"
    NO_DICTIONARY = "no_dictionary"
    EMPTY = "empty"


@dataclass(frozen=True)
class Resolution:
    """Resolved text together with the route taken.

    Attributes:
        text (str): Output text. Never None.
        route (ResolutionRoute): Lexicon route used.
    """

    text: str
    route: ResolutionRoute

    @property
    def is_degraded(self) -> bool:
        """True when the pair could not be served as requested."""
        return self.route in (ResolutionRoute.PIVOT_ONLY, ResolutionRoute.NO_DICTIONARY)


class ResolutionEngine:
    """Resolves text against the lexicon store, pivoting through English where needed."""

    def __init__(self, lexicon_store: LexiconStore | None = None, pattern_matcher: PatternMatcher | None = None) -> None:
        self.lexicon_store: LexiconStore = lexicon_store if lexicon_store is not None else LexiconStore()
        self.pattern_matcher: PatternMatcher = pattern_matcher if pattern_matcher is not None else PatternMatcher()

    def is_pair_supported(self, source_lang: str, target_lang: str) -> bool:
        """Check whether a direct lexicon exists for the pair."""
        return self.lexicon_store.has_pair(source_lang, target_lang)

    def list_supported_pairs(self) -> list[LanguagePairKey]:
        """Return every pair with a direct lexicon, in registration order."""
        return self.lexicon_store.list_pairs()

    def resolve(self, text: str, source_lang: str, target_lang: str) -> str:
        """Translate ``text`` from ``source_lang`` to ``target_lang``.

        Args:
            text (str): Input text of any size. Blank input is returned unchanged.
            source_lang (str): Source language code.
            target_lang (str): Target language code.

        Returns:
            str: The translated text, the input passed through where nothing matched,
                or the input prefixed with the no-dictionary marker.
        """
        return self.resolve_detailed(text, source_lang, target_lang).text

    def resolve_detailed(self, text: str, source_lang: str, target_lang: str) -> Resolution:
        """Translate ``text`` and report which lexicon route was used.

        Args:
            text (str): Input text.
            source_lang (str): Source language code.
            target_lang (str): Target language code.

        Returns:
            Resolution: Output text and route.
        """
        text = StringUtils.normalize_text(StringUtils.ensure_str(text))
        if not text.strip():
            return Resolution(text, ResolutionRoute.EMPTY)

        logger.debug("Resolving %s-%s: '%s'", source_lang, target_lang, text[:50])

        direct: Lexicon | None = self.lexicon_store.get(source_lang, target_lang)
        if direct is not None:
            return Resolution(self._resolve_text(text, direct), ResolutionRoute.DIRECT)

        logger.info("No direct lexicon for %s-%s; trying pivot via '%s'", source_lang, target_lang, PIVOT_LANGUAGE)
        to_pivot: Lexicon | None = self.lexicon_store.get(source_lang, PIVOT_LANGUAGE)
        from_pivot: Lexicon | None = self.lexicon_store.get(PIVOT_LANGUAGE, target_lang)

        if to_pivot is not None and target_lang == PIVOT_LANGUAGE:
            return Resolution(self._resolve_text(text, to_pivot), ResolutionRoute.TO_PIVOT)

        if to_pivot is not None and from_pivot is not None:
            intermediate: str = self._resolve_text(text, to_pivot)
            return Resolution(self._resolve_text(intermediate, from_pivot), ResolutionRoute.PIVOT)

        if to_pivot is not None:
            logger.warning(
                "No %s-%s lexicon; returning the %s-%s result instead",
                PIVOT_LANGUAGE,
                target_lang,
                source_lang,
                PIVOT_LANGUAGE,
            )
            return Resolution(self._resolve_text(text, to_pivot), ResolutionRoute.PIVOT_ONLY)

        logger.warning("No lexicon for %s-%s, directly or via '%s'", source_lang, target_lang, PIVOT_LANGUAGE)
        marker: str = NO_DICTIONARY_MARKER.format(pair=f"{source_lang}-{target_lang}")
        return Resolution(f"{marker} {text}", ResolutionRoute.NO_DICTIONARY)

    def _resolve_text(self, text: str, lexicon: Lexicon) -> str:
        """Resolve a whole input against one lexicon.

        Exact whole-text matches win. Multi-line input always goes through paragraph
        handling so line breaks survive; everything else is dispatched by span kind.
        """
        exact: str | None = lexicon.lookup(StringUtils.fold(text)) or lexicon.lookup(text.strip())
        if exact is not None:
            return exact

        kind: SpanKind = Segmenter.classify(text)
        if kind is SpanKind.PARAGRAPH or Segmenter.is_multiline(text):
            return self._resolve_paragraph(text, lexicon)
        if kind is SpanKind.SENTENCE:
            return self._resolve_sentence(text, lexicon)
        if kind is SpanKind.PHRASE:
            return self._resolve_phrase(text, lexicon)
        return self._resolve_word(text, lexicon)

    def _resolve_paragraph(self, text: str, lexicon: Lexicon) -> str:
        lines: list[str] = []
        for line in Segmenter.split_lines(text):
            if not line.strip():
                lines.append("")
                continue
            sentences: list[str] = [
                self._resolve_sentence(sentence, lexicon) for sentence in Segmenter.split_sentences(line)
            ]
            lines.append(" ".join(sentences))
        return "\n".join(lines)

    def _resolve_sentence(self, text: str, lexicon: Lexicon) -> str:
        pair: LanguagePairKey = lexicon.pair
        patterned: str | None = self.pattern_matcher.match(text, pair.source, pair.target)
        if patterned is not None:
            return patterned

        folded: str = StringUtils.fold(text)
        # first long entry found in lexicon order wins, even if a longer one follows
        for phrase, translation in lexicon.items():
            phrase_folded: str = phrase.lower()
            if len(phrase) >= LONG_PHRASE_MIN_LENGTH and translation and phrase_folded in folded:
                logger.debug("Long phrase match: '%s' -> '%s'", phrase, translation)
                return folded.replace(phrase_folded, translation, 1)

        return " ".join(self._resolve_phrase(chunk, lexicon) for chunk in Segmenter.split_chunks(text))

    def _resolve_phrase(self, text: str, lexicon: Lexicon) -> str:
        folded: str = StringUtils.fold(text)
        exact: str | None = lexicon.lookup(folded)
        if exact is not None:
            return exact

        for phrase, translation in lexicon.items():
            if len(phrase) >= PARTIAL_PHRASE_MIN_LENGTH and translation and (phrase in folded or folded in phrase):
                logger.debug("Partial phrase match: '%s' -> '%s'", phrase, translation)
                return translation

        return self._resolve_word_by_word(text, lexicon)

    def _resolve_word_by_word(self, text: str, lexicon: Lexicon) -> str:
        return " ".join(self._resolve_word(word, lexicon) for word in StringUtils.split_words(text))

    @staticmethod
    def _resolve_word(text: str, lexicon: Lexicon) -> str:
        folded: str = StringUtils.fold(text)
        translation: str | None = (
            lexicon.lookup(folded)
            or lexicon.lookup(text.strip())
            or lexicon.lookup(StringUtils.strip_non_alphanumeric(folded))
        )
        if translation is None:
            logger.debug("No translation for word: '%s'", text)
            return text
        return translation
