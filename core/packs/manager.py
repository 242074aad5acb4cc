# ruff: noqa: BLE001
"""Offline language pack manager.

Owns the install lifecycle of every offline language pack and translates text with
the installed pack dictionaries. Each pack maps its language to English, so pairs
without English on either side pivot through English.

Matching for one leg runs in a fixed order:

1. cached result younger than the cache TTL
2. canned full-text translations (substring containment)
3. exact whole-text match
4. word-by-word, with compound decomposition and affix matching per token
5. phrase containment
6. passthrough
"""

from __future__ import annotations

import asyncio
import sqlite3
from datetime import datetime
from typing import TYPE_CHECKING, ClassVar, Final

from core.cache.manager import PackTranslationCache
from core.packs.downloader import PackDownloader
from core.packs.errors import PackNotFoundError, PackNotInstalledError
from core.packs.tables import CANNED_TRANSLATIONS, PACK_CATALOG
from core.resolve.segmenter import Segmenter
from models.lexicon_models import PIVOT_LANGUAGE
from models.pack_models import LanguagePack, PackTranslation, StorageSummary
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging

    from core.kv_storage import KeyValueStorage
    from core.packs.downloader import ProgressCallback
    from models.cache_models import TranslationCacheEntry

__all__: list[str] = ["OfflinePackManager"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

CONFIDENCE_EXACT: Final[float] = 1.0
CONFIDENCE_CANNED: Final[float] = 0.9
CONFIDENCE_PHRASE: Final[float] = 0.8
CONFIDENCE_WORD_BY_WORD: Final[float] = 0.7
CONFIDENCE_PASSTHROUGH: Final[float] = 0.5
CONFIDENCE_NO_DICTIONARY: Final[float] = 0.3
AFFIX_MIN_LENGTH: Final[int] = 4
PHRASE_MIN_LENGTH: Final[int] = 4


class OfflinePackManager:
    """Install, remove and translate with offline language packs.

    Attributes:
        STATUS_KEY_PREFIX (ClassVar[str]): Key prefix of persisted install flags.
        downloader (PackDownloader): Source of pack dictionaries.
        cache (PackTranslationCache): Translation cache owned by this manager.
    """

    STATUS_KEY_PREFIX: ClassVar[str] = "pack_status:"

    def __init__(
        self,
        storage: KeyValueStorage | None = None,
        *,
        downloader: PackDownloader | None = None,
        cache: PackTranslationCache | None = None,
    ) -> None:
        """Create the manager with every pack uninstalled except the pivot.

        Persisted state is not read here; call ``load_state`` for that.

        Args:
            storage (KeyValueStorage | None): Store for install flags and the cache.
            downloader (PackDownloader | None): Downloader; a default one is created when omitted.
            cache (PackTranslationCache | None): Cache; one backed by ``storage`` is created when omitted.
        """
        self._storage: KeyValueStorage | None = storage
        self.downloader: PackDownloader = downloader if downloader is not None else PackDownloader()
        self.cache: PackTranslationCache = cache if cache is not None else PackTranslationCache(storage)
        self._install_locks: dict[str, asyncio.Lock] = {}

        self._packs: dict[str, LanguagePack] = {
            PIVOT_LANGUAGE: LanguagePack(
                code=PIVOT_LANGUAGE,
                name="English",
                native_name="English",
                is_installed=True,
                removable=False,
            )
        }
        for descriptor in PACK_CATALOG:
            self._packs[descriptor["code"]] = LanguagePack(
                code=descriptor["code"],
                name=descriptor["name"],
                native_name=descriptor["native_name"],
                version=descriptor["version"],
                size_mb=descriptor["size_mb"],
                download_source=descriptor["download_source"],
            )

    @staticmethod
    def _now() -> datetime:
        return datetime.now().astimezone()

    def _status_key(self, lang: str) -> str:
        return f"{self.STATUS_KEY_PREFIX}{lang}"

    def _get_pack(self, lang: str) -> LanguagePack:
        pack: LanguagePack | None = self._packs.get(lang)
        if pack is None:
            raise PackNotFoundError(lang)
        return pack

    def _install_lock(self, lang: str) -> asyncio.Lock:
        return self._install_locks.setdefault(lang, asyncio.Lock())

    def _save_status(self, lang: str, installed: bool) -> None:
        if self._storage is None:
            return
        self._storage.set(self._status_key(lang), "1" if installed else "0")

    def load_state(self) -> None:
        """Restore install flags and the translation cache from storage.

        Malformed flags are logged and treated as not installed.
        """
        if self._storage is not None:
            try:
                for pack in self._packs.values():
                    if not pack.removable:
                        continue
                    flag: str | None = self._storage.get(self._status_key(pack.code))
                    if flag == "1":
                        pack.dictionary = self.downloader.load_dictionary(pack.code)
                        pack.is_installed = True
                        logger.info("Restored installed language pack '%s'", pack.code)
                    elif flag not in (None, "0"):
                        logger.warning("Ignoring malformed install flag for '%s': %r", pack.code, flag)
            except sqlite3.Error as err:
                logger.error("Failed to read language pack status: %s", err)
        self.cache.load()

    def is_pack_installed(self, lang: str) -> bool:
        pack: LanguagePack | None = self._packs.get(lang)
        return pack is not None and pack.is_installed

    def list_packs(self) -> list[LanguagePack]:
        """Return every known pack, the pivot first."""
        return list(self._packs.values())

    def get_storage_summary(self) -> StorageSummary:
        """Summarize declared and used pack sizes.

        The built-in pivot pack is not counted.
        """
        packs: list[LanguagePack] = [pack for pack in self._packs.values() if pack.removable]
        installed: list[LanguagePack] = [pack for pack in packs if pack.is_installed]
        return StorageSummary(
            total_declared_size=round(sum(pack.size_mb for pack in packs), 2),
            used_size=round(sum(pack.size_mb for pack in installed), 2),
            pack_count=len(packs),
            installed_count=len(installed),
        )

    async def install_pack(self, lang: str, on_progress: ProgressCallback | None = None) -> bool:
        """Download and install the pack for ``lang``.

        The pack is marked installed only after the whole download completes. Cancelling
        the awaiting task leaves the pack uninstalled.

        Args:
            lang (str): Language code.
            on_progress (ProgressCallback | None): Receives progress values from 0 to 100.

        Returns:
            bool: True when the pack is installed, False when the download failed.

        Raises:
            PackNotFoundError: If no pack exists for ``lang``.
        """
        pack: LanguagePack = self._get_pack(lang)
        async with self._install_lock(lang):
            if pack.is_installed:
                logger.debug("Language pack '%s' is already installed", lang)
                return True

            try:
                dictionary: dict[str, str] = await self.downloader.download(pack, on_progress)
                self._save_status(lang, True)
            except Exception as err:
                logger.error("Failed to download language pack '%s': %s", lang, err)
                return False

            pack.dictionary = dictionary
            pack.is_installed = True
            pack.last_updated = self._now()
            logger.info("Language pack '%s' installed (%d entries)", lang, len(dictionary))
            return True

    async def remove_pack(self, lang: str) -> bool:
        """Uninstall the pack for ``lang`` and prune its cached translations.

        Returns:
            bool: False for unknown languages and the pivot, True otherwise.
        """
        pack: LanguagePack | None = self._packs.get(lang)
        if pack is None or not pack.removable:
            return False

        async with self._install_lock(lang):
            try:
                self._save_status(lang, False)
            except sqlite3.Error as err:
                logger.error("Failed to remove language pack '%s': %s", lang, err)
                return False
            pack.is_installed = False
            pack.dictionary = {}
            pack.last_updated = self._now()

        await self.cache.prune_language(lang)
        logger.info("Language pack '%s' removed", lang)
        return True

    async def clear_all(self) -> None:
        """Uninstall every removable pack and drop all cached translations."""
        await self.cache.clear()
        for pack in self._packs.values():
            if pack.removable:
                pack.is_installed = False
                pack.dictionary = {}
                pack.last_updated = self._now()
        if self._storage is not None:
            self._storage.clear(self.STATUS_KEY_PREFIX)
        logger.info("All offline data cleared")

    async def translate(self, text: str, source_lang: str, target_lang: str = PIVOT_LANGUAGE) -> PackTranslation:
        """Translate ``text`` with the installed packs.

        Args:
            text (str): Text to translate.
            source_lang (str): Source language code.
            target_lang (str): Target language code, English by default.

        Returns:
            PackTranslation: Translated text with its confidence score.

        Raises:
            PackNotFoundError: If either language has no pack.
            PackNotInstalledError: If a required pack is not installed.
        """
        text = StringUtils.ensure_str(text)
        for lang in (source_lang, target_lang):
            if not self._get_pack(lang).is_installed:
                raise PackNotInstalledError(lang)

        if source_lang == target_lang or not text.strip():
            return PackTranslation(text, CONFIDENCE_EXACT)

        if PIVOT_LANGUAGE in (source_lang, target_lang):
            return await self._translate_leg(text, source_lang, target_lang)

        logger.debug("Pivoting %s-%s through '%s'", source_lang, target_lang, PIVOT_LANGUAGE)
        first: PackTranslation = await self._translate_leg(text, source_lang, PIVOT_LANGUAGE)
        second: PackTranslation = await self._translate_leg(first.text, PIVOT_LANGUAGE, target_lang)
        return PackTranslation(
            second.text,
            min(first.confidence, second.confidence),
            from_cache=first.from_cache and second.from_cache,
        )

    async def _translate_leg(self, text: str, source_lang: str, target_lang: str) -> PackTranslation:
        cached: TranslationCacheEntry | None = await self.cache.get(text, source_lang, target_lang)
        if cached is not None:
            return PackTranslation(cached.translation, cached.confidence, from_cache=True)

        translation, confidence = self._compute(text, source_lang, target_lang)
        await self.cache.put(text, source_lang, target_lang, translation, confidence)
        return PackTranslation(translation, confidence)

    def _leg_dictionary(self, source_lang: str, target_lang: str) -> dict[str, str]:
        """Return the dictionary for a leg with English on one side."""
        if target_lang == PIVOT_LANGUAGE:
            return self._packs[source_lang].dictionary

        reverse: dict[str, str] = {}
        for native, english in self._packs[target_lang].dictionary.items():
            reverse.setdefault(english.lower(), native)
        return reverse

    def _compute(self, text: str, source_lang: str, target_lang: str) -> tuple[str, float]:
        stripped: str = text.strip()
        folded: str = StringUtils.fold(text)

        for canned_source, canned in CANNED_TRANSLATIONS.get(f"{source_lang}-{target_lang}", ()):
            if canned_source in text or canned_source in folded:
                logger.debug("Canned translation matched: '%s'", canned_source)
                return canned, CONFIDENCE_CANNED

        dictionary: dict[str, str] = self._leg_dictionary(source_lang, target_lang)
        if not dictionary:
            logger.warning("Language pack dictionary for %s-%s is empty", source_lang, target_lang)
            return text, CONFIDENCE_NO_DICTIONARY

        exact: str | None = dictionary.get(stripped) or dictionary.get(folded)
        if exact:
            return exact, CONFIDENCE_EXACT

        translated, changed = self._translate_words(text, dictionary)
        if changed:
            return translated, CONFIDENCE_WORD_BY_WORD

        # single tokens were already tried word by word; containment is for phrases only
        needle: str = folded if source_lang == PIVOT_LANGUAGE else stripped
        if len(needle.split()) > 1:
            for phrase, translation in dictionary.items():
                if len(phrase) < PHRASE_MIN_LENGTH or not translation:
                    continue
                if phrase in needle or needle in phrase:
                    logger.debug("Phrase containment matched: '%s'", phrase)
                    return translation, CONFIDENCE_PHRASE

        logger.debug("No offline translation for %s-%s: '%s'", source_lang, target_lang, text[:50])
        return text, CONFIDENCE_PASSTHROUGH

    def _translate_words(self, text: str, dictionary: dict[str, str]) -> tuple[str, bool]:
        """Translate token by token, keeping line breaks.

        Returns:
            tuple[str, bool]: The joined result and whether any token was translated.
        """
        changed: bool = False
        lines: list[str] = []
        for line in Segmenter.split_lines(text):
            tokens: list[str] = []
            for token in line.split():
                translation: str | None = self._translate_token(token, dictionary)
                if translation is None:
                    tokens.append(token)
                else:
                    tokens.append(translation)
                    changed = True
            lines.append(" ".join(tokens))
        if not changed:
            return text, False
        return "\n".join(lines), True

    @staticmethod
    def _translate_token(token: str, dictionary: dict[str, str]) -> str | None:
        folded: str = token.lower()
        trimmed: str = StringUtils.trim_punctuation(folded)
        found: str | None = dictionary.get(token) or dictionary.get(folded) or dictionary.get(trimmed)
        if found:
            return found
        return OfflinePackManager._decompose(trimmed, dictionary) or OfflinePackManager._match_affix(
            token, dictionary
        )

    @staticmethod
    def _decompose(token: str, dictionary: dict[str, str]) -> str | None:
        """Split a compound token into two dictionary words, longest prefix first."""
        for split in range(len(token) - 1, 0, -1):
            left: str | None = dictionary.get(token[:split])
            right: str | None = dictionary.get(token[split:])
            if left and right:
                return f"{left} {right}"
        return None

    @staticmethod
    def _match_affix(token: str, dictionary: dict[str, str]) -> str | None:
        """Replace the first dictionary key of four or more characters found inside the token."""
        folded: str = token.lower()
        for key, translation in dictionary.items():
            if len(key) < AFFIX_MIN_LENGTH or not translation:
                continue
            if key in token:
                return token.replace(key, translation, 1)
            if key in folded:
                return folded.replace(key, translation, 1)
        return None
