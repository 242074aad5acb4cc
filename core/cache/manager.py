"""Offline translation cache manager.

Keeps offline pack translations in memory, keyed by language pair and source text, and
mirrors them to the key-value store as a single JSON document so they survive restarts.
Entries expire after a fixed TTL.
"""

from __future__ import annotations

import asyncio
import sqlite3
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Any, ClassVar

from models.cache_models import CacheStatistics, TranslationCacheEntry
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from core.kv_storage import KeyValueStorage

__all__: list[str] = ["PackTranslationCache"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class PackTranslationCache:
    """In-memory TTL cache for offline pack translations.

    Attributes:
        TTL (ClassVar[timedelta]): Lifetime of a cache entry.
        STORAGE_KEY (ClassVar[str]): Key under which the cache is persisted.
    """

    TTL: ClassVar[timedelta] = timedelta(hours=24)
    STORAGE_KEY: ClassVar[str] = "offline_translation_cache"

    def __init__(self, storage: KeyValueStorage | None = None) -> None:
        """Initialize an empty cache.

        Args:
            storage (KeyValueStorage | None): Persistent store; None keeps the cache in memory only.
        """
        self._storage: KeyValueStorage | None = storage
        self._entries: dict[str, TranslationCacheEntry] = {}
        self._lock: asyncio.Lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    @staticmethod
    def make_key(text: str, source_lang: str, target_lang: str) -> str:
        """Build the cache key ``{source}-{target}-{text}``."""
        return f"{source_lang}-{target_lang}-{text}"

    @staticmethod
    def _split_key(key: str) -> tuple[str, str]:
        # language codes never contain '-', the text part may
        parts: list[str] = key.split("-", 2)
        if len(parts) < 3:
            return "", ""
        return parts[0], parts[1]

    def _now(self) -> datetime:
        return datetime.now().astimezone()

    def load(self) -> int:
        """Load persisted entries, replacing the in-memory contents.

        Entries that fail to decode are skipped with a warning.

        Returns:
            int: Number of entries loaded.
        """
        self._entries.clear()
        if self._storage is None:
            return 0

        raw: Any = self._storage.get_json(self.STORAGE_KEY)
        if raw is None:
            return 0
        if not isinstance(raw, dict):
            logger.warning("Persisted offline cache is not an object; ignoring it")
            return 0

        for key, value in raw.items():
            try:
                entry: TranslationCacheEntry = TranslationCacheEntry.from_dict(value)
            except (KeyError, TypeError, ValueError, AttributeError) as err:
                logger.warning("Skipping corrupt offline cache entry '%s': %s", key, err)
                continue
            if not isinstance(entry.timestamp, datetime) or not isinstance(entry.translation, str):
                logger.warning("Skipping offline cache entry '%s' with missing fields", key)
                continue
            self._entries[str(key)] = entry

        logger.info("Loaded %d offline cache entries", len(self._entries))
        return len(self._entries)

    def _persist(self) -> None:
        if self._storage is None:
            return
        payload: dict[str, Any] = {key: entry.to_dict(encode_json=True) for key, entry in self._entries.items()}
        try:
            self._storage.set_json(self.STORAGE_KEY, payload)
        except sqlite3.Error as err:
            logger.error("Failed to persist offline cache: %s", err)

    async def get(self, text: str, source_lang: str, target_lang: str) -> TranslationCacheEntry | None:
        """Return a fresh entry for the request, or None.

        Stale entries are treated as misses but left in place until overwritten.
        """
        key: str = self.make_key(text, source_lang, target_lang)
        async with self._lock:
            entry: TranslationCacheEntry | None = self._entries.get(key)
        if entry is None:
            return None
        if not entry.is_fresh(self._now(), self.TTL):
            logger.debug("Offline cache entry expired: %s", key[:50])
            return None
        logger.debug("Offline cache hit: %s", key[:50])
        return entry

    async def put(
        self, text: str, source_lang: str, target_lang: str, translation: str, confidence: float
    ) -> TranslationCacheEntry:
        """Store a translation and persist the cache."""
        entry = TranslationCacheEntry(translation=translation, confidence=confidence, timestamp=self._now())
        async with self._lock:
            self._entries[self.make_key(text, source_lang, target_lang)] = entry
            self._persist()
        return entry

    async def prune_language(self, lang: str) -> int:
        """Drop every entry whose source or target language is ``lang``.

        Returns:
            int: Number of entries removed.
        """
        async with self._lock:
            doomed: list[str] = [key for key in self._entries if lang in self._split_key(key)]
            for key in doomed:
                del self._entries[key]
            if doomed:
                self._persist()
        logger.info("Pruned %d offline cache entries for '%s'", len(doomed), lang)
        return len(doomed)

    async def clear(self) -> None:
        async with self._lock:
            self._entries.clear()
            if self._storage is not None:
                self._storage.delete(self.STORAGE_KEY)
        logger.info("Offline cache cleared")

    def statistics(self) -> CacheStatistics:
        """Summarize the current cache contents."""
        now: datetime = self._now()
        stats = CacheStatistics(total_entries=len(self._entries))
        for key, entry in self._entries.items():
            source, target = self._split_key(key)
            pair: str = f"{source}-{target}"
            stats.pair_distribution[pair] = stats.pair_distribution.get(pair, 0) + 1
            if not entry.is_fresh(now, self.TTL):
                stats.stale_entries += 1
            if stats.oldest_entry is None or entry.timestamp < stats.oldest_entry:
                stats.oldest_entry = entry.timestamp
            if stats.newest_entry is None or entry.timestamp > stats.newest_entry:
                stats.newest_entry = entry.timestamp
        return stats
