from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

import pytest

from core.cache.manager import PackTranslationCache
from core.kv_storage import KeyValueStorage

if TYPE_CHECKING:
    from collections.abc import Generator
    from pathlib import Path

START = datetime(2024, 5, 1, 9, 0, tzinfo=UTC)


class _Clock:
    def __init__(self, now: datetime) -> None:
        self.now: datetime = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def storage(tmp_path: Path) -> Generator[KeyValueStorage]:
    with KeyValueStorage(tmp_path / "cache.db") as kv:
        yield kv


@pytest.fixture
def clock() -> _Clock:
    return _Clock(START)


@pytest.fixture
def cache(storage: KeyValueStorage, clock: _Clock, monkeypatch: pytest.MonkeyPatch) -> PackTranslationCache:
    cache = PackTranslationCache(storage)
    monkeypatch.setattr(cache, "_now", clock)
    return cache


def test_make_key() -> None:
    assert PackTranslationCache.make_key("good-bye", "en", "ne") == "en-ne-good-bye"


async def test_miss_then_hit(cache: PackTranslationCache) -> None:
    assert await cache.get("नमस्ते", "ne", "en") is None

    await cache.put("नमस्ते", "ne", "en", "Hello", 1.0)
    entry = await cache.get("नमस्ते", "ne", "en")

    assert entry is not None
    assert entry.translation == "Hello"
    assert entry.confidence == 1.0
    assert entry.timestamp == START
    assert "ne-en-नमस्ते" in cache
    assert len(cache) == 1


async def test_entry_expires_after_ttl(cache: PackTranslationCache, clock: _Clock) -> None:
    await cache.put("पानी", "ne", "en", "Water", 1.0)

    clock.now = START + timedelta(hours=23, minutes=59)
    assert await cache.get("पानी", "ne", "en") is not None

    clock.now = START + timedelta(hours=24, seconds=1)
    assert await cache.get("पानी", "ne", "en") is None
    # stale entries stay until overwritten
    assert len(cache) == 1

    await cache.put("पानी", "ne", "en", "Water!", 0.7)
    refreshed = await cache.get("पानी", "ne", "en")
    assert refreshed is not None
    assert refreshed.translation == "Water!"


async def test_entries_are_persisted_and_reloaded(
    cache: PackTranslationCache, storage: KeyValueStorage, clock: _Clock, monkeypatch: pytest.MonkeyPatch
) -> None:
    await cache.put("घर", "ne", "en", "Home", 1.0)

    stored = storage.get_json(PackTranslationCache.STORAGE_KEY)
    assert stored == {"ne-en-घर": {"translation": "Home", "confidence": 1.0, "timestamp": START.isoformat()}}

    reloaded = PackTranslationCache(storage)
    monkeypatch.setattr(reloaded, "_now", clock)
    assert reloaded.load() == 1
    entry = await reloaded.get("घर", "ne", "en")
    assert entry is not None
    assert entry.timestamp == START


def test_load_skips_corrupt_entries(storage: KeyValueStorage) -> None:
    storage.set_json(
        PackTranslationCache.STORAGE_KEY,
        {
            "ne-en-a": {"translation": "A", "confidence": 1.0, "timestamp": START.isoformat()},
            "ne-en-b": {"translation": "B", "confidence": 1.0, "timestamp": "yesterday"},
            "ne-en-c": {"translation": "C", "confidence": 1.0},
            "ne-en-d": "not an object",
        },
    )
    cache = PackTranslationCache(storage)

    assert cache.load() == 1
    assert "ne-en-a" in cache


@pytest.mark.parametrize("raw", ["{broken", "[1, 2]", '"text"'])
def test_load_ignores_malformed_document(storage: KeyValueStorage, raw: str) -> None:
    storage.set(PackTranslationCache.STORAGE_KEY, raw)
    cache = PackTranslationCache(storage)
    assert cache.load() == 0
    assert len(cache) == 0


async def test_memory_only_cache() -> None:
    cache = PackTranslationCache()
    await cache.put("hello", "en", "ne", "नमस्ते", 1.0)
    assert cache.load() == 0
    assert len(cache) == 0


async def test_prune_language_matches_either_side(cache: PackTranslationCache, storage: KeyValueStorage) -> None:
    await cache.put("नमस्ते", "ne", "en", "Hello", 1.0)
    await cache.put("hello", "en", "ne", "नमस्ते", 1.0)
    await cache.put("ආයුබෝවන්", "si", "en", "Hello", 1.0)
    await cache.put("banner", "en", "si", "banner", 0.5)

    assert await cache.prune_language("ne") == 2

    assert len(cache) == 2
    assert set(storage.get_json(PackTranslationCache.STORAGE_KEY)) == {"si-en-ආයුබෝවන්", "en-si-banner"}


async def test_clear_removes_persisted_document(cache: PackTranslationCache, storage: KeyValueStorage) -> None:
    await cache.put("hello", "en", "ne", "नमस्ते", 1.0)
    await cache.clear()
    assert len(cache) == 0
    assert storage.get(PackTranslationCache.STORAGE_KEY) is None


async def test_statistics(cache: PackTranslationCache, clock: _Clock) -> None:
    await cache.put("a", "ne", "en", "A", 1.0)
    clock.now = START + timedelta(hours=30)
    await cache.put("b", "ne", "en", "B", 1.0)
    await cache.put("c", "en", "si", "C", 1.0)

    stats = cache.statistics()

    assert stats.total_entries == 3
    assert stats.stale_entries == 1
    assert stats.pair_distribution == {"ne-en": 2, "en-si": 1}
    assert stats.oldest_entry == START
    assert stats.newest_entry == START + timedelta(hours=30)
