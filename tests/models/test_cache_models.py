from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

from models.cache_models import TranslationCacheEntry


def test_entry_serializes_timestamp_as_iso_string() -> None:
    timestamp = datetime(2024, 5, 1, 12, 30, tzinfo=UTC)
    entry = TranslationCacheEntry(translation="Hello", confidence=1.0, timestamp=timestamp)

    data = entry.to_dict()

    assert data == {"translation": "Hello", "confidence": 1.0, "timestamp": "2024-05-01T12:30:00+00:00"}


def test_entry_decodes_timestamp_with_offset() -> None:
    entry = TranslationCacheEntry.from_dict(
        {"translation": "नमस्ते", "confidence": 0.7, "timestamp": "2024-05-01T18:15:00+05:45"}
    )
    assert entry.timestamp == datetime(2024, 5, 1, 18, 15, tzinfo=timezone(timedelta(hours=5, minutes=45)))
    assert entry.timestamp == datetime(2024, 5, 1, 12, 30, tzinfo=UTC)


def test_entry_naive_timestamp_is_taken_as_utc() -> None:
    entry = TranslationCacheEntry.from_dict({"translation": "x", "confidence": 0.5, "timestamp": "2024-05-01T12:30:00"})
    assert entry.timestamp.tzinfo is UTC


def test_entry_freshness() -> None:
    now = datetime(2024, 5, 2, 12, 0, tzinfo=UTC)
    ttl = timedelta(hours=24)
    fresh = TranslationCacheEntry("a", 1.0, now - timedelta(hours=23, minutes=59))
    stale = TranslationCacheEntry("a", 1.0, now - timedelta(hours=24))
    assert fresh.is_fresh(now, ttl) is True
    assert stale.is_fresh(now, ttl) is False
