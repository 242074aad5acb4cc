"""Models for the offline translation cache.

Entries serialize with dataclasses_json; timestamps travel as ISO 8601 strings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

from dataclasses_json import DataClassJsonMixin, config, dataclass_json

__all__: list[str] = ["CacheStatistics", "TranslationCacheEntry"]


def _decode_timestamp(value: str) -> datetime:
    """Parse an ISO 8601 timestamp; naive values are taken as UTC."""
    parsed: datetime = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


@dataclass_json
@dataclass
class TranslationCacheEntry(DataClassJsonMixin):
    """Cached offline translation.

    Attributes:
        translation (str): Translated text.
        confidence (float): Heuristic confidence score in [0, 1].
        timestamp (datetime): Time the entry was computed (timezone-aware).
    """

    translation: str
    confidence: float
    timestamp: datetime = field(metadata=config(encoder=datetime.isoformat, decoder=_decode_timestamp))

    def is_fresh(self, now: datetime, ttl: timedelta) -> bool:
        """Check whether the entry is younger than ``ttl`` at ``now``."""
        return now - self.timestamp < ttl


@dataclass
class CacheStatistics:
    """Offline cache usage statistics.

    Attributes:
        total_entries (int): Number of cached entries.
        stale_entries (int): Entries older than the TTL.
        pair_distribution (dict[str, int]): Entry count per ``"src-tgt"`` pair.
        oldest_entry (datetime | None): Timestamp of the oldest entry.
        newest_entry (datetime | None): Timestamp of the newest entry.
    """

    total_entries: int = 0
    stale_entries: int = 0
    pair_distribution: dict[str, int] = field(default_factory=dict)
    oldest_entry: datetime | None = None
    newest_entry: datetime | None = None
