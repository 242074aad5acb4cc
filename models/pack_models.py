"""Models describing offline language packs."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

__all__: list[str] = ["LanguagePack", "PackTranslation", "StorageSummary"]


def _now() -> datetime:
    return datetime.now().astimezone()


@dataclass
class LanguagePack:
    """Downloadable dictionary for one language, translating to and from English.

    Attributes:
        code (str): Language code (e.g. ``"ne"``).
        name (str): English name of the language.
        native_name (str): Name of the language in its own script.
        version (str): Pack version.
        size_mb (float): Declared download size in megabytes.
        download_source (str): Location the pack is fetched from.
        is_installed (bool): Whether the pack is usable offline.
        last_updated (datetime): Last time the install state changed.
        dictionary (dict[str, str]): Ordered pack-language to English entries.
        removable (bool): False for the pivot language, which ships built in.
    """

    code: str
    name: str
    native_name: str
    version: str = "1.0.0"
    size_mb: float = 0.0
    download_source: str = ""
    is_installed: bool = False
    last_updated: datetime = field(default_factory=_now)
    dictionary: dict[str, str] = field(default_factory=dict)
    removable: bool = True


@dataclass(frozen=True)
class PackTranslation:
    """Result of an offline pack translation.

    Attributes:
        text (str): Translated text.
        confidence (float): Heuristic score in [0, 1]; informational only.
        from_cache (bool): True when served from the translation cache.
    """

    text: str
    confidence: float
    from_cache: bool = False


@dataclass(frozen=True)
class StorageSummary:
    total_declared_size: float
    used_size: float
    pack_count: int
    installed_count: int
