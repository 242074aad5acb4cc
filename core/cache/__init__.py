"""Translation cache package.

Provides the TTL cache backing offline pack translations.
"""

from __future__ import annotations

from core.cache.manager import PackTranslationCache

__all__: list[str] = ["PackTranslationCache"]
