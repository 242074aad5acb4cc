"""Data models for ShabdhX.

This package contains dataclass definitions for configuration, lexicons, offline packs,
the translation cache and translation requests, and the regular expression patterns
used throughout the application.
"""

from __future__ import annotations

from models.cache_models import CacheStatistics, TranslationCacheEntry
from models.config_models import Config
from models.lexicon_models import PIVOT_LANGUAGE, LanguagePairKey, Lexicon, PatternRule
from models.pack_models import LanguagePack, PackTranslation, StorageSummary
from models.re_models import (
    BLANK_LINE_PATTERN,
    LANGUAGE_CODE_PATTERN,
    PAIR_KEY_PATTERN,
    SENTENCE_BOUNDARY_PATTERN,
    TEMPLATE_PLACEHOLDER_PATTERN,
)
from models.translation_models import TranslationInfo, TranslationMethod

__all__: list[str] = [
    "BLANK_LINE_PATTERN",
    "LANGUAGE_CODE_PATTERN",
    "PAIR_KEY_PATTERN",
    "PIVOT_LANGUAGE",
    "SENTENCE_BOUNDARY_PATTERN",
    "TEMPLATE_PLACEHOLDER_PATTERN",
    "CacheStatistics",
    "Config",
    "LanguagePack",
    "LanguagePairKey",
    "Lexicon",
    "PackTranslation",
    "PatternRule",
    "StorageSummary",
    "TranslationCacheEntry",
    "TranslationInfo",
    "TranslationMethod",
]
