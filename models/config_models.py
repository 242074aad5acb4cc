"""Configuration data models for ShabdhX.

Each data class is one section of the INI file; field names match the INI keys.
"""

from __future__ import annotations

from dataclasses import dataclass, field

__all__: list[str] = [
    "Config",
    "General",
    "LexiconSettings",
    "Offline",
    "Remote",
    "Translation",
]


def _default_engines() -> list[str]:
    return ["remote", "offline_pack", "dictionary"]


@dataclass
class General:
    DEBUG: bool = False
    VERSION: str = ""
    SCRIPT_NAME: str = ""
    LOG_FILE: str = ""


@dataclass
class Translation:
    ENGINE: list[str] = field(default_factory=_default_engines)
    SOURCE_LANGUAGE: str = "en"
    TARGET_LANGUAGE: str = "ne"
    PREFER_OFFLINE: bool = False


@dataclass
class Remote:
    ENDPOINT: str = ""
    TIMEOUT: float = 30.0
    MAX_CHUNK_LENGTH: int = 2000


@dataclass
class Offline:
    STORAGE_PATH: str = "shabdhx.db"
    DOWNLOAD_STEPS: int = 100
    DOWNLOAD_STEP_DELAY: float = 0.05


@dataclass
class LexiconSettings:
    EXTRA_FILES: list[str] = field(default_factory=list)


@dataclass
class Config:
    GENERAL: General = field(default_factory=General)
    TRANSLATION: Translation = field(default_factory=Translation)
    REMOTE: Remote = field(default_factory=Remote)
    OFFLINE: Offline = field(default_factory=Offline)
    LEXICON: LexiconSettings = field(default_factory=LexiconSettings)
