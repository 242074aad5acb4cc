"""Translation engine management and interfaces.

This package provides translation through pluggable engines (remote endpoint, offline
language packs and the built-in dictionary) and the manager that selects between them.
"""

from core.trans.interface import (
    EngineContext,
    NotSupportedLanguagesError,
    Result,
    TransInterface,
    TranslateExceptionError,
    TranslationRateLimitError,
)
from core.trans.manager import TransManager
from core.trans.remote import RemoteDelegate

__all__: list[str] = [
    "EngineContext",
    "NotSupportedLanguagesError",
    "RemoteDelegate",
    "Result",
    "TransInterface",
    "TransManager",
    "TranslateExceptionError",
    "TranslationRateLimitError",
]
