"""Lexicon store and built-in translation tables."""

from core.lexicon.store import LexiconFileError, LexiconStore
from core.lexicon.tables import BUILTIN_LEXICONS

__all__: list[str] = ["BUILTIN_LEXICONS", "LexiconFileError", "LexiconStore"]
