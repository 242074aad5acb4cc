"""Core services for ShabdhX.

This package contains the shared data container, persistent storage, the lexicon store,
dictionary resolution, offline language packs with their cache, and translation management.
"""

from core.shared_data import SharedData
from core.version import VERSION

__all__: list[str] = [
    "VERSION",
    "SharedData",
]
