"""Exceptions raised by the offline pack manager."""

from __future__ import annotations

__all__: list[str] = ["PackError", "PackNotFoundError", "PackNotInstalledError"]


class PackError(Exception):
    """Base class for language pack lifecycle errors."""


class PackNotFoundError(PackError):
    """No pack exists for the requested language."""

    def __init__(self, lang: str) -> None:
        self.lang: str = lang
        super().__init__(f"Language pack not found: {lang}")


class PackNotInstalledError(PackError):
    """The pack exists but has not been installed yet."""

    def __init__(self, lang: str) -> None:
        self.lang: str = lang
        super().__init__(f"Language pack not downloaded: {lang}")
