"""Offline language packs.

Install lifecycle, simulated downloads and pack-based translation.
"""

from __future__ import annotations

from core.packs.downloader import PackDownloader
from core.packs.errors import PackError, PackNotFoundError, PackNotInstalledError
from core.packs.manager import OfflinePackManager

__all__: list[str] = [
    "OfflinePackManager",
    "PackDownloader",
    "PackError",
    "PackNotFoundError",
    "PackNotInstalledError",
]
