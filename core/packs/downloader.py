"""Simulated language pack downloader.

Reports progress through a caller-supplied callback while it waits, then hands back
the pack dictionary. Nothing is fetched from the network.
"""

from __future__ import annotations

import asyncio
import inspect
from typing import TYPE_CHECKING, Final

from core.packs.errors import PackNotFoundError
from core.packs.tables import PACK_DICTIONARIES
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Awaitable, Callable

    from models.pack_models import LanguagePack

    ProgressCallback = Callable[[float], Awaitable[None] | None]

__all__: list[str] = ["DEFAULT_DOWNLOAD_STEP_DELAY", "DEFAULT_DOWNLOAD_STEPS", "PackDownloader"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

DEFAULT_DOWNLOAD_STEPS: Final[int] = 100
DEFAULT_DOWNLOAD_STEP_DELAY: Final[float] = 0.05


class PackDownloader:
    """Produces pack dictionaries after a simulated, cancellable download."""

    def __init__(
        self, steps: int = DEFAULT_DOWNLOAD_STEPS, step_delay: float = DEFAULT_DOWNLOAD_STEP_DELAY
    ) -> None:
        """Configure the simulated download.

        Args:
            steps (int): Number of progress increments; the callback is invoked ``steps + 1`` times.
            step_delay (float): Seconds slept before each progress report.

        Raises:
            ValueError: If ``steps`` is not positive or ``step_delay`` is negative.
        """
        if steps <= 0:
            msg: str = f"Download steps must be positive: {steps}"
            raise ValueError(msg)
        if step_delay < 0:
            msg = f"Download step delay must not be negative: {step_delay}"
            raise ValueError(msg)
        self.steps: int = steps
        self.step_delay: float = step_delay

    @staticmethod
    def load_dictionary(code: str) -> dict[str, str]:
        """Return a fresh copy of the dictionary shipped for ``code``.

        Raises:
            PackNotFoundError: If no dictionary exists for the language.
        """
        dictionary: dict[str, str] | None = PACK_DICTIONARIES.get(code)
        if dictionary is None:
            raise PackNotFoundError(code)
        return dict(dictionary)

    async def download(self, pack: LanguagePack, on_progress: ProgressCallback | None = None) -> dict[str, str]:
        """Simulate downloading ``pack``.

        Args:
            pack (LanguagePack): Pack being downloaded.
            on_progress (ProgressCallback | None): Receives increasing values from 0 to 100.
                May be a plain function or a coroutine function.

        Returns:
            dict[str, str]: The pack dictionary.
        """
        logger.info("Downloading language pack '%s' from %s", pack.code, pack.download_source)
        for step in range(self.steps + 1):
            await asyncio.sleep(self.step_delay)
            if on_progress is not None:
                result = on_progress(step / self.steps * 100)
                if inspect.isawaitable(result):
                    await result
        return self.load_dictionary(pack.code)
