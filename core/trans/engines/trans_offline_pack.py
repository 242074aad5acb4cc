"""Offline language pack translation engine.

Translates with the installed offline packs and reports their confidence score.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from core.packs.errors import PackError
from core.trans.interface import (
    EngineAttributes,
    NotSupportedLanguagesError,
    Result,
    TransInterface,
    TranslateExceptionError,
)
from models.lexicon_models import PIVOT_LANGUAGE
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from core.packs.manager import OfflinePackManager
    from core.trans.interface import EngineContext
    from models.config_models import Config
    from models.pack_models import PackTranslation

__all__: list[str] = ["OfflinePackTranslation"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class OfflinePackTranslation(TransInterface):
    def __init__(self) -> None:
        super().__init__()
        self.__packs: OfflinePackManager | None = None

    @property
    def _packs(self) -> OfflinePackManager:
        if self.__packs is None:
            msg = "The offline pack engine is not initialised"
            raise TranslateExceptionError(msg)
        return self.__packs

    @property
    def is_available(self) -> bool:
        return self.__packs is not None

    @staticmethod
    def fetch_engine_name() -> str:
        return "offline_pack"

    def initialize(self, config: Config, context: EngineContext) -> None:
        _ = config
        self.engine_attributes = EngineAttributes(name="offline_pack", reports_confidence=True)
        if context.pack_manager is None:
            msg = "No offline pack manager was provided"
            raise TranslateExceptionError(msg)
        self.__packs = context.pack_manager

    def supports_pair(self, src_lang: str, tgt_lang: str) -> bool:
        """True when the source pack is installed and the target is English or also installed."""
        return self._packs.is_pack_installed(src_lang) and (
            tgt_lang == PIVOT_LANGUAGE or self._packs.is_pack_installed(tgt_lang)
        )

    async def translation(self, content: str, tgt_lang: str, src_lang: str) -> Result:
        try:
            translated: PackTranslation = await self._packs.translate(content, src_lang, tgt_lang)
        except PackError as err:
            msg: str = f"Offline pack translation unavailable: {err}"
            raise NotSupportedLanguagesError(msg) from err

        metadata: dict[str, str] = {"from_cache": str(translated.from_cache).lower()}
        return Result(text=translated.text, confidence=translated.confidence, metadata=metadata)
