"""Built-in dictionary translation engine.

Resolves text with the lexicon-based ResolutionEngine. It never fails for an unsupported
pair; the resolver returns a marked passthrough string instead.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from core.trans.interface import EngineAttributes, Result, TransInterface, TranslateExceptionError
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from core.resolve.engine import Resolution, ResolutionEngine
    from core.trans.interface import EngineContext
    from models.config_models import Config

__all__: list[str] = ["DictionaryTranslation"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class DictionaryTranslation(TransInterface):
    def __init__(self) -> None:
        super().__init__()
        self.__resolver: ResolutionEngine | None = None

    @property
    def _resolver(self) -> ResolutionEngine:
        if self.__resolver is None:
            msg = "The dictionary engine is not initialised"
            raise TranslateExceptionError(msg)
        return self.__resolver

    @property
    def is_available(self) -> bool:
        return self.__resolver is not None

    @staticmethod
    def fetch_engine_name() -> str:
        return "dictionary"

    def initialize(self, config: Config, context: EngineContext) -> None:
        _ = config
        self.engine_attributes = EngineAttributes(name="dictionary")
        if context.resolution_engine is None:
            msg = "No resolution engine was provided"
            raise TranslateExceptionError(msg)
        self.__resolver = context.resolution_engine

    async def translation(self, content: str, tgt_lang: str, src_lang: str) -> Result:
        resolution: Resolution = self._resolver.resolve_detailed(content, src_lang, tgt_lang)
        logger.debug("Dictionary route for %s-%s: %s", src_lang, tgt_lang, resolution.route)
        if resolution.is_degraded:
            logger.warning("No dictionary for %s-%s, served via route %s", src_lang, tgt_lang, resolution.route)
        return Result(text=resolution.text, metadata={"route": str(resolution.route)})
