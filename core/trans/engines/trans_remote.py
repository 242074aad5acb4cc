"""Remote translation engine.

Sends text to the configured translation endpoint through the RemoteDelegate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from core.trans.interface import EngineAttributes, Result, TransInterface, TranslateExceptionError
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from core.trans.interface import EngineContext
    from core.trans.remote import RemoteDelegate
    from models.config_models import Config

__all__: list[str] = ["RemoteTranslation"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class RemoteTranslation(TransInterface):
    def __init__(self) -> None:
        super().__init__()
        self.__delegate: RemoteDelegate | None = None

    @property
    def _delegate(self) -> RemoteDelegate:
        if self.__delegate is None:
            msg = "The remote engine is not initialised"
            raise TranslateExceptionError(msg)
        return self.__delegate

    @property
    def is_available(self) -> bool:
        return self.__delegate is not None and self.__delegate.is_configured

    @staticmethod
    def fetch_engine_name() -> str:
        return "remote"

    def initialize(self, config: Config, context: EngineContext) -> None:
        _ = config
        self.engine_attributes = EngineAttributes(name="remote", requires_network=True)
        if context.remote_delegate is None:
            msg = "No remote delegate was provided"
            raise TranslateExceptionError(msg)
        self.__delegate = context.remote_delegate
        if not self.__delegate.is_configured:
            logger.warning("Remote endpoint is empty; the remote engine stays unavailable")

    async def translation(self, content: str, tgt_lang: str, src_lang: str) -> Result:
        text: str = await self._delegate.translate(content, src_lang, tgt_lang)
        return Result(text=text)

    async def close(self) -> None:
        if self.__delegate is not None:
            await self.__delegate.http.close()
