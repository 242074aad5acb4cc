"""Translation tier selection.

TransManager owns the configured translation engines and picks one per request:

- offline packs, when the packs for the pair are installed and offline use is requested
  or the remote engine is unavailable; a pack failure falls back to the dictionary
- the remote engine, when available; a failure falls back to the dictionary
- the built-in dictionary otherwise
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Final

from core.trans.engines import (
    DictionaryTranslation,  # noqa: F401
    OfflinePackTranslation,  # noqa: F401
    RemoteTranslation,  # noqa: F401
)
from core.trans.interface import (
    NotSupportedLanguagesError,
    Result,
    TransInterface,
    TranslateExceptionError,
)
from models.translation_models import TranslationMethod
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging

    from core.trans.interface import EngineContext
    from models.config_models import Config
    from models.translation_models import TranslationInfo


__all__: list[str] = ["TransManager"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

DICTIONARY_ENGINE: Final[str] = "dictionary"
OFFLINE_PACK_ENGINE: Final[str] = "offline_pack"
REMOTE_ENGINE: Final[str] = "remote"

ADAPTIVE_LIMITER_ENABLED: bool = True
ADAPTIVE_LIMITER_BASE_COOLDOWN_SEC: float = 1.0
ADAPTIVE_LIMITER_MAX_COOLDOWN_SEC: float = 30.0
ADAPTIVE_LIMITER_RESET_SEC: float = 60.0
ADAPTIVE_LIMITER_LOG_INTERVAL_SEC: float = 5.0


class TransManager:
    """Manager for handling translation engines.

    Engines are created from ``config.TRANSLATION.ENGINE``. The dictionary engine is the
    last resort for every request and is always loaded.
    """

    def __init__(self, config: Config, context: EngineContext) -> None:
        """Initialize the TransManager.

        Args:
            config (Config): Application configuration.
            context (EngineContext): Shared services handed to each engine.
        """
        self.config: Config = config
        self.context: EngineContext = context
        self._trans_instance: dict[str, TransInterface] = {}
        self._rate_limit_error_count: int = 0
        self._rate_limit_last_error: float = 0.0
        self._rate_limit_until: float = 0.0
        self._rate_limit_last_log: float = 0.0
        logger.debug("Registered translation engines: %s", list(TransInterface.registered))

    async def initialize(self) -> None:
        """Create and initialize the configured translation engines."""
        logger.info("TransManager initialization started")

        names: list[str] = list(self.config.TRANSLATION.ENGINE)
        if DICTIONARY_ENGINE not in names:
            names.append(DICTIONARY_ENGINE)

        for _name in names:
            _cls: type[TransInterface] | None = TransInterface.registered.get(_name)
            if _cls is None:
                logger.critical("Translation class not found: '%s'", _name)
                continue
            _instance: TransInterface = _cls()
            try:
                _instance.initialize(self.config, self.context)
            except TranslateExceptionError as err:
                logger.critical("Exception in '%s' translation setup: %s", _name, err)
                continue
            self._trans_instance[_name] = _instance
            logger.info("Translation engine initialized: '%s'", _instance.engine_name)

    def fetch_engine_names(self) -> list[str]:
        """Return the names of the initialized engines, in configuration order."""
        return list(self._trans_instance)

    @property
    def is_remote_available(self) -> bool:
        """True when the remote engine is loaded, configured and not cooling down."""
        engine: TransInterface | None = self._trans_instance.get(REMOTE_ENGINE)
        return engine is not None and engine.is_available and not self._rate_limit_blocked()

    def can_use_offline_packs(self, src_lang: str, tgt_lang: str) -> bool:
        engine: TransInterface | None = self._trans_instance.get(OFFLINE_PACK_ENGINE)
        return engine is not None and engine.is_available and engine.supports_pair(src_lang, tgt_lang)

    def _rate_limit_blocked(self) -> bool:
        """Check if the remote tier is currently blocked due to rate limiting.

        Returns:
            bool: True if remote translation is blocked, False otherwise.
        """
        if not ADAPTIVE_LIMITER_ENABLED:
            return False

        now: float = time.monotonic()
        if now < self._rate_limit_until:
            if now - self._rate_limit_last_log >= ADAPTIVE_LIMITER_LOG_INTERVAL_SEC:
                remaining: float = self._rate_limit_until - now
                logger.warning("Remote translation temporarily throttled (%.1f sec remaining).", remaining)
                self._rate_limit_last_log = now
            return True
        return False

    def _register_rate_limit(self) -> None:
        """Register a rate-limit event and extend the cooldown exponentially."""
        if not ADAPTIVE_LIMITER_ENABLED:
            return

        now: float = time.monotonic()
        if now - self._rate_limit_last_error > ADAPTIVE_LIMITER_RESET_SEC:
            self._rate_limit_error_count = 0

        self._rate_limit_error_count += 1
        self._rate_limit_last_error = now

        backoff: float = ADAPTIVE_LIMITER_BASE_COOLDOWN_SEC * (2 ** (self._rate_limit_error_count - 1))
        backoff = min(backoff, ADAPTIVE_LIMITER_MAX_COOLDOWN_SEC)

        self._rate_limit_until = max(self._rate_limit_until, now + backoff)

    def _handle_translation_failure(
        self, trans_info: TranslationInfo, engine: TransInterface, err: Exception, *, context: str
    ) -> None:
        """Log a failed engine call and register rate limiting where applicable."""
        if isinstance(err, NotSupportedLanguagesError):
            logger.warning(
                "%s unsupported language pair (src: '%s', tgt: '%s'): %s",
                context,
                trans_info.src_lang,
                trans_info.tgt_lang,
                err,
            )
        elif engine.is_rate_limit_error(err):
            self._register_rate_limit()
            logger.warning("%s rate limit detected: %s", context, err)
        else:
            logger.error("%s failed: %s", context, err)

    async def _translate_with(
        self, name: str, trans_info: TranslationInfo, method: TranslationMethod, *, context: str
    ) -> bool:
        """Run one engine and record its result on ``trans_info``.

        Returns:
            bool: True on success, False if the engine is missing or raised.
        """
        engine: TransInterface | None = self._trans_instance.get(name)
        if engine is None:
            logger.error("Translation engine '%s' is not loaded", name)
            return False

        try:
            result: Result = await engine.translation(
                content=trans_info.content, tgt_lang=trans_info.tgt_lang, src_lang=trans_info.src_lang
            )
        except TranslateExceptionError as err:
            self._handle_translation_failure(trans_info, engine, err, context=context)
            return False

        trans_info.translated_text = StringUtils.ensure_str(result.text)
        trans_info.method = method
        trans_info.confidence = result.confidence
        logger.debug(
            "Translation result via %s (src: '%s', tgt: '%s'): %s",
            method,
            trans_info.src_lang,
            trans_info.tgt_lang,
            trans_info.translated_text[:50],
        )
        return True

    async def _fallback_to_dictionary(self, trans_info: TranslationInfo, method: TranslationMethod) -> bool:
        if await self._translate_with(DICTIONARY_ENGINE, trans_info, method, context="Dictionary translation"):
            return True
        trans_info.translated_text = ""
        trans_info.method = TranslationMethod.NONE
        trans_info.confidence = None
        return False

    async def perform_translation(self, trans_info: TranslationInfo, *, prefer_offline: bool = False) -> bool:
        """Translate ``trans_info.content`` with the most suitable tier.

        Args:
            trans_info (TranslationInfo): Request; receives the translated text, method and confidence.
            prefer_offline (bool): Use installed offline packs even when the remote tier is available.

        Returns:
            bool: True if some tier produced a translation, False otherwise.
        """
        logger.debug("Translation started. Parameters: %s", trans_info)

        if not trans_info.content.strip():
            logger.debug("Empty content, skipping translation.")
            trans_info.translated_text = ""
            trans_info.method = TranslationMethod.NONE
            return False

        remote_available: bool = self.is_remote_available
        if self.can_use_offline_packs(trans_info.src_lang, trans_info.tgt_lang) and (
            prefer_offline or not remote_available
        ):
            if await self._translate_with(
                OFFLINE_PACK_ENGINE, trans_info, TranslationMethod.OFFLINE_PACK, context="Offline pack translation"
            ):
                return True
            return await self._fallback_to_dictionary(trans_info, TranslationMethod.OFFLINE_DICTIONARY)

        if remote_available:
            if await self._translate_with(
                REMOTE_ENGINE, trans_info, TranslationMethod.ONLINE, context="Remote translation"
            ):
                return True
            logger.warning("Remote translation failed, falling back to the local dictionary")
            return await self._fallback_to_dictionary(trans_info, TranslationMethod.LOCAL_DICTIONARY)

        return await self._fallback_to_dictionary(trans_info, TranslationMethod.OFFLINE_DICTIONARY)

    async def shutdown_engines(self) -> None:
        """Shut down all active translation engines."""
        logger.info("Class '%s' termination process started.", self.__class__.__name__)
        for _inst in self._trans_instance.values():
            await _inst.close()
        logger.info("Class '%s' termination process completed.", self.__class__.__name__)
