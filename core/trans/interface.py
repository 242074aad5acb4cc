"""This module defines the abstract base class for translation engines and related exceptions.
It includes the Result data class for translation results and the EngineContext handed to engines
so they can reach the shared translation services.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from core.packs.manager import OfflinePackManager
    from core.resolve.engine import ResolutionEngine
    from core.trans.remote import RemoteDelegate
    from models.config_models import Config

__all__: list[str] = [
    "EngineAttributes",
    "EngineContext",
    "NotSupportedLanguagesError",
    "Result",
    "TransInterface",
    "TranslateExceptionError",
    "TranslationRateLimitError",
]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


@dataclass
class EngineAttributes:
    """Engine-specific capabilities and behavior flags.

    Attributes:
        name (str): Name of translation engine.
            As this name is not used for identification purposes, any name is acceptable.
        requires_network (bool): Whether the engine needs network access.
        reports_confidence (bool): Whether results carry a confidence score.
    """

    name: str
    requires_network: bool = False
    reports_confidence: bool = False


@dataclass
class EngineContext:
    """Shared services an engine may use.

    Attributes:
        resolution_engine (ResolutionEngine | None): Built-in dictionary resolver.
        pack_manager (OfflinePackManager | None): Offline language pack manager.
        remote_delegate (RemoteDelegate | None): Client for the remote translation endpoint.
    """

    resolution_engine: ResolutionEngine | None = None
    pack_manager: OfflinePackManager | None = None
    remote_delegate: RemoteDelegate | None = None


@dataclass
class Result:
    """Data class for translation results.

    Attributes:
        text (str | None): Translated text. None if translation fails.
        confidence (float | None): Confidence score, when the engine reports one.
        metadata (dict[str, str] | None): Engine-specific metadata.
    """

    text: str | None = None
    confidence: float | None = None
    metadata: dict[str, str] | None = None

    def __str__(self) -> str:
        if self.text is None:
            return ""
        return self.text


class TranslateExceptionError(Exception):
    """An error occurred during the translation process."""


class NotSupportedLanguagesError(TranslateExceptionError):
    """The engine cannot translate the requested language pair."""


class TranslationRateLimitError(TranslateExceptionError):
    """The translation request was rate-limited by the remote service."""


class TransInterface(ABC):
    """Abstract base class for translation engines.

    Subclasses register themselves under the name returned by ``fetch_engine_name``.

    Attributes:
        registered (ClassVar[dict[str, type[TransInterface]]]): Registered engine classes keyed by name.
    """

    registered: ClassVar[dict[str, type[TransInterface]]] = {}

    def __init_subclass__(cls, **kwargs) -> None:
        """Register the subclass under its distinguished name.

        Engines with an empty name are allowed but not registered.

        Raises:
            ValueError: If another engine already uses the name.
        """
        super().__init_subclass__(**kwargs)
        name: str = cls.fetch_engine_name()
        if not isinstance(name, str) or name == "":
            return

        if name in cls.registered:
            msg: str = f"A translation engine with the name '{name}' is already registered."
            raise ValueError(msg)

        cls.registered[name] = cls

    def __init__(self) -> None:
        self._engine_attributes: EngineAttributes | None = None

    @property
    def engine_attributes(self) -> EngineAttributes:
        if self._engine_attributes is None:
            msg = "Engine attributes have not been set."
            raise RuntimeError(msg)
        return self._engine_attributes

    @engine_attributes.setter
    def engine_attributes(self, attributes: EngineAttributes) -> None:
        if self._engine_attributes is not None:
            msg = "Engine attributes can only be set once during initialization."
            raise RuntimeError(msg)
        self._engine_attributes = attributes

    @property
    def engine_name(self) -> str:
        return self.engine_attributes.name

    def is_rate_limit_error(self, err: Exception) -> bool:
        """Check if the given exception indicates rate limiting."""
        return isinstance(err, TranslationRateLimitError)

    def supports_pair(self, src_lang: str, tgt_lang: str) -> bool:
        """Check whether the engine can currently serve the pair.

        Engines that accept any pair keep this default.
        """
        _ = src_lang, tgt_lang
        return True

    @property
    @abstractmethod
    def is_available(self) -> bool:
        """Check if the translation engine is available."""
        raise NotImplementedError

    @staticmethod
    @abstractmethod
    def fetch_engine_name() -> str:
        """Fetch the distinguished name of the translation engine.

        This method is called during class registration in __init_subclass__, so the
        implementation must be available at subclass definition time.
        """
        raise NotImplementedError

    @abstractmethod
    def initialize(self, config: Config, context: EngineContext) -> None:
        """Initialize the engine.

        Args:
            config (Config): Application configuration.
            context (EngineContext): Shared services.

        Raises:
            TranslateExceptionError: If a required service is missing.
        """
        raise NotImplementedError

    @abstractmethod
    async def translation(self, content: str, tgt_lang: str, src_lang: str) -> Result:
        """Translate input text to the target language.

        Args:
            content (str): Text to be translated.
            tgt_lang (str): Target language code.
            src_lang (str): Source language code.

        Returns:
            Result: Translation result with translated text.

        Raises:
            NotSupportedLanguagesError: If the engine cannot serve the pair.
            TranslationRateLimitError: If the request is rate-limited.
            TranslateExceptionError: If translation fails.
        """
        raise NotImplementedError

    async def close(self) -> None:
        """Release engine resources. Engines without resources keep this default."""
        return
