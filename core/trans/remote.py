"""Client for the remote translation endpoint.

Long input is split into chunks that keep paragraph boundaries. Each chunk is posted as
``{"text", "sourceLang", "targetLang"}`` and the ``translation`` field of the reply is
used; the chunk results are joined with blank lines.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import TYPE_CHECKING, Any, Final

from core.trans.interface import TranslateExceptionError, TranslationRateLimitError
from handlers.async_comm import AsyncCommError, AsyncCommTimeoutError
from models.re_models import BLANK_LINE_PATTERN, SENTENCE_BOUNDARY_PATTERN
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from handlers.async_comm import AsyncHttp

__all__: list[str] = ["DEFAULT_MAX_CHUNK_LENGTH", "RemoteDelegate"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

DEFAULT_MAX_CHUNK_LENGTH: Final[int] = 2000
DEFAULT_TIMEOUT: Final[float] = 30.0
CHUNK_SEPARATOR: Final[str] = "\n\n"


class RemoteDelegate:
    """Translates text through the remote endpoint.

    Attributes:
        http (AsyncHttp): HTTP client.
        endpoint (str): URL of the translation endpoint; empty when not configured.
        max_chunk_length (int): Target maximum length of one request.
        timeout (float): Total timeout per request in seconds.
    """

    def __init__(
        self,
        http: AsyncHttp,
        endpoint: str,
        *,
        max_chunk_length: int = DEFAULT_MAX_CHUNK_LENGTH,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.http: AsyncHttp = http
        self.endpoint: str = endpoint.strip()
        self.max_chunk_length: int = max_chunk_length
        self.timeout: float = timeout

    @property
    def is_configured(self) -> bool:
        return bool(self.endpoint)

    @staticmethod
    def split_chunks(text: str, max_length: int = DEFAULT_MAX_CHUNK_LENGTH) -> list[str]:
        """Split ``text`` into request-sized chunks.

        Paragraphs (separated by blank lines) are packed together while they fit. A
        paragraph longer than ``max_length`` is broken after sentence terminators and its
        sentences are packed with single spaces. A single sentence longer than the limit
        is sent as is.

        Args:
            text (str): Text to split.
            max_length (int): Target maximum chunk length.

        Returns:
            list[str]: Chunks in input order; ``[text]`` when nothing non-blank remains.
        """
        chunks: list[str] = []
        current: str = ""

        def flush() -> None:
            nonlocal current
            if current.strip():
                chunks.append(current)
            current = ""

        for paragraph in BLANK_LINE_PATTERN.split(text):
            if len(paragraph) > max_length:
                for sentence in SENTENCE_BOUNDARY_PATTERN.split(paragraph):
                    joined: str = f"{current} {sentence}" if current else sentence
                    if len(joined) > max_length:
                        flush()
                        joined = sentence
                    current = joined
                flush()
                continue

            packed: str = f"{current}{CHUNK_SEPARATOR}{paragraph}" if current else paragraph
            if len(packed) > max_length:
                flush()
                current = paragraph
                flush()
            else:
                current = packed

        flush()
        return chunks or [text]

    async def translate_chunk(self, chunk: str, src_lang: str, tgt_lang: str) -> str:
        """Translate one chunk.

        Returns:
            str: The ``translation`` field of the reply, or the chunk itself when absent.

        Raises:
            TranslationRateLimitError: If the endpoint answers 429.
            TranslateExceptionError: On any other communication failure.
        """
        payload: dict[str, str] = {"text": chunk, "sourceLang": src_lang, "targetLang": tgt_lang}
        try:
            data: Any = await self.http.post(url=self.endpoint, data=payload, total_timeout=self.timeout)
        except AsyncCommTimeoutError as err:
            msg: str = f"Remote translation timed out: {err}"
            raise TranslateExceptionError(msg) from err
        except AsyncCommError as err:
            if err.status == HTTPStatus.TOO_MANY_REQUESTS:
                msg = f"Remote translation rate limited: {err}"
                raise TranslationRateLimitError(msg) from err
            msg = f"Online translation failed: {err}"
            raise TranslateExceptionError(msg) from err

        translation: Any = data.get("translation") if isinstance(data, dict) else None
        if not isinstance(translation, str):
            logger.warning("Remote reply without a translation; keeping the source chunk")
            return chunk
        return translation

    async def translate(self, text: str, src_lang: str, tgt_lang: str) -> str:
        """Translate ``text`` chunk by chunk.

        Raises:
            TranslateExceptionError: If the endpoint is not configured or any chunk fails.
        """
        if not self.is_configured:
            msg = "Remote translation endpoint is not configured."
            raise TranslateExceptionError(msg)

        chunks: list[str] = self.split_chunks(text, self.max_chunk_length)
        logger.debug("Remote translation %s-%s in %d chunk(s)", src_lang, tgt_lang, len(chunks))
        results: list[str] = [await self.translate_chunk(chunk, src_lang, tgt_lang) for chunk in chunks]
        return CHUNK_SEPARATOR.join(results)
