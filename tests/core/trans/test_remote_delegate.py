from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from core.trans.interface import TranslateExceptionError, TranslationRateLimitError
from core.trans.remote import RemoteDelegate
from handlers.async_comm import AsyncCommError, AsyncCommInvalidContentTypeError, AsyncCommTimeoutError, AsyncHttp

ENDPOINT = "http://localhost:8000/translate"


@pytest.fixture
def http() -> MagicMock:
    http = MagicMock(spec=AsyncHttp)
    http.post = AsyncMock(return_value={"translation": "नमस्ते"})
    return http


@pytest.fixture
def delegate(http: MagicMock) -> RemoteDelegate:
    return RemoteDelegate(http, ENDPOINT)


def test_is_configured() -> None:
    http = MagicMock(spec=AsyncHttp)
    assert RemoteDelegate(http, ENDPOINT).is_configured is True
    assert RemoteDelegate(http, "   ").is_configured is False


def test_split_chunks_short_text() -> None:
    assert RemoteDelegate.split_chunks("hello") == ["hello"]
    assert RemoteDelegate.split_chunks("") == [""]


def test_split_chunks_packs_paragraphs() -> None:
    assert RemoteDelegate.split_chunks("one\n\ntwo", max_length=100) == ["one\n\ntwo"]


def test_split_chunks_keeps_paragraph_boundaries() -> None:
    assert RemoteDelegate.split_chunks("aaaa\n\nbbbb", max_length=6) == ["aaaa", "bbbb"]


def test_split_chunks_breaks_long_paragraph_at_sentences() -> None:
    text = "One two. Three four. Five."
    assert RemoteDelegate.split_chunks(text, max_length=12) == ["One two.", "Three four.", "Five."]


def test_split_chunks_oversize_sentence_is_sent_whole() -> None:
    sentence = "x" * 30
    assert RemoteDelegate.split_chunks(sentence, max_length=10) == [sentence]


def test_split_chunks_skips_blank_paragraphs() -> None:
    assert RemoteDelegate.split_chunks("aaaa\n\n   \n\nbbbb", max_length=5) == ["aaaa", "bbbb"]


async def test_translate_posts_payload(delegate: RemoteDelegate, http: MagicMock) -> None:
    assert await delegate.translate("hello", "en", "ne") == "नमस्ते"
    http.post.assert_awaited_once_with(
        url=ENDPOINT,
        data={"text": "hello", "sourceLang": "en", "targetLang": "ne"},
        total_timeout=30.0,
    )


async def test_translate_joins_chunks_with_blank_lines(http: MagicMock) -> None:
    http.post.side_effect = [{"translation": "एक"}, {"translation": "दुई"}]
    delegate = RemoteDelegate(http, ENDPOINT, max_chunk_length=5)

    assert await delegate.translate("one\n\ntwo", "en", "ne") == "एक\n\nदुई"
    assert http.post.await_count == 2


@pytest.mark.parametrize("reply", [None, {}, {"translation": 3}, "plain text"])
async def test_reply_without_translation_keeps_source(delegate: RemoteDelegate, http: MagicMock, reply: object) -> None:
    http.post.return_value = reply
    assert await delegate.translate("hello", "en", "ne") == "hello"


async def test_not_configured_raises(http: MagicMock) -> None:
    with pytest.raises(TranslateExceptionError, match="not configured"):
        await RemoteDelegate(http, "").translate("hello", "en", "ne")
    http.post.assert_not_awaited()


async def test_rate_limit(delegate: RemoteDelegate, http: MagicMock) -> None:
    http.post.side_effect = AsyncCommError("Error response from the server.", status=429)
    with pytest.raises(TranslationRateLimitError):
        await delegate.translate("hello", "en", "ne")


@pytest.mark.parametrize(
    "error",
    [
        AsyncCommError("Error response from the server.", status=500),
        AsyncCommError("The server is not running, or the port is closed."),
        AsyncCommInvalidContentTypeError("Unknown Content-Type 'text/html'"),
    ],
)
async def test_communication_failure(delegate: RemoteDelegate, http: MagicMock, error: Exception) -> None:
    http.post.side_effect = error
    with pytest.raises(TranslateExceptionError, match="Online translation failed") as exc_info:
        await delegate.translate("hello", "en", "ne")
    assert not isinstance(exc_info.value, TranslationRateLimitError)


async def test_timeout(delegate: RemoteDelegate, http: MagicMock) -> None:
    http.post.side_effect = AsyncCommTimeoutError("Timeout due to a lack of response from the server.")
    with pytest.raises(TranslateExceptionError, match="timed out"):
        await delegate.translate("hello", "en", "ne")


async def test_malformed_json_reply(monkeypatch: pytest.MonkeyPatch) -> None:
    resp = MagicMock()
    resp.headers = {"Content-Type": "application/json"}
    resp.read = AsyncMock(return_value=b"<<not json>>")
    request = MagicMock()
    request.__aenter__ = AsyncMock(return_value=resp)
    request.__aexit__ = AsyncMock(return_value=None)
    session = MagicMock()
    session.request.return_value = request
    monkeypatch.setattr(AsyncHttp, "session", property(lambda self: session))

    with pytest.raises(TranslateExceptionError, match="Online translation failed"):
        await RemoteDelegate(AsyncHttp(), ENDPOINT).translate("hello", "en", "ne")
