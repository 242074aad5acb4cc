from __future__ import annotations

import pytest

from core.packs.downloader import PackDownloader
from core.packs.errors import PackNotFoundError
from core.packs.tables import PACK_DICTIONARIES
from models.pack_models import LanguagePack


@pytest.fixture
def pack() -> LanguagePack:
    return LanguagePack(code="ne", name="Nepali", native_name="नेपाली", download_source="/language-packs/nepali-en.pack")


@pytest.mark.parametrize(("steps", "delay"), [(0, 0.0), (-1, 0.0), (10, -0.1)])
def test_invalid_settings(steps: int, delay: float) -> None:
    with pytest.raises(ValueError, match="Download step"):
        PackDownloader(steps=steps, step_delay=delay)


def test_load_dictionary_returns_copy() -> None:
    dictionary = PackDownloader.load_dictionary("ne")
    dictionary["नयाँ"] = "New"
    assert "नयाँ" not in PACK_DICTIONARIES["ne"]
    assert dictionary["नमस्ते"] == "Hello"


def test_load_dictionary_unknown_language() -> None:
    with pytest.raises(PackNotFoundError, match="Language pack not found: xx") as exc_info:
        PackDownloader.load_dictionary("xx")
    assert exc_info.value.lang == "xx"


async def test_download_reports_progress_with_plain_callback(pack: LanguagePack) -> None:
    progress: list[float] = []
    downloader = PackDownloader(steps=4, step_delay=0)

    dictionary = await downloader.download(pack, progress.append)

    assert progress == [0.0, 25.0, 50.0, 75.0, 100.0]
    assert dictionary == PACK_DICTIONARIES["ne"]


async def test_download_awaits_coroutine_callback(pack: LanguagePack) -> None:
    progress: list[float] = []

    async def on_progress(value: float) -> None:
        progress.append(value)

    await PackDownloader(steps=2, step_delay=0).download(pack, on_progress)

    assert progress == [0.0, 50.0, 100.0]


async def test_download_without_callback(pack: LanguagePack) -> None:
    dictionary = await PackDownloader(steps=1, step_delay=0).download(pack)
    assert "नमस्ते" in dictionary
