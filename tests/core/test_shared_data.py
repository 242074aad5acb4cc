from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from core.shared_data import SharedData
from core.trans.manager import TransManager
from models.config_models import Config
from models.lexicon_models import LanguagePairKey

if TYPE_CHECKING:
    from pathlib import Path


def _config(tmp_path: Path) -> Config:
    config = Config()
    config.OFFLINE.STORAGE_PATH = str(tmp_path / "shared.db")
    config.OFFLINE.DOWNLOAD_STEPS = 1
    config.OFFLINE.DOWNLOAD_STEP_DELAY = 0
    return config


async def test_async_init_builds_services(tmp_path: Path) -> None:
    shared_data = SharedData(_config(tmp_path))
    await shared_data.async_init()
    try:
        assert shared_data.trans_manager.fetch_engine_names() == ["remote", "offline_pack", "dictionary"]
        assert shared_data.trans_manager.is_remote_available is False
        assert shared_data.remote_delegate.is_configured is False
        assert shared_data.resolution_engine.lexicon_store is shared_data.lexicon_store
        assert shared_data.pack_manager.downloader.steps == 1
        assert (tmp_path / "shared.db").exists()
    finally:
        await shared_data.async_teardown()


async def test_extra_lexicon_files_are_loaded(tmp_path: Path) -> None:
    extra: Path = tmp_path / "extra.json"
    extra.write_text(json.dumps({"en-ja": {"hello": "konnichiwa"}}), encoding="utf-8")
    config = _config(tmp_path)
    config.LEXICON.EXTRA_FILES = [str(extra), str(tmp_path / "missing.json")]

    shared_data = SharedData(config)
    await shared_data.async_init()
    try:
        assert LanguagePairKey("en", "ja") in shared_data.lexicon_store.list_pairs()
        assert shared_data.resolution_engine.resolve("hello", "en", "ja") == "konnichiwa"
    finally:
        await shared_data.async_teardown()


async def test_pack_state_survives_restart(tmp_path: Path) -> None:
    config = _config(tmp_path)

    first = SharedData(config)
    await first.async_init()
    try:
        assert await first.pack_manager.install_pack("ne")
    finally:
        await first.async_teardown()

    second = SharedData(config)
    await second.async_init()
    try:
        assert second.pack_manager.is_pack_installed("ne")
        assert second.trans_manager.can_use_offline_packs("ne", "en")
    finally:
        await second.async_teardown()


async def test_teardown_before_init(tmp_path: Path) -> None:
    shared_data = SharedData(_config(tmp_path))

    await shared_data.async_teardown()

    with pytest.raises(RuntimeError, match="not available"):
        _ = shared_data.trans_manager


async def test_teardown_after_failed_init(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    async def failing_initialize(self: TransManager) -> None:
        msg = "engine setup failed"
        raise RuntimeError(msg)

    monkeypatch.setattr(TransManager, "initialize", failing_initialize)
    shared_data = SharedData(_config(tmp_path))

    with pytest.raises(RuntimeError, match="engine setup failed"):
        await shared_data.async_init()
    await shared_data.async_teardown()

    assert shared_data.storage._connection is None
    assert shared_data.remote_delegate.http.is_open is False
