from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from core.kv_storage import KeyValueStorage

if TYPE_CHECKING:
    from collections.abc import Generator
    from pathlib import Path


@pytest.fixture
def storage(tmp_path: Path) -> Generator[KeyValueStorage]:
    with KeyValueStorage(tmp_path / "nested" / "kv.db") as kv:
        yield kv


def test_empty_path_is_rejected() -> None:
    with pytest.raises(RuntimeError, match="empty"):
        KeyValueStorage("  ")


def test_database_directory_is_created(tmp_path: Path, storage: KeyValueStorage) -> None:
    assert (tmp_path / "nested" / "kv.db").exists()


def test_set_get_and_default(storage: KeyValueStorage) -> None:
    assert storage.get("missing") is None
    assert storage.get("missing", "fallback") == "fallback"

    storage.set("pack_status:ne", "1")
    storage.set("pack_status:ne", "0")

    assert storage.get("pack_status:ne") == "0"


def test_delete(storage: KeyValueStorage) -> None:
    storage.set("key", "value")
    assert storage.delete("key") is True
    assert storage.delete("key") is False
    assert storage.get("key") is None


def test_keys_and_clear_by_prefix(storage: KeyValueStorage) -> None:
    storage.set("pack_status:si", "1")
    storage.set("pack_status:ne", "1")
    storage.set("pack_status%x", "1")
    storage.set("other", "x")

    assert storage.keys("pack_status:") == ["pack_status:ne", "pack_status:si"]
    assert storage.clear("pack_status:") == 2
    assert storage.keys() == ["other", "pack_status%x"]
    assert storage.clear() == 2
    assert storage.keys() == []


def test_json_round_trip_keeps_unicode(storage: KeyValueStorage) -> None:
    storage.set_json("cache", {"ne-en-नमस्ते": {"translation": "Hello"}})
    assert storage.get_json("cache") == {"ne-en-नमस्ते": {"translation": "Hello"}}
    assert "नमस्ते" in (storage.get("cache") or "")


def test_corrupt_json_is_absent(storage: KeyValueStorage) -> None:
    storage.set("cache", "{broken")
    assert storage.get_json("cache") is None
    assert storage.get_json("missing") is None


def test_values_survive_reopen(tmp_path: Path) -> None:
    path = tmp_path / "kv.db"
    with KeyValueStorage(path) as kv:
        kv.set("key", "value")

    reopened = KeyValueStorage(path)
    try:
        assert reopened.get("key") == "value"
    finally:
        reopened.close()
