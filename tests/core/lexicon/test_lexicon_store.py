from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from core.lexicon.store import LexiconFileError, LexiconStore
from models.lexicon_models import LanguagePairKey

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def store() -> LexiconStore:
    return LexiconStore()


def test_builtin_pairs_are_registered(store: LexiconStore) -> None:
    pairs = store.list_pairs()
    assert pairs[0] == LanguagePairKey("en", "hi")
    assert LanguagePairKey("ne", "en") in pairs
    assert store.has_pair("fr", "en")
    assert not store.has_pair("fr", "de")
    assert store.get("en", "xx") is None


def test_languages_cover_both_sides(store: LexiconStore) -> None:
    languages = store.languages()
    assert "en" in languages
    assert "ne" in languages
    assert languages == sorted(languages)


def test_custom_tables_replace_builtins() -> None:
    store = LexiconStore({"en-xx": {"hello": "hullo"}})
    assert [str(pair) for pair in store.list_pairs()] == ["en-xx"]
    assert store.get("en", "xx").lookup("hello") == "hullo"  # type: ignore[union-attr]


def test_register_rejects_malformed_key(store: LexiconStore) -> None:
    with pytest.raises(ValueError, match="Invalid language pair key"):
        store.register("english-hindi", {"a": "b"})


def test_register_merges_by_default(store: LexiconStore) -> None:
    store.register("en-hi", {"hello": "हेलो", "laptop": "लैपटॉप"})
    lexicon = store.get("en", "hi")
    assert lexicon is not None
    assert lexicon.lookup("hello") == "हेलो"
    assert lexicon.lookup("laptop") == "लैपटॉप"
    assert lexicon.lookup("water") == "पानी"
    assert next(iter(lexicon)) == "hello"


def test_register_without_merge_replaces(store: LexiconStore) -> None:
    store.register("en-hi", {"laptop": "लैपटॉप"}, merge=False)
    lexicon = store.get("en", "hi")
    assert lexicon is not None
    assert list(lexicon) == ["laptop"]


def test_register_normalizes_nfc() -> None:
    store = LexiconStore({})
    store.register("fr-en", {"cafe\u0301": "coffee"})
    assert store.get("fr", "en").lookup("caf\u00e9") == "coffee"  # type: ignore[union-attr]


def test_load_json_file(store: LexiconStore, tmp_path: Path) -> None:
    path = tmp_path / "extra.json"
    path.write_text(json.dumps({"en-ne": {"laptop": "ल्यापटप"}, "en-xx": {"hi": "hoi"}}), encoding="utf-8")

    lexicons = store.load_file(path)

    assert [str(lex.pair) for lex in lexicons] == ["en-ne", "en-xx"]
    assert store.get("en", "ne").lookup("laptop") == "ल्यापटप"  # type: ignore[union-attr]
    assert store.has_pair("en", "xx")


def test_load_csv_file_uses_stem_as_pair(store: LexiconStore, tmp_path: Path) -> None:
    path = tmp_path / "en-ja.csv"
    path.write_text("source,target\ncomputer,コンピュータ\n,skipped\nshort\n", encoding="utf-8")

    store.load_file(path)

    lexicon = store.get("en", "ja")
    assert lexicon is not None
    assert lexicon.lookup("computer") == "コンピュータ"
    assert lexicon.lookup("hello") == "こんにちは"


def test_load_file_missing(store: LexiconStore, tmp_path: Path) -> None:
    with pytest.raises(LexiconFileError, match="not found"):
        store.load_file(tmp_path / "missing.json")


@pytest.mark.parametrize(
    "content",
    [
        "[1, 2, 3]",
        '{"en-hi": ["hello"]}',
        '{"en-hi": {"hello": 1}}',
        '{"english": {"hello": "x"}}',
    ],
)
def test_load_json_invalid_layout(store: LexiconStore, tmp_path: Path, content: str) -> None:
    path = tmp_path / "bad.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(LexiconFileError, match="Invalid lexicon file"):
        store.load_file(path)


def test_load_json_syntax_error(store: LexiconStore, tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(LexiconFileError):
        store.load_file(path)


def test_load_files_skips_failures(store: LexiconStore, tmp_path: Path) -> None:
    good = tmp_path / "good.json"
    good.write_text('{"en-hi": {"laptop": "लैपटॉप"}}', encoding="utf-8")

    loaded = store.load_files([tmp_path / "missing.json", good])

    assert loaded == 1
    assert store.get("en", "hi").lookup("laptop") == "लैपटॉप"  # type: ignore[union-attr]
