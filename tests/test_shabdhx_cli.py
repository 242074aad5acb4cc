from __future__ import annotations

from textwrap import dedent
from typing import TYPE_CHECKING

import pytest

import shabdhx
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def quiet_logging() -> None:
    LoggerUtils(quiet_console=True)


@pytest.fixture
def ini_path(tmp_path: Path) -> Path:
    path: Path = tmp_path / "shabdhx.ini"
    path.write_text(
        dedent(
            f"""
            [TRANSLATION]
            SOURCE_LANGUAGE = "en"
            TARGET_LANGUAGE = "ne"

            [REMOTE]
            ENDPOINT = ""

            [OFFLINE]
            STORAGE_PATH = "{(tmp_path / "cli.db").as_posix()}"
            DOWNLOAD_STEPS = 2
            DOWNLOAD_STEP_DELAY = 0
            """
        ),
        encoding="utf-8",
    )
    return path


async def run(ini_path: Path, *argv: str) -> int:
    return await shabdhx.main(["--config", str(ini_path), *argv])


def test_command_is_required(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        shabdhx.parse_arguments([])
    assert exc_info.value.code == 2
    assert "usage:" in capsys.readouterr().err


def test_text_and_file_are_exclusive() -> None:
    with pytest.raises(SystemExit):
        shabdhx.parse_arguments(["translate", "hello", "--file", "notes.txt"])


def test_parse_translate_options() -> None:
    args = shabdhx.parse_arguments(["--storage", "x.db", "translate", "hello", "--from", "ne", "--to", "en", "--offline"])
    assert args.command == "translate"
    assert args.text == "hello"
    assert (args.src_lang, args.tgt_lang, args.offline) == ("ne", "en", True)
    assert args.storage == "x.db"


async def test_missing_config_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert await run(tmp_path / "absent.ini", "pairs") == shabdhx.EXIT_FAILURE
    assert "Failed to load configuration file" in capsys.readouterr().err


async def test_pairs(ini_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert await run(ini_path, "pairs") == shabdhx.EXIT_OK
    lines: list[str] = capsys.readouterr().out.splitlines()
    assert "en-ne" in lines
    assert "ne-en" in lines


async def test_translate_with_dictionary(ini_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert await run(ini_path, "translate", "hello") == shabdhx.EXIT_OK
    captured = capsys.readouterr()
    assert captured.out == "नमस्ते\n"
    assert "(Offline (Basic Dictionary))" in captured.err


async def test_translate_from_file(ini_path: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source: Path = tmp_path / "input.txt"
    source.write_text("hello\n\nthank you", encoding="utf-8")

    assert await run(ini_path, "translate", "--file", str(source)) == shabdhx.EXIT_OK
    assert capsys.readouterr().out == "नमस्ते\n\nधन्यवाद\n"


async def test_translate_unreadable_file(ini_path: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    missing: Path = tmp_path / "missing.txt"
    assert await run(ini_path, "translate", "--file", str(missing)) == shabdhx.EXIT_FAILURE
    assert "Cannot read" in capsys.readouterr().err


async def test_translate_empty_text(ini_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert await run(ini_path, "translate", "   ") == shabdhx.EXIT_FAILURE
    assert "Nothing was translated" in capsys.readouterr().err


async def test_install_then_translate_offline(ini_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert await run(ini_path, "packs", "install", "ne") == shabdhx.EXIT_OK
    captured = capsys.readouterr()
    assert "Language pack 'ne' installed." in captured.out
    assert "100.0%" in captured.err

    assert await run(ini_path, "translate", "Thank you", "--offline") == shabdhx.EXIT_OK
    captured = capsys.readouterr()
    assert captured.out == "धन्यवाद\n"
    assert "(Offline (Downloaded Pack), confidence 100%)" in captured.err

    assert await run(ini_path, "packs", "summary") == shabdhx.EXIT_OK
    assert "Installed packs: 1/3" in capsys.readouterr().out


async def test_pack_list(ini_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert await run(ini_path, "packs", "list") == shabdhx.EXIT_OK
    out: str = capsys.readouterr().out
    assert "built-in" in out
    assert "available" in out


async def test_install_unknown_pack(ini_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert await run(ini_path, "packs", "install", "xx") == shabdhx.EXIT_FAILURE
    assert "Language pack not found: xx" in capsys.readouterr().err


async def test_remove_built_in_pack(ini_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert await run(ini_path, "packs", "remove", "en") == shabdhx.EXIT_FAILURE
    assert "not a removable language pack" in capsys.readouterr().err


async def test_remove_and_clear(ini_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert await run(ini_path, "packs", "install", "si") == shabdhx.EXIT_OK
    assert await run(ini_path, "packs", "remove", "si") == shabdhx.EXIT_OK
    assert "Language pack 'si' removed." in capsys.readouterr().out

    assert await run(ini_path, "packs", "clear") == shabdhx.EXIT_OK
    assert "All offline data cleared." in capsys.readouterr().out
