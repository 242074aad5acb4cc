"""ShabdhX command-line translator.

Translates text with the built-in dictionary, offline language packs or the remote
endpoint, and manages the offline packs.

Examples:
    python shabdhx.py translate "hello" --from en --to ne
    python shabdhx.py translate --file notes.txt --from ne --to en --offline
    python shabdhx.py packs install ne
    python shabdhx.py pairs
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Final, NoReturn

from config.loader import ConfigLoader, ConfigLoaderError
from core.packs.errors import PackError
from core.shared_data import SharedData
from core.version import VERSION
from models.config_models import Config
from models.translation_models import TranslationInfo
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from models.pack_models import LanguagePack, StorageSummary

logger: logging.Logger = LoggerUtils.get_logger(__name__)

CFG_FILE: Final[str] = "shabdhx.ini"

EXIT_OK: Final[int] = 0
EXIT_FAILURE: Final[int] = 1


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        print(f"\n{message}\n", file=sys.stderr)
        self.print_help(sys.stderr)
        raise SystemExit(2)


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Argument list; defaults to ``sys.argv[1:]``.

    Returns:
        argparse.Namespace: Parsed arguments.
    """
    parser = _ArgumentParser(
        prog="shabdhx",
        description="Translate between English and South Asian languages, online or offline",
        epilog='Example: python shabdhx.py translate "hello" --from en --to ne',
    )
    parser.add_argument("--config", dest="config", metavar="FILE", help=f"Configuration file (default: {CFG_FILE})")
    parser.add_argument("--debug", dest="debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--storage", dest="storage", metavar="PATH", help="Override the offline storage database")
    parser.add_argument("--endpoint", dest="endpoint", metavar="URL", help="Override the remote translation endpoint")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")

    commands = parser.add_subparsers(dest="command", metavar="COMMAND", required=True, parser_class=_ArgumentParser)

    translate = commands.add_parser("translate", help="Translate text")
    source = translate.add_mutually_exclusive_group(required=True)
    source.add_argument("text", nargs="?", help="Text to translate")
    source.add_argument("--file", dest="file", metavar="PATH", help="Read the text from a UTF-8 file")
    translate.add_argument("--from", dest="src_lang", metavar="LANG", help="Source language code")
    translate.add_argument("--to", dest="tgt_lang", metavar="LANG", help="Target language code")
    translate.add_argument("--offline", dest="offline", action="store_true", help="Prefer installed offline packs")

    commands.add_parser("pairs", help="List language pairs of the built-in dictionary")

    packs = commands.add_parser("packs", help="Manage offline language packs")
    pack_commands = packs.add_subparsers(dest="pack_command", metavar="ACTION", required=True)
    pack_commands.add_parser("list", help="List language packs")
    pack_commands.add_parser("summary", help="Show storage usage")
    pack_commands.add_parser("clear", help="Remove every pack and the translation cache")
    install = pack_commands.add_parser("install", help="Download a language pack")
    install.add_argument("lang", help="Language code")
    remove = pack_commands.add_parser("remove", help="Remove a language pack")
    remove.add_argument("lang", help="Language code")

    return parser.parse_args(argv)


def load_config(args: argparse.Namespace) -> Config:
    """Load the configuration file and apply CLI overrides.

    When no ``--config`` is given and the default file does not exist, built-in defaults
    are used.

    Raises:
        ConfigLoaderError: If configuration file cannot be loaded.
    """
    script_name: str = Path(sys.argv[0]).stem
    config_filename: str = args.config or CFG_FILE
    if args.config is None and not Path(config_filename).exists():
        logger.warning("'%s' not found; using default settings", config_filename)
        config = Config()
        config.GENERAL.SCRIPT_NAME = script_name
        config.GENERAL.DEBUG = args.debug
        if args.storage is not None:
            config.OFFLINE.STORAGE_PATH = args.storage
        if args.endpoint is not None:
            config.REMOTE.ENDPOINT = args.endpoint
        return config
    return ConfigLoader(config_filename=config_filename, script_name=script_name, **vars(args)).config


def read_source_text(args: argparse.Namespace) -> str:
    """Return the text to translate from the argument or the ``--file`` path.

    Raises:
        OSError: If the file cannot be read.
    """
    if args.file is not None:
        return Path(args.file).read_text(encoding="utf-8")
    return args.text


async def run_translate(shared_data: SharedData, args: argparse.Namespace) -> int:
    config: Config = shared_data.config
    try:
        content: str = read_source_text(args)
    except OSError as err:
        print(f"Error: Cannot read '{args.file}': {err}", file=sys.stderr)
        return EXIT_FAILURE

    trans_info = TranslationInfo(
        content=content,
        src_lang=args.src_lang or config.TRANSLATION.SOURCE_LANGUAGE,
        tgt_lang=args.tgt_lang or config.TRANSLATION.TARGET_LANGUAGE,
    )
    prefer_offline: bool = args.offline or config.TRANSLATION.PREFER_OFFLINE
    if not await shared_data.trans_manager.perform_translation(trans_info, prefer_offline=prefer_offline):
        print("Error: Nothing was translated.", file=sys.stderr)
        return EXIT_FAILURE

    print(trans_info.translated_text)
    detail: str = trans_info.method.label
    if trans_info.confidence is not None:
        detail += f", confidence {trans_info.confidence:.0%}"
    print(f"({detail})", file=sys.stderr)
    return EXIT_OK


def run_pairs(shared_data: SharedData) -> int:
    for pair in shared_data.resolution_engine.list_supported_pairs():
        print(pair)
    return EXIT_OK


def format_pack(pack: LanguagePack) -> str:
    state: str = "installed" if pack.is_installed else "available"
    if not pack.removable:
        state = "built-in"
    return f"{pack.code:<4}{pack.name} ({pack.native_name})  {pack.size_mb:.1f} MB  v{pack.version}  {state}"


async def run_packs(shared_data: SharedData, args: argparse.Namespace) -> int:
    manager = shared_data.pack_manager

    match args.pack_command:
        case "list":
            for pack in manager.list_packs():
                print(format_pack(pack))
        case "summary":
            summary: StorageSummary = manager.get_storage_summary()
            print(f"Installed packs: {summary.installed_count}/{summary.pack_count}")
            print(f"Used: {summary.used_size:.1f} MB of {summary.total_declared_size:.1f} MB")
        case "clear":
            await manager.clear_all()
            print("All offline data cleared.")
        case "install":

            def show_progress(progress: float) -> None:
                print(f"\rDownloading '{args.lang}': {progress:5.1f}%", end="", file=sys.stderr, flush=True)

            try:
                installed: bool = await manager.install_pack(args.lang, show_progress)
            except PackError as err:
                print(f"Error: {err}", file=sys.stderr)
                return EXIT_FAILURE
            print(file=sys.stderr)
            if not installed:
                print(f"Error: Failed to install '{args.lang}'.", file=sys.stderr)
                return EXIT_FAILURE
            print(f"Language pack '{args.lang}' installed.")
        case "remove":
            if not await manager.remove_pack(args.lang):
                print(f"Error: '{args.lang}' is not a removable language pack.", file=sys.stderr)
                return EXIT_FAILURE
            print(f"Language pack '{args.lang}' removed.")
    return EXIT_OK


async def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        int: Process exit status.
    """
    args: argparse.Namespace = parse_arguments(argv)
    try:
        config: Config = load_config(args)
    except ConfigLoaderError as err:
        print("\nError: Failed to load configuration file.", file=sys.stderr)
        print(f"Details: {err}", file=sys.stderr)
        return EXIT_FAILURE

    config.GENERAL.VERSION = VERSION
    logger_utils = LoggerUtils(config.GENERAL.LOG_FILE)
    if config.GENERAL.DEBUG:
        logger_utils.set_level("DEBUG")

    shared_data = SharedData(config)
    try:
        await shared_data.async_init()
        match args.command:
            case "translate":
                return await run_translate(shared_data, args)
            case "pairs":
                return run_pairs(shared_data)
            case _:
                return await run_packs(shared_data, args)
    finally:
        await shared_data.async_teardown()


def cli() -> None:
    """Console script entry point."""
    try:
        sys.exit(asyncio.run(main()))
    except (KeyboardInterrupt, EOFError):
        print("\n\nCancelled by user.", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    cli()
