"""Lexicon store.

Holds one ordered lexicon per language pair: the built-in tables plus any user lexicon
files listed in the configuration. Lookups are by exact pair key; nothing is inferred.
"""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import TYPE_CHECKING

from core.lexicon.tables import BUILTIN_LEXICONS
from models.lexicon_models import LanguagePairKey, Lexicon
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Iterable, Mapping

__all__: list[str] = ["LexiconFileError", "LexiconStore"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class LexiconFileError(Exception):
    """A lexicon file could not be read or has an unusable layout."""


class LexiconStore:
    """Registry of lexicons keyed by ``"{source}-{target}"``.

    Iteration order of pairs is registration order, built-in tables first.
    """

    def __init__(self, tables: Mapping[str, Mapping[str, str]] | None = None) -> None:
        """Build the store.

        Args:
            tables (Mapping[str, Mapping[str, str]] | None): Pair key to entry table.
                Defaults to the built-in tables.

        Raises:
            ValueError: If a table key is not a valid language pair key.
        """
        self._lexicons: dict[str, Lexicon] = {}
        for pair_key, entries in (BUILTIN_LEXICONS if tables is None else tables).items():
            self.register(pair_key, entries)
        logger.debug("Lexicon store ready with %d pairs", len(self._lexicons))

    def register(self, pair_key: str, entries: Mapping[str, str], *, merge: bool = True) -> Lexicon:
        """Add or extend the lexicon for a pair.

        Keys are NFC-normalized. With ``merge`` the entries are appended to an existing
        lexicon (existing keys are overwritten in place); otherwise the lexicon is replaced.

        Args:
            pair_key (str): Pair key such as ``"en-hi"``.
            entries (Mapping[str, str]): Source text to translation.
            merge (bool): Extend rather than replace an existing lexicon.

        Returns:
            Lexicon: The lexicon now registered for the pair.

        Raises:
            ValueError: If ``pair_key`` is malformed.
        """
        pair: LanguagePairKey = LanguagePairKey.parse(pair_key)
        normalized: dict[str, str] = {
            StringUtils.normalize_text(source): StringUtils.normalize_text(target) for source, target in entries.items()
        }
        current: Lexicon | None = self._lexicons.get(pair.key)
        lexicon: Lexicon = current.merged(normalized) if merge and current is not None else Lexicon(pair, normalized)
        self._lexicons[pair.key] = lexicon
        return lexicon

    def get(self, source_lang: str, target_lang: str) -> Lexicon | None:
        """Return the lexicon for the pair, or None when no table exists."""
        return self._lexicons.get(f"{source_lang}-{target_lang}")

    def has_pair(self, source_lang: str, target_lang: str) -> bool:
        """Check whether a direct lexicon exists for the pair."""
        return f"{source_lang}-{target_lang}" in self._lexicons

    def list_pairs(self) -> list[LanguagePairKey]:
        """Return every registered pair in registration order."""
        return [lexicon.pair for lexicon in self._lexicons.values()]

    def languages(self) -> list[str]:
        """Return every language code that appears on either side of a pair, sorted."""
        codes: set[str] = set()
        for pair in self.list_pairs():
            codes.update((pair.source, pair.target))
        return sorted(codes)

    def load_files(self, paths: Iterable[str | Path]) -> int:
        """Load several lexicon files, logging and skipping the ones that fail.

        Args:
            paths (Iterable[str | Path]): Files to load.

        Returns:
            int: Number of files loaded successfully.
        """
        loaded: int = 0
        for path in paths:
            try:
                self.load_file(path)
            except LexiconFileError as err:
                logger.error("Skipping lexicon file: %s", err)
            else:
                loaded += 1
        return loaded

    def load_file(self, path: str | Path) -> list[Lexicon]:
        """Load a user lexicon file and merge it into the store.

        Two layouts are accepted:

        - ``*.json``: an object mapping pair keys to ``{source: target}`` objects.
        - ``*.csv``: ``source,target`` rows with a header row; the pair comes from the
          file stem, for example ``en-ja.csv``.

        Args:
            path (str | Path): File to load.

        Returns:
            list[Lexicon]: The lexicons touched by the file.

        Raises:
            LexiconFileError: If the file is missing, unreadable or has an invalid layout.
        """
        path = Path(path)
        if not path.is_file():
            msg: str = f"Lexicon file not found: '{path}'"
            raise LexiconFileError(msg)

        try:
            tables: dict[str, dict[str, str]] = (
                self._read_csv(path) if path.suffix.lower() == ".csv" else self._read_json(path)
            )
            lexicons: list[Lexicon] = [self.register(pair_key, entries) for pair_key, entries in tables.items()]
        except (OSError, UnicodeDecodeError, csv.Error) as err:
            msg = f"Failed to read lexicon file '{path}': {err}"
            raise LexiconFileError(msg) from err
        except ValueError as err:
            msg = f"Invalid lexicon file '{path}': {err}"
            raise LexiconFileError(msg) from err

        logger.info("Loaded lexicon file '%s' (%s)", path, ", ".join(str(lex.pair) for lex in lexicons))
        return lexicons

    @staticmethod
    def _read_json(path: Path) -> dict[str, dict[str, str]]:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, dict):
            msg = "top-level value must be an object"
            raise ValueError(msg)  # noqa: TRY004

        tables: dict[str, dict[str, str]] = {}
        for pair_key, entries in data.items():
            if not isinstance(entries, dict) or not all(
                isinstance(k, str) and isinstance(v, str) for k, v in entries.items()
            ):
                msg = f"entries for '{pair_key}' must map strings to strings"
                raise ValueError(msg)  # noqa: TRY004
            tables[pair_key] = entries
        return tables

    @staticmethod
    def _read_csv(path: Path) -> dict[str, dict[str, str]]:
        entries: dict[str, str] = {}
        with path.open(encoding="utf-8", newline="") as f:
            reader = csv.reader(f)
            next(reader, None)  # header
            for row in reader:
                if len(row) < 2:
                    continue
                source, target = row[0].strip(), row[1].strip()
                if source and target:
                    entries[source] = target
        return {path.stem: entries}
