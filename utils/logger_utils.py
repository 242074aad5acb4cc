from __future__ import annotations

import logging
import sys
import warnings
from logging import Formatter, NullHandler, StreamHandler
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING, ClassVar, Final, Literal, Self, TextIO, TypeAlias

if TYPE_CHECKING:
    from pathlib import Path

__all__: list[str] = ["LoggerUtils"]

LevelType: TypeAlias = Literal[
    "NOTSET",
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "CRITICAL",
]

_LOG_FILE_SIZE: Final[int] = 2 * 1024 * 1024  # 2MB
_LOG_BACKUP_COUNT: Final[int] = 2

DEFAULT_LOG_LEVEL: Final[int] = logging.INFO
DEFAULT_NAMESPACE: Final[str] = "ShabdhX"

_CONSOLE_FORMAT: Final[str] = "%(levelname)s: %(message)s"
_FILE_FORMAT: Final[str] = "%(asctime)s %(levelname)-8s %(process)5d %(lineno)4d %(name)-40s\t%(funcName)s\t%(message)s"


class LoggerUtils:
    """Process-wide logging setup for the translator.

    The first instantiation attaches a console handler (WARNING and above, short format)
    and, when a file name is given, a rotating UTF-8 file handler that records everything
    from DEBUG upward. Later instantiations return the same object and change nothing.

    Attributes:
        _LOGGER_NAMESPACE (str): Prefix applied to every logger returned by ``get_logger``.
        _configured (bool): True once handlers have been attached.
        _instance (LoggerUtils | None): The singleton instance.
    """

    _LOGGER_NAMESPACE: ClassVar[str] = DEFAULT_NAMESPACE
    _configured: ClassVar[bool] = False
    _instance: ClassVar[Self | None] = None

    def __new__(cls, *args, **kwargs) -> Self:
        _ = args, kwargs
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, filename: str | Path = "", *, quiet_console: bool = False) -> None:
        """Attach handlers to the namespace root logger.

        Args:
            filename (str | Path): Log file path. An empty value disables file logging.
            quiet_console (bool): Use a NullHandler instead of writing to stderr.
        """
        if LoggerUtils._configured:
            return

        self.root_logger: logging.Logger = logging.getLogger(self._LOGGER_NAMESPACE)
        self._quiet_console: bool = bool(quiet_console) or sys.stderr is None
        # handler levels filter below this, so the logger itself stays permissive
        self.root_logger.setLevel(DEFAULT_LOG_LEVEL)

        self._attach_console_handler()
        filename = str(filename)
        if filename.strip():
            self._attach_file_handler(filename)
        else:
            self.root_logger.debug("No log file configured; file logging disabled.")

        warnings.showwarning = self._warning_to_log
        LoggerUtils._configured = True

    def _warning_to_log(
        self,
        message: Warning | str,
        category: type[Warning],
        filename: str,
        lineno: int,
        file: TextIO | None = None,
        line: str | None = None,
    ) -> None:
        """Route ``warnings.warn`` output into the log (``warnings.showwarning`` signature)."""
        _ = file, line
        self.root_logger.warning("%s:%d: %s: %s", filename, lineno, category.__name__, message)

    @classmethod
    def initialize(cls, namespace: str) -> None:
        """Change the logger namespace before the first configuration.

        Args:
            namespace (str): New namespace prefix.

        Raises:
            RuntimeError: If logging has already been configured.
        """
        if cls._configured:
            msg = "LoggerUtils is already configured. Reinitialization is not allowed."
            raise RuntimeError(msg)
        cls._LOGGER_NAMESPACE = namespace

    def _attach_console_handler(self) -> None:
        handler_type: type[logging.Handler] = NullHandler if self._quiet_console else StreamHandler
        if self._has_handler(handler_type):
            self.root_logger.warning("Console logging is already configured.")
            return

        if self._quiet_console:
            self.root_logger.addHandler(NullHandler())
            return

        console_handler: StreamHandler[TextIO] = StreamHandler(sys.stderr)
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(Formatter(_CONSOLE_FORMAT))
        self.root_logger.addHandler(console_handler)

    def _attach_file_handler(self, filename: str) -> None:
        if self._has_handler(RotatingFileHandler):
            self.root_logger.warning("File logging is already configured.")
            return

        try:
            file_handler = RotatingFileHandler(
                filename=filename,
                maxBytes=_LOG_FILE_SIZE,
                backupCount=_LOG_BACKUP_COUNT,
                encoding="utf-8",
            )
        except (FileNotFoundError, PermissionError):
            self.root_logger.error("Cannot open log file '%s'. Logging to the file is not performed.", filename)
            return

        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(Formatter(_FILE_FORMAT))
        self.root_logger.addHandler(file_handler)

    def _has_handler(self, handler_type: type) -> bool:
        # RotatingFileHandler is a StreamHandler subclass; match the exact type only
        return any(type(h) is handler_type for h in self.root_logger.handlers)

    def set_level(self, level: LevelType) -> None:
        """Set the namespace root logger level.

        Unknown names fall back to INFO and log a warning.

        Args:
            level (LevelType): Level name, case-insensitive.
        """
        level_map: dict[str, int] = logging.getLevelNamesMapping()
        try:
            self.root_logger.setLevel(level_map[level.upper()])
        except KeyError:
            self.root_logger.setLevel(DEFAULT_LOG_LEVEL)
            self.root_logger.warning("Unknown logging level '%s' specified. Logging level set to 'INFO'.", level)

    @staticmethod
    def get_logger(name: str | None = None) -> logging.Logger:
        """Return a logger below the configured namespace.

        Args:
            name (str | None): Dotted module name. None returns the namespace root logger.

        Returns:
            logging.Logger: The logger instance.
        """
        namespace: str = LoggerUtils._LOGGER_NAMESPACE
        if not namespace:
            return logging.getLogger(name or None)
        return logging.getLogger(f"{namespace}.{name}" if name else namespace)
