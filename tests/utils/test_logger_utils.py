from __future__ import annotations

import logging

from utils.logger_utils import LoggerUtils


def test_get_logger_uses_namespace() -> None:
    logger = LoggerUtils.get_logger("core.packs")
    assert logger.name == "ShabdhX.core.packs"


def test_get_logger_without_name_returns_namespace_root() -> None:
    assert LoggerUtils.get_logger().name == "ShabdhX"


def test_logger_utils_is_singleton() -> None:
    first = LoggerUtils(quiet_console=True)
    second = LoggerUtils()
    assert first is second


def test_set_level() -> None:
    utils = LoggerUtils(quiet_console=True)
    original: int = utils.root_logger.level
    try:
        utils.set_level("debug")
        assert utils.root_logger.level == logging.DEBUG

        utils.set_level("LOUD")  # type: ignore[arg-type]
        assert utils.root_logger.level == logging.INFO
    finally:
        utils.root_logger.setLevel(original)
