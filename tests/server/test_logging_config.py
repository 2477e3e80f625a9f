"""Tests for the colored logging setup."""

import contextlib
import logging
from collections.abc import Iterator

from colorlog import ColoredFormatter

from server.logging_config import setup_logging


@contextlib.contextmanager
def _bare_root_logger() -> Iterator[logging.Logger]:
    # pytest attaches its capture handlers around the test body, so the root
    # logger is emptied here rather than in a fixture.
    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level
    root_logger.handlers = []
    try:
        yield root_logger
    finally:
        root_logger.handlers = saved_handlers
        root_logger.setLevel(saved_level)


def _colored_handlers(root_logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in root_logger.handlers if isinstance(h.formatter, ColoredFormatter)]


def test_installs_colored_handler() -> None:
    with _bare_root_logger() as root_logger:
        setup_logging(logging.DEBUG)
        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 1
        assert len(_colored_handlers(root_logger)) == 1


def test_does_not_add_second_handler() -> None:
    with _bare_root_logger() as root_logger:
        setup_logging()
        setup_logging()
        assert len(_colored_handlers(root_logger)) == 1


def test_keeps_existing_handlers() -> None:
    with _bare_root_logger() as root_logger:
        existing = logging.NullHandler()
        root_logger.addHandler(existing)
        setup_logging()
        assert root_logger.handlers == [existing]
