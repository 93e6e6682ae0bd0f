from __future__ import annotations

import logging
from pathlib import Path

from breakout.logging_config import setup_logging


def test_file_logging_without_console(tmp_path: Path) -> None:
    log_file = tmp_path / "session.log"
    logger = setup_logging(logging.DEBUG, log_file=str(log_file), console=False)
    try:
        assert [type(h) for h in logger.handlers] == [logging.FileHandler]
        logging.getLogger("breakout.game").debug("tick 3")
        for handler in logger.handlers:
            handler.flush()
        text = log_file.read_text(encoding="utf-8")
        assert "Logging initialized." in text
        assert "breakout.game - DEBUG - tick 3" in text
    finally:
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()


def test_repeated_setup_does_not_stack_handlers() -> None:
    setup_logging(logging.INFO)
    logger = setup_logging(logging.INFO)
    try:
        assert len(logger.handlers) == 1
    finally:
        logger.handlers.clear()


def test_no_sinks_falls_back_to_null_handler() -> None:
    logger = setup_logging(logging.INFO, console=False)
    try:
        assert [type(h) for h in logger.handlers] == [logging.NullHandler]
    finally:
        logger.handlers.clear()
