"""Logging configuration for todoplus."""

import logging
import sys
from datetime import UTC, datetime
from pathlib import Path

LOGGER_NAME = "todoplus"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def _attach(logger: logging.Logger, handler: logging.Handler, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)


def setup_logging(verbose: int = 0, log_file: Path | None = None) -> None:
    """Configure the todoplus logger.

    Nothing is configured unless verbosity or a log file is requested.
    Calling again replaces the handlers of an earlier call.

    Args:
        verbose: Verbosity level (0=off, 1=INFO, 2+=DEBUG)
        log_file: Optional path to write logs to file
    """
    if verbose == 0 and log_file is None:
        return

    level = logging.DEBUG if verbose >= 2 else logging.INFO
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if verbose > 0:
        _attach(logger, logging.StreamHandler(sys.stderr), level)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        _attach(logger, logging.FileHandler(log_file, encoding="utf-8"), level)

    started = datetime.now(UTC).strftime("%Y-%m-%d %H:%M:%S UTC")
    logger.info("-" * 60)
    logger.info("todoplus started %s (level=%s)", started, logging.getLevelName(level))
