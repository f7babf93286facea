"""Logging configuration using loguru.

kubepanel runs as a short-lived CLI, so log lines go to stderr without
timestamps and never mix with command output on stdout.  Stdlib logging
(httpx, httpcore, asyncio) is intercepted and routed through loguru.
"""

from __future__ import annotations

import logging
import sys

from loguru import logger

# Chatty libraries held at WARNING whatever the configured level.
QUIET_LOGGERS: tuple[str, ...] = ("httpx", "httpcore", "asyncio")

LOG_FORMAT = "<level>{level: <8}</level> | <cyan>{name}</cyan> - <level>{message}</level>"
DEBUG_LOG_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


class _InterceptHandler(logging.Handler):
    """Bridge stdlib logging records into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame = logging.currentframe()
        depth = 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(level: str = "INFO") -> None:
    """Make loguru the sole sink, writing to stderr at ``level``.

    At DEBUG the format gains a clock and the call site.
    """
    level = level.upper()

    logger.remove()
    logger.add(sys.stderr, level=level, format=DEBUG_LOG_FORMAT if level == "DEBUG" else LOG_FORMAT)

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
