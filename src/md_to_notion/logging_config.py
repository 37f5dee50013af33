"""Logging configuration: loguru setup and standard logging interception."""

from __future__ import annotations

import logging
import sys

from loguru import logger

from . import config


class InterceptHandler(logging.Handler):
    """Route standard library logging (uvicorn, fastapi) to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller frame (skip logging internals)
        frame, depth = sys._getframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def configure_logging(level: str | None = None, serialize: bool | None = None) -> None:
    """Configure loguru with a single stderr sink, intercept standard logging."""
    level = level or config.LOG_LEVEL
    serialize = config.LOG_JSON if serialize is None else serialize

    logger.remove()
    if serialize:
        logger.add(sys.stderr, format="{message}", level=level, serialize=True)
    else:
        logger.add(
            sys.stderr,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
            level=level,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
