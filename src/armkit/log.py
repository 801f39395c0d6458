"""Stderr logging for the CLI, with bearer tokens masked."""

from __future__ import annotations

import re
import sys
from typing import TYPE_CHECKING, Literal, get_args

from loguru import logger

if TYPE_CHECKING:
    import loguru

LogLevelType = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_LEVELS: tuple[str, ...] = get_args(LogLevelType)

_BEARER_TOKEN = re.compile(r"(Bearer\s+)[A-Za-z0-9\-._~+/]+=*")


def setup_logging(level: str) -> None:
    """Send library logs to stderr at *level*.

    The library itself never adds sinks; only the CLI calls this.
    """
    logger_format = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<level>{message}</level>"
    )
    if level.upper() == "DEBUG":
        logger_format += " | {name}:{line}"

    logger.remove()
    logger.enable("armkit")
    logger.add(
        sys.stderr,
        level=level.upper(),
        format=logger_format,
        diagnose=False,  # hide variable values in log backtrace
        filter=redact_tokens,
    )


def redact_tokens(record: loguru.Record) -> bool:
    record["message"] = _BEARER_TOKEN.sub(r"\1[REDACTED]", record["message"])
    return True
