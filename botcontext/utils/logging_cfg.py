from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

from botcontext.utils.env_cfg import load_logging_env, load_path_env


def setup_logging(
    encoding="utf-8",
    level: str | None = None,
    rotation: str | None = None,
    retention: int | None = None,
    backtrace: bool = False,
    diagnose: bool = False,
) -> Path:
    """
    Set up logging for the application.

    Args:
        encoding (str, optional): The log file encoding. Defaults to "utf-8".
        level (str | None, optional): Console log level. Defaults to the ``LOG_LEVEL`` setting.
        rotation (str | None, optional): The log file rotation policy. Defaults to the ``LOG_ROTATION`` setting.
        retention (int | None, optional): The number of log files to retain. Defaults to the ``LOG_RETENTION`` setting.
        backtrace (bool, optional): Whether to include backtrace information. Defaults to False.
        diagnose (bool, optional): Whether to include diagnostic information. Defaults to False.

    Returns:
        Path: The path to the log file.
    """
    cfg = load_logging_env()
    log_path = load_path_env().logs
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logger.remove()

    logger.add(
        sink=sys.stderr,
        level=level or cfg.level,
        backtrace=backtrace,
        diagnose=diagnose,
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {name} | {message}",
    )

    logger.add(
        sink=log_path,
        rotation=rotation or cfg.rotation,
        retention=retention if retention is not None else cfg.retention,
        encoding=encoding,
        level="DEBUG",
        backtrace=True,
        diagnose=diagnose,
        enqueue=True,
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {line:<4} | {name} | {message}",
    )

    return log_path
