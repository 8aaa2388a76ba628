"""
Logging configuration for memplot.

The library modules only create loggers under the ``memplot`` namespace;
handlers are attached here, once, by whoever drives a run (the CLI).
"""
import logging
import sys
from pathlib import Path
from typing import Optional, Union


def setup_logger(
    name: str = "memplot",
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Path] = None
) -> logging.Logger:
    """
    Configure and return a logger with consistent formatting.

    Child loggers (``memplot.monitor.process_sampler`` and friends) propagate
    into the logger configured here.

    Args:
        name: Logger name (default: the package logger)
        level: Logging level as a number or a name such as "DEBUG"
        log_file: Optional file path for log output

    Returns:
        Configured logger instance
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(fmt='[%(levelname)s] %(message)s'))
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            fmt='%(asctime)s [%(levelname)s] %(name)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger
