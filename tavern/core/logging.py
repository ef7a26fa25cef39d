"""
Logging configuration module for the encounter engine.

Diagnostics go through a rich handler on stderr so they never interleave
with the narration printed on stdout. A plain log file can be added to
keep the debug trail of a seeded run.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

# Parent logger of every engine module.
logger = logging.getLogger("tavern")

FILE_FORMAT = "%(asctime)s %(levelname)-7s %(message)s"


def setup_logging(level: int = logging.INFO, log_file: Path | None = None) -> None:
    """
    Sets up the rich console handler, plus a file handler when asked.

    Args:
        level (int): The logging level to set. Defaults to logging.INFO.
        log_file (Path | None): File receiving the same records, without colours.

    """
    rich_handler = RichHandler(
        console=Console(stderr=True, width=120, force_jupyter=False),
        show_time=True,
        show_level=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handlers: list[logging.Handler] = [rich_handler]
    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        handlers.append(file_handler)

    logging.basicConfig(level=level, format="%(message)s", datefmt="[%X]", handlers=handlers, force=True)


def with_context(message: str, context: dict[str, Any] | None) -> str:
    """Appends the context as key=value pairs, enums shown by name."""
    if not context:
        return message
    pairs = []
    for key, value in context.items():
        pairs.append(f"{key}={value.name if isinstance(value, Enum) else value}")
    return f"{message} [{' '.join(pairs)}]"


def log_info(message: str, context: dict[str, Any] | None = None) -> None:
    logger.info(with_context(message, context))


def log_debug(message: str, context: dict[str, Any] | None = None) -> None:
    logger.debug(with_context(message, context))
