"""Loguru logging configuration.

Plain records go to stderr as text. Records bound with ``json_output=True``
(batch job totals, rejected input) go to stderr as one JSON object per line
instead, so log shippers can parse them without scraping messages. The
optional log file receives both.
"""

import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

from loguru import logger

if TYPE_CHECKING:
    from loguru import Logger

_LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {name}:{function}:{line} | {message}"

LOG_FILE_NAME = "pindrop.log"


def is_structured(record: dict[str, Any]) -> bool:
    """Return True for records bound with ``json_output=True``."""
    return bool(record["extra"].get("json_output", False))


def structured_logger(event: str, **fields: Any) -> "Logger":
    """Return a logger whose records are emitted to the JSON sink.

    Args:
        event: Short machine-readable event name, e.g. ``"batch_complete"``.
        **fields: Extra context serialized alongside the message.
    """
    return logger.bind(json_output=True, event=event, **fields)


def setup_logging(log_level: str = "INFO", log_dir: str | None = None) -> None:
    """Replace Loguru's default sink with the PinDrop sinks.

    Args:
        log_level: Minimum log level to emit, case-insensitive.
        log_dir: Optional directory for ``pindrop.log``, rotated every 24 hours
            and retained for 7 days.
    """
    level = log_level.upper()
    logger.remove()
    logger.add(sys.stderr, level=level, format=_LOG_FORMAT, filter=lambda record: not is_structured(record))
    logger.add(sys.stderr, level=level, serialize=True, filter=is_structured)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        logger.add(log_path / LOG_FILE_NAME, level=level, format=_LOG_FORMAT, rotation="24h", retention="7 days")
