"""Central logging configuration utilities.

A single composition-root driven `configure_logging` wires separate
stdout/stderr sinks on the root logger. Library code never mutates global
logging; it only emits via `LoggingPort` or standard module loggers.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

DEFAULT_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def coerce_level(level: int | str | None) -> int:
    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    key = str(level).upper().strip()
    # Python 3.11 mapping helper
    mapping_getter = getattr(logging, "getLevelNamesMapping", None)
    if callable(mapping_getter):
        mapping = mapping_getter()
        if isinstance(mapping, dict) and key in mapping:
            return mapping[key]
    return logging._nameToLevel.get(key, logging.INFO)


class _MaxLevelFilter(logging.Filter):
    def __init__(self, max_level: int):
        super().__init__()
        self.max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno <= self.max_level


def configure_logging(level: int | str | None = None, fmt: Optional[str] = None) -> None:
    """Configure root logger with separate stdout/stderr sinks.

    DEBUG and INFO records go to stdout, WARNING and above to stderr.
    Existing root handlers are removed so repeated calls do not duplicate
    output.
    """
    numeric_level = coerce_level(level)
    formatter = logging.Formatter(fmt or DEFAULT_FORMAT)

    root = logging.getLogger()
    root.setLevel(numeric_level)

    for h in list(root.handlers):
        root.removeHandler(h)

    stdout_handler = logging.StreamHandler(stream=sys.stdout)
    stdout_handler.setLevel(logging.DEBUG)
    stdout_handler.addFilter(_MaxLevelFilter(logging.INFO))
    stdout_handler.setFormatter(formatter)

    stderr_handler = logging.StreamHandler(stream=sys.stderr)
    stderr_handler.setLevel(logging.WARNING)
    stderr_handler.setFormatter(formatter)

    root.addHandler(stdout_handler)
    root.addHandler(stderr_handler)

    logging.getLogger("linkweaver").debug("Logging configured level=%s", numeric_level)
