"""Central logging configuration used across modules."""

from __future__ import annotations

import logging
from pathlib import Path

FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(log_level: str = "WARNING", log_file: str | Path | None = None) -> logging.Logger:
    """Configure and return the `finsheet` logger.

    `log_level` is expected to be validated already (see `Settings.validate`).
    Handlers are attached once; later calls only move the level.
    """
    logger = logging.getLogger("finsheet")
    logger.setLevel(logging.getLevelNamesMapping().get(log_level.upper(), logging.WARNING))
    logger.propagate = False
    if logger.handlers:
        return logger

    formatter = logging.Formatter(fmt=FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger
