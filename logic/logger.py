import logging
import os
from typing import Optional

from .config import GameConfig


def _resolve_level(level: Optional[str]) -> int:
    level_str = (level or os.getenv(GameConfig.LOG_LEVEL_ENV, GameConfig.DEFAULT_LOG_LEVEL)).upper()
    return getattr(logging, level_str, logging.WARNING)


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        if level is not None:
            logger.setLevel(_resolve_level(level))
        return logger

    logger.setLevel(_resolve_level(level))
    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False
    return logger
