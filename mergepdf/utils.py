"""Utility helpers shared by mergepdf modules."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Union

PathLike = Union[str, Path]

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    return logger


def absolute_path(path: PathLike) -> Path:
    """Return *path* made absolute against the current working directory.

    Symlinks are left untouched so the merged file list shows paths the
    way the user typed or browsed them.
    """

    return Path(os.path.abspath(os.fspath(path)))


def ensure_iterable(paths: Iterable[PathLike]) -> list[Path]:
    """Convert an iterable of paths to absolute :class:`Path` objects."""

    return [absolute_path(path) for path in paths]


__all__ = ["PathLike", "LOG_FORMAT", "get_logger", "absolute_path", "ensure_iterable"]
