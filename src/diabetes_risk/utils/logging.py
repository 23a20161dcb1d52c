"""JSON-line logging shared by the pipeline, CLI and service."""

from __future__ import annotations

import json
import logging
import os
import sys
import time
from enum import Enum
from typing import Any

import numpy as np

DEFAULT_LEVEL = logging.INFO


def _jsonable(value: Any) -> Any:
    # numpy scalars and arrays show up in extraction and training events
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, Enum):
        return value.value
    return str(value)


def json_log(message: str, **extra: Any) -> str:
    """Return one log line: ``ts`` and ``msg`` plus the keyword fields, as JSON."""
    payload = {'ts': time.time(), 'msg': message, **extra}
    return json.dumps(payload, ensure_ascii=False, default=_jsonable)


def resolve_level() -> int:
    """
    Level for project loggers.

    ``DRK_DEBUG`` (any non-empty value) forces DEBUG. Otherwise ``DRK_LOG_LEVEL``
    names a standard level such as ``WARNING``; unknown names fall back to INFO.
    """
    if os.getenv('DRK_DEBUG'):
        return logging.DEBUG
    name = os.getenv('DRK_LOG_LEVEL', '').strip().upper()
    level = logging.getLevelName(name) if name else DEFAULT_LEVEL
    return level if isinstance(level, int) else DEFAULT_LEVEL


def get_logger(name: str) -> logging.Logger:
    """Logger writing bare JSON lines to stdout; configured once per name."""
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(handler)
    logger.setLevel(resolve_level())
    return logger
