from __future__ import annotations

import logging
import os
from typing import Optional


LOG_LEVEL_ENV = "PROFILECHOOSER_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _known_level(name: str) -> bool:
    return isinstance(logging.getLevelName(name), int)


def setup_logging(level: Optional[str] = None, config_level: str = "INFO") -> str:
    """Send log records to stderr.

    The level is the first usable one of `level` (--log-level),
    $PROFILECHOOSER_LOG_LEVEL and `config_level` ([Logging] level).
    Unknown names are skipped with a warning. Returns the level used.
    """

    rejected = []
    effective_level = "INFO"
    for candidate in (level, os.environ.get(LOG_LEVEL_ENV), config_level):
        if not candidate:
            continue
        name = candidate.strip().upper()
        if _known_level(name):
            effective_level = name
            break
        rejected.append(candidate)

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=effective_level, format=LOG_FORMAT)
    else:
        root.setLevel(effective_level)

    for name in rejected:
        logging.getLogger(__name__).warning("ignoring unknown log level %r", name)

    return effective_level
