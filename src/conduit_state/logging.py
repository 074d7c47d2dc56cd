from __future__ import annotations

import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from conduit_state.config.models import LoggingSettings

_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# Handlers installed by init_logging; replaced on re-init, others are left alone.
_installed: list[logging.Handler] = []


def init_logging(settings: LoggingSettings) -> None:
    """Configure the root logger: console always, daily-rotated file when enabled."""
    level = logging.getLevelName(settings.level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown logging level: {settings.level}")

    root = logging.getLogger()
    while _installed:
        handler = _installed.pop()
        root.removeHandler(handler)
        handler.close()
    root.setLevel(level)

    formatter = logging.Formatter(_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    _installed.append(console)

    if settings.file.enabled:
        log_path = Path(settings.file.path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            log_path,
            when="midnight",
            backupCount=settings.file.rotation.backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        _installed.append(file_handler)

    for handler in _installed:
        root.addHandler(handler)
