"""Root logger setup driven by LoggingSettings."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from profile_config.models import LoggingSettings

_HANDLER_MARK = "_profile_config_handler"


def init_logging(settings: LoggingSettings) -> logging.Logger:
    root = logging.getLogger()
    level = logging.getLevelName(settings.level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown logging level: {settings.level}")

    # Re-initialising replaces our handlers instead of stacking them.
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            root.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(settings.format)
    handlers: list[logging.Handler] = [logging.StreamHandler()]

    if settings.file.path:
        log_path = Path(settings.file.path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.handlers.TimedRotatingFileHandler(
                log_path,
                when="midnight",
                backupCount=settings.file.rotation.backup_count,
                encoding="utf-8",
            )
        )

    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_MARK, True)
        root.addHandler(handler)
    root.setLevel(level)
    return root
