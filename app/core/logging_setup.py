from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from app.core.config import AppSettings

# Root-logger attribute holding ((log file, level), handlers we installed).
_INSTALLED_ATTR = "_adapi_logging"


def configure_logging(settings: AppSettings) -> None:
    """Send application logs to a rotating file and to stderr.

    Repeated calls with the same log file and level do nothing. Different
    settings swap out the handlers a previous call installed, so an app built
    with its own ``AppSettings`` logs where those settings say.
    """
    root_logger = logging.getLogger()
    log_file = Path(settings.LOG_FILE_PATH)
    target = (str(log_file), settings.LOG_LEVEL)

    installed = getattr(root_logger, _INSTALLED_ATTR, None)
    if installed is not None:
        previous_target, previous_handlers = installed
        if previous_target == target:
            return
        for handler in previous_handlers:
            root_logger.removeHandler(handler)
            handler.close()

    log_file.parent.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s", "%Y-%m-%d %H:%M:%S")

    file_handler = RotatingFileHandler(
        filename=log_file,
        maxBytes=settings.LOG_MAX_BYTES,
        backupCount=settings.LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    stream_handler = logging.StreamHandler()
    handlers = [file_handler, stream_handler]
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    root_logger.setLevel(settings.LOG_LEVEL)
    setattr(root_logger, _INSTALLED_ATTR, (target, handlers))
