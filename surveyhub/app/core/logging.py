"""Setting up the application file logger.

Returns a lazily initialized logger that writes to
`{logging_dir}/{filename}`, one line per record.
"""
import os
from logging import FileHandler, Formatter, getLogger
from surveyhub.app.core.config import settings

LOGGER_NAME = "surveyhub"


def get_logs_writer_logger(logging_dir=settings.LOG_PATH, filename=settings.LOG_FILE):
    logger = getLogger(LOGGER_NAME)

    if logger.handlers:
        return logger

    os.makedirs(logging_dir, exist_ok=True)
    log_path = os.path.join(logging_dir, filename)

    logger.setLevel(settings.LOG_LEVEL.upper())
    logger.propagate = False

    handler = FileHandler(log_path, mode="a", encoding="utf-8", delay=True)
    handler.setFormatter(Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)

    return logger
