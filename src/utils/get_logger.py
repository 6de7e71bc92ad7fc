import logging
import os
from datetime import UTC, datetime
from logging.handlers import TimedRotatingFileHandler

import pytz

"""
Multi-logger setup
logs to console and, when a filename is given, to a rotating file
"""

TIMEZONE = pytz.timezone(os.getenv("DISCOGS_LOG_TIMEZONE", "UTC"))
LOG_DIR = os.getenv("DISCOGS_LOG_DIR", "/tmp/log/discogs")

Logger_Cache: dict[str, logging.Logger] = {}
Default_Level = logging.INFO


def set_level(level):
    global Default_Level
    Default_Level = level


class LocalTimeFormatter(logging.Formatter):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.local_tz = TIMEZONE

    def format(self, record):
        utc_dt = datetime.fromtimestamp(record.created, UTC)
        record.local_time = utc_dt.astimezone(self.local_tz).strftime("%I:%M:%S %p")
        if record.levelno == logging.WARNING:
            self._style._fmt = "%(local_time)-10s %(name)-20.20s:%(levelname)-8s =====> %(message)s"
        elif record.levelno >= logging.ERROR:
            self._style._fmt = "\n%(local_time)-10s %(name)-20.20s =====> ERROR\n%(message)s\n"
        else:
            self._style._fmt = "%(local_time)-10s %(name)-20.20s:%(levelname)-8s %(message)s"

        return super().format(record)


class LocalFileFormatter(logging.Formatter):
    def format(self, record):
        utc_dt = datetime.fromtimestamp(record.created, UTC)
        record.local_time = utc_dt.strftime("%Y-%m-%d %H:%M:%S")
        if record.levelno >= logging.WARNING:
            self._style._fmt = "%(local_time)s:%(name)s:%(levelname)s ===== %(message)s"
        else:
            self._style._fmt = "%(local_time)s:%(name)s:%(levelname)s %(message)s"

        return super().format(record)


def _file_handler(filename: str, level) -> logging.Handler:
    os.makedirs(LOG_DIR, exist_ok=True)
    fullpath = os.path.join(LOG_DIR, os.path.basename(filename))
    try:
        handler: logging.Handler = TimedRotatingFileHandler(
            fullpath, when="midnight", backupCount=30
        )
    except FileNotFoundError:
        handler = logging.FileHandler(fullpath)
    handler.setLevel(level)
    handler.setFormatter(LocalFileFormatter())
    return handler


def get_logger(name: str, level=None, filename=None) -> logging.Logger:
    """Return a cached logger with a console handler and an optional file handler."""
    if name in Logger_Cache:
        return Logger_Cache[name]

    if level is None:
        level = Default_Level
    logger = logging.getLogger(name)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(LocalTimeFormatter())
    logger.addHandler(ch)

    if filename:
        logger.addHandler(_file_handler(filename, level))

    logger.propagate = False

    Logger_Cache[name] = logger

    return logger
