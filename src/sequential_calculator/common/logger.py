"""Package-wide logger."""
import logging
import os

LOG_LEVEL_ENV: str = "SEQUENTIAL_CALCULATOR_LOG_LEVEL"
LOG_FORMAT: str = "%(asctime)s | %(levelname)s | %(processName)s | %(message)s"


def get_logger(name: str = "sequential_calculator") -> logging.Logger:
    """
    Return the named logger, attaching a stderr handler on first use.

    The level is read from the ``SEQUENTIAL_CALCULATOR_LOG_LEVEL`` environment variable
    (default ``INFO``); unknown level names fall back to ``INFO``.

    :param str name: Logger name

    :return: Configured logger
    :rtype: logging.Logger
    """
    level_name: str = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.INFO
    log = logging.getLogger(name)
    if not log.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        log.addHandler(handler)
    log.setLevel(level)
    return log


logger: logging.Logger = get_logger()
