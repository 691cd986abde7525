import logging
from typing import Optional, Union

from imagebox.config.settings import get_settings

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
LOGGER_NAME = "imagebox"


class ImageBoxStreamHandler(logging.StreamHandler):
    """Stream handler installed on the package logger by :func:`configure_logging`."""


def configure_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Configure the package logger.

    Attaches one stream handler to the ``imagebox`` logger; calling it again
    only updates the level. The level defaults to ``IMAGEBOX_LOG_LEVEL``.
    """
    if level is None:
        level = get_settings().LOG_LEVEL
    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if not any(isinstance(h, ImageBoxStreamHandler) for h in logger.handlers):
        handler = ImageBoxStreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
