"""Logging set-up shared by every game module.

Records go to a log file under ``LOG_DIR`` and, unless disabled, to the
console. Modules only ever ask for a named logger; the handlers live on the
root logger so a single call here reconfigures the whole game.
"""

import logging
import os
from typing import Optional

from config.config import (
    LOG_CONSOLE_FORMAT,
    LOG_DIR,
    LOG_FILE_FORMAT,
    LOG_FILE_NAME,
    LOG_LEVEL,
)


def setup_logger(
    log_level: int = LOG_LEVEL, log_dir: str = LOG_DIR, console: bool = True
) -> logging.Logger:
    """Attach the game's handlers to the root logger.

    Calling this again swaps the old handlers out, so the level or target
    directory can change at runtime (the ``--log-level`` flag does this).

    Args:
        log_level: Minimum level recorded by both handlers
        log_dir: Directory that receives ``LOG_FILE_NAME``
        console: Whether records are echoed to stderr as well

    Returns:
        logging.Logger: The configured root logger.
    """
    os.makedirs(log_dir, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Drop and close what a previous call installed
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    handlers = [logging.FileHandler(os.path.join(log_dir, LOG_FILE_NAME))]
    handlers[0].setFormatter(logging.Formatter(LOG_FILE_FORMAT))

    if console:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(logging.Formatter(LOG_CONSOLE_FORMAT))
        handlers.append(stream_handler)

    for handler in handlers:
        handler.setLevel(log_level)
        root_logger.addHandler(handler)

    return root_logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the logger for ``name``, usually a module's ``__name__``."""
    return logging.getLogger(name)


# Configure with the defaults as soon as any module needs a logger
setup_logger()
