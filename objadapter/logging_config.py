from datetime import datetime
from typing import Optional
import logging
from logging.handlers import TimedRotatingFileHandler
import pathlib

from objadapter.core.config import RawConfig

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s - %(message)s"


def setup_logging(rc: Optional[RawConfig] = None) -> logging.Logger:
    """Log everything to a daily log file and warnings to the console.

    Log directory is taken from `logging.path` option, `~/.objadapter_logs`
    is used if it is not set.
    """
    log_dir = rc.get('logging', 'path') if rc else None
    if log_dir is None:
        log_dir = pathlib.Path.home() / '.objadapter_logs'
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / f"objadapter_{datetime.now():%Y-%m-%d}.log"

    logger = logging.getLogger('objadapter')
    logger.setLevel(logging.DEBUG)

    # Rotated at midnight, logs of the last 7 days are kept.
    file_handler = TimedRotatingFileHandler(
        log_path,
        when='midnight',
        interval=1,
        backupCount=7,
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
    logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    return logger
