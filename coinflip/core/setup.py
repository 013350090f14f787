import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Optional, Union

TRACE = 5

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Add custom TRACE level
logging.addLevelName(TRACE, "TRACE")


def _trace(self, msg, *args, **kwargs):
    if self.isEnabledFor(TRACE):
        self._log(TRACE, msg, args, **kwargs)


logging.Logger.trace = _trace
logger = logging.getLogger("coinflip")


def _level_for(verbosity: int) -> int:
    level_map = {
        0: logging.CRITICAL + 1,  # Silent
        1: logging.INFO,
        2: logging.DEBUG,
        3: TRACE,
    }
    return level_map.get(min(max(verbosity, 0), 3), logging.INFO)


def _setup_file_handler(log_dir: Path, level: int) -> logging.Handler:
    """
    Setup a rotating log file handler.

    Log file: {log_dir}/coinflip.log
    Rotation policy: daily at midnight, keep 7 backups, suffix %Y-%m-%d
    """
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = TimedRotatingFileHandler(
        log_dir / "coinflip.log",
        when="midnight",
        interval=1,
        backupCount=7,
        encoding="utf-8",
    )
    handler.suffix = "%Y-%m-%d"
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
    return handler


def setup_logging(verbosity: int, log_dir: Optional[Union[str, Path]] = None):
    """
    Setup logging system.

    Console records go to stderr so they never interleave with the menu
    text written to stdout.

    Args:
        verbosity: Log level (0=SILENT, 1=INFO, 2=DEBUG, 3=TRACE)
        log_dir: Optional directory for a rotating log file
    """
    level = _level_for(verbosity)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        force=True,
    )

    if log_dir is not None:
        try:
            file_handler = _setup_file_handler(Path(log_dir), level)
            logging.getLogger().addHandler(file_handler)
            logger.info(f"Log file: {Path(log_dir) / 'coinflip.log'}")
        except OSError as e:
            logger.warning(f"Failed to create log file: {e}")

    logging.getLogger("coinflip").setLevel(level)


def info():
    """Shortcut: Set INFO level logging"""
    setup_logging(1)


def debug():
    """Shortcut: Set DEBUG level logging"""
    setup_logging(2)


def trace():
    """Shortcut: Set TRACE level logging"""
    setup_logging(3)
