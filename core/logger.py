"""
Kennel Report logging setup.

The engine itself only calls get_logger(); handlers are attached by the
process that hosts it (the web service or the CLI).

Handlers installed by setup_logging():
- console (stderr): WARNING+ by default
- <logs_dir>/service.log: routine operations (INFO+), only with log_to_file
- <logs_dir>/error.log: stack traces (ERROR+), only with log_to_file

KENNEL_REPORT_LOG_DIR overrides the log directory.
"""
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

DEFAULT_LOGS_DIR = Path(__file__).parent.parent / "logs"

MAX_BYTES = 5 * 1024 * 1024  # 5MB
BACKUP_COUNT = 3

ROOT_LOGGER_NAME = "kennel_report"

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
CONSOLE_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def resolve_logs_dir(logs_dir: Optional[Path] = None) -> Path:
    """Explicit argument > KENNEL_REPORT_LOG_DIR > <project>/logs"""
    if logs_dir:
        return Path(logs_dir)
    env_dir = os.getenv("KENNEL_REPORT_LOG_DIR")
    if env_dir:
        return Path(env_dir)
    return DEFAULT_LOGS_DIR


def _rotating_handler(path: Path, level: int) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        path,
        maxBytes=MAX_BYTES,
        backupCount=BACKUP_COUNT,
        encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def setup_logging(
    log_level: int = logging.INFO,
    console_level: int = logging.WARNING,
    logs_dir: Optional[Path] = None,
    log_to_file: bool = True,
) -> logging.Logger:
    """
    Attach handlers to the kennel_report logger.

    Args:
        log_level: level of service.log (default INFO)
        console_level: stderr level (default WARNING)
        logs_dir: directory for the log files, see resolve_logs_dir()
        log_to_file: False keeps everything on stderr and touches no files

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)  # handlers do the filtering

    # Repeated setup (uvicorn reload, CLI tests) must not stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    if log_to_file:
        target = resolve_logs_dir(logs_dir)
        target.mkdir(parents=True, exist_ok=True)
        logger.addHandler(_rotating_handler(target / "service.log", log_level))
        logger.addHandler(_rotating_handler(target / "error.log", logging.ERROR))

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Return a module logger.

    Args:
        name: module name, e.g. "classifiers", "report_generator"
    """
    if name:
        return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
    return logging.getLogger(ROOT_LOGGER_NAME)
