import logging
import logging.handlers
import os
import sys
from datetime import datetime
from pathlib import Path

from eventdispatch import PACKAGE  # Because __package__ will return eventdispatch.lib


def get_log_directory() -> Path:
    """Get the default log directory path for the current operating system

    Returns:
        Path: The path to the log directory
    """
    user_home = Path.home()
    if sys.platform.startswith("win"):
        return user_home / "AppData" / "Local" / PACKAGE / "Logs"

    return user_home / ".config" / PACKAGE / "logs"  # macOs and Linux use the same log path


def clean_old_logs(log_dir: Path, max_files: int = 5):
    """Remove old log files, keeping only the most recent `max_files` logs

    Args:
        log_dir (Path): The directory where the log files are stored.
        max_files (int, optional): The maximum number of log files to keep. Defaults to 5.

    Raises:
        PermissionError: If there is no permission to delete log files.
    """
    log_files = sorted(log_dir.glob("*.log"), key=os.path.getmtime)
    while len(log_files) > max_files:
        old_log = log_files.pop(0)
        old_log.unlink()


class CustomFormatter(logging.Formatter):
    def format(self, record):
        record.levelname = record.levelname.ljust(8)
        return super().format(record)


def configure_logger(
    log_level: int = logging.INFO, log_dir: Path | None = None, max_log_files: int = 5
) -> Path:
    """Configures the eventdispatch logger with a log file and a console handler

    The console formatter drops the timestamp to keep output short; the log file
    keeps the full date and time. Log files are named after the date and time they
    were created, and only the newest `max_log_files` are kept.

    Args:
        log_level (int): The log level to log at. Defaults to logging.INFO.
        log_dir (Path | None): Where to store the logs. Defaults to the system default.
        max_log_files (int): Keeps only the previous (n) number of log files. Defaults to 5.

    Returns:
        Path: The log file being written to.
    """
    if log_dir is None:
        log_dir = get_log_directory()

    log_dir.mkdir(exist_ok=True, parents=True)
    clean_old_logs(log_dir=log_dir, max_files=max_log_files)

    log_filename = log_dir / datetime.now().strftime("%Y-%m-%d_%H-%M-%S.log")

    file_handler = logging.handlers.RotatingFileHandler(
        log_filename, maxBytes=10 * 1024**2, backupCount=5
    )
    stream_handler = logging.StreamHandler()

    file_handler.setFormatter(
        CustomFormatter("[%(asctime)s] %(levelname)s %(message)s", datefmt="%d.%m.%Y %H:%M:%S")
    )
    stream_handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))

    logger = logging.getLogger(PACKAGE)
    logger.handlers.clear()
    logger.addHandler(file_handler)
    logger.addHandler(stream_handler)
    logger.setLevel(log_level)
    return log_filename
