import logging
import os
from logging.handlers import RotatingFileHandler

from settings_service import SettingsService

LOGS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "logs")
LOG_FORMAT = ("%(asctime)s %(levelname)-8s "
              "[%(filename)s:%(lineno)d %(funcName)s()] "
              "%(message)s")


def _resolve_log_path(log_file: str) -> str:
    # Absolute paths are kept, anything else lands in ./logs/ by basename
    os.makedirs(LOGS_DIR, exist_ok=True)
    if os.path.isabs(log_file):
        return log_file
    return os.path.join(LOGS_DIR, os.path.basename(log_file))


def setup_logging(name="facade_demo", log_file=None, level=None, max_bytes=None, backup_count=None):
    """Set up a named logger with a rotating file handler and a stream handler.

    Arguments left as None fall back to the [env] and [logging] sections of
    settings.toml. Log files are routed to the project's ./logs/ directory
    unless an absolute path is provided (e.g. tests using tmpdir).

    Args:
        name: The name of the logger.
        log_file: The name of the log file.
        level: The level of the logger, as an int or a level name.
        max_bytes: The maximum size of the log file.
        backup_count: The number of backup log files.

    Returns:
        logger: The logger object.

    Example usage:
    from logging_config import setup_logging
    logger = setup_logging(__name__, log_file="subsystems.log")
    """
    settings = SettingsService()
    log_file = log_file or settings.log_file
    level = level if level is not None else settings.log_level
    max_bytes = max_bytes if max_bytes is not None else settings.max_bytes
    backup_count = backup_count if backup_count is not None else settings.backup_count

    logger = logging.getLogger(name)
    # Clear existing handlers to avoid duplicate logs
    if logger.hasHandlers():
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)

    file_handler = RotatingFileHandler(
        _resolve_log_path(log_file), maxBytes=max_bytes, backupCount=backup_count, encoding='utf-8'
    )
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    # stderr, so program output on stdout stays clean
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
