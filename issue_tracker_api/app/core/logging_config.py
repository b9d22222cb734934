"""
Logging configuration for the API process.

``setup_logging`` is called by every ``create_app``.  It always applies
the configured level to the root logger, and attaches the console
handler and the optional ``LOG_FILE`` handler at most once each, so
building several apps in one process (tests, reloads) neither
duplicates output nor ignores a later level change.
"""

import logging
from pathlib import Path

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER_NAME = "issue-tracker-console"


def _file_handler_name(path: Path) -> str:
    return f"issue-tracker-file:{path}"


def setup_logging(app_settings: Settings) -> logging.Logger:
    """Configure the root logger from ``app_settings``.

    Unknown level names fall back to ``INFO``.  Returns the package
    logger.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, app_settings.log_level.upper(), logging.INFO))

    installed = {handler.get_name() for handler in root.handlers}
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if CONSOLE_HANDLER_NAME not in installed:
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if app_settings.log_file:
        log_path = Path(app_settings.log_file).resolve()
        name = _file_handler_name(log_path)
        if name not in installed:
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.set_name(name)
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)

    return logging.getLogger("issue_tracker_api")
