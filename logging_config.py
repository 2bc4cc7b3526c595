"""
Logging Configuration
Sets up the loggers for the calculator packages.
"""
import logging
import sys
from typing import Optional

# Top-level packages/modules whose loggers we own
APP_LOGGERS = ("sizing", "data", "engine", "app_pages", "app")


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configures console (and optional file) logging for the app loggers.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
    """
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    handlers = []
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    for name in APP_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        # Streamlit re-runs the script on every interaction
        if logger.handlers:
            logger.handlers.clear()
        for h in handlers:
            logger.addHandler(h)
        logger.propagate = False

    logging.getLogger("app").debug("Logging initialized.")
