# knowledge_chat/config/logging_setup.py - Centralized logging configuration
import logging
import sys

# Log format with timestamp, level, module, and message
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER = "knowledge_chat"


def setup_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Configure the package logger; modules log via logging.getLogger(__name__)."""
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)

    # Avoid adding handlers multiple times
    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        logger.addHandler(console_handler)

    return logger
