"""
logging_config.py
-----------------
Console (and optional file) logging for the authkeeper backend.
"""

import logging


LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level="INFO", log_file=None):
    """Setup logging configuration"""
    root = logging.getLogger("authkeeper")
    root.setLevel(level)

    if root.handlers:
        return root

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(console)

    # Also log to a file when one is configured
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(file_handler)

    return root
