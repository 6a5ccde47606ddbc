import logging
import os
from datetime import datetime

from linkinfo.core.config import settings


def setup_logging():
    """
    Set up logging configuration to write logs to the console and, unless
    disabled, to a file named after the current date and time
    """
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    # Create formatter
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if settings.log_to_file:
        os.makedirs(settings.log_dir, exist_ok=True)

        # Create log file name with current date and time
        current_time = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        log_filename = os.path.join(settings.log_dir, f"linkinfo_{current_time}.log")

        file_handler = logging.FileHandler(log_filename, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

        # Also configure uvicorn access logs to use the same file
        access_logger = logging.getLogger("uvicorn.access")
        access_logger.addHandler(file_handler)
        access_logger.setLevel(level)

    # httpx logs every request at INFO; the fetcher already does
    logging.getLogger("httpx").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the specified name
    """
    return logging.getLogger(name)
