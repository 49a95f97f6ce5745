"""
Logging for the nofollow link annotator.

The package logs under "nofollow" and its children ("nofollow.annotator",
"nofollow.document", ...). Nothing is printed unless the application
configures logging itself or calls setup_logger().
"""

import logging
import sys
from typing import Optional

# Library default: swallow records until someone opts in
logging.getLogger("nofollow").addHandler(logging.NullHandler())


def setup_logger(
    name: str = "nofollow",
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    stream=None
) -> logging.Logger:
    """
    Attach console (and optionally file) output to the package logger.

    This changes process-wide logging state, so call it from the application,
    never from library code.

    Args:
        name: Logger name
        level: Logging level (default: INFO)
        log_file: Optional file path for logging
        stream: Console stream (default: sys.stderr)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Repeat calls only adjust the level of handlers added here
    configured = [h for h in logger.handlers if not isinstance(h, logging.NullHandler)]
    if configured:
        for handler in configured:
            handler.setLevel(level)
        return logger

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_module_logger(module_name: str) -> logging.Logger:
    """
    Get a child logger for a specific module.

    Args:
        module_name: Name of the module (e.g., 'annotator', 'document')

    Returns:
        Child logger instance
    """
    return logging.getLogger(f"nofollow.{module_name}")
