"""Functions for logging."""

import logging

LOG_FORMAT = "%(asctime)s - mvn-coords - %(name)s - %(levelname)s - %(message)s"


def setup_logger(level: str, name: str = "mvn_coords") -> logging.Logger:
    """Configure the `mvn_coords` package logger to write to stderr.

    Calling this again replaces the handler rather than adding a second one.
    """
    level_value = getattr(logging, level.upper(), logging.INFO)
    package_logger = logging.getLogger(name)
    package_logger.setLevel(level_value)
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    return package_logger
