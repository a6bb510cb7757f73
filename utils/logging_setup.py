"""
Logging configuration for the decoder wheel command line.
"""

import logging

LOG_FORMAT = '%(asctime)s | %(levelname)s | %(name)s | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
HANDLER_MARKER = "_decoder_wheel_handler"


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """
    Install the decoder wheel stream handler on the root logger.

    Calling it again only changes the level.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR)

    Returns:
        The root logger

    Raises:
        ValueError: If level is not a known level name
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    root = logging.getLogger()
    root.setLevel(numeric_level)

    # Prevent duplicate handlers on repeated calls
    for handler in root.handlers:
        if getattr(handler, HANDLER_MARKER, False):
            handler.setLevel(numeric_level)
            return root

    handler = logging.StreamHandler()
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    setattr(handler, HANDLER_MARKER, True)
    root.addHandler(handler)

    return root
