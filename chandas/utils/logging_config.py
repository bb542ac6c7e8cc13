import logging
from typing import Optional, Union

DEFAULT_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def configure_logging(level: Union[int, str] = logging.INFO, fmt: str = DEFAULT_FORMAT,
                      log_file: Optional[str] = None):
    """
    Configure logging for the Chandas system.

    Args:
        level: Logging level, as a number or a name such as "DEBUG" (default: INFO)
        fmt: Log record format
        log_file: Optional file to write logs to instead of stderr
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    # Basic logging configuration
    logging.basicConfig(
        level=level,
        format=fmt,
        datefmt='%Y-%m-%d %H:%M:%S',
        filename=log_file,
        encoding='utf-8' if log_file else None
    )

    # Set root logger level
    logging.getLogger().setLevel(level)

    return logging.getLogger(__name__)
