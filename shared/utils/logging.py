import logging
import sys
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Client libraries that log every HTTP request at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "openai")


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
) -> None:
    """
    Configure logging for the API process.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string (optional)
    """
    log_level = getattr(logging, level.upper())
    logging.basicConfig(
        level=log_level,
        format=format_string or DEFAULT_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )

    if log_level > logging.DEBUG:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
