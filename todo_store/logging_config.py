"""Process-wide logging setup."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger once at process entry.

    Args:
        level: Logging level name (e.g. 'INFO', 'DEBUG').
    """
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("todo_store").setLevel(level)


__all__ = ["LOG_FORMAT", "configure_logging"]
