"""Logging configuration helpers.

The SDK only emits records through module loggers; applications call
`configure_logging` once at startup to get a stream handler.
"""

import logging


def configure_logging(level: int = logging.INFO) -> None:
    """Configure SDK logging with a single stream handler."""
    logger = logging.getLogger("telegram_sdk")
    logger.setLevel(level)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
