import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_handler: Optional[logging.Handler] = None


def configure_logging(level: int = logging.WARNING, stream=None) -> logging.Logger:
    """
    Send records from the ``seqr`` logger tree to stderr.

    Calling this again replaces the handler installed by the previous call
    rather than stacking a second one.
    """
    global _handler

    logger = logging.getLogger("seqr")
    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(_handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
