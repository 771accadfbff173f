import logging
from typing import Optional, TextIO

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


def setup_logging(level: int = logging.INFO, stream: Optional[TextIO] = None) -> logging.Handler:
    """
    Send the package's log records to a console stream.

    Only the ``sparse_decimal`` logger is configured; the root logger is left alone.

    Args:
        level: Logging level (e.g., logging.INFO, logging.DEBUG).
        stream: Stream to write to. If None, sys.stderr is used.

    Returns:
        The attached handler, so callers can remove it again.
    """
    logger = logging.getLogger('sparse_decimal')
    logger.setLevel(level)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    logger.addHandler(handler)
    return handler
