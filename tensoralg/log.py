import logging
import sys

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "WARNING", fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """
    Configure the `tensoralg` logger.

    Attaches a StreamHandler writing to stdout with the given level and
    format. The root logger is left untouched, and repeated calls replace the
    handler instead of adding another one.
    """
    logger = logging.getLogger("tensoralg")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, "_tensoralg", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt))
    handler._tensoralg = True
    logger.addHandler(handler)
    return logger
