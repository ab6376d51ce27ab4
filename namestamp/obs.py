import logging
import sys

from namestamp.config import NAME

FORMAT = '%(message)s'

logger = logging.getLogger(NAME)
logger.propagate = False


class BelowLevel(logging.Filter):
    def __init__(self, level):
        super().__init__()
        self.level = level

    def filter(self, record):
        return record.levelno < self.level


def configure(level=logging.INFO):
    """

    Route INFO and below to stdout and WARNING and above to stderr. Handlers are rebuilt on each call, so they bind to
    whatever `sys.stdout`/`sys.stderr` are at that moment.

    """
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    formatter = logging.Formatter(FORMAT)

    handler_out = logging.StreamHandler(sys.stdout)
    handler_out.addFilter(BelowLevel(logging.WARNING))
    handler_out.setFormatter(formatter)

    handler_err = logging.StreamHandler(sys.stderr)
    handler_err.setLevel(logging.WARNING)
    handler_err.setFormatter(formatter)

    logger.addHandler(handler_out)
    logger.addHandler(handler_err)
    logger.setLevel(level)

    return logger
