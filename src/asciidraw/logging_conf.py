"""Logging setup for the command-line front-end. Library modules only create loggers."""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logging(verbosity: int = 0) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)
