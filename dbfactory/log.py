"""
Logging setup for the command line entry point.

Library modules only create loggers; attaching handlers is left to
whoever runs the application.
"""

import logging
from collections.abc import Iterable


LOG_FORMAT = logging.Formatter(
    "%(asctime)s: %(module)s.%(funcName)s: %(levelname)s: %(message)s"
)

default_handler = logging.StreamHandler()
default_handler.setFormatter(LOG_FORMAT)


def setup_logging(
    loggers: Iterable[logging.Logger | str],
    handler: logging.Handler | None = None,
    debug: bool = False,
) -> None:
    """
    Attach a handler to each logger and set its level.

    Args:
        loggers: Logger objects or logger names
        handler: Handler to attach (default: shared stderr handler)
        debug: Log at DEBUG instead of INFO
    """
    handler = handler or default_handler
    for logger in loggers:
        if isinstance(logger, str):
            logger = logging.getLogger(logger)
        if handler not in logger.handlers:
            logger.addHandler(handler)
        logger.setLevel(logging.DEBUG if debug else logging.INFO)
