"""
Unit tests for command line logging setup.

Run with: pytest tests/test_log.py -v
"""

import logging

from dbfactory.log import default_handler, setup_logging


class TestSetupLogging:
    """Tests for attaching handlers to loggers."""

    def test_attaches_handler_once(self):
        logger = logging.getLogger('dbfactory.tests.once')
        handler = logging.NullHandler()

        setup_logging([logger], handler)
        setup_logging([logger], handler)

        assert logger.handlers.count(handler) == 1
        logger.removeHandler(handler)

    def test_accepts_logger_names(self):
        handler = logging.NullHandler()

        setup_logging(['dbfactory.tests.named'], handler, debug=True)

        logger = logging.getLogger('dbfactory.tests.named')
        assert handler in logger.handlers
        assert logger.level == logging.DEBUG
        logger.removeHandler(handler)

    def test_defaults_to_shared_handler_at_info(self):
        logger = logging.getLogger('dbfactory.tests.default')

        setup_logging([logger])

        assert default_handler in logger.handlers
        assert logger.level == logging.INFO
        logger.removeHandler(default_handler)
