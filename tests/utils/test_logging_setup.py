import logging

from rich.logging import RichHandler

from awssize.utils.logging import setup_logging


def test_setup_logging_defaults_to_warning():
    setup_logging()
    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert any(isinstance(h, RichHandler) for h in root.handlers)


def test_setup_logging_verbose():
    setup_logging(verbose=True)
    assert logging.getLogger().level == logging.DEBUG


def test_setup_logging_leaves_timestamps_to_rich():
    setup_logging()
    handler = logging.getLogger().handlers[0]
    assert isinstance(handler, RichHandler)
    assert handler.formatter.datefmt is None
