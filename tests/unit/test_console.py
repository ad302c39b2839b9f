import logging

from frontforge._console import configure_logging, console, log_fail, log_success, log_warn
from frontforge.config import LoggingConfig


def test_configure_logging_replaces_its_handler() -> None:
    configure_logging(LoggingConfig(level="normal"))
    logger = configure_logging(LoggingConfig(level="verbose"))

    handlers = [handler for handler in logger.handlers if handler.get_name() == "frontforge-rich"]
    assert len(handlers) == 1
    assert logger.level == logging.DEBUG


def test_configure_logging_quiet_and_no_color() -> None:
    logger = configure_logging(LoggingConfig(level="quiet", color=False))

    assert logger.level == logging.WARNING
    assert console.no_color is True
    configure_logging(LoggingConfig(color=True))
    assert console.no_color is False


def test_log_helpers() -> None:
    with console.capture() as capture:
        log_success("done")
        log_warn("careful")
        log_fail("broken")

    output = capture.get()
    assert "done" in output
    assert "careful" in output
    assert "broken" in output
