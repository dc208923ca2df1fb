import logging

from limcomb.logging import (
    LOGGER_NAMES,
    ColorFormatter,
    make_handler,
    setup_color_logging,
)
from limcomb.metrics import COUNTERS, log_counters, reset_counters


def test_color_formatter_restores_levelname() -> None:
    formatter = ColorFormatter("%(levelname)s %(message)s")
    record = logging.LogRecord("limcomb", logging.WARNING, __file__, 1, "hi", (), None)
    message = formatter.format(record)
    assert "WARNING" in message
    assert message.endswith(" hi")
    assert record.levelname == "WARNING"


def test_setup_color_logging() -> None:
    setup_color_logging(level=logging.DEBUG)
    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1


def test_log_counters(caplog) -> None:  # type: ignore[no-untyped-def]
    COUNTERS["test_logging"]["event"] += 1
    with caplog.at_level(logging.INFO, logger="limcomb.metrics"):
        log_counters()
    assert "test_logging.event = " in caplog.text


def test_reset_counters() -> None:
    COUNTERS["test_logging"]["event"] += 1
    reset_counters()
    assert not COUNTERS["test_logging"]["event"]


def test_make_handler_plain_when_captured() -> None:
    # pytest captures stdout, so it is not a tty.
    handler = make_handler()
    assert type(handler.formatter) is logging.Formatter
