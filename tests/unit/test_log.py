"""Unit tests for the logging helpers."""

import logging

import pytest

from couponcode import BadWordFilter, CouponCode, OutOfEntropy
from couponcode.log import ROOT_LOGGER_NAME, configure_logging, log


@pytest.fixture
def package_logger():
    """Package logger, with handlers and level restored after the test."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_library_only_attaches_null_handler(package_logger):
    assert [type(h) for h in package_logger.handlers] == [logging.NullHandler]


def test_module_loggers_live_under_package_logger():
    from couponcode import config, export, generator

    for module in (config, export, generator):
        assert module._logger.name.startswith(ROOT_LOGGER_NAME + ".")


def test_configure_logging_adds_one_stream_handler(package_logger):
    configure_logging()
    configure_logging("debug")

    streams = [
        h for h in package_logger.handlers if type(h) is logging.StreamHandler
    ]
    assert len(streams) == 1
    assert package_logger.level == logging.DEBUG


def test_configure_logging_reads_level_from_env(package_logger, monkeypatch):
    monkeypatch.setenv("COUPONCODE_LOG_LEVEL", "warning")
    configure_logging()
    assert package_logger.level == logging.WARNING


def test_log_appends_context(caplog):
    logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.test")
    with caplog.at_level(logging.INFO, logger=ROOT_LOGGER_NAME):
        log(logger, "info", "Exported codes", rows=3, path="x.csv")
    assert "Exported codes | rows=3 path=x.csv" in caplog.text


def test_skipped_parts_are_logged_at_debug(caplog, no_bad_words):
    first_part = CouponCode(bad_words=no_bad_words).generate(b"fixed seed")[:4]
    coupons = CouponCode(bad_words=BadWordFilter([first_part]))

    with caplog.at_level(logging.DEBUG, logger=ROOT_LOGGER_NAME):
        coupons.generate(b"fixed seed")
    assert "Skipped forbidden part | part_number=1 window=1" in caplog.text


def test_running_out_of_entropy_is_logged(caplog):
    coupons = CouponCode({"parts": 11})
    with caplog.at_level(logging.WARNING, logger=ROOT_LOGGER_NAME):
        with pytest.raises(OutOfEntropy):
            coupons.generate(b"fixed seed")
    assert "Ran out of entropy" in caplog.text
