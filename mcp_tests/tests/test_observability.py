import logging

import pytest

from observability import setup_logging


@pytest.fixture
def restore_levels():
    names = ("", "apscheduler", "httpx")
    saved = {n: logging.getLogger(n).level for n in names}
    yield
    for n, lvl in saved.items():
        logging.getLogger(n).setLevel(lvl)


def test_setup_logging_applies_level(restore_levels):
    assert setup_logging("debug") == logging.DEBUG
    assert logging.getLogger().level == logging.DEBUG


def test_setup_logging_unknown_level_falls_back_to_info(restore_levels):
    assert setup_logging("chatty") == logging.INFO
    assert setup_logging("") == logging.INFO


def test_setup_logging_quiets_third_party_loggers(restore_levels):
    setup_logging("DEBUG")
    assert logging.getLogger("apscheduler").level == logging.WARNING
    assert logging.getLogger("httpx").level == logging.WARNING

    setup_logging("ERROR")
    assert logging.getLogger("apscheduler").level == logging.ERROR
    assert logging.getLogger("httpx").level == logging.ERROR
