import logging

import pytest

from completion_cli.logutil import NOISY_LOGGERS, setup_logging


@pytest.fixture(autouse=True)
def restore_levels():
    saved = {name: logging.getLogger(name).level for name in ("",) + NOISY_LOGGERS}
    handlers = logging.getLogger().handlers[:]
    yield
    logging.getLogger().handlers[:] = handlers
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


def test_default_level_quiets_sdk_loggers():
    setup_logging()
    assert logging.getLogger().level == logging.INFO
    for name in NOISY_LOGGERS:
        assert logging.getLogger(name).level == logging.WARNING


def test_verbose_enables_debug_everywhere():
    setup_logging(debug=True)
    assert logging.getLogger().level == logging.DEBUG
    for name in NOISY_LOGGERS:
        assert logging.getLogger(name).level == logging.DEBUG
