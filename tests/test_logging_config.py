import logging

import pytest

from logging_config import APP_LOGGERS, setup_logging


@pytest.fixture
def restore_loggers():
    yield
    for name in APP_LOGGERS:
        logger = logging.getLogger(name)
        for h in logger.handlers:
            h.close()
        logger.handlers.clear()
        logger.propagate = True
        logger.setLevel(logging.NOTSET)


def test_setup_logging_is_idempotent(temp_dir_fixture, restore_loggers):
    log_file = temp_dir_fixture / "app.log"
    setup_logging(level=logging.DEBUG, log_file=str(log_file))
    setup_logging(level=logging.DEBUG, log_file=str(log_file))

    logger = logging.getLogger("data")
    assert len(logger.handlers) == 2
    assert logger.level == logging.DEBUG

    logging.getLogger("data.history").info("hello from history")
    for h in logger.handlers:
        h.flush()
    assert "data.history - INFO - hello from history" in log_file.read_text(encoding="utf-8")
