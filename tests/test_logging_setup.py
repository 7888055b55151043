import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import logging

import pytest

from simple_notes.logging_setup import SESSION_ID, setup_logging
from simple_notes.settings import APP_NAME


@pytest.fixture
def app_logger():
    logger = logging.getLogger(APP_NAME)
    yield logger
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    logger.propagate = True


def test_setup_logging_writes_session(tmp_path, app_logger):
    log_path = tmp_path / "logs" / "notes.log"
    log = setup_logging(log_path=log_path)
    logging.getLogger(f"{APP_NAME}.store").warning("child message")
    log.info("adapter message")
    for h in app_logger.handlers:
        h.flush()

    text = log_path.read_text(encoding="utf-8")
    assert "child message" in text
    assert "adapter message" in text
    assert f"sid={SESSION_ID}" in text


def test_setup_logging_is_idempotent(tmp_path, app_logger):
    setup_logging(log_path=tmp_path / "a.log")
    setup_logging(log_path=tmp_path / "b.log")
    assert len(app_logger.handlers) == 2
    assert not (tmp_path / "b.log").exists()
