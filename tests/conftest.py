import logging

import pytest


@pytest.fixture(autouse=True)
def restore_root_logger():
    """main() reconfigures the root logger, put it back after each test"""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture
def quiet_env(monkeypatch):
    monkeypatch.delenv("REVEAL_LOG_LEVEL", raising=False)
    monkeypatch.delenv("REVEAL_LOG_FILE", raising=False)
