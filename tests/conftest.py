import pytest
from utils.logger import Logger
from utils.pattern import Singleton

# Quiet, debug-level logger for the whole session; must exist before anything calls Logger()
Logger(level="debug", to_screen=False)


@pytest.fixture
def fresh_logger():
    """Drop the session Logger for one test and put it back afterwards"""
    saved = Logger()
    Logger.reset()
    yield
    if Logger in Singleton._instance:
        current = Logger()
        for h in list(current.handlers):
            h.close()
            current.removeHandler(h)
        Logger.reset()
    Singleton._instance[Logger] = saved
