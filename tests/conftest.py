"""Shared pytest configuration and fixtures for all tests."""

import logging

import pytest

from railfence.utils import logger as logger_module


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests with no external resources")
    config.addinivalue_line("markers", "cipher: rail fence cipher tests")
    config.addinivalue_line("markers", "config: configuration tests")
    config.addinivalue_line("markers", "cli: command line tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def railfence_home(tmp_path, monkeypatch):
    """Point RAILFENCE_HOME at a temporary directory and reset logging afterwards."""
    home = tmp_path / "railfence_home"
    monkeypatch.setenv("RAILFENCE_HOME", str(home))
    yield home
    root_logger = logging.getLogger("railfence")
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    logger_module._CONFIGURED = False


@pytest.fixture
def run_cmd():
    """Execute a cmd function and return the result with progress_callback executed."""

    def _run(cmd_func, *args, **kwargs):
        result = cmd_func(*args, **kwargs)
        list(result.progress_callback(result))
        return result

    return _run
