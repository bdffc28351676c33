import pytest
import os
import sys
import logging

# Add project root to path to ensure imports work correctly
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

# Import after setting up the path
from outcomes.domain.entities import Person


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every OUTCOMES_* variable from the environment."""
    for name in list(os.environ):
        if name.startswith("OUTCOMES_"):
            monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def fred():
    """A person built directly, bypassing validation."""
    return Person("Fred", 32)


@pytest.fixture
def isolated_logger():
    """Yield a fresh logger name and drop its handlers afterwards."""
    name = "outcomes-test-logger"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


@pytest.fixture
def fresh_config(clean_env):
    """Rebuild the global configuration from the patched environment."""
    from outcomes.utils.config_manager import get_config

    get_config.cache_clear()
    yield clean_env
    get_config.cache_clear()
