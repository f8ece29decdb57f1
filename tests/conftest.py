"""Shared test fixtures for conlog test suite."""

import os
from datetime import datetime
from pathlib import Path
from unittest.mock import patch

import pytest

from conlog.lib.log_lib import ConsoleLogger, RecordingSink
from conlog.lib.log_lib import manager as _manager_mod


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_DIR = PROJECT_ROOT / "src"

FROZEN_MOMENT = datetime(2026, 10, 19, 9, 5, 7, 42000)
FROZEN_STAMP = "09:05:07.042"


# ---------------------------------------------------------------------------
# Engine stand-ins
# ---------------------------------------------------------------------------
class EngineObject:
    """Minimal engine-native object: something with a .name."""

    def __init__(self, name):
        self.name = name


class Service:
    """Minimal versioned service."""

    def __init__(self, name, version):
        self.name = name
        self.version = version


# ---------------------------------------------------------------------------
# Logger fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def frozen_clock():
    """A clock that always returns FROZEN_MOMENT."""
    return lambda: FROZEN_MOMENT


@pytest.fixture
def sink():
    """A RecordingSink that treats EngineObject instances as engine objects."""
    return RecordingSink(engine_types=(EngineObject,))


@pytest.fixture
def logger(sink, frozen_clock):
    """A ConsoleLogger at Info with a frozen clock; startup record cleared."""
    log = ConsoleLogger(sink=sink, clock=frozen_clock)
    sink.clear()
    return log


@pytest.fixture
def reset_logger():
    """Restore the module-level ConsoleLogger singleton after the test."""
    old = _manager_mod._logger
    yield
    _manager_mod._logger = old


# ---------------------------------------------------------------------------
# Temporary directory fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def tmp_config_home(tmp_path):
    """Provide a temporary home directory for ~/.conlog/config.json."""
    home = tmp_path / "home"
    home.mkdir()
    with patch.dict(os.environ, {"HOME": str(home), "USERPROFILE": str(home)}):
        with patch("pathlib.Path.home", return_value=home):
            yield home


@pytest.fixture
def tmp_project(tmp_path):
    """Provide an empty project directory outside the fake home."""
    project = tmp_path / "project"
    project.mkdir()
    return project


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: starts a fresh interpreter (run with --all)")
