"""Shared pytest fixtures for all tests."""

import logging
from dataclasses import replace

import pytest

from config import Config, Timing
from services.base import Services
from tests.helpers import FakeClock, FakeKeyboard, FakeWindows


@pytest.fixture
def test_env(tmp_path):
    """Windows-style environment variables pointing into tmp_path.

    Returns:
        dict: Environment mapping for Config.from_environment.
    """
    return {
        "USERPROFILE": str(tmp_path / "home"),
        "APPDATA": str(tmp_path / "home" / "AppData" / "Roaming"),
        "LOCALAPPDATA": str(tmp_path / "home" / "AppData" / "Local"),
        "PROGRAMFILES": str(tmp_path / "Program Files"),
        "PROGRAMFILES(X86)": str(tmp_path / "Program Files (x86)"),
    }


@pytest.fixture
def test_config(test_env, tmp_path):
    """Create a test configuration with zero delays.

    The window timeout stays positive so the poll loop runs against the
    fake clock.

    Returns:
        Config: Test configuration object.
    """
    config = Config.from_environment(test_env)
    config.log_level = "DEBUG"
    config.log_dir = tmp_path / "surfreset-logs"
    config.timing = replace(
        Timing.instant(), window_timeout=5.0, window_poll_interval=1.0
    )
    return config


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def fake_windows():
    return FakeWindows(appears_after=0)


@pytest.fixture
def fake_keyboard():
    return FakeKeyboard()


@pytest.fixture
def opened():
    """Paths passed to the fake opener."""
    return []


@pytest.fixture
def services(test_config, fake_windows, fake_keyboard, clock, opened, monkeypatch):
    """Create a Services container with fake desktop backends.

    The process table is patched to be empty so no real process is touched.

    Returns:
        Services: Services container for testing.
    """
    monkeypatch.setattr("services.processes.psutil.process_iter", lambda attrs=None: [])
    return Services(
        test_config,
        windows=fake_windows,
        keyboard=fake_keyboard,
        opener=opened.append,
        sleep=clock.sleep,
        clock=clock.time,
    )


@pytest.fixture
def clean_logger():
    """Remove handlers added by setup_logging once the test is done."""
    yield
    logger = logging.getLogger("surfreset")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
