"""Shared test configuration and fixtures.

The browser and Firebase are never touched: runs use a fake session that
records its lifecycle and a mock database that records writes.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from config import Settings
from utils import ExtractionStrategy, SessionNotStartedError

FIREBASE_CONFIG = '{"databaseURL": "https://example-default-rtdb.firebaseio.com"}'


class FakeSession:
    """Stands in for BrowserSession and records every lifecycle call."""

    def __init__(self, driver, start_error=None):
        self._driver = driver
        self.start_error = start_error
        self.started = False
        self.start_calls = 0
        self.close_calls = 0
        self.screenshots = []

    @property
    def driver(self):
        if not self.started:
            raise SessionNotStartedError()
        return self._driver

    def start(self):
        self.start_calls += 1
        if self.start_error is not None:
            raise self.start_error
        self.started = True
        return self._driver

    def screenshot(self, path):
        if not self.started:
            return False
        Path(path).write_bytes(b"\x89PNG")
        self.screenshots.append(str(path))
        return True

    def save_page_source(self, path):
        if not self.started:
            return False
        Path(path).write_text("<html></html>", encoding="utf-8")
        return True

    def close(self):
        self.close_calls += 1
        self.started = False


@pytest.fixture
def settings(tmp_path):
    return Settings(
        firebase_config=FIREBASE_CONFIG,
        username="mario.rossi@example.com",
        password="secret",
        screenshot_path=str(tmp_path / "error.png"),
        page_source_path=str(tmp_path / "error.html"),
    )


@pytest.fixture
def driver():
    return MagicMock(name="driver")


@pytest.fixture
def session(driver):
    return FakeSession(driver)


@pytest.fixture
def database():
    return MagicMock(name="database")


@pytest.fixture
def extractor():
    return MagicMock(spec=ExtractionStrategy)
