"""pytest configuration and fixtures for copylist-view tests."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtWidgets import QApplication

from copylist_view.protocols import set_view_config

from fakes import FakeListStore


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture(autouse=True)
def reset_view_config():
    """Each test starts from the default ViewConfig."""
    set_view_config(None)
    yield
    set_view_config(None)


@pytest.fixture
def store():
    return FakeListStore(["/data/a.txt", "/data/b.txt", "/data/c.txt"])
