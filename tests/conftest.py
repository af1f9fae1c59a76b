"""Shared pytest fixtures for PomoTasks tests."""

import sys
import pytest

from PyQt6.QtCore import QCoreApplication

from pomotasks.database.db import configure_engine, init_db
from pomotasks.timer.driver import SessionDriver
from pomotasks.timer.engine import create_pomodoro_state


@pytest.fixture(scope="session")
def qapp():
    """One QCoreApplication for the whole run; QTimer needs it."""
    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])
    yield app


@pytest.fixture(autouse=True)
def test_db():
    """Point every test at a fresh in-memory SQLite database."""
    configure_engine("sqlite:///:memory:")
    init_db()
    yield


@pytest.fixture
def state():
    return create_pomodoro_state()


@pytest.fixture
def driver(qapp):
    """Fresh SessionDriver with history on, auto-advance OFF."""
    d = SessionDriver(parent=None, history_enabled=True, auto_advance=False)
    yield d
    d.pause()


@pytest.fixture
def driver_auto(qapp):
    d = SessionDriver(parent=None, history_enabled=True, auto_advance=True)
    yield d
    d.pause()


@pytest.fixture
def driver_no_history(qapp):
    d = SessionDriver(parent=None, history_enabled=False, auto_advance=False)
    yield d
    d.pause()
