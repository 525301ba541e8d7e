"""Shared pytest fixtures for pomotimer tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtCore import QCoreApplication  # noqa: E402

from pomotimer.settings import Settings  # noqa: E402
from pomotimer.timer.engine import TimerEngine  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    """A single Qt application instance shared across the entire test run."""
    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])
    yield app


@pytest.fixture
def notifications():
    """List that records the mode passed to the engine's notifier."""
    return []


@pytest.fixture
def engine(qapp, notifications):
    """Fresh TimerEngine with default 25/5/15/4 settings."""
    return TimerEngine(parent=None, notifier=notifications.append)


@pytest.fixture
def short_engine(qapp, notifications):
    """1/1/2 minute periods, long break every 2nd focus period."""
    settings = Settings(
        focus_minutes=1,
        short_break_minutes=1,
        long_break_minutes=2,
        cycles_until_long_break=2,
    )
    return TimerEngine(parent=None, settings=settings, notifier=notifications.append)
