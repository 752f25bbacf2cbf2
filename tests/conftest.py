"""Pytest configuration.

Qt runs on the ``offscreen`` platform so widget tests work without a display.
The environment variable must be set before the first QApplication exists.
"""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from pylinechartqt.models import ChartConfiguration, ChartStyle, DrawingRegion  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication shared by all widget tests."""
    QtWidgets = pytest.importorskip("PySide6.QtWidgets")
    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication([])
    yield app


@pytest.fixture
def style():
    return ChartStyle()


@pytest.fixture
def region():
    return DrawingRegion(width=300.0, height=200.0)


@pytest.fixture
def all_enabled():
    return ChartConfiguration.all_enabled()


@pytest.fixture
def sample_values():
    return [10, 20, 15, 30, 5]
