from __future__ import annotations

import os

# Must be set before any Qt module creates the application
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import QCoreApplication, QSettings

from colorcube.model.points import PointSet
from colorcube.model.state import ViewState, Viewport


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path):
    """Keep QSettings writes inside the test's temporary directory."""
    QCoreApplication.setOrganizationName("colorcube-tests")
    QCoreApplication.setApplicationName("colorcube-tests")
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)
    QSettings.setPath(QSettings.Format.IniFormat, QSettings.Scope.UserScope, str(tmp_path))
    yield


@pytest.fixture
def corners() -> PointSet:
    return PointSet([(1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0)])


@pytest.fixture
def default_view() -> ViewState:
    return ViewState()


@pytest.fixture
def viewport() -> Viewport:
    return Viewport(800, 600)
