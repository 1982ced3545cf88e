"""Pytest bootstrap: repository-local imports and a Qt application."""

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtCore import QSettings  # noqa: E402
from PyQt6.QtWidgets import QApplication  # noqa: E402


class UnwritableSettings:
    """QSettings stand-in whose backing file cannot be accessed."""

    def __init__(self):
        self.values = {}

    def sync(self):
        pass

    def status(self):
        return QSettings.Status.AccessError

    def fileName(self):
        return "/read-only/settings.ini"

    def contains(self, key):
        return key in self.values

    def value(self, key):
        return self.values.get(key)

    def setValue(self, key, value):
        self.values[key] = value


@pytest.fixture(scope="session", autouse=True)
def qt_app():
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def settings(tmp_path):
    return QSettings(str(tmp_path / "settings.ini"), QSettings.Format.IniFormat)


@pytest.fixture
def unwritable_settings():
    return UnwritableSettings()
