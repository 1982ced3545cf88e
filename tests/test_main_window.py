"""Tests for main window handling of load failures and deny-list saves."""

import pytest
from PyQt6.QtWidgets import QMessageBox

from app.main_window import MainWindow
from features.deny_list.deny_list_store import DenyListStore


@pytest.fixture
def shown(monkeypatch):
    titles = []
    monkeypatch.setattr(QMessageBox, "critical", lambda parent, title, text: titles.append(title))
    monkeypatch.setattr(QMessageBox, "warning", lambda parent, title, text: titles.append(title))
    return titles


@pytest.fixture
def window(settings):
    window = MainWindow(DenyListStore(settings))
    yield window
    window.deleteLater()


def test_superseded_load_failure_is_silent(window, shown):
    service = window._comparison_service
    old_token = service.begin_archive_load()
    service.begin_archive_load()
    window._statusbar.showMessage("Reading new.zip...")

    window._on_load_error(old_token, "cannot read old.zip")

    assert shown == []
    assert window._statusbar.currentMessage() == "Reading new.zip..."


def test_current_load_failure_is_reported(window, shown):
    token = window._comparison_service.begin_archive_load()
    window._on_load_error(token, "cannot read site.zip")
    assert shown == ["Archive Error"]
    assert window._statusbar.currentMessage() == "Ready"


def test_failed_deny_list_save_keeps_editing(unwritable_settings, shown):
    window = MainWindow(DenyListStore(unwritable_settings))
    panel = window._deny_list_panel
    panel.start_editing()
    panel._editor.setPlainText("*.log")

    panel._on_save()

    assert shown == ["Save Error"]
    assert panel.is_editing
    assert panel._editor.toPlainText() == "*.log"
    window.deleteLater()
