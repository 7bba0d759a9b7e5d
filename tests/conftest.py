"""Shared fixtures for the alert settings tests."""

import os

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from config import PreferenceStore


@pytest.fixture(scope="session", autouse=True)
def qapp():
    """One QApplication for the whole session."""
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture()
def prefs_path(tmp_path):
    return tmp_path / "preferences.json"


@pytest.fixture()
def store(prefs_path):
    """A preference store backed by a temporary file."""
    return PreferenceStore(prefs_path)


@pytest.fixture()
def xdg_home(tmp_path, monkeypatch):
    """Point XDG_CONFIG_HOME at a temporary directory."""
    home = tmp_path / "xdg"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home))
    return home
