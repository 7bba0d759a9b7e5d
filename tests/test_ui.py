"""Tests for the settings window and its preference widgets (offscreen)."""

from __future__ import annotations

import pytest

from core.device_profile import DeviceProfile, ScreenConfig
from core.settings_model import SettingsModel
from core.settings_schema import (
    KEY_AMBER_ALERTS,
    KEY_ALERT_REMINDER_INTERVAL,
    KEY_ALERT_SPEECH,
    KEY_MASTER_TOGGLE,
    KEY_PRESIDENTIAL_ALERTS,
)
from ui.main_window import SettingsWindow


@pytest.fixture()
def window(store):
    win = SettingsWindow(SettingsModel(store))
    yield win
    win.close()
    win.deleteLater()


def test_renders_visible_preferences_only(window):
    keys = window.rendered_keys()
    assert keys[0] == KEY_MASTER_TOGGLE
    assert KEY_ALERT_SPEECH in keys
    assert KEY_PRESIDENTIAL_ALERTS not in keys
    assert window.alert_history_button.text() == "Emergency alert history"


def test_profile_can_reveal_rows(store):
    profile = DeviceProfile(screen=ScreenConfig(show_presidential=True))
    win = SettingsWindow(SettingsModel(store, profile))
    assert KEY_PRESIDENTIAL_ALERTS in win.rendered_keys()
    win.deleteLater()


def test_switch_click_updates_model(window, store):
    row = window.preference_widgets[KEY_AMBER_ALERTS]
    assert row.switch.isChecked() is True
    row.switch.click()
    assert window.model.amber.checked is False
    assert store.get_boolean(KEY_AMBER_ALERTS, True) is False
    assert window.model.changed_by_user is True


def test_master_click_disables_sub_alert_rows(window):
    window.preference_widgets[KEY_MASTER_TOGGLE].switch.click()
    amber_row = window.preference_widgets[KEY_AMBER_ALERTS]
    assert amber_row.isEnabled() is False
    assert amber_row.switch.isChecked() is False


def test_model_change_is_pushed_to_widget(window):
    window.model.speech.set_value(False)
    assert window.preference_widgets[KEY_ALERT_SPEECH].switch.isChecked() is False


def test_list_selection_updates_model(window):
    row = window.preference_widgets[KEY_ALERT_REMINDER_INTERVAL]
    labels = [row.combo.itemText(i) for i in range(row.combo.count())]
    assert labels == list(window.model.reminder_interval.entries)
    row.combo.activated.emit(2)
    assert window.model.reminder_interval.value == row.combo.itemData(2)
    assert row.combo.currentIndex() == 2


def test_alert_history_signal(window):
    seen = []
    window.alert_history_requested.connect(lambda: seen.append(True))
    window.alert_history_button.click()
    assert seen == [True]
