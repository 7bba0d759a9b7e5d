"""Tests for device profile loading and the screen visibility snapshot."""

from __future__ import annotations

import json

import pytest

from config import DeviceProfileError
from core.device_profile import (
    DeviceProfile,
    ScreenConfig,
    active_interval_entries,
    load_device_profile,
)
from core.settings_schema import (
    KEY_ALERT_SPEECH,
    KEY_OVERRIDE_DND,
    KEY_PRESIDENTIAL_ALERTS,
)


def write_profile(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestLoad:
    def test_missing_default_profile_uses_builtins(self, xdg_home):
        assert load_device_profile() == DeviceProfile()

    def test_default_profile_from_config_dir(self, xdg_home):
        write_profile(
            xdg_home / "alert-settings" / "device-profile.json",
            {"screen": {"show_override_dnd": True}},
        )
        assert load_device_profile().screen.show_override_dnd is True

    def test_overlay_sections(self, tmp_path, caplog):
        path = write_profile(tmp_path / "profile.json", {
            "defaults": {"master_toggle_enabled": "false", "override_dnd": 1},
            "screen": {"show_presidential": True, "bogus": True},
            "reminder_interval": {"default": "2", "active_values": ["0", "2"]},
            "extra": {},
        })
        profile = load_device_profile(path)
        assert profile.defaults.master_toggle_enabled is False
        assert profile.defaults.override_dnd is True
        assert profile.screen.show_presidential is True
        assert profile.reminder_interval.default == "2"
        assert profile.reminder_interval.active_values == ("0", "2")
        assert "'bogus'" in caplog.text
        assert "'extra'" in caplog.text

    def test_explicit_missing_profile_is_an_error(self, tmp_path):
        with pytest.raises(DeviceProfileError):
            load_device_profile(tmp_path / "nope.json")

    def test_explicit_corrupt_profile_is_an_error(self, tmp_path):
        path = tmp_path / "profile.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(DeviceProfileError):
            load_device_profile(path)

    def test_corrupt_default_profile_falls_back(self, xdg_home, caplog):
        path = xdg_home / "alert-settings" / "device-profile.json"
        path.parent.mkdir(parents=True)
        path.write_text("{", encoding="utf-8")
        assert load_device_profile() == DeviceProfile()
        assert "using defaults" in caplog.text

    def test_section_must_be_object(self, tmp_path):
        path = write_profile(tmp_path / "profile.json", {"screen": [1, 2]})
        with pytest.raises(DeviceProfileError):
            load_device_profile(path)

    def test_list_field_must_be_list(self, tmp_path):
        path = write_profile(tmp_path / "profile.json", {"reminder_interval": {"values": "012"}})
        with pytest.raises(DeviceProfileError):
            load_device_profile(path)


class TestScreenConfig:
    def test_visibility_by_key(self):
        screen = ScreenConfig(show_override_dnd=True)
        assert screen.visible(KEY_OVERRIDE_DND) is True
        assert screen.visible(KEY_PRESIDENTIAL_ALERTS) is False
        # No flag means always shown
        assert screen.visible(KEY_ALERT_SPEECH) is True

    def test_mapping_is_read_only(self):
        mapping = ScreenConfig().as_mapping()
        assert mapping["show_master_toggle"] is True
        with pytest.raises(TypeError):
            mapping["show_master_toggle"] = False


class TestIntervalEntries:
    def test_entries_follow_active_values(self):
        entries = active_interval_entries(["15", "0"], ["0", "2", "15"], ["Once", "2 min", "15 min"])
        assert entries == ["15 min", "Once"]

    def test_unknown_value_gets_empty_label(self, caplog):
        entries = active_interval_entries(["0", "7"], ["0"], ["Once"])
        assert entries == ["Once", ""]
        assert "Can't find reminder interval entry for 7" in caplog.text
