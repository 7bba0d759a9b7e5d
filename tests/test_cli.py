"""Tests for the command-line entry point (no window is opened)."""

from __future__ import annotations

import json

import pytest

import alert_settings
from core.device_profile import DeviceProfile


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        alert_settings.main(["--version"])
    assert excinfo.value.code == 0
    assert alert_settings.__version__ in capsys.readouterr().out


def test_parser_options(tmp_path):
    args = alert_settings.build_parser().parse_args(
        ["--debug", "--profile", str(tmp_path / "p.json"), "--config-dir", str(tmp_path)]
    )
    assert args.debug is True
    assert args.profile == tmp_path / "p.json"
    assert args.config_dir == tmp_path


def test_missing_explicit_profile_exits_with_error(tmp_path):
    rc = alert_settings.main(["--config-dir", str(tmp_path), "--profile", str(tmp_path / "nope.json")])
    assert rc == 1


def write_profile(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")


class TestProfileSelection:
    def test_config_dir_without_profile_uses_builtins(self, xdg_home, tmp_path):
        write_profile(xdg_home / "alert-settings" / "device-profile.json",
                      {"screen": {"show_presidential": True}})
        args = alert_settings.build_parser().parse_args(["--config-dir", str(tmp_path / "cfg")])
        assert alert_settings.load_profile(args) == DeviceProfile()

    def test_config_dir_profile_is_used(self, tmp_path):
        cfg = tmp_path / "cfg"
        write_profile(cfg / "device-profile.json", {"screen": {"show_override_dnd": True}})
        args = alert_settings.build_parser().parse_args(["--config-dir", str(cfg)])
        assert alert_settings.load_profile(args).screen.show_override_dnd is True

    def test_no_options_use_xdg_profile(self, xdg_home):
        write_profile(xdg_home / "alert-settings" / "device-profile.json",
                      {"screen": {"show_presidential": True}})
        args = alert_settings.build_parser().parse_args([])
        assert alert_settings.load_profile(args).screen.show_presidential is True
