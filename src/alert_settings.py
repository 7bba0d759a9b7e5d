#!/usr/bin/env python3
"""
Alert Settings - Emergency alert preferences for small-screen devices
"""

__version__ = "1.0.0"
__license__ = "GPL-3.0"

import argparse
import logging
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

from config import AlertSettingsError, PreferenceStore, PREFERENCES_FILE, get_config_dir
from core.device_profile import PROFILE_FILE, DeviceProfile, load_device_profile
from core.notifier import ChangeNotifier
from core.settings_model import SettingsModel
from ui.main_window import SettingsWindow


logger = logging.getLogger("alert_settings")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Emergency alert settings')
    parser.add_argument('--version', action='version', version=f'Alert Settings {__version__}')
    parser.add_argument('--debug', action='store_true', help='Enable debug output')
    parser.add_argument('--profile', type=Path, help='Device profile JSON to use instead of the default')
    parser.add_argument('--config-dir', type=Path, help='Directory holding preferences and the device profile')
    return parser


def load_profile(args) -> DeviceProfile:
    """Pick the device profile for the parsed options.

    An explicit --profile wins. With --config-dir the profile is looked up in
    that directory only and the built-in defaults apply when it has none.
    """
    if args.profile is not None:
        return load_device_profile(args.profile)
    if args.config_dir is not None:
        candidate = args.config_dir / PROFILE_FILE
        if candidate.exists():
            return load_device_profile(candidate)
        logger.info("No device profile in %s, using built-in defaults", args.config_dir)
        return DeviceProfile()
    return load_device_profile()


def main(argv=None):
    """Main entry point"""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config_dir = args.config_dir or get_config_dir()

    try:
        store = PreferenceStore(config_dir / PREFERENCES_FILE)
        profile = load_profile(args)
    except AlertSettingsError as e:
        logger.error("%s", e)
        return 1

    app = QApplication(sys.argv[:1])
    app.setApplicationName("Alert Settings")

    model = SettingsModel(store, profile)
    notifier = ChangeNotifier(model)
    notifier.area_update_info_changed.connect(
        lambda enabled: logger.info("Area update info enabled: %s", enabled)
    )
    notifier.config_refresh_requested.connect(
        lambda: logger.info("Alert channel configuration refresh requested")
    )
    notifier.backup_requested.connect(lambda: logger.info("Preference backup requested"))

    window = SettingsWindow(model)
    window.alert_history_requested.connect(lambda: logger.info("Alert history requested"))
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
