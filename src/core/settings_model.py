from __future__ import annotations

import logging
from functools import partial
from typing import Any, Dict, Iterator, List, Optional

from PySide6.QtCore import QObject, Signal

from config import PreferenceStore
from . import rules
from .device_profile import DeviceProfile, ScreenConfig, active_interval_entries, load_device_profile
from .preferences import ListPreference, PreferenceNode, SwitchPreference
from .settings_schema import (
    AlertDefaults,
    SUB_ALERT_KEYS,
    switch_defaults,
    KEY_MASTER_TOGGLE,
    KEY_EMERGENCY_ALERTS,
    KEY_AMBER_ALERTS,
    KEY_EXTREME_ALERTS,
    KEY_SEVERE_ALERTS,
    KEY_PRESIDENTIAL_ALERTS,
    KEY_PUBLIC_SAFETY_MESSAGES,
    KEY_PUBLIC_SAFETY_MESSAGES_FULL_SCREEN,
    KEY_TEST_ALERTS,
    KEY_EXERCISE_ALERTS,
    KEY_OPERATOR_DEFINED_ALERTS,
    KEY_STATE_LOCAL_TEST_ALERTS,
    KEY_AREA_UPDATE_INFO_ALERTS,
    KEY_ALERT_VIBRATE,
    KEY_RECEIVE_CMAS_IN_SECOND_LANGUAGE,
    KEY_OVERRIDE_DND,
    KEY_ALERT_SPEECH,
    KEY_SHOW_CMAS_OPT_OUT_DIALOG,
    KEY_ALERT_REMINDER_INTERVAL,
)


logger = logging.getLogger(__name__)


class SettingsModel(QObject):
    """Preference screen model: owns every preference and wires their rules.

    Emits:
      - state_changed(str): key of any preference whose value or enabled flag changed
      - preference_changed_by_user(str, object): key and value of a real user edit
    """

    state_changed = Signal(str)
    preference_changed_by_user = Signal(str, object)

    def __init__(
        self,
        store: PreferenceStore,
        profile: DeviceProfile | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._store = store
        self._profile = profile or DeviceProfile()
        self._nodes: Dict[str, PreferenceNode] = {}
        self._changed_by_user = False

        defaults = switch_defaults(self._profile.defaults)

        def switch(key: str) -> SwitchPreference:
            return self._add(SwitchPreference(store, key, defaults[key], parent=self))

        # Screen order
        self.master_toggle = switch(KEY_MASTER_TOGGLE)
        self.emergency_alerts = switch(KEY_EMERGENCY_ALERTS)
        self.amber = switch(KEY_AMBER_ALERTS)
        self.extreme = switch(KEY_EXTREME_ALERTS)
        self.severe = switch(KEY_SEVERE_ALERTS)
        self.presidential = switch(KEY_PRESIDENTIAL_ALERTS)
        self.public_safety_messages = switch(KEY_PUBLIC_SAFETY_MESSAGES)
        self.public_safety_messages_full_screen = switch(KEY_PUBLIC_SAFETY_MESSAGES_FULL_SCREEN)
        self.test_alerts = switch(KEY_TEST_ALERTS)
        self.exercise_test = switch(KEY_EXERCISE_ALERTS)
        self.operator_defined = switch(KEY_OPERATOR_DEFINED_ALERTS)
        self.state_local_test = switch(KEY_STATE_LOCAL_TEST_ALERTS)
        self.area_update_info = switch(KEY_AREA_UPDATE_INFO_ALERTS)
        self.enable_vibrate = switch(KEY_ALERT_VIBRATE)
        self.receive_cmas_in_second_language = switch(KEY_RECEIVE_CMAS_IN_SECOND_LANGUAGE)
        self.override_dnd = switch(KEY_OVERRIDE_DND)
        self.speech = switch(KEY_ALERT_SPEECH)

        interval = self._profile.reminder_interval
        self.reminder_interval = self._add(
            ListPreference(
                store,
                KEY_ALERT_REMINDER_INTERVAL,
                interval.default,
                interval.active_values,
                active_interval_entries(interval.active_values, interval.values, interval.entries),
                parent=self,
            )
        )
        self.show_cmas_opt_out_dialog = switch(KEY_SHOW_CMAS_OPT_OUT_DIALOG)

        self._wire_rules()

        if not self.master_toggle.checked:
            self.master_toggle.on_preference_changed(False)

        for node in self._nodes.values():
            node.user_changed.connect(self._on_user_changed)
            node.value_changed.connect(partial(self._emit_state_changed, node.key))
            node.enabled_changed.connect(partial(self._emit_state_changed, node.key))

    # --- API ---
    @property
    def store(self) -> PreferenceStore:
        return self._store

    @property
    def profile(self) -> DeviceProfile:
        return self._profile

    @property
    def defaults(self) -> AlertDefaults:
        return self._profile.defaults

    @property
    def screen_config(self) -> ScreenConfig:
        return self._profile.screen

    @property
    def changed_by_user(self) -> bool:
        return self._changed_by_user

    def consume_changed_by_user(self) -> bool:
        """Return whether a user change happened since the last call, and clear it."""
        changed = self._changed_by_user
        self._changed_by_user = False
        return changed

    def node(self, key: str) -> PreferenceNode:
        return self._nodes[key]

    def nodes(self) -> List[PreferenceNode]:
        return list(self._nodes.values())

    def keys(self) -> List[str]:
        return list(self._nodes)

    def visible_nodes(self) -> List[PreferenceNode]:
        """Preferences this device shows, in screen order."""
        return [n for n in self._nodes.values() if self.screen_config.visible(n.key)]

    def snapshot(self) -> Dict[str, Dict[str, Any]]:
        """Value and enabled state of every preference at this instant."""
        return {k: {"value": n.value, "enabled": n.enabled} for k, n in self._nodes.items()}

    def __contains__(self, key: object) -> bool:
        return key in self._nodes

    def __iter__(self) -> Iterator[PreferenceNode]:
        return iter(self._nodes.values())

    # --- internals ---
    def _add(self, node: PreferenceNode) -> PreferenceNode:
        if node.key in self._nodes:
            raise ValueError(f"Duplicate preference key '{node.key}'")
        self._nodes[node.key] = node
        return node

    def _wire_rules(self) -> None:
        sub_alerts = [self._nodes[k] for k in SUB_ALERT_KEYS]
        if self.defaults.disable_extreme_alert_settings:
            sub_alerts.remove(self.extreme)

        self.master_toggle.on_preference_changed = partial(
            rules.master_update_sub_alerts, sub_alerts
        )
        self.extreme.on_preference_changed = partial(
            rules.extreme_update_severe,
            self.severe,
            severe_depends_on_extreme=self.defaults.disable_severe_when_extreme_disabled,
        )
        self.override_dnd.on_preference_changed = partial(
            rules.override_dnd_update_vibrate, self._store, self.enable_vibrate
        )

    def _on_user_changed(self, key: str, value: Any) -> None:
        logger.debug("Preference '%s' changed by user to %r", key, value)
        self._changed_by_user = True
        self.preference_changed_by_user.emit(key, value)

    def _emit_state_changed(self, key: str, *_args) -> None:
        self.state_changed.emit(key)


def create_settings_model(
    store: Optional[PreferenceStore] = None,
    profile: Optional[DeviceProfile] = None,
) -> SettingsModel:
    """Build a model backed by the XDG preference file and device profile."""
    return SettingsModel(
        store if store is not None else PreferenceStore(),
        profile if profile is not None else load_device_profile(),
    )
