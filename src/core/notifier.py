from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Signal

from .settings_model import SettingsModel
from .settings_schema import KEY_ANY_PREFERENCE_CHANGED_BY_USER


logger = logging.getLogger(__name__)


class ChangeNotifier(QObject):
    """Relays preference changes to the rest of the system.

    Emits:
      - area_update_info_changed(bool): the area update info toggle changed,
        whether by the user or by the master toggle
      - config_refresh_requested(): alert channels should be reconfigured
      - backup_requested(): preferences need a backup pass
    """

    area_update_info_changed = Signal(bool)
    config_refresh_requested = Signal()
    backup_requested = Signal()

    def __init__(self, model: SettingsModel, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._model = model
        # Connected after construction, so the initial value is never reported
        model.area_update_info.value_changed.connect(self._on_area_update_info_changed)
        model.preference_changed_by_user.connect(self._on_preference_changed_by_user)

    def _on_area_update_info_changed(self, enabled: bool) -> None:
        logger.debug("Area update info -> %s", enabled)
        self.area_update_info_changed.emit(bool(enabled))

    def _on_preference_changed_by_user(self, key: str, _value) -> None:
        if not self._model.consume_changed_by_user():
            return
        logger.debug("Preference changed by user: %s", key)
        self._model.store.set_boolean(KEY_ANY_PREFERENCE_CHANGED_BY_USER, True)
        self.config_refresh_requested.emit()
        self.backup_requested.emit()
