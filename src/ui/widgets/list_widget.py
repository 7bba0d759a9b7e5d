from __future__ import annotations

from PySide6.QtWidgets import QFrame, QVBoxLayout, QLabel, QComboBox

from core.preferences import ListPreference


class ListPreferenceWidget(QFrame):
    """Row showing a title and a drop-down of the preference's choices."""

    def __init__(self, title: str, preference: ListPreference, parent=None):
        super().__init__(parent)
        self.preference = preference
        self.setObjectName("PreferenceRow")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 8, 12, 8)
        layout.setSpacing(4)

        self.title_label = QLabel(title)
        self.title_label.setObjectName("preferenceTitle")
        layout.addWidget(self.title_label)

        self.combo = QComboBox()
        self.combo.setObjectName("preferenceChoice")
        for value, entry in preference.choices():
            self.combo.addItem(entry, value)
        layout.addWidget(self.combo)

        # activated fires for user selection only
        self.combo.activated.connect(self._on_activated)
        preference.value_changed.connect(self._on_value_changed)
        preference.enabled_changed.connect(self.setEnabled)
        self.refresh()

    def refresh(self) -> None:
        self._select(self.preference.value)
        self.setEnabled(self.preference.enabled)

    def _select(self, value) -> None:
        idx = self.combo.findData(value)
        # A stored value outside the choices leaves nothing selected
        self.combo.setCurrentIndex(idx)

    def _on_activated(self, index: int) -> None:
        value = self.combo.itemData(index)
        if value is not None:
            self.preference.on_user_change(value)

    def _on_value_changed(self, value) -> None:
        self._select(value)
