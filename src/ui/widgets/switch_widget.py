from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QCheckBox

from core.preferences import SwitchPreference


class SwitchPreferenceWidget(QFrame):
    """Row showing a title and a switch bound to a SwitchPreference."""

    def __init__(self, title: str, preference: SwitchPreference, parent=None):
        super().__init__(parent)
        self.preference = preference
        self.setObjectName("PreferenceRow")

        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 8, 12, 8)
        layout.setSpacing(8)

        self.title_label = QLabel(title)
        self.title_label.setObjectName("preferenceTitle")
        self.title_label.setWordWrap(True)
        layout.addWidget(self.title_label, 1)

        self.switch = QCheckBox()
        self.switch.setObjectName("preferenceSwitch")
        self.switch.setCursor(Qt.PointingHandCursor)
        layout.addWidget(self.switch, 0, Qt.AlignRight | Qt.AlignVCenter)

        # Only user clicks reach the model; programmatic updates use setChecked
        self.switch.clicked.connect(self._on_clicked)
        preference.value_changed.connect(self._on_value_changed)
        preference.enabled_changed.connect(self._on_enabled_changed)
        self.refresh()

    def refresh(self) -> None:
        self.switch.setChecked(self.preference.checked)
        self.setEnabled(self.preference.enabled)

    def _on_clicked(self, checked: bool) -> None:
        self.preference.on_user_change(bool(checked))
        # A rejected or no-op edit still has to show the stored state
        if self.switch.isChecked() != self.preference.checked:
            self.switch.setChecked(self.preference.checked)

    def _on_value_changed(self, value) -> None:
        self.switch.setChecked(bool(value))

    def _on_enabled_changed(self, enabled: bool) -> None:
        self.setEnabled(enabled)
