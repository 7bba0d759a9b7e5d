from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QPushButton,
    QLabel,
    QScrollArea,
)

from core.preferences import ListPreference, PreferenceNode, SwitchPreference
from core.settings_model import SettingsModel
from core import settings_schema as schema
from ui.widgets.switch_widget import SwitchPreferenceWidget
from ui.widgets.list_widget import ListPreferenceWidget


# key -> (title, summary shown below the row)
PREFERENCE_TEXT: Dict[str, Tuple[str, Optional[str]]] = {
    schema.KEY_MASTER_TOGGLE: (
        "Allow alerts",
        "Get wireless emergency alert notifications",
    ),
    schema.KEY_EMERGENCY_ALERTS: ("Emergency alerts", None),
    schema.KEY_AMBER_ALERTS: ("AMBER alerts", None),
    schema.KEY_EXTREME_ALERTS: ("Extreme threats", None),
    schema.KEY_SEVERE_ALERTS: ("Severe threats", None),
    schema.KEY_PRESIDENTIAL_ALERTS: ("Presidential alerts", None),
    schema.KEY_PUBLIC_SAFETY_MESSAGES: (
        "Public safety messages",
        "Recommended actions that can save lives or property",
    ),
    schema.KEY_PUBLIC_SAFETY_MESSAGES_FULL_SCREEN: (
        "Full-screen messages",
        "Show public safety messages as full screen",
    ),
    schema.KEY_TEST_ALERTS: ("Test alerts", None),
    schema.KEY_EXERCISE_ALERTS: (
        "Exercise alerts",
        "Receive exercise alerts",
    ),
    schema.KEY_OPERATOR_DEFINED_ALERTS: (
        "Operator alerts",
        "Receive operator defined alerts",
    ),
    schema.KEY_STATE_LOCAL_TEST_ALERTS: ("State and local tests", None),
    schema.KEY_AREA_UPDATE_INFO_ALERTS: (
        "Area update info",
        "Show area update information in SIM status",
    ),
    schema.KEY_ALERT_VIBRATE: ("Vibration", None),
    schema.KEY_RECEIVE_CMAS_IN_SECOND_LANGUAGE: ("Second language", None),
    schema.KEY_OVERRIDE_DND: (
        "Always alert at full volume",
        "Ignore Do Not Disturb and other volume settings",
    ),
    schema.KEY_ALERT_SPEECH: ("Speak alert message", None),
    schema.KEY_ALERT_REMINDER_INTERVAL: ("Alert reminder sound", None),
    schema.KEY_SHOW_CMAS_OPT_OUT_DIALOG: (
        "Show opt-out dialog",
        "Display an opt-out dialog after the first alert",
    ),
}

# The alert history entry sits right after this preference
ALERT_HISTORY_AFTER = schema.KEY_AREA_UPDATE_INFO_ALERTS


class SettingsWindow(QMainWindow):
    """Scrollable single-column alert settings screen for small displays."""

    alert_history_requested = Signal()

    def __init__(self, model: SettingsModel, parent=None):
        super().__init__(parent)
        self.model = model
        self.preference_widgets: Dict[str, QWidget] = {}
        self.setup_ui()
        self.apply_dark_theme()
        self.setup_shortcuts()

    def setup_ui(self):
        """Setup the main UI"""
        self.setWindowTitle("Wireless emergency alerts")
        self.setFixedWidth(360)
        self.setMinimumHeight(240)
        self.resize(360, 420)

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setCentralWidget(self.scroll_area)

        self.rows_container = QWidget()
        self.rows_layout = QVBoxLayout(self.rows_container)
        self.rows_layout.setContentsMargins(8, 8, 8, 8)
        self.rows_layout.setSpacing(6)

        for node in self.model.visible_nodes():
            self.add_preference_row(node)
            if node.key == ALERT_HISTORY_AFTER:
                self.add_alert_history_row()

        self.rows_layout.addStretch(1)
        self.scroll_area.setWidget(self.rows_container)

    def add_preference_row(self, node: PreferenceNode) -> None:
        title, summary = PREFERENCE_TEXT.get(node.key, (node.key, None))
        if isinstance(node, ListPreference):
            widget = ListPreferenceWidget(title, node)
        elif isinstance(node, SwitchPreference):
            widget = SwitchPreferenceWidget(title, node)
        else:
            raise TypeError(f"No widget for {type(node).__name__}")
        self.preference_widgets[node.key] = widget
        self.rows_layout.addWidget(widget)

        if summary:
            label = QLabel(summary)
            label.setObjectName("summaryLabel")
            label.setWordWrap(True)
            self.rows_layout.addWidget(label)

    def add_alert_history_row(self) -> None:
        self.alert_history_button = QPushButton("Emergency alert history")
        self.alert_history_button.setObjectName("actionButton")
        self.alert_history_button.clicked.connect(lambda: self.alert_history_requested.emit())
        self.rows_layout.addWidget(self.alert_history_button)

    def rendered_keys(self) -> List[str]:
        return list(self.preference_widgets)

    def apply_dark_theme(self):
        from ui.styles.dark_theme import get_style
        self.setStyleSheet(get_style())

    def setup_shortcuts(self):
        quit_shortcut = QShortcut(QKeySequence.Quit, self)
        quit_shortcut.activated.connect(self.close)
        escape_shortcut = QShortcut(QKeySequence("Escape"), self)
        escape_shortcut.activated.connect(self.close)
