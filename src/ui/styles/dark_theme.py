def get_style() -> str:
    return """
    QMainWindow {
        background-color: #000000;
    }

    QWidget {
        background-color: #000000;
        color: #e6e6e6;
    }

    QScrollArea {
        background-color: #000000;
        border: none;
    }

    QScrollArea > QWidget > QWidget {
        background-color: #000000;
    }

    QFrame#PreferenceRow {
        background-color: #202124;
        border-radius: 20px;
        border: 1px solid #2a2a2a;
    }

    QFrame#PreferenceRow:disabled {
        background-color: #141414;
    }

    QLabel#preferenceTitle {
        background-color: transparent;
        color: #ffffff;
        font-size: 14px;
        font-weight: 500;
    }

    QLabel#preferenceTitle:disabled {
        color: #666666;
    }

    QLabel#summaryLabel {
        color: #aaaaaa;
        font-size: 12px;
        padding: 0px 12px 4px 12px;
    }

    QCheckBox#preferenceSwitch {
        background-color: transparent;
    }

    QCheckBox#preferenceSwitch::indicator {
        width: 32px;
        height: 18px;
        border-radius: 9px;
        background: #3a3a3a;
        border: 1px solid #555555;
    }

    QCheckBox#preferenceSwitch::indicator:checked {
        background: #00E5FF;
        border: 1px solid #00C4E5;
    }

    QCheckBox#preferenceSwitch::indicator:disabled {
        background: #2a2a2a;
        border: 1px solid #3a3a3a;
    }

    QComboBox#preferenceChoice {
        background-color: #2a2a2a;
        color: #e6e6e6;
        border: 1px solid #555555;
        border-radius: 4px;
        padding: 2px 6px;
    }

    QPushButton#actionButton {
        background-color: #202124;
        border: 1px solid #2a2a2a;
        border-radius: 20px;
        color: #ffffff;
        font-size: 14px;
        padding: 10px 12px;
        text-align: left;
    }

    QPushButton#actionButton:hover {
        background-color: #2a2a2a;
        border: 1px solid #555555;
    }

    QPushButton#actionButton:pressed {
        background-color: #00E5FF;
        color: #000000;
    }
    """
