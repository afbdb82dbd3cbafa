"""
Styles and colors for the dice roller GUI.
"""

from PyQt6.QtGui import QColor

from shared.enums import Outcome

# Die colors
DIE_FACE_COLOR = QColor(250, 250, 245)
DIE_EDGE_COLOR = QColor(44, 62, 80)
DIE_PIP_COLOR = QColor(30, 30, 30)
DIE_ROLLING_EDGE_COLOR = QColor(241, 196, 15)

# Outcome colors
OUTCOME_COLORS = {
    Outcome.WIN.value: QColor(39, 174, 96),
    Outcome.LOSE.value: QColor(231, 76, 60),
}

# Stylesheet
MAIN_STYLESHEET = """
QMainWindow {
    background-color: #2C3E50;
}

QWidget#centralWidget {
    background-color: #2C3E50;
}

QLabel {
    color: white;
}

QLabel#sumLabel {
    font-size: 22px;
    font-weight: bold;
    color: #F1C40F;
}

QToolBar {
    background-color: #1A252F;
    border: none;
    spacing: 6px;
    padding: 4px;
}

QToolBar QToolButton {
    background-color: #3498DB;
    color: white;
    border: none;
    padding: 6px 12px;
    border-radius: 4px;
    font-weight: bold;
}

QToolBar QToolButton:hover {
    background-color: #2980B9;
}

QToolBar QToolButton:checked {
    background-color: #27AE60;
}

QPushButton {
    background-color: #3498DB;
    color: white;
    border: none;
    padding: 8px 16px;
    border-radius: 4px;
    font-weight: bold;
}

QPushButton:hover {
    background-color: #2980B9;
}

QListWidget {
    background-color: #34495E;
    color: white;
    border: 1px solid #3498DB;
    border-radius: 4px;
}

QListWidget::item {
    padding: 8px;
}

QListWidget::item:selected {
    background-color: #3498DB;
}

QTextEdit {
    background-color: #34495E;
    color: white;
    border: 1px solid #3498DB;
    border-radius: 4px;
}

QStatusBar {
    color: white;
    font-weight: bold;
}

QMenu {
    background-color: #34495E;
    color: white;
}

QMenu::item:selected {
    background-color: #3498DB;
}

QDialog {
    background-color: #2C3E50;
}
"""
