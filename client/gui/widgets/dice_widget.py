"""
Die widget.

Draws a single die face and turns mouse gestures into dice requests.
"""

from PyQt6.QtWidgets import QWidget, QMenu
from PyQt6.QtCore import Qt, QPoint, QRectF, pyqtSignal
from PyQt6.QtGui import QPainter, QPen, QBrush

from shared.constants import MIN_FACE
from client.gui.styles import (
    DIE_FACE_COLOR, DIE_EDGE_COLOR, DIE_PIP_COLOR, DIE_ROLLING_EDGE_COLOR
)


class DieWidget(QWidget):
    """
    Widget that draws one die.

    Double-click adds one, right-click opens the die's options menu and a
    drag across the widget rolls all dice. Every signal carries the die
    index so handlers never need to remember which die was touched.
    """

    increment_requested = pyqtSignal(int)   # index
    decrement_requested = pyqtSignal(int)   # index
    roll_requested = pyqtSignal(int)        # index
    roll_all_requested = pyqtSignal()

    # Pip layout as fractions of the face size
    PIP_POSITIONS = {
        1: [(0.5, 0.5)],
        2: [(0.25, 0.25), (0.75, 0.75)],
        3: [(0.25, 0.25), (0.5, 0.5), (0.75, 0.75)],
        4: [(0.25, 0.25), (0.75, 0.25), (0.25, 0.75), (0.75, 0.75)],
        5: [(0.25, 0.25), (0.75, 0.25), (0.5, 0.5), (0.25, 0.75), (0.75, 0.75)],
        6: [(0.25, 0.25), (0.75, 0.25), (0.25, 0.5), (0.75, 0.5), (0.25, 0.75), (0.75, 0.75)],
    }

    # Minimum drag distance (pixels) that counts as a fling
    FLING_DISTANCE = 60

    def __init__(self, index: int, parent=None):
        super().__init__(parent)

        self._index = index
        self._value = MIN_FACE
        self._image_key = ""
        self._rolling = False
        self._press_pos: QPoint | None = None

        self.setMinimumSize(90, 90)
        self.setContextMenuPolicy(Qt.ContextMenuPolicy.DefaultContextMenu)
        self._update_description()

    @property
    def index(self) -> int:
        return self._index

    @property
    def value(self) -> int:
        return self._value

    @property
    def image_key(self) -> str:
        return self._image_key

    def set_die(self, value: int, image_key: str) -> None:
        """Update the face and redraw."""
        self._value = value
        self._image_key = image_key
        self._update_description()
        self.update()

    def set_rolling(self, rolling: bool) -> None:
        """Highlight the die while a roll is running."""
        self._rolling = rolling
        self.update()

    def _update_description(self) -> None:
        self.setAccessibleName(str(self._value))
        self.setToolTip(f"Die {self._index + 1}: {self._value}")

    # =========================================================================
    # Painting
    # =========================================================================

    def paintEvent(self, event) -> None:
        """Draw the die face."""
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        size = min(self.width(), self.height()) - 8
        x = (self.width() - size) / 2
        y = (self.height() - size) / 2

        edge = DIE_ROLLING_EDGE_COLOR if self._rolling else DIE_EDGE_COLOR
        painter.setPen(QPen(edge, 3))
        painter.setBrush(QBrush(DIE_FACE_COLOR))
        painter.drawRoundedRect(QRectF(x, y, size, size), size * 0.12, size * 0.12)

        pip_radius = size / 10
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(DIE_PIP_COLOR))
        for px, py in self.PIP_POSITIONS.get(self._value, []):
            cx = x + px * size
            cy = y + py * size
            painter.drawEllipse(QRectF(cx - pip_radius, cy - pip_radius, pip_radius * 2, pip_radius * 2))

    # =========================================================================
    # Gestures
    # =========================================================================

    def mouseDoubleClickEvent(self, event) -> None:
        """Add one on double-click."""
        if event.button() == Qt.MouseButton.LeftButton:
            self.increment_requested.emit(self._index)

    def mousePressEvent(self, event) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self._press_pos = event.position().toPoint()

    def mouseReleaseEvent(self, event) -> None:
        """Roll all dice when the mouse was dragged far enough."""
        if event.button() != Qt.MouseButton.LeftButton or self._press_pos is None:
            return

        delta = event.position().toPoint() - self._press_pos
        self._press_pos = None
        if delta.manhattanLength() >= self.FLING_DISTANCE:
            self.roll_all_requested.emit()

    def contextMenuEvent(self, event) -> None:
        """Show the options menu for this die."""
        menu = self.build_context_menu()
        menu.exec(event.globalPos())

    def build_context_menu(self) -> QMenu:
        """Build the options menu for this die."""
        menu = QMenu(self)
        menu.setTitle(f"Die {self._index + 1} options")

        title = menu.addAction(f"Die {self._index + 1} options")
        title.setEnabled(False)
        menu.addSeparator()

        add_action = menu.addAction("Add one")
        add_action.triggered.connect(lambda: self.increment_requested.emit(self._index))

        subtract_action = menu.addAction("Subtract one")
        subtract_action.triggered.connect(lambda: self.decrement_requested.emit(self._index))

        roll_action = menu.addAction("Roll")
        roll_action.triggered.connect(lambda: self.roll_requested.emit(self._index))

        return menu
