"""
Standalone host window for the shimmer module
"""
from PyQt6.QtWidgets import QWidget, QApplication, QHBoxLayout
from PyQt6.QtGui import QPainter
from PyQt6.QtCore import Qt

from codex_shimmer import module
from codex_shimmer.panel_renderer import paint_panel

PANEL_STYLE = """
#codex-shimmer[tags~="error"] { background: rgba(160, 40, 40, 60); border-radius: 8px; }
"""


class ShimmerPanel(QWidget):
    """Small frameless always-on-top panel holding one module instance"""

    def __init__(self, entries=None):
        super().__init__()
        self.radius = 14

        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)
        self.setWindowFlags(
            Qt.WindowType.FramelessWindowHint
            | Qt.WindowType.WindowStaysOnTopHint
            | Qt.WindowType.Tool
        )
        self.setMinimumSize(120, 32)
        self.setStyleSheet(PANEL_STYLE)

        self.layout = QHBoxLayout(self)
        self.layout.setContentsMargins(14, 6, 14, 6)

        self.handle = module.initialize(entries, self)
        self.layout.addWidget(self.handle.container)

    def move_to_top_right(self):
        """Position panel at top-right corner of screen"""
        screen = QApplication.primaryScreen().availableGeometry()
        x = screen.x() + screen.width() - self.width() - 30  # 30px margin
        y = screen.y() + 30
        self.move(x, y)

    def reload(self):
        return module.invoke_action(self.handle, module.RELOAD_ACTION)

    def toggle_visible(self):
        if self.isVisible():
            self.hide()
        else:
            self.show()
            module.notify_redraw(self.handle)

    def resizeEvent(self, event):
        module.notify_redraw(self.handle)
        super().resizeEvent(event)

    def paintEvent(self, event):
        painter = QPainter(self)
        paint_panel(self, painter)

    def closeEvent(self, event):
        module.teardown(self.handle)
        self.handle = None
        event.accept()
