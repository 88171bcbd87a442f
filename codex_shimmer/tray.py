from PyQt6.QtWidgets import QSystemTrayIcon, QMenu, QStyle
from PyQt6.QtGui import QAction


class Tray:
    """
    Tray icon with quick access to the panel: reload, show / hide, quit.
    """

    def __init__(self, app, panel):
        self.app = app
        self.panel = panel

        icon = app.style().standardIcon(QStyle.StandardPixmap.SP_BrowserReload)
        self.tray_icon = QSystemTrayIcon(icon, self.app)
        self.tray_icon.setToolTip("Codex shimmer")

        self.menu = QMenu()

        self.reload_action = QAction("Reload")
        self.reload_action.triggered.connect(self.reload)
        self.menu.addAction(self.reload_action)

        self.toggle_action = QAction("Show / Hide")
        self.toggle_action.triggered.connect(self.toggle_panel)
        self.menu.addAction(self.toggle_action)

        self.menu.addSeparator()

        self.quit_action = QAction("Quit")
        self.quit_action.triggered.connect(self.quit_app)
        self.menu.addAction(self.quit_action)

        self.tray_icon.setContextMenu(self.menu)

    def show(self):
        if QSystemTrayIcon.isSystemTrayAvailable():
            self.tray_icon.show()

    def reload(self):
        if self.panel and self.panel.handle:
            self.panel.reload()

    def toggle_panel(self):
        if self.panel:
            self.panel.toggle_visible()

    def quit_app(self):
        self.tray_icon.hide()
        if self.panel:
            self.panel.close()
        self.app.quit()
