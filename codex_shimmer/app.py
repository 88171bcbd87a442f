"""
Standalone entry point: panel window plus tray icon
"""
import sys

from PyQt6.QtWidgets import QApplication, QSystemTrayIcon

from codex_shimmer.logger import configure_logging
from codex_shimmer.panel import ShimmerPanel
from codex_shimmer.settings_manager import SettingsManager
from codex_shimmer.tray import Tray


def main(argv=None):
    configure_logging()
    app = QApplication(sys.argv if argv is None else argv)
    # with a tray icon, hiding the panel must not end the app
    app.setQuitOnLastWindowClosed(not QSystemTrayIcon.isSystemTrayAvailable())

    entries = SettingsManager().load_entries()
    panel = ShimmerPanel(entries)
    panel.adjustSize()
    panel.move_to_top_right()
    panel.show()

    tray = Tray(app, panel)
    tray.show()

    return app.exec()
