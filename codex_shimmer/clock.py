"""
Animation clock: elapsed time since the last content reload plus a redraw tick
"""
import time

from PyQt6.QtCore import QObject, QTimer, pyqtSignal


class AnimationClock(QObject):
    """Keeps the animation epoch and fires `tick` every tick_ms"""

    tick = pyqtSignal()

    def __init__(self, tick_ms, clock=time.monotonic, parent=None):
        super().__init__(parent)
        self._clock = clock
        self._epoch = clock()

        self.timer = QTimer(self)
        self.timer.setInterval(tick_ms)
        self.timer.timeout.connect(self.tick.emit)

    @property
    def epoch(self):
        return self._epoch

    def now(self):
        return self._clock()

    def reset(self, now=None):
        """Moves the epoch to `now`; it never goes backwards"""
        if now is None:
            now = self._clock()
        self._epoch = max(self._epoch, now)

    def elapsed_ms(self, now=None):
        if now is None:
            now = self._clock()
        return (now - self._epoch) * 1000.0

    def start(self):
        self.timer.start()

    def stop(self):
        if self.timer.isActive():
            self.timer.stop()

    def is_running(self):
        return self.timer.isActive()
