"""
Holds the content currently on display and its measured size
"""
from PyQt6.QtCore import QObject, pyqtSignal

from codex_shimmer.content import DisplayContent, diff_tags


class CacheStore(QObject):
    """
    Latest successfully loaded DisplayContent.

    Content is immutable and swapped with a single assignment, so readers
    only ever see the old or the new value.
    """

    content_changed = pyqtSignal(object)
    tags_changed = pyqtSignal(tuple, tuple)  # (to_add, to_remove)

    def __init__(self, measure=None, parent=None):
        super().__init__(parent)
        self.content = DisplayContent()
        self.text_size = (0.0, 0.0)
        self._measure = measure

    def set_measure(self, measure):
        self._measure = measure
        self.remeasure()

    def remeasure(self):
        if self._measure is not None:
            self.text_size = self._measure(self.content.text)
        return self.text_size

    def apply(self, content):
        """Replaces the content; returns the (to_add, to_remove) tag diff"""
        to_add, to_remove = diff_tags(self.content.tags, content.tags)
        self.content = content
        self.remeasure()
        self.tags_changed.emit(to_add, to_remove)
        self.content_changed.emit(content)
        return to_add, to_remove
