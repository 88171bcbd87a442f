"""
Keeps the cache store in sync with the cache file on disk
"""
import enum
import os

from PyQt6.QtCore import QFileSystemWatcher, QObject

from codex_shimmer.content import LoadError, UnreadableError, load_content
from codex_shimmer.logger import get_logger

log = get_logger(__name__)


class FileEvent(enum.Enum):
    CHANGED = "changed"
    CHANGES_DONE = "changes-done"
    DELETED = "deleted"
    CREATED = "created"
    ATTRIBUTE_CHANGED = "attribute-changed"
    PRE_UNMOUNT = "pre-unmount"
    UNMOUNTED = "unmounted"
    MOVED = "moved"
    RENAMED = "renamed"
    MOVED_IN = "moved-in"
    MOVED_OUT = "moved-out"


RELOAD_EVENTS = frozenset({
    FileEvent.CHANGED,
    FileEvent.CREATED,
    FileEvent.CHANGES_DONE,
    FileEvent.MOVED_IN,
    FileEvent.MOVED,
})


class UpdateManager(QObject):
    """Watches the cache file and reloads it into the store"""

    def __init__(self, cache_path, store, clock, parent=None):
        super().__init__(parent)
        self.cache_path = os.path.abspath(cache_path)
        self.store = store
        self.clock = clock
        self.watching = None

        self.watcher = QFileSystemWatcher(self)
        self.watcher.fileChanged.connect(self._on_file_changed)
        self.watcher.directoryChanged.connect(self._on_directory_changed)

    def start_updates(self):
        """Arms the watch and performs the first load"""
        self.rearm()
        return self.reload()

    def reload(self):
        """Loads the cache file; on failure the current content stays"""
        try:
            content = load_content(self.cache_path)
        except UnreadableError as e:
            log.info("unable to read %s", e)
            return False
        except LoadError as e:
            log.warning("failed to parse %s", e)
            return False

        self.store.apply(content)
        self.clock.reset()
        # the file (or its directory) may have appeared since the last arm
        if self.cache_path not in self.watcher.files():
            self.rearm()
        width = self.store.text_size[0]
        log.info("refreshed text '%s' (width=%d)", content.text, int(width))
        return True

    def on_file_event(self, event):
        if event in RELOAD_EVENTS:
            self.reload()
        else:
            log.debug("ignoring %s event for %s", event.value, self.cache_path)
        self.rearm()

    def rearm(self):
        """
        (Re)installs the watch on the file and on its directory.

        QFileSystemWatcher drops a file once it is replaced or removed,
        the directory watch is what notices it coming back.
        """
        directory = os.path.dirname(self.cache_path)
        ok = True

        if directory not in self.watcher.directories():
            if not os.path.isdir(directory) or not self.watcher.addPath(directory):
                ok = False

        if self.cache_path in self.watcher.files():
            self.watcher.removePath(self.cache_path)
        if os.path.exists(self.cache_path):
            if not self.watcher.addPath(self.cache_path):
                ok = False
        elif directory not in self.watcher.directories():
            ok = False

        # warn once per transition into the unwatched state
        if not ok and self.watching is not False:
            log.warning("unable to monitor %s", self.cache_path)
        self.watching = ok
        return ok

    def _on_file_changed(self, path):
        if os.path.exists(path):
            self.on_file_event(FileEvent.CHANGED)
        else:
            self.on_file_event(FileEvent.DELETED)

    def _on_directory_changed(self, path):
        if self.cache_path in self.watcher.files():
            return
        if os.path.exists(self.cache_path):
            self.on_file_event(FileEvent.CREATED)

    def stop(self):
        """Drops every watch (on teardown)"""
        paths = self.watcher.files() + self.watcher.directories()
        if paths:
            self.watcher.removePaths(paths)
        self.watching = False
