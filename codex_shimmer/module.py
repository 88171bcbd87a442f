"""
Host-facing lifecycle of the shimmer module
"""
from codex_shimmer.cache_store import CacheStore
from codex_shimmer.clock import AnimationClock
from codex_shimmer.config import parse_config
from codex_shimmer.logger import get_logger
from codex_shimmer.shimmer_widget import ShimmerContainer, ShimmerWidget
from codex_shimmer.update_manager import UpdateManager

log = get_logger(__name__)

RELOAD_ACTION = "reload"


class ShimmerModule:
    """
    One running instance: config, content store, clock, widgets and watcher.

    on_tick / on_file_event / on_paint_request are the three entry points
    the event loop drives; a test harness can call them directly.
    """

    def __init__(self, config, parent=None):
        self.config = config

        self.container = ShimmerContainer(parent)
        self.store = CacheStore(parent=self.container)
        self.clock = AnimationClock(config.tick_ms, parent=self.container)
        self.widget = ShimmerWidget(self.store, self.clock, config, self.container)
        self.container.add_drawing_area(self.widget)
        self.store.tags_changed.connect(self.container.apply_tags)
        self.clock.tick.connect(self.on_tick)

        self.update_manager = UpdateManager(config.cache_path, self.store, self.clock, self.container)
        self._torn_down = False

    def start(self):
        self.container.show()
        self.clock.reset()
        self.update_manager.start_updates()
        self.clock.start()
        return self

    # ===== Entry points =====
    def on_tick(self):
        self.widget.update()

    def on_file_event(self, event):
        self.update_manager.on_file_event(event)

    def on_paint_request(self, painter):
        return self.widget.render_frame(painter)

    # ===== Lifecycle =====
    def notify_redraw(self):
        self.widget.update()

    def refresh(self):
        return self.update_manager.reload()

    def invoke_action(self, name):
        if name == RELOAD_ACTION:
            return self.refresh()
        log.debug("ignoring unknown action %r", name)
        return False

    def teardown(self):
        if self._torn_down:
            return
        self._torn_down = True
        self.clock.stop()
        self.update_manager.stop()
        self.container.deleteLater()


def initialize(entries=None, parent=None):
    """Builds and starts a module from key -> JSON literal config entries"""
    return ShimmerModule(parse_config(entries), parent).start()


def teardown(handle):
    if handle is not None:
        handle.teardown()


def notify_redraw(handle):
    if handle is not None:
        handle.notify_redraw()


def refresh(handle):
    if handle is None:
        return False
    return handle.refresh()


def invoke_action(handle, name):
    if handle is None or not name:
        return False
    return handle.invoke_action(name)
