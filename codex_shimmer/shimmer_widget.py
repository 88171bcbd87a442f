"""
Drawing area with the shimmer effect and the container carrying style tags
"""
from PyQt6.QtWidgets import QWidget, QHBoxLayout, QSizePolicy
from PyQt6.QtGui import QFont, QFontMetricsF, QPainter
from PyQt6.QtCore import Qt

from codex_shimmer.renderer import paint_frame, plan_frame

CONTAINER_NAME = "codex-shimmer"
TAGS_PROPERTY = "tags"


class ShimmerWidget(QWidget):
    """Single line of bold text with a sweeping highlight"""

    def __init__(self, store, clock, config, parent=None):
        super().__init__(parent)
        self.store = store
        self.clock = clock
        self.config = config
        self.last_plan = None

        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)

        store.set_measure(self.measure)
        store.content_changed.connect(self.on_content_changed)
        # size for whatever the store holds now, the placeholder until a load succeeds
        self.on_content_changed(store.content)

    def text_font(self):
        font = QFont(self.font())
        font.setWeight(QFont.Weight.Bold)
        return font

    def measure(self, text):
        """Pixel size of `text` laid out in the bold font"""
        metrics = QFontMetricsF(self.text_font())
        return metrics.horizontalAdvance(text), metrics.height()

    def on_content_changed(self, content):
        self.setToolTip(content.tooltip or "")
        width, height = self.store.text_size
        self.setMinimumSize(max(int(width) + 16, 80), int(height) + 8)
        self.updateGeometry()
        self.update()

    def render_frame(self, painter):
        """Paints the current frame and returns its plan"""
        plan = plan_frame(
            self.store.content.text,
            self.measure,
            self.height(),
            self.clock.elapsed_ms(),
            self.config,
        )
        if plan is not None:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            painter.setRenderHint(QPainter.RenderHint.TextAntialiasing)
            paint_frame(painter, plan, self.text_font())
        self.last_plan = plan
        return plan

    def paintEvent(self, event):
        painter = QPainter(self)
        try:
            self.render_frame(painter)
        finally:
            painter.end()


class ShimmerContainer(QWidget):
    """Root element of the module; style tags are mirrored onto it"""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName(CONTAINER_NAME)
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)
        self.tags = []

        self.layout = QHBoxLayout(self)
        self.layout.setContentsMargins(0, 0, 0, 0)
        self.layout.setSpacing(0)

    def add_drawing_area(self, widget):
        self.layout.addWidget(widget, 1, Qt.AlignmentFlag.AlignVCenter)

    def apply_tags(self, to_add, to_remove):
        """Applies a tag diff; selectors like #codex-shimmer[tags~="busy"] follow it"""
        self.tags = [tag for tag in self.tags if tag not in to_remove]
        self.tags.extend(tag for tag in to_add if tag not in self.tags)
        self.setProperty(TAGS_PROPERTY, list(self.tags))
        # dynamic property selectors only re-evaluate on repolish
        self.style().unpolish(self)
        self.style().polish(self)
        self.update()
