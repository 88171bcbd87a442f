"""
Shimmer rendering - turns elapsed time into a highlight band and paints it

plan_frame() is pure and only needs a measuring function, paint_frame()
replays the resulting plan on a QPainter.
"""
import math
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from PyQt6.QtCore import QPointF
from PyQt6.QtGui import QBrush, QColor, QFontMetricsF, QLinearGradient, QPainter, QPainterPath

GRADIENT_STEPS = 96
MIN_BAND_FACTOR = 0.6


@dataclass(frozen=True)
class Sweep:
    phase: float
    envelope: float
    avg_glyph_width: float
    band_width: float
    center_px: float


@dataclass(frozen=True)
class TextPaint:
    """Base pass: the whole glyph run, SourceOver"""
    color: Tuple[int, int, int]
    alpha: float


@dataclass(frozen=True)
class HighlightPaint:
    """Gradient painted through the glyph outlines with Screen compositing"""
    gradient_start: float
    gradient_end: float
    stops: Tuple[Tuple[float, float], ...]  # (offset, alpha)
    color: Tuple[int, int, int]
    sweep: Sweep


@dataclass(frozen=True)
class FramePlan:
    text: str
    x: float
    y: float
    layout_width: float
    layout_height: float
    base: Optional[TextPaint] = None
    highlight: Optional[HighlightPaint] = None

    @property
    def painted(self):
        return self.base is not None


def envelope(phase):
    """Triangular 0 -> 1 -> 0 ramp over one sweep"""
    return phase * 2.0 if phase < 0.5 else (1.0 - phase) * 2.0


def cycle_phase(elapsed_ms, period_ms, pause_ms):
    """Sweep progress in [0, 1), or None while in the pause interval"""
    total_cycle = period_ms + pause_ms
    cycle_pos = math.fmod(elapsed_ms, total_cycle)
    if cycle_pos < 0:
        cycle_pos += total_cycle
    if cycle_pos >= period_ms:
        return None
    return cycle_pos / period_ms


def compute_sweep(layout_width, glyph_count, phase, width_chars):
    glyph_count = max(1, glyph_count)
    avg_glyph_width = layout_width / glyph_count
    base_band_width = max(avg_glyph_width * width_chars, avg_glyph_width)

    env = envelope(phase)
    floor = avg_glyph_width * MIN_BAND_FACTOR
    band_width = max(floor, base_band_width * env)
    band_width = max(band_width, floor)

    start_offset = -band_width
    travel_distance = layout_width + band_width * 2.0
    center_px = start_offset + phase * travel_distance
    return Sweep(phase, env, avg_glyph_width, band_width, center_px)


def gradient_stops(sweep, highlight_alpha, steps=GRADIENT_STEPS):
    """Returns (start, end, stops) of the Gaussian falloff around the band center"""
    gradient_start = sweep.center_px - sweep.band_width * 2.0
    gradient_end = sweep.center_px + sweep.band_width * 2.0
    if gradient_end - gradient_start < 1.0:
        gradient_end = gradient_start + 1.0

    stops = []
    for i in range(steps + 1):
        offset = i / steps
        px = gradient_start + offset * (gradient_end - gradient_start)
        delta = (px - sweep.center_px) / sweep.band_width
        gaussian = math.exp(-0.5 * delta * delta)
        alpha = min(1.0, max(0.0, highlight_alpha * sweep.envelope * gaussian))
        stops.append((offset, alpha))
    return gradient_start, gradient_end, tuple(stops)


def plan_frame(
    text: str,
    measure: Callable[[str], Tuple[float, float]],
    height: float,
    elapsed_ms: float,
    config,
) -> Optional[FramePlan]:
    """
    Describes one frame: base text pass plus, outside the pause, the
    highlight pass. Returns None for empty text.
    """
    if not text:
        return None

    layout_width, layout_height = measure(text)
    x = 0.0
    y = (height - layout_height) / 2.0
    if layout_width <= 0:
        return FramePlan(text, x, y, layout_width, layout_height)

    base = TextPaint(tuple(config.base_color), config.base_alpha)

    phase = cycle_phase(elapsed_ms, config.period_ms, config.pause_ms)
    if phase is None or config.highlight_alpha <= 0.0:
        return FramePlan(text, x, y, layout_width, layout_height, base)

    sweep = compute_sweep(layout_width, len(text), phase, config.width_chars)
    start, end, stops = gradient_stops(sweep, config.highlight_alpha)
    highlight = HighlightPaint(start, end, stops, tuple(config.highlight_color), sweep)
    return FramePlan(text, x, y, layout_width, layout_height, base, highlight)


def _rgba(color, alpha):
    red, green, blue = color
    return QColor.fromRgbF(red / 255.0, green / 255.0, blue / 255.0, alpha)


def glyph_path(plan, font):
    """Outline of the laid out text, in plan-local coordinates"""
    metrics = QFontMetricsF(font)
    path = QPainterPath()
    path.addText(QPointF(0.0, metrics.ascent()), font, plan.text)
    return path


def paint_frame(painter, plan, font):
    """Executes a FramePlan on the painter"""
    if plan is None or not plan.painted:
        return

    metrics = QFontMetricsF(font)

    painter.save()
    painter.translate(plan.x, plan.y)
    painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_SourceOver)
    painter.setFont(font)
    painter.setPen(_rgba(plan.base.color, plan.base.alpha))
    painter.drawText(QPointF(0.0, metrics.ascent()), plan.text)
    painter.restore()

    highlight = plan.highlight
    if highlight is None:
        return

    gradient = QLinearGradient(highlight.gradient_start, 0.0, highlight.gradient_end, 0.0)
    for offset, alpha in highlight.stops:
        gradient.setColorAt(offset, _rgba(highlight.color, alpha))

    path = glyph_path(plan, font)

    painter.save()
    painter.translate(plan.x, plan.y)
    painter.setClipPath(path)
    painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_Screen)
    painter.fillRect(path.boundingRect(), QBrush(gradient))
    painter.restore()
