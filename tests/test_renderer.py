"""Tests for the shimmer frame planning and painting."""
import math
from unittest.mock import MagicMock

import pytest
from PyQt6.QtGui import QColor, QFont, QFontMetricsF, QImage, QPainter, QPainterPath

from codex_shimmer.config import ShimmerConfig
from codex_shimmer.renderer import (
    GRADIENT_STEPS,
    compute_sweep,
    cycle_phase,
    envelope,
    gradient_stops,
    glyph_path,
    paint_frame,
    plan_frame,
)


def make_config(**overrides):
    values = dict(cache_path="/tmp/latest.json", period_ms=1000.0, pause_ms=500.0,
                  width_chars=4.0, highlight_alpha=0.35)
    values.update(overrides)
    return ShimmerConfig(**values)


def fixed_measure(width, height=20.0):
    return lambda text: (width, height)


class TestEnvelope:
    def test_endpoints_and_peak(self):
        assert envelope(0.0) == 0.0
        assert envelope(0.5) == 1.0
        assert envelope(1.0 - 1e-9) == pytest.approx(0.0, abs=1e-8)

    def test_symmetric(self):
        for i in range(1, 50):
            phase = i / 100
            assert envelope(phase) == pytest.approx(envelope(1.0 - phase))

    def test_continuous_at_half(self):
        assert envelope(0.5 - 1e-9) == pytest.approx(envelope(0.5), abs=1e-8)


class TestCyclePhase:
    def test_start_of_sweep(self):
        assert cycle_phase(0.0, 1000.0, 500.0) == 0.0

    def test_mid_sweep(self):
        assert cycle_phase(250.0, 1000.0, 500.0) == pytest.approx(0.25)

    def test_pause_interval_has_no_phase(self):
        for elapsed in (1000.0, 1200.0, 1499.9, 2500.0, 2999.0):
            assert cycle_phase(elapsed, 1000.0, 500.0) is None

    def test_repeats_every_cycle(self):
        assert cycle_phase(1500.0 + 300.0, 1000.0, 500.0) == pytest.approx(0.3)
        assert cycle_phase(15 * 1500.0 + 300.0, 1000.0, 500.0) == pytest.approx(0.3)

    def test_no_pause(self):
        assert cycle_phase(1000.0, 1000.0, 0.0) == 0.0

    def test_negative_elapsed_is_folded(self):
        assert cycle_phase(-1200.0, 1000.0, 500.0) == pytest.approx(0.3)


class TestSweep:
    def test_band_never_below_floor(self):
        avg = 100.0 / 10
        for i in range(0, 100):
            sweep = compute_sweep(100.0, 10, i / 100, 4.0)
            assert sweep.band_width >= avg * 0.6

    def test_band_at_peak(self):
        sweep = compute_sweep(100.0, 10, 0.5, 4.0)
        assert sweep.avg_glyph_width == 10.0
        assert sweep.band_width == 40.0
        assert sweep.center_px == pytest.approx(-40.0 + 0.5 * (100.0 + 80.0))

    def test_starts_just_off_the_left_edge(self):
        sweep = compute_sweep(100.0, 10, 0.0, 4.0)
        assert sweep.band_width == pytest.approx(6.0)
        assert sweep.center_px == pytest.approx(-6.0)

    def test_ends_just_off_the_right_edge(self):
        sweep = compute_sweep(100.0, 10, 1.0 - 1e-9, 4.0)
        assert sweep.center_px == pytest.approx(100.0 + sweep.band_width, abs=1e-5)

    def test_center_moves_right_with_phase(self):
        centers = [compute_sweep(100.0, 10, i / 200, 4.0).center_px for i in range(200)]
        assert all(b > a for a, b in zip(centers, centers[1:]))

    def test_width_chars_below_one_glyph_uses_one_glyph(self):
        sweep = compute_sweep(100.0, 10, 0.5, 0.5)
        assert sweep.band_width == 10.0

    def test_zero_glyphs_counts_as_one(self):
        assert compute_sweep(50.0, 0, 0.5, 1.0).avg_glyph_width == 50.0


class TestGradientStops:
    def test_stop_count_and_offsets(self):
        sweep = compute_sweep(100.0, 10, 0.5, 4.0)
        start, end, stops = gradient_stops(sweep, 0.35)

        assert len(stops) == GRADIENT_STEPS + 1
        assert stops[0][0] == 0.0
        assert stops[-1][0] == 1.0
        assert start == pytest.approx(sweep.center_px - 80.0)
        assert end == pytest.approx(sweep.center_px + 80.0)

    def test_gaussian_profile(self):
        sweep = compute_sweep(100.0, 10, 0.5, 4.0)
        _, _, stops = gradient_stops(sweep, 0.35)
        alphas = [alpha for _, alpha in stops]

        peak = alphas[GRADIENT_STEPS // 2]
        assert peak == pytest.approx(0.35)
        assert max(alphas) == peak
        # edges sit two band widths away from the center
        assert alphas[0] == pytest.approx(0.35 * math.exp(-2.0))
        assert alphas[0] == pytest.approx(alphas[-1])

    def test_alpha_scaled_by_envelope(self):
        sweep = compute_sweep(100.0, 10, 0.25, 4.0)
        _, _, stops = gradient_stops(sweep, 0.8)
        assert max(alpha for _, alpha in stops) == pytest.approx(0.8 * 0.5)

    def test_alpha_clamped_to_one(self):
        sweep = compute_sweep(100.0, 10, 0.5, 4.0)
        _, _, stops = gradient_stops(sweep, 1.0)
        assert all(0.0 <= alpha <= 1.0 for _, alpha in stops)

    def test_tiny_span_is_widened(self):
        sweep = compute_sweep(0.1, 1, 0.0, 1.0)
        start, end, _ = gradient_stops(sweep, 0.35)
        assert end - start >= 1.0


class TestPlanFrame:
    def test_empty_text_renders_nothing(self):
        assert plan_frame("", fixed_measure(100.0), 30, 0.0, make_config()) is None

    def test_zero_width_layout_is_handled_without_painting(self):
        plan = plan_frame("abc", fixed_measure(0.0), 30, 250.0, make_config())
        assert plan is not None
        assert not plan.painted
        assert plan.highlight is None

    def test_vertically_centered_left_aligned(self):
        plan = plan_frame("abc", fixed_measure(60.0, 20.0), 30, 250.0, make_config())
        assert plan.x == 0.0
        assert plan.y == 5.0

    def test_base_pass_uses_base_color(self):
        config = make_config(base_alpha=0.5)
        plan = plan_frame("abc", fixed_measure(60.0), 30, 250.0, config)
        assert plan.base.color == tuple(config.base_color)
        assert plan.base.alpha == 0.5

    def test_highlight_during_sweep(self):
        plan = plan_frame("abcdefghij", fixed_measure(100.0), 30, 500.0, make_config())
        assert plan.highlight is not None
        assert plan.highlight.sweep.phase == pytest.approx(0.5)
        assert len(plan.highlight.stops) == GRADIENT_STEPS + 1

    def test_no_highlight_during_pause(self):
        config = make_config()
        for elapsed in (1000.0, 1250.0, 2600.0):
            plan = plan_frame("abc", fixed_measure(60.0), 30, elapsed, config)
            assert plan.painted
            assert plan.highlight is None

    def test_no_highlight_when_disabled(self):
        plan = plan_frame("abc", fixed_measure(60.0), 30, 500.0, make_config(highlight_alpha=0.0))
        assert plan.painted
        assert plan.highlight is None

    def test_glyph_count_is_code_points(self):
        # four code points, multi-byte in UTF-8
        plan = plan_frame("żółw", fixed_measure(40.0), 30, 500.0, make_config())
        assert plan.highlight.sweep.avg_glyph_width == 10.0

    def test_cycles_does_not_change_the_sweep(self):
        one = plan_frame("abc", fixed_measure(60.0), 30, 300.0, make_config(cycles=1.0))
        many = plan_frame("abc", fixed_measure(60.0), 30, 300.0, make_config(cycles=5.0))
        assert one.highlight == many.highlight


class TestPaintFrame:
    def test_base_only_frame(self, qapp):
        painter = MagicMock()
        plan = plan_frame("abc", fixed_measure(60.0), 30, 1200.0, make_config())

        paint_frame(painter, plan, QFont())

        painter.drawText.assert_called_once()
        painter.setClipPath.assert_not_called()

    def test_highlight_is_clipped_and_screened(self, qapp):
        painter = MagicMock()
        plan = plan_frame("abc", fixed_measure(60.0), 30, 500.0, make_config())

        paint_frame(painter, plan, QFont())

        painter.setClipPath.assert_called_once()
        modes = [c.args[0] for c in painter.setCompositionMode.call_args_list]
        assert modes == [
            QPainter.CompositionMode.CompositionMode_SourceOver,
            QPainter.CompositionMode.CompositionMode_Screen,
        ]
        painter.fillRect.assert_called_once()
        assert painter.save.call_count == painter.restore.call_count == 2

    def test_nothing_painted_for_degenerate_plan(self, qapp):
        painter = MagicMock()
        paint_frame(painter, plan_frame("abc", fixed_measure(0.0), 30, 0.0, make_config()), QFont())
        paint_frame(painter, None, QFont())
        assert painter.method_calls == []

    def test_highlight_only_brightens_ink(self, qapp):
        font = QFont()
        font.setWeight(QFont.Weight.Bold)
        metrics = QFontMetricsF(font)

        def measure(text):
            return metrics.horizontalAdvance(text), metrics.height()

        def render(elapsed_ms):
            image = QImage(200, 40, QImage.Format.Format_ARGB32_Premultiplied)
            image.fill(QColor(0, 0, 0, 0))
            plan = plan_frame("Shimmer", measure, 40, elapsed_ms, make_config())
            painter = QPainter(image)
            try:
                paint_frame(painter, plan, font)
            finally:
                painter.end()
            return image

        # 1200ms falls in the pause, 500ms is mid-sweep at full envelope
        paused, sweeping = render(1200.0), render(500.0)

        brighter = 0
        for y in range(paused.height()):
            for x in range(paused.width()):
                before = paused.pixelColor(x, y)
                after = sweeping.pixelColor(x, y)
                if before.alpha() == 0:
                    assert after.alpha() == 0, (x, y)
                    continue
                before_sum = before.red() + before.green() + before.blue()
                if after.red() + after.green() + after.blue() > before_sum:
                    brighter += 1
        assert brighter > 0

    def test_glyph_path_follows_text(self, qapp):
        plan = plan_frame("abc", fixed_measure(60.0), 30, 500.0, make_config())
        path = glyph_path(plan, QFont())
        assert isinstance(path, QPainterPath)
