"""Tests for AnimationClock."""
from unittest.mock import Mock

import pytest
from PyQt6.QtTest import QTest

from codex_shimmer.clock import AnimationClock


class TestElapsed:
    def test_starts_at_zero(self, qapp, fake_clock):
        clock = AnimationClock(33, clock=fake_clock)
        assert clock.elapsed_ms() == 0.0

    def test_counts_milliseconds(self, qapp, fake_clock):
        clock = AnimationClock(33, clock=fake_clock)
        fake_clock.advance_ms(250)
        assert clock.elapsed_ms() == pytest.approx(250.0)

    def test_explicit_now(self, qapp, fake_clock):
        clock = AnimationClock(33, clock=fake_clock)
        assert clock.elapsed_ms(fake_clock.now + 1.5) == pytest.approx(1500.0)

    def test_reset_restarts_from_zero(self, qapp, fake_clock):
        clock = AnimationClock(33, clock=fake_clock)
        fake_clock.advance_ms(800)
        clock.reset()
        assert clock.elapsed_ms() == 0.0
        fake_clock.advance_ms(10)
        assert clock.elapsed_ms() == pytest.approx(10.0)

    def test_epoch_never_moves_backwards(self, qapp, fake_clock):
        clock = AnimationClock(33, clock=fake_clock)
        epoch = clock.epoch
        clock.reset(epoch - 5.0)
        assert clock.epoch == epoch


class TestTicking:
    def test_interval_follows_tick_ms(self, qapp, fake_clock):
        clock = AnimationClock(40, clock=fake_clock)
        assert clock.timer.interval() == 40

    def test_start_and_stop(self, qapp, fake_clock):
        clock = AnimationClock(40, clock=fake_clock)
        assert not clock.is_running()
        clock.start()
        assert clock.is_running()
        clock.stop()
        assert not clock.is_running()

    def test_running_timer_emits_tick(self, qapp, fake_clock):
        clock = AnimationClock(10, clock=fake_clock)
        listener = Mock()
        clock.tick.connect(listener)

        clock.start()
        QTest.qWait(200)
        clock.stop()

        assert listener.called

    def test_tick_does_not_touch_epoch(self, qapp, fake_clock):
        clock = AnimationClock(40, clock=fake_clock)
        epoch = clock.epoch
        fake_clock.advance_ms(100)
        clock.start()
        QTest.qWait(50)
        clock.stop()
        assert clock.epoch == epoch
