"""Tests for release velocity estimation."""
import pytest

from cornerplayer.velocity import VelocityTracker


def test_no_history_reports_zero():
    tracker = VelocityTracker()
    assert tracker.velocity() == (0.0, 0.0)
    tracker.add(10, 10, 1.0)
    assert tracker.velocity() == (0.0, 0.0)


def test_velocity_uses_first_sample_older_than_window():
    tracker = VelocityTracker(window_s=0.1)
    tracker.add(0, 0, 0.00)
    tracker.add(10, -5, 0.05)
    tracker.add(40, -20, 0.20)

    vx, vy = tracker.velocity()
    assert vx == pytest.approx(200.0)
    assert vy == pytest.approx(-100.0)


def test_short_gesture_uses_oldest_sample():
    tracker = VelocityTracker(window_s=0.1)
    tracker.add(0, 0, 1.00)
    tracker.add(5, 0, 1.02)
    tracker.add(10, 0, 1.05)

    vx, vy = tracker.velocity()
    assert vx == pytest.approx(200.0)
    assert vy == 0.0


def test_stale_first_sample_is_skipped():
    # Press held still for a second, then a quick flick.
    tracker = VelocityTracker(window_s=0.1)
    tracker.add(0, 0, 0.0)
    tracker.add(0, 0, 1.05)
    tracker.add(30, 0, 1.1)

    # only the held press is older than the window, and it is stale
    vx, _ = tracker.velocity()
    assert vx == pytest.approx(600.0)


def test_zero_elapsed_time_reports_zero():
    tracker = VelocityTracker()
    tracker.add(0, 0, 2.0)
    tracker.add(50, 50, 2.0)
    assert tracker.velocity() == (0.0, 0.0)


def test_reset_clears_samples():
    tracker = VelocityTracker()
    tracker.add(0, 0, 0.0)
    tracker.add(10, 0, 0.05)
    tracker.reset()
    assert len(tracker) == 0
    assert tracker.velocity() == (0.0, 0.0)
