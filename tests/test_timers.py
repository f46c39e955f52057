"""Tests for pacman_engine.timers."""

from pacman_engine.timers import Scheduler


class TestScheduler:
    def test_fires_when_due(self):
        scheduler = Scheduler()
        fired = []
        scheduler.call_later(100, lambda: fired.append("a"))
        scheduler.advance_to(99)
        assert fired == []
        scheduler.advance_to(100)
        assert fired == ["a"]

    def test_fires_once(self):
        scheduler = Scheduler()
        fired = []
        scheduler.call_later(10, lambda: fired.append(1))
        scheduler.advance_to(50)
        scheduler.advance_to(500)
        assert fired == [1]

    def test_cancelled_timer_never_fires(self):
        scheduler = Scheduler()
        fired = []
        handle = scheduler.call_later(10, lambda: fired.append(1))
        handle.cancel()
        scheduler.advance_to(1000)
        assert fired == []
        assert scheduler.pending == 0

    def test_runs_in_due_order(self):
        scheduler = Scheduler()
        fired = []
        scheduler.call_later(300, lambda: fired.append("late"))
        scheduler.call_later(100, lambda: fired.append("early"))
        scheduler.call_later(100, lambda: fired.append("early-2"))
        scheduler.advance_to(1000)
        assert fired == ["early", "early-2", "late"]

    def test_delay_is_relative_to_current_time(self):
        scheduler = Scheduler(now=1000)
        handle = scheduler.call_later(500, lambda: None)
        assert handle.due == 1500

    def test_clock_never_runs_backwards(self):
        scheduler = Scheduler()
        scheduler.advance_to(800)
        scheduler.advance_to(200)
        assert scheduler.now == 800
