"""Tests for timing helpers."""

import pytest

from tinyknn.utils.metrics import CallStats, Timer


class TestTimer:

    def test_context_manager_measures_time(self):
        with Timer() as timer:
            sum(range(1000))

        assert timer.elapsed() >= 0.0
        assert timer.elapsed_ms() == pytest.approx(timer.elapsed() * 1000.0)

    def test_stop_without_start_raises(self):
        with pytest.raises(ValueError):
            Timer().stop()


class TestCallStats:

    def test_average(self):
        stats = CallStats()
        stats.record(1.0)
        stats.record(3.0)

        assert stats.calls == 2
        assert stats.average_time == pytest.approx(2.0)
        assert stats.to_dict()["avg_time"] == pytest.approx(2.0)

    def test_empty_average_is_zero(self):
        assert CallStats().average_time == 0.0

    def test_reset(self):
        stats = CallStats()
        stats.record(1.0)
        stats.reset()

        assert stats.calls == 0
        assert stats.total_time == 0.0
