"""Tests for the time-based change count cache."""

from unittest.mock import Mock

from gitpulse.cache import ChangeCache


class TestChangeCache:
    def test_first_access_computes(self):
        counter = Mock(return_value=5)
        cache = ChangeCache(counter)

        assert cache.value is None
        assert cache.last_update == 0.0
        assert cache.get("/work", now=100.0, interval=30) == 5
        counter.assert_called_once_with("/work")
        assert cache.last_update == 100.0

    def test_first_access_at_epoch_computes(self):
        cache = ChangeCache(Mock(return_value=3))
        assert cache.get("/work", now=0.0, interval=30) == 3

    def test_values_within_interval_are_reused(self):
        counter = Mock(side_effect=[5, 9])
        cache = ChangeCache(counter)

        results = [cache.get("/work", now=t, interval=30) for t in (0, 10, 20)]

        assert results == [5, 5, 5]
        assert counter.call_count == 1

    def test_recomputes_once_after_interval(self):
        counter = Mock(side_effect=[5, 9])
        cache = ChangeCache(counter)

        cache.get("/work", now=0, interval=30)
        assert cache.get("/work", now=31, interval=30) == 9
        assert cache.get("/work", now=40, interval=30) == 9
        assert counter.call_count == 2
        assert cache.last_update == 31

    def test_boundary_is_inclusive(self):
        counter = Mock(side_effect=[1, 2])
        cache = ChangeCache(counter)

        cache.get("/work", now=0, interval=30)
        assert cache.get("/work", now=30, interval=30) == 2

    def test_zero_interval_always_recomputes(self):
        counter = Mock(side_effect=[1, 2, 3])
        cache = ChangeCache(counter)

        assert [cache.get("/work", now=5, interval=0) for _ in range(3)] == [1, 2, 3]
