"""Tests for concurrent batch execution and the expiring cache."""

import threading
import time

import pytest

from pkgcurate._curation.batch import run_batch
from pkgcurate._curation.cache import MISSING, ExpiringCache


class TestRunBatch:
    """Test run_batch()."""

    def test_collects_non_none_results(self):
        results = run_batch(range(6), lambda n: n * 10 if n % 2 else None, max_workers=3)
        assert sorted(results) == [10, 30, 50]

    def test_empty_input(self):
        assert run_batch([], lambda n: n, max_workers=2) == []

    def test_worker_exception_counts_as_no_data(self):
        def worker(n):
            if n == 2:
                raise RuntimeError("boom")
            return n

        assert sorted(run_batch([1, 2, 3], worker, max_workers=3)) == [1, 3]

    def test_deadline_returns_partial_results(self):
        release = threading.Event()

        def worker(n):
            if n == "slow":
                release.wait(5)
            return n

        start = time.monotonic()
        try:
            results = run_batch(["fast", "slow"], worker, max_workers=2, deadline=0.2)
        finally:
            release.set()
        elapsed = time.monotonic() - start

        assert results == ["fast"]
        assert elapsed < 2

    def test_pending_items_are_cancelled_at_deadline(self):
        started = []
        release = threading.Event()

        def worker(n):
            started.append(n)
            release.wait(5)
            return n

        try:
            results = run_batch([1, 2, 3, 4], worker, max_workers=1, deadline=0.2)
        finally:
            release.set()

        assert results == []
        time.sleep(0.2)
        assert started == [1]


class TestExpiringCache:
    """Test ExpiringCache."""

    def test_zero_hours_disables_caching(self):
        cache = ExpiringCache(0)
        cache.put("key", "value")
        assert not cache.enabled
        assert cache.get("key") is MISSING
        assert len(cache) == 0

    def test_get_and_put(self):
        cache = ExpiringCache(1)
        cache.put("key", "value")
        assert cache.get("key") == "value"
        assert "key" in cache
        assert "other" not in cache

    def test_none_is_a_cacheable_value(self):
        cache = ExpiringCache(1)
        cache.put("key", None)
        assert cache.get("key") is None
        assert "key" in cache

    def test_entries_expire(self):
        now = [1000.0]
        cache = ExpiringCache(1, clock=lambda: now[0])
        cache.put("key", "value")

        now[0] += 3599
        assert cache.get("key") == "value"

        now[0] += 1
        assert cache.get("key", default="gone") == "gone"
        assert len(cache) == 0

    def test_clear(self):
        cache = ExpiringCache(1)
        cache.put("a", 1)
        cache.put("b", 2)
        cache.clear()
        assert len(cache) == 0

    @pytest.mark.parametrize("hours", [0.5, 2, 48])
    def test_enabled_for_positive_hours(self, hours):
        assert ExpiringCache(hours).enabled
