"""Concurrent access tests.

Tests for thread safety of Matcher:
- Concurrent distance() and matches() calls on one shared instance
- Concurrent first use of the shared table and resolver cache
- Consistent results across threads

Structure:
    - TestConcurrentMatchingBasic: Essential tests (run in every CI build)
    - TestConcurrentConsistency: Property-based concurrency tests (fuzz-marked)
"""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor, as_completed

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from langmatch import ComponentResolver, LocaleId, Matcher, MatchTable
from tests.strategies.locales import candidate_lists, locale_ids

_PAIRS = [
    ("zh-CN", "zh-Hans", 0),
    ("zh-HK", "zh-MO", 40),
    ("en-US", "en-CA", 39),
    ("gsw", "de", 80),
    ("de", "gsw", 840),
    ("zh-Hant", "zh-Hans", 230),
]

# =============================================================================
# Essential Concurrency Tests (Run in every CI build)
# =============================================================================


class TestConcurrentMatchingBasic:
    """Essential thread safety tests that run in every CI build."""

    def test_concurrent_distances(self) -> None:
        """Many threads computing known distances on one matcher."""
        matcher = Matcher()

        with ThreadPoolExecutor(max_workers=10) as executor:
            futures = {
                executor.submit(matcher.distance, desired, supported): expected
                for _ in range(20)
                for desired, supported, expected in _PAIRS
            }
            for future in as_completed(futures):
                assert future.result() == futures[future]

    def test_concurrent_matches(self) -> None:
        """Many threads selecting best matches from the same candidate list."""
        matcher = Matcher()
        candidates = ["en", "ja", "zh-Hans", "zh-Hant"]
        desired = ["zh-CN", "zh-TW"] * 50

        with ThreadPoolExecutor(max_workers=10) as executor:
            results = list(executor.map(lambda tag: matcher.matches(tag, candidates), desired))

        assert results == [("zh-Hans", 0), ("zh-Hant", 0)] * 50

    def test_concurrent_first_use_of_resolver(self) -> None:
        """A fresh resolver cache filled from many threads at once."""
        resolver = ComponentResolver()
        matcher = Matcher(MatchTable.load(), resolver=resolver)
        barrier = threading.Barrier(8)
        results: list[int] = []
        lock = threading.Lock()

        def worker() -> None:
            barrier.wait()
            distance = matcher.distance("es-MX", "es-419")
            with lock:
                results.append(distance)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results == [39] * 8
        assert resolver.cache_info().currsize >= 1


# =============================================================================
# Intensive Concurrency Tests (Fuzz-marked, run with pytest -m fuzz)
# =============================================================================


@pytest.mark.fuzz
class TestConcurrentConsistency:
    """Property-based checks that threaded results equal sequential ones.

    Designed for dedicated fuzzing runs, not every CI build.
    """

    @given(
        desired=st.lists(locale_ids(), min_size=1, max_size=10),
        candidates=candidate_lists(min_size=1),
        worker_count=st.integers(min_value=2, max_value=8),
    )
    @settings(max_examples=20, deadline=None)
    def test_matches_deterministic(
        self, desired: list[LocaleId], candidates: list[LocaleId], worker_count: int
    ) -> None:
        event(f"worker_count={worker_count}")
        matcher = Matcher()
        expected = [matcher.matches(locale, candidates) for locale in desired]

        with ThreadPoolExecutor(max_workers=worker_count) as pool:
            actual = list(pool.map(lambda locale: matcher.matches(locale, candidates), desired))

        assert actual == expected

    @given(
        pairs=st.lists(st.tuples(locale_ids(), locale_ids()), min_size=1, max_size=20),
        worker_count=st.integers(min_value=2, max_value=8),
    )
    @settings(max_examples=20, deadline=None)
    def test_distances_with_shared_cold_resolver(
        self, pairs: list[tuple[LocaleId, LocaleId]], worker_count: int
    ) -> None:
        event(f"worker_count={worker_count}")
        reference = Matcher()
        expected = [reference.distance(a, b) for a, b in pairs]

        matcher = Matcher(resolver=ComponentResolver(cache_size=4))
        with ThreadPoolExecutor(max_workers=worker_count) as pool:
            actual = list(pool.map(lambda pair: matcher.distance(*pair), pairs))

        assert actual == expected
