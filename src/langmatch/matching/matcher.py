"""Matcher facade: distance and best-match selection.

Example:
    >>> from langmatch import Matcher
    >>> matcher = Matcher()
    >>> matcher.distance("zh-CN", "zh-Hans")
    0
    >>> matcher.distance("zh-HK", "zh-MO")
    40
    >>> matcher.distance("en-US", "en-CA")
    39
    >>> best, distance = matcher.matches("zh-CN", ["en", "ja", "zh-Hans", "zh-Hant"])
    >>> best, distance
    ('zh-Hans', 0)

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from langmatch.core.locale_id import LocaleId, LocaleLike, as_locale_id
from langmatch.core.resolver import ComponentResolver
from langmatch.matching.config import MatchConfig
from langmatch.matching.engine import DistanceBreakdown, DistanceEngine
from langmatch.matching.table import MatchTable

__all__ = ["Matcher"]

logger = logging.getLogger(__name__)


class Matcher:
    """CLDR enhanced language matcher.

    Distances are CLDR distances multiplied by 10; smaller is closer and
    0 means equivalent. Some CLDR rules are one-way, so argument order
    matters: the first argument is always the desired (user) locale.

    Accepts LocaleId values or identifier strings ("zh-Hant-HK", "en_US")
    wherever a locale is expected.

    Thread Safety:
        Immutable after construction. One instance may be shared by any
        number of threads without locking.
    """

    __slots__ = ("_config", "_engine", "_resolver", "_table")

    def __init__(
        self,
        table: MatchTable | None = None,
        *,
        config: MatchConfig | None = None,
        resolver: ComponentResolver | None = None,
    ) -> None:
        """Initialize matcher.

        Args:
            table: Rule table; defaults to the shared embedded CLDR table
            config: Algorithm switches and thresholds (keyword-only)
            resolver: Likely-subtag resolver (keyword-only)

        Raises:
            MatchDataError: If the embedded data is malformed
        """
        self._table = table if table is not None else MatchTable.load()
        self._config = config or MatchConfig()
        self._resolver = resolver or ComponentResolver()
        self._engine = DistanceEngine(self._table, self._resolver, self._config)

    @property
    def table(self) -> MatchTable:
        """The shared rule table."""
        return self._table

    @property
    def config(self) -> MatchConfig:
        """Active configuration."""
        return self._config

    def distance(self, desired: LocaleLike, supported: LocaleLike) -> int:
        """Distance from ``desired`` to ``supported``.

        Raises:
            ValueError: If a string identifier cannot be parsed
        """
        return self._engine.distance(as_locale_id(desired), as_locale_id(supported))

    def explain(self, desired: LocaleLike, supported: LocaleLike) -> DistanceBreakdown:
        """Per-level breakdown; ``explain(a, b).total == distance(a, b)``."""
        return self._engine.explain(as_locale_id(desired), as_locale_id(supported))

    def matches[T: (LocaleId, str)](
        self, desired: LocaleLike, candidates: Iterable[T]
    ) -> tuple[T, int] | None:
        """Choose the closest candidate to ``desired``.

        Every candidate is scored; the first candidate with the minimum
        distance wins (stable, no re-sorting). The returned candidate is
        the caller's own object.

        Args:
            desired: The user's locale
            candidates: Supported locales in preference order

        Returns:
            (candidate, distance), or None if ``candidates`` is empty or the
            best distance is not below ``config.max_distance``
        """
        desired_id = self._resolver.resolve(as_locale_id(desired))
        best: tuple[T, int] | None = None
        for candidate in candidates:
            distance = self._engine.distance(desired_id, as_locale_id(candidate))
            if best is None or distance < best[1]:
                best = (candidate, distance)
                if distance == 0:
                    break
        if best is None:
            return None
        limit = self._config.max_distance
        if limit is not None and best[1] >= limit:
            logger.debug(
                "Best match %s for %s at distance %d rejected (limit %d)",
                best[0],
                desired_id,
                best[1],
                limit,
            )
            return None
        return best

    def rank[T: (LocaleId, str)](
        self, desired: LocaleLike, candidates: Iterable[T]
    ) -> list[tuple[T, int]]:
        """All candidates with their distances, closest first.

        Ties keep candidate order. ``config.max_distance`` does not filter.
        """
        desired_id = self._resolver.resolve(as_locale_id(desired))
        scored = [
            (candidate, self._engine.distance(desired_id, as_locale_id(candidate)))
            for candidate in candidates
        ]
        return sorted(scored, key=lambda item: item[1])

    def __repr__(self) -> str:
        return f"Matcher(table={self._table!r}, config={self._config!r})"
