"""Distance engine: combines per-level lookups into a final distance.

Algorithm (both locales maximized first):

    language  0 if equal, else table lookup (default 800)
    script    0 if equal, else table lookup (default 500)
    region    0 if same language and both are paradigm locales of it,
              0 if equal,
              else table lookup (default 40), minus 1 when exactly one
              side is a paradigm locale
    total     language + script + region (not capped)

Variant subtags never contribute distance; they only take part in LocaleId
equality.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from langmatch.constants import DISTANCE_SCALE, PARADIGM_DISCOUNT
from langmatch.core.locale_id import LocaleId
from langmatch.core.resolver import ComponentResolver
from langmatch.enums import MatchLevel
from langmatch.matching.config import MatchConfig
from langmatch.matching.table import MatchTable

__all__ = ["DistanceBreakdown", "DistanceEngine"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DistanceBreakdown:
    """Per-level distances between two maximized locales.

    Immutable, thread-safe, hashable.

    Attributes:
        desired: Maximized desired locale
        supported: Maximized supported locale
        language: Language-level distance
        script: Script-level distance
        region: Region-level distance
    """

    desired: LocaleId
    supported: LocaleId
    language: int
    script: int
    region: int

    @property
    def total(self) -> int:
        """Sum of the three level distances."""
        return self.language + self.script + self.region

    def for_level(self, level: MatchLevel) -> int:
        """Distance contributed by ``level``."""
        match level:
            case MatchLevel.LANGUAGE:
                return self.language
            case MatchLevel.SCRIPT:
                return self.script
            case _:
                return self.region


class DistanceEngine:
    """Computes directional distances over a shared MatchTable.

    Thread Safety:
        Holds only immutable collaborators. Safe to share across threads.
    """

    __slots__ = ("_config", "_resolver", "_table")

    def __init__(
        self,
        table: MatchTable,
        resolver: ComponentResolver,
        config: MatchConfig | None = None,
    ) -> None:
        """Initialize engine.

        Args:
            table: Rule table consulted at every level
            resolver: Maximizes both locales before comparison
            config: Algorithm switches and level defaults
        """
        self._table = table
        self._resolver = resolver
        self._config = config or MatchConfig()

    def distance(self, desired: LocaleId, supported: LocaleId) -> int:
        """Distance from ``desired`` to ``supported``; 0 means equivalent.

        Directional: rules marked oneway only apply desired -> supported.
        """
        return self.explain(desired, supported).total

    def explain(self, desired: LocaleId, supported: LocaleId) -> DistanceBreakdown:
        """Per-level breakdown of ``distance(desired, supported)``."""
        desired = self._resolver.resolve(desired)
        supported = self._resolver.resolve(supported)
        return DistanceBreakdown(
            desired=desired,
            supported=supported,
            language=self._level_distance(MatchLevel.LANGUAGE, desired, supported),
            script=self._level_distance(MatchLevel.SCRIPT, desired, supported),
            region=self._region_distance(desired, supported),
        )

    def _level_distance(self, level: MatchLevel, desired: LocaleId, supported: LocaleId) -> int:
        if desired.subtags(level)[-1] == supported.subtags(level)[-1]:
            return 0
        rule = self._table.find_rule(level, desired, supported)
        if rule is None:
            default = self._config.default_for(level)
            logger.debug(
                "No %s rule for %s -> %s; using default %d", level, desired, supported, default
            )
            return default
        return rule.distance * DISTANCE_SCALE

    def _region_distance(self, desired: LocaleId, supported: LocaleId) -> int:
        if self._config.collapse_paradigm_regions and self._table.is_paradigm(desired, supported):
            return 0
        if desired.region == supported.region:
            return 0
        distance = self._level_distance(MatchLevel.REGION, desired, supported)
        if self._config.paradigm_discount and (
            self._table.is_paradigm_locale(desired) != self._table.is_paradigm_locale(supported)
        ):
            distance = max(distance - PARADIGM_DISCOUNT, 0)
        return distance
