"""Distance computation and best-match selection.

Exports:
    Matcher: Facade over table, resolver and engine
    MatchTable: Immutable CLDR rule table
    DistanceEngine: Per-level distance combination
    DistanceBreakdown: Per-level result of DistanceEngine.explain
    MatchConfig: Algorithm switches and thresholds
    DistanceRule, LocalePattern, SubtagPattern: Rule pattern types

Python 3.13+.
"""

from .config import MatchConfig
from .engine import DistanceBreakdown, DistanceEngine
from .matcher import Matcher
from .patterns import DistanceRule, LocalePattern, SubtagPattern
from .table import MatchTable

__all__ = [
    "DistanceBreakdown",
    "DistanceEngine",
    "DistanceRule",
    "LocalePattern",
    "MatchConfig",
    "MatchTable",
    "Matcher",
    "SubtagPattern",
]
