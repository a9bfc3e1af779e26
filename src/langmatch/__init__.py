"""langmatch - CLDR enhanced language matching.

Computes a directional distance between a desired locale and a supported
locale using the Unicode CLDR Enhanced Language Matching rules, and picks
the closest of a list of supported locales.

Public API:
    Matcher - distance(), matches(), rank(), explain()
    MatchTable - Immutable CLDR rule table (MatchTable.load() is shared)
    MatchConfig - Algorithm switches and thresholds
    LocaleId - Structured locale identifier
    ComponentResolver - Likely-subtag maximization

Exceptions:
    DataIntegrityError - Base class for data integrity failures
    MatchDataError - Malformed matching data detected at construction

Submodules:
    langmatch.core - LocaleId and ComponentResolver
    langmatch.matching - Patterns, table, engine and facade
    langmatch.data - Embedded CLDR tables
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .core import ComponentResolver, LocaleId
from .enums import MatchLevel
from .integrity import DataIntegrityError, MatchDataError
from .matching import DistanceBreakdown, MatchConfig, Matcher, MatchTable

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("langmatch")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ComponentResolver",
    "DataIntegrityError",
    "DistanceBreakdown",
    "LocaleId",
    "MatchConfig",
    "MatchDataError",
    "MatchLevel",
    "MatchTable",
    "Matcher",
    "__version__",
]
