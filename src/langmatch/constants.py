"""Shared constants for langmatch.

This module provides centralized configuration constants used across
the core and matching packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Distance scale: Conversion between CLDR units and langmatch units
- Level defaults: Distances applied when no rule matches at a level
- Thresholds: CLDR demotion threshold for "no match"
- Cache limits: Memory bounds for the resolver cache

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Distance scale
    "DISTANCE_SCALE",
    "PARADIGM_DISCOUNT",
    # Level defaults
    "DEFAULT_LANGUAGE_DISTANCE",
    "DEFAULT_SCRIPT_DISTANCE",
    "DEFAULT_REGION_DISTANCE",
    # Thresholds
    "CLDR_NO_MATCH_THRESHOLD",
    # Subtags
    "UNKNOWN_LANGUAGE",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# DISTANCE SCALE
# ============================================================================
#
# CLDR languageMatch distances are small integers (1, 4, 5, 50, 80...).
# langmatch multiplies every rule distance by 10 so the paradigm discount
# can be expressed as an integer without reordering rule results:
#
#   en-US -> en-CA   CLDR 4  => 40, minus 1 (en-US is a paradigm locale) => 39
#   zh-HK -> zh-MO   CLDR 4  => 40
#
# ============================================================================

# Multiplier applied to raw CLDR distances.
DISTANCE_SCALE: int = 10

# Subtracted from a region distance when exactly one side is a paradigm locale.
PARADIGM_DISCOUNT: int = 1

# ============================================================================
# LEVEL DEFAULTS
# ============================================================================

# Applied when no rule matches two different language subtags.
# Mirrors the CLDR catch-all rule desired="*" supported="*" distance="80".
DEFAULT_LANGUAGE_DISTANCE: int = 800

# Applied when no rule matches two different script subtags.
# Mirrors desired="*_*" supported="*_*" distance="50".
DEFAULT_SCRIPT_DISTANCE: int = 500

# Applied when no rule matches two different region subtags.
# Mirrors desired="*_*_*" supported="*_*_*" distance="4".
DEFAULT_REGION_DISTANCE: int = 40

# ============================================================================
# THRESHOLDS
# ============================================================================

# CLDR treats a scaled distance of 1000 or more as "no usable match".
# Pass as MatchConfig(max_distance=...) to reject such candidates.
CLDR_NO_MATCH_THRESHOLD: int = 1000

# ============================================================================
# SUBTAGS
# ============================================================================

# BCP-47 "undetermined" language; keys the generic likely-subtags entries.
UNKNOWN_LANGUAGE: str = "und"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached resolver results per ComponentResolver.
# Matching workloads reuse a small set of supported locales, so 512 entries
# keep every candidate of a typical application warm.
MAX_LOCALE_CACHE_SIZE: int = 512
