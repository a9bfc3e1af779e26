"""Hypothesis strategies for langmatch property-based testing.

Usage:
    from tests.strategies import locale_ids, candidate_lists
    from tests.strategies.locales import locale_by_family

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - locale_by_family, locale_ids
"""

from .locales import (
    candidate_lists,
    locale_by_family,
    locale_ids,
    locale_tags,
    variant_subtags,
)

__all__ = [
    "candidate_lists",
    "locale_by_family",
    "locale_ids",
    "locale_tags",
    "variant_subtags",
]
