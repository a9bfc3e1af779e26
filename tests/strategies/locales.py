"""Hypothesis strategies for locale matching tests.

Provides strategies for generating locale identifier strings and LocaleId
values drawn from the families the CLDR matching rules single out
(English, Spanish, Portuguese, Chinese, Arabic regions; Serbian scripts;
Scandinavian and one-way fallback languages) plus unknown languages.

Usage:
    from hypothesis import given
    from tests.strategies.locales import locale_ids, candidate_lists

    @given(desired=locale_ids(), candidates=candidate_lists())
    def test_best_match(desired, candidates):
        ...
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

from langmatch import LocaleId

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy

# ============================================================================
# LOCALE IDENTIFIER STRINGS
# ============================================================================

# Grouped by the rule family they exercise.
_LOCALE_FAMILIES: dict[str, list[str]] = {
    "english": ["en", "en-US", "en-GB", "en-CA", "en-AU", "en-IN", "en-PR", "en-001"],
    "spanish": ["es", "es-ES", "es-MX", "es-419", "es-AR", "es-US"],
    "portuguese": ["pt", "pt-BR", "pt-PT", "pt-AO", "pt-US"],
    "chinese": ["zh", "zh-CN", "zh-TW", "zh-HK", "zh-MO", "zh-Hans", "zh-Hant", "zh-SG"],
    "arabic": ["ar", "ar-EG", "ar-MA", "ar-DZ", "ar-SA"],
    "script": ["sr-Latn", "sr-Cyrl", "sr", "uz-Latn", "ja", "ko"],
    "oneway": ["gsw", "lb", "de", "de-AT", "ta", "ca", "af", "nl"],
    "nordic": ["nb", "nn", "da", "sv"],
    "unknown": ["und", "qaa", "und-TW"],
}

_ALL_LOCALES: list[str] = [tag for tags in _LOCALE_FAMILIES.values() for tag in tags]

locale_tags: SearchStrategy[str] = st.sampled_from(_ALL_LOCALES)

# Variant subtags Babel's parser accepts (4 chars starting with a digit, or 5-8 chars)
variant_subtags: SearchStrategy[str] = st.sampled_from(
    ["1996", "1901", "POSIX", "VALENCIA", "FONIPA", "PINYIN"]
)


@composite
def locale_by_family(draw: st.DrawFn) -> str:
    """Generate a locale tag with event emission for its rule family.

    Events emitted:
    - locale_family={english|spanish|portuguese|chinese|arabic|script|oneway|nordic|unknown}
    """
    family = draw(st.sampled_from(sorted(_LOCALE_FAMILIES)))
    event(f"locale_family={family}")
    return draw(st.sampled_from(_LOCALE_FAMILIES[family]))


# ============================================================================
# LocaleId VALUES
# ============================================================================


@composite
def locale_ids(draw: st.DrawFn, *, with_variants: bool = True) -> LocaleId:
    """Generate a LocaleId, optionally carrying variant subtags.

    Events emitted:
    - locale_variants={0|1|2}
    """
    locale = LocaleId.parse(draw(locale_by_family()))
    if with_variants:
        variants = draw(st.lists(variant_subtags, max_size=2, unique=True))
        event(f"locale_variants={len(variants)}")
        locale = replace(locale, variants=tuple(variants))
    return locale


def candidate_lists(*, min_size: int = 0, max_size: int = 8) -> SearchStrategy[list[LocaleId]]:
    """Lists of supported locales, duplicates allowed (exercises tie-breaking)."""
    return st.lists(locale_ids(with_variants=False), min_size=min_size, max_size=max_size)
