"""Likely-subtag resolution (locale maximization).

Expands a LocaleId to its fully populated form so that every comparison in
the distance engine sees a language, a script and a region. Uses the CLDR
likelySubtags table shipped with Babel.

Lookup order, first hit wins:
    lang_Script_REGION, lang_REGION, lang_Script, lang,
    und_Script_REGION, und_REGION, und_Script, und

Only missing subtags are taken from the hit; subtags already present and
all variants are preserved. A language absent from the table falls through
to the ``und`` entries instead of failing.

Python 3.13+. Uses Babel for CLDR data.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Mapping
from dataclasses import replace

from babel.core import parse_locale

from langmatch.constants import MAX_LOCALE_CACHE_SIZE, UNKNOWN_LANGUAGE
from langmatch.core.locale_id import LocaleId
from langmatch.integrity import IntegrityContext, MatchDataError

__all__ = ["ComponentResolver"]

logger = logging.getLogger(__name__)


class ComponentResolver:
    """Fills in missing script and region subtags from likely-subtag data.

    Thread Safety:
        The likely-subtag mapping is never mutated after construction. The
        result cache is a functools.lru_cache, which is internally locked.

    Example:
        >>> resolver = ComponentResolver()
        >>> str(resolver.resolve(LocaleId.parse("zh-HK")))
        'zh-Hant-HK'
        >>> str(resolver.resolve(LocaleId.parse("qaa")))
        'qaa-Latn-US'
    """

    __slots__ = ("_likely_subtags", "_resolve_cached")

    def __init__(
        self,
        likely_subtags: Mapping[str, str] | None = None,
        *,
        cache_size: int = MAX_LOCALE_CACHE_SIZE,
    ) -> None:
        """Initialize resolver.

        Args:
            likely_subtags: Mapping from partial identifiers ("zh_TW", "und_HK")
                to maximized identifiers ("zh_Hant_TW"), POSIX separators.
                Defaults to Babel's CLDR likely_subtags table.
            cache_size: Maximum memoized results (keyword-only)

        Raises:
            MatchDataError: If the mapping has no ``und`` entry
        """
        if likely_subtags is None:
            # Lazy import: Babel loads its global CLDR data on first access
            from babel.core import get_global  # noqa: PLC0415

            likely_subtags = get_global("likely_subtags")
        if UNKNOWN_LANGUAGE not in likely_subtags:
            msg = "likely-subtag data has no entry for the unknown language"
            raise MatchDataError(
                msg,
                IntegrityContext(
                    component="resolver",
                    operation="load",
                    key=UNKNOWN_LANGUAGE,
                    expected="und -> lang_Script_REGION",
                ),
            )
        self._likely_subtags = likely_subtags
        self._resolve_cached = functools.lru_cache(maxsize=cache_size)(self._maximize)

    def resolve(self, locale: LocaleId) -> LocaleId:
        """Return ``locale`` with language, script and region populated.

        Already maximized identifiers are returned unchanged.
        """
        if locale.is_maximized and locale.language != UNKNOWN_LANGUAGE:
            return locale
        return self._resolve_cached(locale)

    def clear_cache(self) -> None:
        """Drop all memoized results."""
        self._resolve_cached.cache_clear()

    def cache_info(self) -> functools._CacheInfo:
        """Statistics of the result cache (hits, misses, maxsize, currsize)."""
        return self._resolve_cached.cache_info()

    def _maximize(self, locale: LocaleId) -> LocaleId:
        likely = self._lookup(locale)
        language, region, script, *_ = parse_locale(likely)
        return replace(
            locale,
            language=locale.language if locale.language != UNKNOWN_LANGUAGE else language,
            script=locale.script or script,
            region=locale.region or region,
        )

    def _lookup(self, locale: LocaleId) -> str:
        for key in _lookup_keys(locale):
            likely = self._likely_subtags.get(key)
            if likely is not None:
                if key.split("_", 1)[0] != locale.language:
                    logger.debug(
                        "No likely subtags for language '%s'; using '%s'", locale.language, key
                    )
                return likely
        # Unreachable: the constructor guarantees an "und" entry
        return self._likely_subtags[UNKNOWN_LANGUAGE]


def _lookup_keys(locale: LocaleId) -> list[str]:
    """Candidate likely-subtag keys for ``locale`` in CLDR lookup order."""
    keys: list[str] = []
    for language in dict.fromkeys((locale.language, UNKNOWN_LANGUAGE)):
        if locale.script and locale.region:
            keys.append(f"{language}_{locale.script}_{locale.region}")
        if locale.region:
            keys.append(f"{language}_{locale.region}")
        if locale.script:
            keys.append(f"{language}_{locale.script}")
        keys.append(language)
    return keys
