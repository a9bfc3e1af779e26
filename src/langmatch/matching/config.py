"""Matching configuration for Matcher.

Provides a single frozen dataclass that encapsulates the tunable parts of
the distance algorithm, so a Matcher can be shared across threads without
any per-call options.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from langmatch.constants import (
    DEFAULT_LANGUAGE_DISTANCE,
    DEFAULT_REGION_DISTANCE,
    DEFAULT_SCRIPT_DISTANCE,
)
from langmatch.enums import MatchLevel

__all__ = ["MatchConfig"]


@dataclass(frozen=True, slots=True)
class MatchConfig:
    """Immutable configuration for distance computation and best-match search.

    All fields have sensible defaults; constructing ``MatchConfig()`` with
    no arguments reproduces the standard algorithm.

    Attributes:
        collapse_paradigm_regions: Region distance is 0 when desired and
            supported share a language and both are paradigm locales of that
            language (default: True).
        paradigm_discount: Subtract 1 from a looked-up region distance when
            exactly one side is a paradigm locale (default: True).
        max_distance: If set, ``Matcher.matches`` rejects a best candidate
            whose distance is not below this value (default: None, never
            reject). ``CLDR_NO_MATCH_THRESHOLD`` (1000) mirrors CLDR.
        language_default: Language distance when no rule matches (default: 800).
        script_default: Script distance when no rule matches (default: 500).
        region_default: Region distance when no rule matches (default: 40).

    Example:
        >>> from langmatch import Matcher
        >>> from langmatch.constants import CLDR_NO_MATCH_THRESHOLD
        >>> matcher = Matcher(config=MatchConfig(max_distance=CLDR_NO_MATCH_THRESHOLD))
        >>> matcher.matches("ja", ["de", "fr"]) is None
        True
    """

    collapse_paradigm_regions: bool = True
    paradigm_discount: bool = True
    max_distance: int | None = None
    language_default: int = DEFAULT_LANGUAGE_DISTANCE
    script_default: int = DEFAULT_SCRIPT_DISTANCE
    region_default: int = DEFAULT_REGION_DISTANCE

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If a level default is negative or max_distance is
                not positive.
        """
        for name in ("language_default", "script_default", "region_default"):
            if getattr(self, name) < 0:
                msg = f"{name} must be non-negative"
                raise ValueError(msg)
        if self.max_distance is not None and self.max_distance <= 0:
            msg = "max_distance must be positive"
            raise ValueError(msg)

    def default_for(self, level: MatchLevel) -> int:
        """Distance applied at ``level`` when no rule matches."""
        match level:
            case MatchLevel.LANGUAGE:
                return self.language_default
            case MatchLevel.SCRIPT:
                return self.script_default
            case _:
                return self.region_default
