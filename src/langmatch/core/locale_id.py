"""Immutable locale identifier value type.

LocaleId holds the structured subtags the matcher works on: a language,
an optional script, an optional region and an ordered set of variants.
Parsing raw strings is delegated to Babel (``babel.core.parse_locale``);
this module only adapts its output and normalizes subtag case.

Python 3.13+. Uses Babel for parsing.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from babel.core import parse_locale

from langmatch.enums import MatchLevel
from langmatch.locale_utils import normalize_locale, to_bcp47

__all__ = [
    "LocaleId",
    "LocaleLike",
    "as_locale_id",
]


@dataclass(frozen=True, slots=True)
class LocaleId:
    """Structured locale identifier.

    Immutable, thread-safe, hashable. Equality and hashing use the
    normalized subtags: language lowercase, script title-case, region and
    variants uppercase. Variants form an ordered set; duplicates are
    dropped keeping the first occurrence.

    Attributes:
        language: Language subtag (e.g., 'zh', 'und')
        script: Script subtag (e.g., 'Hant') or None
        region: Region subtag (e.g., 'HK', '419') or None
        variants: Variant subtags in declaration order

    Examples:
        >>> LocaleId.parse("zh-Hant-HK")
        LocaleId(language='zh', script='Hant', region='HK', variants=())
        >>> str(LocaleId("EN", region="us"))
        'en-US'
    """

    language: str
    script: str | None = None
    region: str | None = None
    variants: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Normalize subtag case and validate the language subtag.

        Raises:
            ValueError: If the language subtag is empty or not alphabetic
        """
        language = self.language.lower()
        if not language.isalpha():
            msg = f"expected only letters in language subtag, got {self.language!r}"
            raise ValueError(msg)
        object.__setattr__(self, "language", language)
        if self.script is not None:
            object.__setattr__(self, "script", self.script.title())
        if self.region is not None:
            object.__setattr__(self, "region", self.region.upper())
        variants = tuple(dict.fromkeys(v.upper() for v in self.variants))
        object.__setattr__(self, "variants", variants)

    @classmethod
    def parse(cls, identifier: str) -> LocaleId:
        """Parse a BCP-47 or POSIX identifier into a LocaleId.

        Args:
            identifier: Locale code such as "zh-Hant-HK", "en_US" or "ca-ES-valencia"

        Returns:
            LocaleId with normalized subtags

        Raises:
            ValueError: If Babel cannot parse the identifier
        """
        language, region, script, variant, *_ = parse_locale(normalize_locale(identifier))
        return cls(
            language=language,
            script=script,
            region=region,
            variants=(variant,) if variant else (),
        )

    @property
    def is_maximized(self) -> bool:
        """True when both script and region are present."""
        return self.script is not None and self.region is not None

    def subtags(self, level: MatchLevel) -> tuple[str | None, ...]:
        """Return the leading (language, script, region) subtags compared at ``level``."""
        return (self.language, self.script, self.region)[: level.arity]

    def without_variants(self) -> LocaleId:
        """Return a copy with variants cleared (identity used by paradigm sets)."""
        if not self.variants:
            return self
        return replace(self, variants=())

    def to_posix(self) -> str:
        """Render with underscores, as Babel and CLDR data files write it."""
        return "_".join(self._parts())

    def _parts(self) -> list[str]:
        parts = [self.language]
        if self.script:
            parts.append(self.script)
        if self.region:
            parts.append(self.region)
        parts.extend(self.variants)
        return parts

    def __str__(self) -> str:
        """Render as a BCP-47 tag (e.g., 'zh-Hant-HK')."""
        return to_bcp47(self.to_posix())


type LocaleLike = LocaleId | str
"""A LocaleId or a raw identifier string accepted by the public API."""


def as_locale_id(value: LocaleLike) -> LocaleId:
    """Coerce a LocaleId or identifier string into a LocaleId.

    Raises:
        TypeError: If value is neither a LocaleId nor a string
        ValueError: If a string cannot be parsed
    """
    if isinstance(value, LocaleId):
        return value
    if isinstance(value, str):
        return LocaleId.parse(value)
    msg = f"expected LocaleId or str, got {type(value).__name__}"
    raise TypeError(msg)
