"""Locale utilities for BCP-47 and POSIX separator conversion.

Centralizes locale format normalization used at the API boundary. Babel's
parser expects POSIX separators (``zh_Hant_HK``) while callers usually pass
BCP-47 tags (``zh-Hant-HK``).

Python 3.13+.
"""

from __future__ import annotations

__all__ = [
    "normalize_locale",
    "to_bcp47",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX separators for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    Case is left untouched; Babel's parser normalizes each subtag's case.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "zh-Hant-HK")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "zh_Hant_HK")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.strip().replace("-", "_")


def to_bcp47(locale_code: str) -> str:
    """Convert a POSIX locale code to BCP-47 separators.

    Example:
        >>> to_bcp47("zh_Hant_HK")
        'zh-Hant-HK'
    """
    return locale_code.strip().replace("_", "-")
