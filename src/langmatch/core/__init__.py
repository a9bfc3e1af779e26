"""Core locale types shared by the matching layer.

This package holds the leaves of the dependency graph:

    core <- matching

Exports:
    LocaleId: Immutable structured locale identifier
    LocaleLike: LocaleId or identifier string
    ComponentResolver: Likely-subtag maximization

Python 3.13+.
"""

from .locale_id import LocaleId, LocaleLike, as_locale_id
from .resolver import ComponentResolver

__all__ = ["ComponentResolver", "LocaleId", "LocaleLike", "as_locale_id"]
