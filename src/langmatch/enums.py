"""Enumerations for langmatch type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import IntEnum, StrEnum

from langmatch.constants import (
    DEFAULT_LANGUAGE_DISTANCE,
    DEFAULT_REGION_DISTANCE,
    DEFAULT_SCRIPT_DISTANCE,
)


class MatchLevel(StrEnum):
    """Subtag level a distance rule applies to.

    A rule pattern's arity selects its level: ``en`` is a language rule,
    ``zh_Hant`` a script rule and ``en_*_GB`` a region rule.

    StrEnum provides automatic string conversion: str(MatchLevel.SCRIPT) == "script"
    """

    LANGUAGE = "language"
    """Language subtag: desired="nb" supported="no" """

    SCRIPT = "script"
    """Script subtag: desired="zh_Hans" supported="zh_Hant" """

    REGION = "region"
    """Region subtag: desired="zh_Hant_$cnsar" supported="zh_Hant_$cnsar" """

    @property
    def arity(self) -> int:
        """Number of leading subtags (language, script, region) compared at this level."""
        return _ARITY[self]

    @property
    def default_distance(self) -> int:
        """Scaled distance used when no rule matches at this level."""
        return _DEFAULTS[self]

    @classmethod
    def from_arity(cls, arity: int) -> "MatchLevel":
        """Return the level for a pattern with ``arity`` subtags.

        Raises:
            ValueError: If arity is not 1, 2 or 3
        """
        for level, level_arity in _ARITY.items():
            if level_arity == arity:
                return level
        msg = f"pattern arity must be 1, 2 or 3, got {arity}"
        raise ValueError(msg)


_ARITY: dict[MatchLevel, int] = {
    MatchLevel.LANGUAGE: 1,
    MatchLevel.SCRIPT: 2,
    MatchLevel.REGION: 3,
}

_DEFAULTS: dict[MatchLevel, int] = {
    MatchLevel.LANGUAGE: DEFAULT_LANGUAGE_DISTANCE,
    MatchLevel.SCRIPT: DEFAULT_SCRIPT_DISTANCE,
    MatchLevel.REGION: DEFAULT_REGION_DISTANCE,
}


class PatternKind(StrEnum):
    """Kind of a single subtag position in a rule pattern.

    StrEnum provides automatic string conversion: str(PatternKind.WILDCARD) == "wildcard"
    """

    LITERAL = "literal"
    """Concrete subtag: en, Hant, GB"""

    WILDCARD = "wildcard"
    """Any subtag: *"""

    VARIABLE = "variable"
    """Member of a match variable: $enUS"""

    EXCLUDED_VARIABLE = "excluded_variable"
    """Not a member of a match variable: $!enUS"""


class Specificity(IntEnum):
    """Evaluation rank of a rule within its level (lower is evaluated first).

    Computed from the level's own subtag position on each side. Match
    variables count as exact: a variable stands for one explicit rule
    per member.
    """

    EXACT_EXACT = 0
    EXACT_WILDCARD = 1
    WILDCARD_EXACT = 2
    WILDCARD_WILDCARD = 3

    @classmethod
    def of(cls, desired_exact: bool, supported_exact: bool) -> "Specificity":
        """Rank for a rule given which sides are exact at the level's subtag."""
        match (desired_exact, supported_exact):
            case (True, True):
                return cls.EXACT_EXACT
            case (True, False):
                return cls.EXACT_WILDCARD
            case (False, True):
                return cls.WILDCARD_EXACT
            case _:
                return cls.WILDCARD_WILDCARD


__all__ = [
    "MatchLevel",
    "PatternKind",
    "Specificity",
]
