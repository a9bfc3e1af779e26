"""Rule patterns for the match table.

A CLDR rule such as ``desired="en_*_$!enUS" supported="en_*_GB"`` is held as
two LocalePatterns, each a tuple of SubtagPatterns. A SubtagPattern is a
tagged value (PatternKind) evaluated with a single ``match`` statement:

    en       LITERAL            subtag == "en"
    *        WILDCARD           always
    $enUS    VARIABLE           subtag in variables["enUS"]
    $!enUS   EXCLUDED_VARIABLE  subtag not in variables["enUS"]

Variables are never expanded into rule copies; membership is tested at
lookup time against the table's frozensets.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import assert_never, cast

from langmatch.enums import MatchLevel, PatternKind, Specificity

__all__ = [
    "DistanceRule",
    "LocalePattern",
    "SubtagPattern",
    "Variables",
]

type Variables = Mapping[str, frozenset[str]]
"""Match-variable name (without ``$``) to its expanded region codes."""

_WILDCARD = "*"
_VARIABLE_PREFIX = "$"
_EXCLUDED_PREFIX = "$!"


@dataclass(frozen=True, slots=True)
class SubtagPattern:
    """One subtag position of a rule pattern.

    Attributes:
        kind: How the position matches
        value: Literal subtag or variable name; None for wildcards
    """

    kind: PatternKind
    value: str | None = None

    @classmethod
    def parse(cls, text: str) -> SubtagPattern:
        """Parse ``*``, ``$name``, ``$!name`` or a literal subtag.

        Raises:
            ValueError: If text is empty or names an empty variable
        """
        if not text:
            msg = "empty subtag pattern"
            raise ValueError(msg)
        if text == _WILDCARD:
            return cls(PatternKind.WILDCARD)
        if text.startswith(_EXCLUDED_PREFIX):
            kind, name = PatternKind.EXCLUDED_VARIABLE, text[len(_EXCLUDED_PREFIX) :]
        elif text.startswith(_VARIABLE_PREFIX):
            kind, name = PatternKind.VARIABLE, text[len(_VARIABLE_PREFIX) :]
        else:
            return cls(PatternKind.LITERAL, text)
        if not name:
            msg = f"variable pattern without a name: {text!r}"
            raise ValueError(msg)
        return cls(kind, name)

    @property
    def is_exact(self) -> bool:
        """False only for wildcards; variables count as exact membership tests."""
        return self.kind is not PatternKind.WILDCARD

    @property
    def variable(self) -> str | None:
        """Referenced variable name, if any."""
        if self.kind in (PatternKind.VARIABLE, PatternKind.EXCLUDED_VARIABLE):
            return self.value
        return None

    def matches(self, subtag: str | None, variables: Variables) -> bool:
        """Test one concrete subtag against this position."""
        match self.kind:
            case PatternKind.WILDCARD:
                return True
            case PatternKind.LITERAL:
                return subtag == self.value
            case PatternKind.VARIABLE:
                return subtag is not None and subtag in self._members(variables)
            case PatternKind.EXCLUDED_VARIABLE:
                return subtag is not None and subtag not in self._members(variables)
            case _ as unreachable:
                assert_never(unreachable)

    def _members(self, variables: Variables) -> frozenset[str]:
        return variables[cast(str, self.value)]

    def __str__(self) -> str:
        match self.kind:
            case PatternKind.WILDCARD:
                return _WILDCARD
            case PatternKind.VARIABLE:
                return f"{_VARIABLE_PREFIX}{self.value}"
            case PatternKind.EXCLUDED_VARIABLE:
                return f"{_EXCLUDED_PREFIX}{self.value}"
            case _:
                return str(self.value)


@dataclass(frozen=True, slots=True)
class LocalePattern:
    """Pattern over the leading (language, script, region) subtags.

    Attributes:
        parts: One SubtagPattern per compared subtag (1 to 3)
    """

    parts: tuple[SubtagPattern, ...]

    @classmethod
    def parse(cls, text: str) -> LocalePattern:
        """Parse an underscore-separated pattern such as ``zh_Hant_$cnsar``.

        Raises:
            ValueError: If any part is malformed or there are more than 3 parts
        """
        parts = tuple(SubtagPattern.parse(part) for part in text.split("_"))
        MatchLevel.from_arity(len(parts))
        return cls(parts)

    @property
    def level(self) -> MatchLevel:
        """Level selected by this pattern's arity."""
        return MatchLevel.from_arity(len(self.parts))

    @property
    def last(self) -> SubtagPattern:
        """The position for the level's own subtag."""
        return self.parts[-1]

    def variables(self) -> set[str]:
        """Names of all referenced match variables."""
        return {name for part in self.parts if (name := part.variable) is not None}

    def matches(self, subtags: tuple[str | None, ...], variables: Variables) -> bool:
        """Test subtags of the same arity position by position."""
        if len(subtags) != len(self.parts):
            return False
        return all(
            part.matches(subtag, variables)
            for part, subtag in zip(self.parts, subtags, strict=True)
        )

    def __str__(self) -> str:
        return "_".join(str(part) for part in self.parts)


@dataclass(frozen=True, slots=True)
class DistanceRule:
    """A CLDR languageMatch rule.

    Attributes:
        desired: Pattern for the desired locale
        supported: Pattern for the supported locale (same arity as desired)
        distance: Base distance in raw CLDR units (unscaled)
        oneway: If False the rule also matches with desired/supported swapped
        order: Declaration index in the source data (tie-break)
    """

    desired: LocalePattern
    supported: LocalePattern
    distance: int
    oneway: bool = False
    order: int = 0

    @property
    def level(self) -> MatchLevel:
        """Level this rule applies to."""
        return self.desired.level

    @property
    def specificity(self) -> Specificity:
        """Rank of this rule within its level."""
        return Specificity.of(self.desired.last.is_exact, self.supported.last.is_exact)

    @property
    def sort_key(self) -> tuple[int, int]:
        """Evaluation order: most specific first, then declaration order."""
        return (self.specificity, self.order)

    def matches(
        self,
        desired: tuple[str | None, ...],
        supported: tuple[str | None, ...],
        variables: Variables,
    ) -> bool:
        """Test a (desired, supported) subtag pair, honoring directionality."""
        if self.desired.matches(desired, variables) and self.supported.matches(
            supported, variables
        ):
            return True
        return (
            not self.oneway
            and self.supported.matches(desired, variables)
            and self.desired.matches(supported, variables)
        )

    def __str__(self) -> str:
        arrow = "->" if self.oneway else "<->"
        return f"{self.desired} {arrow} {self.supported} ({self.distance})"
