"""Immutable CLDR match table.

Holds the distance rules grouped by level and pre-sorted by specificity,
the expanded match variables and the paradigm-locale sets. Built once
(``MatchTable.load()`` is cached) and shared by every Matcher.

Construction validates the whole data set and raises MatchDataError on the
first inconsistency; a partially built table is never returned.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import re
from collections import defaultdict
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from langmatch.constants import DISTANCE_SCALE
from langmatch.core.locale_id import LocaleId
from langmatch.core.resolver import ComponentResolver
from langmatch.enums import MatchLevel
from langmatch.integrity import IntegrityContext, MatchDataError
from langmatch.matching.patterns import DistanceRule, LocalePattern, Variables

__all__ = ["MatchTable"]

logger = logging.getLogger(__name__)

type RuleData = tuple[str, str, int, bool]
"""(desired, supported, distance, oneway) as written in languageInfo.xml."""

_VARIABLE_TERM = re.compile(r"([+-]?)([^+-]+)")


class MatchTable:
    """Distance rules, match variables and paradigm sets.

    Use ``MatchTable.load()`` for the embedded CLDR data or
    ``MatchTable.from_data(...)`` for caller-supplied data of the same shape.

    Thread Safety:
        Immutable after construction. Safe to share across threads.
    """

    __slots__ = ("_paradigm_sets", "_rules", "_variables")

    def __init__(
        self,
        rules: Mapping[MatchLevel, tuple[DistanceRule, ...]],
        variables: Variables,
        paradigm_sets: Mapping[str, frozenset[LocaleId]],
    ) -> None:
        """Initialize from already validated parts.

        Prefer ``load()`` or ``from_data()``, which validate the data.

        Args:
            rules: Rules per level, in evaluation order
            variables: Expanded match variables keyed by name (no ``$``)
            paradigm_sets: Maximized paradigm locales keyed by language
        """
        self._rules = MappingProxyType({level: tuple(rules.get(level, ())) for level in MatchLevel})
        self._variables = MappingProxyType(dict(variables))
        self._paradigm_sets = MappingProxyType(dict(paradigm_sets))

    @classmethod
    def load(cls) -> MatchTable:
        """Return the shared table built from the embedded CLDR data.

        Raises:
            MatchDataError: If the embedded data is malformed
        """
        return _load_embedded()

    @classmethod
    def from_data(
        cls,
        language_matches: Iterable[RuleData],
        match_variables: Iterable[tuple[str, str]] = (),
        paradigm_locales: Iterable[str] = (),
        containment: Mapping[str, Iterable[str]] | None = None,
        *,
        resolver: ComponentResolver | None = None,
    ) -> MatchTable:
        """Build and validate a table from languageInfo-shaped data.

        Args:
            language_matches: (desired, supported, distance, oneway) rules in
                declaration order
            match_variables: (id, value) pairs; ids start with ``$``
            paradigm_locales: Paradigm locale identifiers (maximized here)
            containment: Macro-region to contained codes, used to expand
                three-digit region codes in variable values
            resolver: Resolver used to maximize paradigm locales (keyword-only)

        Returns:
            Validated MatchTable

        Raises:
            MatchDataError: On any malformed entry
        """
        resolver = resolver or ComponentResolver()
        variables = _build_variables(match_variables, containment or {})
        rules = _build_rules(language_matches, variables)
        paradigm_sets = _build_paradigm_sets(paradigm_locales, resolver)
        table = cls(rules, variables, paradigm_sets)
        logger.info(
            "Match table built: %d rules, %d variables, %d paradigm locales",
            sum(len(level_rules) for level_rules in rules.values()),
            len(variables),
            sum(len(members) for members in paradigm_sets.values()),
        )
        return table

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def variables(self) -> Variables:
        """Expanded match variables keyed by name (read-only)."""
        return self._variables

    def rules_for(self, level: MatchLevel) -> tuple[DistanceRule, ...]:
        """Rules of ``level`` in evaluation order."""
        return self._rules[level]

    def paradigm_locales(self) -> frozenset[LocaleId]:
        """All maximized paradigm locales."""
        return frozenset().union(*self._paradigm_sets.values())

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def find_rule(
        self, level: MatchLevel, desired: LocaleId, supported: LocaleId
    ) -> DistanceRule | None:
        """First rule of ``level`` matching the pair, or None.

        Only the subtags up to ``level`` take part; both locales should be
        maximized.
        """
        desired_subtags = desired.subtags(level)
        supported_subtags = supported.subtags(level)
        for rule in self._rules[level]:
            if rule.matches(desired_subtags, supported_subtags, self._variables):
                return rule
        return None

    def lookup(
        self,
        level: MatchLevel,
        desired: LocaleId,
        supported: LocaleId,
        *,
        default: int | None = None,
    ) -> int:
        """Scaled distance between ``desired`` and ``supported`` at ``level``.

        Equal level subtags give 0 regardless of rules. Otherwise the first
        matching rule's distance times DISTANCE_SCALE, or ``default`` (the
        level's standard default when None) if no rule matches.
        """
        if desired.subtags(level)[-1] == supported.subtags(level)[-1]:
            return 0
        rule = self.find_rule(level, desired, supported)
        if rule is None:
            return level.default_distance if default is None else default
        return rule.distance * DISTANCE_SCALE

    def is_paradigm_locale(self, locale: LocaleId) -> bool:
        """True if the maximized ``locale`` is a paradigm locale of its language."""
        members = self._paradigm_sets.get(locale.language)
        return members is not None and locale.without_variants() in members

    def is_paradigm(self, a: LocaleId, b: LocaleId) -> bool:
        """True iff both share a language and both belong to that language's paradigm set."""
        return (
            a.language == b.language and self.is_paradigm_locale(a) and self.is_paradigm_locale(b)
        )

    def __repr__(self) -> str:
        counts = ", ".join(f"{level}={len(rules)}" for level, rules in self._rules.items())
        return f"MatchTable({counts}, variables={len(self._variables)})"


@functools.lru_cache(maxsize=1)
def _load_embedded() -> MatchTable:
    # Lazy import: keeps the data tuples out of memory until first use
    from langmatch.data import language_info  # noqa: PLC0415

    logger.debug("Loading embedded CLDR %s matching data", language_info.CLDR_VERSION)
    return MatchTable.from_data(
        language_info.LANGUAGE_MATCHES,
        language_info.MATCH_VARIABLES,
        language_info.PARADIGM_LOCALES,
        language_info.TERRITORY_CONTAINMENT,
    )


def _data_error(
    message: str, operation: str, entry: str, *, expected: str | None = None
) -> MatchDataError:
    logger.error("Invalid matching data (%s): %s: %r", operation, message, entry)
    return MatchDataError(
        message,
        IntegrityContext(
            component="match_table",
            operation=operation,
            key=entry,
            expected=expected,
        ),
        entry=entry,
    )


def _build_variables(
    match_variables: Iterable[tuple[str, str]],
    containment: Mapping[str, Iterable[str]],
) -> dict[str, frozenset[str]]:
    variables: dict[str, frozenset[str]] = {}
    for ident, value in match_variables:
        if not ident.startswith("$") or len(ident) < 2 or ident.startswith("$!"):
            raise _data_error("match variable id must be '$name'", "expand_variable", ident)
        name = ident[1:]
        if name in variables:
            raise _data_error("duplicate match variable", "expand_variable", ident)
        terms = _VARIABLE_TERM.findall(value)
        if not terms or "".join(sign + code for sign, code in terms) != value:
            raise _data_error(
                "malformed match variable value", "expand_variable", f"{ident}={value}"
            )
        members: set[str] = set()
        for sign, code in terms:
            codes = _expand_region(code, containment, (ident,))
            if sign == "-":
                members -= codes
            else:
                members |= codes
        variables[name] = frozenset(members)
    return variables


def _expand_region(
    code: str, containment: Mapping[str, Iterable[str]], path: tuple[str, ...]
) -> set[str]:
    """Region code plus, for UN M.49 macro-regions, everything it contains."""
    if not code.isdigit():
        return {code}
    if code in path:
        cycle = " > ".join((*path, code))
        raise _data_error("cyclic territory containment", "expand_region", cycle)
    children = containment.get(code)
    if children is None:
        raise _data_error("unknown macro-region", "expand_region", code)
    members = {code}
    for child in children:
        members |= _expand_region(child, containment, (*path, code))
    return members


def _build_rules(
    language_matches: Iterable[RuleData],
    variables: Variables,
) -> dict[MatchLevel, tuple[DistanceRule, ...]]:
    by_level: dict[MatchLevel, list[DistanceRule]] = defaultdict(list)
    for order, (desired_text, supported_text, distance, oneway) in enumerate(language_matches):
        entry = f"{desired_text} -> {supported_text}"
        try:
            desired = LocalePattern.parse(desired_text)
            supported = LocalePattern.parse(supported_text)
        except ValueError as e:
            raise _data_error(str(e), "parse_rule", entry) from e
        if len(desired.parts) != len(supported.parts):
            raise _data_error(
                "desired and supported patterns differ in arity",
                "parse_rule",
                entry,
                expected=f"{len(desired.parts)} subtags",
            )
        if isinstance(distance, bool) or not isinstance(distance, int) or distance < 0:
            raise _data_error("distance must be a non-negative integer", "parse_rule", entry)
        undefined = (desired.variables() | supported.variables()) - variables.keys()
        if undefined:
            raise _data_error(
                f"undefined match variable(s): {', '.join(sorted(undefined))}",
                "parse_rule",
                entry,
            )
        rule = DistanceRule(desired, supported, distance, oneway=bool(oneway), order=order)
        by_level[rule.level].append(rule)

    ordered = {
        level: tuple(sorted(by_level[level], key=lambda rule: rule.sort_key))
        for level in MatchLevel
    }
    for level, level_rules in ordered.items():
        logger.debug("Level %s: %d rules", level, len(level_rules))
    return ordered


def _build_paradigm_sets(
    paradigm_locales: Iterable[str],
    resolver: ComponentResolver,
) -> dict[str, frozenset[LocaleId]]:
    grouped: dict[str, set[LocaleId]] = defaultdict(set)
    for identifier in paradigm_locales:
        try:
            locale = LocaleId.parse(identifier)
        except ValueError as e:
            raise _data_error(str(e), "parse_paradigm", identifier) from e
        maximized = resolver.resolve(locale).without_variants()
        grouped[maximized.language].add(maximized)
    return {language: frozenset(members) for language, members in grouped.items()}
