"""Data integrity exceptions for the matching tables.

These exceptions indicate SYSTEM FAILURES, not caller errors. Matching is
total over well-formed locale identifiers; the only fatal condition is rule
data that cannot be turned into a consistent MatchTable. They should
propagate to the top level rather than being caught and ignored.

Design:
    - Carry diagnostic context for post-mortem analysis
    - Immutable after construction
    - @final decorator prevents subclassing

Hierarchy:
    DataIntegrityError (base - system failures)
    ├─ ImmutabilityViolationError (mutation attempt on frozen error)
    └─ MatchDataError (malformed rule, variable, paradigm or likely-subtag data)

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

__all__ = [
    "DataIntegrityError",
    "ImmutabilityViolationError",
    "IntegrityContext",
    "MatchDataError",
]


@dataclass(frozen=True, slots=True)
class IntegrityContext:
    """Context for integrity error diagnosis.

    Attributes:
        component: System component where error occurred (match_table, resolver)
        operation: Operation being performed (load, expand_variable, parse_rule)
        key: Identifier of the offending data item (optional)
        expected: Expected value or shape (optional)
        actual: Actual value found (optional)
    """

    component: str
    operation: str
    key: str | None = None
    expected: str | None = None
    actual: str | None = None


class DataIntegrityError(Exception):
    """Base exception for all data integrity failures.

    This exception is immutable after construction to prevent
    tampering with error evidence.

    Attributes:
        context: Structured diagnostic context for post-mortem analysis
    """

    __slots__ = ("_context", "_frozen")

    # Type annotations for __slots__ attributes (mypy requirement)
    _context: IntegrityContext | None
    _frozen: bool

    def __init__(
        self,
        message: str,
        context: IntegrityContext | None = None,
    ) -> None:
        """Initialize DataIntegrityError.

        Args:
            message: Human-readable error description
            context: Structured diagnostic context (optional)
        """
        super().__init__(message)
        object.__setattr__(self, "_context", context)
        object.__setattr__(self, "_frozen", True)

    # Python's exception handling sets these attributes when propagating exceptions.
    _PYTHON_EXCEPTION_ATTRS: frozenset[str] = frozenset(
        ("__traceback__", "__context__", "__cause__", "__suppress_context__", "__notes__")
    )

    def __setattr__(self, name: str, value: object) -> None:
        """Reject all attribute mutations after initialization.

        Raises:
            ImmutabilityViolationError: If attempting to modify after construction
        """
        if name in self._PYTHON_EXCEPTION_ATTRS:
            object.__setattr__(self, name, value)
            return
        if getattr(self, "_frozen", False):
            msg = f"Cannot modify integrity error attribute: {name}"
            raise ImmutabilityViolationError(msg)
        object.__setattr__(self, name, value)

    def __delattr__(self, name: str) -> None:
        """Reject all attribute deletions.

        Raises:
            ImmutabilityViolationError: Always
        """
        msg = f"Cannot delete integrity error attribute: {name}"
        raise ImmutabilityViolationError(msg)

    @property
    def context(self) -> IntegrityContext | None:
        """Structured diagnostic context."""
        return self._context

    def __repr__(self) -> str:
        """Return detailed representation for debugging."""
        return f"{self.__class__.__name__}({self.args[0]!r}, context={self._context!r})"


@final
class ImmutabilityViolationError(DataIntegrityError):
    """Attempt to mutate an immutable integrity error.

    This typically indicates a programming error or code attempting to
    tamper with error evidence.
    """


@final
class MatchDataError(DataIntegrityError):
    """Matching data could not be turned into a consistent table.

    Raised while constructing a MatchTable (or a ComponentResolver) when the
    embedded or caller-supplied data is malformed: a rule whose desired and
    supported patterns differ in arity, a reference to an undefined match
    variable, an unknown macro-region, a negative distance, an unparsable
    paradigm locale, or likely-subtag data without the ``und`` entry.

    Construction is aborted; a table that silently skipped bad rules would
    return wrong distances.

    Attributes:
        entry: The offending data entry as written in the source data
    """

    __slots__ = ("_entry",)

    # Type annotations for __slots__ attributes (mypy requirement)
    _entry: str | None

    def __init__(
        self,
        message: str,
        context: IntegrityContext | None = None,
        *,
        entry: str | None = None,
    ) -> None:
        """Initialize MatchDataError.

        Args:
            message: Human-readable error description
            context: Structured diagnostic context (optional)
            entry: Offending data entry for error reporting
        """
        # Must set before calling super().__init__ which freezes
        object.__setattr__(self, "_entry", entry)
        super().__init__(message, context)

    @property
    def entry(self) -> str | None:
        """Offending data entry, as written in the source data."""
        return self._entry

    def __repr__(self) -> str:
        """Return detailed representation for debugging."""
        return f"MatchDataError({self.args[0]!r}, entry={self._entry!r})"
