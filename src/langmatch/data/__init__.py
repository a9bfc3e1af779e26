"""Embedded CLDR matching data.

The tables in ``language_info`` are consumed once by ``MatchTable.load()``.
Regenerating them from upstream CLDR releases is outside this package.
"""
